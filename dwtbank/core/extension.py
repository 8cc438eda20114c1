"""Boundary extension of signals before decomposition.

An extension is an ordered list of actions, each a pure function taking a
signal and returning a (possibly longer) new signal. ``extend`` applies
them in order:

Example:
    >>> padded = extend([1.0, 2.0, 3.0], zero_padding_to_power_of_two(2))
    >>> padded.tolist()
    [1.0, 2.0, 3.0, 0.0]
"""

from __future__ import annotations

from typing import Callable

import numpy as np

ExtensionAction = Callable[[np.ndarray], np.ndarray]


def closest_power_of_two(n: int) -> int:
    """Smallest power of two that is >= n."""
    if n < 1:
        raise ValueError(f"n must be positive, got {n}")
    return 1 << (n - 1).bit_length()


def exact_power_of_two(value: int) -> int:
    """Exponent k such that 2**k == value.

    Raises:
        ValueError: If value is not a positive power of two
    """
    if value < 1 or value & (value - 1):
        raise ValueError(f"{value} is not a power of two")
    return value.bit_length() - 1


def zero_padding(length: int) -> ExtensionAction:
    """Action appending trailing zeros until the signal has ``length`` samples."""

    def action(signal: np.ndarray) -> np.ndarray:
        if signal.size > length:
            raise ValueError(
                f"cannot zero-pad a signal of length {signal.size} to {length}"
            )
        return np.pad(signal, (0, length - signal.size), mode="constant")

    return action


def zero_padding_to_power_of_two(level: int) -> ExtensionAction:
    """Action appending trailing zeros up to ``2**level`` samples."""
    if level < 0:
        raise ValueError(f"level must be non-negative, got {level}")
    return zero_padding(1 << level)


def extend(signal: np.ndarray | list[float], *actions: ExtensionAction) -> np.ndarray:
    """Apply extension actions in order to a copy of ``signal``.

    Args:
        signal: 1-D input samples (left untouched)
        *actions: Extension actions; none returns an unchanged copy

    Returns:
        Extended float64 signal

    Raises:
        ValueError: If an action shortens the signal
    """
    result = np.array(signal, dtype=np.float64)
    for action in actions:
        extended = action(result)
        if extended.size < result.size:
            raise ValueError(
                f"extension shortened the signal from {result.size} to {extended.size}"
            )
        result = extended
    return result
