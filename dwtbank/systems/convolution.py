"""Convolution-based transform strategies.

Both strategies correlate the signal with the analysis filter and keep every
second output, then invert with zero-insertion upsampling, convolution with
the synthesis filters and summation. They differ in what lies beyond the
signal edges:

- PeriodicStrategy ('default', 'periodic'): the signal wraps around.
  ``N`` samples give ``ceil(N / 2)`` coefficients per channel; an odd signal
  is first extended by repeating its last sample.
- PaddedStrategy ('zero', 'symmetric', 'reflect', 'constant'): the signal is
  extended past both edges and every coefficient whose filter window touches
  the signal is kept, ``(N - 1) // 2 + (L - 1) // 2 + 1`` per channel. For
  even filter lengths this matches ``pywt.dwt`` in the same mode.
"""

from __future__ import annotations

import logging

import numpy as np
from numpy.lib.stride_tricks import sliding_window_view

from dwtbank.core.strategy import TransformStrategy, default_registry

logger = logging.getLogger(__name__)

# PyWavelets mode name -> numpy.pad mode
PAD_MODES = {
    "zero": "constant",
    "symmetric": "symmetric",
    "reflect": "reflect",
    "constant": "edge",
}


def _as_signal(signal: np.ndarray) -> np.ndarray:
    x = np.asarray(signal, dtype=np.float64)
    if x.ndim != 1 or x.size == 0:
        raise ValueError(f"signal must be a non-empty 1-D vector, got shape {x.shape}")
    return x


def _upsample(coeffs: np.ndarray, length: int) -> np.ndarray:
    """Insert zeros between coefficients into a vector of ``length`` samples."""
    up = np.zeros(length, dtype=np.float64)
    up[::2] = coeffs
    return up


def _check_pair(
    approximation: np.ndarray,
    details: np.ndarray,
    low_filter: np.ndarray,
    high_filter: np.ndarray,
) -> tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray]:
    a = _as_signal(approximation)
    d = _as_signal(details)
    if a.size != d.size:
        raise ValueError(
            f"approximation and details must have the same length, got {a.size} and {d.size}"
        )
    g_lo = np.asarray(low_filter, dtype=np.float64)
    g_hi = np.asarray(high_filter, dtype=np.float64)
    if g_lo.size != g_hi.size:
        raise ValueError(
            f"reconstruction filters must have the same length, got {g_lo.size} and {g_hi.size}"
        )
    return a, d, g_lo, g_hi


class PeriodicStrategy(TransformStrategy):
    """Circular convolution with periodic signal extension."""

    def __init__(self, name: str = "periodic") -> None:
        super().__init__(name=name)

    def output_length(self, input_length: int, filter_length: int) -> int:
        return (input_length + 1) // 2

    def decompose_low(self, signal: np.ndarray, low_filter: np.ndarray) -> np.ndarray:
        return self._analyze(signal, low_filter)

    def decompose_high(self, signal: np.ndarray, high_filter: np.ndarray) -> np.ndarray:
        return self._analyze(signal, high_filter)

    def reconstruct(
        self,
        approximation: np.ndarray,
        details: np.ndarray,
        low_filter: np.ndarray,
        high_filter: np.ndarray,
    ) -> np.ndarray:
        a, d, g_lo, g_hi = _check_pair(approximation, details, low_filter, high_filter)
        n = 2 * a.size
        full = np.convolve(_upsample(a, n), g_lo) + np.convolve(_upsample(d, n), g_hi)
        # Fold the tail back onto the start: x[i] = sum of full[i + k*n]
        full = np.pad(full, (0, -full.size % n))
        return full.reshape(-1, n).sum(axis=0)

    @staticmethod
    def _analyze(signal: np.ndarray, filt: np.ndarray) -> np.ndarray:
        x = _as_signal(signal)
        f = np.asarray(filt, dtype=np.float64)
        if x.size % 2:
            x = np.append(x, x[-1])
        xp = np.pad(x, (0, f.size - 1), mode="wrap")
        return sliding_window_view(xp, f.size)[::2] @ f


class PaddedStrategy(TransformStrategy):
    """Full (non-circular) convolution over an extended signal.

    Attributes:
        mode: Extension mode, one of PAD_MODES
    """

    def __init__(self, mode: str = "zero") -> None:
        if mode not in PAD_MODES:
            raise ValueError(
                f"mode must be one of {sorted(PAD_MODES)}, got {mode!r}"
            )
        super().__init__(name=mode)
        self.mode = mode

    def output_length(self, input_length: int, filter_length: int) -> int:
        return (input_length - 1) // 2 + (filter_length - 1) // 2 + 1

    def decompose_low(self, signal: np.ndarray, low_filter: np.ndarray) -> np.ndarray:
        return self._analyze(signal, low_filter)

    def decompose_high(self, signal: np.ndarray, high_filter: np.ndarray) -> np.ndarray:
        return self._analyze(signal, high_filter)

    def reconstruct(
        self,
        approximation: np.ndarray,
        details: np.ndarray,
        low_filter: np.ndarray,
        high_filter: np.ndarray,
    ) -> np.ndarray:
        a, d, g_lo, g_hi = _check_pair(approximation, details, low_filter, high_filter)
        up_len = 2 * a.size - 1
        full = np.convolve(_upsample(a, up_len), g_lo) + np.convolve(
            _upsample(d, up_len), g_hi
        )
        left = self._left_extension(g_lo.size)
        return full[left : 2 * a.size]

    def _analyze(self, signal: np.ndarray, filt: np.ndarray) -> np.ndarray:
        x = _as_signal(signal)
        f = np.asarray(filt, dtype=np.float64)
        n_out = self.output_length(x.size, f.size)
        left = self._left_extension(f.size)
        right = 2 * n_out + f.size - 2 - left - x.size
        xp = np.pad(x, (left, right), mode=PAD_MODES[self.mode])
        return sliding_window_view(xp, f.size)[::2][:n_out] @ f

    @staticmethod
    def _left_extension(filter_length: int) -> int:
        """Samples needed before index 0 by the first kept coefficient."""
        return 2 * ((filter_length - 1) // 2)


def _register_defaults() -> None:
    default_registry.register(PeriodicStrategy(name="default"), "default")
    default_registry.register(PeriodicStrategy(), "periodic")
    for mode in PAD_MODES:
        default_registry.register(PaddedStrategy(mode), mode)
    logger.debug("Registered transform strategies: %s", default_registry.names())


_register_defaults()
