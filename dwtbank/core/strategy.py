"""Transform strategy base class and the strategy registry.

A strategy computes exactly one level of the two-channel filter bank:
filtering plus downsampling on the way down, upsampling plus filtering plus
summation on the way up. The multi-level bookkeeping lives in
``DiscreteWaveletTransform``; strategies only differ in how the signal
boundaries are treated.

Example:
    >>> class MyStrategy(TransformStrategy):
    ...     def output_length(self, input_length, filter_length):
    ...         return (input_length + 1) // 2
    ...     def decompose_low(self, signal, low_filter):
    ...         ...
    ...     def decompose_high(self, signal, high_filter):
    ...         ...
    ...     def reconstruct(self, approximation, details, low_filter, high_filter):
    ...         ...
    >>> default_registry.register(MyStrategy("mine"), "mine")
"""

from __future__ import annotations

from abc import ABC, abstractmethod

import numpy as np


class StrategyNotFoundError(KeyError):
    """Raised when no strategy is registered under a name."""


class TransformStrategy(ABC):
    """Base class for one-level decomposition/reconstruction algorithms.

    Strategies hold configuration only; they never keep state between calls
    and never modify their inputs.

    Attributes:
        name: Name the strategy reports in decomposition results
    """

    def __init__(self, name: str) -> None:
        self.name = name

    @abstractmethod
    def output_length(self, input_length: int, filter_length: int) -> int:
        """Length of approximation/detail vectors for a given input length.

        Args:
            input_length: Number of samples entering the level
            filter_length: Number of filter taps

        Returns:
            Number of coefficients per channel
        """
        pass

    @abstractmethod
    def decompose_low(self, signal: np.ndarray, low_filter: np.ndarray) -> np.ndarray:
        """Low-pass filter and downsample ``signal`` into the next approximation."""
        pass

    @abstractmethod
    def decompose_high(self, signal: np.ndarray, high_filter: np.ndarray) -> np.ndarray:
        """High-pass filter and downsample ``signal`` into its details.

        Note:
            Output length must equal ``decompose_low`` for the same input,
            reconstruction pairs the two positionally.
        """
        pass

    @abstractmethod
    def reconstruct(
        self,
        approximation: np.ndarray,
        details: np.ndarray,
        low_filter: np.ndarray,
        high_filter: np.ndarray,
    ) -> np.ndarray:
        """Invert one ``decompose_low``/``decompose_high`` pair.

        Args:
            approximation: Approximation coefficients
            details: Detail coefficients, same length as ``approximation``
            low_filter: Low-pass reconstruction filter
            high_filter: High-pass reconstruction filter

        Returns:
            Signal at the finer level. May carry one trailing sample more
            than the original when that had odd length.
        """
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r})"


class StrategyRegistry:
    """Name -> strategy lookup.

    Example:
        >>> registry = StrategyRegistry()
        >>> registry.register(PeriodicStrategy(), "default", "periodic")
        >>> registry.resolve("periodic")
        PeriodicStrategy(name='periodic')
    """

    def __init__(self) -> None:
        self._strategies: dict[str, TransformStrategy] = {}

    def register(self, strategy: TransformStrategy, *names: str) -> None:
        """Register ``strategy`` under ``names`` (its own name when none given)."""
        for name in names or (strategy.name,):
            self._strategies[name] = strategy

    def resolve(self, name: str) -> TransformStrategy:
        """Look up a strategy by name.

        Raises:
            StrategyNotFoundError: If nothing is registered under ``name``
        """
        try:
            return self._strategies[name]
        except KeyError as e:
            raise StrategyNotFoundError(
                f"No transform strategy named '{name}'. "
                f"Available: {', '.join(self.names())}"
            ) from e

    def names(self) -> list[str]:
        return sorted(self._strategies)

    def __contains__(self, name: object) -> bool:
        return name in self._strategies


default_registry = StrategyRegistry()


def get_strategy(name: str) -> TransformStrategy:
    """Resolve ``name`` in the default registry."""
    # Registration happens on import of the concrete strategies
    import dwtbank.systems.convolution  # noqa: F401

    return default_registry.resolve(name)
