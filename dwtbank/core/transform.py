"""Multi-level discrete wavelet transform.

``DiscreteWaveletTransform`` drives the level loop and bookkeeping; the
filtering of a single level is delegated to a ``TransformStrategy``.

Example:
    >>> dwt = DiscreteWaveletTransform(FilterBank.haar())
    >>> result = dwt.decompose([1.0, 2.0, 3.0, 4.0])
    >>> result.level
    2
    >>> dwt.reconstruct(result).round(6).tolist()
    [1.0, 2.0, 3.0, 4.0]
"""

from __future__ import annotations

import logging
from typing import Sequence

import numpy as np

from dwtbank.components.decomposition import DecompositionBuilder, DecompositionResult
from dwtbank.components.filters import FilterBank
from dwtbank.core.config import TransformConfig, load_config
from dwtbank.core.extension import (
    closest_power_of_two,
    exact_power_of_two,
    extend,
    zero_padding_to_power_of_two,
)
from dwtbank.core.strategy import TransformStrategy, get_strategy

logger = logging.getLogger(__name__)


def _as_data(data: np.ndarray | Sequence[float] | None) -> np.ndarray:
    """Validate decomposition input and return a private float64 copy."""
    if data is None:
        raise ValueError("data must not be None")
    arr = np.array(data, dtype=np.float64)
    if arr.ndim != 1:
        raise ValueError(f"data must be 1-D, got shape {arr.shape}")
    if arr.size < 2:
        raise ValueError(f"data length must be >= 2, got {arr.size}")
    return arr


class DiscreteWaveletTransform:
    """Decomposition and reconstruction of 1-D signals with a filter bank.

    Attributes:
        filters: Filter bank used for every level
        strategy: One-level algorithm; defaults to the 'default' strategy

    Note:
        The strategy may be swapped between calls with
        ``set_transform_strategy``; swapping it while another thread is
        inside ``decompose``/``reconstruct`` is not supported.
    """

    def __init__(
        self,
        filters: FilterBank,
        strategy: TransformStrategy | str | None = None,
    ) -> None:
        """Create a transform.

        Args:
            filters: Filter bank (must not be None)
            strategy: Strategy instance or registered name ('default' if None)

        Raises:
            ValueError: If filters is None
            StrategyNotFoundError: If strategy names an unregistered strategy
        """
        if filters is None:
            raise ValueError("filters must not be None")
        self._filters = filters
        self._strategy = get_strategy("default")
        if strategy is not None:
            self.set_transform_strategy(strategy)

    @classmethod
    def from_config(cls, config_path: str | None = None) -> DiscreteWaveletTransform:
        """Build a transform from ``dwtbank.toml`` (see ``load_config``)."""
        config: TransformConfig = load_config(config_path)
        return cls(FilterBank.from_wavelet(config.wavelet), strategy=config.strategy)

    @property
    def filters(self) -> FilterBank:
        return self._filters

    def get_filters_factory(self) -> FilterBank:
        """Return the filter bank (alias of ``filters``)."""
        return self._filters

    @property
    def strategy(self) -> TransformStrategy:
        return self._strategy

    def set_transform_strategy(self, strategy: TransformStrategy | str) -> None:
        """Replace the strategy used by subsequent calls.

        Args:
            strategy: Strategy instance or registered name

        Raises:
            ValueError: If strategy is neither a TransformStrategy nor a name
            StrategyNotFoundError: If strategy names an unregistered strategy
        """
        if isinstance(strategy, str):
            strategy = get_strategy(strategy)
        if not isinstance(strategy, TransformStrategy):
            raise ValueError(
                f"strategy must be a TransformStrategy or a registered name, got {strategy!r}"
            )
        self._strategy = strategy

    def decompose(
        self,
        data: np.ndarray | Sequence[float] | None,
        level: int | None = None,
    ) -> DecompositionResult:
        """Decompose ``data`` into an approximation and per-level details.

        With ``level=None`` the data is zero-padded to the next power of two
        and decomposed down to a single approximation sample (for strategies
        whose coefficient count halves each level).

        With an explicit level, decomposition stops early once the
        approximation is a single sample, so ``result.level`` may be lower
        than requested.

        Args:
            data: 1-D signal with at least 2 samples
            level: Number of levels (>= 1), or None for full decomposition

        Returns:
            Frozen DecompositionResult

        Raises:
            ValueError: If data is None, not 1-D, shorter than 2, or level < 1
        """
        signal = _as_data(data)
        original_length = signal.size

        if level is None:
            target = closest_power_of_two(signal.size)
            level = exact_power_of_two(target)
            if signal.size < target:
                logger.debug("Zero-padding signal from %d to %d samples", signal.size, target)
                signal = extend(signal, zero_padding_to_power_of_two(level))
        elif level < 1:
            raise ValueError(f"level must be >= 1, got {level}")

        return self._decompose(signal, level, original_length)

    def _decompose(
        self, signal: np.ndarray, level: int, original_length: int
    ) -> DecompositionResult:
        logger.debug(
            "Decomposing %d samples to level %d (wavelet=%s, strategy=%s)",
            signal.size, level, self._filters.name, self._strategy.name,
        )
        builder = DecompositionBuilder(
            original_length=original_length,
            wavelet=self._filters.name,
            strategy=self._strategy.name,
        )
        for i in range(1, level + 1):
            approximation = self._strategy.decompose_low(
                signal, self._filters.low_decomposition
            )
            details = self._strategy.decompose_high(
                signal, self._filters.high_decomposition
            )
            if approximation.size != details.size:
                raise ValueError(
                    f"strategy '{self._strategy.name}' returned {approximation.size} "
                    f"approximation and {details.size} detail coefficients at level {i}"
                )
            builder.set_approximation(approximation)
            builder.add_details(details, input_length=signal.size)
            builder.set_level(i)
            if approximation.size == 1:
                if i < level:
                    logger.debug("Approximation reached one sample, stopping at level %d", i)
                break
            signal = approximation

        return builder.build()

    def reconstruct(self, decomposition: DecompositionResult, level: int = 0) -> np.ndarray:
        """Rebuild the signal at ``level`` from a decomposition.

        Level 0 is the caller's original data: padding added by a full
        ``decompose`` is removed.

        Args:
            decomposition: Result of ``decompose``
            level: Target level, 0 <= level < decomposition.level

        Returns:
            Newly allocated signal at the target level

        Raises:
            ValueError: If level is negative or not below decomposition.level,
                or the result was produced by another wavelet or strategy
        """
        if level >= decomposition.level:
            raise ValueError("target level must be less than decomposition level")
        if level < 0:
            raise ValueError(f"target level must be >= 0, got {level}")
        if decomposition.wavelet != self._filters.name:
            raise ValueError(
                f"decomposition used wavelet '{decomposition.wavelet}', "
                f"this transform uses '{self._filters.name}'"
            )
        if decomposition.strategy != self._strategy.name:
            raise ValueError(
                f"decomposition used strategy '{decomposition.strategy}', "
                f"this transform uses '{self._strategy.name}'"
            )

        logger.debug(
            "Reconstructing from level %d to level %d (strategy=%s)",
            decomposition.level, level, self._strategy.name,
        )
        reconstructed = decomposition.approximation
        for i in range(decomposition.level, level, -1):
            expected = decomposition.lengths[i - 1]
            reconstructed = self._strategy.reconstruct(
                reconstructed,
                decomposition.details[i - 1],
                self._filters.low_reconstruction,
                self._filters.high_reconstruction,
            )
            if reconstructed.size < expected:
                raise ValueError(
                    f"strategy '{self._strategy.name}' rebuilt {reconstructed.size} samples "
                    f"at level {i - 1}, expected {expected}"
                )
            reconstructed = reconstructed[:expected]

        if level == 0:
            reconstructed = reconstructed[: decomposition.original_length]
        return np.array(reconstructed)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(filters={self._filters!r}, "
            f"strategy={self._strategy!r})"
        )
