"""High-level API for one-call decomposition and reconstruction.

Example:
    >>> import numpy as np
    >>> from dwtbank.api import decompose, reconstruct
    >>> signal = np.sin(np.linspace(0, 4 * np.pi, 100))
    >>> result = decompose(signal, wavelet="db2", level=3)
    >>> np.allclose(reconstruct(result), signal)
    True
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

from dwtbank.components.decomposition import DecompositionResult
from dwtbank.components.filters import FilterBank
from dwtbank.core.config import load_config
from dwtbank.core.extension import closest_power_of_two, exact_power_of_two
from dwtbank.core.transform import DiscreteWaveletTransform


def decompose(
    data: np.ndarray | Sequence[float],
    wavelet: str = "haar",
    level: int | None = None,
    strategy: str = "default",
) -> DecompositionResult:
    """Decompose a 1-D signal.

    Args:
        data: Input samples (at least 2)
        wavelet: Discrete wavelet name from PyWavelets (default: 'haar')
        level: Number of levels, None for full decomposition
        strategy: Registered strategy name (default: 'default')

    Returns:
        DecompositionResult recording the wavelet and strategy names

    Raises:
        ValueError: If the input or wavelet is invalid
        StrategyNotFoundError: If the strategy is not registered
    """
    dwt = DiscreteWaveletTransform(FilterBank.from_wavelet(wavelet), strategy=strategy)
    return dwt.decompose(data, level)


def reconstruct(result: DecompositionResult, level: int = 0) -> np.ndarray:
    """Reconstruct a signal decomposed with ``decompose``.

    The filter bank and strategy are rebuilt from the names stored in the
    result, so results of custom filter banks must go through
    ``DiscreteWaveletTransform.reconstruct`` instead.

    Args:
        result: Decomposition to invert
        level: Target level (default 0, the original signal)

    Returns:
        Reconstructed signal

    Raises:
        ValueError: If the level is out of range or the wavelet is unknown
    """
    dwt = DiscreteWaveletTransform(
        FilterBank.from_wavelet(result.wavelet), strategy=result.strategy
    )
    return dwt.reconstruct(result, level)


def max_level(data_len: int) -> int:
    """Level reached by a full decomposition of ``data_len`` samples."""
    if data_len < 2:
        raise ValueError(f"data length must be >= 2, got {data_len}")
    return exact_power_of_two(closest_power_of_two(data_len))


def decompose_with_config(
    data: np.ndarray | Sequence[float],
    config_path: str | None = None,
) -> DecompositionResult:
    """Decompose using the wavelet, strategy and level from ``dwtbank.toml``."""
    config = load_config(config_path)
    return decompose(
        data, wavelet=config.wavelet, level=config.level, strategy=config.strategy
    )
