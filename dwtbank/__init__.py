"""One-dimensional discrete wavelet transform with pluggable strategies.

This package decomposes a 1-D signal into a coarse approximation plus one
detail vector per level, and reconstructs it exactly:
- Filter banks are plain coefficient vectors (or read from PyWavelets)
- The per-level filtering algorithm is a named, swappable strategy
- Signals of any length are zero-padded to a power of two for full decomposition

Quick Start:
    >>> from dwtbank import decompose, reconstruct
    >>> result = decompose([1.0, 2.0, 3.0, 4.0], wavelet="haar")
    >>> result.level
    2
    >>> reconstruct(result).round(6).tolist()
    [1.0, 2.0, 3.0, 4.0]

For more control, use the transform directly:
    >>> from dwtbank import DiscreteWaveletTransform, FilterBank
    >>>
    >>> dwt = DiscreteWaveletTransform(FilterBank.from_wavelet("db4"), strategy="symmetric")
    >>> result = dwt.decompose(signal, level=3)
    >>> coarse = dwt.reconstruct(result, level=1)
"""

__version__ = "0.1.0"

from dwtbank.api import decompose, reconstruct
from dwtbank.components.decomposition import DecompositionResult
from dwtbank.components.filters import FilterBank
from dwtbank.core.strategy import (
    StrategyNotFoundError,
    StrategyRegistry,
    TransformStrategy,
    default_registry,
    get_strategy,
)
from dwtbank.core.transform import DiscreteWaveletTransform
from dwtbank.systems.convolution import PaddedStrategy, PeriodicStrategy

__all__ = [
    "__version__",
    "decompose",
    "reconstruct",
    "DecompositionResult",
    "DiscreteWaveletTransform",
    "FilterBank",
    "PaddedStrategy",
    "PeriodicStrategy",
    "StrategyNotFoundError",
    "StrategyRegistry",
    "TransformStrategy",
    "default_registry",
    "get_strategy",
]
