"""Decomposition result component and the builder that fills it."""

from __future__ import annotations

from typing import Any

import numpy as np
from pydantic import BaseModel, Field, field_validator, model_validator


class Component(BaseModel):
    """Base class for all dwtbank components."""

    model_config = {"arbitrary_types_allowed": True, "frozen": True}


def _readonly(value: Any) -> np.ndarray:
    arr = np.array(value, dtype=np.float64)
    if arr.ndim != 1 or arr.size == 0:
        raise ValueError(f"expected a non-empty 1-D vector, got shape {arr.shape}")
    arr.flags.writeable = False
    return arr


class DecompositionResult(Component):
    """Multi-level wavelet decomposition of a 1-D signal.

    Attributes:
        approximation: Coarsest approximation vector
        details: Detail vectors, ``details[i - 1]`` produced at level ``i``
        level: Number of completed decomposition levels
        lengths: Signal length entering each level, ``lengths[i]`` for level ``i + 1``
        original_length: Length of the data before power-of-two padding
        wavelet: Name of the filter bank used
        strategy: Name of the transform strategy used
    """

    approximation: np.ndarray
    details: tuple[np.ndarray, ...]
    level: int = Field(ge=1)
    lengths: tuple[int, ...]
    original_length: int = Field(ge=2)
    wavelet: str = Field(default="custom")
    strategy: str = Field(default="default")

    @field_validator("approximation", mode="before")
    @classmethod
    def _approximation_vector(cls, value: Any) -> np.ndarray:
        return _readonly(value)

    @field_validator("details", mode="before")
    @classmethod
    def _detail_vectors(cls, value: Any) -> tuple[np.ndarray, ...]:
        return tuple(_readonly(v) for v in value)

    @model_validator(mode="after")
    def _check_levels(self) -> DecompositionResult:
        if len(self.details) != self.level:
            raise ValueError(
                f"expected {self.level} detail vectors, got {len(self.details)}"
            )
        if len(self.lengths) != self.level:
            raise ValueError(
                f"expected {self.level} level lengths, got {len(self.lengths)}"
            )
        return self

    @property
    def details_list(self) -> tuple[np.ndarray, ...]:
        """Alias for ``details``."""
        return self.details

    def get_details(self, level: int) -> np.ndarray:
        """Return the detail vector produced at ``level`` (1-based)."""
        if not 1 <= level <= self.level:
            raise ValueError(f"level must be in [1, {self.level}], got {level}")
        return self.details[level - 1]

    def __repr__(self) -> str:
        return (
            f"DecompositionResult(level={self.level}, "
            f"approximation={self.approximation.size}, "
            f"details={[d.size for d in self.details]}, "
            f"wavelet={self.wavelet!r}, strategy={self.strategy!r})"
        )


class DecompositionBuilder:
    """Accumulates one decomposition call before it is frozen.

    Owned by a single call of ``DiscreteWaveletTransform.decompose``; the
    caller only ever receives the result of ``build()``.
    """

    def __init__(self, original_length: int, wavelet: str, strategy: str) -> None:
        self.original_length = original_length
        self.wavelet = wavelet
        self.strategy = strategy
        self.approximation: np.ndarray | None = None
        self.details: list[np.ndarray] = []
        self.lengths: list[int] = []
        self.level = 0

    def set_approximation(self, approximation: np.ndarray) -> None:
        self.approximation = approximation

    def add_details(self, details: np.ndarray, input_length: int) -> None:
        self.details.append(details)
        self.lengths.append(input_length)

    def set_level(self, level: int) -> None:
        self.level = level

    def build(self) -> DecompositionResult:
        """Freeze the accumulated state.

        Raises:
            ValueError: If no level has been recorded yet
        """
        if self.approximation is None or self.level < 1:
            raise ValueError("no decomposition level has been recorded")
        return DecompositionResult(
            approximation=self.approximation,
            details=tuple(self.details),
            level=self.level,
            lengths=tuple(self.lengths),
            original_length=self.original_length,
            wavelet=self.wavelet,
            strategy=self.strategy,
        )
