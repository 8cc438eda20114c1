"""Filter bank component: the four filter vectors used by the transform.

Filters follow the correlation convention used throughout dwtbank:

    a[k] = sum_j low_decomposition[j] * x[2k + j]
    x[n] = sum_k a[k] * low_reconstruction[n - 2k] + d[k] * high_reconstruction[n - 2k]

so the Haar bank is ``[1/sqrt(2), 1/sqrt(2)]`` / ``[1/sqrt(2), -1/sqrt(2)]``
for both analysis and synthesis.
"""

from __future__ import annotations

from typing import Any

import numpy as np
import pywt
from pydantic import BaseModel, Field, field_validator, model_validator


class Component(BaseModel):
    """Base class for all dwtbank components."""

    model_config = {"arbitrary_types_allowed": True, "frozen": True}


class FilterBank(Component):
    """Analysis/synthesis filter quadruple.

    All four filters share one even length, as every PyWavelets discrete
    wavelet does.

    Attributes:
        low_decomposition: Low-pass analysis filter
        high_decomposition: High-pass analysis filter
        low_reconstruction: Low-pass synthesis filter
        high_reconstruction: High-pass synthesis filter
        name: Wavelet name the filters were read from ('custom' otherwise)
    """

    low_decomposition: np.ndarray
    high_decomposition: np.ndarray
    low_reconstruction: np.ndarray
    high_reconstruction: np.ndarray
    name: str = Field(default="custom", min_length=1)

    @field_validator(
        "low_decomposition",
        "high_decomposition",
        "low_reconstruction",
        "high_reconstruction",
        mode="before",
    )
    @classmethod
    def _as_filter(cls, value: Any) -> np.ndarray:
        """Copy filter coefficients into a read-only float64 vector."""
        if value is None:
            raise ValueError("filter must not be None")
        arr = np.array(value, dtype=np.float64)
        if arr.ndim != 1 or arr.size == 0:
            raise ValueError(
                f"filter must be a non-empty 1-D sequence, got shape {arr.shape}"
            )
        if not np.all(np.isfinite(arr)):
            raise ValueError("filter coefficients must be finite")
        arr.flags.writeable = False
        return arr

    @model_validator(mode="after")
    def _check_lengths(self) -> FilterBank:
        lengths = {
            self.low_decomposition.size,
            self.high_decomposition.size,
            self.low_reconstruction.size,
            self.high_reconstruction.size,
        }
        if len(lengths) != 1:
            raise ValueError(
                f"all four filters must have the same length, got {sorted(lengths)}"
            )
        if self.low_decomposition.size % 2:
            raise ValueError(
                f"filters must have an even length, got {self.low_decomposition.size}"
            )
        return self

    @property
    def length(self) -> int:
        """Number of taps shared by all four filters."""
        return int(self.low_decomposition.size)

    @classmethod
    def haar(cls) -> FilterBank:
        """Orthonormal Haar filter bank."""
        s = 1.0 / np.sqrt(2.0)
        return cls(
            low_decomposition=[s, s],
            high_decomposition=[s, -s],
            low_reconstruction=[s, s],
            high_reconstruction=[s, -s],
            name="haar",
        )

    @classmethod
    def from_wavelet(cls, name: str) -> FilterBank:
        """Read a discrete wavelet from PyWavelets.

        PyWavelets stores analysis filters time-reversed (it convolves
        rather than correlates), so they are flipped on the way in.

        Args:
            name: Discrete wavelet name (e.g. 'haar', 'db4', 'bior2.2')

        Returns:
            FilterBank with the wavelet's coefficients

        Raises:
            ValueError: If the name is not a discrete wavelet known to PyWavelets
        """
        try:
            wavelet = pywt.Wavelet(name)
        except ValueError as e:
            raise ValueError(f"Unknown discrete wavelet '{name}'") from e

        dec_lo, dec_hi, rec_lo, rec_hi = wavelet.filter_bank
        return cls(
            low_decomposition=np.asarray(dec_lo)[::-1],
            high_decomposition=np.asarray(dec_hi)[::-1],
            low_reconstruction=rec_lo,
            high_reconstruction=rec_hi,
            name=wavelet.name,
        )

    def __repr__(self) -> str:
        return f"FilterBank(name={self.name!r}, length={self.length})"
