"""Tests for component types."""

import numpy as np
import pytest

from dwtbank.components.decomposition import DecompositionBuilder, DecompositionResult
from dwtbank.components.filters import FilterBank

S = 1.0 / np.sqrt(2.0)


class TestFilterBank:
    """Tests for FilterBank."""

    def test_creation(self) -> None:
        """Test FilterBank creation from plain lists."""
        bank = FilterBank(
            low_decomposition=[S, S],
            high_decomposition=[S, -S],
            low_reconstruction=[S, S],
            high_reconstruction=[S, -S],
        )
        assert bank.name == "custom"
        assert bank.length == 2
        assert bank.low_decomposition.dtype == np.float64
        np.testing.assert_allclose(bank.high_decomposition, [S, -S])

    def test_filters_are_read_only(self) -> None:
        """Test that filter vectors cannot be modified in place."""
        bank = FilterBank.haar()
        with pytest.raises(ValueError):
            bank.low_decomposition[0] = 1.0

    def test_filters_are_copied(self) -> None:
        """Test that the bank does not alias caller arrays."""
        low = np.array([S, S])
        bank = FilterBank(
            low_decomposition=low,
            high_decomposition=[S, -S],
            low_reconstruction=[S, S],
            high_reconstruction=[S, -S],
        )
        low[0] = 100.0
        assert bank.low_decomposition[0] == pytest.approx(S)

    def test_frozen(self) -> None:
        """Test that fields cannot be reassigned."""
        bank = FilterBank.haar()
        with pytest.raises(ValueError):
            bank.name = "other"

    def test_mismatched_lengths(self) -> None:
        """Test that filters of different lengths are rejected."""
        with pytest.raises(ValueError, match="same length"):
            FilterBank(
                low_decomposition=[S, S],
                high_decomposition=[S, -S, 0.0],
                low_reconstruction=[S, S],
                high_reconstruction=[S, -S],
            )

    def test_odd_length(self) -> None:
        """Test that odd-length filters are rejected."""
        with pytest.raises(ValueError, match="even length"):
            FilterBank(
                low_decomposition=[0.5, 1.0, 0.5],
                high_decomposition=[-0.5, 1.0, -0.5],
                low_reconstruction=[0.5, 1.0, 0.5],
                high_reconstruction=[-0.5, 1.0, -0.5],
            )

    def test_empty_filter(self) -> None:
        """Test that an empty filter is rejected."""
        with pytest.raises(ValueError):
            FilterBank(
                low_decomposition=[],
                high_decomposition=[S, -S],
                low_reconstruction=[S, S],
                high_reconstruction=[S, -S],
            )

    def test_none_filter(self) -> None:
        """Test that a missing filter is rejected."""
        with pytest.raises(ValueError):
            FilterBank(
                low_decomposition=None,
                high_decomposition=[S, -S],
                low_reconstruction=[S, S],
                high_reconstruction=[S, -S],
            )

    def test_non_finite_filter(self) -> None:
        """Test that NaN coefficients are rejected."""
        with pytest.raises(ValueError, match="finite"):
            FilterBank(
                low_decomposition=[S, np.nan],
                high_decomposition=[S, -S],
                low_reconstruction=[S, S],
                high_reconstruction=[S, -S],
            )

    def test_haar(self) -> None:
        """Test the built-in Haar bank."""
        bank = FilterBank.haar()
        assert bank.name == "haar"
        np.testing.assert_allclose(bank.low_decomposition, [S, S])
        np.testing.assert_allclose(bank.high_decomposition, [S, -S])
        np.testing.assert_allclose(bank.low_reconstruction, [S, S])
        np.testing.assert_allclose(bank.high_reconstruction, [S, -S])

    def test_from_wavelet_haar_matches_builtin(self) -> None:
        """Test that PyWavelets' Haar converts to the built-in bank."""
        bank = FilterBank.from_wavelet("haar")
        haar = FilterBank.haar()
        assert bank.name == "haar"
        np.testing.assert_allclose(bank.low_decomposition, haar.low_decomposition)
        np.testing.assert_allclose(bank.high_decomposition, haar.high_decomposition)
        np.testing.assert_allclose(bank.low_reconstruction, haar.low_reconstruction)
        np.testing.assert_allclose(bank.high_reconstruction, haar.high_reconstruction)

    def test_from_wavelet_orthogonal(self) -> None:
        """Test that an orthogonal wavelet analyses and synthesises with the same filters."""
        bank = FilterBank.from_wavelet("db4")
        assert bank.length == 8
        np.testing.assert_allclose(bank.low_decomposition, bank.low_reconstruction)
        np.testing.assert_allclose(bank.high_decomposition, bank.high_reconstruction)

    def test_from_wavelet_unknown(self) -> None:
        """Test that unknown wavelet names raise ValueError."""
        with pytest.raises(ValueError, match="Unknown discrete wavelet"):
            FilterBank.from_wavelet("not-a-wavelet")

    def test_repr(self) -> None:
        """Test FilterBank repr."""
        assert repr(FilterBank.haar()) == "FilterBank(name='haar', length=2)"


class TestDecompositionResult:
    """Tests for DecompositionResult."""

    def _result(self) -> DecompositionResult:
        return DecompositionResult(
            approximation=[5.0],
            details=([-S, -S], [-2.0]),
            level=2,
            lengths=(4, 2),
            original_length=4,
            wavelet="haar",
        )

    def test_creation(self) -> None:
        """Test DecompositionResult creation."""
        result = self._result()
        assert result.level == 2
        assert result.strategy == "default"
        assert len(result.details) == 2
        np.testing.assert_allclose(result.approximation, [5.0])

    def test_details_list_alias(self) -> None:
        """Test that details_list is the details tuple."""
        result = self._result()
        assert result.details_list is result.details

    def test_get_details(self) -> None:
        """Test 1-based detail access."""
        result = self._result()
        np.testing.assert_allclose(result.get_details(1), [-S, -S])
        np.testing.assert_allclose(result.get_details(2), [-2.0])

    def test_get_details_out_of_range(self) -> None:
        """Test that detail levels outside [1, level] raise ValueError."""
        result = self._result()
        with pytest.raises(ValueError, match="level must be in"):
            result.get_details(0)
        with pytest.raises(ValueError, match="level must be in"):
            result.get_details(3)

    def test_immutable(self) -> None:
        """Test that results cannot be modified."""
        result = self._result()
        with pytest.raises(ValueError):
            result.level = 1
        with pytest.raises(ValueError):
            result.approximation[0] = 0.0
        with pytest.raises(ValueError):
            result.details[0][0] = 0.0

    def test_detail_count_must_match_level(self) -> None:
        """Test that the detail count is checked against the level."""
        with pytest.raises(ValueError, match="detail vectors"):
            DecompositionResult(
                approximation=[5.0],
                details=([-S, -S],),
                level=2,
                lengths=(4, 2),
                original_length=4,
            )

    def test_invalid_level(self) -> None:
        """Test that level 0 is rejected."""
        with pytest.raises(ValueError):
            DecompositionResult(
                approximation=[1.0, 2.0],
                details=(),
                level=0,
                lengths=(),
                original_length=2,
            )

    def test_repr(self) -> None:
        """Test DecompositionResult repr."""
        text = repr(self._result())
        assert "level=2" in text
        assert "details=[2, 1]" in text


class TestDecompositionBuilder:
    """Tests for DecompositionBuilder."""

    def test_build(self) -> None:
        """Test building a result level by level."""
        builder = DecompositionBuilder(original_length=3, wavelet="haar", strategy="periodic")
        builder.set_approximation(np.array([1.0, 2.0]))
        builder.add_details(np.array([0.5, 0.5]), input_length=4)
        builder.set_level(1)
        builder.set_approximation(np.array([3.0]))
        builder.add_details(np.array([-1.0]), input_length=2)
        builder.set_level(2)

        result = builder.build()
        assert result.level == 2
        assert result.lengths == (4, 2)
        assert result.original_length == 3
        assert result.strategy == "periodic"
        np.testing.assert_allclose(result.approximation, [3.0])

    def test_build_copies_vectors(self) -> None:
        """Test that later changes to builder inputs do not leak into the result."""
        approximation = np.array([1.0, 2.0])
        builder = DecompositionBuilder(original_length=4, wavelet="haar", strategy="default")
        builder.set_approximation(approximation)
        builder.add_details(np.array([0.0, 0.0]), input_length=4)
        builder.set_level(1)
        result = builder.build()

        approximation[0] = 99.0
        assert result.approximation[0] == 1.0

    def test_build_empty(self) -> None:
        """Test that building before any level raises ValueError."""
        builder = DecompositionBuilder(original_length=4, wavelet="haar", strategy="default")
        with pytest.raises(ValueError, match="no decomposition level"):
            builder.build()
