"""Tests for factorlens.linalg."""

import numpy as np
import pytest

from factorlens.linalg import PIVOT_TOLERANCE, identity, invert, multiply, transpose
from factorlens.utils.validation import (
    DimensionMismatchError,
    FactorlensValidationError,
    SingularMatrixError,
)


@pytest.fixture()
def random_square():
    rng = np.random.default_rng(3)
    return rng.normal(size=(5, 5)) + 5 * np.eye(5)


class TestTranspose:
    def test_shape(self):
        m = np.arange(6.0).reshape(2, 3)
        assert transpose(m).shape == (3, 2)

    def test_involution_exact(self):
        rng = np.random.default_rng(1)
        m = rng.normal(size=(4, 7))
        np.testing.assert_array_equal(transpose(transpose(m)), m)

    def test_accepts_nested_lists(self):
        assert transpose([[1, 2, 3]]).tolist() == [[1.0], [2.0], [3.0]]

    def test_returns_copy(self):
        m = np.ones((2, 2))
        t = transpose(m)
        t[0, 0] = 5.0
        assert m[0, 0] == 1.0


class TestMultiply:
    def test_simple_product(self):
        a = [[1, 2], [3, 4]]
        b = [[5, 6], [7, 8]]
        assert multiply(a, b).tolist() == [[19.0, 22.0], [43.0, 50.0]]

    def test_column_vector(self):
        a = np.arange(6.0).reshape(3, 2)
        b = np.array([[1.0], [2.0]])
        np.testing.assert_allclose(multiply(a, b), a @ b)

    def test_dimension_mismatch(self):
        with pytest.raises(DimensionMismatchError, match="inner dimensions"):
            multiply(np.ones((2, 3)), np.ones((2, 3)))

    def test_dimension_mismatch_is_value_error(self):
        with pytest.raises(ValueError):
            multiply(np.ones((2, 3)), np.ones((4, 1)))

    def test_rejects_one_dimensional(self):
        with pytest.raises(FactorlensValidationError, match="2-dimensional"):
            multiply([1.0, 2.0], [[1.0], [2.0]])

    def test_rejects_non_finite(self):
        with pytest.raises(FactorlensValidationError, match="non-finite"):
            multiply([[np.nan]], [[1.0]])


class TestInvert:
    def test_round_trip_identity(self, random_square):
        inv = invert(random_square)
        np.testing.assert_allclose(multiply(inv, random_square), identity(5), atol=1e-9)
        np.testing.assert_allclose(multiply(random_square, inv), identity(5), atol=1e-9)

    def test_matches_numpy(self, random_square):
        np.testing.assert_allclose(invert(random_square), np.linalg.inv(random_square), rtol=1e-10)

    def test_known_inverse(self):
        inv = invert([[4.0, 7.0], [2.0, 6.0]])
        np.testing.assert_allclose(inv, [[0.6, -0.7], [-0.2, 0.4]], atol=1e-12)

    def test_requires_pivoting(self):
        # Zero on the diagonal: only solvable with a row swap.
        m = [[0.0, 1.0], [1.0, 0.0]]
        np.testing.assert_allclose(invert(m), m)

    def test_identical_columns_singular(self):
        m = np.array([[1.0, 1.0, 2.0], [2.0, 2.0, 1.0], [3.0, 3.0, 0.5]])
        with pytest.raises(SingularMatrixError, match="singular"):
            invert(m)

    def test_gram_matrix_of_duplicate_factors_singular(self):
        x = np.array([[0.5, 0.5], [1.0, 1.0], [-0.5, -0.5], [0.25, 0.25]])
        with pytest.raises(SingularMatrixError):
            invert(multiply(transpose(x), x))

    def test_tolerance_boundary(self):
        with pytest.raises(SingularMatrixError):
            invert([[PIVOT_TOLERANCE / 2]])
        np.testing.assert_allclose(invert([[PIVOT_TOLERANCE * 10]]), [[1 / (PIVOT_TOLERANCE * 10)]])

    def test_non_square(self):
        with pytest.raises(DimensionMismatchError, match="square"):
            invert(np.ones((2, 3)))

    def test_input_not_modified(self, random_square):
        before = random_square.copy()
        invert(random_square)
        np.testing.assert_array_equal(random_square, before)

    def test_deterministic(self, random_square):
        np.testing.assert_array_equal(invert(random_square), invert(random_square))
