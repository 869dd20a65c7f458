"""Tests for factorlens.risk."""

import math

import numpy as np
import pytest

from factorlens.risk.regression import (
    design_matrix,
    ols_regression,
    r_squared,
    regress_sample,
)
from factorlens.utils.alignment import align_returns
from factorlens.utils.validation import (
    DimensionMismatchError,
    FactorlensValidationError,
    InsufficientDataError,
    SingularMatrixError,
)


class TestOLS:
    def test_single_factor_exact(self):
        y = [1.0, 2.0, -1.0, 0.5]
        X = [[0.5], [1.0], [-0.5], [0.25]]
        result = ols_regression(y, X)
        np.testing.assert_allclose(result.coefficients, [2.0], atol=1e-12)
        assert result.r_squared == pytest.approx(1.0)
        assert result.n_observations == 4

    def test_perfect_fit_recovers_loadings(self):
        rng = np.random.default_rng(11)
        X = rng.normal(size=(60, 4))
        c = np.array([1.2, -0.7, 0.1, 0.4])
        result = ols_regression(X @ c, X)
        np.testing.assert_allclose(result.coefficients, c, atol=1e-6)
        assert result.r_squared == pytest.approx(1.0, abs=1e-9)

    def test_matches_numpy_lstsq(self):
        rng = np.random.default_rng(12)
        X = rng.normal(size=(200, 3))
        y = X @ [0.5, 1.5, -0.2] + rng.normal(0, 0.3, 200)
        expected, *_ = np.linalg.lstsq(X, y, rcond=None)
        result = ols_regression(y, X)
        np.testing.assert_allclose(result.coefficients, expected, rtol=1e-9)
        assert 0 < result.r_squared < 1

    def test_no_intercept(self):
        # y = 1 + x cannot be fit through the origin exactly.
        x = np.array([1.0, 2.0, 3.0, 4.0])
        result = ols_regression(1.0 + x, x.reshape(-1, 1))
        expected_beta = (x @ (1.0 + x)) / (x @ x)
        assert result.coefficients[0] == pytest.approx(expected_beta)
        assert result.r_squared < 1.0

    def test_r_squared_can_be_negative(self):
        x = np.array([[1.0], [-1.0], [1.0], [-1.0]])
        y = np.array([10.0, 10.0, 10.0, 10.5])
        assert ols_regression(y, x).r_squared < 0

    def test_constant_target_undefined_fit(self):
        X = [[1.0], [2.0], [3.0]]
        result = ols_regression([2.0, 2.0, 2.0], X)
        assert math.isnan(result.r_squared)
        assert result.undefined_fit
        assert math.isfinite(result.coefficients[0])

    def test_defined_fit_flag(self):
        result = ols_regression([1.0, 2.0], [[1.0], [2.0]])
        assert not result.undefined_fit

    def test_collinear_factors_singular(self):
        x = [0.5, 1.0, -0.5, 0.25, 0.7]
        X = np.column_stack([x, x])
        with pytest.raises(SingularMatrixError):
            ols_regression([1.0, 2.0, -1.0, 0.5, 1.4], X)

    def test_fewer_rows_than_factors(self):
        with pytest.raises(InsufficientDataError, match="1 aligned observation"):
            ols_regression([1.0], [[1.0, 2.0]])

    def test_no_rows(self):
        with pytest.raises(InsufficientDataError):
            ols_regression(np.empty(0), np.empty((0, 2)))

    def test_no_factor_columns(self):
        with pytest.raises(FactorlensValidationError, match="at least one factor"):
            ols_regression([1.0, 2.0], np.empty((2, 0)))

    def test_row_mismatch(self):
        with pytest.raises(DimensionMismatchError):
            ols_regression([1.0, 2.0, 3.0], [[1.0], [2.0]])

    def test_deterministic(self):
        rng = np.random.default_rng(13)
        X = rng.normal(size=(50, 3))
        y = rng.normal(size=50)
        a = ols_regression(y, X)
        b = ols_regression(y, X)
        assert a.coefficients == b.coefficients
        assert a.r_squared == b.r_squared


class TestRSquared:
    def test_perfect(self):
        y = np.array([1.0, 2.0, 3.0])
        assert r_squared(y, y) == 1.0

    def test_mean_prediction_is_zero(self):
        y = np.array([1.0, 2.0, 3.0])
        assert r_squared(y, np.full(3, 2.0)) == 0.0

    def test_constant_is_nan(self):
        assert math.isnan(r_squared(np.ones(4), np.zeros(4)))


class TestSampleRegression:
    def test_design_matrix_column_order(self, factor_returns, exact_target):
        order = ["momentum", "market", "value", "size"]
        sample = align_returns(exact_target, {n: factor_returns[n] for n in order})
        X = design_matrix(sample)
        assert X.shape == (len(sample), 4)
        np.testing.assert_array_equal(X[:, 1], sample.factors["market"])

    def test_regress_sample_recovers_loadings(self, factor_returns, exact_target, true_loadings):
        sample = align_returns(exact_target, factor_returns)
        result = regress_sample(sample)
        np.testing.assert_allclose(
            result.coefficients,
            [true_loadings[n] for n in sample.factor_names],
            atol=1e-6,
        )
        assert result.r_squared == pytest.approx(1.0, abs=1e-9)

    def test_noisy_target(self, factor_returns, noisy_target, true_loadings):
        result = regress_sample(align_returns(noisy_target, factor_returns))
        np.testing.assert_allclose(
            result.coefficients, list(true_loadings.values()), atol=0.25
        )
        assert 0.5 < result.r_squared < 1.0

    def test_short_sample_insufficient(self, factor_returns, exact_target):
        # Four dates, seed dropped, leaves three rows for four factors.
        sample = align_returns(exact_target.iloc[:4], factor_returns)
        with pytest.raises(InsufficientDataError):
            regress_sample(sample)
