"""Tests for the bracketing solvers."""

import math

import jax.numpy as jnp
import pytest

from rootfinder.solvers import FailureKind, bisection, regula_falsi

SQRT2 = math.sqrt(2.0)

# (f, a, b, known root)
SIGN_CHANGING = [
    (lambda x: x**3 - x - 1, 1.0, 2.0, 1.324717957244746),
    (lambda x: math.exp(x) - 10.0, 0.0, 4.0, math.log(10.0)),
    (lambda x: math.cos(x) - x, 0.0, 1.0, 0.7390851332151607),
    (lambda x: math.tanh(x - 0.3), 2.0, -1.0, 0.3),
]


class TestBisection:
    """Tests for bisection method."""

    def test_identity_over_symmetric_bracket(self):
        """f(x) = x over [-1, 1] hits the root on the first midpoint."""
        result = bisection(lambda x: x, -1.0, 1.0)
        assert result.converged
        assert result.root == 0.0
        assert result.iterations == 1

    def test_simple_quadratic(self, quadratic):
        """Test finding root of x² - 2 = 0."""
        found, root = bisection(quadratic, 0.0, 2.0)
        assert found
        assert root == pytest.approx(SQRT2, abs=1e-6)

    def test_exact_zero_endpoint_returns_immediately(self, counting):
        """An endpoint with f exactly zero is the answer, no iterations."""
        f = counting(lambda x: x)
        result = bisection(f, 0.0, 2.0)
        assert result.as_tuple() == (True, 0.0)
        assert result.iterations == 0
        assert f.calls == 2

        result = bisection(lambda x: x - 2.0, 0.0, 2.0)
        assert result.root == 2.0

    def test_invalid_bracket(self, quadratic):
        """Both endpoints positive."""
        result = bisection(quadratic, 3.0, 4.0)
        assert not result
        assert result.failure is FailureKind.NON_BRACKETING
        assert result.root is None

    def test_non_finite_endpoint_is_not_a_bracket(self):
        result = bisection(lambda x: math.nan if x < 0 else x - 1.0, -1.0, 2.0)
        assert result.failure is FailureKind.NON_BRACKETING

    def test_max_iterations_exceeded(self, quadratic):
        result = bisection(quadratic, 0.0, 2.0, max_iter=2, tol=1e-10)
        assert result.failure is FailureKind.EXHAUSTED
        assert result.iterations == 2
        assert result.root is None

    def test_reversed_bracket(self, quadratic):
        result = bisection(quadratic, 2.0, 0.0)
        assert result.root == pytest.approx(SQRT2, abs=1e-6)

    def test_tighter_tolerance(self, quadratic):
        result = bisection(quadratic, 0.0, 2.0, tol=1e-12)
        assert result.root == pytest.approx(SQRT2, abs=1e-12)

    def test_jax_function(self):
        """Functions returning JAX scalars are accepted."""

        def f(x):
            return jnp.sin(x) - 0.5

        result = bisection(f, 0.0, 1.5)
        assert isinstance(result.root, float)
        assert result.root == pytest.approx(math.pi / 6, abs=1e-5)


class TestRegulaFalsi:
    """Tests for the false position method."""

    def test_identity_over_symmetric_bracket(self):
        result = regula_falsi(lambda x: x, -1.0, 1.0)
        assert result.converged
        assert result.root == 0.0

    def test_simple_quadratic(self, quadratic):
        found, root = regula_falsi(quadratic, 0.0, 2.0)
        assert found
        assert abs(quadratic(root)) < 1e-6
        assert root == pytest.approx(SQRT2, abs=1e-6)

    def test_exact_zero_endpoint_matches_bisection(self):
        """Zero endpoints are handled the same way as in bisection."""
        result = regula_falsi(lambda x: x, 0.0, 2.0)
        assert result.as_tuple() == bisection(lambda x: x, 0.0, 2.0).as_tuple()
        assert result.root == 0.0
        assert result.iterations == 0

    def test_invalid_bracket(self, quadratic):
        result = regula_falsi(quadratic, 3.0, 4.0)
        assert result.failure is FailureKind.NON_BRACKETING

    def test_small_scale_function_converges(self):
        """Endpoint values below tolerance still give a usable chord."""

        def f(x):
            return 4e-7 * (x - 0.3)

        result = regula_falsi(f, -1.0, 1.0)
        assert result.converged
        assert result.iterations == 1
        assert result.root == pytest.approx(0.3, abs=1e-9)
        assert bisection(f, -1.0, 1.0).converged

    def test_nan_inside_bracket_is_unstable(self):
        """A NaN at the trial point poisons the next chord."""

        def f(x):
            return math.nan if 0.0 < x < 0.5 else x - 0.3

        result = regula_falsi(f, -1.0, 1.0)
        assert result.failure is FailureKind.UNSTABLE
        assert result.iterations == 2
        assert result.function_calls == 3
        assert result.root is None

    def test_max_iterations_exceeded(self, quadratic):
        result = regula_falsi(quadratic, 0.0, 2.0, max_iter=2, tol=1e-12)
        assert result.failure is FailureKind.EXHAUSTED
        assert result.iterations == 2

    def test_fewer_iterations_than_bisection_on_smooth_function(self):
        def f(x):
            return x**3 - x - 1

        assert regula_falsi(f, 1.0, 2.0).iterations < bisection(f, 1.0, 2.0).iterations


@pytest.mark.parametrize("solver", [bisection, regula_falsi])
class TestBracketingProperties:
    """Behaviour shared by both bracketing methods."""

    @pytest.mark.parametrize("f, a, b, expected", SIGN_CHANGING)
    def test_sign_changing_functions_converge(self, solver, f, a, b, expected):
        result = solver(f, a, b)
        assert result.converged
        assert abs(result.f_root) < 1e-6 or abs(result.root - expected) < 1e-6
        assert result.f_root == f(result.root)

    def test_constant_function_terminates(self, solver):
        result = solver(lambda x: 1.0, -5.0, 5.0)
        assert result.failure is FailureKind.NON_BRACKETING

    def test_idempotent(self, solver, quadratic):
        assert solver(quadratic, 0.0, 2.0) == solver(quadratic, 0.0, 2.0)

    def test_invalid_settings(self, solver, quadratic):
        with pytest.raises(ValueError, match="tol must be strictly positive"):
            solver(quadratic, 0.0, 2.0, tol=0.0)
        with pytest.raises(ValueError, match="max_iter must be at least 1"):
            solver(quadratic, 0.0, 2.0, max_iter=0)

    def test_function_errors_propagate(self, solver):
        def f(x):
            raise ZeroDivisionError("boom")

        with pytest.raises(ZeroDivisionError, match="boom"):
            solver(f, 0.0, 1.0)

    def test_failure_is_logged(self, solver, quadratic, caplog):
        with caplog.at_level("DEBUG", logger="rootfinder.solvers.bracketing"):
            solver(quadratic, 3.0, 4.0)
        assert "do not bracket a root" in caplog.text
