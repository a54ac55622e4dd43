"""
Tests for NewtonRaphsonAlgorithm.
"""

import math

import pytest

from pygoalseek.core.status import (
    STATUS_CONVERGED,
    STATUS_DERIVATIVE_TOO_SMALL,
    STATUS_MAX_ITERATIONS,
)
from pygoalseek.roots.backends.newton import (
    NewtonRaphsonAlgorithm,
    central_difference,
)


TOL = 1e-10


@pytest.fixture
def newton():
    return NewtonRaphsonAlgorithm()


class TestNewton:

    def test_name(self, newton):
        assert newton.name == 'Newton-Raphson'

    def test_square_root(self, newton):
        r = newton.solve(lambda x: x * x, 4.0, 0.0, 10.0, TOL, 1000)
        assert r.params.converged
        assert r.params.status == STATUS_CONVERGED
        assert r.params.value == pytest.approx(2.0, abs=1e-8)
        assert r.info['start'] == 5.0

    def test_linear_one_step(self, newton):
        r = newton.solve(lambda x: 2 * x + 3, 13.0, -100.0, 100.0, TOL, 1000)
        assert r.params.converged
        assert r.params.value == pytest.approx(5.0, abs=1e-8)
        assert r.params.iterations <= 3

    def test_already_at_target(self, newton):
        r = newton.solve(lambda x: 5.0, 5.0, 0.0, 10.0, TOL, 1000)
        assert r.params.converged
        assert r.params.iterations == 0
        assert r.params.value == 5.0


class TestFlatDerivative:

    def test_constant_function(self, newton):
        r = newton.solve(lambda x: 5.0, 7.0, 0.0, 10.0, TOL, 1000)
        assert not r.params.converged
        assert r.params.status == STATUS_DERIVATIVE_TOO_SMALL
        assert r.params.message == "Derivative too small, method stuck"
        assert r.params.iterations == 0
        assert r.params.value == 5.0
        assert r.params.error == pytest.approx(2.0)
        assert r.info['derivative'] == 0.0

    def test_symmetric_minimum(self, newton):
        # midpoint of a symmetric window sits on the vertex of x^2 + 1
        r = newton.solve(lambda x: x * x + 1, 0.0, -10.0, 10.0, TOL, 1000)
        assert r.params.status == STATUS_DERIVATIVE_TOO_SMALL
        assert r.params.value == 0.0


class TestClamping:

    def test_step_clamped_to_upper_bound(self, newton):
        # the root x = 10 lies outside [0, 5]
        r = newton.solve(lambda x: x ** 3, 1000.0, 0.0, 5.0, TOL, 1000)
        assert 0.0 <= r.params.value <= 5.0
        assert r.params.value == 5.0
        assert r.params.error == pytest.approx(875.0)


class TestExhaustion:

    def test_max_iterations(self, newton):
        # atan(x) = 1.5 at x ~ 14.1; two steps from 0 only reach ~3.2
        r = newton.solve(lambda x: math.atan(x), 1.5, -100.0, 100.0, TOL, 2)
        assert not r.params.converged
        assert r.params.status == STATUS_MAX_ITERATIONS
        assert r.params.iterations == 2
        assert 1.5 < r.params.value < 14.0


class TestCentralDifference:

    def test_cubic(self):
        assert central_difference(lambda x: x ** 3, 2.0) == pytest.approx(12.0, rel=1e-6)

    def test_step_scales_with_x(self):
        assert central_difference(lambda x: x * x, 1e6) == pytest.approx(2e6, rel=1e-6)
