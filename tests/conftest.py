"""
pytest configuration and shared fixtures.
"""

import pytest

from pygoalseek.core.config import GoalSeekConfig
from pygoalseek.formula.design import Formula


class StepEvaluator:
    """Evaluator whose output jumps from -1 to +1 at a threshold.

    Brent cannot shrink a bracket around the jump below one ulp, so it
    exhausts its budget, while bisection stops on the interval width.
    """

    def __init__(self, threshold=700000.3, variable='x'):
        self.threshold = threshold
        self.variable = variable
        self.calls = 0

    def evaluate(self, expression, variables):
        self.calls += 1
        return 1.0 if variables[self.variable] > self.threshold else -1.0


class ConstantAlgorithm:
    """Algorithm stub returning a canned Result, recording each call."""

    def __init__(self, name, result_factory):
        self._name = name
        self._factory = result_factory
        self.calls = 0

    @property
    def name(self):
        return self._name

    def solve(self, function, target, lower_bound, upper_bound, tolerance,
              max_iter, *, relaxed_factor=100.0):
        self.calls += 1
        return self._factory(self._name, function, target, lower_bound, upper_bound)


@pytest.fixture
def config():
    """Default solver settings."""
    return GoalSeekConfig()


@pytest.fixture
def linear_formula():
    """y = 2x + 3"""
    return Formula.create('linear', '2 * x + 3', ['x'])


@pytest.fixture
def quadratic_formula():
    """y = x^2 - 4, roots at +-2."""
    return Formula.create('quadratic', 'x^2 - 4', ['x'])


@pytest.fixture
def step_formula():
    return Formula.create('step', 'x', ['x'])


@pytest.fixture
def step_evaluator():
    return StepEvaluator()


@pytest.fixture
def constant_algorithm():
    """Factory for stub algorithms: constant_algorithm(name, result_factory)."""
    return ConstantAlgorithm
