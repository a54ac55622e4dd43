"""
Validation of find_root() against scipy.optimize.brentq.

scipy's brentq is the reference implementation of Brent's method; on a
bracketing interval both must land on the same root to within the
combined tolerances.
"""

import math

import pytest
from numpy.testing import assert_allclose

scipy_optimize = pytest.importorskip("scipy.optimize")

from pygoalseek.roots import find_root


# (function, target, lower, upper)
CASES = {
    'cubic': (lambda x: x ** 3 - 2 * x, 5.0, 2.0, 3.0),
    'cos_fixed_point': (lambda x: math.cos(x) - x, 0.0, 0.0, 1.0),
    'exponential': (math.exp, 10.0, 0.0, 5.0),
    'log': (math.log, 1.0, 0.5, 10.0),
    'future_value_rate': (lambda r: 1000.0 * (1 + r) ** 10, 2000.0, 0.0, 1.0),
    'emi_rate': (
        lambda r: 100000.0 * r * (1 + r) ** 12 / ((1 + r) ** 12 - 1),
        8885.0, 1e-6, 1.0,
    ),
}


@pytest.mark.parametrize("case", sorted(CASES))
@pytest.mark.parametrize("algorithm", ['brent', 'bisection', 'newton'])
def test_matches_brentq(case, algorithm):
    function, target, lower, upper = CASES[case]
    expected = scipy_optimize.brentq(
        lambda x: function(x) - target, lower, upper, xtol=1e-14,
    )
    sol = find_root(function, target, lower, upper, algorithm=algorithm)
    assert sol.converged
    assert_allclose(sol.value, expected, rtol=1e-8, atol=1e-9)
