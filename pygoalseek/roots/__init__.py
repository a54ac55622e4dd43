"""
Scalar root finding.

Three interchangeable algorithms solve f(x) = target on a bounded
interval: Bisection, Newton-Raphson and Brent (the default).

Public API:
    find_root(function, target, lower, upper, ...) -> RootSolution

Example:
    >>> from pygoalseek.roots import find_root
    >>> sol = find_root(lambda x: x**3 - x, 6.0, 0.0, 5.0, algorithm='bisection')
    >>> sol.converged
    True
"""

from pygoalseek.roots._common import RootParams
from pygoalseek.roots.backends import (
    DEFAULT_ALGORITHMS,
    BisectionAlgorithm,
    BrentAlgorithm,
    NewtonRaphsonAlgorithm,
    get_algorithm,
)
from pygoalseek.roots.solution import RootSolution
from pygoalseek.roots.solvers import find_root

__all__ = [
    "find_root",
    "RootSolution",
    "RootParams",
    "BisectionAlgorithm",
    "BrentAlgorithm",
    "NewtonRaphsonAlgorithm",
    "DEFAULT_ALGORITHMS",
    "get_algorithm",
]
