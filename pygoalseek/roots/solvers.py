"""
Public API for scalar root finding.

    find_root(function, target, lower, upper) -> RootSolution

Validates inputs, resolves the algorithm and settings, runs one
algorithm and wraps the Result in a RootSolution. No fallback: that is
the job of pygoalseek.goalseek.seek().
"""

from __future__ import annotations

from typing import Callable

from pygoalseek.core.config import DEFAULT_CONFIG, GoalSeekConfig
from pygoalseek.core.exceptions import ValidationError
from pygoalseek.core.validation import (
    check_bounds,
    check_finite_scalar,
    check_max_iter,
    check_positive,
)
from pygoalseek.formula.objective import guard
from pygoalseek.roots.backends import DEFAULT_ALGORITHMS, get_algorithm
from pygoalseek.roots.solution import RootSolution


def find_root(
    function: Callable[[float], float],
    target: float,
    lower_bound: float,
    upper_bound: float,
    *,
    algorithm="brent",
    tol: float | None = None,
    max_iter: int | None = None,
    config: GoalSeekConfig | None = None,
) -> RootSolution:
    """Solve function(x) = target with a single algorithm.

    Parameters
    ----------
    function : callable
        f(x). Exceptions and non-real outputs at a probed point are
        treated as NaN.
    target : float
        Output value to reach.
    lower_bound, upper_bound : float
        Search interval, lower_bound < upper_bound.
    algorithm : str or Algorithm
        'brent' (default), 'bisection', 'newton' / 'newton-raphson', or
        any object implementing the Algorithm protocol.
    tol : float or None
        Convergence tolerance. If None, config.tolerance.
    max_iter : int or None
        Iteration budget. If None, config.max_iterations.
    config : GoalSeekConfig or None
        Settings source (default: DEFAULT_CONFIG).

    Returns
    -------
    RootSolution

    Examples
    --------
    >>> sol = find_root(lambda x: x**2, 4.0, 0.0, 10.0)
    >>> round(sol.value, 9)
    2.0
    """
    if not callable(function):
        raise ValidationError(
            f"function: expected a callable, got {type(function).__name__}"
        )
    cfg = config if config is not None else DEFAULT_CONFIG

    target = check_finite_scalar(target, "target")
    lower = check_finite_scalar(lower_bound, "lower_bound")
    upper = check_finite_scalar(upper_bound, "upper_bound")
    check_bounds(lower, upper)

    effective_tol = cfg.tolerance if tol is None else check_finite_scalar(tol, "tol")
    check_positive(effective_tol, "tol")
    effective_max_iter = (
        cfg.max_iterations if max_iter is None else check_max_iter(max_iter)
    )

    if isinstance(algorithm, str):
        algorithm_impl = get_algorithm(algorithm, DEFAULT_ALGORITHMS)
    else:
        algorithm_impl = algorithm

    result = algorithm_impl.solve(
        guard(function),
        target,
        lower,
        upper,
        effective_tol,
        effective_max_iter,
        relaxed_factor=cfg.relaxed_factor,
    )

    return RootSolution(_result=result, _target=target)
