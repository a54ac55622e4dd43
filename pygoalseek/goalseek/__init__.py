"""
Goal seek: invert a formula for one variable.

Public API:
    seek(formula, known_values, seek_variable, target, ...) -> GoalSeekSolution
    evaluate_formula(formula, values) -> float

Example:
    >>> from pygoalseek.goalseek import seek
    >>> from pygoalseek.formula import datasets
    >>> sol = seek(datasets.FUTURE_VALUE, {'PV': 1000, 'n': 10}, 'r', 2000,
    ...            lower_bound=0, upper_bound=1)
    >>> print(sol.summary())
"""

from pygoalseek.goalseek.design import GoalSeekDesign
from pygoalseek.goalseek.solution import GoalSeekSolution
from pygoalseek.goalseek.solvers import PRIMARY_ALGORITHM, evaluate_formula, seek

__all__ = [
    "seek",
    "evaluate_formula",
    "GoalSeekDesign",
    "GoalSeekSolution",
    "PRIMARY_ALGORITHM",
]
