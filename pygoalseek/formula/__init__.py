"""
Formulas and the objective adapter.

Public API:
    Formula: immutable formula descriptor
    ExpressionEvaluator: default sympy-backed expression engine
    build_objective(evaluator, expression, known_values, seek_variable)
        -> x -> f(x)
    datasets: sample financial formulas

Example:
    >>> from pygoalseek.formula import Formula, build_objective, DEFAULT_EVALUATOR
    >>> fv = Formula.create('future value', 'PV * (1 + r)^n', ['PV', 'r', 'n'])
    >>> f = build_objective(DEFAULT_EVALUATOR, fv.expression, {'PV': 100, 'r': 0.05}, 'n')
    >>> round(f(2), 2)
    110.25
"""

from pygoalseek.formula.design import Formula, normalize_name
from pygoalseek.formula.evaluator import (
    DEFAULT_EVALUATOR,
    ExpressionEvaluator,
    compile_expression,
)
from pygoalseek.formula.objective import build_objective, guard
from pygoalseek.formula import datasets

__all__ = [
    "Formula",
    "normalize_name",
    "ExpressionEvaluator",
    "DEFAULT_EVALUATOR",
    "compile_expression",
    "build_objective",
    "guard",
    "datasets",
]
