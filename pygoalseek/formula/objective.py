"""
Objective function adapter.

Turns a multi-variable formula plus fixed known values into a function of
the single seek variable. Any failure inside the expression engine becomes
NaN, so probing algorithms treat out-of-domain points (division by zero at
a probed x, log of a negative number) as uninformative samples instead of
crashing.
"""

from __future__ import annotations

from typing import Callable, Mapping

import numpy as np

from pygoalseek.core.protocols import Evaluator

def build_objective(
    evaluator: Evaluator,
    expression: str,
    known_values: Mapping[str, float],
    seek_variable: str,
) -> Callable[[float], float]:
    """
    Bind known values and return x -> f(x).

    Parameters
    ----------
    evaluator : Evaluator
        Expression engine.
    expression : str
        Formula expression.
    known_values : mapping
        Fixed variable values. Copied here; later changes to the caller's
        mapping do not affect the objective.
    seek_variable : str
        The free variable.

    Returns
    -------
    callable
        The raw formula value f(x) (not f(x) - target). NaN on any
        evaluation failure.
    """
    bindings = {name: float(value) for name, value in known_values.items()}

    def objective(x: float) -> float:
        variables = dict(bindings)
        variables[seek_variable] = float(x)
        try:
            return float(evaluator.evaluate(expression, variables))
        except Exception:
            # the engine's failure modes are open-ended; all mean "no value here"
            return np.nan

    return objective


def guard(function: Callable[[float], float]) -> Callable[[float], float]:
    """
    Wrap a plain callable so that failures and non-real outputs become NaN.

    Used for functions handed to find_root() directly, which do not pass
    through build_objective().
    """
    def guarded(x: float) -> float:
        try:
            return float(function(x))
        except (ArithmeticError, ValueError, TypeError):
            return np.nan

    return guarded
