"""
pygoalseek: numeric goal seek for parametric formulas.

Finds the input value that makes a formula produce a target output,
using interchangeable scalar root-finding algorithms (Brent, Bisection,
Newton-Raphson) with automatic fallback.

Submodules:
    core: exceptions, Result envelope, configuration, validation
    roots: root-finding algorithms and find_root()
    formula: formula descriptor, expression engine, objective adapter
    goalseek: goal-seek orchestrator
"""

__version__ = "0.1.0"

from pygoalseek import roots
from pygoalseek import formula
from pygoalseek import goalseek
from pygoalseek.core.config import GoalSeekConfig
from pygoalseek.formula.design import Formula
from pygoalseek.roots.solvers import find_root
from pygoalseek.goalseek.solvers import evaluate_formula, seek

__all__ = [
    "__version__",
    "roots",
    "formula",
    "goalseek",
    "seek",
    "evaluate_formula",
    "find_root",
    "Formula",
    "GoalSeekConfig",
]
