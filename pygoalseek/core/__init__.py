"""
Core infrastructure for pygoalseek.

This module provides shared abstractions and utilities used by the
domain-specific submodules (roots, formula, goalseek).

Key components:
    protocols: Evaluator, Algorithm protocols
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    config: GoalSeekConfig solver settings
    status: Outcome status constants
    compute: Timing utilities
"""

from pygoalseek.core.protocols import Algorithm, Evaluator
from pygoalseek.core.result import Result
from pygoalseek.core.config import GoalSeekConfig, DEFAULT_CONFIG
from pygoalseek.core.exceptions import (
    GoalSeekError,
    ValidationError,
    UnknownVariableError,
    MissingValueError,
    ConfigurationError,
    FormulaError,
    FormulaNotFoundError,
    EvaluationError,
)

__all__ = [
    # Protocols
    "Algorithm",
    "Evaluator",
    # Result
    "Result",
    # Configuration
    "GoalSeekConfig",
    "DEFAULT_CONFIG",
    # Exceptions
    "GoalSeekError",
    "ValidationError",
    "UnknownVariableError",
    "MissingValueError",
    "ConfigurationError",
    "FormulaError",
    "FormulaNotFoundError",
    "EvaluationError",
]
