"""
Exception hierarchy for pygoalseek.

All exceptions inherit from GoalSeekError to allow catching any
library-specific error. Domain-specific exceptions should inherit from
the appropriate base class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Numeric failures inside an algorithm are NOT exceptions; they are
      reported through a non-converged Result. Only malformed requests raise.
"""

from __future__ import annotations

from typing import Any, Mapping


class GoalSeekError(Exception):
    """Base exception for all pygoalseek errors."""
    pass


class ValidationError(GoalSeekError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks, before any
    root-finding algorithm runs.
    """
    pass


class UnknownVariableError(ValidationError):
    """
    The variable to seek is not declared by the formula.

    Attributes:
        variable: The requested seek variable
        formula_name: Name of the formula that was searched
    """

    def __init__(
        self,
        message: str,
        variable: str | None = None,
        formula_name: str | None = None,
    ):
        super().__init__(message)
        self.variable = variable
        self.formula_name = formula_name


class MissingValueError(ValidationError):
    """
    One or more declared variables have no known value.

    Attributes:
        variables: Names of the variables without a value, in formula order
    """

    def __init__(self, message: str, variables: tuple[str, ...] = ()):
        super().__init__(message)
        self.variables = tuple(variables)


class ConfigurationError(ValidationError):
    """
    A configuration value is invalid.

    Attributes:
        key: The offending configuration key, if known
    """

    def __init__(self, message: str, key: str | None = None):
        super().__init__(message)
        self.key = key


class FormulaError(GoalSeekError):
    """
    A formula is malformed or cannot produce a finite value.
    """
    pass


class FormulaNotFoundError(FormulaError):
    """
    No formula with the requested name exists in the catalog.

    Attributes:
        name: The name that was looked up
    """

    def __init__(self, message: str, name: str | None = None):
        super().__init__(message)
        self.name = name


class EvaluationError(GoalSeekError):
    """
    The expression engine failed to evaluate a formula at a point.

    The objective adapter absorbs this error (the sample becomes NaN) so
    that probing algorithms never crash on out-of-domain points. It only
    reaches the caller through direct evaluation.

    Attributes:
        expression: The expression being evaluated
        variables: Variable bindings at the failing point
    """

    def __init__(
        self,
        message: str,
        expression: str | None = None,
        variables: Mapping[str, Any] | None = None,
    ):
        super().__init__(message)
        self.expression = expression
        self.variables = dict(variables) if variables is not None else None
