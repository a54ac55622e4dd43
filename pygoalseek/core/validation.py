"""
Input validation utilities for pygoalseek.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except float() on real numbers)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import math
from numbers import Real
from typing import Any, Mapping

from pygoalseek.core.exceptions import ValidationError


def check_scalar(value: Any, name: str) -> float:
    """
    Validate and convert input to a Python float.

    Accepts ints, floats and numpy real scalars. Rejects bools, strings
    and anything else that is not a real number.

    Args:
        value: Input to validate
        name: Parameter name for error messages

    Returns:
        The value as float

    Raises:
        ValidationError: If input is not a real number
    """
    if isinstance(value, bool) or not isinstance(value, Real):
        raise ValidationError(
            f"{name}: expected a real number, got {type(value).__name__} ({value!r})"
        )
    return float(value)


def check_finite(value: float, name: str) -> None:
    """
    Verify a scalar is neither NaN nor infinite.

    Args:
        value: Scalar to check
        name: Parameter name for error messages

    Raises:
        ValidationError: If value is non-finite
    """
    if not math.isfinite(value):
        raise ValidationError(f"{name}: must be finite, got {value}")


def check_finite_scalar(value: Any, name: str) -> float:
    """Convert with check_scalar() and verify the result is finite."""
    result = check_scalar(value, name)
    check_finite(result, name)
    return result


def check_positive(value: float, name: str) -> None:
    """
    Verify a scalar is strictly positive.

    Raises:
        ValidationError: If value <= 0
    """
    if not value > 0:
        raise ValidationError(f"{name}: must be > 0, got {value}")


def check_max_iter(value: Any, name: str = "max_iter") -> int:
    """
    Validate an iteration budget.

    Args:
        value: Candidate iteration count
        name: Parameter name for error messages

    Returns:
        The value as int

    Raises:
        ValidationError: If value is not an integer >= 1
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(
            f"{name}: expected an integer, got {type(value).__name__} ({value!r})"
        )
    if value < 1:
        raise ValidationError(f"{name}: must be >= 1, got {value}")
    return int(value)


def check_bounds(lower: float, upper: float) -> None:
    """
    Verify a search interval is non-empty.

    Raises:
        ValidationError: If lower >= upper
    """
    if not lower < upper:
        raise ValidationError(
            f"lower_bound must be less than upper_bound, got [{lower}, {upper}]"
        )


def check_variable_name(name: Any, param: str) -> str:
    """
    Verify a variable name is a non-empty string.

    Raises:
        ValidationError: If name is not a non-blank string
    """
    if not isinstance(name, str) or not name.strip():
        raise ValidationError(f"{param}: expected a non-empty string, got {name!r}")
    return name


def check_values_mapping(values: Any, name: str) -> dict[str, float]:
    """
    Validate a variable-to-value mapping.

    Every key must be a non-empty string and every value a finite real.

    Args:
        values: Mapping to validate
        name: Parameter name for error messages

    Returns:
        A new dict with float values, in the mapping's iteration order

    Raises:
        ValidationError: If the mapping or any entry is invalid
    """
    if not isinstance(values, Mapping):
        raise ValidationError(
            f"{name}: expected a mapping of variable name to value, "
            f"got {type(values).__name__}"
        )
    result: dict[str, float] = {}
    for key, value in values.items():
        check_variable_name(key, f"{name} key")
        result[key] = check_finite_scalar(value, f"{name}[{key!r}]")
    return result
