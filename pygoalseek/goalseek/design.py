"""
GoalSeekDesign: immutable, validated goal-seek request.

Checks that the seek variable is declared by the formula and that every
other declared variable has a known value, then resolves the search
window. Validates at construction time, so the orchestrator trusts
clean input and never starts an algorithm on a malformed request.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from pygoalseek.core.config import DEFAULT_CONFIG, GoalSeekConfig
from pygoalseek.core.exceptions import (
    MissingValueError,
    UnknownVariableError,
    ValidationError,
)
from pygoalseek.core.validation import (
    check_bounds,
    check_finite_scalar,
    check_values_mapping,
    check_variable_name,
)
from pygoalseek.formula.design import Formula


@dataclass(frozen=True)
class GoalSeekDesign:
    """Immutable goal-seek request.

    Parameters
    ----------
    formula : Formula
        The formula to invert.
    known_values : Mapping[str, float]
        Fixed values (read-only view of a private copy).
    seek_variable : str
        The variable to solve for.
    target : float
        Desired formula output.
    lower_bound, upper_bound : float
        Resolved search window.
    initial_guess : float or None
        Guess used to recenter the window, if any.
    bounds_source : str
        'explicit', 'default', 'mixed' or 'initial_guess'.
    """

    formula: Formula
    known_values: Mapping[str, float]
    seek_variable: str
    target: float
    lower_bound: float
    upper_bound: float
    initial_guess: float | None
    bounds_source: str

    @classmethod
    def for_seek(
        cls,
        formula: Formula,
        known_values,
        seek_variable: str,
        target,
        *,
        lower_bound=None,
        upper_bound=None,
        initial_guess=None,
        config: GoalSeekConfig | None = None,
    ) -> GoalSeekDesign:
        """Create and validate a goal-seek request.

        Bounds resolution: explicit bounds override the configured
        defaults. With an initial guess the window is recentered on it
        with width max(|guess| * 10, upper - lower).

        Raises
        ------
        UnknownVariableError
            If seek_variable is not declared by the formula.
        MissingValueError
            If a declared variable other than seek_variable has no value.
        ValidationError
            If target, known values, bounds or guess are not finite
            numbers, or the resolved window is empty.
        """
        cfg = config if config is not None else DEFAULT_CONFIG

        if not isinstance(formula, Formula):
            raise ValidationError(
                f"formula: expected a Formula, got {type(formula).__name__}"
            )
        check_variable_name(seek_variable, "seek_variable")
        known = check_values_mapping(known_values, "known_values")

        if not formula.declares(seek_variable):
            raise UnknownVariableError(
                f"Seek variable '{seek_variable}' is not a valid variable "
                f"in formula '{formula.name}'",
                variable=seek_variable,
                formula_name=formula.name,
            )

        missing = formula.missing(known, exclude=seek_variable)
        if missing:
            raise MissingValueError(
                f"Missing value for variable: {', '.join(missing)}",
                variables=missing,
            )

        target_value = check_finite_scalar(target, "target")

        if lower_bound is None:
            lower = cfg.default_lower_bound
        else:
            lower = check_finite_scalar(lower_bound, "lower_bound")
        if upper_bound is None:
            upper = cfg.default_upper_bound
        else:
            upper = check_finite_scalar(upper_bound, "upper_bound")

        if lower_bound is None and upper_bound is None:
            source = 'default'
        elif lower_bound is not None and upper_bound is not None:
            source = 'explicit'
        else:
            source = 'mixed'

        guess = None
        if initial_guess is not None:
            guess = check_finite_scalar(initial_guess, "initial_guess")
            width = max(abs(guess) * 10, upper - lower)
            lower = guess - width / 2
            upper = guess + width / 2
            source = 'initial_guess'

        check_bounds(lower, upper)

        return cls(
            formula=formula,
            known_values=MappingProxyType(known),
            seek_variable=seek_variable,
            target=target_value,
            lower_bound=lower,
            upper_bound=upper,
            initial_guess=guess,
            bounds_source=source,
        )

    @property
    def formula_name(self) -> str:
        return self.formula.name

    def all_values(self, value: float) -> dict[str, float]:
        """Known values merged with {seek_variable: value}."""
        merged = dict(self.known_values)
        merged[self.seek_variable] = value
        return merged
