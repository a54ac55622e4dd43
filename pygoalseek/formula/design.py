"""
Formula: immutable descriptor for a parametric formula.

Holds the expression string and the ordered set of variables it declares.
Validates at construction time, so downstream code trusts clean names.
The expression itself is only checked when validate() is called, since
that needs an evaluator.
"""

from __future__ import annotations

import keyword
import math
import re
from dataclasses import dataclass

from pygoalseek.core.exceptions import EvaluationError, FormulaError
from pygoalseek.core.protocols import Evaluator


_NAME_SEPARATORS = re.compile(r'[^A-Z0-9]+')


def normalize_name(name: str) -> str:
    """
    Canonical formula name: upper-case, runs of other characters become '_'.

    >>> normalize_name("  sip future-value ")
    'SIP_FUTURE_VALUE'
    """
    normalized = _NAME_SEPARATORS.sub('_', name.strip().upper()).strip('_')
    if not normalized:
        raise FormulaError(f"Formula name {name!r} has no alphanumeric characters")
    return normalized


@dataclass(frozen=True)
class Formula:
    """Immutable formula descriptor.

    Parameters
    ----------
    name : str
        Formula identifier, used to label results.
    expression : str
        Expression over the declared variables, e.g. "PV * (1 + r)^n".
    variables : tuple of str
        Declared variables, in order, without duplicates.
    output_variable : str or None
        Name of the quantity the formula computes (labeling only).
    description : str
        Free text.
    """

    name: str
    expression: str
    variables: tuple[str, ...]
    output_variable: str | None = None
    description: str = ''

    @classmethod
    def create(
        cls,
        name: str,
        expression: str,
        variables,
        *,
        output_variable: str | None = None,
        description: str = '',
    ) -> Formula:
        """Create and validate a formula descriptor.

        The name is normalized with normalize_name(). Duplicate variables
        are dropped, keeping the first occurrence.

        Raises
        ------
        FormulaError
            If the name, expression or variables are invalid.
        """
        if not isinstance(name, str):
            raise FormulaError(f"Formula name must be a string, got {name!r}")
        if not isinstance(expression, str) or not expression.strip():
            raise FormulaError("Formula expression must be a non-empty string")
        if isinstance(variables, str):
            raise FormulaError(
                "variables must be a sequence of names, not a single string"
            )

        declared: list[str] = []
        for variable in variables:
            if (not isinstance(variable, str) or not variable.isidentifier()
                    or keyword.iskeyword(variable)):
                raise FormulaError(
                    f"Invalid variable name {variable!r} in formula {name!r}"
                )
            if variable not in declared:
                declared.append(variable)

        if not declared:
            raise FormulaError(f"Formula {name!r} declares no variables")

        return cls(
            name=normalize_name(name),
            expression=expression.strip(),
            variables=tuple(declared),
            output_variable=output_variable,
            description=description or '',
        )

    def declares(self, variable: str) -> bool:
        """True if the formula declares the given variable."""
        return variable in self.variables

    def missing(self, values, *, exclude: str | None = None) -> tuple[str, ...]:
        """Declared variables (except `exclude`) that have no entry in values."""
        return tuple(
            v for v in self.variables
            if v != exclude and v not in values
        )

    def validate(self, evaluator: Evaluator | None = None) -> None:
        """Evaluate with every variable set to 1.0; the result must be finite.

        Raises
        ------
        FormulaError
            If the expression is malformed or the test value is NaN/inf.
        """
        if evaluator is None:
            from pygoalseek.formula.evaluator import DEFAULT_EVALUATOR
            evaluator = DEFAULT_EVALUATOR

        test_values = {v: 1.0 for v in self.variables}
        try:
            result = float(evaluator.evaluate(self.expression, test_values))
        except EvaluationError as e:
            raise FormulaError(f"Invalid formula: {e}") from e

        if not math.isfinite(result):
            raise FormulaError(
                f"Formula {self.name!r} produces invalid result with test values "
                f"(got {result})"
            )
