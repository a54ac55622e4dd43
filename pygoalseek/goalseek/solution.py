"""
Solution wrapper for goal-seek results.

Wraps the orchestrator's Result[RootParams] together with the request
design, and exposes the response fields: the root outcome plus the
formula name, seek variable, target and merged variable assignment.
"""

from __future__ import annotations

from typing import Any

from pygoalseek.core.result import Result
from pygoalseek.roots._common import RootParams
from pygoalseek.goalseek.design import GoalSeekDesign


class GoalSeekSolution:
    """Outcome of seek().

    Properties mirror the goal-seek response: success, computed value,
    achieved value, error, iterations, algorithm and all variable values.
    """

    __slots__ = ('_result', '_design')

    def __init__(self, _result: Result[RootParams], _design: GoalSeekDesign) -> None:
        self._result = _result
        self._design = _design

    # -- Root outcome --

    @property
    def converged(self) -> bool:
        return self._result.params.converged

    @property
    def success(self) -> bool:
        """Alias of converged."""
        return self._result.params.converged

    @property
    def value(self) -> float:
        """Solved value of the seek variable (NaN if nothing was attempted)."""
        return self._result.params.value

    computed_value = value

    @property
    def achieved_value(self) -> float:
        """Formula output at the solved value."""
        return self._result.params.achieved_value

    @property
    def error(self) -> float:
        """Residual |achieved_value - target_value|."""
        return self._result.params.error

    @property
    def iterations(self) -> int:
        return self._result.params.iterations

    @property
    def message(self) -> str:
        return self._result.params.message

    @property
    def status(self) -> str:
        return self._result.params.status

    @property
    def algorithm_name(self) -> str:
        """Algorithm that produced the reported result."""
        return self._result.backend_name

    # -- Request --

    @property
    def formula_name(self) -> str:
        return self._design.formula_name

    @property
    def seek_variable(self) -> str:
        return self._design.seek_variable

    @property
    def target_value(self) -> float:
        return self._design.target

    @property
    def lower_bound(self) -> float:
        """Resolved lower end of the search window."""
        return self._design.lower_bound

    @property
    def upper_bound(self) -> float:
        """Resolved upper end of the search window."""
        return self._design.upper_bound

    @property
    def all_values(self) -> dict[str, float]:
        """Known values plus the solved seek variable."""
        return self._design.all_values(self.value)

    # -- Diagnostics --

    @property
    def attempts(self) -> tuple[dict[str, Any], ...]:
        """One record per algorithm tried, in order."""
        return self._result.info['attempts']

    @property
    def fallback_used(self) -> bool:
        return self._result.info['fallback_used']

    @property
    def timing(self):
        return self._result.timing

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def result(self) -> Result[RootParams]:
        """The underlying Result envelope."""
        return self._result

    @property
    def design(self) -> GoalSeekDesign:
        return self._design

    def to_dict(self) -> dict[str, Any]:
        """Response record with plain Python values."""
        return {
            'success': self.success,
            'formula_name': self.formula_name,
            'seek_variable': self.seek_variable,
            'computed_value': self.value,
            'target_value': self.target_value,
            'achieved_value': self.achieved_value,
            'error': self.error,
            'iterations': self.iterations,
            'algorithm': self.algorithm_name,
            'all_values': self.all_values,
            'message': self.message,
        }

    def summary(self) -> str:
        """Plain-text goal-seek report."""
        lines = []
        lines.append(f"Goal seek: {self.formula_name}")
        lines.append(f"  {self._design.formula.expression} = {self.target_value:.12g}")
        lines.append("")
        lines.append(
            f"  solve for {self.seek_variable} in "
            f"[{self.lower_bound:.6g}, {self.upper_bound:.6g}]"
        )
        lines.append("")
        lines.append(
            f"  {self.seek_variable} = {self.value:.12g}"
            f"   ({'converged' if self.converged else 'NOT converged'})"
        )
        lines.append(f"  achieved value = {self.achieved_value:.12g}")
        lines.append(f"  error = {self.error:.3e}, iterations = {self.iterations}")
        lines.append(f"  algorithm = {self.algorithm_name}: {self.message}")
        lines.append("")

        lines.append(f"  {'algorithm':<16s}  {'converged':>9s}  {'error':>10s}  {'iter':>6s}")
        for attempt in self.attempts:
            lines.append(
                f"  {attempt['algorithm']:<16s}  {str(attempt['converged']):>9s}  "
                f"{attempt['error']:10.3e}  {attempt['iterations']:6d}"
            )

        lines.append("")
        lines.append("  Values:")
        for name, value in self.all_values.items():
            lines.append(f"    {name} = {value:.12g}")

        if self.warnings:
            lines.append("")
            lines.append("Warnings:")
            lines.extend(f"  - {w}" for w in self.warnings)
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"GoalSeekSolution(formula={self.formula_name!r}, "
            f"{self.seek_variable}={self.value!r}, converged={self.converged}, "
            f"algorithm={self.algorithm_name!r})"
        )
