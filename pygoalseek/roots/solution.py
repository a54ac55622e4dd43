"""
Solution wrapper for single-algorithm root finding.

Wraps a Result[RootParams] and exposes user-friendly properties
with a summary() method.
"""

from __future__ import annotations

from pygoalseek.core.result import Result
from pygoalseek.roots._common import RootParams


class RootSolution:
    """Outcome of find_root()."""

    __slots__ = ('_result', '_target')

    def __init__(self, _result: Result[RootParams], _target: float) -> None:
        self._result = _result
        self._target = _target

    # -- Properties delegating to RootParams --

    @property
    def converged(self) -> bool:
        return self._result.params.converged

    @property
    def value(self) -> float:
        """Solved input x (NaN if no bracket was found)."""
        return self._result.params.value

    @property
    def achieved_value(self) -> float:
        """f(x) at the solved input."""
        return self._result.params.achieved_value

    @property
    def error(self) -> float:
        """Residual |f(x) - target|."""
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
    def target(self) -> float:
        return self._target

    @property
    def algorithm_name(self) -> str:
        return self._result.backend_name

    @property
    def info(self) -> dict:
        return self._result.info

    @property
    def timing(self):
        return self._result.timing

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    @property
    def result(self) -> Result[RootParams]:
        """The underlying Result envelope."""
        return self._result

    def summary(self) -> str:
        """Plain-text report of the root-finding outcome."""
        lines = [
            f"Call: find_root(algorithm={self.algorithm_name!r})",
            "",
            f"  status:         {self.status}"
            f"{' (converged)' if self.converged else ''}",
            f"  value:          {self.value:.12g}",
            f"  target:         {self.target:.12g}",
            f"  achieved value: {self.achieved_value:.12g}",
            f"  error:          {self.error:.3e}",
            f"  iterations:     {self.iterations}",
            f"  message:        {self.message}",
        ]
        bracket = self.info.get('bracket')
        if bracket is not None:
            lines.append(f"  bracket:        [{bracket[0]:.12g}, {bracket[1]:.12g}]")
        if self.warnings:
            lines.append("")
            lines.append("Warnings:")
            lines.extend(f"  - {w}" for w in self.warnings)
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"RootSolution(algorithm={self.algorithm_name!r}, "
            f"converged={self.converged}, value={self.value!r}, "
            f"error={self.error!r}, iterations={self.iterations})"
        )
