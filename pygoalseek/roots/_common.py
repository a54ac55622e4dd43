"""
Parameter payload and shared result builders for root finding.

RootParams is the frozen payload carried inside a Result[P] envelope.
The builders guarantee that achieved_value and error always come from a
single evaluation of f at the reported value.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from typing import Any, Callable

import numpy as np

from pygoalseek.core.result import Result
from pygoalseek.core.status import (
    STATUS_BRACKET_NOT_FOUND,
    STATUS_CONVERGED,
    STATUS_MAX_ITERATIONS,
    STATUS_UNDEFINED_VALUE,
)


MSG_CONVERGED = "Converged successfully"
MSG_MAX_ITERATIONS = "Maximum iterations reached"
MSG_UNDEFINED_VALUE = "Stopped at a point where the function has no finite value"


@dataclass(frozen=True)
class RootParams:
    """Outcome of one root-finding attempt."""

    converged: bool          # within tolerance (or relaxed acceptance)
    value: float             # solved input x; NaN if nothing was attempted
    achieved_value: float    # f(x), the formula output at x
    error: float             # |f(x) - target|; inf if nothing was attempted
    iterations: int          # refinement steps actually taken
    message: str             # human-readable outcome
    status: str              # one of pygoalseek.core.status


def residual(function: Callable[[float], float], target: float) -> Callable[[float], float]:
    """Shift f so that the root of g(x) = f(x) - target is the goal."""
    def g(x: float) -> float:
        return float(function(x)) - target
    return g


def root_result(
    name: str,
    function: Callable[[float], float],
    target: float,
    x: float,
    *,
    converged: bool,
    iterations: int,
    status: str,
    message: str,
    info: dict[str, Any],
    timing: dict[str, float] | None = None,
    warnings: list[str] | tuple[str, ...] = (),
) -> Result[RootParams]:
    """Evaluate f once at x and wrap the outcome."""
    achieved = float(function(x))
    params = RootParams(
        converged=bool(converged),
        value=float(x),
        achieved_value=achieved,
        error=abs(achieved - target),
        iterations=int(iterations),
        message=message,
        status=status,
    )
    return Result(
        params=params,
        info=info,
        timing=timing,
        backend_name=name,
        warnings=tuple(warnings),
    )


def converged_result(
    name: str,
    function: Callable[[float], float],
    target: float,
    x: float,
    iterations: int,
    info: dict[str, Any],
    timing: dict[str, float] | None = None,
    warnings: list[str] | tuple[str, ...] = (),
) -> Result[RootParams]:
    """
    Result after a stopping test passed.

    The interval-width tests can pass on NaN samples alone; such an end
    point is reported as not converged with status 'undefined_value'.
    """
    result = root_result(
        name, function, target, x,
        converged=True,
        iterations=iterations,
        status=STATUS_CONVERGED,
        message=MSG_CONVERGED,
        info=info,
        timing=timing,
        warnings=warnings,
    )
    if math.isfinite(result.params.error):
        return result
    return replace(
        result,
        params=replace(
            result.params,
            converged=False,
            status=STATUS_UNDEFINED_VALUE,
            message=MSG_UNDEFINED_VALUE,
        ),
    )


def exhausted_result(
    name: str,
    function: Callable[[float], float],
    target: float,
    x: float,
    iterations: int,
    tolerance: float,
    relaxed_factor: float,
    info: dict[str, Any],
    timing: dict[str, float] | None = None,
    warnings: list[str] | tuple[str, ...] = (),
) -> Result[RootParams]:
    """
    Result after the iteration budget ran out.

    A residual below tolerance * relaxed_factor is still accepted as
    converged; the acceptance is recorded as a warning.
    """
    result = root_result(
        name, function, target, x,
        converged=False,
        iterations=iterations,
        status=STATUS_MAX_ITERATIONS,
        message=MSG_MAX_ITERATIONS,
        info=info,
        timing=timing,
        warnings=warnings,
    )
    relaxed = tolerance * relaxed_factor
    if not result.params.error < relaxed:
        return result

    params = RootParams(
        converged=True,
        value=result.params.value,
        achieved_value=result.params.achieved_value,
        error=result.params.error,
        iterations=result.params.iterations,
        message=result.params.message,
        status=result.params.status,
    )
    return Result(
        params=params,
        info={**info, 'relaxed_acceptance': True},
        timing=timing,
        backend_name=name,
        warnings=tuple(warnings) + (
            f"{name} exhausted {iterations} iterations; accepted residual "
            f"{params.error:.3e} under relaxed tolerance {relaxed:.3e}",
        ),
    )


def no_bracket_result(
    name: str,
    message: str,
    info: dict[str, Any],
    timing: dict[str, float] | None = None,
) -> Result[RootParams]:
    """Result when no sign change could be found; nothing was attempted."""
    params = RootParams(
        converged=False,
        value=np.nan,
        achieved_value=np.nan,
        error=np.inf,
        iterations=0,
        message=message,
        status=STATUS_BRACKET_NOT_FOUND,
    )
    return Result(
        params=params,
        info=info,
        timing=timing,
        backend_name=name,
        warnings=(),
    )
