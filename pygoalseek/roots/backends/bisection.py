"""
Bisection backend.

Reliable but slow: halves a bracketing interval until the midpoint
residual or the half-width falls below tolerance.

Algorithm:
    g(x) = f(x) - target
    If g(lower) * g(upper) > 0, search for a bracket (see _find_bracket)
    Repeat up to max_iter times:
        c = (a + b) / 2
        Stop if |g(c)| < tol or (b - a) / 2 < tol
        Keep the half where the sign changes
    On exhaustion accept c if |g(c)| < tol * relaxed_factor
"""

from __future__ import annotations

from typing import Callable

from pygoalseek.core.compute.timing import Timer
from pygoalseek.core.result import Result
from pygoalseek.roots._common import (
    RootParams,
    converged_result,
    exhausted_result,
    no_bracket_result,
    residual,
)


class BisectionAlgorithm:
    """
    Bracketing bisection with automatic bracket repair.

    Stateless: safe to share between concurrent searches.
    """

    @property
    def name(self) -> str:
        return 'Bisection'

    def solve(
        self,
        function: Callable[[float], float],
        target: float,
        lower_bound: float,
        upper_bound: float,
        tolerance: float,
        max_iter: int,
        *,
        relaxed_factor: float = 100.0,
    ) -> Result[RootParams]:
        """
        Solve function(x) = target by bisection.

        Parameters
        ----------
        function : callable
            Raw objective f(x). NaN samples are treated as no sign change.
        target : float
            Output value to reach.
        lower_bound, upper_bound : float
            Initial search interval.
        tolerance : float
            Residual and half-width convergence threshold.
        max_iter : int
            Maximum bisection steps. max_iter // 4 probes are allowed for
            bracket repair.
        relaxed_factor : float
            Near-converged acceptance multiplier on tolerance.

        Returns
        -------
        Result[RootParams]
        """
        timer = Timer()
        timer.start()
        g = residual(function, target)
        info = {
            'method': 'bisection',
            'tolerance': tolerance,
            'max_iter': max_iter,
        }
        warnings_list: list[str] = []

        a = float(lower_bound)
        b = float(upper_bound)
        fa = g(a)
        fb = g(b)

        if fa * fb > 0:
            bracket = _find_bracket(g, a, b, max_iter // 4)
            if bracket is None:
                timer.stop()
                return no_bracket_result(
                    self.name,
                    "Could not find bracketing interval. "
                    "Function may not cross target in given range.",
                    info,
                    timing=timer.result(),
                )
            a, b = bracket
            fa = g(a)
            warnings_list.append(
                f"Bounds [{lower_bound:g}, {upper_bound:g}] did not bracket the "
                f"target; using [{a:g}, {b:g}]"
            )
        info['bracket'] = (a, b)

        iterations = 0
        c = a
        while iterations < max_iter:
            c = (a + b) / 2.0
            fc = g(c)

            if abs(fc) < tolerance or (b - a) / 2.0 < tolerance:
                timer.stop()
                return converged_result(
                    self.name, function, target, c, iterations + 1,
                    info, timing=timer.result(), warnings=warnings_list,
                )

            iterations += 1

            if fa * fc < 0:
                b = c
            else:
                a = c
                fa = fc

        timer.stop()
        return exhausted_result(
            self.name, function, target, c, iterations,
            tolerance, relaxed_factor, info,
            timing=timer.result(), warnings=warnings_list,
        )


def _find_bracket(
    g: Callable[[float], float],
    start: float,
    end: float,
    max_attempts: int,
) -> tuple[float, float] | None:
    """
    Walk from start in fixed steps looking for a sign change.

    The walk starts with step (end - start) / 10. Whenever it passes end,
    the step doubles and the walk restarts further left, at
    start - step * i. Each probe counts as one attempt.
    """
    step = (end - start) / 10.0
    a = start
    fa = g(a)

    for i in range(max_attempts):
        b = a + step
        fb = g(b)

        if fa * fb < 0:
            return a, b

        a = b
        fa = fb

        if a > end:
            step *= 2
            a = start - step * i
            fa = g(a)

    return None
