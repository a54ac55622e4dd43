"""
Newton-Raphson backend.

Derivative-based root finding with a central-difference derivative.
Fast near the root, but fails outright where the function is flat.

Algorithm:
    x = (lower + upper) / 2
    Repeat up to max_iter times:
        Stop if |g(x)| < tol
        g'(x) ~ (g(x + h) - g(x - h)) / 2h,  h = 1e-8 * max(1, |x|)
        Abort if |g'(x)| < 1e-15
        x_new = clamp(x - g(x) / g'(x), lower, upper)
        Stop if |x_new - x| < tol
    On exhaustion accept x if |g(x)| < tol * relaxed_factor

The starting point is always the interval midpoint. Callers that have a
guess should narrow the interval around it instead.
"""

from __future__ import annotations

from typing import Callable

from pygoalseek.core.compute.timing import Timer
from pygoalseek.core.result import Result
from pygoalseek.core.status import STATUS_DERIVATIVE_TOO_SMALL
from pygoalseek.roots._common import (
    RootParams,
    converged_result,
    exhausted_result,
    residual,
    root_result,
)


DERIVATIVE_STEP = 1e-8
MIN_DERIVATIVE = 1e-15


class NewtonRaphsonAlgorithm:
    """
    Newton-Raphson with numerical differentiation and bound clamping.

    Stateless: safe to share between concurrent searches.
    """

    @property
    def name(self) -> str:
        return 'Newton-Raphson'

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
        Solve function(x) = target by Newton-Raphson iteration.

        A derivative estimate below 1e-15 in magnitude ends the attempt
        immediately with status 'derivative_too_small'; it is not retried.

        Returns
        -------
        Result[RootParams]
        """
        timer = Timer()
        timer.start()
        g = residual(function, target)
        lower = float(lower_bound)
        upper = float(upper_bound)
        info = {
            'method': 'newton_raphson',
            'tolerance': tolerance,
            'max_iter': max_iter,
            'start': (lower + upper) / 2.0,
        }

        x = (lower + upper) / 2.0
        fx = g(x)
        iterations = 0

        while iterations < max_iter:
            if abs(fx) < tolerance:
                timer.stop()
                return converged_result(
                    self.name, function, target, x, iterations,
                    info, timing=timer.result(),
                )

            derivative = central_difference(g, x)

            if abs(derivative) < MIN_DERIVATIVE:
                timer.stop()
                return root_result(
                    self.name, function, target, x,
                    converged=False,
                    iterations=iterations,
                    status=STATUS_DERIVATIVE_TOO_SMALL,
                    message="Derivative too small, method stuck",
                    info={**info, 'derivative': derivative},
                    timing=timer.result(),
                )

            x_new = x - fx / derivative

            # keep within the search domain
            if x_new < lower:
                x_new = lower
            if x_new > upper:
                x_new = upper

            if abs(x_new - x) < tolerance:
                timer.stop()
                return converged_result(
                    self.name, function, target, x_new, iterations + 1,
                    info, timing=timer.result(),
                )

            x = x_new
            fx = g(x)
            iterations += 1

        timer.stop()
        return exhausted_result(
            self.name, function, target, x, iterations,
            tolerance, relaxed_factor, info, timing=timer.result(),
        )


def central_difference(g: Callable[[float], float], x: float) -> float:
    """Central-difference derivative with a step scaled to |x|."""
    h = DERIVATIVE_STEP * max(1.0, abs(x))
    return (g(x + h) - g(x - h)) / (2.0 * h)
