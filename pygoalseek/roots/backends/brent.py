"""
Brent backend (default algorithm).

Combines inverse quadratic interpolation, the secant method and
bisection. Interpolation steps are taken while they make good progress;
otherwise the step falls back to bisection, which keeps the guaranteed
convergence of a bracketing method.

Algorithm (Brent, 1973, in the a/b/c/d/mflag formulation):
    a, b bracket the root with |g(a)| >= |g(b)|; b is the best estimate
    c is the previous b, d the one before
    Repeat up to max_iter times:
        Stop if |g(b)| < tol or |b - a| < tol
        s = inverse quadratic interpolation through a, b, c if
            g(a), g(b), g(c) are distinct, else secant through a, b
        Use bisection instead when
            s is not between (3a + b) / 4 and b, or
            the step is not shrinking fast enough (mflag / |c - d|), or
            the previous gap is already below tol
        d, c = c, b
        Replace a or b by s so that the sign change is kept
        Swap a and b if |g(a)| < |g(b)|

References:
    Brent, R. P. (1973). Algorithms for Minimization without Derivatives,
        Ch. 4. Prentice-Hall.
"""

from __future__ import annotations

from typing import Callable

import numpy as np

from pygoalseek.core.compute.timing import Timer
from pygoalseek.core.result import Result
from pygoalseek.roots._common import (
    RootParams,
    converged_result,
    exhausted_result,
    no_bracket_result,
    residual,
)


GRID_POINTS = 50


class BrentAlgorithm:
    """
    Brent's hybrid root finder with grid-based bracket search.

    Stateless: safe to share between concurrent searches.
    """

    @property
    def name(self) -> str:
        return 'Brent'

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
        Solve function(x) = target by Brent's method.

        If the bounds do not bracket the target, a 50-interval grid over
        the bounds is scanned for a sign change, then grids over
        symmetrically widened ranges (up to max_iter // 4 widenings).

        Returns
        -------
        Result[RootParams]
        """
        timer = Timer()
        timer.start()
        g = residual(function, target)
        info = {
            'method': 'brent',
            'tolerance': tolerance,
            'max_iter': max_iter,
        }
        warnings_list: list[str] = []

        a = float(lower_bound)
        b = float(upper_bound)
        fa = g(a)
        fb = g(b)

        if fa * fb > 0:
            found = _find_bracket(g, a, b, max_iter // 4)
            if found is None:
                timer.stop()
                return no_bracket_result(
                    self.name,
                    "Could not find bracketing interval",
                    info,
                    timing=timer.result(),
                )
            (a, b), expansions = found
            fa = g(a)
            fb = g(b)
            info['bracket_expansions'] = expansions
            warnings_list.append(
                f"Bounds [{lower_bound:g}, {upper_bound:g}] did not bracket the "
                f"target; using [{a:g}, {b:g}] after {expansions} expansion(s)"
            )
        info['bracket'] = (a, b)

        if abs(fa) < abs(fb):
            a, b = b, a
            fa, fb = fb, fa

        c = a
        fc = fa
        d = 0.0
        mflag = True
        iterations = 0

        while iterations < max_iter:
            if abs(fb) < tolerance or abs(b - a) < tolerance:
                timer.stop()
                return converged_result(
                    self.name, function, target, b, iterations,
                    info, timing=timer.result(), warnings=warnings_list,
                )

            s = _interpolate(a, b, c, fa, fb, fc)

            if s is None or _needs_bisection(s, a, b, c, d, mflag, tolerance):
                s = (a + b) / 2.0
                mflag = True
            else:
                mflag = False

            fs = g(s)
            d = c
            c = b
            fc = fb

            if fa * fs < 0:
                b = s
                fb = fs
            else:
                a = s
                fa = fs

            if abs(fa) < abs(fb):
                a, b = b, a
                fa, fb = fb, fa

            iterations += 1

        timer.stop()
        return exhausted_result(
            self.name, function, target, b, iterations,
            tolerance, relaxed_factor, info,
            timing=timer.result(), warnings=warnings_list,
        )


def _interpolate(
    a: float, b: float, c: float,
    fa: float, fb: float, fc: float,
) -> float | None:
    """
    Candidate step: inverse quadratic interpolation or secant.

    Returns None when a denominator vanishes; the caller bisects instead.
    """
    if fa != fc and fb != fc:
        den_a = (fa - fb) * (fa - fc)
        den_b = (fb - fa) * (fb - fc)
        den_c = (fc - fa) * (fc - fb)
        if den_a == 0 or den_b == 0 or den_c == 0:
            return None
        return (
            a * fb * fc / den_a
            + b * fa * fc / den_b
            + c * fa * fb / den_c
        )

    if fb == fa:
        return None
    return b - fb * (b - a) / (fb - fa)


def _needs_bisection(
    s: float, a: float, b: float, c: float, d: float,
    mflag: bool, tolerance: float,
) -> bool:
    """Brent's five rejection tests for an interpolated step."""
    q = (3 * a + b) / 4
    # False for NaN s, which forces bisection
    between = (q < s < b) or (b < s < q)
    if not between:
        return True
    if mflag and abs(s - b) >= abs(b - c) / 2:
        return True
    if not mflag and abs(s - b) >= abs(c - d) / 2:
        return True
    if mflag and abs(b - c) < tolerance:
        return True
    if not mflag and abs(c - d) < tolerance:
        return True
    return False


def _scan(
    g: Callable[[float], float],
    lo: float,
    hi: float,
    n_points: int = GRID_POINTS,
) -> tuple[float, float] | None:
    """First sign change on an n_points-interval grid over [lo, hi]."""
    step = (hi - lo) / n_points
    xs = lo + np.arange(n_points + 1) * step
    gx = np.array([g(float(x)) for x in xs], dtype=np.float64)
    with np.errstate(over='ignore', invalid='ignore'):
        changes = np.flatnonzero(gx[:-1] * gx[1:] < 0)
    if changes.size == 0:
        return None
    i = int(changes[0])
    return float(xs[i]), float(xs[i + 1])


def _find_bracket(
    g: Callable[[float], float],
    start: float,
    end: float,
    max_attempts: int,
) -> tuple[tuple[float, float], int] | None:
    """
    Grid search for a sign change, widening the range on failure.

    Attempt 0 scans [start, end]; attempt i scans
    [start - i * w, end + i * w] with w = end - start.

    Returns:
        ((a, b), attempts_used) or None
    """
    width = end - start
    for attempt in range(max_attempts + 1):
        bracket = _scan(g, start - attempt * width, end + attempt * width)
        if bracket is not None:
            return bracket, attempt
    return None
