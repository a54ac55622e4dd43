"""
Core protocols for pygoalseek.

These define structural interfaces that implementations must satisfy.
We use Protocol (structural typing) rather than ABC (nominal typing) so
that any object with the right shape can be plugged in: a third-party
expression engine, or a custom root-finding algorithm.

Design Principles:
    - Minimal contracts: prescribe only what's truly universal
    - Stateless algorithms: all inputs passed per call
    - Type-safe: use generics to preserve type information through pipelines
"""

from typing import Callable, Mapping, Protocol, TypeVar, runtime_checkable

P = TypeVar('P')  # Parameter payload type


@runtime_checkable
class Evaluator(Protocol):
    """
    Expression-evaluation capability consumed by the objective adapter.

    The library ships a sympy-backed implementation
    (pygoalseek.formula.evaluator.ExpressionEvaluator); any object with an
    evaluate() method of this shape can replace it.
    """

    def evaluate(self, expression: str, variables: Mapping[str, float]) -> float:
        """
        Evaluate an expression with the given variable bindings.

        Args:
            expression: Formula expression string
            variables: Variable name to value mapping

        Returns:
            The formula value (may be NaN or infinite)

        Raises:
            Any exception on malformed expressions or domain errors. The
            objective adapter maps such failures to NaN.
        """
        ...


@runtime_checkable
class Algorithm(Protocol[P]):
    """
    Protocol for scalar root-finding algorithms.

    Each algorithm solves f(x) = target for x starting from the interval
    [lower_bound, upper_bound]. Algorithms are stateless: one instance can
    be shared by any number of concurrent searches.

    Numeric edge cases (no bracket, flat derivative, exhausted budget, NaN
    samples) never raise; they produce a non-converged Result.
    """

    @property
    def name(self) -> str:
        """
        Algorithm identifier.

        Examples: 'Bisection', 'Newton-Raphson', 'Brent'
        """
        ...

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
    ) -> 'Result[P]':
        """
        Find x such that function(x) = target.

        Args:
            function: Raw objective f(x); NaN marks an uninformative sample
            target: Output value to reach
            lower_bound: Lower end of the search interval
            upper_bound: Upper end of the search interval
            tolerance: Residual / step-size convergence threshold
            max_iter: Maximum refinement steps
            relaxed_factor: Multiplier on tolerance for the near-converged
                acceptance applied after the budget is exhausted

        Returns:
            Result envelope describing the outcome
        """
        ...
