"""
Public API for goal seek.

    seek(formula, known_values, seek_variable, target) -> GoalSeekSolution
    evaluate_formula(formula, values) -> float

seek() validates the request, builds the objective, runs Brent and, if
Brent does not converge, falls back through the other registered
algorithms, keeping the best result.
"""

from __future__ import annotations

import warnings
from typing import Any, Callable, Sequence

from pygoalseek.core.compute.timing import Timer
from pygoalseek.core.config import DEFAULT_CONFIG, GoalSeekConfig
from pygoalseek.core.exceptions import MissingValueError, ValidationError
from pygoalseek.core.protocols import Algorithm, Evaluator
from pygoalseek.core.result import Result
from pygoalseek.core.validation import check_values_mapping
from pygoalseek.formula.design import Formula
from pygoalseek.formula.evaluator import DEFAULT_EVALUATOR
from pygoalseek.formula.objective import build_objective
from pygoalseek.roots._common import RootParams
from pygoalseek.roots.backends import DEFAULT_ALGORITHMS
from pygoalseek.goalseek.design import GoalSeekDesign
from pygoalseek.goalseek.solution import GoalSeekSolution


PRIMARY_ALGORITHM = 'Brent'


def seek(
    formula: Formula,
    known_values,
    seek_variable: str,
    target: float,
    *,
    lower_bound: float | None = None,
    upper_bound: float | None = None,
    initial_guess: float | None = None,
    config: GoalSeekConfig | None = None,
    evaluator: Evaluator | None = None,
    algorithms: Sequence[Algorithm] | None = None,
    verbose: bool = False,
) -> GoalSeekSolution:
    """
    Find the value of seek_variable that makes formula equal target.

    Parameters
    ----------
    formula : Formula
        Formula to invert.
    known_values : mapping
        Values for every declared variable except seek_variable.
    seek_variable : str
        Variable to solve for.
    target : float
        Desired formula output.
    lower_bound, upper_bound : float or None
        Search window. None uses config.default_lower_bound /
        config.default_upper_bound.
    initial_guess : float or None
        Recenters the window on the guess (width
        max(|guess| * 10, upper - lower)). It is not used as a seed
        inside the algorithms.
    config : GoalSeekConfig or None
        Tolerance, iteration budget and default bounds
        (default: DEFAULT_CONFIG).
    evaluator : Evaluator or None
        Expression engine (default: sympy-backed ExpressionEvaluator).
    algorithms : sequence of Algorithm or None
        Registered algorithms in fallback order (default:
        DEFAULT_ALGORITHMS). Brent runs first when registered,
        otherwise the first entry does.
    verbose : bool
        Print progress information.

    Returns
    -------
    GoalSeekSolution

    Raises
    ------
    UnknownVariableError, MissingValueError, ValidationError
        For malformed requests, before any algorithm runs.

    Examples
    --------
    >>> from pygoalseek import seek
    >>> from pygoalseek.formula import datasets
    >>> sol = seek(datasets.SIMPLE_INTEREST, {'R': 5, 'T': 2}, 'P', 1000)
    >>> round(sol.value, 6)
    10000.0
    """
    cfg = config if config is not None else DEFAULT_CONFIG
    design = GoalSeekDesign.for_seek(
        formula,
        known_values,
        seek_variable,
        target,
        lower_bound=lower_bound,
        upper_bound=upper_bound,
        initial_guess=initial_guess,
        config=cfg,
    )

    registry = tuple(algorithms) if algorithms is not None else DEFAULT_ALGORITHMS
    if not registry:
        raise ValidationError("algorithms: at least one algorithm is required")

    engine = evaluator if evaluator is not None else DEFAULT_EVALUATOR
    objective = build_objective(
        engine,
        design.formula.expression,
        design.known_values,
        design.seek_variable,
    )

    if verbose:
        print(f"Goal seek: {design.formula_name}, solve for "
              f"{design.seek_variable} = ? so that result = {design.target:g}, "
              f"bounds [{design.lower_bound:g}, {design.upper_bound:g}] "
              f"({design.bounds_source})")

    result = _solve_ensemble(objective, design, cfg, registry, verbose)

    if verbose:
        print(f"Result: {result.backend_name}, converged={result.params.converged}, "
              f"value={result.params.value:.12g}, error={result.params.error:.3e}")

    return GoalSeekSolution(_result=result, _design=design)


def evaluate_formula(
    formula: Formula,
    values,
    *,
    evaluator: Evaluator | None = None,
) -> float:
    """
    Evaluate a formula directly.

    Unlike the objective used inside seek(), failures are not hidden.

    Raises
    ------
    MissingValueError
        If a declared variable has no value.
    FormulaError
        If the expression is malformed.
    EvaluationError
        If evaluation fails at these values.
    """
    if not isinstance(formula, Formula):
        raise ValidationError(
            f"formula: expected a Formula, got {type(formula).__name__}"
        )
    bindings = check_values_mapping(values, "values")
    missing = formula.missing(bindings)
    if missing:
        raise MissingValueError(
            f"Missing value for variable: {', '.join(missing)}",
            variables=missing,
        )
    engine = evaluator if evaluator is not None else DEFAULT_EVALUATOR
    return float(engine.evaluate(formula.expression, bindings))


def _solve_ensemble(
    objective: Callable[[float], float],
    design: GoalSeekDesign,
    cfg: GoalSeekConfig,
    registry: tuple[Algorithm, ...],
    verbose: bool,
) -> Result[RootParams]:
    """Run the primary algorithm, then alternates until one converges."""
    primary = _primary(registry)
    timer = Timer()
    timer.start()
    attempts: list[dict[str, Any]] = []

    with timer.section(primary.name):
        best = _attempt(primary, objective, design, cfg)
    attempts.append(_attempt_record(best))
    if verbose:
        print(f"  {primary.name}: {best.params.message} "
              f"(error {best.params.error:.3e})")

    if not best.params.converged:
        for alternate in registry:
            if alternate is primary or alternate.name == PRIMARY_ALGORITHM:
                continue

            with timer.section(alternate.name):
                candidate = _attempt(alternate, objective, design, cfg)
            attempts.append(_attempt_record(candidate))
            if verbose:
                print(f"  {alternate.name}: {candidate.params.message} "
                      f"(error {candidate.params.error:.3e})")

            if candidate.params.converged or candidate.params.error < best.params.error:
                best = candidate
                if best.params.converged:
                    break

    timer.stop()

    if not best.params.converged:
        warnings.warn(
            f"Goal seek for {design.seek_variable!r} in {design.formula_name!r} "
            f"did not converge with any algorithm; best was "
            f"{best.backend_name} with error {best.params.error:.3e}",
            RuntimeWarning,
            stacklevel=3,
        )

    info = {
        'method': 'goal_seek',
        'primary': primary.name,
        'attempts': tuple(attempts),
        'fallback_used': best.backend_name != primary.name,
        'lower_bound': design.lower_bound,
        'upper_bound': design.upper_bound,
        'tolerance': cfg.tolerance,
        'max_iter': cfg.max_iterations,
        'algorithm_info': best.info,
    }
    return Result(
        params=best.params,
        info=info,
        timing=timer.result(),
        backend_name=best.backend_name,
        warnings=best.warnings,
    )


def _primary(registry: tuple[Algorithm, ...]) -> Algorithm:
    for algorithm in registry:
        if algorithm.name == PRIMARY_ALGORITHM:
            return algorithm
    return registry[0]


def _attempt(
    algorithm: Algorithm,
    objective: Callable[[float], float],
    design: GoalSeekDesign,
    cfg: GoalSeekConfig,
) -> Result[RootParams]:
    return algorithm.solve(
        objective,
        design.target,
        design.lower_bound,
        design.upper_bound,
        cfg.tolerance,
        cfg.max_iterations,
        relaxed_factor=cfg.relaxed_factor,
    )


def _attempt_record(result: Result[RootParams]) -> dict[str, Any]:
    return {
        'algorithm': result.backend_name,
        'converged': result.params.converged,
        'status': result.params.status,
        'value': result.params.value,
        'error': result.params.error,
        'iterations': result.params.iterations,
        'message': result.params.message,
    }
