"""
Root-finding backends.

Available backends:
    BisectionAlgorithm: bracketing bisection with bracket repair
    BrentAlgorithm: hybrid interpolation / bisection (default)
    NewtonRaphsonAlgorithm: central-difference Newton iteration

DEFAULT_ALGORITHMS is the registration order used by the goal-seek
orchestrator when it falls back from Brent to the alternates.
"""

from pygoalseek.core.exceptions import ValidationError
from pygoalseek.roots.backends.bisection import BisectionAlgorithm
from pygoalseek.roots.backends.brent import BrentAlgorithm
from pygoalseek.roots.backends.newton import NewtonRaphsonAlgorithm


DEFAULT_ALGORITHMS = (
    BisectionAlgorithm(),
    BrentAlgorithm(),
    NewtonRaphsonAlgorithm(),
)

_ALIASES = {
    'bisection': 'Bisection',
    'brent': 'Brent',
    'newton': 'Newton-Raphson',
    'newton-raphson': 'Newton-Raphson',
    'newton_raphson': 'Newton-Raphson',
}


def get_algorithm(name: str, algorithms=DEFAULT_ALGORITHMS):
    """
    Look up a registered algorithm by name or alias (case-insensitive).

    Raises:
        ValidationError: If no registered algorithm matches
    """
    if not isinstance(name, str):
        raise ValidationError(f"algorithm: expected a name, got {name!r}")
    canonical = _ALIASES.get(name.strip().lower(), name.strip())
    for algorithm in algorithms:
        if algorithm.name == canonical:
            return algorithm
    available = [a.name for a in algorithms]
    raise ValidationError(
        f"Unknown algorithm: {name!r}. Available: {available}"
    )


__all__ = [
    "BisectionAlgorithm",
    "BrentAlgorithm",
    "NewtonRaphsonAlgorithm",
    "DEFAULT_ALGORITHMS",
    "get_algorithm",
]
