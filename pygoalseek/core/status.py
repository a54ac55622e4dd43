"""
Outcome status constants for pygoalseek.

This module is the SINGLE SOURCE OF TRUTH for status strings.
Import from here, never use raw strings.

Usage:
    from pygoalseek.core.status import STATUS_CONVERGED

    if result.params.status == STATUS_CONVERGED:
        ...
"""

# Residual or step size fell below tolerance (or relaxed acceptance held)
STATUS_CONVERGED = 'converged'

# No sign change found, even after the expanding bracket search
STATUS_BRACKET_NOT_FOUND = 'bracket_not_found'

# Newton-Raphson derivative estimate collapsed to ~0
STATUS_DERIVATIVE_TOO_SMALL = 'derivative_too_small'

# Iteration budget exhausted without meeting the relaxed threshold
STATUS_MAX_ITERATIONS = 'max_iterations_reached'

# Stopping test passed where f has no finite value (NaN samples only)
STATUS_UNDEFINED_VALUE = 'undefined_value'

# All statuses as a frozenset for validation
ALL_STATUSES = frozenset({
    STATUS_CONVERGED,
    STATUS_BRACKET_NOT_FOUND,
    STATUS_DERIVATIVE_TOO_SMALL,
    STATUS_MAX_ITERATIONS,
    STATUS_UNDEFINED_VALUE,
})

__all__ = [
    'STATUS_CONVERGED',
    'STATUS_BRACKET_NOT_FOUND',
    'STATUS_DERIVATIVE_TOO_SMALL',
    'STATUS_MAX_ITERATIONS',
    'STATUS_UNDEFINED_VALUE',
    'ALL_STATUSES',
]
