"""
Solver configuration for goal seek.

Defines the iteration budget, tolerance and default search window that
every seek() call uses unless overridden per request:

- max_iterations: refinement steps per algorithm attempt
- tolerance: residual / step-size convergence threshold
- default_lower_bound, default_upper_bound: search window when the
  request gives no bounds
- relaxed_factor: multiplier on tolerance for the near-converged
  acceptance applied once the budget is exhausted. The value 100 has no
  derivation behind it; it is kept for parity and exposed as a tunable.

Values can come from code, from a flat property mapping
('goalseek.max-iterations' style keys) or from GOALSEEK_* environment
variables.
"""

from __future__ import annotations

import dataclasses
import math
import os
from dataclasses import dataclass
from typing import Any, Mapping

from pygoalseek.core.exceptions import ConfigurationError


PROPERTY_PREFIX = 'goalseek.'
ENV_PREFIX = 'GOALSEEK_'

# field name -> property key
_PROPERTY_KEYS = {
    'max_iterations': 'goalseek.max-iterations',
    'tolerance': 'goalseek.tolerance',
    'default_lower_bound': 'goalseek.default-lower-bound',
    'default_upper_bound': 'goalseek.default-upper-bound',
    'relaxed_factor': 'goalseek.relaxed-factor',
}


@dataclass(frozen=True)
class GoalSeekConfig:
    """Solver settings shared by all goal-seek requests."""
    max_iterations: int = 1000
    tolerance: float = 1e-10
    default_lower_bound: float = -1_000_000.0
    default_upper_bound: float = 1_000_000.0
    relaxed_factor: float = 100.0

    def __post_init__(self) -> None:
        if isinstance(self.max_iterations, bool) or not isinstance(self.max_iterations, int):
            raise ConfigurationError(
                f"max_iterations must be an integer, got {self.max_iterations!r}",
                key='max_iterations',
            )
        if self.max_iterations < 1:
            raise ConfigurationError(
                f"max_iterations must be >= 1, got {self.max_iterations}",
                key='max_iterations',
            )
        for name in ('tolerance', 'default_lower_bound', 'default_upper_bound', 'relaxed_factor'):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ConfigurationError(f"{name} must be a number, got {value!r}", key=name)
            if not math.isfinite(value):
                raise ConfigurationError(f"{name} must be finite, got {value}", key=name)
            # frozen: bypass __setattr__ to normalise ints to float
            object.__setattr__(self, name, float(value))
        if self.tolerance <= 0:
            raise ConfigurationError(
                f"tolerance must be > 0, got {self.tolerance}", key='tolerance'
            )
        if self.relaxed_factor < 1:
            raise ConfigurationError(
                f"relaxed_factor must be >= 1, got {self.relaxed_factor}",
                key='relaxed_factor',
            )
        if self.default_lower_bound >= self.default_upper_bound:
            raise ConfigurationError(
                f"default_lower_bound must be less than default_upper_bound, "
                f"got [{self.default_lower_bound}, {self.default_upper_bound}]",
                key='default_lower_bound',
            )

    def replace(self, **changes: Any) -> GoalSeekConfig:
        """Return a copy with the given fields changed (validated again)."""
        return dataclasses.replace(self, **changes)

    @classmethod
    def from_mapping(cls, properties: Mapping[str, Any]) -> GoalSeekConfig:
        """
        Build a config from 'goalseek.*' property keys.

        Keys outside the 'goalseek.' namespace are ignored so that a whole
        application property set can be passed in. Unknown keys inside the
        namespace are rejected. Values may be numbers or numeric strings.

        Raises:
            ConfigurationError: On unknown keys or unparsable values
        """
        known = {key: name for name, key in _PROPERTY_KEYS.items()}
        kwargs: dict[str, Any] = {}
        for key, raw in properties.items():
            if not key.startswith(PROPERTY_PREFIX):
                continue
            if key not in known:
                raise ConfigurationError(
                    f"Unknown configuration key {key!r}; expected one of "
                    f"{sorted(known)}",
                    key=key,
                )
            name = known[key]
            kwargs[name] = _coerce(name, raw, key)
        return cls(**kwargs)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> GoalSeekConfig:
        """
        Build a config from GOALSEEK_* environment variables.

        GOALSEEK_MAX_ITERATIONS, GOALSEEK_TOLERANCE,
        GOALSEEK_DEFAULT_LOWER_BOUND, GOALSEEK_DEFAULT_UPPER_BOUND,
        GOALSEEK_RELAXED_FACTOR. Unset or blank variables keep the default.
        """
        env = os.environ if environ is None else environ
        kwargs: dict[str, Any] = {}
        for name in _PROPERTY_KEYS:
            var = ENV_PREFIX + name.upper()
            raw = env.get(var, '')
            if not str(raw).strip():
                continue
            kwargs[name] = _coerce(name, raw, var)
        return cls(**kwargs)


def _coerce(name: str, raw: Any, key: str) -> int | float:
    """Parse a property value into the field's type."""
    if not isinstance(raw, str):
        return raw
    text = raw.strip()
    try:
        if name == 'max_iterations':
            return int(text)
        return float(text)
    except ValueError as e:
        raise ConfigurationError(f"{key}: cannot parse {raw!r}: {e}", key=key) from e


DEFAULT_CONFIG = GoalSeekConfig()
