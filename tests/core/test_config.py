"""
Tests for GoalSeekConfig.

Validates defaults, construction-time validation, and the two external
sources: 'goalseek.*' property mappings and GOALSEEK_* environment
variables.
"""

from dataclasses import FrozenInstanceError

import pytest

from pygoalseek.core.config import DEFAULT_CONFIG, GoalSeekConfig
from pygoalseek.core.exceptions import ConfigurationError, ValidationError


class TestDefaults:

    def test_values(self):
        cfg = GoalSeekConfig()
        assert cfg.max_iterations == 1000
        assert cfg.tolerance == 1e-10
        assert cfg.default_lower_bound == -1e6
        assert cfg.default_upper_bound == 1e6
        assert cfg.relaxed_factor == 100.0

    def test_frozen(self):
        with pytest.raises(FrozenInstanceError):
            DEFAULT_CONFIG.tolerance = 1e-3

    def test_ints_normalised_to_float(self):
        cfg = GoalSeekConfig(default_lower_bound=-5, default_upper_bound=5)
        assert isinstance(cfg.default_lower_bound, float)


class TestValidation:

    @pytest.mark.parametrize("kwargs, key", [
        ({'max_iterations': 0}, 'max_iterations'),
        ({'max_iterations': 1.5}, 'max_iterations'),
        ({'tolerance': 0.0}, 'tolerance'),
        ({'tolerance': float('nan')}, 'tolerance'),
        ({'relaxed_factor': 0.5}, 'relaxed_factor'),
        ({'default_lower_bound': 10.0, 'default_upper_bound': 1.0}, 'default_lower_bound'),
        ({'default_upper_bound': float('inf')}, 'default_upper_bound'),
    ])
    def test_rejects(self, kwargs, key):
        with pytest.raises(ConfigurationError) as excinfo:
            GoalSeekConfig(**kwargs)
        assert excinfo.value.key == key

    def test_configuration_error_is_validation_error(self):
        with pytest.raises(ValidationError):
            GoalSeekConfig(tolerance=-1.0)

    def test_replace_revalidates(self):
        cfg = DEFAULT_CONFIG.replace(max_iterations=50)
        assert cfg.max_iterations == 50
        assert DEFAULT_CONFIG.max_iterations == 1000
        with pytest.raises(ConfigurationError):
            DEFAULT_CONFIG.replace(tolerance=0)


class TestFromMapping:

    def test_reads_keys(self):
        cfg = GoalSeekConfig.from_mapping({
            'goalseek.max-iterations': '200',
            'goalseek.tolerance': 1e-6,
            'goalseek.default-lower-bound': '-10',
            'goalseek.default-upper-bound': '10',
        })
        assert cfg.max_iterations == 200
        assert cfg.tolerance == 1e-6
        assert cfg.default_lower_bound == -10.0
        assert cfg.default_upper_bound == 10.0

    def test_ignores_other_namespaces(self):
        cfg = GoalSeekConfig.from_mapping({'server.port': '8080'})
        assert cfg == GoalSeekConfig()

    def test_rejects_unknown_goalseek_key(self):
        with pytest.raises(ConfigurationError, match="Unknown configuration key"):
            GoalSeekConfig.from_mapping({'goalseek.max-iter': '5'})

    def test_rejects_unparsable(self):
        with pytest.raises(ConfigurationError) as excinfo:
            GoalSeekConfig.from_mapping({'goalseek.tolerance': 'tiny'})
        assert excinfo.value.key == 'goalseek.tolerance'


class TestFromEnv:

    def test_reads_variables(self):
        cfg = GoalSeekConfig.from_env({
            'GOALSEEK_MAX_ITERATIONS': '25',
            'GOALSEEK_RELAXED_FACTOR': '10',
        })
        assert cfg.max_iterations == 25
        assert cfg.relaxed_factor == 10.0
        assert cfg.tolerance == 1e-10

    def test_blank_keeps_default(self):
        cfg = GoalSeekConfig.from_env({'GOALSEEK_TOLERANCE': '  '})
        assert cfg.tolerance == 1e-10

    def test_process_environment(self, monkeypatch):
        monkeypatch.setenv('GOALSEEK_TOLERANCE', '1e-7')
        assert GoalSeekConfig.from_env().tolerance == 1e-7
