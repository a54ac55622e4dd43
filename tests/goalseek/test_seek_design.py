"""
Tests for GoalSeekDesign request validation and bounds resolution.
"""

from dataclasses import FrozenInstanceError

import pytest

from pygoalseek.core.config import GoalSeekConfig
from pygoalseek.core.exceptions import (
    MissingValueError,
    UnknownVariableError,
    ValidationError,
)
from pygoalseek.formula import datasets
from pygoalseek.goalseek.design import GoalSeekDesign


SI = datasets.SIMPLE_INTEREST


class TestValidation:

    def test_unknown_seek_variable(self):
        with pytest.raises(UnknownVariableError) as excinfo:
            GoalSeekDesign.for_seek(SI, {'R': 5, 'T': 2}, 'Z', 1000)
        assert str(excinfo.value) == (
            "Seek variable 'Z' is not a valid variable in formula 'SIMPLE_INTEREST'"
        )
        assert excinfo.value.variable == 'Z'
        assert excinfo.value.formula_name == 'SIMPLE_INTEREST'

    def test_missing_value(self):
        with pytest.raises(MissingValueError) as excinfo:
            GoalSeekDesign.for_seek(SI, {'R': 5}, 'P', 1000)
        assert str(excinfo.value) == "Missing value for variable: T"
        assert excinfo.value.variables == ('T',)

    def test_missing_values_in_formula_order(self):
        with pytest.raises(MissingValueError, match="R, T"):
            GoalSeekDesign.for_seek(SI, {}, 'P', 1000)

    def test_extra_known_values_ignored(self):
        design = GoalSeekDesign.for_seek(SI, {'R': 5, 'T': 2, 'X': 1}, 'P', 1000)
        assert design.known_values['X'] == 1.0

    def test_seek_variable_in_known_values_is_ignored(self):
        design = GoalSeekDesign.for_seek(SI, {'P': 1, 'R': 5, 'T': 2}, 'P', 1000)
        assert design.all_values(7.0)['P'] == 7.0

    @pytest.mark.parametrize("target", [float('nan'), float('inf'), '1000', None])
    def test_bad_target(self, target):
        with pytest.raises(ValidationError, match="target"):
            GoalSeekDesign.for_seek(SI, {'R': 5, 'T': 2}, 'P', target)

    def test_bad_known_value(self):
        with pytest.raises(ValidationError):
            GoalSeekDesign.for_seek(SI, {'R': float('nan'), 'T': 2}, 'P', 1000)

    def test_not_a_formula(self):
        with pytest.raises(ValidationError, match="Formula"):
            GoalSeekDesign.for_seek('P * R * T / 100', {'R': 5, 'T': 2}, 'P', 1000)

    def test_inverted_bounds(self):
        with pytest.raises(ValidationError, match="less than"):
            GoalSeekDesign.for_seek(SI, {'R': 5, 'T': 2}, 'P', 1000,
                                    lower_bound=10, upper_bound=1)


class TestBounds:

    def test_defaults(self):
        design = GoalSeekDesign.for_seek(SI, {'R': 5, 'T': 2}, 'P', 1000)
        assert design.lower_bound == -1e6
        assert design.upper_bound == 1e6
        assert design.bounds_source == 'default'

    def test_config_defaults(self):
        cfg = GoalSeekConfig(default_lower_bound=0, default_upper_bound=50)
        design = GoalSeekDesign.for_seek(SI, {'R': 5, 'T': 2}, 'P', 1000, config=cfg)
        assert (design.lower_bound, design.upper_bound) == (0.0, 50.0)

    def test_explicit(self):
        design = GoalSeekDesign.for_seek(SI, {'R': 5, 'T': 2}, 'P', 1000,
                                         lower_bound=0, upper_bound=100)
        assert (design.lower_bound, design.upper_bound) == (0.0, 100.0)
        assert design.bounds_source == 'explicit'

    def test_mixed(self):
        design = GoalSeekDesign.for_seek(SI, {'R': 5, 'T': 2}, 'P', 1000, lower_bound=0)
        assert (design.lower_bound, design.upper_bound) == (0.0, 1e6)
        assert design.bounds_source == 'mixed'

    def test_mixed_can_be_empty(self):
        with pytest.raises(ValidationError):
            GoalSeekDesign.for_seek(SI, {'R': 5, 'T': 2}, 'P', 1000, lower_bound=2e6)

    def test_initial_guess_wide_window_kept(self):
        # width = max(|5| * 10, 2e6) = 2e6, recentered on 5
        design = GoalSeekDesign.for_seek(SI, {'R': 5, 'T': 2}, 'P', 1000,
                                         initial_guess=5)
        assert design.lower_bound == 5 - 1e6
        assert design.upper_bound == 5 + 1e6
        assert design.initial_guess == 5.0
        assert design.bounds_source == 'initial_guess'

    def test_initial_guess_widens(self):
        # width = max(|100| * 10, 1) = 1000
        design = GoalSeekDesign.for_seek(SI, {'R': 5, 'T': 2}, 'P', 1000,
                                         lower_bound=0, upper_bound=1,
                                         initial_guess=100)
        assert design.lower_bound == -400.0
        assert design.upper_bound == 600.0

    def test_zero_guess_uses_window_width(self):
        design = GoalSeekDesign.for_seek(SI, {'R': 5, 'T': 2}, 'P', 1000,
                                         lower_bound=2, upper_bound=6,
                                         initial_guess=0)
        assert (design.lower_bound, design.upper_bound) == (-2.0, 2.0)


class TestImmutability:

    def test_known_values_read_only(self):
        design = GoalSeekDesign.for_seek(SI, {'R': 5, 'T': 2}, 'P', 1000)
        with pytest.raises(TypeError):
            design.known_values['R'] = 6

    def test_known_values_copied(self):
        known = {'R': 5, 'T': 2}
        design = GoalSeekDesign.for_seek(SI, known, 'P', 1000)
        known['R'] = 6
        assert design.known_values['R'] == 5.0

    def test_frozen(self):
        design = GoalSeekDesign.for_seek(SI, {'R': 5, 'T': 2}, 'P', 1000)
        with pytest.raises(FrozenInstanceError):
            design.target = 5.0

    def test_all_values_order(self):
        design = GoalSeekDesign.for_seek(SI, {'R': 5, 'T': 2}, 'P', 1000)
        assert list(design.all_values(1.0)) == ['R', 'T', 'P']
