"""
Tests for the sample formula catalog.
"""

import pytest

from pygoalseek.core.exceptions import FormulaError, FormulaNotFoundError
from pygoalseek.formula import datasets
from pygoalseek.formula.evaluator import DEFAULT_EVALUATOR


class TestCatalog:

    def test_names(self):
        assert datasets.list_formulas() == (
            'SIP_FUTURE_VALUE',
            'EMI_CALCULATION',
            'SIMPLE_INTEREST',
            'COMPOUND_INTEREST',
            'PRESENT_VALUE',
            'FUTURE_VALUE',
            'CREDIT_UTILIZATION',
            'ROI',
            'DEBT_TO_INCOME',
        )

    @pytest.mark.parametrize("name", datasets.list_formulas())
    def test_every_formula_validates(self, name):
        datasets.get_formula(name).validate()

    def test_lookup_normalizes(self):
        assert datasets.get_formula('emi calculation') is datasets.EMI_CALCULATION
        assert datasets.get_formula('Simple-Interest') is datasets.SIMPLE_INTEREST

    @pytest.mark.parametrize("name", ['NOPE', '', '---', None])
    def test_not_found(self, name):
        with pytest.raises(FormulaNotFoundError) as excinfo:
            datasets.get_formula(name)
        assert excinfo.value.name == name

    def test_not_found_is_formula_error(self):
        with pytest.raises(FormulaError, match="Formula not found: NOPE"):
            datasets.get_formula('NOPE')


class TestValues:

    def test_emi(self):
        value = DEFAULT_EVALUATOR.evaluate(
            datasets.EMI_CALCULATION.expression, {'P': 100000, 'r': 0.01, 'n': 12},
        )
        assert value == pytest.approx(8884.88, abs=0.01)

    def test_simple_interest(self):
        value = DEFAULT_EVALUATOR.evaluate(
            datasets.SIMPLE_INTEREST.expression, {'P': 10000, 'R': 5, 'T': 2},
        )
        assert value == pytest.approx(1000.0)

    def test_roi(self):
        value = DEFAULT_EVALUATOR.evaluate(
            datasets.ROI.expression, {'FinalValue': 150, 'InitialValue': 100},
        )
        assert value == pytest.approx(50.0)

    def test_output_variables(self):
        assert datasets.SIP_FUTURE_VALUE.output_variable == 'FV'
        assert datasets.DEBT_TO_INCOME.output_variable == 'DTI'
