"""
Sample financial formulas.

A fixed, read-only catalog for examples and tests. Rates are per period
as fractions (0.01 = 1%) unless the formula says otherwise.

Example:
    >>> from pygoalseek.formula import datasets
    >>> emi = datasets.get_formula('EMI_CALCULATION')
    >>> emi.variables
    ('P', 'r', 'n')
"""

from __future__ import annotations

from pygoalseek.core.exceptions import FormulaNotFoundError
from pygoalseek.formula.design import Formula, normalize_name


SIP_FUTURE_VALUE = Formula.create(
    'SIP_FUTURE_VALUE',
    'P * (((1 + r)^n - 1) / r) * (1 + r)',
    ['P', 'r', 'n'],
    output_variable='FV',
    description=(
        'Future value of a SIP investment. '
        'P=monthly investment, r=monthly rate, n=months'
    ),
)

EMI_CALCULATION = Formula.create(
    'EMI_CALCULATION',
    'P * r * (1 + r)^n / ((1 + r)^n - 1)',
    ['P', 'r', 'n'],
    output_variable='EMI',
    description='EMI. P=principal, r=monthly interest rate, n=number of months',
)

SIMPLE_INTEREST = Formula.create(
    'SIMPLE_INTEREST',
    'P * R * T / 100',
    ['P', 'R', 'T'],
    output_variable='SI',
    description='Simple interest. P=principal, R=annual rate (%), T=time in years',
)

COMPOUND_INTEREST = Formula.create(
    'COMPOUND_INTEREST',
    'P * (1 + r/n)^(n*t)',
    ['P', 'r', 'n', 't'],
    output_variable='A',
    description=(
        'Compound interest amount. '
        'P=principal, r=annual rate, n=compounds per year, t=years'
    ),
)

PRESENT_VALUE = Formula.create(
    'PRESENT_VALUE',
    'CF / (1 + r)^n',
    ['CF', 'r', 'n'],
    output_variable='PV',
    description='Present value of a future cash flow. CF=cash flow, r=discount rate, n=periods',
)

FUTURE_VALUE = Formula.create(
    'FUTURE_VALUE',
    'PV * (1 + r)^n',
    ['PV', 'r', 'n'],
    output_variable='FV',
    description='Future value. PV=present value, r=rate, n=periods',
)

CREDIT_UTILIZATION = Formula.create(
    'CREDIT_UTILIZATION',
    '(UsedCredit / CreditLimit) * 100',
    ['UsedCredit', 'CreditLimit'],
    output_variable='Utilization',
    description='Credit utilization percentage',
)

ROI = Formula.create(
    'ROI',
    '((FinalValue - InitialValue) / InitialValue) * 100',
    ['FinalValue', 'InitialValue'],
    output_variable='ROI',
    description='Return on investment percentage',
)

DEBT_TO_INCOME = Formula.create(
    'DEBT_TO_INCOME',
    '(MonthlyDebt / MonthlyIncome) * 100',
    ['MonthlyDebt', 'MonthlyIncome'],
    output_variable='DTI',
    description='Debt-to-income ratio percentage',
)

_CATALOG = {
    f.name: f
    for f in (
        SIP_FUTURE_VALUE,
        EMI_CALCULATION,
        SIMPLE_INTEREST,
        COMPOUND_INTEREST,
        PRESENT_VALUE,
        FUTURE_VALUE,
        CREDIT_UTILIZATION,
        ROI,
        DEBT_TO_INCOME,
    )
}


def list_formulas() -> tuple[str, ...]:
    """Names of all sample formulas, in catalog order."""
    return tuple(_CATALOG)


def get_formula(name: str) -> Formula:
    """
    Look up a sample formula by name.

    The name is normalized first, so 'emi calculation' finds
    EMI_CALCULATION.

    Raises:
        FormulaNotFoundError: If no sample formula has that name
    """
    if isinstance(name, str) and any(ch.isalnum() for ch in name):
        formula = _CATALOG.get(normalize_name(name))
        if formula is not None:
            return formula
    raise FormulaNotFoundError(f"Formula not found: {name}", name=name)
