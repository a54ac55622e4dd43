"""
Default expression engine, built on sympy.

Expressions are parsed once with sympy's parser ('^' is treated as power)
and compiled with lambdify against the math module. Compiled callables
are cached per (expression, variable names).

Supported syntax: numbers, declared variable names, + - * / ^ **,
parentheses, the constants pi and E, and the functions in FUNCTIONS.
Anything else is rejected before it reaches the parser. The parser runs
in a namespace without builtins.

Parsing does not simplify: 'x / x' stays a division and fails at x = 0.
"""

from __future__ import annotations

import io
import re
import tokenize
from functools import lru_cache
from tokenize import TokenError
from typing import Callable, Mapping

import sympy as sp
from sympy.parsing.sympy_parser import (
    convert_xor,
    parse_expr,
    standard_transformations,
)

from pygoalseek.core.exceptions import EvaluationError, FormulaError


TRANSFORMATIONS = standard_transformations + (convert_xor,)

_ALLOWED_CHARACTERS = re.compile(r'^[A-Za-z0-9_+\-*/^().,\s]+$')

FUNCTIONS = {
    'sqrt': sp.sqrt,
    'exp': sp.exp,
    'log': sp.log,
    'ln': sp.log,
    'sin': sp.sin,
    'cos': sp.cos,
    'tan': sp.tan,
    'asin': sp.asin,
    'acos': sp.acos,
    'atan': sp.atan,
    'sinh': sp.sinh,
    'cosh': sp.cosh,
    'tanh': sp.tanh,
    'abs': sp.Abs,
    'Abs': sp.Abs,
    'floor': sp.floor,
    'ceiling': sp.ceiling,
    'Min': sp.Min,
    'Max': sp.Max,
    'pi': sp.pi,
    'E': sp.E,
}

# names the parser's own rewrites refer to (numbers, symbols, unevaluated ops)
_PARSER_GLOBALS = {
    '__builtins__': {},
    'Symbol': sp.Symbol,
    'Integer': sp.Integer,
    'Float': sp.Float,
    'Rational': sp.Rational,
    'Add': sp.Add,
    'Mul': sp.Mul,
    'Pow': sp.Pow,
    **FUNCTIONS,
}


def _check_names(expression: str, names: tuple[str, ...]) -> None:
    """Reject attribute access and identifiers that are neither declared nor in FUNCTIONS."""
    try:
        tokens = list(tokenize.generate_tokens(io.StringIO(expression).readline))
    except (TokenError, SyntaxError) as e:
        raise FormulaError(f"Cannot parse expression {expression!r}: {e}") from e

    unknown = set()
    for token in tokens:
        if token.type == tokenize.OP and token.string == '.':
            raise FormulaError(
                f"Expression {expression!r} uses attribute access"
            )
        if token.type == tokenize.NAME and token.string not in names \
                and token.string not in FUNCTIONS:
            unknown.add(token.string)
    if unknown:
        raise FormulaError(
            f"Expression {expression!r} uses undeclared variables: {sorted(unknown)}"
        )


@lru_cache(maxsize=256)
def compile_expression(
    expression: str,
    names: tuple[str, ...],
) -> Callable[..., float]:
    """
    Parse and compile an expression into a positional callable.

    Parameters
    ----------
    expression : str
        Formula expression.
    names : tuple of str
        Variable names, in the order the callable takes its arguments.

    Returns
    -------
    callable
        f(*values) evaluating the expression with math-module semantics.

    Raises
    ------
    FormulaError
        If the expression has unsupported characters, does not parse,
        or uses identifiers that are neither in `names` nor in FUNCTIONS.
    """
    if not expression or not _ALLOWED_CHARACTERS.match(expression) or '__' in expression:
        raise FormulaError(
            f"Expression {expression!r} is empty or contains unsupported characters"
        )
    _check_names(expression, names)

    symbols = {name: sp.Symbol(name) for name in names}
    try:
        expr = parse_expr(
            expression,
            local_dict=symbols,
            global_dict=dict(_PARSER_GLOBALS),
            transformations=TRANSFORMATIONS,
            evaluate=False,
        )
    except (SyntaxError, TokenError, TypeError, ValueError, AttributeError, NameError) as e:
        raise FormulaError(f"Cannot parse expression {expression!r}: {e}") from e

    if not isinstance(expr, sp.Expr):
        raise FormulaError(
            f"Expression {expression!r} does not define a single scalar value"
        )

    return sp.lambdify([symbols[name] for name in names], expr, modules='math')


class ExpressionEvaluator:
    """
    sympy-backed implementation of the Evaluator protocol.

    Stateless apart from the shared compile cache, so one instance can
    serve any number of concurrent objectives.
    """

    def evaluate(self, expression: str, variables: Mapping[str, float]) -> float:
        """
        Evaluate an expression at the given variable bindings.

        Raises
        ------
        FormulaError
            If the expression is malformed (see compile_expression).
        EvaluationError
            If evaluation fails at this point (division by zero, domain
            error, overflow, complex result).
        """
        names = tuple(sorted(variables))
        function = compile_expression(expression, names)
        try:
            value = function(*(float(variables[name]) for name in names))
            return float(value)
        except (ArithmeticError, ValueError, TypeError, NameError) as e:
            raise EvaluationError(
                f"Error evaluating formula: {e}",
                expression=expression,
                variables=variables,
            ) from e


DEFAULT_EVALUATOR = ExpressionEvaluator()
