"""
Evaluate formula trees against concrete parameter values.
"""

import operator
from typing import Mapping, Union

import numpy as np

from .nodes import (
    Formula,
    Constant,
    ParameterReference,
    VectorLiteral,
    UnaryOperation,
    BinaryOperation,
)


_BINARY = {
    '+': operator.add,
    '-': operator.sub,
    '*': operator.mul,
    '/': operator.truediv,
    '**': operator.pow,
}

_UNARY = {
    '+': operator.pos,
    '-': operator.neg,
}


def evaluate(formula: Formula,
             bindings: Mapping[str, float] = None) -> Union[float, np.ndarray]:
    """
    Evaluate a formula.

    Parameters
    ----------
    formula : Formula
        Root of the expression tree
    bindings : Mapping[str, float], optional
        Values for every parameter the formula references

    Returns
    -------
    value : float or np.ndarray
        Scalar for scalar formulas, float64 array for vector formulas.
        Scalar/vector arithmetic broadcasts the way numpy does.

    Raises
    ------
    KeyError
        If a referenced parameter has no binding
    ZeroDivisionError
        If a scalar division by zero occurs
    """
    if bindings is None:
        bindings = {}

    if isinstance(formula, Constant):
        return formula.value
    if isinstance(formula, ParameterReference):
        return float(bindings[formula.name])
    if isinstance(formula, VectorLiteral):
        return np.array([evaluate(c, bindings) for c in formula.components], dtype=float)
    if isinstance(formula, UnaryOperation):
        return _UNARY[formula.operator](evaluate(formula.operand, bindings))
    if isinstance(formula, BinaryOperation):
        left = evaluate(formula.left, bindings)
        right = evaluate(formula.right, bindings)
        return _BINARY[formula.operator](left, right)
    raise TypeError(f"Not a formula node: {formula!r}")
