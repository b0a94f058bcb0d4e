"""
Symbolic formulas for k-point coordinates and lattice parameters.

Formulas are written as strings in the catalog, parsed once into an
immutable expression tree, analysed for the parameters they depend on, and
interpreted at call time by a plain evaluator.
"""

from .nodes import (
    Formula,
    Constant,
    ParameterReference,
    VectorLiteral,
    UnaryOperation,
    BinaryOperation,
)
from .parser import parse_formula
from .analysis import free_parameters, vector_length
from .evaluate import evaluate

__all__ = [
    'Formula',
    'Constant',
    'ParameterReference',
    'VectorLiteral',
    'UnaryOperation',
    'BinaryOperation',
    'parse_formula',
    'free_parameters',
    'vector_length',
    'evaluate',
]
