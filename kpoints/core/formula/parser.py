"""
Parse formula strings into the formula IR.

Formula strings use ordinary Python expression syntax::

    "[ζ, ζ, 1/2]"
    "(1 + a**2/b**2)/4"
    "-1 + η"

The string is read with :func:`ast.parse` and the resulting syntax tree is
translated node by node. Nothing is compiled or executed; anything outside
the supported subset (calls, attribute access, comparisons, ...) is rejected
with a FormulaSyntaxError.
"""

import ast
from typing import Union

from ..exceptions import FormulaSyntaxError
from .nodes import (
    Formula,
    Constant,
    ParameterReference,
    VectorLiteral,
    UnaryOperation,
    BinaryOperation,
)


_BINARY_OPERATORS = {
    ast.Add: '+',
    ast.Sub: '-',
    ast.Mult: '*',
    ast.Div: '/',
    ast.Pow: '**',
}

_UNARY_OPERATORS = {
    ast.UAdd: '+',
    ast.USub: '-',
}


class _FormulaTranslator(ast.NodeVisitor):
    """Translate a Python expression tree into formula nodes."""

    def __init__(self, source: str):
        self.source = source

    def generic_visit(self, node):
        raise FormulaSyntaxError(
            f"Unsupported construct {type(node).__name__} in formula "
            f"'{self.source}'"
        )

    def visit_Expression(self, node):
        return self.visit(node.body)

    def visit_Constant(self, node):
        # bool is an int subclass; True/False are not numbers here
        if isinstance(node.value, bool) or not isinstance(node.value, (int, float)):
            raise FormulaSyntaxError(
                f"Unsupported literal {node.value!r} in formula '{self.source}'"
            )
        return Constant(float(node.value))

    def visit_Name(self, node):
        return ParameterReference(node.id)

    def visit_List(self, node):
        return self._vector(node)

    def visit_Tuple(self, node):
        return self._vector(node)

    def visit_UnaryOp(self, node):
        operator = _UNARY_OPERATORS.get(type(node.op))
        if operator is None:
            return self.generic_visit(node.op)
        return UnaryOperation(operator, self.visit(node.operand))

    def visit_BinOp(self, node):
        operator = _BINARY_OPERATORS.get(type(node.op))
        if operator is None:
            return self.generic_visit(node.op)
        return BinaryOperation(operator, self.visit(node.left), self.visit(node.right))

    def _vector(self, node):
        if not node.elts:
            raise FormulaSyntaxError(f"Empty vector in formula '{self.source}'")
        components = []
        for element in node.elts:
            component = self.visit(element)
            if isinstance(component, VectorLiteral):
                raise FormulaSyntaxError(
                    f"Nested vectors are not allowed in formula '{self.source}'"
                )
            components.append(component)
        return VectorLiteral(tuple(components))


def parse_formula(source: Union[str, int, float, Formula]) -> Formula:
    """
    Parse a formula string into an expression tree.

    Parameters
    ----------
    source : str, int, float or Formula
        Python-syntax expression. Numbers are wrapped in a Constant and
        already-parsed formulas are returned unchanged.

    Returns
    -------
    formula : Formula
        Root node of the parsed expression

    Raises
    ------
    FormulaSyntaxError
        If the string is not valid syntax or uses an unsupported construct

    Examples
    --------
    >>> str(parse_formula("[1/2, 0, x]"))
    '[(1.0 / 2.0), 0.0, x]'
    """
    if isinstance(source, (Constant, ParameterReference, VectorLiteral,
                           UnaryOperation, BinaryOperation)):
        return source
    if isinstance(source, bool):
        raise FormulaSyntaxError(f"Unsupported formula {source!r}")
    if isinstance(source, (int, float)):
        return Constant(float(source))
    if not isinstance(source, str):
        raise FormulaSyntaxError(
            f"Formula must be a string or a number, got {type(source).__name__}"
        )

    try:
        tree = ast.parse(source.strip(), mode='eval')
    except SyntaxError as e:
        raise FormulaSyntaxError(f"Cannot parse formula '{source}': {e.msg}") from e

    return _FormulaTranslator(source).visit(tree)
