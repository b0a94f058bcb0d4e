"""
Static analysis of formula trees.

- free_parameters: which parameter names a formula depends on
- vector_length: the length of the vector a formula produces (None for scalars)
"""

from typing import Optional, Set

from ..exceptions import CatalogError
from .nodes import (
    Formula,
    Constant,
    ParameterReference,
    VectorLiteral,
    UnaryOperation,
    BinaryOperation,
)


def free_parameters(formula: Formula) -> Set[str]:
    """
    Collect the names of all parameters referenced in a formula.

    Parameters
    ----------
    formula : Formula
        Root of the expression tree

    Returns
    -------
    names : Set[str]
        Every ParameterReference name found anywhere in the tree.
        Empty for formulas built only from constants.

    Examples
    --------
    >>> sorted(free_parameters(parse_formula("[ζ, 1 - ζ, a/c]")))
    ['a', 'c', 'ζ']
    """
    names = set()
    _collect(formula, names)
    return names


def _collect(node: Formula, names: Set[str]) -> None:
    if isinstance(node, ParameterReference):
        names.add(node.name)
    elif isinstance(node, VectorLiteral):
        for component in node.components:
            _collect(component, names)
    elif isinstance(node, UnaryOperation):
        _collect(node.operand, names)
    elif isinstance(node, BinaryOperation):
        _collect(node.left, names)
        _collect(node.right, names)
    elif not isinstance(node, Constant):
        raise TypeError(f"Not a formula node: {node!r}")


def vector_length(formula: Formula) -> Optional[int]:
    """
    Infer the length of the vector produced by a formula.

    Parameter references are always scalars, so the length is known
    without evaluating anything.

    Returns
    -------
    length : int or None
        Number of components, or None if the formula is a scalar

    Raises
    ------
    CatalogError
        If two vector operands of different lengths are combined, or a
        vector is used as an exponent
    """
    if isinstance(formula, (Constant, ParameterReference)):
        return None
    if isinstance(formula, VectorLiteral):
        return len(formula)
    if isinstance(formula, UnaryOperation):
        return vector_length(formula.operand)
    if isinstance(formula, BinaryOperation):
        left = vector_length(formula.left)
        right = vector_length(formula.right)
        if formula.operator == '**' and right is not None:
            raise CatalogError(f"Vector exponent in formula '{formula}'")
        if left is not None and right is not None and left != right:
            raise CatalogError(
                f"Vector length mismatch ({left} vs {right}) in formula '{formula}'"
            )
        return left if left is not None else right
    raise TypeError(f"Not a formula node: {formula!r}")
