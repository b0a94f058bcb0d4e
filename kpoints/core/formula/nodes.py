"""
Intermediate representation for k-point and lattice-parameter formulas.

Formulas are small expression trees built from four kinds of node:

- Constant: a numeric literal
- ParameterReference: a named lattice parameter (a, b, cosβ, ζ, ...)
- VectorLiteral: a fixed-length vector of scalar sub-expressions
- UnaryOperation / BinaryOperation: arithmetic on sub-expressions

Nodes are immutable and hashable, so a parsed catalog can be shared freely
between generators without copying.
"""

from dataclasses import dataclass
from typing import Tuple, Union


UNARY_OPERATORS = ('+', '-')
BINARY_OPERATORS = ('+', '-', '*', '/', '**')


@dataclass(frozen=True)
class Constant:
    """Numeric literal."""
    value: float

    def __str__(self) -> str:
        return repr(self.value)


@dataclass(frozen=True)
class ParameterReference:
    """Reference to a named lattice parameter."""
    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class VectorLiteral:
    """Vector whose components are scalar expressions."""
    components: Tuple['Formula', ...]

    def __len__(self) -> int:
        return len(self.components)

    def __str__(self) -> str:
        return '[' + ', '.join(str(c) for c in self.components) + ']'


@dataclass(frozen=True)
class UnaryOperation:
    """Unary plus or minus applied to an operand."""
    operator: str
    operand: 'Formula'

    def __post_init__(self):
        if self.operator not in UNARY_OPERATORS:
            raise ValueError(f"Unsupported unary operator '{self.operator}'")

    def __str__(self) -> str:
        return f"({self.operator}{self.operand})"


@dataclass(frozen=True)
class BinaryOperation:
    """Arithmetic between two operands (scalars or vectors)."""
    operator: str
    left: 'Formula'
    right: 'Formula'

    def __post_init__(self):
        if self.operator not in BINARY_OPERATORS:
            raise ValueError(f"Unsupported binary operator '{self.operator}'")

    def __str__(self) -> str:
        return f"({self.left} {self.operator} {self.right})"


Formula = Union[Constant, ParameterReference, VectorLiteral,
                UnaryOperation, BinaryOperation]
