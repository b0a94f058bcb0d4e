"""
Derivation plans for lattice parameters.

A plan is an ordered list of steps that computes the lattice parameters a
catalog entry needs - edge lengths and the monoclinic angle β - from a
(conventional) direct lattice basis R₁, ..., R_D.

The vocabulary is closed:

    a = |R₁|,  b = |R₂|,  c = |R₃|
    cosβ = R₃·R₁ / (a c),  sinβ = √(1 - cos²β)

β is the angle between R₃ and R₁, taken in [0, π], so sinβ ≥ 0. cosβ and
sinβ only ever occur together; requesting either one plans both, along
with a and c which they are computed from.
"""

import logging
from dataclasses import dataclass
from typing import Dict, FrozenSet, Iterable, List, Optional, Tuple

import numpy as np

from ..exceptions import CatalogError

logger = logging.getLogger(__name__)


# Edge-length parameters, in basis-vector order
LENGTH_PARAMETERS = ('a', 'b', 'c')
ANGLE_PARAMETERS = ('cosβ', 'sinβ')


def parameter_vocabulary(basis_arity: int) -> FrozenSet[str]:
    """
    Parameters that can be derived from a basis of `basis_arity` vectors.

    Returns
    -------
    names : FrozenSet[str]
        {a, b} for 2D, {a, b, c, cosβ, sinβ} for 3D
    """
    names = set(LENGTH_PARAMETERS[:basis_arity])
    if basis_arity >= 3:
        names.update(ANGLE_PARAMETERS)
    return frozenset(names)


@dataclass(frozen=True)
class DerivationStep:
    """
    One step of a derivation plan.

    Attributes
    ----------
    name : str
        Parameter computed by this step
    kind : str
        'norm'   : length of basis vector `operands[0]`
        'cosine' : cosine of the angle between basis vectors
                   `operands[0]` and `operands[1]`, normalised by the
                   already-computed lengths named in `operands[2:]`
        'sine'   : √(1 - x²) of the already-computed cosine `operands[0]`
    operands : tuple
        Basis indices (0-based) and/or names of earlier steps
    """
    name: str
    kind: str
    operands: Tuple

    def apply(self, basis: np.ndarray, values: Dict[str, float]) -> float:
        """Compute this step's value from the basis and earlier steps."""
        if self.kind == 'norm':
            (index,) = self.operands
            return float(np.linalg.norm(basis[index]))
        if self.kind == 'cosine':
            i, j, length_i, length_j = self.operands
            return float(np.dot(basis[i], basis[j]) / (values[length_i] * values[length_j]))
        if self.kind == 'sine':
            (cosine,) = self.operands
            # Clamp rounding noise for (near-)collinear vectors
            return float(np.sqrt(max(0.0, 1.0 - values[cosine] ** 2)))
        raise ValueError(f"Unknown derivation step kind '{self.kind}'")

    def __str__(self) -> str:
        if self.kind == 'norm':
            return f"{self.name} = norm(R{self.operands[0] + 1})"
        if self.kind == 'cosine':
            i, j, length_i, length_j = self.operands
            return f"{self.name} = dot(R{i + 1}, R{j + 1}) / ({length_i}*{length_j})"
        return f"{self.name} = sqrt(1 - {self.operands[0]}^2)"


def plan_derivation(required: Iterable[str],
                    basis_arity: int,
                    bravais_type: Optional[str] = None) -> List[DerivationStep]:
    """
    Plan how to compute the required parameters from a lattice basis.

    Parameters
    ----------
    required : Iterable[str]
        Parameter names the formulas of one catalog entry reference
    basis_arity : int
        Number of vectors in the basis (the dimension, 2 or 3)
    bravais_type : str, optional
        Catalog entry the plan is for; only used in error messages

    Returns
    -------
    steps : List[DerivationStep]
        Steps in dependency order: a, b, c (as needed), then cosβ, sinβ.
        Lengths needed by the angle are included even when not required
        directly.

    Raises
    ------
    CatalogError
        If a required name is not derivable from a basis of this arity

    Examples
    --------
    >>> [str(s) for s in plan_derivation({'sinβ', 'b'}, 3)]
    ['a = norm(R1)', 'b = norm(R2)', 'c = norm(R3)',
     'cosβ = dot(R3, R1) / (c*a)', 'sinβ = sqrt(1 - cosβ^2)']
    """
    required = set(required)
    vocabulary = parameter_vocabulary(basis_arity)

    unknown = sorted(required - vocabulary)
    if unknown:
        where = f" of extended Bravais type {bravais_type}" if bravais_type else ""
        raise CatalogError(
            f"Formula{where} references '{unknown[0]}', which cannot be derived "
            f"from a {basis_arity}D lattice basis. "
            f"Derivable parameters: {', '.join(sorted(vocabulary))}"
        )

    needs_angle = bool(required & set(ANGLE_PARAMETERS))
    lengths = set(required & set(LENGTH_PARAMETERS))
    if needs_angle:
        lengths.update(('a', 'c'))

    steps = [DerivationStep(name, 'norm', (index,))
             for index, name in enumerate(LENGTH_PARAMETERS)
             if name in lengths]

    if needs_angle:
        steps.append(DerivationStep('cosβ', 'cosine', (2, 0, 'c', 'a')))
        steps.append(DerivationStep('sinβ', 'sine', ('cosβ',)))

    logger.debug("Derivation plan for %s: %s",
                 bravais_type or '<anonymous>', '; '.join(str(s) for s in steps))
    return steps


def run_plan(steps: Iterable[DerivationStep], basis: np.ndarray) -> Dict[str, float]:
    """
    Execute a derivation plan against a basis.

    Returns
    -------
    values : Dict[str, float]
        Value of every planned parameter, keyed by name
    """
    values = {}
    for step in steps:
        values[step.name] = step.apply(basis, values)
    return values
