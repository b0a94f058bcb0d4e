"""
Build generators from catalog formulas.

synthesize() checks one catalog entry, works out which lattice parameters
it depends on, and returns either a ConstantGenerator (nothing depends on
the lattice, so everything is evaluated right away) or a
ParameterizedGenerator (with a derivation plan for the lattice parameters).

All problems with the formulas are reported here, at build time, as
CatalogError naming the extended Bravais type and the offending symbol.
"""

import logging
import unicodedata
from typing import Mapping, Optional

from ..catalog import SUPPORTED_DIMENSIONS
from ..exceptions import CatalogError
from ..formula import Formula, evaluate, free_parameters, parse_formula, vector_length
from ..kpoint_table import KPointTable
from .base import AbstractGenerator, ConstantGenerator, ParameterizedGenerator
from .planner import parameter_vocabulary, plan_derivation

logger = logging.getLogger(__name__)


def _infer_dimension(bravais_type: str, points: Mapping[str, Formula]) -> int:
    lengths = {vector_length(formula) for formula in points.values()}
    if len(lengths) != 1 or None in lengths:
        raise CatalogError(
            f"Cannot infer the dimension of extended Bravais type {bravais_type}: "
            f"k-point formulas do not all produce vectors of one length"
        )
    return lengths.pop()


def synthesize(bravais_type: str,
               coordinate_formulas: Mapping[str, Formula],
               parameter_formulas: Optional[Mapping[str, Formula]] = None,
               dimension: Optional[int] = None) -> AbstractGenerator:
    """
    Build the generator for one extended Bravais type.

    Parameters
    ----------
    bravais_type : str
        Extended Bravais type identifier, used in error messages
    coordinate_formulas : Mapping[str, Formula]
        k-point label → coordinate formula (parsed or as strings)
    parameter_formulas : Mapping[str, Formula], optional
        Derived parameter → formula, in declaration order. Each formula may
        use the lattice parameters derivable from the basis and any derived
        parameter declared before it.
    dimension : int, optional
        Spatial dimension. Inferred from the coordinate formulas if omitted.

    Returns
    -------
    generator : AbstractGenerator
        ConstantGenerator if no formula depends on the lattice, otherwise
        ParameterizedGenerator

    Raises
    ------
    CatalogError
        If there are no k-points, a coordinate formula is not a vector of
        the right length, a parameter formula is not a scalar, a derived
        parameter shadows a lattice parameter, or a formula references a
        symbol that is neither derivable from the basis nor declared earlier

    Examples
    --------
    >>> gen = synthesize('tI1', {'Γ': '[0, 0, 0]', 'Z': '[η, η, -η]'},
    ...                  {'η': '(1 + c**2/a**2)/4'})
    >>> gen.is_constant
    False
    >>> sorted(gen.required_parameters)
    ['a', 'c']
    """
    if not coordinate_formulas:
        raise CatalogError(f"Extended Bravais type {bravais_type} has no k-points")

    points = {label: parse_formula(f) for label, f in coordinate_formulas.items()}
    derived = {unicodedata.normalize('NFKC', name): parse_formula(f)
               for name, f in (parameter_formulas or {}).items()}

    if dimension is None:
        dimension = _infer_dimension(bravais_type, points)
    if dimension not in SUPPORTED_DIMENSIONS:
        raise CatalogError(
            f"Extended Bravais type {bravais_type}: unsupported dimension {dimension}"
        )
    vocabulary = parameter_vocabulary(dimension)

    # Derived parameters: scalar, not shadowing the basis vocabulary,
    # and only referring backwards
    declared = set()
    basis_dependencies = set()
    for name, formula in derived.items():
        if name in vocabulary:
            raise CatalogError(
                f"Extended Bravais type {bravais_type} redefines lattice parameter '{name}'"
            )
        if vector_length(formula) is not None:
            raise CatalogError(
                f"Parameter '{name}' of extended Bravais type {bravais_type} "
                f"must be a scalar, got '{formula}'"
            )
        for symbol in sorted(free_parameters(formula) - declared):
            if symbol in vocabulary:
                basis_dependencies.add(symbol)
            elif symbol in derived:
                raise CatalogError(
                    f"Parameter '{name}' of extended Bravais type {bravais_type} "
                    f"references '{symbol}' before it is defined"
                )
            else:
                raise CatalogError(
                    f"Parameter '{name}' of extended Bravais type {bravais_type} "
                    f"references unknown symbol '{symbol}'"
                )
        declared.add(name)

    for label, formula in points.items():
        length = vector_length(formula)
        if length != dimension:
            shape = 'a scalar' if length is None else f'a {length}-vector'
            raise CatalogError(
                f"k-point '{label}' of extended Bravais type {bravais_type} must be "
                f"a {dimension}-vector, got {shape}"
            )
        for symbol in sorted(free_parameters(formula) - declared):
            if symbol in vocabulary:
                basis_dependencies.add(symbol)
            else:
                raise CatalogError(
                    f"k-point '{label}' of extended Bravais type {bravais_type} "
                    f"references unknown symbol '{symbol}'"
                )

    plan = plan_derivation(basis_dependencies, dimension, bravais_type)

    if not plan:
        values = {}
        for name, formula in derived.items():
            values[name] = float(evaluate(formula, values))
        table = KPointTable(dimension, {
            label: evaluate(formula, values) for label, formula in points.items()
        })
        logger.debug("%s: constant k-points %s", bravais_type, list(table))
        return ConstantGenerator(bravais_type, dimension, table, values)

    logger.debug("%s: k-points depend on %s", bravais_type, sorted(basis_dependencies))
    return ParameterizedGenerator(bravais_type, dimension, points, derived, plan)
