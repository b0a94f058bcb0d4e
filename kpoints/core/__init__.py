"""
Core machinery for k-point generation.

This module contains the building blocks:
- formula: symbolic coordinate and parameter formulas
- catalog: immutable per-dimension catalogs of extended Bravais types
- generators: derivation plans and per-type generators
- dispatch: identifier → generator lookup for a whole catalog

These are combined into ready-to-use entry points by kpoints.api.
"""

from .exceptions import (
    KPointsError,
    CatalogError,
    FormulaSyntaxError,
    MissingBasisError,
    LatticeBasisError,
    UnknownBravaisTypeError,
)

from .formula import (
    parse_formula,
    free_parameters,
    evaluate,
)

from .kpoint_table import KPointTable

from .catalog import Catalog, CatalogEntry

from .generators import (
    AbstractGenerator,
    ConstantGenerator,
    ParameterizedGenerator,
    DerivationStep,
    plan_derivation,
    synthesize,
)

from .dispatch import KPointDispatcher, build_dispatch

__all__ = [
    # Errors
    'KPointsError',
    'CatalogError',
    'FormulaSyntaxError',
    'MissingBasisError',
    'LatticeBasisError',
    'UnknownBravaisTypeError',

    # Formulas
    'parse_formula',
    'free_parameters',
    'evaluate',

    # Data model
    'KPointTable',
    'Catalog',
    'CatalogEntry',

    # Generators
    'AbstractGenerator',
    'ConstantGenerator',
    'ParameterizedGenerator',
    'DerivationStep',
    'plan_derivation',
    'synthesize',

    # Dispatch
    'KPointDispatcher',
    'build_dispatch',
]
