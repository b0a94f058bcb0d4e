"""
kpoints: high-symmetry k-points of extended Bravais types

A Python package that returns the labelled high-symmetry points of the
Brillouin zone used to build band-structure paths, for every extended
Bravais type in 2D and 3D.

Main Components
---------------
core : Formulas, catalogs, generators and dispatch
data : Bundled 2D and 3D catalogs
api : get_points() and friends, backed by dispatchers built at import
utils : Logging setup

Quick Start
-----------
>>> from kpoints import get_points
>>>
>>> # Constant k-points: no lattice needed
>>> get_points(3, 'cP1')['R']
array([0.5, 0.5, 0.5])
>>>
>>> # Lattice-dependent k-points: pass the conventional direct basis
>>> basis = [[3.0, 0.0, 0.0],
...          [0.0, 3.0, 0.0],
...          [0.0, 0.0, 2.0]]
>>> table = get_points(3, 'tI1', basis)
>>> table.labels
('Γ', 'M', 'X', 'P', 'Z', 'Z₀', 'N')

Current Version: 0.1.0
"""

__version__ = "0.1.0"

# High-level API exports
from .core import (
    # Errors
    KPointsError,
    CatalogError,
    MissingBasisError,
    LatticeBasisError,
    UnknownBravaisTypeError,

    # Data model
    KPointTable,
    Catalog,

    # Building blocks
    synthesize,
    build_dispatch,
    KPointDispatcher,
)

from .api import (
    get_points,
    get_points_2d,
    get_points_3d,
    get_dispatcher,
)

from .data import load_catalog

__all__ = [
    # Version info
    '__version__',

    # Entry points
    'get_points',
    'get_points_2d',
    'get_points_3d',
    'get_dispatcher',
    'load_catalog',

    # Core abstractions
    'KPointTable',
    'Catalog',
    'KPointDispatcher',
    'synthesize',
    'build_dispatch',

    # Errors
    'KPointsError',
    'CatalogError',
    'MissingBasisError',
    'LatticeBasisError',
    'UnknownBravaisTypeError',
]
