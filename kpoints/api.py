"""
Public entry points for looking up high-symmetry k-points.

The bundled 2D and 3D catalogs are compiled into dispatchers once, when
this module is imported. The dispatchers are read-only afterwards and can
be shared freely, including between threads.
"""

from types import MappingProxyType

from .core.dispatch import KPointDispatcher, build_dispatch
from .core.kpoint_table import KPointTable
from .data import load_catalog


DISPATCHERS = MappingProxyType({
    dimension: build_dispatch(load_catalog(dimension))
    for dimension in (2, 3)
})


def get_dispatcher(dimension: int) -> KPointDispatcher:
    """
    Return the dispatcher for the bundled catalog of a dimension.

    Raises
    ------
    ValueError
        If `dimension` is not 2 or 3
    """
    if dimension not in DISPATCHERS:
        available = ', '.join(map(str, DISPATCHERS))
        raise ValueError(f"Unsupported dimension {dimension}. "
                         f"Available dimensions: {available}")
    return DISPATCHERS[dimension]


def get_points(dimension: int, bravais_type: str, basis=None) -> KPointTable:
    """
    Return the high-symmetry k-points of an extended Bravais type.

    Parameters
    ----------
    dimension : int
        2 or 3
    bravais_type : str
        Extended Bravais type identifier, e.g. 'cF1', 'tI2' or 'oc1'
    basis : array_like, shape (D, D), optional
        Conventional direct lattice basis, one vector per row. May be
        omitted for types whose k-points do not depend on the lattice.

    Returns
    -------
    table : KPointTable
        k-point label → fractional coordinates in the primitive
        reciprocal basis

    Raises
    ------
    UnknownBravaisTypeError
        If `bravais_type` is not in the catalog for `dimension`
    MissingBasisError
        If the k-points depend on the lattice and no basis was given
    LatticeBasisError
        If the basis does not have shape (D, D) or is degenerate

    Examples
    --------
    >>> get_points(3, 'cF1')['K']
    array([0.375, 0.375, 0.75 ])
    >>> get_points(3, 'tI1', [[3, 0, 0], [0, 3, 0], [0, 0, 2]])['Z']
    array([ 0.36111111,  0.36111111, -0.36111111])
    """
    return get_dispatcher(dimension)(bravais_type, basis)


def get_points_2d(bravais_type: str, basis=None) -> KPointTable:
    """k-points of a 2D extended Bravais type; see get_points()."""
    return DISPATCHERS[2](bravais_type, basis)


def get_points_3d(bravais_type: str, basis=None) -> KPointTable:
    """k-points of a 3D extended Bravais type; see get_points()."""
    return DISPATCHERS[3](bravais_type, basis)
