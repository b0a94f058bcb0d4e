"""
Static datasets of extended Bravais types.

- points_2d: oblique, rectangular, centred rectangular, square, hexagonal
- points_3d: the 3D extended Bravais types of SeeK-path
"""

from ..core.catalog import Catalog
from .points_2d import POINTS_2D, PARAMETERS_2D
from .points_3d import POINTS_3D, PARAMETERS_3D


_DATASETS = {
    2: (POINTS_2D, PARAMETERS_2D),
    3: (POINTS_3D, PARAMETERS_3D),
}


def load_catalog(dimension: int) -> Catalog:
    """
    Build the bundled catalog for a dimension.

    Parameters
    ----------
    dimension : int
        2 or 3

    Returns
    -------
    catalog : Catalog
        Freshly parsed, immutable catalog

    Raises
    ------
    ValueError
        If no dataset exists for `dimension`
    """
    if dimension not in _DATASETS:
        available = ', '.join(map(str, _DATASETS))
        raise ValueError(f"No bundled catalog for dimension {dimension}. "
                         f"Available dimensions: {available}")
    points, parameters = _DATASETS[dimension]
    return Catalog(dimension, points, parameters)


__all__ = [
    'POINTS_2D',
    'PARAMETERS_2D',
    'POINTS_3D',
    'PARAMETERS_3D',
    'load_catalog',
]
