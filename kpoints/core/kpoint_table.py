"""
KPointTable: the labelled high-symmetry points of one extended Bravais type.
"""

from typing import Dict, Iterator, List, Mapping

import numpy as np


class KPointTable(Mapping):
    """
    Read-only mapping from k-point label to fractional coordinates.

    Coordinates are given with respect to the primitive reciprocal basis
    and stored as float64 arrays of shape (dimension,) that are marked
    read-only, so a table can be shared between callers safely.

    Parameters
    ----------
    dimension : int
        Length of every coordinate vector
    points : Mapping[str, array_like]
        Label → coordinates. Insertion order is preserved.

    Examples
    --------
    >>> table = KPointTable(2, {'Γ': [0, 0], 'M': [0.5, 0.5]})
    >>> table['M']
    array([0.5, 0.5])
    >>> table.labels
    ('Γ', 'M')
    """

    def __init__(self, dimension: int, points: Mapping[str, np.ndarray]):
        coordinates = {}
        for label, value in points.items():
            vector = np.array(value, dtype=float)
            if vector.shape != (dimension,):
                raise ValueError(
                    f"k-point '{label}' has shape {vector.shape}, "
                    f"expected ({dimension},)"
                )
            vector.setflags(write=False)
            coordinates[label] = vector

        self._dimension = dimension
        self._points = coordinates

    @property
    def dimension(self) -> int:
        """Length of the coordinate vectors."""
        return self._dimension

    @property
    def labels(self) -> tuple:
        """k-point labels in catalog order."""
        return tuple(self._points)

    def __getitem__(self, label: str) -> np.ndarray:
        return self._points[label]

    def __iter__(self) -> Iterator[str]:
        return iter(self._points)

    def __len__(self) -> int:
        return len(self._points)

    def __eq__(self, other) -> bool:
        if not isinstance(other, KPointTable):
            return NotImplemented
        return (self._dimension == other._dimension
                and self.labels == other.labels
                and all(np.array_equal(self._points[k], other._points[k]) for k in self._points))

    __hash__ = None

    def to_dict(self) -> Dict[str, List[float]]:
        """
        Convert to plain lists (e.g. for JSON export).

        Returns
        -------
        data : Dict[str, List[float]]
            Label → coordinates as a list of floats
        """
        return {label: vector.tolist() for label, vector in self._points.items()}

    def __repr__(self) -> str:
        return f"KPointTable(dimension={self._dimension}, labels={list(self._points)})"
