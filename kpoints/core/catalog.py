"""
Catalogs of extended Bravais types.

A Catalog holds, for one dimension, every extended Bravais type together
with its k-point coordinate formulas and (optionally) its table of derived
parameter formulas. Formula strings are parsed when the catalog is built,
so a malformed dataset fails here rather than when a generator is called.

Catalogs are immutable: the mappings they expose are read-only views, and
they are passed explicitly to :func:`kpoints.core.dispatch.build_dispatch`.

Serialized form (``to_dict`` / ``from_dict`` / JSON files)::

    {
        "dimension": 3,
        "types": {
            "tI1": {
                "points": {"Γ": "[0, 0, 0]", "Z": "[η, η, -η]", ...},
                "parameters": {"η": "(1 + c**2/a**2)/4"}
            },
            ...
        }
    }
"""

import json
import logging
import unicodedata
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Iterator, Mapping, Optional, Union

from .exceptions import CatalogError
from .formula import Formula, parse_formula

logger = logging.getLogger(__name__)


SUPPORTED_DIMENSIONS = (2, 3)


@dataclass(frozen=True)
class CatalogEntry:
    """
    Formulas for one extended Bravais type.

    Attributes
    ----------
    bravais_type : str
        Extended Bravais type identifier (e.g. 'cF1', 'oc2')
    points : Mapping[str, Formula]
        k-point label → coordinate formula, in catalog order
    parameters : Mapping[str, Formula] or None
        Derived parameter name → formula, in declaration order.
        None when the type has no parameter table.
    """
    bravais_type: str
    points: Mapping[str, Formula]
    parameters: Optional[Mapping[str, Formula]] = None


def _parse_table(bravais_type: str, kind: str, table: Mapping, normalize_names: bool):
    if not isinstance(table, Mapping):
        raise CatalogError(
            f"{kind} of extended Bravais type {bravais_type} must be a mapping, "
            f"got {type(table).__name__}"
        )
    parsed = {}
    for name, source in table.items():
        # Names inside formulas are NFKC-normalised by the parser, so
        # parameter names must be too, or references would not match
        key = unicodedata.normalize('NFKC', name) if normalize_names else name
        if key in parsed:
            raise CatalogError(
                f"Duplicate {kind[:-1]} '{name}' in extended Bravais type {bravais_type}"
            )
        try:
            parsed[key] = parse_formula(source)
        except CatalogError as e:
            raise CatalogError(
                f"Extended Bravais type {bravais_type}, {kind[:-1]} '{name}': {e}"
            ) from e
    return MappingProxyType(parsed)


class Catalog(Mapping):
    """
    Immutable per-dimension catalog of extended Bravais types.

    Parameters
    ----------
    dimension : int
        Spatial dimension of every type in the catalog (2 or 3)
    points : Mapping[str, Mapping[str, str]]
        Extended Bravais type → {k-point label → coordinate formula}
    parameters : Mapping[str, Mapping[str, str]], optional
        Extended Bravais type → {derived parameter → formula}. Types
        missing here have no parameter table.

    Raises
    ------
    CatalogError
        If the dimension is unsupported, a parameter table names a type
        without points, a type has no points, or a formula cannot be parsed

    Examples
    --------
    >>> catalog = Catalog(2, {'tp': {'Γ': '[0, 0]', 'M': '[1/2, 1/2]'}})
    >>> str(catalog['tp'].points['M'])
    '[(1.0 / 2.0), (1.0 / 2.0)]'
    """

    def __init__(self,
                 dimension: int,
                 points: Mapping[str, Mapping[str, str]],
                 parameters: Optional[Mapping[str, Mapping[str, str]]] = None):
        if dimension not in SUPPORTED_DIMENSIONS:
            raise CatalogError(
                f"Unsupported dimension {dimension}. "
                f"Supported dimensions: {', '.join(map(str, SUPPORTED_DIMENSIONS))}"
            )
        parameters = parameters or {}

        orphans = sorted(set(parameters) - set(points))
        if orphans:
            raise CatalogError(
                f"Parameter table given for extended Bravais type {orphans[0]}, "
                f"which has no k-points"
            )

        entries = {}
        for bravais_type, table in points.items():
            if not isinstance(bravais_type, str) or not bravais_type:
                raise CatalogError(
                    f"Extended Bravais type identifiers must be non-empty strings, "
                    f"got {bravais_type!r}"
                )
            parsed_points = _parse_table(bravais_type, 'points', table, False)
            if not parsed_points:
                raise CatalogError(f"Extended Bravais type {bravais_type} has no k-points")

            parsed_parameters = None
            if bravais_type in parameters:
                parsed_parameters = _parse_table(
                    bravais_type, 'parameters', parameters[bravais_type], True)

            entries[bravais_type] = CatalogEntry(bravais_type, parsed_points, parsed_parameters)

        self._dimension = dimension
        self._entries = MappingProxyType(entries)
        logger.debug("Loaded %dD catalog with %d extended Bravais types",
                     dimension, len(entries))

    @property
    def dimension(self) -> int:
        """Spatial dimension of the catalog."""
        return self._dimension

    def __getitem__(self, bravais_type: str) -> CatalogEntry:
        return self._entries[bravais_type]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def to_dict(self) -> Dict:
        """
        Serialize the catalog to plain dictionaries and formula strings.

        Returns
        -------
        data : Dict
            Dictionary with keys 'dimension' and 'types', suitable for
            JSON export and reconstruction via from_dict()
        """
        types = {}
        for bravais_type, entry in self._entries.items():
            data = {'points': {label: str(f) for label, f in entry.points.items()}}
            if entry.parameters is not None:
                data['parameters'] = {name: str(f) for name, f in entry.parameters.items()}
            types[bravais_type] = data
        return {'dimension': self._dimension, 'types': types}

    @classmethod
    def from_dict(cls, data: Mapping) -> 'Catalog':
        """
        Reconstruct a catalog from its dictionary form.

        Parameters
        ----------
        data : Mapping
            Dictionary from to_dict(), or read from a JSON file

        Returns
        -------
        catalog : Catalog

        Raises
        ------
        CatalogError
            If fields are missing or have the wrong structure
        """
        if not isinstance(data, Mapping):
            raise CatalogError(f"Catalog data must be a mapping, got {type(data).__name__}")
        try:
            dimension = data['dimension']
            types = data['types']
        except KeyError as e:
            raise CatalogError(f"Catalog data is missing the {e.args[0]!r} field") from e

        if not isinstance(types, Mapping):
            raise CatalogError(
                f"Catalog 'types' field must be a mapping, got {type(types).__name__}"
            )

        points = {}
        parameters = {}
        for bravais_type, entry in types.items():
            if not isinstance(entry, Mapping):
                raise CatalogError(
                    f"Extended Bravais type {bravais_type} must be a mapping, "
                    f"got {type(entry).__name__}"
                )
            if 'points' not in entry:
                raise CatalogError(
                    f"Extended Bravais type {bravais_type} is missing the 'points' field"
                )
            points[bravais_type] = entry['points']
            if entry.get('parameters') is not None:
                parameters[bravais_type] = entry['parameters']
        return cls(dimension, points, parameters)

    @classmethod
    def from_json(cls, filename: Union[str, Path]) -> 'Catalog':
        """Load a catalog from a JSON file written by save_json()."""
        with open(filename, 'r', encoding='utf-8') as f:
            data = json.load(f)
        return cls.from_dict(data)

    def save_json(self, filename: Union[str, Path]) -> None:
        """Write the catalog to a JSON file."""
        with open(filename, 'w', encoding='utf-8') as f:
            json.dump(self.to_dict(), f, indent=4, ensure_ascii=False)

    def __repr__(self) -> str:
        return f"Catalog(dimension={self._dimension}, types={len(self._entries)})"
