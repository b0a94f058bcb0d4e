"""
Dispatch from extended Bravais type identifiers to generators.

build_dispatch() turns a whole Catalog into a KPointDispatcher: one
generator per catalog entry, built once, looked up by identifier at call
time. Identifiers missing from the catalog raise UnknownBravaisTypeError;
everything else is passed through to the generator unchanged.
"""

import logging
from types import MappingProxyType
from typing import Iterator, Mapping

from .catalog import Catalog
from .exceptions import UnknownBravaisTypeError
from .generators import AbstractGenerator, synthesize
from .kpoint_table import KPointTable

logger = logging.getLogger(__name__)


class KPointDispatcher:
    """
    Lookup table from extended Bravais type to generator for one dimension.

    Parameters
    ----------
    dimension : int
        Spatial dimension of every generator
    generators : Mapping[str, AbstractGenerator]
        Extended Bravais type → generator

    Examples
    --------
    >>> dispatch = build_dispatch(Catalog(2, {'hp': {'Γ': '[0, 0]', 'K': '[1/3, 1/3]'}}))
    >>> dispatch('hp')['K']
    array([0.33333333, 0.33333333])
    >>> dispatch('xx')
    Traceback (most recent call last):
        ...
    kpoints.core.exceptions.UnknownBravaisTypeError: invalid extended Bravais type 'xx' (2D)...
    """

    def __init__(self, dimension: int, generators: Mapping[str, AbstractGenerator]):
        self.dimension = dimension
        self.generators = MappingProxyType(dict(generators))

    def __call__(self, bravais_type: str, basis=None) -> KPointTable:
        """
        Return the k-points of `bravais_type` for the given basis.

        Parameters
        ----------
        bravais_type : str
            Extended Bravais type identifier
        basis : array_like, optional
            Conventional direct lattice basis (rows R₁, ..., R_D). Only
            needed for types whose k-points depend on the lattice.

        Raises
        ------
        UnknownBravaisTypeError
            If `bravais_type` is not in the catalog
        MissingBasisError, LatticeBasisError
            Propagated from the generator
        """
        return self[bravais_type](basis)

    def __getitem__(self, bravais_type: str) -> AbstractGenerator:
        if not isinstance(bravais_type, str) or bravais_type not in self.generators:
            raise UnknownBravaisTypeError(bravais_type, self.dimension, tuple(self.generators))
        return self.generators[bravais_type]

    def __contains__(self, bravais_type) -> bool:
        return isinstance(bravais_type, str) and bravais_type in self.generators

    def __iter__(self) -> Iterator[str]:
        return iter(self.generators)

    def __len__(self) -> int:
        return len(self.generators)

    @property
    def bravais_types(self) -> tuple:
        """All extended Bravais types this dispatcher covers."""
        return tuple(self.generators)

    def __repr__(self) -> str:
        return f"KPointDispatcher(dimension={self.dimension}, types={len(self.generators)})"


def build_dispatch(catalog: Catalog) -> KPointDispatcher:
    """
    Build the dispatcher for every extended Bravais type in a catalog.

    Parameters
    ----------
    catalog : Catalog
        Per-dimension catalog; every entry gets exactly one generator

    Returns
    -------
    dispatcher : KPointDispatcher

    Raises
    ------
    CatalogError
        If any entry cannot be synthesized
    """
    generators = {}
    for bravais_type, entry in catalog.items():
        generators[bravais_type] = synthesize(
            bravais_type, entry.points, entry.parameters, dimension=catalog.dimension)

    num_constant = sum(1 for g in generators.values() if g.is_constant)
    logger.debug("Built %dD dispatch: %d types (%d constant, %d lattice-dependent)",
                 catalog.dimension, len(generators), num_constant,
                 len(generators) - num_constant)
    return KPointDispatcher(catalog.dimension, generators)
