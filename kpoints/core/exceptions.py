"""
Exceptions raised while building or calling k-point generators.

Two families exist:

Build-time (CatalogError):
    The dataset itself is malformed - an unknown symbol, an unparsable
    formula, a coordinate of the wrong length. These abort generator
    construction for the offending type.

Call-time (MissingBasisError, LatticeBasisError, UnknownBravaisTypeError):
    The caller asked for something that cannot be answered - no lattice
    basis for a basis-dependent type, a basis of the wrong shape, or an
    identifier that is not in the catalog.

Every class also derives from ValueError, so callers that only know about
built-in exceptions still catch them.
"""


class KPointsError(Exception):
    """Base class for all errors raised by the kpoints package."""


class CatalogError(KPointsError, ValueError):
    """A catalog entry cannot be turned into a generator."""


class FormulaSyntaxError(CatalogError):
    """A formula string is not a well-formed expression."""


class MissingBasisError(KPointsError, ValueError):
    """A basis-dependent extended Bravais type was called without a basis."""

    def __init__(self, bravais_type: str):
        self.bravais_type = bravais_type
        super().__init__(
            f"the irreducible path of a Bravais lattice of extended type "
            f"{bravais_type} cannot be constructed without knowledge of the "
            f"lattice: provide a (conventional) direct lattice basis"
        )


class LatticeBasisError(KPointsError, ValueError):
    """A lattice basis does not have the shape or values required."""


class UnknownBravaisTypeError(KPointsError, ValueError):
    """An identifier is not present in the catalog being dispatched over."""

    def __init__(self, bravais_type, dimension: int, available=()):
        self.bravais_type = bravais_type
        self.dimension = dimension
        message = f"invalid extended Bravais type {bravais_type!r} ({dimension}D)"
        if available:
            message += f". Available types: {', '.join(available)}"
        super().__init__(message)
