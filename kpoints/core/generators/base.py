"""
K-point generators for single extended Bravais types.

A generator is the compiled form of one catalog entry: calling it with a
(conventional) direct lattice basis returns the KPointTable for that type.

Two implementations exist, chosen once when the generator is built:

ConstantGenerator:
    No formula depends on the lattice. The table is evaluated once and the
    same object is returned on every call; the basis is ignored and may be
    None.

ParameterizedGenerator:
    Some coordinates depend on lattice parameters. Each call derives the
    parameters from the basis and evaluates a fresh table. A basis is
    required.
"""

import numpy as np
from abc import ABC, abstractmethod
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple

from ..exceptions import LatticeBasisError, MissingBasisError
from ..formula import Formula, evaluate
from ..kpoint_table import KPointTable
from .planner import DerivationStep, run_plan


class AbstractGenerator(ABC):
    """
    Abstract base class for k-point generators.

    Parameters
    ----------
    bravais_type : str
        Extended Bravais type this generator is bound to
    dimension : int
        Spatial dimension (2 or 3)
    labels : Tuple[str, ...]
        k-point labels, in catalog order
    """

    def __init__(self, bravais_type: str, dimension: int, labels: Tuple[str, ...]):
        self.bravais_type = bravais_type
        self.dimension = dimension
        self.labels = tuple(labels)

    @abstractmethod
    def __call__(self, basis=None) -> KPointTable:
        """
        Return the k-points of this extended Bravais type.

        Parameters
        ----------
        basis : array_like, shape (D, D), optional
            Conventional direct lattice basis; row i is R_{i+1}

        Returns
        -------
        table : KPointTable
        """
        pass

    @abstractmethod
    def parameters(self, basis=None) -> Dict[str, float]:
        """
        Lattice and derived parameter values used to evaluate the k-points.

        Returns
        -------
        values : Dict[str, float]
            Parameter name → value, in evaluation order
        """
        pass

    @property
    @abstractmethod
    def is_constant(self) -> bool:
        """True if the k-points do not depend on the lattice basis."""
        pass

    def __repr__(self) -> str:
        name = self.__class__.__name__
        return f"{name}({self.bravais_type!r}, dimension={self.dimension}, points={len(self.labels)})"


class ConstantGenerator(AbstractGenerator):
    """
    Generator whose k-points are fixed numbers.

    Parameters
    ----------
    bravais_type : str
        Extended Bravais type
    dimension : int
        Spatial dimension
    table : KPointTable
        Pre-evaluated k-points, returned unchanged on every call
    parameter_values : Mapping[str, float], optional
        Derived parameters that evaluated to constants
    """

    def __init__(self,
                 bravais_type: str,
                 dimension: int,
                 table: KPointTable,
                 parameter_values: Optional[Mapping[str, float]] = None):
        super().__init__(bravais_type, dimension, table.labels)
        self.table = table
        self._parameter_values = dict(parameter_values or {})

    def __call__(self, basis=None) -> KPointTable:
        return self.table

    def parameters(self, basis=None) -> Dict[str, float]:
        return dict(self._parameter_values)

    @property
    def is_constant(self) -> bool:
        return True

    @property
    def required_parameters(self) -> frozenset:
        return frozenset()

    @property
    def plan(self) -> Tuple[DerivationStep, ...]:
        return ()


class ParameterizedGenerator(AbstractGenerator):
    """
    Generator whose k-points depend on lattice parameters.

    Parameters
    ----------
    bravais_type : str
        Extended Bravais type
    dimension : int
        Spatial dimension
    points : Mapping[str, Formula]
        k-point label → coordinate formula
    parameter_formulas : Mapping[str, Formula]
        Derived parameter → formula, evaluated in order after the plan
    plan : List[DerivationStep]
        Steps computing the lattice parameters from the basis

    Notes
    -----
    Instances hold no mutable state; every call works on local values only.
    """

    def __init__(self,
                 bravais_type: str,
                 dimension: int,
                 points: Mapping[str, Formula],
                 parameter_formulas: Mapping[str, Formula],
                 plan: List[DerivationStep]):
        super().__init__(bravais_type, dimension, tuple(points))
        self.points = MappingProxyType(dict(points))
        self.parameter_formulas = MappingProxyType(dict(parameter_formulas))
        self.plan = tuple(plan)
        self.required_parameters = frozenset(step.name for step in self.plan)

    def __call__(self, basis=None) -> KPointTable:
        values = self.parameters(basis)
        points = {}
        for label, formula in self.points.items():
            try:
                points[label] = evaluate(formula, values)
            except ZeroDivisionError as e:
                raise LatticeBasisError(
                    f"k-point {label!r} of extended type {self.bravais_type} is "
                    f"undefined for this lattice: {formula} divides by zero"
                ) from e
        return KPointTable(self.dimension, points)

    def parameters(self, basis=None) -> Dict[str, float]:
        if basis is None:
            raise MissingBasisError(self.bravais_type)
        basis = self._check_basis(basis)

        values = run_plan(self.plan, basis)
        for name, formula in self.parameter_formulas.items():
            try:
                values[name] = float(evaluate(formula, values))
            except ZeroDivisionError as e:
                raise LatticeBasisError(
                    f"Parameter {name!r} of extended type {self.bravais_type} is "
                    f"undefined for this lattice: {formula} divides by zero"
                ) from e
        return values

    @property
    def is_constant(self) -> bool:
        return False

    def _check_basis(self, basis) -> np.ndarray:
        """Convert a basis to a (D, D) float array, rejecting unusable input."""
        D = self.dimension
        try:
            basis = np.array(basis, dtype=float)
        except (TypeError, ValueError) as e:
            raise LatticeBasisError(
                f"Lattice basis for extended type {self.bravais_type} must be "
                f"{D} vectors of length {D}: {e}"
            ) from e

        if basis.shape != (D, D):
            raise LatticeBasisError(
                f"Lattice basis for extended type {self.bravais_type} must have "
                f"shape ({D}, {D}), got {basis.shape}"
            )
        if not np.all(np.isfinite(basis)):
            raise LatticeBasisError(
                f"Lattice basis for extended type {self.bravais_type} contains "
                f"non-finite values"
            )
        if np.any(np.linalg.norm(basis, axis=1) == 0):
            raise LatticeBasisError(
                f"Lattice basis for extended type {self.bravais_type} contains "
                f"a zero-length vector"
            )
        if np.linalg.matrix_rank(basis) < D:
            raise LatticeBasisError(
                f"Lattice basis for extended type {self.bravais_type} is "
                f"linearly dependent"
            )
        return basis
