"""
Tests for the bundled 2D and 3D catalogs and the public entry points.

Tests properties that hold for every extended Bravais type:
- Exact label sets
- Constant types ignore the basis
- Lattice-dependent types need a basis and are deterministic
- sin²β + cos²β = 1 wherever β is derived
"""

import numpy as np
import pytest
from kpoints import (
    get_dispatcher,
    get_points,
    get_points_2d,
    get_points_3d,
    load_catalog,
    LatticeBasisError,
    MissingBasisError,
    UnknownBravaisTypeError,
)
from kpoints.data import POINTS_2D, POINTS_3D, PARAMETERS_2D, PARAMETERS_3D


BETA = np.deg2rad(105.0)

# Generic lattices: no two lengths equal, β oblique
BASES = {
    2: np.array([
        [2.0, 0.0],
        [0.4, 3.1],
    ]),
    3: np.array([
        [4.0,                0.0, 0.0],
        [0.0,                3.0, 0.0],
        [5.0 * np.cos(BETA), 0.0, 5.0 * np.sin(BETA)],
    ]),
}

POINTS = {2: POINTS_2D, 3: POINTS_3D}
PARAMETERS = {2: PARAMETERS_2D, 3: PARAMETERS_3D}

ALL_TYPES = [(2, t) for t in POINTS_2D] + [(3, t) for t in POINTS_3D]
CONSTANT_TYPES = [(D, t) for D, t in ALL_TYPES if t not in PARAMETERS[D]]
PARAMETERIZED_TYPES = [(D, t) for D, t in ALL_TYPES if t in PARAMETERS[D]]


class TestCatalogCoverage:
    """Test that the bundled data compiles completely."""

    @pytest.mark.parametrize("dimension", [2, 3])
    def test_every_type_dispatched(self, dimension):
        """Test that each catalog entry has a generator."""
        dispatch = get_dispatcher(dimension)
        assert set(dispatch.bravais_types) == set(POINTS[dimension])

    def test_seekpath_types_present(self):
        """Test a selection of the 3D extended Bravais types."""
        for bravais_type in ['cP1', 'cF2', 'cI1', 'tI2', 'oF3', 'oI3', 'oA2',
                             'hP1', 'hR2', 'mP1', 'mC3', 'aP2', 'aP3']:
            assert bravais_type in get_dispatcher(3)

    def test_load_catalog(self):
        """Test that catalogs can be reloaded independently."""
        catalog = load_catalog(3)
        assert catalog.dimension == 3
        assert set(catalog) == set(POINTS_3D)

    def test_load_catalog_bad_dimension(self):
        """Test that only 2D and 3D data are bundled."""
        with pytest.raises(ValueError, match="Available dimensions"):
            load_catalog(1)


class TestLabelSets:
    """Test that results carry exactly the catalog labels."""

    @pytest.mark.parametrize("dimension,bravais_type", ALL_TYPES)
    def test_exact_labels(self, dimension, bravais_type):
        """Test no extra and no missing labels, in catalog order."""
        table = get_points(dimension, bravais_type, BASES[dimension])
        assert table.labels == tuple(POINTS[dimension][bravais_type])
        assert table.dimension == dimension

    @pytest.mark.parametrize("dimension,bravais_type", ALL_TYPES)
    def test_gamma_at_origin(self, dimension, bravais_type):
        """Test that every type includes Γ at the origin."""
        table = get_points(dimension, bravais_type, BASES[dimension])
        assert np.array_equal(table['Γ'], np.zeros(dimension))

    @pytest.mark.parametrize("dimension,bravais_type", ALL_TYPES)
    def test_finite_coordinates(self, dimension, bravais_type):
        """Test that a generic lattice gives finite coordinates."""
        table = get_points(dimension, bravais_type, BASES[dimension])
        for k in table.values():
            assert np.all(np.isfinite(k))


class TestConstantTypes:
    """Test types whose k-points are fixed numbers."""

    @pytest.mark.parametrize("dimension,bravais_type", CONSTANT_TYPES)
    def test_basis_independent(self, dimension, bravais_type):
        """Test identical results with, without and for any basis."""
        without = get_points(dimension, bravais_type)
        assert get_points(dimension, bravais_type, BASES[dimension]) is without
        assert get_points(dimension, bravais_type, 2 * np.eye(dimension)) is without

    def test_fcc_points(self):
        """Test face-centred cubic coordinates."""
        table = get_points_3d('cF1')
        assert np.allclose(table['K'], [3/8, 3/8, 3/4])
        assert np.allclose(table['W₂'], [3/4, 1/4, 1/2])

    def test_hexagonal_2d(self):
        """Test the 2D hexagonal K point."""
        assert np.allclose(get_points_2d('hp')['K'], [1/3, 1/3])


class TestParameterizedTypes:
    """Test types whose k-points depend on the lattice."""

    @pytest.mark.parametrize("dimension,bravais_type", PARAMETERIZED_TYPES)
    def test_requires_basis(self, dimension, bravais_type):
        """Test that omitting the basis fails with the type named."""
        with pytest.raises(MissingBasisError, match=bravais_type):
            get_points(dimension, bravais_type)

    @pytest.mark.parametrize("dimension,bravais_type", PARAMETERIZED_TYPES)
    def test_deterministic(self, dimension, bravais_type):
        """Test that the same basis gives bit-identical coordinates."""
        first = get_points(dimension, bravais_type, BASES[dimension])
        second = get_points(dimension, bravais_type, BASES[dimension].copy())
        for label in first:
            assert np.array_equal(first[label], second[label])

    def test_body_centred_tetragonal(self):
        """Test tI1 with a = 3, c = 2: η = (1 + 4/9)/4."""
        table = get_points_3d('tI1', np.diag([3.0, 3.0, 2.0]))
        eta = 13 / 36
        assert np.allclose(table['Z'], [eta, eta, -eta])
        assert np.allclose(table['Z₀'], [-eta, 1 - eta, eta])

    def test_centred_rectangular_2d(self):
        """Test oc1 with a = 2, b = 3: ζ = (1 + 4/9)/4."""
        table = get_points_2d('oc1', [[2.0, 0.0], [0.0, 3.0]])
        zeta = 13 / 36
        assert np.allclose(table['Σ₀'], [zeta, zeta])
        assert np.allclose(table['C₀'], [-zeta, 1 - zeta])

    def test_rhombohedral_chain(self):
        """Test hR1 parameters computed from earlier ones."""
        basis = np.diag([2.0, 2.0, 4.0])
        params = get_dispatcher(3)['hR1'].parameters(basis)
        assert np.isclose(params['δ'], 4 / 64)
        assert np.isclose(params['η'], 5/6 - 2 * params['δ'])
        assert np.isclose(params['ν'], 1/3 + params['δ'])


class TestMonoclinicAngle:
    """Test the derived β for every type that uses it."""

    ANGLE_TYPES = [t for t in POINTS_3D
                   if t in PARAMETERS_3D and 'cosβ' in get_dispatcher(3)[t].required_parameters]

    def test_monoclinic_types_use_angle(self):
        """Test that the C-centred monoclinic types depend on β."""
        assert {'mC1', 'mC2', 'mC3'} <= set(self.ANGLE_TYPES)

    @pytest.mark.parametrize("bravais_type", ['mC1', 'mC2', 'mC3'])
    def test_unit_circle(self, bravais_type):
        """Test sin²β + cos²β = 1 and sinβ ≥ 0 for random lattices."""
        rng = np.random.default_rng(2024)
        generator = get_dispatcher(3)[bravais_type]
        for _ in range(20):
            basis = rng.normal(size=(3, 3))
            params = generator.parameters(basis)
            assert params['sinβ'] >= 0
            assert abs(params['sinβ']**2 + params['cosβ']**2 - 1) < 1e-9

    def test_generic_angle(self):
        """Test β = 105° recovered from the basis."""
        params = get_dispatcher(3)['mC1'].parameters(BASES[3])
        assert np.isclose(params['cosβ'], np.cos(BETA))
        assert np.isclose(params['sinβ'], np.sin(BETA))


class TestPublicErrors:
    """Test failures of the public entry points."""

    @pytest.mark.parametrize("dimension", [2, 3])
    def test_empty_identifier(self, dimension):
        """Test that the empty string is not a type in either dimension."""
        with pytest.raises(UnknownBravaisTypeError):
            get_points(dimension, '')

    def test_namespaces_disjoint(self):
        """Test that 2D identifiers are not valid in 3D and vice versa."""
        with pytest.raises(UnknownBravaisTypeError):
            get_points_3d('oc1')
        with pytest.raises(UnknownBravaisTypeError):
            get_points_2d('cP1')

    def test_degenerate_basis(self):
        """Test that a linearly dependent basis is a LatticeBasisError."""
        with pytest.raises(LatticeBasisError, match="linearly dependent"):
            get_points_3d('mC1', [[1, 0, 0], [0, 2, 0], [3, 0, 0]])

    def test_right_angle_undefined(self):
        """Test mC3 at β = 90°, where ω divides by cosβ."""
        with pytest.raises(LatticeBasisError, match="'ω'"):
            get_points_3d('mC3', np.diag([4.0, 3.0, 5.0]))

    def test_unsupported_dimension(self):
        """Test that only 2D and 3D are available."""
        with pytest.raises(ValueError, match="Unsupported dimension 4"):
            get_points(4, 'cP1')


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
