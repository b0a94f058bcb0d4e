"""
Unit tests for generator synthesis.

Tests:
- Constant vs lattice-dependent generators
- Call-time behaviour (missing basis, bad basis, determinism)
- Build-time rejection of malformed formulas
"""

import numpy as np
import pytest
from kpoints.core.exceptions import (
    CatalogError,
    LatticeBasisError,
    MissingBasisError,
)
from kpoints.core.generators import (
    ConstantGenerator,
    ParameterizedGenerator,
    synthesize,
)


ORTHORHOMBIC_BASIS = np.array([
    [2.0, 0.0, 0.0],
    [0.0, 3.0, 0.0],
    [0.0, 0.0, 1.0],
])


class TestConstantGenerator:
    """Test types whose k-points do not depend on the lattice."""

    def test_constant_table_without_basis(self):
        """Test that a parameter-free type works with no basis."""
        gen = synthesize('cc', {'Γ': '[0, 0, 0]', 'X': '[0.5, 0, 0]'})
        assert isinstance(gen, ConstantGenerator)
        assert gen.is_constant

        table = gen(None)
        assert table.labels == ('Γ', 'X')
        assert np.array_equal(table['Γ'], [0.0, 0.0, 0.0])
        assert np.array_equal(table['X'], [0.5, 0.0, 0.0])

    def test_basis_is_ignored(self):
        """Test that the same table object is returned for any basis."""
        gen = synthesize('cc', {'Γ': '[0, 0, 0]', 'X': '[1/2, 0, 0]'})
        table = gen()
        assert gen(ORTHORHOMBIC_BASIS) is table
        assert gen(np.eye(3)) is table
        assert gen("not even a basis") is table

    def test_no_plan(self):
        """Test that constant generators need no lattice parameters."""
        gen = synthesize('cc', {'Γ': '[0, 0]'})
        assert gen.required_parameters == frozenset()
        assert gen.plan == ()
        assert gen.parameters() == {}

    def test_constant_derived_parameters(self):
        """Test that derived parameters built from constants are folded in."""
        gen = synthesize('cc', {'P': '[κ, κ, κ]'}, {'κ': '1/4'})
        assert gen.is_constant
        assert np.allclose(gen()['P'], [0.25, 0.25, 0.25])
        assert gen.parameters() == {'κ': 0.25}

    def test_dimension_inferred(self):
        """Test that the dimension comes from the vector length."""
        assert synthesize('cc', {'Γ': '[0, 0]'}).dimension == 2
        assert synthesize('cc', {'Γ': '[0, 0, 0]'}).dimension == 3


class TestParameterizedGenerator:
    """Test types whose k-points depend on the lattice."""

    def test_lengths_substituted(self):
        """Test a = 2, b = 3 substituted into the coordinates."""
        gen = synthesize('ab', {'Γ': '[0, 0, 0]', 'X': '[0.5/a, b/6, 0]'})
        assert isinstance(gen, ParameterizedGenerator)
        assert gen.required_parameters == {'a', 'b'}

        table = gen(ORTHORHOMBIC_BASIS)
        assert np.allclose(table['X'], [0.25, 0.5, 0.0])
        assert np.array_equal(table['Γ'], [0.0, 0.0, 0.0])

    def test_orthogonal_angle(self):
        """Test cosβ = 0, sinβ = 1 for perpendicular R1 and R3."""
        gen = synthesize('mono', {'P': '[cosβ, sinβ, 0]'})
        basis = [[1.0, 0.0, 0.0], [0.0, 0.0, 1.0], [0.0, 1.0, 0.0]]

        params = gen.parameters(basis)
        assert np.isclose(params['cosβ'], 0.0)
        assert np.isclose(params['sinβ'], 1.0)
        assert np.allclose(gen(basis)['P'], [0.0, 1.0, 0.0])

    def test_derived_parameters_in_order(self):
        """Test that later derived parameters can use earlier ones."""
        gen = synthesize(
            'rh',
            {'Γ': '[0, 0, 0]', 'S': '[ν, -ν, 0]'},
            {'δ': 'a**2/(4*c**2)', 'ν': '1/3 + δ'},
        )
        params = gen.parameters(ORTHORHOMBIC_BASIS)
        assert list(params) == ['a', 'c', 'δ', 'ν']
        assert np.isclose(params['δ'], 1.0)
        assert np.allclose(gen(ORTHORHOMBIC_BASIS)['S'], [4/3, -4/3, 0.0])

    def test_missing_basis(self):
        """Test that calling without a basis names the type."""
        gen = synthesize('tI1', {'Z': '[η, η, -η]'}, {'η': '(1 + c**2/a**2)/4'})
        with pytest.raises(MissingBasisError, match="extended type tI1") as excinfo:
            gen(None)
        assert "direct lattice basis" in str(excinfo.value)
        assert excinfo.value.bravais_type == 'tI1'

    def test_deterministic(self):
        """Test that repeated calls give bit-identical coordinates."""
        gen = synthesize('tI1', {'Z': '[η, η, -η]'}, {'η': '(1 + c**2/a**2)/4'})
        basis = [[3.1, 0.2, 0.0], [0.0, 3.1, 0.0], [0.0, 0.3, 2.2]]
        first, second = gen(basis), gen(basis)
        assert first is not second
        assert np.array_equal(first['Z'], second['Z'])
        assert first == second

    def test_result_depends_on_basis(self):
        """Test that different lattices give different coordinates."""
        gen = synthesize('tI1', {'Z': '[η, η, -η]'}, {'η': '(1 + c**2/a**2)/4'})
        squat = gen(np.diag([3.0, 3.0, 1.0]))
        tall = gen(np.diag([3.0, 3.0, 2.0]))
        assert not np.allclose(squat['Z'], tall['Z'])

    def test_labels_fixed(self):
        """Test that the label set does not depend on the basis."""
        gen = synthesize('ab', {'Γ': '[0, 0]', 'X': '[1/(2*a), 0]', 'Y': '[0, b]'})
        assert gen([[1, 0], [0, 1]]).labels == ('Γ', 'X', 'Y')
        assert gen([[5, 1], [0, 2]]).labels == ('Γ', 'X', 'Y')

    @pytest.mark.parametrize("basis", [
        [[1.0, 0.0], [0.0, 1.0]],
        [[1.0, 0.0, 0.0], [0.0, 1.0, 0.0]],
        [[1.0, 0.0, 0.0], [0.0, 1.0, 0.0], [0.0, 0.0, 1.0], [1.0, 1.0, 1.0]],
    ])
    def test_wrong_basis_shape(self, basis):
        """Test that a basis of the wrong shape is rejected."""
        gen = synthesize('ab', {'X': '[a, b, 0]'})
        with pytest.raises(LatticeBasisError, match="shape"):
            gen(basis)

    def test_non_numeric_basis(self):
        """Test that a basis that is not numbers is rejected."""
        gen = synthesize('ab', {'X': '[a, b, 0]'})
        with pytest.raises(LatticeBasisError):
            gen([['x', 0, 0], [0, 1, 0], [0, 0, 1]])

    def test_non_finite_basis(self):
        """Test that NaN entries are rejected."""
        gen = synthesize('ab', {'X': '[a, b, 0]'})
        with pytest.raises(LatticeBasisError, match="non-finite"):
            gen([[np.nan, 0, 0], [0, 1, 0], [0, 0, 1]])

    def test_zero_vector(self):
        """Test that a zero-length basis vector is rejected."""
        gen = synthesize('ab', {'X': '[a, b, 0]'})
        with pytest.raises(LatticeBasisError, match="zero-length"):
            gen([[1, 0, 0], [0, 0, 0], [0, 0, 1]])

    def test_linearly_dependent_basis(self):
        """Test that a basis spanning less than the full space is rejected."""
        gen = synthesize('mono', {'P': '[1/sinβ, 0, 0]'})
        with pytest.raises(LatticeBasisError, match="linearly dependent"):
            gen([[1, 0, 0], [0, 2, 0], [3, 0, 0]])

    def test_division_by_zero_in_parameter(self):
        """Test that a parameter undefined for the lattice names itself."""
        gen = synthesize('mono', {'P': '[ω, 0, 0]'}, {'ω': '1/cosβ'})
        with pytest.raises(LatticeBasisError, match="'ω'") as excinfo:
            gen(np.eye(3))
        assert isinstance(excinfo.value.__cause__, ZeroDivisionError)

    def test_division_by_zero_in_point(self):
        """Test that a k-point undefined for the lattice names itself."""
        gen = synthesize('mono', {'P': '[1/cosβ, 0, 0]'})
        with pytest.raises(LatticeBasisError, match="k-point 'P'"):
            gen(np.eye(3))


class TestSynthesisErrors:
    """Test build-time rejection of malformed entries."""

    def test_unknown_symbol_in_point(self):
        """Test that the error names the type and the symbol."""
        with pytest.raises(CatalogError, match=r"(?s)bad1.*'γ'"):
            synthesize('bad1', {'X': '[γ, 0, 0]'})

    def test_unknown_symbol_in_parameter(self):
        """Test unknown symbols inside parameter formulas."""
        with pytest.raises(CatalogError, match=r"(?s)bad2.*'cosα'"):
            synthesize('bad2', {'X': '[ζ, 0, 0]'}, {'ζ': 'cosα/2'})

    def test_forward_reference(self):
        """Test that parameters may only use earlier parameters."""
        with pytest.raises(CatalogError, match="before it is defined"):
            synthesize('fwd', {'X': '[ζ, η, 0]'}, {'ζ': 'η/2', 'η': 'a/b'})

    def test_c_in_2d(self):
        """Test that 2D types cannot use c."""
        with pytest.raises(CatalogError, match="'c'"):
            synthesize('two', {'X': '[a/c, 0]'})

    def test_wrong_vector_length(self):
        """Test coordinate formulas of the wrong length."""
        with pytest.raises(CatalogError, match="must be a 3-vector"):
            synthesize('len', {'Γ': '[0, 0, 0]', 'X': '[1/2, 0]'}, dimension=3)

    def test_scalar_coordinate(self):
        """Test that scalar coordinate formulas are rejected."""
        with pytest.raises(CatalogError, match="got a scalar"):
            synthesize('len', {'X': '1/2'}, dimension=2)

    def test_inconsistent_lengths_without_dimension(self):
        """Test dimension inference with mixed vector lengths."""
        with pytest.raises(CatalogError, match="Cannot infer the dimension"):
            synthesize('mix', {'Γ': '[0, 0, 0]', 'X': '[1/2, 0]'})

    def test_unsupported_dimension(self):
        """Test that only 2D and 3D are supported."""
        with pytest.raises(CatalogError, match="unsupported dimension"):
            synthesize('four', {'Γ': '[0, 0, 0, 0]'})

    def test_vector_parameter(self):
        """Test that derived parameters must be scalars."""
        with pytest.raises(CatalogError, match="must be a scalar"):
            synthesize('vec', {'X': '[ζ, 0, 0]'}, {'ζ': '[1, 0, 0]'})

    def test_shadowing_lattice_parameter(self):
        """Test that derived parameters cannot redefine a, b, c, cosβ, sinβ."""
        with pytest.raises(CatalogError, match="redefines lattice parameter 'a'"):
            synthesize('shadow', {'X': '[a, 0, 0]'}, {'a': '1/2'})

    def test_no_points(self):
        """Test that an entry needs at least one k-point."""
        with pytest.raises(CatalogError, match="no k-points"):
            synthesize('empty', {})

    def test_syntax_error(self):
        """Test that unparsable formulas fail at build time."""
        with pytest.raises(CatalogError):
            synthesize('syn', {'X': '[1/2, 0,'})


class TestGeneratorRepr:
    """Test string representations."""

    def test_repr(self):
        """Test __repr__ output."""
        gen = synthesize('tP1', {'Γ': '[0, 0, 0]', 'Z': '[0, 0, 1/2]'})
        assert repr(gen) == "ConstantGenerator('tP1', dimension=3, points=2)"


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
