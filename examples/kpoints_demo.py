"""
k-points demo

This example walks through the main entry points:
- Constant k-points (no lattice needed)
- Lattice-dependent k-points (tetragonal, monoclinic)
- Errors for missing lattices and unknown types
- A custom catalog built from formula strings
"""

import numpy as np
import sys
from pathlib import Path

# Add kpoints to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from kpoints import (
    Catalog,
    build_dispatch,
    get_dispatcher,
    get_points,
    KPointsError,
)
from kpoints.utils import setup_logger


def example_constant():
    """Example 1: face-centred cubic, no lattice needed."""
    print("="*60)
    print("Example 1: cF1 (face-centred cubic)")
    print("="*60)

    table = get_points(3, 'cF1')
    for label, k in table.items():
        print(f"  {label:3s} = {k}")

    print(f"\nSame object on every call: {get_points(3, 'cF1') is table}")


def example_tetragonal():
    """Example 2: body-centred tetragonal, depends on c/a."""
    print("\n" + "="*60)
    print("Example 2: tI1 (body-centred tetragonal, c < a)")
    print("="*60)

    basis = np.diag([3.0, 3.0, 2.0])
    generator = get_dispatcher(3)['tI1']
    print(f"\nGenerator: {generator}")
    print(f"Plan: {[str(step) for step in generator.plan]}")
    print(f"Parameters: {generator.parameters(basis)}")

    table = generator(basis)
    for label, k in table.items():
        print(f"  {label:3s} = {k}")


def example_monoclinic():
    """Example 3: C-centred monoclinic, depends on β."""
    print("\n" + "="*60)
    print("Example 3: mC1 (C-centred monoclinic)")
    print("="*60)

    beta = np.deg2rad(110.0)
    basis = np.array([
        [4.0,                 0.0, 0.0],
        [0.0,                 3.0, 0.0],
        [5.0 * np.cos(beta),  0.0, 5.0 * np.sin(beta)],
    ])

    params = get_dispatcher(3)['mC1'].parameters(basis)
    print(f"\ncosβ = {params['cosβ']:.4f}, sinβ = {params['sinβ']:.4f}")

    table = get_points(3, 'mC1', basis)
    print(f"{len(table)} k-points: {', '.join(table.labels)}")


def example_errors():
    """Example 4: what goes wrong, and how it is reported."""
    print("\n" + "="*60)
    print("Example 4: errors")
    print("="*60)

    for args in [(3, 'tI1', None), (3, 'xyz', None), (2, 'oc1', np.eye(3))]:
        try:
            get_points(*args)
        except KPointsError as e:
            print(f"\n{type(e).__name__}: {e}")


def example_custom_catalog():
    """Example 5: a hand-written catalog."""
    print("\n" + "="*60)
    print("Example 5: custom catalog")
    print("="*60)

    catalog = Catalog(
        dimension=2,
        points={
            'sq': {'Γ': '[0, 0]', 'X': '[1/2, 0]', 'M': '[1/2, 1/2]'},
            'rect': {'Γ': '[0, 0]', 'X': '[ξ, 0]'},
        },
        parameters={'rect': {'ξ': 'a/(2*b)'}},
    )
    dispatch = build_dispatch(catalog)
    print(f"\n{dispatch}")
    print(f"sq:   {dispatch('sq').to_dict()}")
    print(f"rect: {dispatch('rect', [[1.0, 0.0], [0.0, 2.0]]).to_dict()}")


def main():
    """Run all examples."""
    setup_logger()

    example_constant()
    example_tetragonal()
    example_monoclinic()
    example_errors()
    example_custom_catalog()

    print("\n" + "="*60)
    print("All examples completed successfully!")
    print("="*60)


if __name__ == '__main__':
    main()
