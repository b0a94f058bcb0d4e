"""
High-symmetry k-points of the 2D extended Bravais types.

Coordinates are fractional, relative to the primitive reciprocal basis.
Lattice parameters a = |R₁| and b = |R₂| refer to the conventional direct
basis.

Types
-----
mp  : oblique
op  : primitive rectangular
oc1 : centred rectangular, a < b
oc2 : centred rectangular, a > b
tp  : square
hp  : hexagonal
"""

POINTS_2D = {
    'mp': {
        'Γ': '[0, 0]',
        'X': '[1/2, 0]',
        'Y': '[0, 1/2]',
        'C': '[1/2, 1/2]',
    },
    'op': {
        'Γ': '[0, 0]',
        'X': '[1/2, 0]',
        'Y': '[0, 1/2]',
        'S': '[1/2, 1/2]',
    },
    'oc1': {
        'Γ': '[0, 0]',
        'Y': '[-1/2, 1/2]',
        'S': '[0, 1/2]',
        'Σ₀': '[ζ, ζ]',
        'C₀': '[-ζ, 1 - ζ]',
    },
    'oc2': {
        'Γ': '[0, 0]',
        'Y': '[1/2, 1/2]',
        'S': '[0, 1/2]',
        'Δ₀': '[-ζ, ζ]',
        'F₀': '[ζ, 1 - ζ]',
    },
    'tp': {
        'Γ': '[0, 0]',
        'X': '[1/2, 0]',
        'M': '[1/2, 1/2]',
    },
    'hp': {
        'Γ': '[0, 0]',
        'M': '[1/2, 0]',
        'K': '[1/3, 1/3]',
    },
}

PARAMETERS_2D = {
    'oc1': {'ζ': '(1 + a**2/b**2)/4'},
    'oc2': {'ζ': '(1 + b**2/a**2)/4'},
}
