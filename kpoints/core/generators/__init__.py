"""
Generators: compiled, reusable k-point functions for extended Bravais types.

- planner: derivation plans for lattice parameters (a, b, c, cosβ, sinβ)
- base: ConstantGenerator and ParameterizedGenerator
- synthesis: synthesize() builds the right generator for a catalog entry
"""

from .planner import (
    DerivationStep,
    parameter_vocabulary,
    plan_derivation,
    run_plan,
)
from .base import AbstractGenerator, ConstantGenerator, ParameterizedGenerator
from .synthesis import synthesize

__all__ = [
    'DerivationStep',
    'parameter_vocabulary',
    'plan_derivation',
    'run_plan',
    'AbstractGenerator',
    'ConstantGenerator',
    'ParameterizedGenerator',
    'synthesize',
]
