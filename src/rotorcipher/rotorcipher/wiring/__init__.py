"""Rotor Cipher Wiring Layer

This module provides the substitution components of the machine:
- Permutation tables with forward and inverse lookup
- Rotors (stepping, window adjustment)
- Reflector (fixed involution)
- Random wiring generation
"""

from rotorcipher.wiring.generate import (
    generate_reflector_wiring,
    generate_rotor_wiring,
    make_rng,
)
from rotorcipher.wiring.permutation import Permutation, fixed_points, validate_permutation
from rotorcipher.wiring.reflector import Reflector
from rotorcipher.wiring.rotor import Rotor

__all__ = [
    # Permutation
    "Permutation",
    "validate_permutation",
    "fixed_points",
    # Components
    "Rotor",
    "Reflector",
    # Generation
    "make_rng",
    "generate_rotor_wiring",
    "generate_reflector_wiring",
]
