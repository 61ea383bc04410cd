"""
Rotor Cipher Constants

Contains the alphabet definition and the fixed sizes of the wiring tables.
"""

from __future__ import annotations

import string

__all__ = [
    # Alphabet
    "ALPHABET",
    "ALPHABET_SIZE",
    # Reflector layout
    "REFLECTOR_PAIRS",
    # Rotor window
    "DEFAULT_WINDOW",
    "WINDOW_SIZE",
]

# ============================================================================
# Alphabet
# ============================================================================

# Symbols handled by the machine, index 0 is 'A'
ALPHABET: str = string.ascii_uppercase

# Number of contacts on every rotor and on the reflector
ALPHABET_SIZE: int = len(ALPHABET)

# ============================================================================
# Reflector Layout
# ============================================================================

# Lower half (A-M) is paired into upper half (N-Z)
REFLECTOR_PAIRS: int = ALPHABET_SIZE // 2

# ============================================================================
# Rotor Window
# ============================================================================

# Letter shown in a rotor's window before any adjustment
DEFAULT_WINDOW: str = "A"

# One window letter per rotor: (right, left)
WINDOW_SIZE: int = 2
