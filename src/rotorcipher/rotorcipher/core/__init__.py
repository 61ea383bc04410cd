"""Rotor Cipher Core Components

This module contains the fundamental building blocks shared by the wiring
and machine layers:
- Alphabet and table size constants
- Error types
- Letter <-> signal conversion
"""

from rotorcipher.core.constants import (
    ALPHABET,
    ALPHABET_SIZE,
    DEFAULT_WINDOW,
    REFLECTOR_PAIRS,
    WINDOW_SIZE,
)
from rotorcipher.core.errors import InvalidSymbolError, InvalidWiringError
from rotorcipher.core.symbols import check_index, index_to_letter, letter_to_index

__all__ = [
    # Constants
    "ALPHABET",
    "ALPHABET_SIZE",
    "REFLECTOR_PAIRS",
    "DEFAULT_WINDOW",
    "WINDOW_SIZE",
    # Errors
    "InvalidSymbolError",
    "InvalidWiringError",
    # Symbols
    "letter_to_index",
    "index_to_letter",
    "check_index",
]
