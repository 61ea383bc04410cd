"""
Letter <-> Signal Conversion

Maps the 26 uppercase letters onto contact indices 0-25 and back.
Anything outside that range is rejected instead of wrapping.

Examples:
    >>> letter_to_index("A")
    0
    >>> index_to_letter(25)
    'Z'
"""

from __future__ import annotations

from numbers import Integral

from rotorcipher.core.constants import ALPHABET, ALPHABET_SIZE
from rotorcipher.core.errors import InvalidSymbolError

__all__ = [
    "letter_to_index",
    "index_to_letter",
    "check_index",
]


def letter_to_index(letter: str) -> int:
    """
    Convert an uppercase letter to its contact index.

    Args:
        letter: Single character in A-Z.

    Returns:
        Index in range 0-25.

    Raises:
        InvalidSymbolError: If letter is not exactly one uppercase A-Z character.
    """
    if not isinstance(letter, str) or len(letter) != 1 or letter not in ALPHABET:
        raise InvalidSymbolError(f"Symbol must be one uppercase letter A-Z, got {letter!r}")
    return ord(letter) - ord("A")


def index_to_letter(index: int) -> str:
    """
    Convert a contact index back to its letter.

    Args:
        index: Integer in range 0-25.

    Returns:
        Uppercase letter.

    Raises:
        InvalidSymbolError: If index is out of range.
    """
    return ALPHABET[check_index(index)]


def check_index(index: int) -> int:
    """Return index as a plain int if it is a valid signal, else raise."""
    # bool is an int subclass but never a meaningful signal
    if isinstance(index, bool) or not isinstance(index, Integral):
        raise InvalidSymbolError(f"Signal must be an int, got {type(index).__name__}")
    if not 0 <= index < ALPHABET_SIZE:
        raise InvalidSymbolError(f"Signal must be 0-{ALPHABET_SIZE - 1}, got {index}")
    return int(index)
