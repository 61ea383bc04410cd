"""
Rotor Cipher Errors

Both error types derive from ValueError so code that validates input
with ``except ValueError`` keeps working.
"""

from __future__ import annotations

__all__ = [
    "InvalidSymbolError",
    "InvalidWiringError",
]


class InvalidSymbolError(ValueError):
    """Input is not an uppercase A-Z letter, or a signal is outside 0-25."""


class InvalidWiringError(ValueError):
    """A wiring table is not a valid permutation for its component."""
