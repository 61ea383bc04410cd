"""
Permutation Tables

A wiring table is a bijection on the contact indices 0-25: position *i*
holds the image of symbol *i*. Both the rotors and the reflector are
built on top of :class:`Permutation`.

Lookups run in both directions:
- forward(i): the value stored at position i
- inverse(v): the position that holds value v

The inverse table is cached and rebuilt whenever the wiring changes,
so both directions are O(1).
"""

from __future__ import annotations

from typing import Sequence

import numpy as np
import numpy.typing as npt

from rotorcipher.core.constants import ALPHABET_SIZE
from rotorcipher.core.errors import InvalidWiringError
from rotorcipher.core.symbols import check_index

__all__ = [
    "Permutation",
    "validate_permutation",
    "fixed_points",
]


def validate_permutation(wiring: Sequence[int] | npt.ArrayLike) -> np.ndarray:
    """
    Check that wiring is a bijection on 0-25 and return it as an array.

    Args:
        wiring: Sequence of 26 integers.

    Returns:
        A fresh integer array, never a view of the input.

    Raises:
        InvalidWiringError: If the table has the wrong length, holds
            non-integers, out-of-range values or duplicates.
    """
    try:
        table = np.array(wiring)
    except ValueError as exc:
        raise InvalidWiringError(f"Wiring must be a flat sequence of integers: {exc}") from exc

    if table.ndim != 1 or table.shape[0] != ALPHABET_SIZE:
        raise InvalidWiringError(
            f"Wiring must be {ALPHABET_SIZE} entries, got shape {table.shape}"
        )
    if table.dtype == np.bool_ or not np.issubdtype(table.dtype, np.integer):
        raise InvalidWiringError(f"Wiring must hold integers, got dtype {table.dtype}")

    out_of_range = table[(table < 0) | (table >= ALPHABET_SIZE)]
    if out_of_range.size:
        raise InvalidWiringError(
            f"Wiring values must be 0-{ALPHABET_SIZE - 1}, got {out_of_range.tolist()}"
        )

    values, counts = np.unique(table, return_counts=True)
    if values.size != ALPHABET_SIZE:
        raise InvalidWiringError(
            f"Wiring must not repeat values, got duplicates {values[counts > 1].tolist()}"
        )

    return table.astype(np.intp)


def fixed_points(table: np.ndarray) -> list[int]:
    """Return the positions that map to themselves."""
    return np.flatnonzero(table == np.arange(table.shape[0])).tolist()


class Permutation:
    """
    Bijective mapping on the 26 contact indices.

    The table is private; :attr:`wiring` hands out a tuple snapshot so
    callers can never mutate the state behind a component.

    Example:
        shift = Permutation([1, 2, 3, ..., 25, 0])
        shift.forward(0)   # 1
        shift.inverse(0)   # 25
    """

    def __init__(self, wiring: Sequence[int] | npt.ArrayLike) -> None:
        self._table = validate_permutation(wiring)
        self._inverse = np.argsort(self._table)

    @property
    def wiring(self) -> tuple[int, ...]:
        """Immutable snapshot of the wiring table."""
        return tuple(self._table.tolist())

    def forward(self, index: int) -> int:
        """Return the image of index."""
        return int(self._table[check_index(index)])

    def inverse(self, value: int) -> int:
        """Return the position j for which forward(j) == value."""
        return int(self._inverse[check_index(value)])

    def _set_table(self, table: np.ndarray) -> None:
        # Caller guarantees table is already a valid permutation
        self._table = table
        self._inverse = np.argsort(table)

    def __len__(self) -> int:
        return ALPHABET_SIZE

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return bool(np.array_equal(self._table, other._table))

    def __hash__(self) -> int:
        return hash(self.wiring)

    def __str__(self) -> str:
        return f"Wiring: {self._table.tolist()}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._table.tolist()})"
