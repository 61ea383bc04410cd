"""
Rotor

A rotor is a permutation that turns by 1/26 of a revolution after use.

Signal paths:
- Outbound (towards the reflector) the rotor is read forward:
  ``encode_to_left`` and ``encode_to_reflector_side``.
- On the return path it is read backward: ``encode_to_right`` answers
  "which contact produced this value", i.e. an inverse lookup.

Stepping:
    One step moves position 0 to the end of the table and then lowers
    every value by one (mod 26). This conjugates the wiring with the
    unit shift, so the table stays a bijection and keeps its cycle
    structure; in particular a rotor without fixed points never gains
    one by turning. After 26 steps the wiring is back where it started
    and the step counter rolls over to 0.
"""

from __future__ import annotations

import logging
from typing import Sequence

import numpy as np
import numpy.typing as npt

from rotorcipher.core.constants import ALPHABET_SIZE, DEFAULT_WINDOW
from rotorcipher.core.errors import InvalidWiringError
from rotorcipher.core.symbols import letter_to_index
from rotorcipher.wiring.generate import RngLike, generate_rotor_wiring
from rotorcipher.wiring.permutation import Permutation, fixed_points

__all__ = [
    "Rotor",
]

logger = logging.getLogger(__name__)


class Rotor(Permutation):
    """
    Rotating substitution wheel.

    Attributes:
        wiring: Snapshot of the current table (tuple).
        total_steps: Steps taken since construction or the last window
            adjustment, modulo 26.

    Example:
        rotor = Rotor([1, 2, 3, ..., 25, 0])
        rotor.encode_to_left(0)    # 1
        rotor.encode_to_right(0)   # 25
        rotor.step()               # False, no turnover yet
    """

    def __init__(
        self,
        wiring: Sequence[int] | npt.ArrayLike,
        total_steps: int = 0,
    ) -> None:
        super().__init__(wiring)

        points = fixed_points(self._table)
        if points:
            raise InvalidWiringError(
                f"Rotor wiring must not map a letter to itself, got fixed points {points}"
            )
        if isinstance(total_steps, bool) or not isinstance(total_steps, int):
            raise ValueError(f"total_steps must be an int, got {type(total_steps).__name__}")
        if not 0 <= total_steps < ALPHABET_SIZE:
            raise ValueError(f"total_steps must be 0-{ALPHABET_SIZE - 1}, got {total_steps}")

        self._total_steps = total_steps

    @classmethod
    def random(cls, rng: RngLike = None) -> Rotor:
        """Create a rotor with randomly generated wiring."""
        return cls(generate_rotor_wiring(rng))

    @property
    def total_steps(self) -> int:
        """Steps since the last reset, 0-25."""
        return self._total_steps

    # ── signal paths ─────────────────────────────────────────────

    def encode_to_left(self, signal: int) -> int:
        """Forward lookup for a signal heading to the rotor on the left."""
        return self.forward(signal)

    def encode_to_reflector_side(self, signal: int) -> int:
        """Forward lookup for a signal heading into the reflector."""
        return self.forward(signal)

    def encode_to_right(self, signal: int) -> int:
        """Inverse lookup for a signal on its way back out."""
        return self.inverse(signal)

    # Names used by the original driver API
    yield_input_for_left_rotor = encode_to_left
    yield_input_for_reflector = encode_to_reflector_side
    yield_input_for_right_rotor = encode_to_right

    # ── stepping ─────────────────────────────────────────────────

    def step(self) -> bool:
        """
        Turn the rotor by one position.

        Returns:
            True when this step completes a full revolution (the
            counter rolls over from 25 to 0).
        """
        self._set_table((np.roll(self._table, -1) + ALPHABET_SIZE - 1) % ALPHABET_SIZE)
        self._total_steps = (self._total_steps + 1) % ALPHABET_SIZE

        turnover = self._total_steps == 0
        logger.debug(f"Rotor stepped, total_steps={self._total_steps}, turnover={turnover}")
        return turnover

    def adjust_init_char(self, letter: str) -> None:
        """
        Turn the rotor so that letter shows in its window.

        The rotor steps once more than the position of letter in the
        current wiring, then the step counter is cleared: positioning is
        not counted as use. 'A' is the default window and leaves the
        rotor untouched.

        Args:
            letter: Uppercase letter A-Z.

        Raises:
            InvalidSymbolError: If letter is not an uppercase A-Z letter.
        """
        value = letter_to_index(letter)
        if letter == DEFAULT_WINDOW:
            return

        for _ in range(self.inverse(value) + 1):
            self.step()
        self._total_steps = 0

    # ── copying & comparison ────────────────────────────────────

    def copy(self) -> Rotor:
        """Return an independent rotor with the same wiring and counter."""
        return Rotor(self._table, self._total_steps)

    def __copy__(self) -> Rotor:
        return self.copy()

    def __deepcopy__(self, memo: dict) -> Rotor:
        return self.copy()

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._total_steps == other._total_steps and super().__eq__(other)

    # Mutable, so not hashable
    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return f"Wiring: {self._table.tolist()}\nTotal steps: {self._total_steps}"

    def __repr__(self) -> str:
        return f"Rotor({self._table.tolist()}, total_steps={self._total_steps})"
