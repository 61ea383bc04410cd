"""
Two-Rotor Enigma Machine

Chains two rotors and a reflector into a self-reciprocal letter cipher.

Signal path for every letter:
    letter -> right rotor -> left rotor -> reflector
           -> left rotor (back) -> right rotor (back) -> letter

After the letter is produced the right rotor steps. When it finishes a
full revolution (26 steps) the left rotor steps once, like the digits
of an odometer.

Because the reflector is an involution and each rotor is read forward
on the way in and inverted on the way out, a second machine built with
the same wiring and window decrypts what the first one encrypted, as
long as both process the same number of letters in the same order.

Note:
    A machine is a stateful stream cipher. It is not thread-safe; give
    each stream its own instance.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from rotorcipher.core.constants import DEFAULT_WINDOW, WINDOW_SIZE
from rotorcipher.core.symbols import index_to_letter, letter_to_index
from rotorcipher.wiring.generate import RngLike, make_rng
from rotorcipher.wiring.reflector import Reflector
from rotorcipher.wiring.rotor import Rotor

__all__ = [
    "Enigma",
    "EnigmaConfig",
    "enigma_encrypt",
    "enigma_decrypt",
]

logger = logging.getLogger(__name__)


@dataclass
class EnigmaConfig:
    """
    Settings for building a machine with random wiring.

    Attributes:
        initial_window: Window letters for the (right, left) rotors.
        seed: Seed for wiring generation, None for fresh entropy.
    """

    initial_window: Sequence[str] = (DEFAULT_WINDOW, DEFAULT_WINDOW)
    seed: Optional[int] = None


def _check_window(initial_window: Sequence[str]) -> Sequence[str]:
    if len(initial_window) != WINDOW_SIZE:
        raise ValueError(
            f"Initial window must be {WINDOW_SIZE} letters (right, left), got {len(initial_window)}"
        )
    for letter in initial_window:
        letter_to_index(letter)
    return initial_window


class Enigma:
    """
    Two-rotor Enigma machine.

    The machine owns its rotors and reflector: the constructor copies
    whatever it is given, and the accessors hand out copies.

    Example:
        encoder = Enigma.random(rng=2024)
        decoder = encoder.copy()

        ciphertext = encoder.encrypt("HELLO")
        decoder.encrypt(ciphertext)  # "HELLO"
    """

    def __init__(
        self,
        right_rotor: Rotor,
        left_rotor: Rotor,
        reflector: Reflector,
        initial_window: Optional[Sequence[str]] = None,
    ) -> None:
        """
        Build a machine from existing components.

        Args:
            right_rotor: Rotor next to the keyboard.
            left_rotor: Rotor next to the reflector.
            reflector: Fixed reflector.
            initial_window: Optional (right, left) window letters. 'A'
                leaves that rotor where it is.

        Raises:
            ValueError: If initial_window does not have two entries.
            InvalidSymbolError: If a window entry is not a letter A-Z.
        """
        if initial_window is not None:
            _check_window(initial_window)

        self._right = right_rotor.copy()
        self._left = left_rotor.copy()
        self._reflector = reflector.copy()

        if initial_window is not None:
            self._right.adjust_init_char(initial_window[0])
            self._left.adjust_init_char(initial_window[1])

    @classmethod
    def from_wiring(
        cls,
        right_wiring: Sequence[int],
        left_wiring: Sequence[int],
        reflector_wiring: Sequence[int],
        initial_window: Optional[Sequence[str]] = None,
    ) -> Enigma:
        """
        Build a machine from explicit wiring tables.

        Raises:
            InvalidWiringError: If any table is not valid for its component.
        """
        machine = cls(
            Rotor(right_wiring),
            Rotor(left_wiring),
            Reflector(reflector_wiring),
            initial_window,
        )
        logger.info("Enigma built from explicit wiring")
        return machine

    @classmethod
    def random(
        cls,
        rng: RngLike = None,
        initial_window: Optional[Sequence[str]] = None,
        config: Optional[EnigmaConfig] = None,
    ) -> Enigma:
        """
        Build a machine with randomly generated wiring.

        Args:
            rng: Seed or Generator. Ignored when config is given.
            initial_window: Optional (right, left) window letters.
                Ignored when config is given.
            config: Seed and window bundled together.
        """
        if config is not None:
            rng = config.seed
            initial_window = config.initial_window

        gen = make_rng(rng)
        machine = cls(
            Rotor.random(gen),
            Rotor.random(gen),
            Reflector.random(gen),
            initial_window,
        )
        logger.info("Enigma built from random wiring")
        return machine

    @classmethod
    def from_machine(
        cls,
        other: Enigma,
        initial_window: Optional[Sequence[str]] = None,
    ) -> Enigma:
        """
        Build an independent copy of another machine.

        Args:
            other: Machine to copy, including its current rotor state.
            initial_window: Optional (right, left) window letters applied
                to the copy only.
        """
        return cls(other._right, other._left, other._reflector, initial_window)

    def copy(self) -> Enigma:
        """Return an independent machine in the same state."""
        return Enigma.from_machine(self)

    def __copy__(self) -> Enigma:
        return self.copy()

    def __deepcopy__(self, memo: dict) -> Enigma:
        return self.copy()

    # ── accessors ────────────────────────────────────────────────

    @property
    def right_rotor(self) -> Rotor:
        """Copy of the right rotor."""
        return self._right.copy()

    @property
    def left_rotor(self) -> Rotor:
        """Copy of the left rotor."""
        return self._left.copy()

    @property
    def reflector(self) -> Reflector:
        """Copy of the reflector."""
        return self._reflector.copy()

    # ── encryption ───────────────────────────────────────────────

    def encrypt_letter(self, plaintext: str) -> str:
        """
        Encrypt (or decrypt) one letter and advance the rotors.

        Args:
            plaintext: Single uppercase letter A-Z.

        Returns:
            Ciphertext letter. Never equal to the input.

        Raises:
            InvalidSymbolError: If plaintext is not an uppercase A-Z letter.
                The rotors do not move in that case.
        """
        signal = letter_to_index(plaintext)

        signal = self._right.encode_to_left(signal)
        signal = self._left.encode_to_reflector_side(signal)
        signal = self._reflector.reflects(signal)
        signal = self._left.encode_to_right(signal)
        signal = self._right.encode_to_right(signal)

        if self._right.step():
            logger.debug("Right rotor turned over, stepping left rotor")
            self._left.step()

        return index_to_letter(signal)

    # Name used by the original driver API
    get_ciphertext = encrypt_letter

    def encrypt(self, text: str) -> str:
        """
        Run every letter of text through the machine in order.

        The whole string is validated before any rotor moves.

        Raises:
            InvalidSymbolError: If any character is not an uppercase A-Z letter.
        """
        for letter in text:
            letter_to_index(letter)
        return "".join(self.encrypt_letter(letter) for letter in text)

    # Self-reciprocal: decrypting is the same operation
    decrypt = encrypt

    # ── comparison ───────────────────────────────────────────────

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Enigma):
            return NotImplemented
        return (
            self._right == other._right
            and self._left == other._left
            and self._reflector == other._reflector
        )

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return (
            f"Right rotor: {self._right}\n"
            f"Left rotor: {self._left}\n"
            f"Reflector: {self._reflector}"
        )

    def __repr__(self) -> str:
        return (
            f"<Enigma right_steps={self._right.total_steps} "
            f"left_steps={self._left.total_steps}>"
        )


def enigma_encrypt(
    text: str,
    right_wiring: Sequence[int],
    left_wiring: Sequence[int],
    reflector_wiring: Sequence[int],
    initial_window: Optional[Sequence[str]] = None,
) -> str:
    """
    Encrypt text with a freshly built machine.

    Convenience function for one-shot encryption.

    Args:
        text: Uppercase letters A-Z.
        right_wiring: Right rotor table.
        left_wiring: Left rotor table.
        reflector_wiring: Reflector table.
        initial_window: Optional (right, left) window letters.

    Returns:
        Ciphertext of the same length.

    Example:
        ciphertext = enigma_encrypt("HELLO", right, left, refl, ("C", "Q"))
    """
    machine = Enigma.from_wiring(right_wiring, left_wiring, reflector_wiring, initial_window)
    return machine.encrypt(text)


def enigma_decrypt(
    text: str,
    right_wiring: Sequence[int],
    left_wiring: Sequence[int],
    reflector_wiring: Sequence[int],
    initial_window: Optional[Sequence[str]] = None,
) -> str:
    """
    Decrypt text with a freshly built machine.

    This is the same operation as enigma_encrypt (the machine is
    self-reciprocal).

    Example:
        plaintext = enigma_decrypt(ciphertext, right, left, refl, ("C", "Q"))
    """
    return enigma_encrypt(text, right_wiring, left_wiring, reflector_wiring, initial_window)
