"""
Reflector

Fixed wheel at the far end of the rotor stack that sends the signal
back through the rotors. Its table is an involution without fixed
points: reflects(reflects(i)) == i and reflects(i) != i.

Those two properties are what make the whole machine self-reciprocal:
the same settings that encrypt a message also decrypt it.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np
import numpy.typing as npt

from rotorcipher.core.errors import InvalidWiringError
from rotorcipher.wiring.generate import RngLike, generate_reflector_wiring
from rotorcipher.wiring.permutation import Permutation, fixed_points

__all__ = [
    "Reflector",
]


class Reflector(Permutation):
    """
    Involutive permutation with no fixed points.

    Immutable: the table is read-only and there is no stepping.
    Instances are hashable.

    Example:
        reflector = Reflector.random(rng=17)
        c = reflector.reflects(4)
        reflector.reflects(c)  # 4
    """

    def __init__(self, wiring: Sequence[int] | npt.ArrayLike) -> None:
        super().__init__(wiring)

        points = fixed_points(self._table)
        if points:
            raise InvalidWiringError(
                f"Reflector wiring must not map a letter to itself, got fixed points {points}"
            )

        not_paired = np.flatnonzero(self._table[self._table] != np.arange(self._table.shape[0]))
        if not_paired.size:
            raise InvalidWiringError(
                f"Reflector wiring must be an involution, broken at positions {not_paired.tolist()}"
            )

        self._table.setflags(write=False)

    @classmethod
    def random(cls, rng: RngLike = None) -> Reflector:
        """Create a reflector with randomly generated wiring."""
        return cls(generate_reflector_wiring(rng))

    def reflects(self, signal: int) -> int:
        """Send signal back towards the rotors."""
        return self.forward(signal)

    def copy(self) -> Reflector:
        """Return an equal reflector that shares no state with this one."""
        return Reflector(self._table)

    def __copy__(self) -> Reflector:
        return self.copy()

    def __deepcopy__(self, memo: dict) -> Reflector:
        return self.copy()
