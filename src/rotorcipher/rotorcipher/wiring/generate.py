"""
Random Wiring Generation

Draws rotor and reflector tables from a numpy Generator.

Rotor tables are derangements: position i is filled with a random value
that is neither used elsewhere nor equal to i. If the only value left for
the last position is the position itself the table is discarded and
drawn again, so generation always terminates.

Reflector tables pair the lower half (A-M) into the upper half (N-Z):
each of positions 0-12 takes a fresh value from 13-25, and positions
13-25 point back at whichever lower position chose them. The result is
an involution with no fixed points by construction.

Every function accepts ``rng`` as None (fresh OS entropy), an integer
seed, or an existing ``numpy.random.Generator``.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

import numpy as np

from rotorcipher.core.constants import ALPHABET_SIZE, REFLECTOR_PAIRS

__all__ = [
    "RngLike",
    "make_rng",
    "generate_rotor_wiring",
    "generate_reflector_wiring",
]

logger = logging.getLogger(__name__)

RngLike = Optional[Union[int, np.random.Generator]]


def make_rng(rng: RngLike = None) -> np.random.Generator:
    """Return a Generator, seeding a new one unless one is passed in."""
    if isinstance(rng, np.random.Generator):
        return rng
    return np.random.default_rng(rng)


def generate_rotor_wiring(rng: RngLike = None) -> tuple[int, ...]:
    """
    Generate a random rotor wiring with no self-mapped letter.

    Args:
        rng: Seed or Generator for reproducible output.

    Returns:
        Tuple of 26 distinct values where wiring[i] != i.
    """
    gen = make_rng(rng)
    attempts = 0

    while True:
        attempts += 1
        unused = list(range(ALPHABET_SIZE))
        wiring: list[int] = []

        for position in range(ALPHABET_SIZE):
            candidates = [v for v in unused if v != position]
            if not candidates:
                # Only the position itself is left; start the table over
                break
            value = candidates[int(gen.integers(len(candidates)))]
            unused.remove(value)
            wiring.append(value)

        if len(wiring) == ALPHABET_SIZE:
            if attempts > 1:
                logger.debug(f"Rotor wiring generated after {attempts} attempts")
            return tuple(wiring)


def generate_reflector_wiring(rng: RngLike = None) -> tuple[int, ...]:
    """
    Generate a random reflector wiring.

    Args:
        rng: Seed or Generator for reproducible output.

    Returns:
        Tuple of 26 values forming 13 disjoint swaps between the lower
        and upper halves of the alphabet.
    """
    gen = make_rng(rng)
    upper = list(range(REFLECTOR_PAIRS, ALPHABET_SIZE))
    wiring = [0] * ALPHABET_SIZE

    for position in range(REFLECTOR_PAIRS):
        partner = upper.pop(int(gen.integers(len(upper))))
        wiring[position] = partner
        wiring[partner] = position

    return tuple(wiring)
