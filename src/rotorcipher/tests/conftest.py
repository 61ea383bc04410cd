"""Pytest configuration and fixtures for rotorcipher tests.

This module provides shared fixtures and configuration for the test suite.
"""

import numpy as np
import pytest

# Fixed seed for reproducible tests
# This ensures random wiring is the same across test runs
RANDOM_SEED = 42


@pytest.fixture
def rng():
    """Seeded numpy Generator for reproducible random wiring."""
    return np.random.default_rng(RANDOM_SEED)


@pytest.fixture
def shift_wiring():
    """Rotor table where every letter maps to the next one (A->B ... Z->A)."""
    return [(i + 1) % 26 for i in range(26)]


@pytest.fixture
def pair_swap_wiring():
    """Rotor table swapping neighbours: A<->B, C<->D, ... Y<->Z."""
    return [i ^ 1 for i in range(26)]


@pytest.fixture
def reversed_wiring():
    """Reflector table mapping i to 25 - i (A<->Z, B<->Y, ...)."""
    return [25 - i for i in range(26)]
