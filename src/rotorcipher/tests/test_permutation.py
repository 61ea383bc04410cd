"""
Tests for Permutation tables and wiring validation.
"""

import numpy as np
import pytest

from rotorcipher.core.errors import InvalidSymbolError, InvalidWiringError
from rotorcipher.wiring.permutation import Permutation, fixed_points, validate_permutation


class TestValidatePermutation:
    """Tests for validate_permutation function."""

    def test_identity_is_valid(self):
        """Test identity table passes bijection check."""
        table = validate_permutation(list(range(26)))
        assert table.tolist() == list(range(26))

    def test_returns_copy(self):
        """Test validated table is not a view of the input."""
        source = np.arange(26)
        table = validate_permutation(source)
        source[0] = 5
        assert table[0] == 0

    def test_too_short(self):
        """Test 25-entry table is rejected."""
        with pytest.raises(InvalidWiringError, match="26 entries"):
            validate_permutation(list(range(25)))

    def test_too_long(self):
        """Test 27-entry table is rejected."""
        with pytest.raises(InvalidWiringError, match="26 entries"):
            validate_permutation(list(range(27)))

    def test_duplicate(self):
        """Test repeated value is rejected."""
        wiring = list(range(26))
        wiring[5] = 4
        with pytest.raises(InvalidWiringError, match="duplicates \\[4\\]"):
            validate_permutation(wiring)

    def test_out_of_range(self):
        """Test values outside 0-25 are rejected."""
        wiring = list(range(26))
        wiring[25] = 26
        with pytest.raises(InvalidWiringError, match="0-25"):
            validate_permutation(wiring)

    def test_negative(self):
        """Test negative values are rejected."""
        wiring = list(range(26))
        wiring[0] = -1
        with pytest.raises(InvalidWiringError, match="0-25"):
            validate_permutation(wiring)

    def test_floats(self):
        """Test float tables are rejected."""
        with pytest.raises(InvalidWiringError, match="integers"):
            validate_permutation([float(i) for i in range(26)])

    def test_nested(self):
        """Test 2-D tables are rejected."""
        with pytest.raises(InvalidWiringError):
            validate_permutation([list(range(26))])

    def test_ragged(self):
        """Test ragged input is reported as bad wiring."""
        with pytest.raises(InvalidWiringError):
            validate_permutation([[1, 2], [3]])


class TestFixedPoints:
    """Tests for fixed_points function."""

    def test_identity(self):
        """Test every position of the identity is fixed."""
        assert fixed_points(np.arange(26)) == list(range(26))

    def test_none(self, shift_wiring):
        """Test shift table has no fixed points."""
        assert fixed_points(np.array(shift_wiring)) == []


class TestPermutation:
    """Tests for Permutation class."""

    def test_forward(self, shift_wiring):
        """Test forward lookup returns stored value."""
        perm = Permutation(shift_wiring)
        assert perm.forward(0) == 1
        assert perm.forward(25) == 0

    def test_inverse(self, shift_wiring):
        """Test inverse lookup returns position of value."""
        perm = Permutation(shift_wiring)
        assert perm.inverse(1) == 0
        assert perm.inverse(0) == 25

    def test_inverse_undoes_forward(self, rng):
        """Test inverse(forward(i)) == i for a random table."""
        perm = Permutation(rng.permutation(26))
        for i in range(26):
            assert perm.inverse(perm.forward(i)) == i
            assert perm.forward(perm.inverse(i)) == i

    def test_returns_python_int(self, shift_wiring):
        """Test lookups return plain ints, not numpy scalars."""
        perm = Permutation(shift_wiring)
        assert type(perm.forward(3)) is int
        assert type(perm.inverse(3)) is int

    def test_out_of_range_signal(self, shift_wiring):
        """Test lookups reject signals outside 0-25."""
        perm = Permutation(shift_wiring)
        with pytest.raises(InvalidSymbolError):
            perm.forward(26)
        with pytest.raises(InvalidSymbolError):
            perm.inverse(-1)

    def test_wiring_snapshot(self, shift_wiring):
        """Test wiring property is an immutable copy."""
        perm = Permutation(shift_wiring)
        wiring = perm.wiring
        assert isinstance(wiring, tuple)
        assert wiring == tuple(shift_wiring)

    def test_input_not_aliased(self, shift_wiring):
        """Test mutating the source list does not change the permutation."""
        perm = Permutation(shift_wiring)
        shift_wiring[0], shift_wiring[1] = shift_wiring[1], shift_wiring[0]
        assert perm.forward(0) == 1

    def test_len(self, shift_wiring):
        """Test length is alphabet size."""
        assert len(Permutation(shift_wiring)) == 26

    def test_equality(self, shift_wiring, pair_swap_wiring):
        """Test equality is structural."""
        assert Permutation(shift_wiring) == Permutation(list(shift_wiring))
        assert Permutation(shift_wiring) != Permutation(pair_swap_wiring)

    def test_hash(self, shift_wiring):
        """Test equal permutations hash equal."""
        assert hash(Permutation(shift_wiring)) == hash(Permutation(shift_wiring))

    def test_str(self, shift_wiring):
        """Test string dump shows the table."""
        assert str(Permutation(shift_wiring)) == f"Wiring: {shift_wiring}"

    def test_repr(self, shift_wiring):
        """Test repr names the class."""
        assert repr(Permutation(shift_wiring)).startswith("Permutation([1, 2, 3")
