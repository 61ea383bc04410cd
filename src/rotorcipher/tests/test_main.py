"""
Tests for the ``python -m rotorcipher`` demo.
"""

import pytest

from rotorcipher.__main__ import main


class TestMain:
    """Tests for the demo entry point."""

    def test_default_message(self, capsys):
        """Test the demo encodes ABC and decodes it back."""
        main(["--seed", "3"])
        ciphertext, plaintext = capsys.readouterr().out.splitlines()
        assert len(ciphertext) == 3
        assert plaintext == "ABC"

    def test_custom_message_and_window(self, capsys):
        """Test message and window arguments are used."""
        main(["--seed", "17", "--window", "CQ", "HELLO"])
        ciphertext, plaintext = capsys.readouterr().out.splitlines()
        assert ciphertext != "HELLO"
        assert plaintext == "HELLO"

    def test_reproducible(self, capsys):
        """Test the same seed prints the same ciphertext."""
        main(["--seed", "5", "ROTOR"])
        first = capsys.readouterr().out
        main(["--seed", "5", "ROTOR"])
        assert capsys.readouterr().out == first

    def test_bad_message(self):
        """Test lowercase input exits with a usage error."""
        with pytest.raises(SystemExit) as exc_info:
            main(["--seed", "1", "hello"])
        assert exc_info.value.code == 2

    def test_bad_window(self):
        """Test a window of the wrong length exits with a usage error."""
        with pytest.raises(SystemExit):
            main(["--window", "C"])
