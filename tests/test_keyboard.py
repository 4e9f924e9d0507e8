"""
Tests for keyboard decoding and the background reader's queue.
"""

import pytest


class TestDecodeKey:
    """Tests for mapping raw sequences to keys."""

    @pytest.mark.parametrize("sequence,expected", [
        ("\x1b[A", "UP"),
        ("\x1b[B", "DOWN"),
        ("\x1b[C", "RIGHT"),
        ("\x1b[D", "LEFT"),
        ("\x1bOA", "UP"),
        ("\xe0H", "UP"),
        ("\x00M", "RIGHT"),
        ("w", "UP"),
        ("A", "LEFT"),
        ("p", "PAUSE"),
        (" ", "PAUSE"),
        ("q", "QUIT"),
        ("R", "RESTART"),
        ("e", "EXIT"),
        ("\x1b", "EXIT"),
    ])
    def test_known_keys(self, sequence, expected):
        """Test arrows, WASD and menu letters decode."""
        from termsnake.visualization.keyboard import Key, decode_key

        assert decode_key(sequence) is Key[expected]

    def test_unknown_key(self):
        """Test keys the game does not use decode to None."""
        from termsnake.visualization.keyboard import decode_key

        assert decode_key("z") is None
        assert decode_key("\x1b[Z") is None


class TestDecodeChunk:
    """Tests for splitting multi-key reads."""

    def test_split_mixed_chunk(self):
        """Test escape sequences and letters split correctly."""
        from termsnake.visualization.keyboard import split_sequences

        assert split_sequences("\x1b[Aw\x1b[Dq") == ["\x1b[A", "w", "\x1b[D", "q"]

    def test_lone_escape(self):
        """Test a bare Escape stays a single key."""
        from termsnake.visualization.keyboard import split_sequences

        assert split_sequences("\x1b") == ["\x1b"]

    def test_windows_prefix(self):
        """Test Windows scan-code pairs stay together."""
        from termsnake.visualization.keyboard import split_sequences

        assert split_sequences("\xe0Hp") == ["\xe0H", "p"]

    def test_decode_chunk_drops_unknown(self):
        """Test unknown keys are skipped and order is kept."""
        from termsnake.visualization.keyboard import Key, decode_chunk

        assert decode_chunk("x\x1b[Bzp") == [Key.DOWN, Key.PAUSE]


class TestKeyboardInput:
    """Tests for the reader's queue handling."""

    def test_poll_drains_in_order(self):
        """Test poll returns queued keys oldest first, then nothing."""
        from termsnake.visualization.keyboard import Key, KeyboardInput

        keyboard = KeyboardInput()
        keyboard._queue.put(Key.UP)
        keyboard._queue.put(Key.LEFT)

        assert keyboard.poll() == [Key.UP, Key.LEFT]
        assert keyboard.poll() == []

    def test_stop_without_start(self):
        """Test stopping an idle reader is harmless."""
        from termsnake.visualization.keyboard import KeyboardInput

        keyboard = KeyboardInput()
        keyboard.stop()

        assert keyboard.poll() == []
