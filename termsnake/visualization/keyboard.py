"""
Keyboard input for the terminal game.

Keys are read on a daemon thread with the terminal in cbreak mode and
handed to the game loop through a queue, so the loop never blocks on
stdin. Decoding raw key sequences is kept separate so it can be tested
without a terminal.
"""
import logging
import os
import queue
import sys
import threading
from enum import Enum
from typing import Dict, List, Optional

logger = logging.getLogger(__name__)


class Key(Enum):
    """Logical keys the game loop understands."""
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    PAUSE = "pause"
    QUIT = "quit"
    RESTART = "restart"
    EXIT = "exit"


ESCAPE = "\x1b"
WINDOWS_PREFIXES = ("\x00", "\xe0")

_KEY_MAP: Dict[str, Key] = {
    # ANSI arrow sequences
    "\x1b[A": Key.UP,
    "\x1b[B": Key.DOWN,
    "\x1b[C": Key.RIGHT,
    "\x1b[D": Key.LEFT,
    "\x1bOA": Key.UP,
    "\x1bOB": Key.DOWN,
    "\x1bOC": Key.RIGHT,
    "\x1bOD": Key.LEFT,
    # Windows console arrow scan codes
    "\xe0H": Key.UP,
    "\xe0P": Key.DOWN,
    "\xe0K": Key.LEFT,
    "\xe0M": Key.RIGHT,
    "\x00H": Key.UP,
    "\x00P": Key.DOWN,
    "\x00K": Key.LEFT,
    "\x00M": Key.RIGHT,
    # Letters
    "w": Key.UP,
    "s": Key.DOWN,
    "a": Key.LEFT,
    "d": Key.RIGHT,
    "p": Key.PAUSE,
    " ": Key.PAUSE,
    "q": Key.QUIT,
    "r": Key.RESTART,
    "e": Key.EXIT,
    ESCAPE: Key.EXIT,
}


def decode_key(sequence: str) -> Optional[Key]:
    """
    Map one raw key sequence to a Key.

    Args:
        sequence: A single character or an escape sequence

    Returns:
        The matching Key, or None for keys the game ignores
    """
    if len(sequence) == 1:
        sequence = sequence.lower()
    return _KEY_MAP.get(sequence)


def split_sequences(chunk: str) -> List[str]:
    """
    Split a chunk read from the terminal into single key sequences.

    Several keys can arrive in one read when typed quickly.
    """
    sequences = []
    i = 0
    while i < len(chunk):
        if chunk[i] == ESCAPE and i + 2 < len(chunk) and chunk[i + 1] in "[O":
            sequences.append(chunk[i:i + 3])
            i += 3
        elif chunk[i] in WINDOWS_PREFIXES and i + 1 < len(chunk):
            sequences.append(chunk[i:i + 2])
            i += 2
        else:
            sequences.append(chunk[i])
            i += 1
    return sequences


def decode_chunk(chunk: str) -> List[Key]:
    """Decode everything in a chunk, dropping unknown keys."""
    keys = []
    for sequence in split_sequences(chunk):
        key = decode_key(sequence)
        if key is not None:
            keys.append(key)
    return keys


class KeyboardInput:
    """
    Background keyboard reader.

    Usage:
        with KeyboardInput() as keyboard:
            for key in keyboard.poll():
                ...
    """

    def __init__(self, poll_timeout: float = 0.05):
        """
        Initialize the reader (nothing is read until start()).

        Args:
            poll_timeout: Seconds the reader thread waits for input before
                checking whether it should stop
        """
        self.poll_timeout = poll_timeout
        self._queue: "queue.Queue[Key]" = queue.Queue()
        self._stop_event = threading.Event()
        self._thread: Optional[threading.Thread] = None
        self._saved_attrs = None

    def start(self):
        if self._thread is not None:
            return
        self._stop_event.clear()
        if os.name != "nt":
            self._enter_cbreak()
        self._thread = threading.Thread(target=self._read_loop, name="keyboard-input", daemon=True)
        self._thread.start()
        logger.debug("Keyboard reader started")

    def stop(self):
        """Stop the reader thread and restore the terminal."""
        self._stop_event.set()
        if self._thread is not None:
            self._thread.join(timeout=1.0)
            self._thread = None
        self._restore_terminal()
        logger.debug("Keyboard reader stopped")

    def poll(self) -> List[Key]:
        """Return all keys pressed since the last poll, oldest first."""
        keys = []
        while True:
            try:
                keys.append(self._queue.get_nowait())
            except queue.Empty:
                return keys

    def __enter__(self) -> "KeyboardInput":
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.stop()

    def _enter_cbreak(self):
        import termios
        import tty

        fd = sys.stdin.fileno()
        self._saved_attrs = termios.tcgetattr(fd)
        tty.setcbreak(fd)

    def _restore_terminal(self):
        if self._saved_attrs is None:
            return
        import termios

        try:
            termios.tcsetattr(sys.stdin.fileno(), termios.TCSADRAIN, self._saved_attrs)
        except (termios.error, OSError, ValueError) as e:
            logger.warning("Could not restore terminal settings: %s", e)
        finally:
            self._saved_attrs = None

    def _read_loop(self):
        reader = self._read_windows if os.name == "nt" else self._read_posix
        while not self._stop_event.is_set():
            chunk = reader()
            for key in decode_chunk(chunk):
                self._queue.put(key)

    def _read_posix(self) -> str:
        import select

        fd = sys.stdin.fileno()
        ready, _, _ = select.select([fd], [], [], self.poll_timeout)
        if not ready:
            return ""
        return os.read(fd, 32).decode("utf-8", errors="ignore")

    def _read_windows(self) -> str:
        import msvcrt

        if not msvcrt.kbhit():
            self._stop_event.wait(self.poll_timeout)
            return ""
        ch = msvcrt.getwch()
        if ch in WINDOWS_PREFIXES:
            return ch + msvcrt.getwch()
        return ch
