"""Soft-key and trackpad input translated into terminal byte sequences."""

from __future__ import annotations

from enum import Enum
from typing import Callable

ESC = b"\x1b"
CSI = b"\x1b["
DEFAULT_SENSITIVITY = 5


class SoftKey(Enum):
    """The on-screen buttons of the soft-key bar, in display order."""

    CTRL = "Ctrl+"
    TAB = "Tab"
    LEFT = "<"
    RIGHT = ">"
    UP = "^"
    DOWN = "v"
    ESC = "Esc"


_PLAIN_SEQUENCES = {
    SoftKey.TAB: b"\t",
    SoftKey.ESC: ESC,
    SoftKey.UP: CSI + b"A",
    SoftKey.DOWN: CSI + b"B",
}

# Horizontal cursor keys change their final byte to lower case under Ctrl.
_HORIZONTAL_FINALS = {
    SoftKey.RIGHT: b"C",
    SoftKey.LEFT: b"D",
}


def key_sequence(key: SoftKey, ctrl: bool = False) -> bytes:
    """Return the bytes sent to the terminal for ``key``.

    Raises ValueError for the Ctrl key, which only changes state.
    """
    key = SoftKey(key)
    if key in _PLAIN_SEQUENCES:
        return _PLAIN_SEQUENCES[key]
    if key in _HORIZONTAL_FINALS:
        final = _HORIZONTAL_FINALS[key]
        return CSI + (final.lower() if ctrl else final)
    raise ValueError(f"{key.name} does not produce a byte sequence")


def trackpad_sequence(
    dx: int, dy: int, ctrl: bool = False, sensitivity: int = DEFAULT_SENSITIVITY
) -> bytes:
    """Translate a trackpad displacement into a cursor-key sequence.

    Returns empty bytes when neither axis reaches ``sensitivity``. The
    dominant axis wins; a tie counts as vertical movement.
    """
    if abs(dx) < sensitivity and abs(dy) < sensitivity:
        return b""
    if abs(dx) > abs(dy):
        return key_sequence(SoftKey.RIGHT if dx > 0 else SoftKey.LEFT, ctrl)
    return key_sequence(SoftKey.DOWN if dy > 0 else SoftKey.UP, ctrl)


class SoftKeyboard:
    """The soft-key bar: tracks the sticky Ctrl state and writes key bytes."""

    def __init__(
        self,
        write: Callable[[bytes], object],
        sensitivity: int = DEFAULT_SENSITIVITY,
    ) -> None:
        self._write = write
        self.sensitivity = sensitivity
        self.ctrl = False

    def toggle_ctrl(self) -> bool:
        """Flip the sticky Ctrl state and return the new state."""
        self.ctrl = not self.ctrl
        return self.ctrl

    def press(self, key: SoftKey) -> bytes:
        """Handle a soft-key press; return the bytes written."""
        key = SoftKey(key)
        if key is SoftKey.CTRL:
            self.toggle_ctrl()
            return b""
        data = key_sequence(key, self.ctrl)
        self._write(data)
        return data

    def trackpad(self, dx: int, dy: int) -> bytes:
        """Handle a trackpad movement; return the bytes written, if any."""
        data = trackpad_sequence(dx, dy, self.ctrl, self.sensitivity)
        if data:
            self._write(data)
        return data