"""Pseudo-terminal master/slave pairs and their terminal attributes."""

from __future__ import annotations

import contextlib
import fcntl
import os
import struct
import termios
from typing import Any, List, Optional

_UNIX98_PREFIX = "/dev/pts/"


class PtyError(OSError):
    """Raised when a pseudo terminal cannot be opened or configured."""


class PtyPair:
    """A pseudo-terminal master/slave pair.

    The slave side is kept open after :meth:`open` so that the master never
    sees end-of-file merely because a client closed its end.
    """

    def __init__(self) -> None:
        self._master_fd: Optional[int] = None
        self._slave_fd: Optional[int] = None
        self._tty_name: str = ""

    def __repr__(self) -> str:
        return (
            f"PtyPair(tty_name={self._tty_name!r}, "
            f"master_fd={self._master_fd}, slave_fd={self._slave_fd})"
        )

    @property
    def master_fd(self) -> Optional[int]:
        """File descriptor of the master side, or None when closed."""
        return self._master_fd

    @property
    def slave_fd(self) -> Optional[int]:
        """File descriptor of the slave side, or None when closed."""
        return self._slave_fd

    @property
    def tty_name(self) -> str:
        """Device path of the slave side."""
        return self._tty_name

    def open(self) -> None:
        """Create the master/slave pair; does nothing if already open."""
        if self._master_fd is not None:
            return
        try:
            master, slave = os.openpty()
        except OSError as exc:
            raise PtyError(exc.errno, "Can't open a pseudo teletype") from exc
        try:
            name = os.ttyname(slave)
        except OSError as exc:
            os.close(master)
            os.close(slave)
            raise PtyError(exc.errno, "Can't open slave pseudo teletype") from exc
        for fd in (master, slave):
            os.set_inheritable(fd, False)
        self._master_fd = master
        self._slave_fd = slave
        self._tty_name = name

    def close_slave(self) -> None:
        """Close the slave descriptor, leaving the master open."""
        if self._slave_fd is None:
            return
        os.close(self._slave_fd)
        self._slave_fd = None

    def close(self) -> None:
        """Close both sides of the pair; does nothing if already closed."""
        if self._master_fd is None:
            return
        self.close_slave()
        # Unix98 ptys disappear once the master closes; others are reset.
        if not self._tty_name.startswith(_UNIX98_PREFIX) and os.geteuid() == 0:
            with contextlib.suppress(OSError):
                st = os.stat(self._tty_name)
                os.chown(self._tty_name, 0, 0 if st.st_gid == os.getgid() else -1)
                os.chmod(self._tty_name, 0o666)
        os.close(self._master_fd)
        self._master_fd = None

    def set_controlling_tty(self) -> None:
        """Start a new session and make the slave its controlling terminal.

        Meant to be called in the child process that will run on the slave.
        """
        slave = self._require_slave()
        with contextlib.suppress(OSError):
            os.setsid()
        try:
            if hasattr(termios, "TIOCSCTTY"):
                fcntl.ioctl(slave, termios.TIOCSCTTY, 0)
            else:
                os.close(os.open(self._tty_name, os.O_WRONLY))
            os.tcsetpgrp(slave, os.getpid())
        except OSError as exc:
            raise PtyError(exc.errno, "Can't set controlling terminal") from exc

    def set_win_size(self, lines: int, columns: int) -> None:
        """Set the logical screen size of the terminal."""
        master = self._require_master()
        packed = struct.pack("HHHH", lines & 0xFFFF, columns & 0xFFFF, 0, 0)
        try:
            fcntl.ioctl(master, termios.TIOCSWINSZ, packed)
        except OSError as exc:
            raise PtyError(exc.errno, "Can't set window size") from exc

    def get_attributes(self) -> List[Any]:
        """Return the terminal attributes in ``termios.tcgetattr`` form."""
        master = self._require_master()
        try:
            return termios.tcgetattr(master)
        except termios.error as exc:
            raise PtyError(exc.args[0], "Can't read terminal attributes") from exc

    def set_attributes(self, attributes: List[Any]) -> None:
        """Apply terminal attributes immediately."""
        master = self._require_master()
        try:
            termios.tcsetattr(master, termios.TCSANOW, attributes)
        except termios.error as exc:
            raise PtyError(exc.args[0], "Can't set terminal attributes") from exc

    def set_echo(self, echo: bool) -> None:
        """Turn echoing of input on or off."""
        attributes = self.get_attributes()
        if echo:
            attributes[3] |= termios.ECHO
        else:
            attributes[3] &= ~termios.ECHO
        self.set_attributes(attributes)

    def __enter__(self) -> "PtyPair":
        self.open()
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def _require_master(self) -> int:
        if self._master_fd is None:
            raise PtyError("pseudo terminal is not open")
        return self._master_fd

    def _require_slave(self) -> int:
        if self._slave_fd is None:
            raise PtyError("pseudo terminal slave is not open")
        return self._slave_fd