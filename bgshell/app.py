"""Start a login shell on a pseudo terminal and relay it to the console."""

from __future__ import annotations

import argparse
import codecs
import contextlib
import io
import os
import select
import subprocess
import sys
import termios
import tty
from typing import IO, Iterator, List, Mapping, Optional, Sequence

from bgshell.ptypair import PtyError, PtyPair

DEFAULT_PROGRAM = "/bin/sh"
DEFAULT_ARGS = ("-l",)
DEFAULT_COLUMNS = 80
DEFAULT_LINES = 40
_READ_SIZE = 4096


def build_environment(cwd: str, environ: Mapping[str, str]) -> dict:
    """Return a copy of ``environ`` that searches ``cwd``'s bundled programs first."""
    env = dict(environ)
    env["PATH"] = f"{cwd}/app/native:{environ.get('PATH', '')}"
    env["LD_LIBRARY_PATH"] = (
        f"{cwd}/app/native/lib:/usr/lib/qt4/lib:{environ.get('LD_LIBRARY_PATH', '')}"
    )
    return env


def spawn_shell(
    pty_pair: PtyPair,
    program: str = DEFAULT_PROGRAM,
    args: Sequence[str] = DEFAULT_ARGS,
) -> subprocess.Popen:
    """Run ``program`` with ``args`` on the slave side of ``pty_pair``.

    The child gets the slave as its standard streams and controlling
    terminal. Raises PtyError if the pair has no open slave.
    """
    slave = pty_pair.slave_fd
    if slave is None:
        raise PtyError("pseudo terminal slave is not open")
    env = build_environment(os.getcwd(), os.environ)
    return subprocess.Popen(
        [program, *args],
        stdin=slave,
        stdout=slave,
        stderr=slave,
        env=env,
        close_fds=True,
        preexec_fn=pty_pair.set_controlling_tty,
    )


def _stdin_fd() -> Optional[int]:
    try:
        return sys.stdin.fileno()
    except (AttributeError, ValueError, OSError, io.UnsupportedOperation):
        return None


@contextlib.contextmanager
def _raw_mode(fd: Optional[int]) -> Iterator[None]:
    if fd is None or not os.isatty(fd):
        yield
        return
    saved = termios.tcgetattr(fd)
    tty.setraw(fd)
    try:
        yield
    finally:
        termios.tcsetattr(fd, termios.TCSAFLUSH, saved)


def _terminal_size(fd: Optional[int]) -> tuple:
    if fd is not None:
        with contextlib.suppress(OSError):
            size = os.get_terminal_size(fd)
            return size.lines, size.columns
    return DEFAULT_LINES, DEFAULT_COLUMNS


def _relay(master: int, stdin_fd: Optional[int], out: IO[str]) -> None:
    decoder = codecs.getincrementaldecoder("utf-8")("replace")
    watched: List[int] = [master]
    if stdin_fd is not None:
        watched.append(stdin_fd)
    while True:
        ready, _, _ = select.select(watched, [], [])
        if master in ready:
            try:
                data = os.read(master, _READ_SIZE)
            except OSError:
                data = b""
            if not data:
                break
            out.write(decoder.decode(data))
            out.flush()
        if stdin_fd is not None and stdin_fd in ready:
            data = os.read(stdin_fd, _READ_SIZE)
            if data:
                os.write(master, data)
            else:
                watched.remove(stdin_fd)
    out.write(decoder.decode(b"", final=True))
    out.flush()


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bgshell", description="Run a shell on a pseudo terminal."
    )
    parser.add_argument("--columns", type=int, default=None, help="terminal width")
    parser.add_argument("--lines", type=int, default=None, help="terminal height")
    parser.add_argument(
        "command",
        nargs=argparse.REMAINDER,
        help=f"program and arguments (default: {DEFAULT_PROGRAM} -l)",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the shell until it exits and return its exit status."""
    options = _parser().parse_args(argv)
    command = list(options.command)
    if command and command[0] == "--":
        command = command[1:]
    program, args = (command[0], command[1:]) if command else (
        DEFAULT_PROGRAM,
        list(DEFAULT_ARGS),
    )

    stdin_fd = _stdin_fd()
    lines, columns = _terminal_size(stdin_fd)
    if options.lines is not None:
        lines = options.lines
    if options.columns is not None:
        columns = options.columns

    with PtyPair() as pair:
        pair.set_win_size(lines, columns)
        try:
            proc = spawn_shell(pair, program, args)
        except OSError as exc:
            print(f"bgshell: cannot start {program}: {exc.strerror}", file=sys.stderr)
            return 127
        # Without our copy of the slave the master sees EOF when the shell ends.
        pair.close_slave()
        with _raw_mode(stdin_fd):
            _relay(pair.master_fd, stdin_fd, sys.stdout)
        status = proc.wait()
    return status if status >= 0 else 128 - status


if __name__ == "__main__":
    sys.exit(main())