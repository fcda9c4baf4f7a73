"""Start a program connected to the caller by a single pipe."""

from __future__ import annotations

import os
import subprocess
from collections.abc import Iterator, Sequence
from typing import IO, Union

_CHUNK_SIZE = 4096

# Started children are kept here so they can be reaped once they finish.
_children: list[subprocess.Popen] = []


def _reap_finished() -> None:
    _children[:] = [child for child in _children if child.poll() is None]


def open_pipe(file: str, argv: Sequence[str], mode: str) -> IO[bytes]:
    """Run ``file`` with ``argv`` and return one end of a pipe to it.

    With mode ``"r"`` the returned stream reads the program's standard output;
    with mode ``"w"`` it writes to the program's standard input. ``file`` is
    looked up on ``PATH`` and ``argv`` becomes the program's argument vector.
    Raises ValueError for a missing file, a missing or empty argument vector or
    an unknown mode, and OSError when the program cannot be started.
    """
    if file is None or argv is None:
        raise ValueError("file and argv are required")
    if mode not in ("r", "w"):
        raise ValueError(f"mode must be 'r' or 'w', not {mode!r}")
    args = list(argv)
    if not args:
        raise ValueError("argv must not be empty")

    _reap_finished()
    if mode == "r":
        child = subprocess.Popen(args, executable=file, stdout=subprocess.PIPE)
        stream = child.stdout
    else:
        child = subprocess.Popen(args, executable=file, stdin=subprocess.PIPE)
        stream = child.stdin
    _children.append(child)
    return stream


def _fd_lines(fd: int) -> Iterator[bytes]:
    pending = b""
    while chunk := os.read(fd, _CHUNK_SIZE):
        pending += chunk
        *complete, pending = pending.split(b"\n")
        for piece in complete:
            yield piece + b"\n"
    if pending:
        yield pending


def iter_lines(stream: Union[int, IO]) -> Iterator:
    """Yield lines, each with its trailing newline, until end of input.

    ``stream`` is either a file object or a raw file descriptor; a descriptor
    yields bytes. The last line is yielded without a newline if it has none.
    """
    if isinstance(stream, int):
        yield from _fd_lines(stream)
    else:
        yield from stream