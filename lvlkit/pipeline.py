"""Run a chain of commands connected by pipes, like ``a | b | c`` in a shell."""

from __future__ import annotations

import subprocess
from collections.abc import Iterable, Sequence


def picoshell(cmds: Iterable[Sequence[str]]) -> int:
    """Run ``cmds`` as a pipeline and return 0 if every command succeeded, else 1.

    Each command is an argument vector whose first item is looked up on
    ``PATH``. The first command reads the caller's standard input and the last
    one writes to the caller's standard output. A command that cannot be
    started counts as a failure, and the command after it reads an empty
    input. A command that exits with a non-zero status or is killed by a
    signal also makes the result 1.
    """
    commands = [list(argv) for argv in cmds]
    children: list[subprocess.Popen] = []
    failed = False
    upstream = None

    for position, argv in enumerate(commands):
        last = position == len(commands) - 1
        child = None
        try:
            if not argv:
                raise FileNotFoundError("empty command")
            child = subprocess.Popen(
                argv,
                stdin=upstream,
                stdout=None if last else subprocess.PIPE,
            )
        except OSError:
            failed = True
        finally:
            if hasattr(upstream, "close"):
                upstream.close()
        if child is not None:
            children.append(child)
        upstream = child.stdout if child is not None and not last else subprocess.DEVNULL

    for child in children:
        if child.wait() != 0:
            failed = True
    return 1 if failed else 0