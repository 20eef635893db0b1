"""Finding and running external programs."""

from __future__ import annotations

import os
import signal
import subprocess
import sys
from typing import Sequence, TextIO

from .environment import Environment


def resolve_command(cmd: str, path_dirs: Sequence[str]) -> str | None:
    """Return the path to run for ``cmd``, or None if nothing matches.

    ``cmd`` itself is used when it exists; otherwise each directory of
    ``path_dirs`` is tried in order.
    """
    if os.path.exists(cmd):
        return cmd
    for directory in path_dirs:
        candidate = f"{directory}/{cmd}"
        if os.path.exists(candidate):
            return candidate
    return None


def describe_status(returncode: int) -> str:
    """Return the message reported for a child that ended with ``returncode``."""
    if returncode >= 0:
        return ""
    signum = -returncode
    message = ""
    if signum == signal.SIGSEGV:
        message += "Segmentation fault\n"
    if signum == signal.SIGFPE:
        message += "Floating exception\n"
    return message + "Unhandled signal\n"


def _file_descriptor(stream: TextIO) -> int | None:
    try:
        return stream.fileno()
    except (AttributeError, OSError, ValueError):
        return None


def run_child(
    env: Environment,
    path_dirs: Sequence[str],
    argv: Sequence[str],
    out: TextIO | None = None,
    err: TextIO | None = None,
) -> int:
    """Run an external command and wait for it.

    Returns 1 when the command cannot be found and 0 once it has run.
    """
    out = sys.stdout if out is None else out
    err = sys.stderr if err is None else err
    pathname = resolve_command(argv[0], path_dirs)
    if pathname is None:
        err.write(f"{argv[0]}: Command not found.\n")
        return 1
    if os.sep not in pathname:
        pathname = os.path.join(os.curdir, pathname)

    out_fd = _file_descriptor(out)
    err_fd = _file_descriptor(err)
    out.flush()
    err.flush()
    try:
        completed = subprocess.run(
            list(argv),
            executable=pathname,
            env=env.as_dict(),
            stdout=subprocess.PIPE if out_fd is None else out_fd,
            stderr=subprocess.PIPE if err_fd is None else err_fd,
            check=False,
        )
    except OSError as exc:
        err.write(f"execve failure: {exc.strerror}\n")
        return 0
    if out_fd is None and completed.stdout:
        out.write(completed.stdout.decode(errors="replace"))
    if err_fd is None and completed.stderr:
        err.write(completed.stderr.decode(errors="replace"))
    err.write(describe_status(completed.returncode))
    return 0