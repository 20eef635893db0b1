"""The command loop: reading lines, splitting commands and running them."""

from __future__ import annotations

import os
import sys
from typing import Mapping, TextIO

from .builtins import ShellExit, run_builtin
from .child import run_child
from .environment import Environment
from .words import split_on, split_words

PROMPT = "$> "
USAGE_ERROR = 84


def _strip_newline(raw: str) -> str:
    return raw[:-1] if raw.endswith("\n") else raw


class Shell:
    """A minimal shell with its own environment."""

    def __init__(
        self,
        environ: Mapping[str, str] | None = None,
        cwd: str | None = None,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self.out = sys.stdout if out is None else out
        self.err = sys.stderr if err is None else err
        self.env = Environment.from_mapping(os.environ if environ is None else environ)
        self.path_dirs = self.env.path_dirs()
        self.last_return = 0
        if cwd is None:
            try:
                cwd = os.getcwd()
            except OSError:
                self.err.write("Error: getcwd failed\n")
        if cwd is not None:
            self.env.set("PWD", cwd)

    def execute_line(self, line: str) -> int:
        """Run the ``;``-separated commands of ``line``.

        Stops at the first command whose status is not 0 and returns that
        status. ``ShellExit`` propagates.
        """
        result = 0
        for command in split_on(line, ";"):
            argv = split_words(command)
            if not argv:
                continue
            status = run_builtin(self.env, argv, self.out, self.err)
            if status is None:
                status = run_child(self.env, self.path_dirs, argv, self.out, self.err)
            result = status
            if result != 0:
                break
        self.last_return = result
        return result

    def run_interactive(self, stream: TextIO) -> int:
        """Prompt for and run lines until end of input."""
        while True:
            self.out.write(PROMPT)
            self.out.flush()
            raw = stream.readline()
            if not raw:
                break
            line = _strip_newline(raw)
            if line:
                self.execute_line(line)
        return 0

    def run_script(self, stream: TextIO) -> int:
        """Run every line of ``stream``; return the status of the last command line."""
        result = 0
        for raw in stream:
            line = _strip_newline(raw)
            if line:
                result = self.execute_line(line)
        return -result if result < 0 else result


def main(argv: list[str] | None = None) -> int:
    """Start the shell on standard input and return its exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    if args:
        sys.stdout.write("Usage: mysh\n")
        return USAGE_ERROR
    shell = Shell()
    try:
        if sys.stdin.isatty():
            return shell.run_interactive(sys.stdin)
        return shell.run_script(sys.stdin)
    except ShellExit as exc:
        return exc.code
    finally:
        shell.out.flush()
        shell.err.flush()