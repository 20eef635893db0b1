"""Commands the shell runs itself instead of starting a program."""

from __future__ import annotations

from typing import Callable, Sequence, TextIO

from .environment import Environment
from .words import is_identifier_char, parse_int

BUILTIN_ERROR = -1


class ShellExit(Exception):
    """Raised by ``exit`` to stop the shell with a status code."""

    def __init__(self, code: int) -> None:
        super().__init__(code)
        self.code = code


class BuiltinError(Exception):
    """A builtin failed; ``message`` (possibly empty) is shown to the user."""

    def __init__(self, message: str = "", *, to_stdout: bool = False) -> None:
        super().__init__(message)
        self.message = message
        self.to_stdout = to_stdout


def builtin_env(env: Environment, argv: Sequence[str], out: TextIO, err: TextIO) -> None:
    """Print every environment entry on its own line."""
    for line in env:
        out.write(line + "\n")


def _starts_like_name(char: str) -> bool:
    return is_identifier_char(char) and not "0" <= char <= "9"


def builtin_setenv(env: Environment, argv: Sequence[str], out: TextIO, err: TextIO) -> None:
    """Add ``NAME=value`` to the environment."""
    if len(argv) < 2:
        raise BuiltinError()
    if len(argv) > 3:
        raise BuiltinError("setenv: Too many arguments.\n", to_stdout=True)
    name = argv[1]
    if not _starts_like_name(name[0]):
        err.write("setenv: Variable name must begin with a letter.\n")
    if not all(is_identifier_char(char) for char in name):
        raise BuiltinError("setenv: Variable name must contain alphanumeric characters.\n")
    if "=" in name:
        raise BuiltinError("setenv: Variable name must not contain '='.\n", to_stdout=True)
    if len(argv) < 3:
        raise BuiltinError()
    env.set(name, argv[2])


def builtin_unsetenv(env: Environment, argv: Sequence[str], out: TextIO, err: TextIO) -> None:
    """Remove every entry starting with the given prefix."""
    if len(argv) > 2:
        raise BuiltinError()
    if len(argv) < 2:
        raise BuiltinError("unsetenv: Too few arguments.\n")
    prefix = argv[1]
    if not env.contains(prefix):
        raise BuiltinError()
    env.unset(prefix)


def builtin_exit(env: Environment, argv: Sequence[str], out: TextIO, err: TextIO) -> None:
    """Stop the shell, with the status given as argument or 0."""
    if len(argv) < 2:
        raise ShellExit(0)
    arg = argv[1]
    if not (arg.isascii() and arg.isdigit()):
        if "0" <= arg[0] <= "9":
            err.write("exit: Badly formed number.\n")
        else:
            err.write("exit: Expression Syntax.\n")
        raise ShellExit(1)
    raise ShellExit(parse_int(arg))


_Builtin = Callable[[Environment, Sequence[str], TextIO, TextIO], None]

BUILTINS: dict[str, _Builtin] = {
    "env": builtin_env,
    "setenv": builtin_setenv,
    "unsetenv": builtin_unsetenv,
    "exit": builtin_exit,
}


def run_builtin(env: Environment, argv: Sequence[str], out: TextIO, err: TextIO) -> int | None:
    """Run ``argv`` if it names a builtin.

    Returns None when it does not, 0 on success and -1 on failure.
    ``ShellExit`` propagates to the caller.
    """
    handler = BUILTINS.get(argv[0])
    if handler is None:
        return None
    try:
        handler(env, argv, out, err)
    except BuiltinError as exc:
        (out if exc.to_stdout else err).write(exc.message)
        return BUILTIN_ERROR
    return 0