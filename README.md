# mysh

mysh is a small command shell. It reads command lines and runs them one by one.
You can put several commands on one line by separating them with `;`. If a
command fails, mysh skips the rest of that line. Words inside a command are
separated by spaces and tabs.

mysh looks up external programs in the directories listed in `PATH`. It reads
`PATH` once, when it starts. It handles these commands itself:

| Command               | Effect                                                      |
|-----------------------|-------------------------------------------------------------|
| `env`                 | print every environment entry, one per line                 |
| `setenv NAME VALUE`   | append the entry `NAME=VALUE` to the environment            |
| `unsetenv PREFIX`     | remove every entry whose text starts with `PREFIX`          |
| `exit [N]`            | leave the shell with status `N` (default 0)                 |

`setenv` does not replace an earlier entry with the same name. It adds the new
entry at the end, and `env` lists both entries. When mysh builds the
environment for a child program, the first entry for each name is the one that
counts. The name given to `setenv` can contain only letters, digits and `_`.

`exit` with an argument that is not a plain number prints
`exit: Badly formed number.` or `exit: Expression Syntax.` and exits with
status 1.

When it starts, mysh adds `PWD=<current directory>` to its environment.

## Installing

```
pip install .
```

## Using it

When standard input is a terminal, mysh shows the prompt `$> ` before it reads
each line:

```
$ mysh
$> setenv GREETING hello
$> env
...
GREETING=hello
$> ls ; echo done
```

When standard input is not a terminal, mysh reads commands without showing a
prompt. It then exits with the status of the last non-empty command line. A
built-in command that fails gives status 1, and so does a command that cannot
be found:

```
$ printf 'echo one; echo two\n' | mysh
one
two
```

mysh takes no arguments. If you give it any, it prints `Usage: mysh` and exits
with status 84.

If a command cannot be found, mysh prints `<name>: Command not found.` to
standard error. If a child process is killed by a signal, mysh prints a message
on standard error, for example `Segmentation fault` followed by
`Unhandled signal`.

## What mysh does not do

- There is no `cd` command. The working directory never changes.
- There is no quoting, escaping, globbing, pipes, redirection or variable
  expansion. A command is only its words split on blanks.
- Changing `PATH` with `setenv` does not change where mysh looks for programs.
  The value that was set when mysh started is always used.

## Using it from Python

```python
import os
import sys
from mysh.shell import Shell

shell = Shell(dict(os.environ), "/tmp", sys.stdout, sys.stderr)
status = shell.execute_line("setenv EDITOR vi; env")
```

`Shell.execute_line` returns the status of the line. `exit` raises
`mysh.builtins.ShellExit`, which carries the status in its `code` attribute.
`Shell.run_interactive(stream)` and `Shell.run_script(stream)` run every line
of a text stream.

The package also holds the parts the shell is built from:

- `mysh.words`: splitting lines (`split_words`, `split_on`), reading numbers
  (`parse_int`) and a few string checks.
- `mysh.environment.Environment`: the ordered list of `NAME=VALUE` entries.
- `mysh.builtins`: the built-in commands and `run_builtin`.
- `mysh.child`: `resolve_command` for finding a program and `run_child` for
  running one.
- `mysh.mathutil`: small integer helpers (`power`, `exact_square_root`,
  `is_prime`, `next_prime`, `sort_ints`).

## Running the tests

```
pip install .[test]
pytest
```