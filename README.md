# minish

The core pieces of a small Unix shell.

- **Syntax checks** (`minish.syntax`): `syntax_error(words)` recognises a fixed
  set of malformed command lines, such as a lone `|`, `>` or `<`, `ls >`,
  `|| ls` or `echo test >>`, and returns the message
  `minishell: syntax error near unexpected token ...`. For any other words it
  returns `None`.
- **Builtins** (`minish.builtins`): `echo`, `cd` and `pwd`. Each takes an
  argument vector whose first element is the program name.
  - `echo(args, out=None)` writes the words joined by spaces; one or more
    leading `-n`, `-nn`, ... flags suppress the trailing newline.
  - `cd(args)` changes to the given directory, or to `$HOME` when none is
    given. Too many arguments, an unset `HOME` or a failed change raise
    `BuiltinError`.
  - `pwd(args, out=None)` writes the working directory when `args[1]` is
    `pwd`; extra arguments raise `BuiltinError`.
- **Execution** (`minish.execution`): `execute_commands(cmds, env=None)` runs
  a sequence of `Command` objects as a pipeline. Each stage's output goes to
  its `outfile` (created or truncated), or else into a pipe read by the next
  stage; an `infile` replaces standard input (an unreadable one is reported
  and `/dev/null` is used instead). Each stage is waited for before the next
  starts, and the exit status of every stage is returned as a list. The
  program in `args[0]` is run as a path: a bare name is looked up in the
  working directory, not on `PATH`. A failure to create a pipe raises
  `ExecutionError`.
- **String helpers** (`minish.strutils`): `split`, `strchr`, `strjoin` and
  `strncmp`.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

Check a command line for syntax errors. Each argument is one word:

```
minish "|"
minish ls ">"
minish echo test ">>"
```

When the words match a known error pattern, the message is written to
standard output. The command always exits with status 0.

Run one command and exit with its status. With no arguments it runs
`/bin/cat -e` on standard input:

```
echo hello | minish-exec
minish-exec /bin/echo hello
```

## Library use

```python
import io

from minish.builtins import echo
from minish.execution import Command, execute_commands
from minish.syntax import syntax_error

out = io.StringIO()
echo(["echo", "-n", "hello", "world"], out)
print(repr(out.getvalue()))  # 'hello world'

print(syntax_error(["|"]))
# minishell: syntax error near unexpected token `|'

statuses = execute_commands(
    [
        Command(args=["/bin/echo", "hello"]),
        Command(args=["/usr/bin/tr", "a-z", "A-Z"]),
    ],
    {"PATH": "/usr/bin:/bin"},
)
print(statuses)  # [0, 0]
```

## What it does not do

- There is no interactive prompt and no parser: nothing reads command lines,
  splits them into words or builds `Command` objects from text. Syntax checks
  cover only the fixed patterns listed above.
- `execute_commands` never runs the builtins; `Command.is_builtin` is not
  consulted.
- `Command.append` is not honoured: an `outfile` is always truncated.
- There is no `export`, no environment variable expansion and no quoting.