"""Running commands and pipelines of commands."""

from __future__ import annotations

import contextlib
import os
import subprocess
import sys
from dataclasses import dataclass
from typing import BinaryIO, Iterable, Mapping, Sequence

_DEMO_ARGS = ("/bin/cat", "-e")


class ExecutionError(Exception):
    """Raised when the shell itself cannot set up a pipeline."""


@dataclass
class Command:
    """One simple command of a pipeline."""

    args: list[str]
    infile: str | None = None
    outfile: str | None = None
    append: bool = False
    is_builtin: bool = False

    def __post_init__(self) -> None:
        if not self.args:
            raise ValueError("a command needs at least a program path")


def _report(what: str, exc: OSError) -> None:
    print(f"{what}: {exc.strerror or exc}", file=sys.stderr)


def _executable(path: str) -> str:
    # Like execve: a bare name is looked up in the working directory, not PATH.
    return path if os.sep in path else os.path.join(os.curdir, path)


def _open_infile(path: str) -> BinaryIO:
    try:
        return open(path, "rb")
    except OSError as exc:
        _report("Error opening input file", exc)
    try:
        return open(os.devnull, "rb")
    except OSError as exc:
        raise ExecutionError(f"cannot open {os.devnull}: {exc.strerror}") from exc


def _open_outfile(path: str) -> BinaryIO:
    fd = os.open(path, os.O_CREAT | os.O_WRONLY | os.O_TRUNC, 0o644)
    return os.fdopen(fd, "wb")


def _run(
    cmd: Command,
    stdin_fd: int | None,
    pipe_write_fd: int | None,
    env: Mapping[str, str] | None,
) -> int:
    with contextlib.ExitStack() as stack:
        stdin: int | BinaryIO | None = stdin_fd
        if cmd.infile is not None:
            stdin = stack.enter_context(_open_infile(cmd.infile))
        stdout: int | BinaryIO | None = pipe_write_fd
        if cmd.outfile is not None:
            try:
                stdout = stack.enter_context(_open_outfile(cmd.outfile))
            except OSError as exc:
                _report("Error opening output file", exc)
                return 1
        try:
            process = subprocess.Popen(
                cmd.args,
                executable=_executable(cmd.args[0]),
                stdin=stdin,
                stdout=stdout,
                env=None if env is None else dict(env),
            )
        except OSError as exc:
            _report("execve failed", exc)
            return 1
        return process.wait()


def execute_commands(
    cmds: Iterable[Command], env: Mapping[str, str] | None = None
) -> list[int]:
    """Run the commands as a pipeline, one after the other.

    Each command is waited for before the next starts; a command's output
    goes to its outfile, or else into the pipe read by the next command.
    Returns the exit status of every command in order.
    """
    commands = list(cmds)
    statuses: list[int] = []
    stdin_fd: int | None = None
    for index, cmd in enumerate(commands):
        read_fd: int | None = None
        write_fd: int | None = None
        if index + 1 < len(commands):
            try:
                read_fd, write_fd = os.pipe()
            except OSError as exc:
                if stdin_fd is not None:
                    os.close(stdin_fd)
                raise ExecutionError(f"pipe creation failed: {exc.strerror}") from exc
        try:
            statuses.append(_run(cmd, stdin_fd, write_fd, env))
        except BaseException:
            if read_fd is not None:
                os.close(read_fd)
            raise
        finally:
            if write_fd is not None:
                os.close(write_fd)
            if stdin_fd is not None:
                os.close(stdin_fd)
        stdin_fd = read_fd
    return statuses


def main(argv: Sequence[str] | None = None) -> int:
    """Run one command (``/bin/cat -e`` when none is given) and return its status."""
    args = list(sys.argv[1:] if argv is None else argv) or list(_DEMO_ARGS)
    return execute_commands([Command(args)], os.environ)[-1]