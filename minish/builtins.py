"""Builtin commands: echo, cd and pwd.

Each builtin receives the shell's argument vector, with ``args[0]`` being
the program name and the builtin's own name usually at ``args[1]``.
"""

from __future__ import annotations

import os
import re
import sys
from typing import Sequence, TextIO

_N_FLAG = re.compile(r"-n+")


class BuiltinError(Exception):
    """Raised when a builtin command fails."""


def echo(args: Sequence[str], out: TextIO | None = None) -> None:
    """Print the arguments separated by spaces; ``-n`` suppresses the newline."""
    out = sys.stdout if out is None else out
    words = list(args[1:])
    if words and words[0].startswith("echo"):
        words = words[1:]
    newline = True
    while words and _N_FLAG.fullmatch(words[0]):
        newline = False
        words = words[1:]
    out.write(" ".join(words))
    if newline:
        out.write("\n")


def cd(args: Sequence[str]) -> None:
    """Change the working directory to the argument, or to ``$HOME``."""
    rest = list(args[1:])
    if rest and rest[0].startswith("cd"):
        rest = rest[1:]
    if len(rest) > 1:
        raise BuiltinError("cd: too many arguments")
    if rest:
        target = rest[0]
    else:
        target = os.environ.get("HOME")
        if not target:
            raise BuiltinError("cd failed: HOME not set")
    try:
        os.chdir(target)
    except OSError as exc:
        raise BuiltinError(f"cd failed: {exc.strerror}") from exc


def pwd(args: Sequence[str], out: TextIO | None = None) -> None:
    """Print the current working directory when ``args[1]`` names pwd."""
    out = sys.stdout if out is None else out
    if len(args) > 2:
        raise BuiltinError("pwd: too many arguments")
    try:
        cwd = os.getcwd()
    except OSError as exc:
        raise BuiltinError(f"pwd failed: {exc.strerror}") from exc
    if len(args) > 1 and args[1].startswith("pwd"):
        out.write(cwd + "\n")