"""Recognition of a few malformed command lines."""

from __future__ import annotations

import sys
from typing import Sequence

_NEWLINE = "newline"

_UNEXPECTED: dict[tuple[str, ...], str] = {
    (">",): _NEWLINE,
    ("<",): _NEWLINE,
    ("|",): "|",
    ("|", "ls"): "|",
    ("||", "ls"): "||",
    ("|||", "ls"): "||",
    ("ls", ">"): _NEWLINE,
    ("ls", "<"): _NEWLINE,
    ("cat", "<"): _NEWLINE,
    ("cat", ">"): _NEWLINE,
    ("echo", "test", ">>"): _NEWLINE,
}


def syntax_error(args: Sequence[str]) -> str | None:
    """Return the syntax error message for the given words, or None."""
    token = _UNEXPECTED.get(tuple(args))
    if token is None:
        return None
    return f"minishell: syntax error near unexpected token `{token}'"


def main(argv: Sequence[str] | None = None) -> int:
    """Report a syntax error in the command-line words, if there is one."""
    words = sys.argv[1:] if argv is None else argv
    message = syntax_error(words)
    if message is not None:
        print(message)
    return 0