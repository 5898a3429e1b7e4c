"""Small string helpers used by the shell."""

from __future__ import annotations

from itertools import zip_longest


def split(s: str, sep: str) -> list[str]:
    """Split ``s`` on the single character ``sep``, dropping empty words."""
    if len(sep) != 1:
        raise ValueError("separator must be a single character")
    return [word for word in s.split(sep) if word]


def strchr(s: str, c: str) -> str | None:
    """Return the tail of ``s`` starting at the first ``c``, or None.

    Searching for ``"\\0"`` finds the end of the string and yields ``""``.
    """
    if len(c) != 1:
        raise ValueError("character must be a single character")
    if c == "\0":
        return ""
    index = s.find(c)
    return None if index < 0 else s[index:]


def strjoin(s1: str, s2: str) -> str:
    """Return the concatenation of ``s1`` and ``s2``."""
    return s1 + s2


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters, returning the code-point difference.

    The end of a string compares as a zero character, and comparison stops
    there.
    """
    for a, b in zip_longest(s1[:n], s2[:n], fillvalue=""):
        ca = ord(a) if a else 0
        cb = ord(b) if b else 0
        if ca != cb or ca == 0:
            return ca - cb
    return 0