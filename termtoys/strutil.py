"""Small string helpers for trimming and masking URLs and similar text.

Every function returns a new string; inputs are never changed.
"""

from __future__ import annotations

import re
from itertools import takewhile
from typing import Optional


def sskip(s: Optional[str], prefix: Optional[str]) -> Optional[str]:
    """Return ``s`` without ``prefix`` if it starts with it, else ``s``."""
    if s is None or prefix is None:
        return s
    return s[len(prefix):] if s.startswith(prefix) else s


def strunc(s: str, word: str) -> str:
    """Cut ``s`` at the first occurrence of ``word``."""
    i = s.find(word)
    return s if i < 0 else s[:i]


def strunch(s: str, char: str) -> str:
    """Cut ``s`` at the first occurrence of ``char``."""
    return strunc(s, char)


def struncafter(s: str, word: str, fill: str) -> str:
    """Replace everything after the first ``word`` with ``fill`` characters."""
    i = s.find(word)
    if i < 0:
        return s
    end = i + len(word)
    return s[:end] + fill * (len(s) - end)


def sdel(s: str, word: str) -> str:
    """Remove the first occurrence of ``word``."""
    i = s.find(word)
    return s if i < 0 else s[:i] + s[i + len(word):]


def sdelall(s: Optional[str], word: Optional[str]) -> Optional[str]:
    """Remove ``word`` until it no longer occurs, including newly formed ones."""
    if s is None or word is None:
        return s
    if not word:
        raise ValueError("word must not be empty")
    while word in s:
        s = sdel(s, word)
    return s


def srepl(s: str, word: str, fill: str) -> str:
    """Overwrite the first occurrence of ``word`` with ``fill`` characters."""
    i = s.find(word)
    return s if i < 0 else s[:i] + fill * len(word) + s[i + len(word):]


def strrstr(s: str, word: str) -> int:
    """Index of the last occurrence of ``word`` in ``s``, or -1."""
    return s.rfind(word)


def sreplbetween(s: str, first: str, last: str, fill: str, keep: bool) -> str:
    """Mask the text between the first ``first`` and the last ``last`` after it.

    With ``keep`` the delimiters stay; without it the masked span is
    shifted past both delimiters.
    """
    f = s.find(first)
    if f < 0:
        return s
    rel = s[f:].rfind(last)
    if rel < 0:
        return s
    l = f + rel
    if not keep:
        f += len(first)
        l += len(last)
    if f < l:
        s = s[: f + 1] + fill * (l - f - 1) + s[l:]
    return s


def scollapse(s: str, char: str, n: int) -> str:
    """Shorten every run of ``char`` to at most ``n`` characters."""
    keep = max(n, 0)
    return re.sub(f"(?:{re.escape(char)}){{{keep + 1},}}", char * keep, s)


def common_prefix_length(a: Optional[str], b: Optional[str]) -> int:
    """Number of leading characters ``a`` and ``b`` share; 0 if either is None."""
    if a is None or b is None:
        return 0
    return sum(1 for _ in takewhile(lambda pair: pair[0] == pair[1], zip(a, b)))