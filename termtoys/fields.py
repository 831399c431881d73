"""Read and write ``name:value`` fields embedded in a line of text.

A field starts with a space, its name and a colon.  Values run to the
next space unless quoted with ``'`` or ``"``.  A backslash escapes the
next character and ``\\n`` stands for a newline.
"""

from __future__ import annotations

import re
from typing import Optional, TypeVar

T = TypeVar("T")

_SPECIAL = ":\n\\"
_INT = re.compile(r"\s*([+-]?)(0[xX][0-9a-fA-F]+|0[0-7]*|[1-9][0-9]*)")
_INT_MIN, _INT_MAX = -(2 ** 31), 2 ** 31 - 1


def has_field(data: str, name: str) -> Optional[str]:
    """The text following `` name:`` in ``data``, or None if absent."""
    marker = f" {name}:"
    i = data.find(marker)
    return None if i < 0 else data[i + len(marker):]


def _int_literal(sign: str, body: str) -> int:
    if body[:2].lower() == "0x":
        value = int(body, 16)
    elif body.startswith("0"):
        value = int(body, 8)
    else:
        value = int(body)
    return -value if sign == "-" else value


def int_field(data: str, name: str, default: T = None) -> "int | T":
    """Integer value of a field (decimal, ``0x`` hex or ``0`` octal).

    Returns ``default`` when the field is missing, holds no number or
    the number does not fit in 32 signed bits.
    """
    value = has_field(data, name)
    if value is None:
        return default
    match = _INT.match(value)
    if not match:
        return default
    number = _int_literal(match.group(1), match.group(2))
    return number if _INT_MIN <= number <= _INT_MAX else default


def _unquote(text: str) -> str:
    if text[:1] in ("'", '"'):
        quote, text = text[0], text[1:]
    else:
        quote = " "
    out = []
    chars = iter(text)
    for c in chars:
        if c == quote:
            break
        if c == "\\":
            escaped = next(chars, None)
            if escaped is None:
                break
            c = "\n" if escaped == "n" else escaped
        out.append(c)
    return "".join(out)


def str_field(data: str, name: str, default: T = None) -> "str | T":
    """Unquoted, unescaped string value of a field, or ``default``."""
    value = has_field(data, name)
    return default if value is None else _unquote(value)


def format_field(name: str, value: str) -> str:
    """Encode ``name:value``, escaping and quoting the value as needed."""
    escaped = "".join(
        "\\" + ("n" if c == "\n" else c) if c in _SPECIAL else c for c in value
    )
    if "'" in value:
        quote = '"'
    elif '"' in value:
        quote = "'"
    elif " " in value:
        quote = '"'
    else:
        quote = ""
    return f"{name}:{quote}{escaped}{quote}"


def append_field(text: str, name: Optional[str], value: Optional[str]) -> str:
    """Append a field to ``text``, separated by a space.

    Nothing is appended when ``name`` or ``value`` is None.
    """
    if name is None or value is None:
        return text
    separator = "" if text.endswith(" ") else " "
    return text + separator + format_field(name, value)