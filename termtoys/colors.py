"""Parse colour specifications into 24-bit ``0xRRGGBB`` integers.

Accepted forms are ``rgb(r, g, b)``, hex numbers with or without ``#``
(three-digit short forms expand each digit) and names looked up in a
table string of space-separated ``name#hex`` entries.
"""

from __future__ import annotations

import re
from typing import List, Optional, TypeVar

T = TypeVar("T")

_RGB_START = re.compile(r"\s*rgb\s*\(")
_INT = re.compile(r"\s*([+-]?)(0[xX][0-9a-fA-F]+|0[0-7]*|[1-9][0-9]*)")
_COMMA = re.compile(r"\s*,")
_HEX = re.compile(r"\s*(?:0[xX](?=[0-9a-fA-F]))?([0-9a-fA-F]+)")
_HASH_HEX = re.compile(r"#\s*(?:0[xX](?=[0-9a-fA-F]))?([0-9a-fA-F]+)")


def _int_literal(sign: str, body: str) -> int:
    if body[:2].lower() == "0x":
        value = int(body, 16)
    elif body.startswith("0"):
        value = int(body, 8)
    else:
        value = int(body)
    return -value if sign == "-" else value


def _scan_rgb(text: str) -> Optional[List[int]]:
    start = _RGB_START.match(text)
    if not start:
        return None
    values: List[int] = []
    pos = start.end()
    for position in range(3):
        if position:
            comma = _COMMA.match(text, pos)
            if not comma:
                break
            pos = comma.end()
        number = _INT.match(text, pos)
        if not number:
            break
        values.append(_int_literal(number.group(1), number.group(2)))
        pos = number.end()
    if not values:
        return None
    return values + [0] * (3 - len(values))


def parse_color(text: str, default: T = None) -> "int | T":
    """Parse a numeric colour, or return ``default``.

    Missing ``rgb`` components count as 0.  A hex value below 0x1000 in
    text shorter than six characters is a short form: ``abc`` is
    ``aabbcc``.  Parsing stops at the first character that does not fit,
    so text may carry trailing words.
    """
    rgb = _scan_rgb(text)
    if rgb is not None:
        r, g, b = rgb
        return (256 * r + g) * 256 + b

    match = _HEX.match(text) or _HASH_HEX.match(text)
    if not match:
        return default
    value = int(match.group(1), 16)
    if len(text) < 6 and value < 0x1000:
        r, g, b = value >> 8, (value >> 4) & 0xF, value & 0xF
        return ((r * 17) << 16) | ((g * 17) << 8) | (b * 17)
    return value


def decode_color(name: str, default: T = None, names: Optional[str] = None) -> "int | T":
    """Parse ``name`` as a number, else look it up in ``names``.

    ``names`` is a string of entries like ``" pink#FFC0CB plum#DDA0DD"``;
    the lookup ignores case.  Returns ``default`` when neither works.
    """
    value = parse_color(name, None)
    if value is not None:
        return value
    if not names:
        return default
    needle = f" {name}#".lower()
    found = names.lower().find(needle)
    if found < 0:
        return default
    return parse_color(names[found + len(needle):], default)