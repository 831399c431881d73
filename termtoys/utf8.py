"""Encoding a single Unicode code point as UTF-8 bytes."""

from __future__ import annotations

_MAX_CODEPOINT = 0x1FFFFF  # largest value a four-byte sequence can carry


def encode_codepoint(cp: int) -> bytes:
    """Return the UTF-8 bytes for ``cp``.

    Surrogates are encoded like any other value.  Values outside
    ``0..0x1FFFFF`` raise :class:`ValueError`.
    """
    if cp < 0 or cp > _MAX_CODEPOINT:
        raise ValueError(f"code point out of range: {cp:#x}")
    if cp < 0x80:
        return bytes([cp])

    # Emit six-bit continuation groups from the end, widening the lead
    # prefix until the remaining payload no longer overlaps it.
    out = bytearray()
    prefix = 0x100
    while cp or out[-1] & (prefix >> 1) & 0x7F:
        out.append((cp & 0x3F) | 0x80)
        cp >>= 6
        prefix |= prefix >> 1
    out[-1] |= prefix & 0xFF
    out.reverse()
    return bytes(out)