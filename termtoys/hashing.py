"""Small non-cryptographic hash functions.

The string hashes work on 32-bit unsigned arithmetic and treat each byte
as a signed char, as the usual C implementations on x86 do.
"""

from __future__ import annotations

from typing import Union

Data = Union[bytes, bytearray, str]

_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF


def _to_signed64(value: int) -> int:
    value &= _MASK64
    return value - (1 << 64) if value >> 63 else value


def _signed_bytes(data: Data):
    raw = data.encode("utf-8") if isinstance(data, str) else bytes(data)
    return raw, [b - 256 if b >= 0x80 else b for b in raw]


def murmur64(h: int) -> int:
    """MurmurHash3 64-bit finaliser on a signed 64-bit value.

    Shifts are arithmetic, as on a signed ``long``; the result is signed.
    """
    h = _to_signed64(h)
    h ^= h >> 33
    h = _to_signed64(h * 0xFF51AFD7ED558CCD)
    h ^= h >> 33
    h = _to_signed64(h * 0xC4CEB9FE1A85EC53)
    h ^= h >> 33
    return h


def sdbm_hash(data: Data) -> int:
    """SDBM hash of ``data`` as an unsigned 32-bit integer."""
    _, chars = _signed_bytes(data)
    h = 0
    for c in chars:
        h = (c + (h << 6) + (h << 16) - h) & _MASK32
    return h


def djb_hash(data: Data) -> int:
    """Bernstein's hash (seed 5381, times 33) as an unsigned 32-bit integer."""
    _, chars = _signed_bytes(data)
    h = 5381
    for c in chars:
        h = ((h << 5) + h + c) & _MASK32
    return h


def dek_hash(data: Data) -> int:
    """Knuth's rotate-and-xor hash, seeded with the length."""
    raw, chars = _signed_bytes(data)
    h = len(raw) & _MASK32
    for c in chars:
        h = (((h << 5) & _MASK32) ^ (h >> 27) ^ (c & _MASK32)) & _MASK32
    return h


def short_hash(data: Data) -> int:
    """DEK hash mixed by :func:`murmur64`, cut to an unsigned 32-bit value."""
    return murmur64(dek_hash(data)) & _MASK32