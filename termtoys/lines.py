"""Line access on binary files: counting, numbered lines and reading backwards.

Functions take files opened in binary mode and return lines as text
(UTF-8, undecodable bytes replaced) without the trailing newline.
"""

from __future__ import annotations

from typing import BinaryIO, Iterator, Optional

_BLOCK = 1024


def _decode(raw: bytes) -> str:
    return raw.decode("utf-8", errors="replace")


def count_lines(f: BinaryIO) -> int:
    """Number of newline characters in the whole file."""
    f.seek(0)
    return sum(chunk.count(b"\n") for chunk in iter(lambda: f.read(65536), b""))


def read_line(f: BinaryIO) -> Optional[str]:
    """Read the line at the current position, or None at end of file."""
    raw = f.readline()
    if not raw:
        return None
    if raw.endswith(b"\n"):
        raw = raw[:-1]
    return _decode(raw)


def line_at(f: BinaryIO, number: int) -> Optional[str]:
    """The ``number``-th line (1-based; 1 or less gives the first), or None."""
    f.seek(0)
    for _ in range(number - 1):
        if not f.readline():
            return None
    return read_line(f)


def reverse_lines(f: BinaryIO) -> Iterator[str]:
    """Yield the lines before the current position, last line first.

    A newline right before the position does not start an empty line.
    The file position afterwards is unspecified.
    """
    end = f.tell()
    if end <= 0:
        return
    f.seek(end - 1)
    if f.read(1) == b"\n":
        end -= 1
    pos = end
    carry = b""
    while pos > 0:
        size = min(_BLOCK, pos)
        pos -= size
        f.seek(pos)
        chunk = f.read(size)
        pieces = (chunk + carry).split(b"\n")
        carry = pieces[0]
        for piece in reversed(pieces[1:]):
            yield _decode(piece)
    if end > 0 or carry:
        yield _decode(carry)