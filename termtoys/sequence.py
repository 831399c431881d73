"""Bijective base-26 labels: a, b, ..., z, aa, ba, ..., zz, aaa, ...

The least significant letter comes first.
"""

from __future__ import annotations

import argparse
import sys

_LETTERS = "abcdefghijklmnopqrstuvwxyz"


def p26(n: int) -> str:
    """Return the label for index ``n`` (0 is ``"a"``)."""
    if n < 0:
        raise ValueError(f"index must be non-negative, got {n}")
    parts = []
    while n >= 26:
        parts.append(_LETTERS[n % 26])
        n = n // 26 - 1
    parts.append(_LETTERS[n])
    return "".join(parts)


def main(argv: list[str] | None = None) -> int:
    """Print the first COUNT labels, one per line."""
    parser = argparse.ArgumentParser(description="Print base-26 letter labels.")
    parser.add_argument("count", nargs="?", type=int, default=1024 * 1024)
    args = parser.parse_args(argv)
    out = sys.stdout
    for i in range(args.count):
        out.write(p26(i))
        out.write("\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())