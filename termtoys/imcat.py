"""Show images in a true-colour terminal.

Images are scaled to the terminal width with a box filter and printed
with 24-bit colour escapes, two image rows per text line using the
upper half block character.
"""

from __future__ import annotations

import math
import os
import re
import shutil
import sys
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

from PIL import Image as _PILImage

RESET_ALL = "\x1b[0m"
HALF_BLOCK = "\u2580"

RGB = Tuple[int, int, int]
RGBA = Tuple[int, int, int, int]

_HEX_NUMBER = re.compile(r"\s*([+-]?)(?:0[xX](?=[0-9a-fA-F]))?([0-9a-fA-F]+)")


@dataclass(frozen=True)
class Image:
    """An RGBA image: ``width * height * 4`` bytes, row by row."""

    width: int
    height: int
    pixels: bytes

    def __post_init__(self) -> None:
        object.__setattr__(self, "pixels", bytes(self.pixels))
        if self.width < 0 or self.height < 0:
            raise ValueError("image size must not be negative")
        if len(self.pixels) != self.width * self.height * 4:
            raise ValueError(
                f"expected {self.width * self.height * 4} bytes, got {len(self.pixels)}"
            )

    def pixel(self, x: int, y: int) -> RGBA:
        """The (r, g, b, a) value at column ``x``, row ``y``."""
        i = (y * self.width + x) * 4
        r, g, b, a = self.pixels[i:i + 4]
        return r, g, b, a

    def row(self, y: int) -> Iterator[RGBA]:
        """Iterate over the pixels of row ``y``."""
        return (self.pixel(x, y) for x in range(self.width))


def parse_background(value: str) -> RGB:
    """Parse a ``#rrggbb`` style colour; the first character is skipped.

    Text that holds no hex number gives black.
    """
    match = _HEX_NUMBER.match(value[1:])
    number = 0
    if match:
        number = int(match.group(2), 16)
        if match.group(1) == "-":
            number = -number
    return (number >> 16) & 0xFF, (number >> 8) & 0xFF, number & 0xFF


def load_image(path: str) -> Image:
    """Read an image file as RGBA.  Raises :class:`OSError` on failure."""
    with _PILImage.open(path) as source:
        rgba = source.convert("RGBA")
        return Image(rgba.width, rgba.height, rgba.tobytes())


def _round(value: float) -> int:
    return math.floor(value + 0.5)


def downsample(image: Image, term_width: int) -> Image:
    """Scale ``image`` to at most ``term_width`` columns, keeping the aspect.

    Each output pixel averages an odd-sized square of source pixels with
    colours weighted by alpha.
    """
    if term_width < 1:
        raise ValueError("terminal width must be positive")
    imw, imh = image.width, image.height
    if imw == 0 or imh == 0:
        raise ValueError("image is empty")

    aspect = imw / imh
    per_char = max(imw / term_width, 1.0)
    kernel = math.floor(per_char)
    if kernel % 2 == 0:
        kernel -= 1
    kernel = max(kernel, 1)
    radius = (kernel - 1) // 2

    outw = min(imw, term_width)
    outh = _round(outw / aspect)

    out = bytearray()
    for y in range(outh):
        cy = _round(per_char * y)
        ys = range(max(cy - radius, 0), min(cy + radius, imh - 1) + 1)
        for x in range(outw):
            cx = _round(per_char * x)
            xs = range(max(cx - radius, 0), min(cx + radius, imw - 1) + 1)
            samples = [image.pixel(xx, yy) for yy in ys for xx in xs]
            if not samples:
                samples = [image.pixel(min(cx, imw - 1), min(cy, imh - 1))]
            n = len(samples)
            out.extend((
                sum(a * r // 255 for r, _, _, a in samples) // n,
                sum(a * g // 255 for _, g, _, a in samples) // n,
                sum(a * b // 255 for _, _, b, a in samples) // n,
                sum(a for _, _, _, a in samples) // n,
            ))
    return Image(outw, outh, bytes(out))


def render_single(image: Image) -> str:
    """One text cell per pixel, coloured with the background colour."""
    lines = []
    for y in range(image.height):
        cells = "".join(f"\x1b[48;2;{r};{g};{b}m " for r, g, b, _ in image.row(y))
        lines.append(cells + RESET_ALL + "\n")
    return "".join(lines)


def _blend(pixel: RGBA, background: Optional[RGB]) -> RGB:
    r, g, b, a = pixel
    if background is None:
        return r, g, b
    rest = 255 - a
    return tuple(
        ((channel * 255 + under * rest) // 255) & 0xFF
        for channel, under in zip((r, g, b), background)
    )  # type: ignore[return-value]


def render_double(image: Image, background: Optional[RGB] = None) -> str:
    """Two pixel rows per text line using a half block; an odd last row is dropped.

    With ``background`` the (alpha-premultiplied) pixels are blended onto it.
    """
    height = image.height - image.height % 2
    lines: List[str] = []
    for y in range(0, height, 2):
        cells = []
        for top, bottom in zip(image.row(y), image.row(y + 1)):
            tr, tg, tb = _blend(top, background)
            br, bg, bb = _blend(bottom, background)
            cells.append(
                f"\x1b[38;2;{tr};{tg};{tb}m\x1b[48;2;{br};{bg};{bb}m{HALF_BLOCK}"
            )
        lines.append("".join(cells) + RESET_ALL + "\n")
    return "".join(lines)


def main(argv: Optional[List[str]] = None) -> int:
    """Print each image named on the command line."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args or args[0] == "--help":
        sys.stderr.write("Usage: imcat image [image2 .. imageN]\n")
        return 0

    bg_text = os.environ.get("IMCATBG")
    background = parse_background(bg_text) if bg_text is not None else None
    term_width = shutil.get_terminal_size().columns or 80

    for path in args:
        try:
            image = load_image(path)
        except OSError:
            sys.stderr.write(f"Could not load image {path}\n")
            continue
        sys.stdout.write(render_double(downsample(image, term_width), background))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())