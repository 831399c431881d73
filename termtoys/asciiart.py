"""Convert camera frames to grids of character indexes and draw them back.

Frames are in NV21 layout: ``width * height`` luminance bytes followed
by interleaved V/U chroma bytes at half resolution.  Bytes may be given
as signed or unsigned values; only the low eight bits are used.
"""

from __future__ import annotations

from typing import Iterable, Iterator, List, Optional, Sequence, Tuple

MAX_COLOR_VAL = 262143  # 2**18 - 1
_ANSI_RATIO_NUM, _ANSI_RATIO_DEN = 7, 8


def _unsigned(data: Iterable[int]) -> List[int]:
    return [value & 0xFF for value in data]


def _cells(
    width: int, height: int, rows: int, cols: int, start_row: int, end_row: int
) -> Iterator[Tuple[range, range]]:
    """Yield the (y range, x range) of source pixels behind each grid cell."""
    for r in range(start_row, end_row):
        ymin = height * r // rows
        ymax = height * (r + 1) // rows
        for c in range(cols):
            xmin = width * c // cols
            xmax = width * (c + 1) // cols
            if ymin >= ymax or xmin >= xmax:
                raise ValueError(
                    f"image {width}x{height} is too small for a {cols}x{rows} grid"
                )
            yield range(ymin, ymax), range(xmin, xmax)


def _clamp(value: int) -> int:
    return min(max(value, 0), MAX_COLOR_VAL)


def ascii_values_bw(
    data: Sequence[int],
    width: int,
    height: int,
    rows: int,
    cols: int,
    num_chars: int,
    start_row: int = 0,
    end_row: Optional[int] = None,
) -> List[int]:
    """Character indexes (``0..num_chars-1``) for grid rows ``start_row..end_row``.

    Each cell gets the average luminance of the pixels it covers.
    """
    end = rows if end_row is None else end_row
    pixels = _unsigned(data)
    result = []
    for ys, xs in _cells(width, height, rows, cols, start_row, end):
        values = [pixels[width * y + x] for y in ys for x in xs]
        average = sum(values) // len(values)
        result.append(average * num_chars // 256)
    return result


def ascii_values_color(
    data: Sequence[int],
    width: int,
    height: int,
    rows: int,
    cols: int,
    num_chars: int,
    ansi_color: bool,
    start_row: int = 0,
    end_row: Optional[int] = None,
) -> Tuple[List[int], List[int]]:
    """Character indexes and ARGB colours for grid rows ``start_row..end_row``.

    Colours are unsigned 32-bit ``0xAARRGGBB`` values with full alpha.
    With ``ansi_color`` each channel is forced to 0 or full, keeping the
    channels within 7/8 of the strongest one.
    """
    end = rows if end_row is None else end_row
    pixels = _unsigned(data)
    chars: List[int] = []
    colors: List[int] = []
    for ys, xs in _cells(width, height, rows, cols, start_row, end):
        samples = bright_total = red_total = green_total = blue_total = 0
        for y in ys:
            row_offset = width * y
            uv_offset = width * height + width * (y // 2)
            for x in xs:
                samples += 1
                bright = pixels[row_offset + x]
                bright_total += bright
                yy = max(bright - 16, 0)
                uv_index = uv_offset + (x & ~1)
                v = pixels[uv_index] - 128
                u = pixels[uv_index + 1] - 128
                y1192 = 1192 * yy
                red_total += _clamp(y1192 + 1634 * v)
                green_total += _clamp(y1192 - 833 * v - 400 * u)
                blue_total += _clamp(y1192 + 2066 * u)

        chars.append((bright_total // samples) * num_chars // 256)
        red = red_total // samples
        green = green_total // samples
        blue = blue_total // samples

        if ansi_color:
            strongest = max(red, green, blue)
            if strongest > 0:
                threshold = strongest * _ANSI_RATIO_NUM // _ANSI_RATIO_DEN
                red, green, blue = (
                    MAX_COLOR_VAL if channel >= threshold else 0
                    for channel in (red, green, blue)
                )

        colors.append(
            0xFF000000
            | ((red << 6) & 0xFF0000)
            | ((green >> 2) & 0xFF00)
            | (blue >> 10)
        )
    return chars, colors


def fill_row_pixels(
    ascii_values: Sequence[int],
    color_values: Sequence[int],
    num_values: int,
    chars_bitmap: Sequence[int],
    background: int,
    char_width: int,
    char_height: int,
    num_chars: int,
) -> List[int]:
    """Render one text row into pixels, row by row, left to right.

    ``chars_bitmap`` holds every possible character side by side: it is
    ``num_values * char_width`` pixels wide and ``char_height`` high.  A
    non-zero bitmap pixel takes the character's colour, a zero pixel the
    background.
    """
    if len(ascii_values) < num_chars or len(color_values) < num_chars:
        raise ValueError(f"need {num_chars} character values and colours")
    pixels_per_row = num_values * char_width
    cells = list(zip(ascii_values[:num_chars], color_values[:num_chars]))
    result: List[int] = []
    for y in range(char_height):
        for value, color in cells:
            start = y * pixels_per_row + value * char_width
            span = chars_bitmap[start:start + char_width]
            if len(span) != char_width:
                raise ValueError(f"character {value} lies outside the bitmap")
            result.extend(color if bit else background for bit in span)
    return result