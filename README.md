# termtoys

A collection of small, self-contained helpers for working with text
terminals: measuring how many columns a string takes, encoding code
points as UTF-8, turning camera frames into ASCII art, showing images
as 24-bit colour blocks, parsing colours and compact `name:value`
fields, and a few data-structure and file utilities.

## Installation

```
pip install .
```

For running the test suite:

```
pip install .[test]
pytest
```

## Commands

Two commands are installed.

Show images in the terminal using 24-bit colour half-block characters,
scaled to the terminal width. Set `IMCATBG` (for example
`IMCATBG=#202020`) to blend transparent pixels against your terminal
background:

```
termtoys-imcat picture.png other.jpg
```

Print the letter sequence `a, b, ... z, aa, ba, ... zz, aaa, ...`, one
label per line. The optional argument is how many labels to print
(default 1048576):

```
termtoys-p26 100
```

## Library overview

| Module | What it offers |
| --- | --- |
| `termtoys.textwidth` | `wcwidth`, `wcswidth`, `wcwidth_cjk`, `wcswidth_cjk`: terminal column widths of characters and strings |
| `termtoys.utf8` | `encode_codepoint`: a code point as UTF-8 bytes |
| `termtoys.hashing` | `murmur64`, `sdbm_hash`, `djb_hash`, `dek_hash`, `short_hash` |
| `termtoys.sequence` | `p26`: the n-th label in the letter sequence |
| `termtoys.strutil` | URL and string trimming: `sskip`, `strunc`, `strunch`, `struncafter`, `sdel`, `sdelall`, `srepl`, `strrstr`, `sreplbetween`, `scollapse`, `common_prefix_length` |
| `termtoys.asciiart` | `ascii_values_bw`, `ascii_values_color` for NV21 frames, `fill_row_pixels` to draw a row of characters |
| `termtoys.imcat` | `Image`, `parse_background`, `load_image`, `downsample`, `render_single`, `render_double` |
| `termtoys.colors` | `parse_color`, `decode_color` for `#abc`, `112233`, `rgb(1, 2, 3)` and names from a table string |
| `termtoys.timeago` | `time_ago`, `iso_ago`, `iso_time` |
| `termtoys.darray` | `DynamicArray`: growable array usable as stack and queue |
| `termtoys.keyedlist` | `KeyedList` of `Entry` items found by key, number or data |
| `termtoys.fields` | `has_field`, `int_field`, `str_field`, `format_field`, `append_field` |
| `termtoys.ini` | `IniSettings` with `load`, `set_line`, `reset`, `describe`; `IniError` |
| `termtoys.lines` | `count_lines`, `read_line`, `line_at`, `reverse_lines` |

## Examples

```python
from termtoys.textwidth import wcswidth
from termtoys.utf8 import encode_codepoint
from termtoys.timeago import time_ago

wcswidth("日本", 2)          # 4 columns
encode_codepoint(0x20AC)     # b'\xe2\x82\xac'
time_ago(0, now=3600)        # '60 minutes ago'
```

```python
from termtoys.fields import int_field, str_field

data = " int:32 spaces:'foo bar'"
int_field(data, "int", -1)        # 32
str_field(data, "spaces", "-")    # 'foo bar'
```

## What it does not do

- It ships no bitmap font data and has no command for drawing glyphs;
  `fill_row_pixels` draws characters only from a bitmap you supply.
- `decode_color` knows no colour names by itself: pass a table string
  of `name#hex` entries as `names`.
- There is no interactive screen, key or mouse handling; the commands
  only write to standard output.