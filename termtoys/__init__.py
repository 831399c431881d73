"""Small terminal utilities: text widths, UTF-8, ASCII art, image display and text helpers."""

__version__ = "0.1.0"