"""
Resolve CSS color values to packed 32-bit RGBA colors.

The package accepts hashed hexadecimal notation, the CSS named colors, and the
``rgb()``, ``rgba()``, ``hsl()``, ``hsla()``, ``lab()``, ``oklab()``,
``oklch()``, and ``color()`` functions. Malformed values resolve to
transparent; unknown functions and color spaces raise a :class:`ColorError`.
"""
__all__ = (
    # Packed colors
    'Color',
    'TRANSPARENT',
    'pack',
    'unpack',
    'is_transparent',
    'to_string',
    'to_hex',
    # Parsing
    'Context',
    'parse',
    'parse_color',
    'parse_hex',
    # Errors
    'ColorError',
    'ColorSyntaxError',
    'UnsupportedColorFunction',
    'UnsupportedColorSpace',
    'UnsupportedRelativeColor',
)

from .context import Context
from .error import (
    ColorError,
    ColorSyntaxError,
    UnsupportedColorFunction,
    UnsupportedColorSpace,
    UnsupportedRelativeColor,
)
from .packed import (
    Color,
    is_transparent,
    pack,
    to_hex,
    to_string,
    TRANSPARENT,
    unpack,
)
from .parse import parse, parse_color, parse_hex
