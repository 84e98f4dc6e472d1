"""
Packed colors.

A packed color is a plain integer that holds four 8-bit channels in the order
red, green, blue, alpha from most to least significant byte. The alpha channel
stores opacity in 1/255 steps. Since packed colors are integers, they are
immutable, hashable, and trivially copyable.
"""
import math
from typing import TypeAlias


Color: TypeAlias = int

TRANSPARENT: Color = 0x00000000


def round_half_up(value: float) -> int:
    """
    Round to the nearest integer with ties going up. Python's ``round()``
    rounds ties to even, which would turn 76.5 into 76 instead of 77.
    Infinities and not-a-numbers have no nearest integer and become 0.
    """
    if not math.isfinite(value):
        return 0
    return math.floor(value + 0.5)


def _byte(value: float) -> int:
    # Truncate and wrap into 8 bits; non-finite values have no bits to keep
    return int(value) & 0xFF if math.isfinite(value) else 0


def pack(r: float, g: float, b: float, a: float) -> Color:
    """
    Pack the channels into one color.

    Args:
        r, g, b: are the color channels between 0 and 255, which should already
            be rounded and clamped; fractional parts are truncated, values
            outside the range wrap around, and non-finite values become 0
        a: is the alpha channel as a fraction between 0 and 1, which is
            clamped to that range; not-a-number becomes 0
    Returns:
        the packed color as an unsigned 32-bit integer
    """
    return (
        _byte(r) << 24
        | _byte(g) << 16
        | _byte(b) << 8
        | round_half_up(min(max(a, 0.0), 1.0) * 255)
    )


def red(color: Color) -> int:
    return 0xFF & (color >> 24)


def green(color: Color) -> int:
    return 0xFF & (color >> 16)


def blue(color: Color) -> int:
    return 0xFF & (color >> 8)


def alpha(color: Color) -> int:
    return 0xFF & color


def unpack(color: Color) -> tuple[int, int, int, int]:
    """Unpack the color into its red, green, blue, and alpha channels."""
    return red(color), green(color), blue(color), alpha(color)


def is_transparent(color: Color) -> bool:
    """Determine whether the color is fully transparent."""
    return alpha(color) == 0


def _format_fraction(value: float) -> str:
    return str(int(value)) if value.is_integer() else repr(value)


def to_string(color: Color) -> str:
    """
    Format the color in CSS functional notation, i.e., ``rgb(R,G,B)`` for
    opaque colors and ``rgba(R,G,B,A)`` with alpha as fraction otherwise.
    """
    r, g, b, a = unpack(color)
    if a < 255:
        return f'rgba({r},{g},{b},{_format_fraction(a / 255)})'
    return f'rgb({r},{g},{b})'


def to_hex(color: Color) -> str:
    """
    Format the color in hashed hexadecimal notation, omitting the alpha
    channel for opaque colors.
    """
    r, g, b, a = unpack(color)
    digits = ''.join(f'{c:02x}' for c in (r, g, b))
    return f'#{digits}' if a == 255 else f'#{digits}{a:02x}'
