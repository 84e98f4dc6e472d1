"""
Decoders for CSS color functions.

Each decoder takes the parsing context and the function's argument tokens,
separators included, and returns a packed color. Decoders are lenient: a
missing or ill-typed argument falls back to 0 and the function still produces
a color. Only ``color()`` raises errors, for unknown color spaces and relative
color syntax.
"""
from collections.abc import Callable, Sequence
import math
from types import MappingProxyType
from typing import TypeAlias, TYPE_CHECKING

from .conversion import (
    ciexyz_to_linear_srgb,
    gamma_compensate,
    get_converter,
    lab_to_ciexyz,
    linear_srgb_to_srgb,
    srgb_to_rgb256,
    to_channel,
)
from .angle import deg
from .error import ColorError, UnsupportedColorSpace, UnsupportedRelativeColor
from .packed import Color, pack, round_half_up
from .token import (
    absolute_value,
    arguments,
    IdentToken,
    is_dimension,
    is_number,
    is_percentage,
    is_slash,
    nonseparators,
    Token,
)

if TYPE_CHECKING:
    from .context import Context


Decoder: TypeAlias = Callable[['Context', Sequence[Token]], Color]


def _pad(tokens: list[Token], count: int) -> list[None | Token]:
    padding: list[None | Token] = [None] * max(count - len(tokens), 0)
    return [*tokens, *padding]


def _fraction(context: 'Context', token: None | Token, label: str) -> float:
    """Resolve a percentage to its fraction and a number to its value."""
    if is_percentage(token):
        return token.number / 100
    if is_number(token):
        return token.number
    context.log.debug('%s %r is neither percentage nor number, using 0', label, token)
    return 0


def _value(context: 'Context', token: None | Token, label: str) -> float:
    """Resolve a number or dimension to its value."""
    if is_number(token) or is_dimension(token):
        return token.number
    context.log.debug('%s %r is neither number nor dimension, using 0', label, token)
    return 0


# --------------------------------------------------------------------------------------
# rgb() and rgba()


def _rgb_channel(token: Token, index: int) -> float:
    if is_number(token):
        return token.number
    if is_percentage(token):
        if index == 3:
            return token.number / 100
        return round_half_up(token.number / 100 * 255)
    return 0


def rgb(context: 'Context', args: Sequence[Token]) -> Color:
    """
    Decode ``rgb()`` and ``rgba()``, which must have three or four arguments.
    For any other count, the result is transparent black.
    """
    tokens = nonseparators(args)

    if len(tokens) == 3:
        r, g, b = (_rgb_channel(t, i) for i, t in enumerate(tokens))
        return pack(r, g, b, 1)

    if len(tokens) == 4:
        r, g, b, a = (_rgb_channel(t, i) for i, t in enumerate(tokens))
        return pack(r, g, b, a)

    context.log.debug('rgb() has %d arguments instead of 3 or 4', len(tokens))
    return 0


# --------------------------------------------------------------------------------------
# hsl() and hsla()


def hue_to_rgb(t1: float, t2: float, hue: float) -> float:
    """Compute one RGB channel from the HSL helper values and the shifted hue."""
    if hue < 0:
        hue += 1
    if hue >= 1:
        hue -= 1

    if hue < 1 / 6:
        return (t2 - t1) * hue * 6 + t1
    elif hue < 1 / 2:
        return t2
    elif hue < 2 / 3:
        return (t2 - t1) * 6 * (2 / 3 - hue) + t1
    else:
        return t1


def _hue(context: 'Context', token: None | Token) -> float:
    if token is None:
        return 0
    if is_number(token):
        return deg(token.number)
    try:
        return context.angle(context, token)
    except ColorError as x:
        context.log.debug('hue %r does not resolve, using 0: %s', token, x)
        return 0


def hsl(context: 'Context', args: Sequence[Token]) -> Color:
    """Decode ``hsl()`` and ``hsla()``."""
    hue, saturation, lightness, alpha = _pad(nonseparators(args), 4)[:4]

    h = _hue(context, hue) / (2 * math.pi)
    s = saturation.number / 100 if is_percentage(saturation) else 0
    l = lightness.number / 100 if is_percentage(lightness) else 0
    a = 1.0 if alpha is None else absolute_value(alpha, 1)

    if s == 0:
        return pack(l * 255, l * 255, l * 255, 1)

    t2 = l * (s + 1) if l <= 0.5 else l + s - l * s
    t1 = l * 2 - t2

    r = hue_to_rgb(t1, t2, h + 1 / 3)
    g = hue_to_rgb(t1, t2, h)
    b = hue_to_rgb(t1, t2, h - 1 / 3)
    return pack(r * 255, g * 255, b * 255, a)


# --------------------------------------------------------------------------------------
# lab(), oklab(), and oklch()
#
# All three ignore any alpha argument and produce opaque colors.


def lab(context: 'Context', args: Sequence[Token]) -> Color:
    """Decode ``lab()``, converting via CIE XYZ with the D65 white point."""
    L, A, B = _pad(nonseparators(args), 3)[:3]

    l = _fraction(context, L, 'lab() lightness')
    a = _value(context, A, 'lab() a')
    b = _value(context, B, 'lab() b')

    linear = ciexyz_to_linear_srgb(*lab_to_ciexyz(l, a, b))
    r, g, b = (to_channel(gamma_compensate(c)) for c in linear)
    return pack(r, g, b, 1)


def oklab(context: 'Context', args: Sequence[Token]) -> Color:
    """Decode ``oklab()``."""
    L, A, B = _pad(nonseparators(args), 3)[:3]

    l = _fraction(context, L, 'oklab() lightness')
    a = _value(context, A, 'oklab() a')
    b = _value(context, B, 'oklab() b')

    r, g, b = get_converter('oklab', 'rgb256')(l, a, b)
    return pack(r, g, b, 1)


def oklch(context: 'Context', args: Sequence[Token]) -> Color:
    """Decode ``oklch()``; the hue is in degrees, whatever its unit."""
    lightness, chroma, hue = _pad(nonseparators(args), 3)[:3]

    l = _fraction(context, lightness, 'oklch() lightness')
    c = _fraction(context, chroma, 'oklch() chroma')
    h = _value(context, hue, 'oklch() hue')

    r, g, b = get_converter('oklch', 'rgb256')(l, c, h)
    return pack(r, g, b, 1)


# --------------------------------------------------------------------------------------
# color()


def _srgb(c1: float, c2: float, c3: float, alpha: float) -> Color:
    return pack(*srgb_to_rgb256(c1, c2, c3), alpha)


def _srgb_linear(c1: float, c2: float, c3: float, _alpha: float) -> Color:
    return pack(*srgb_to_rgb256(*linear_srgb_to_srgb(c1, c2, c3)), 1)


def _xyz(c1: float, c2: float, c3: float, _alpha: float) -> Color:
    linear = ciexyz_to_linear_srgb(c1, c2, c3)
    r, g, b = (to_channel(gamma_compensate(c)) for c in linear)
    return pack(r, g, b, 1)


_COLOR_SPACES: MappingProxyType[str, Callable[[float, float, float, float], Color]] = (
    MappingProxyType({
        'srgb': _srgb,
        'srgb-linear': _srgb_linear,
        'xyz': _xyz,
        # D50 is treated as D65
        'xyz-d50': _xyz,
    })
)


def color(context: 'Context', args: Sequence[Token]) -> Color:
    """
    Decode ``color()`` for the sRGB, linear sRGB, and XYZ color spaces.

    Raises:
        UnsupportedRelativeColor: for relative color syntax
        UnsupportedColorSpace: for any other color space
    """
    tokens = arguments(args)
    first = tokens[0] if tokens else None
    space = first.value if isinstance(first, IdentToken) else 'unknown'

    if space.lower() == 'from':
        raise UnsupportedRelativeColor()

    handler = _COLOR_SPACES.get(space.lower())
    if handler is None:
        raise UnsupportedColorSpace(space)

    c1, c2, c3 = (
        t.number if is_number(t) else 0 for t in _pad(tokens[1:4], 3)
    )
    if len(tokens) > 5 and is_slash(tokens[4]) and is_number(tokens[5]):
        alpha = tokens[5].number
    else:
        alpha = 1

    return handler(c1, c2, c3, alpha)


# --------------------------------------------------------------------------------------


SUPPORTED_COLOR_FUNCTIONS: MappingProxyType[str, Decoder] = MappingProxyType({
    'hsl': hsl,
    'hsla': hsl,
    'rgb': rgb,
    'rgba': rgb,
    'oklch': oklch,
    'oklab': oklab,
    'lab': lab,
    'color': color,
})
