"""
Resolution of CSS color values to packed colors.

:func:`parse` dispatches on the token kind: function calls go to the decoder
registered for the function name, hash literals to :func:`parse_hex`, and
identifiers to the named colors. Everything else, including unknown names and
hash literals with the wrong number of digits, resolves to transparent.
"""
import string

from .context import Context, DEFAULT_CONTEXT
from .error import UnsupportedColorFunction
from .functions import SUPPORTED_COLOR_FUNCTIONS
from .named import lookup
from .packed import Color, pack, TRANSPARENT
from .syntax import parse_component_value
from .token import FunctionToken, HashToken, IdentToken, Token


def parse_hex(digits: str) -> None | Color:
    """
    Parse the digits of a color in hashed hexadecimal notation, i.e., without
    the leading ``#``. Three and four digits are shorthand for six and eight
    digits with every digit doubled. The fourth and eighth digit pairs are the
    alpha channel. Any other number of digits or non-hex digits return
    ``None``.
    """
    if len(digits) in (3, 4):
        digits = ''.join(f'{d}{d}' for d in digits)
    if len(digits) not in (6, 8) or not all(d in string.hexdigits for d in digits):
        return None

    channels = [int(digits[n:n+2], base=16) for n in range(0, len(digits), 2)]

    r, g, b = channels[:3]
    a = channels[3] / 255 if len(channels) == 4 else 1
    return pack(r, g, b, a)


def parse(context: None | Context, value: Token) -> Color:
    """
    Resolve the component value to a packed color.

    Args:
        context: provides the logger and angle resolver; ``None`` selects the
            defaults
        value: is the color's component value
    Returns:
        the packed color, which is transparent for unrecognized values
    Raises:
        UnsupportedColorFunction: if the value is a call to an unknown function
        UnsupportedColorSpace: if ``color()`` names an unknown color space
        UnsupportedRelativeColor: if ``color()`` uses relative color syntax
    """
    context = DEFAULT_CONTEXT if context is None else context

    if isinstance(value, FunctionToken):
        decoder = SUPPORTED_COLOR_FUNCTIONS.get(value.name)
        if decoder is None:
            raise UnsupportedColorFunction(value.name)
        return decoder(context, value.values)

    if isinstance(value, HashToken):
        color = parse_hex(value.value)
        if color is not None:
            return color
        context.log.debug('hex color #%s is malformed, using transparent', value.value)

    elif isinstance(value, IdentToken):
        color = lookup(value.value)
        if color is not None:
            return color
        context.log.debug('unknown color name "%s", using transparent', value.value)

    else:
        context.log.debug('%r is not a color, using transparent', value)

    return TRANSPARENT


def parse_color(text: str, context: None | Context = None) -> Color:
    """
    Parse the text of a CSS color value into a packed color.

    Besides the errors raised by :func:`parse`, this function raises
    :class:`.ColorSyntaxError` for text that is not exactly one component
    value.
    """
    return parse(context, parse_component_value(text))
