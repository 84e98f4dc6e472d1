"""Resolution of CSS angles to radians."""
import math
from types import MappingProxyType
from typing import Any

from .error import ColorSyntaxError
from .token import DimensionToken, NumberToken, Token


_RADIANS_PER_UNIT = MappingProxyType({
    'deg': math.pi / 180,
    'grad': math.pi / 200,
    'rad': 1.0,
    'turn': 2 * math.pi,
})


def deg(degrees: float) -> float:
    """Convert degrees to radians."""
    return degrees * _RADIANS_PER_UNIT['deg']


def parse_angle(_context: Any, token: Token) -> float:
    """
    Resolve the angle token to radians.

    Dimensions must have one of the units ``deg``, ``grad``, ``rad``, or
    ``turn``, ignoring case. Unitless numbers are degrees, as for the hue in
    ``hsl()``. Any other token is a syntax error.
    """
    if isinstance(token, DimensionToken):
        factor = _RADIANS_PER_UNIT.get(token.unit.lower())
        if factor is None:
            raise ColorSyntaxError(
                f'{token.number}{token.unit}', 'does not have an angle unit'
            )
        return token.number * factor
    if isinstance(token, NumberToken):
        return deg(token.number)

    raise ColorSyntaxError(repr(token), 'is not an angle')
