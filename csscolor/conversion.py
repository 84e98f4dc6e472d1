"""
Conversion between the color formats and spaces needed for resolving CSS
colors. Coordinates are plain tuples of floats; 24-bit RGB uses ints.
"""
import itertools
import math
from types import MappingProxyType
from typing import Callable, cast, TypeAlias

from .packed import round_half_up


# See https://github.com/color-js/color.js/blob/a77e080a070039c534dda3965a769675aac5f75e/src/spaces/srgb-linear.js

_XYZ_TO_LINEAR_SRGB = (
	(  3.2409699419045226,  -1.537383177570094,   -0.4986107602930034  ),
	( -0.9692436362808796,   1.8759675015077202,   0.04155505740717559 ),
	(  0.05563007969699366, -0.20397695888897652,  1.0569715142428786  ),
)

_LINEAR_SRGB_TO_XYZ = (
	( 0.41239079926595934, 0.357584339383878,   0.1804807884018343  ),
	( 0.21263900587151027, 0.715168678767756,   0.07219231536073371 ),
	( 0.01933081871559182, 0.11919477979462598, 0.9505321522496607  ),
)

# The rounded matrix used for CIE Lab and color(xyz ...). It differs from the
# one above in the fifth or sixth digit, which is enough to shift some 8-bit
# channels by one. Keep both.

_CIEXYZ_TO_LINEAR_SRGB = (
	(  3.24071,   -1.53726,  -0.498571  ),
	( -0.969258,   1.87599,   0.0415557 ),
	(  0.0556352, -0.203996,  1.05707   ),
)

# Reference white D65 with Y = 100

_CIE_WHITE = (95.047, 100.0, 108.883)

# See https://github.com/color-js/color.js/blob/a77e080a070039c534dda3965a769675aac5f75e/src/spaces/oklab.js

_XYZ_TO_LMS = (
	( 0.8190224379967030, 0.3619062600528904, -0.1288737815209879 ),
	( 0.0329836539323885, 0.9292868615863434,  0.0361446663506424 ),
	( 0.0481771893596242, 0.2642395317527308,  0.6335478284694309 ),
)

_LMS_TO_XYZ = (
	(  1.2268798758459243, -0.5578149944602171,  0.2813910456659647 ),
	( -0.0405757452148008,  1.1122868032803170, -0.0717110580655164 ),
	( -0.0763729366746601, -0.4214933324022432,  1.5869240198367816 ),
)

_LMS_TO_OKLAB = (
	( 0.2104542683093140,  0.7936177747023054, -0.0040720430116193 ),
	( 1.9779985324311684, -2.4285922420485799,  0.4505937096174110 ),
	( 0.0259040424655478,  0.7827717124575296, -0.8086757549230774 ),
)

_OKLAB_TO_LMS = (
	( 1.0000000000000000,  0.3963377773761749,  0.2158037573099136 ),
	( 1.0000000000000000, -0.1055613458156586, -0.0638541728258133 ),
	( 1.0000000000000000, -0.0894841775298119, -1.2914855480194092 ),
)


# --------------------------------------------------------------------------------------


Vector: TypeAlias = tuple[float, float, float]
Matrix: TypeAlias = tuple[Vector, Vector, Vector]
Converter: TypeAlias = Callable[..., tuple[float, float, float]]

def multiply(matrix: Matrix, vector: Vector) -> Vector:
    """Multiply the 3x3 matrix with the column vector."""
    return cast(
        Vector,
        tuple(sum(r * c for r, c in zip(row, vector)) for row in matrix)
    )


def to_channel(value: float) -> int:
    """
    Scale the normalized component to 0–255, round, and clamp. Not-a-numbers
    become 0.
    """
    if math.isnan(value):
        return 0
    return round_half_up(min(max(value * 255, 0.0), 255.0))


# --------------------------------------------------------------------------------------
# 24-bit RGB


def rgb256_to_srgb(r: int, g: int, b: int) -> tuple[float, float, float]:
    """Convert the given color from 24-bit RGB to sRGB."""
    return cast(Vector, tuple(map(lambda c: c / 255.0, (r, g, b))))


def srgb_to_rgb256(r: float, g: float, b: float) -> tuple[int, int, int]:
    """
    Convert the given color from sRGB to 24-bit RGB. This conversion is lossy
    and also clamps out-of-gamut components.
    """
    return to_channel(r), to_channel(g), to_channel(b)


# --------------------------------------------------------------------------------------
# sRGB and Linear sRGB
# See https://github.com/color-js/color.js/blob/a77e080a070039c534dda3965a769675aac5f75e/src/spaces/srgb.js


def srgb_to_linear_srgb(r: float, g: float, b: float) -> tuple[float, float, float]:
    """Convert the given color from sRGB to linear sRGB."""
    def convert(value: float) -> float:
        magnitude = math.fabs(value)

        if magnitude <= 0.04045:
            return value / 12.92

        return math.copysign(math.pow((magnitude + 0.055) / 1.055, 2.4), value)

    return convert(r), convert(g), convert(b)


def linear_srgb_to_srgb(r: float, g: float, b: float) -> tuple[float, float, float]:
    """
    Convert the given color from linear sRGB to sRGB. Negative components keep
    their sign.
    """
    def convert(value: float) -> float:
        magnitude = math.fabs(value)

        if magnitude <= 0.0031308:
            return value * 12.92

        return math.copysign(math.pow(magnitude, 1/2.4) * 1.055 - 0.055, value)

    return convert(r), convert(g), convert(b)


def gamma_compensate(value: float) -> float:
    """
    Apply the sRGB transfer function to a single linear component. Unlike
    :func:`linear_srgb_to_srgb`, negative components become 0.
    """
    if value < 0:
        return 0.0
    elif value <= 0.0031308:
        return 12.92 * value

    return 1.055 * math.pow(value, 1.0 / 2.4) - 0.055


def linear_srgb_to_xyz(r: float, g: float, b: float) -> tuple[float, float, float]:
    """Convert the given color from linear sRGB to XYZ."""
    return multiply(_LINEAR_SRGB_TO_XYZ, (r, g, b))


# --------------------------------------------------------------------------------------
# Oklab and Oklch:
# See https://github.com/color-js/color.js/blob/a77e080a070039c534dda3965a769675aac5f75e/src/spaces/oklch.js


def oklch_to_oklab(L: float, C: float, h: float) -> tuple[float, float, float]:
    """Convert the given color from Oklch to Oklab."""
    if math.isnan(h):
        a = b = 0.0
    else:
        # An infinite hue turns into not-a-number here; math.cos would raise
        a = C * math.cos(h % 360 * math.pi / 180)
        b = C * math.sin(h % 360 * math.pi / 180)

    return L, a, b


def oklab_to_oklch(L: float, a: float, b: float) -> tuple[float, float, float]:
    """Convert the given color from Oklab to Oklch."""
    ε = 0.0002

    if math.fabs(a) < ε and math.fabs(b) < ε:
        h = math.nan
    else:
        h = math.atan2(b, a) * 180 / math.pi

    return L, math.sqrt(a * a + b * b), math.fmod(h + 360, 360)


def oklab_to_xyz(L: float, a: float, b: float) -> tuple[float, float, float]:
    """Convert the given color from Oklab to XYZ."""
    LMSg = multiply(_OKLAB_TO_LMS, (L, a, b))
    # Unlike math.pow, multiplication overflows to infinity without raising
    LMS = cast(Vector, tuple(map(lambda c: c * c * c, LMSg)))
    return multiply(_LMS_TO_XYZ, LMS)


# --------------------------------------------------------------------------------------
# XYZ


def xyz_to_linear_srgb(X: float, Y: float, Z: float) -> tuple[float, float, float]:
    """Convert the given color from XYZ to linear sRGB."""
    return multiply(_XYZ_TO_LINEAR_SRGB, (X, Y, Z))


def xyz_to_oklab(X: float, Y: float, Z: float) -> tuple[float, float, float]:
    """Convert the given color from XYZ to Oklab."""
    LMS = multiply(_XYZ_TO_LMS, (X, Y, Z))
    LMSg = cast(Vector, tuple(map(lambda c: math.cbrt(c), LMS)))
    return multiply(_LMS_TO_OKLAB, LMSg)


# --------------------------------------------------------------------------------------
# CIE Lab and CIE XYZ
#
# These two are not part of the conversion tree below. Lab uses a slightly
# different linear extension below the knee and the rounded XYZ matrix, which
# makes the results incompatible with the color.js-based conversions above.


def lab_to_ciexyz(L: float, a: float, b: float) -> tuple[float, float, float]:
    """
    Convert the given color from CIE Lab to CIE XYZ, relative to the D65
    reference white and scaled so that Y is 1 for white.
    """
    def convert(t: float, white: float) -> float:
        p = t * t * t
        if p > 0.00885645167:
            return p * white / 100.0
        return (t - 16.0 / 116.0) / 7.787 * white / 100.0

    fy = (L + 16.0) / 116.0
    fx = a / 500.0 + fy
    fz = fy - b / 200.0

    Xn, Yn, Zn = _CIE_WHITE
    return convert(fx, Xn), convert(fy, Yn), convert(fz, Zn)


def ciexyz_to_linear_srgb(X: float, Y: float, Z: float) -> tuple[float, float, float]:
    """Convert the given color from CIE XYZ to linear sRGB."""
    return multiply(_CIEXYZ_TO_LINEAR_SRGB, (X, Y, Z))


# --------------------------------------------------------------------------------------
# Conversion Routes
#
# The formats and spaces with conversions in this module form a tree rooted in
# XYZ. A route between two nodes climbs from both nodes towards the root and
# turns around where the two paths meet. CIE Lab is not part of the tree.


_PARENT: dict[str, None | str] = {
    'rgb256': 'srgb',
    'srgb': 'linear_srgb',
    'linear_srgb': 'xyz',
    'oklch': 'oklab',
    'oklab': 'xyz',
    'xyz': None,
}


def _path_to_root(node: str) -> list[str]:
    if node not in _PARENT:
        raise ValueError(f'{node} is not a valid color format or space')

    path = [node]
    while (parent := _PARENT[path[-1]]) is not None:
        path.append(parent)
    return path


def find_route(source: str, target: str) -> tuple[str, ...]:
    """
    Find the route from the source to the target color format or space. The
    route includes both end points.
    """
    up = _path_to_root(source)
    down = _path_to_root(target)

    while len(up) > 1 and len(down) > 1 and up[-2] == down[-2]:
        up.pop()
        down.pop()
    down.pop()

    return (*up, *reversed(down))


def _direct_conversions(namespace: dict[str, object]) -> dict[tuple[str, str], Converter]:
    """Collect the public functions named ``<source>_to_<target>`` between tree nodes."""
    conversions: dict[tuple[str, str], Converter] = {}
    for name, value in namespace.items():
        if name.startswith('_') or not callable(value):
            continue
        source, separator, target = name.partition('_to_')
        if separator and source in _PARENT and target in _PARENT:
            conversions[source, target] = cast(Converter, value)
    return conversions


def _pass_through(*coordinates: float) -> tuple[float, ...]:
    return tuple(coordinates)


def _chain(steps: tuple[Converter, ...]) -> Converter:
    # A top-level factory keeps the closure from capturing _create_converter's locals
    def converter(*coordinates: float) -> tuple[float, float, float]:
        value = cast(tuple[float, float, float], coordinates)
        for step in steps:
            value = step(*value)
        return value
    return converter


def _create_converter(
    direct: dict[tuple[str, str], Converter], source: str, target: str
) -> Converter:
    route = find_route(source, target)
    steps = tuple(direct[pair] for pair in itertools.pairwise(route))

    converter = _chain(steps)
    name = f'{source}_to_{target}'
    setattr(converter, '__name__', name)
    setattr(converter, '__qualname__', name)
    setattr(converter, 'route', route)
    setattr(converter, 'steps', steps)
    return converter


def get_converter(source: str, target: str) -> Converter:
    """
    Get a function that converts coordinates from the source color format or
    space to the target color format or space.

    Valid formats and spaces are ``rgb256``, ``srgb``, ``linear_srgb``,
    ``xyz``, ``oklab``, and ``oklch``. All converters are created when this
    module is imported. Each one is named ``<source>_to_<target>`` and has
    ``route`` and ``steps`` attributes for debugging.
    """
    if source == target:
        return cast(Converter, _pass_through)

    converter = _CONVERTERS.get((source, target))
    if converter is None:
        unknown = source if source not in _PARENT else target
        raise ValueError(f'{unknown} is not a valid color format or space')
    return converter


def _create_all_converters() -> MappingProxyType[tuple[str, str], Converter]:
    direct = _direct_conversions(globals())
    return MappingProxyType({
        (source, target): _create_converter(direct, source, target)
        for source, target in itertools.permutations(_PARENT, 2)
    })


_CONVERTERS = _create_all_converters()
