"""
Errors raised while resolving colors.

Only structural problems, i.e., a function or color space that this package
does not know about, are errors. Malformed values inside a known notation
degrade to a default color instead.
"""


class ColorError(ValueError):
    """The base class for all errors raised by this package."""


class ColorSyntaxError(ColorError):
    """Text that cannot be tokenized as a CSS component value."""

    def __init__(self, text: str, deficiency: str = 'is malformed') -> None:
        super().__init__(f'color "{text}" {deficiency}')
        self.text = text


class UnsupportedColorFunction(ColorError):
    """A function token naming a function without decoder."""

    def __init__(self, name: str) -> None:
        super().__init__(
            f'Attempting to parse an unsupported color function "{name}"'
        )
        self.name = name


class UnsupportedColorSpace(ColorError):
    """A ``color()`` function naming an unknown color space."""

    def __init__(self, name: str) -> None:
        super().__init__(
            f'Attempting to parse an unsupported color space "{name}" '
            'for color() function'
        )
        self.name = name


class UnsupportedRelativeColor(ColorError):
    """A ``color(from ...)`` function, i.e., relative color syntax."""

    def __init__(self) -> None:
        super().__init__(
            'Attempting to use relative color in color() function, '
            'not yet supported'
        )
