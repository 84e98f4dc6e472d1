import itertools
import logging
import math
import unittest

from csscolor import (
    ColorSyntaxError,
    Context,
    parse,
    parse_color,
    parse_hex,
    to_string,
    TRANSPARENT,
    unpack,
    UnsupportedColorFunction,
    UnsupportedColorSpace,
    UnsupportedRelativeColor,
)
from csscolor.conversion import get_converter
from csscolor.named import COLORS, lookup
from csscolor.token import (
    COMMA,
    FunctionToken,
    HashToken,
    IdentToken,
    NumberToken,
    PercentageToken,
)


class TestHex(unittest.TestCase):

    def test_hex(self) -> None:
        for text, expected in {
            '#f00': 0xFF0000FF,
            '#f00f': 0xFF0000FF,
            '#ff0000': 0xFF0000FF,
            '#ff000080': 0xFF000080,
            '#FFCA00': 0xFFCA00FF,
            '#3178ea': 0x3178EAFF,
            '#0000': TRANSPARENT,
        }.items():
            with self.subTest(text=text):
                self.assertEqual(parse_color(text), expected)

    def test_malformed_hex(self) -> None:
        for text in ('#12345', '#ff', '#1234567', '#ggg', '#ff00zz', '#123456789'):
            with self.subTest(text=text):
                self.assertEqual(parse_color(text), TRANSPARENT)

    def test_parse_hex(self) -> None:
        self.assertEqual(parse_hex('abc'), 0xAABBCCFF)
        self.assertIsNone(parse_hex('12345'))
        self.assertIsNone(parse_hex('+12345'))
        self.assertIsNone(parse_hex('1_2345'))

    def test_hex_round_trip(self) -> None:
        channels = (0, 1, 15, 16, 127, 128, 200, 254, 255)
        for r, g, b in itertools.product(channels, repeat=3):
            color = parse_hex(f'{r:02x}{g:02x}{b:02x}')
            self.assertIsNotNone(color)
            self.assertEqual(to_string(color), f'rgb({r},{g},{b})')  # type: ignore


class TestNamed(unittest.TestCase):

    def test_named(self) -> None:
        for text, expected in {
            'red': 0xFF0000FF,
            'RED': 0xFF0000FF,
            'Red': 0xFF0000FF,
            'rebeccapurple': 0x663399FF,
            'darkgoldenrod': 0xB8860BFF,
            'transparent': TRANSPARENT,
        }.items():
            with self.subTest(text=text):
                self.assertEqual(parse_color(text), expected)

    def test_unknown_name(self) -> None:
        self.assertIsNone(lookup('notacolor'))
        self.assertEqual(parse_color('notacolor'), TRANSPARENT)

    def test_table(self) -> None:
        self.assertEqual(len(COLORS), 149)
        for name in COLORS:
            with self.subTest(name=name):
                self.assertEqual(name, name.upper())
                self.assertEqual(lookup(name.lower()), COLORS[name])

        with self.assertRaises(TypeError):
            COLORS['RED'] = 0  # type: ignore

    def test_gray_and_grey(self) -> None:
        for name in ('gray', 'darkgray', 'lightgray', 'slategray', 'dimgray'):
            with self.subTest(name=name):
                self.assertEqual(lookup(name), lookup(name.replace('gray', 'grey')))


class TestRgb(unittest.TestCase):

    def test_rgb(self) -> None:
        for text, expected in {
            'rgb(255, 0, 0)': 0xFF0000FF,
            'rgb(255 0 0)': 0xFF0000FF,
            'rgb(255,0,0,1)': 0xFF0000FF,
            'rgba(0,0,0,0)': TRANSPARENT,
            'rgba(255, 255, 255, 0.5)': 0xFFFFFF80,
            'rgba(255 0 0 / 50%)': 0xFF000080,
            'rgb(100%, 50%, 0%)': 0xFF8000FF,
            'RGB(49, 120, 234)': 0x3178EAFF,
        }.items():
            with self.subTest(text=text):
                self.assertEqual(parse_color(text), expected)

    def test_wrong_arity(self) -> None:
        for text in ('rgb()', 'rgb(1, 2)', 'rgb(1, 2, 3, 4, 5)'):
            with self.subTest(text=text):
                self.assertEqual(parse_color(text), TRANSPARENT)

    def test_ill_typed_channel(self) -> None:
        self.assertEqual(parse_color('rgb(255, red, 0)'), 0xFF0000FF)


class TestHsl(unittest.TestCase):

    def test_hsl(self) -> None:
        for text, expected in {
            'hsl(0, 0%, 50%)': 0x7F7F7FFF,
            'hsl(0, 100%, 50%)': 0xFF0000FF,
            'hsl(120, 100%, 50%)': 0x00FF00FF,
            'hsl(120deg 100% 50%)': 0x00FF00FF,
            'hsla(240, 100%, 50%, 0.5)': 0x0000FF80,
            'hsl(0, 0%, 100%)': 0xFFFFFFFF,
            'hsl(0, 0%, 0%)': 0x000000FF,
        }.items():
            with self.subTest(text=text):
                self.assertEqual(parse_color(text), expected)

    def test_achromatic_is_opaque(self) -> None:
        self.assertEqual(parse_color('hsla(0, 0%, 50%, 0.5)'), 0x7F7F7FFF)

    def test_saturation_requires_percentage(self) -> None:
        self.assertEqual(parse_color('hsl(0, 100, 50%)'), 0x7F7F7FFF)

    def test_bad_angle(self) -> None:
        # The hue falls back to 0, i.e., red
        self.assertEqual(parse_color('hsl(1foo, 100%, 50%)'), 0xFF0000FF)

    def test_custom_angle(self) -> None:
        context = Context(angle=lambda _context, _token: 2 * math.pi / 3)
        self.assertEqual(parse_color('hsl(1x, 100%, 50%)', context), 0x00FF00FF)


class TestLab(unittest.TestCase):

    def test_oklab(self) -> None:
        for text, expected in {
            'oklab(1 0 0)': 0xFFFFFFFF,
            'oklab(0 0 0)': 0x000000FF,
            'oklab(100% 0 0)': 0xFFFFFFFF,
            'oklab(0.8613332073307732 0.0017175723640959761 0.1760013937170005)': 0xFFCA00FF,
            'oklab(0.5909012953108558 -0.03348086515869708 -0.1836287492414714)': 0x3178EAFF,
        }.items():
            with self.subTest(text=text):
                self.assertEqual(parse_color(text), expected)

    def test_oklch(self) -> None:
        for text, expected in {
            'oklch(1 0 0)': 0xFFFFFFFF,
            'oklch(0 0 0)': 0x000000FF,
            'oklch(0.8613332073307732 0.17600977428868128 89.440876452466)': 0xFFCA00FF,
            'oklch(0.5909012953108558 0.18665606306724153 259.66681920272583deg)': 0x3178EAFF,
        }.items():
            with self.subTest(text=text):
                self.assertEqual(parse_color(text), expected)

    def test_oklch_round_trip(self) -> None:
        to_oklch = get_converter('rgb256', 'oklch')
        for rgb in itertools.product((0, 64, 128, 200, 255), repeat=3):
            with self.subTest(rgb=rgb):
                L, C, h = to_oklch(*rgb)
                values = (NumberToken(L), NumberToken(C), NumberToken(h))
                r, g, b, a = unpack(parse(None, FunctionToken('oklch', values)))
                self.assertEqual(a, 255)
                for c1, c2 in zip(rgb, (r, g, b)):
                    self.assertLessEqual(abs(c1 - c2), 2)

    def test_alpha_is_ignored(self) -> None:
        self.assertEqual(parse_color('oklab(1 0 0 / 0.5)'), 0xFFFFFFFF)
        self.assertEqual(parse_color('lab(100 0 0 / 0.5)'), 0xFFFFFFFF)

    def test_lab(self) -> None:
        for text, expected in {
            'lab(0 0 0)': 0x000000FF,
            'lab(100 0 0)': 0xFFFFFFFF,
            'lab(50 0 0)': 0x777777FF,
        }.items():
            with self.subTest(text=text):
                self.assertEqual(parse_color(text), expected)

    def test_lab_is_clamped(self) -> None:
        r, g, b, a = unpack(parse_color('lab(50 120 -120)'))
        self.assertEqual(a, 255)
        for channel in (r, g, b):
            self.assertTrue(0 <= channel <= 255)


class TestColorFunction(unittest.TestCase):

    def test_color(self) -> None:
        for text, expected in {
            'color(srgb 1 0 0)': 0xFF0000FF,
            'color(SRGB 1 0 0)': 0xFF0000FF,
            'color(srgb 0.5 0.5 0.5 / 0.5)': 0x80808080,
            'color(srgb 0 0 0 / 0)': TRANSPARENT,
            'color(srgb 2 -1 0)': 0xFF0000FF,
            'color(srgb-linear 1 0 0)': 0xFF0000FF,
            'color(srgb-linear 0 0 0 / 0)': 0x000000FF,
            'color(xyz 0 0 0)': 0x000000FF,
            'color(xyz 0.9505 1 1.089)': 0xFFFFFFFF,
            'color(xyz-d50 0 0 0)': 0x000000FF,
        }.items():
            with self.subTest(text=text):
                self.assertEqual(parse_color(text), expected)

    def test_unsupported_color_space(self) -> None:
        for text, name in {
            'color(display-p3 1 0 0)': 'display-p3',
            'color(rec2020 1 0 0)': 'rec2020',
            'color()': 'unknown',
            'color(1 0 0)': 'unknown',
        }.items():
            with self.subTest(text=text):
                with self.assertRaises(UnsupportedColorSpace) as context:
                    parse_color(text)
                self.assertEqual(context.exception.name, name)

    def test_relative_color(self) -> None:
        with self.assertRaises(UnsupportedRelativeColor):
            parse_color('color(from white srgb r g b)')


class TestParse(unittest.TestCase):

    def test_unsupported_function(self) -> None:
        for name in ('lch', 'hwb', 'light-dark'):
            with self.subTest(name=name):
                with self.assertRaises(UnsupportedColorFunction) as context:
                    parse_color(f'{name}(50% 0.1 120)')
                self.assertEqual(context.exception.name, name)
                self.assertIn(f'"{name}"', str(context.exception))

    def test_errors_are_value_errors(self) -> None:
        with self.assertRaises(ValueError):
            parse_color('lch(1 2 3)')

    def test_tokens(self) -> None:
        self.assertEqual(parse(None, HashToken('f00')), 0xFF0000FF)
        self.assertEqual(parse(None, IdentToken('Blue')), 0x0000FFFF)
        self.assertEqual(parse(None, NumberToken(42)), TRANSPARENT)
        self.assertEqual(parse(None, PercentageToken(50)), TRANSPARENT)
        self.assertEqual(
            parse(None, FunctionToken('rgb', (
                NumberToken(1), COMMA, NumberToken(2), COMMA, NumberToken(3)
            ))),
            0x010203FF,
        )

    def test_syntax_errors(self) -> None:
        for text in ('', '   ', 'red blue', 'rgb(1 2 3', 'rgb(1 2 3))'):
            with self.subTest(text=text):
                with self.assertRaises(ColorSyntaxError):
                    parse_color(text)

    def test_logging(self) -> None:
        log = logging.getLogger('test.csscolor')
        context = Context(log=log)
        with self.assertLogs(log, level='DEBUG') as records:
            self.assertEqual(parse_color('notacolor', context), TRANSPARENT)
            self.assertEqual(parse_color('#12345', context), TRANSPARENT)
        self.assertEqual(len(records.records), 2)
        self.assertIn('notacolor', records.output[0])
        self.assertIn('12345', records.output[1])


class TestLargeNumbers(unittest.TestCase):

    def test_infinite_values_degrade(self) -> None:
        for text, expected in {
            'rgb(1e400, 0, 0)': 0x000000FF,
            'rgb(1e400%, 0, 0)': 0x000000FF,
            'rgb(0, 255, 0, 1e400)': 0x00FF00FF,
            'hsl(0, 0%, 1e400%)': 0x000000FF,
            'hsl(1e400, 100%, 50%)': 0x000000FF,
            'oklab(1e200 0 0)': 0x000000FF,
            'oklch(1e200 0 0)': 0x000000FF,
            'oklch(0.5 0.1 1e400)': 0x000000FF,
            'lab(1e200 0 0)': 0x000000FF,
            'color(srgb 1e400 0 0)': 0xFF0000FF,
        }.items():
            with self.subTest(text=text):
                self.assertEqual(parse_color(text), expected)

    def test_extreme_values_stay_in_range(self) -> None:
        for text in (
            'rgb(-1e400, 1e308, -1e308)',
            'hsla(1e308, 1e308%, 50%, 1e400%)',
            'lab(-1e200 1e200 -1e200)',
            'oklab(0.5 1e200 -1e200)',
            'oklch(1e308 1e308 1e308)',
            'color(srgb-linear 1e200 0 0)',
            'color(xyz 1e200 -1e200 0 / 1e400)',
        ):
            with self.subTest(text=text):
                color = parse_color(text)
                self.assertTrue(0 <= color <= 0xFFFFFFFF)

    def test_tokens_with_large_numbers(self) -> None:
        huge = (NumberToken(1e200), NumberToken(0), NumberToken(0))
        self.assertEqual(parse(None, FunctionToken('oklab', huge)), 0x000000FF)
        self.assertEqual(parse(None, FunctionToken('lab', huge)), 0x000000FF)



if __name__ == '__main__':
    unittest.main()
