import math
import unittest

from csscolor.angle import deg, parse_angle
from csscolor.error import ColorSyntaxError
from csscolor.syntax import parse_component_value, tokenize
from csscolor.token import (
    absolute_value,
    arguments,
    COMMA,
    DelimToken,
    DimensionToken,
    FunctionToken,
    HashToken,
    IdentToken,
    nonseparators,
    NumberToken,
    PercentageToken,
    SLASH,
    TokenType,
    WHITESPACE,
)


class TestSyntax(unittest.TestCase):

    def test_tokens(self) -> None:
        for text, expected in {
            '#fc0': HashToken('fc0'),
            '  red  ': IdentToken('red'),
            'RebeccaPurple': IdentToken('RebeccaPurple'),
            '42': NumberToken(42),
            '-0.5': NumberToken(-0.5),
            '.25': NumberToken(0.25),
            '1e2': NumberToken(100),
            '50%': PercentageToken(50),
            '120deg': DimensionToken(120, 'deg'),
            '0.5TURN': DimensionToken(0.5, 'TURN'),
        }.items():
            with self.subTest(text=text):
                self.assertEqual(parse_component_value(text), expected)

    def test_function(self) -> None:
        self.assertEqual(
            parse_component_value('rgb(255, 0, 0)'),
            FunctionToken('rgb', (
                NumberToken(255), COMMA, WHITESPACE,
                NumberToken(0), COMMA, WHITESPACE,
                NumberToken(0),
            )),
        )

        self.assertEqual(
            parse_component_value('COLOR(srgb 1 0 0/50%)'),
            FunctionToken('color', (
                IdentToken('srgb'), WHITESPACE,
                NumberToken(1), WHITESPACE,
                NumberToken(0), WHITESPACE,
                NumberToken(0), SLASH, PercentageToken(50),
            )),
        )

    def test_nested_function(self) -> None:
        token = parse_component_value('color(from rgb(1 2 3) srgb r g b)')
        assert isinstance(token, FunctionToken)
        self.assertEqual(token.values[2], FunctionToken('rgb', (
            NumberToken(1), WHITESPACE, NumberToken(2), WHITESPACE, NumberToken(3)
        )))

    def test_token_types(self) -> None:
        self.assertIs(HashToken('f00').type, TokenType.HASH_TOKEN)
        self.assertIs(FunctionToken('rgb').type, TokenType.FUNCTION)
        self.assertIs(SLASH.type, TokenType.DELIM_TOKEN)
        self.assertIs(COMMA.type, TokenType.COMMA_TOKEN)

    def test_tokenize(self) -> None:
        self.assertEqual(
            tokenize('red, #fff'),
            [IdentToken('red'), COMMA, WHITESPACE, HashToken('fff')],
        )
        self.assertEqual(tokenize('!'), [DelimToken('!')])
        self.assertEqual(tokenize(''), [])

    def test_malformed(self) -> None:
        for text in ('', ' ', 'a b', 'rgb(', 'rgb(1 2 3', ')', 'rgb(1))'):
            with self.subTest(text=text):
                with self.assertRaises(ColorSyntaxError) as context:
                    parse_component_value(text)
                self.assertEqual(context.exception.text, text)

    def test_separators(self) -> None:
        tokens = (NumberToken(1), COMMA, WHITESPACE, NumberToken(2), SLASH, NumberToken(3))
        self.assertEqual(
            arguments(tokens), [NumberToken(1), NumberToken(2), SLASH, NumberToken(3)]
        )
        self.assertEqual(
            nonseparators(tokens), [NumberToken(1), NumberToken(2), NumberToken(3)]
        )

    def test_absolute_value(self) -> None:
        self.assertEqual(absolute_value(PercentageToken(50), 1), 0.5)
        self.assertEqual(absolute_value(PercentageToken(50), 255), 127.5)
        self.assertEqual(absolute_value(NumberToken(0.25), 1), 0.25)
        self.assertEqual(absolute_value(DimensionToken(3, 'px'), 1), 3)
        self.assertEqual(absolute_value(IdentToken('none'), 1), 0)


class TestAngle(unittest.TestCase):

    def test_deg(self) -> None:
        self.assertAlmostEqual(deg(180), math.pi)
        self.assertEqual(deg(0), 0)

    def test_parse_angle(self) -> None:
        for token, expected in {
            NumberToken(90): math.pi / 2,
            DimensionToken(90, 'deg'): math.pi / 2,
            DimensionToken(100, 'grad'): math.pi / 2,
            DimensionToken(1.5, 'rad'): 1.5,
            DimensionToken(0.25, 'turn'): math.pi / 2,
            DimensionToken(0.25, 'TURN'): math.pi / 2,
        }.items():
            with self.subTest(token=token):
                self.assertAlmostEqual(parse_angle(None, token), expected)

    def test_not_an_angle(self) -> None:
        for token in (DimensionToken(1, 'px'), PercentageToken(50), IdentToken('none')):
            with self.subTest(token=token):
                with self.assertRaises(ColorSyntaxError):
                    parse_angle(None, token)


if __name__ == '__main__':
    unittest.main()
