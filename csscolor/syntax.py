"""
A tokenizer for single CSS component values.

This module covers just enough of CSS Syntax Level 3 to turn color values such
as ``#fc0``, ``rebeccapurple``, or ``oklch(70% 0.1 120deg / 50%)`` into
:mod:`csscolor.token` tokens. It does not handle strings, URLs, comments,
escapes, or blocks other than function arguments.
"""
import re

from .error import ColorSyntaxError
from .token import (
    COMMA,
    DelimToken,
    DimensionToken,
    FunctionToken,
    HashToken,
    IdentToken,
    NumberToken,
    PercentageToken,
    Token,
    WHITESPACE,
    WhitespaceToken,
)


_WHITESPACE = re.compile(r'\s+')
_NUMBER = re.compile(r'[+-]?(?:\d*\.\d+|\d+)(?:[eE][+-]?\d+)?')
_NAME = re.compile(r'-?-?[a-zA-Z_\u0080-\uffff][\w\u0080-\uffff-]*')
_HASH = re.compile(r'#([\w\u0080-\uffff-]+)')


class _Scanner:
    def __init__(self, text: str) -> None:
        self.text = text
        self.position = 0

    def error(self, deficiency: str) -> ColorSyntaxError:
        return ColorSyntaxError(self.text, deficiency)

    def at_end(self) -> bool:
        return self.position >= len(self.text)

    def match(self, pattern: re.Pattern[str]) -> None | re.Match[str]:
        m = pattern.match(self.text, self.position)
        if m is not None:
            self.position = m.end()
        return m

    def next_token(self) -> Token:
        """Consume the next token, including complete function calls."""
        if self.match(_WHITESPACE):
            return WHITESPACE

        char = self.text[self.position]
        if char == ',':
            self.position += 1
            return COMMA
        if char == '#' and (m := self.match(_HASH)):
            return HashToken(m.group(1))

        if m := self.match(_NUMBER):
            number = float(m.group())
            if self.text.startswith('%', self.position):
                self.position += 1
                return PercentageToken(number)
            if unit := self.match(_NAME):
                return DimensionToken(number, unit.group())
            return NumberToken(number)

        if m := self.match(_NAME):
            if self.text.startswith('(', self.position):
                self.position += 1
                return self.function(m.group().lower())
            return IdentToken(m.group())

        if char in '()':
            raise self.error(f'has unbalanced "{char}"')

        self.position += 1
        return DelimToken(char)

    def function(self, name: str) -> FunctionToken:
        values: list[Token] = []
        while not self.at_end():
            if self.text[self.position] == ')':
                self.position += 1
                return FunctionToken(name, tuple(values))
            values.append(self.next_token())
        raise self.error(f'has unterminated function "{name}("')


def tokenize(text: str) -> list[Token]:
    """Tokenize the text into a list of top-level tokens."""
    scanner = _Scanner(text)
    tokens: list[Token] = []
    while not scanner.at_end():
        tokens.append(scanner.next_token())
    return tokens


def parse_component_value(text: str) -> Token:
    """
    Parse the text as exactly one component value, ignoring surrounding
    whitespace.

    Raises:
        ColorSyntaxError: if the text is empty, contains more than one
            component value, or cannot be tokenized
    """
    tokens = [t for t in tokenize(text) if not isinstance(t, WhitespaceToken)]
    if not tokens:
        raise ColorSyntaxError(text, 'is empty')
    if len(tokens) > 1:
        raise ColorSyntaxError(text, 'has more than one component value')
    return tokens[0]
