"""
The CSS tokens consumed by color parsing.

Each token kind is a frozen dataclass tagged with its :class:`TokenType`. The
:data:`Token` alias is the union of all kinds. Tokens are produced by a
tokenizer, e.g., :mod:`csscolor.syntax`, and never modified afterwards.
"""
from collections.abc import Iterable
import dataclasses
import enum
from typing import ClassVar, TypeAlias, TypeGuard


class TokenType(enum.Enum):
    FUNCTION = 'function'
    HASH_TOKEN = 'hash'
    IDENT_TOKEN = 'ident'
    NUMBER_TOKEN = 'number'
    PERCENTAGE_TOKEN = 'percentage'
    DIMENSION_TOKEN = 'dimension'
    DELIM_TOKEN = 'delim'
    COMMA_TOKEN = 'comma'
    WHITESPACE_TOKEN = 'whitespace'


@dataclasses.dataclass(frozen=True, slots=True)
class FunctionToken:
    """
    A function call.

    Attributes:
        name: is the lower-case function name
        values: are the argument tokens, including separators
    """
    type: ClassVar[TokenType] = TokenType.FUNCTION
    name: str
    values: tuple['Token', ...] = ()


@dataclasses.dataclass(frozen=True, slots=True)
class HashToken:
    """A hash literal; ``value`` holds the characters after the ``#``."""
    type: ClassVar[TokenType] = TokenType.HASH_TOKEN
    value: str


@dataclasses.dataclass(frozen=True, slots=True)
class IdentToken:
    type: ClassVar[TokenType] = TokenType.IDENT_TOKEN
    value: str


@dataclasses.dataclass(frozen=True, slots=True)
class NumberToken:
    type: ClassVar[TokenType] = TokenType.NUMBER_TOKEN
    number: float


@dataclasses.dataclass(frozen=True, slots=True)
class PercentageToken:
    """A percentage; ``number`` is on the 0–100 scale."""
    type: ClassVar[TokenType] = TokenType.PERCENTAGE_TOKEN
    number: float


@dataclasses.dataclass(frozen=True, slots=True)
class DimensionToken:
    type: ClassVar[TokenType] = TokenType.DIMENSION_TOKEN
    number: float
    unit: str


@dataclasses.dataclass(frozen=True, slots=True)
class DelimToken:
    type: ClassVar[TokenType] = TokenType.DELIM_TOKEN
    value: str


@dataclasses.dataclass(frozen=True, slots=True)
class CommaToken:
    type: ClassVar[TokenType] = TokenType.COMMA_TOKEN


@dataclasses.dataclass(frozen=True, slots=True)
class WhitespaceToken:
    type: ClassVar[TokenType] = TokenType.WHITESPACE_TOKEN


Token: TypeAlias = (
    FunctionToken
    | HashToken
    | IdentToken
    | NumberToken
    | PercentageToken
    | DimensionToken
    | DelimToken
    | CommaToken
    | WhitespaceToken
)

COMMA = CommaToken()
WHITESPACE = WhitespaceToken()
SLASH = DelimToken('/')


# --------------------------------------------------------------------------------------


def is_number(token: None | Token) -> TypeGuard[NumberToken]:
    return isinstance(token, NumberToken)


def is_percentage(token: None | Token) -> TypeGuard[PercentageToken]:
    return isinstance(token, PercentageToken)


def is_dimension(token: None | Token) -> TypeGuard[DimensionToken]:
    return isinstance(token, DimensionToken)


def is_slash(token: None | Token) -> TypeGuard[DelimToken]:
    return isinstance(token, DelimToken) and token.value == '/'


def is_argument_separator(token: Token) -> bool:
    """Determine whether the token separates function arguments."""
    return isinstance(token, (CommaToken, WhitespaceToken))


def arguments(tokens: Iterable[Token]) -> list[Token]:
    """Drop commas and whitespace from the function arguments."""
    return [t for t in tokens if not is_argument_separator(t)]


def nonseparators(tokens: Iterable[Token]) -> list[Token]:
    """
    Drop commas, whitespace, and the slash before alpha from the function
    arguments.
    """
    return [t for t in tokens if not (is_argument_separator(t) or is_slash(t))]


def absolute_value(token: Token, parent: float) -> float:
    """
    Resolve a percentage relative to the parent value. Numbers and dimensions
    resolve to their value; everything else resolves to 0.
    """
    if isinstance(token, PercentageToken):
        return token.number / 100 * parent
    if isinstance(token, (NumberToken, DimensionToken)):
        return token.number
    return 0
