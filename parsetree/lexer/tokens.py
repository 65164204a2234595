"""
Token definitions consumed by the parse tree utilities.

The tokenizer that produces these tokens lives outside this package; what is
defined here is the read-only payload that parse nodes carry:
- Token types
- Operator and keyword enumerations
- String literal flags (raw, unicode, bytes, format, triple-quoted, quote style)
- Immutable token records

Author: xwest
"""

from enum import Enum, Flag, auto
from dataclasses import dataclass
from typing import Union


class TokenType(Enum):
    """Enumeration of the token types that can appear in a parse tree."""

    STRING = auto()
    NUMBER = auto()
    IDENTIFIER = auto()
    KEYWORD = auto()


class OperatorType(Enum):
    """
    Enumeration of all operators.

    Organized by category; every member must have a symbol in the
    expression printer's operator table.
    """

    # ========================================================================
    # Arithmetic
    # ========================================================================
    ADD = auto()                        # +
    SUBTRACT = auto()                   # -
    MULTIPLY = auto()                   # *
    DIVIDE = auto()                     # /
    FLOOR_DIVIDE = auto()               # //
    MOD = auto()                        # %
    POWER = auto()                      # **
    MATRIX_MULTIPLY = auto()            # @

    # ========================================================================
    # Bitwise
    # ========================================================================
    BITWISE_AND = auto()                # &
    BITWISE_OR = auto()                 # |
    BITWISE_XOR = auto()                # ^
    BITWISE_INVERT = auto()             # ~
    LEFT_SHIFT = auto()                 # <<
    RIGHT_SHIFT = auto()                # >>

    # ========================================================================
    # Comparison
    # ========================================================================
    EQUALS = auto()                     # ==
    NOT_EQUALS = auto()                 # !=
    LESS_THAN = auto()                  # <
    LESS_THAN_OR_EQUAL = auto()         # <=
    GREATER_THAN = auto()               # >
    GREATER_THAN_OR_EQUAL = auto()      # >=

    # ========================================================================
    # Assignment
    # ========================================================================
    ASSIGN = auto()                     # =
    ADD_EQUAL = auto()                  # +=
    SUBTRACT_EQUAL = auto()             # -=
    MULTIPLY_EQUAL = auto()             # *=
    DIVIDE_EQUAL = auto()               # /=
    FLOOR_DIVIDE_EQUAL = auto()         # //=
    MOD_EQUAL = auto()                  # %=
    POWER_EQUAL = auto()                # **=
    MATRIX_MULTIPLY_EQUAL = auto()      # @=
    BITWISE_AND_EQUAL = auto()          # &=
    BITWISE_OR_EQUAL = auto()           # |=
    BITWISE_XOR_EQUAL = auto()          # ^=
    LEFT_SHIFT_EQUAL = auto()           # <<=
    RIGHT_SHIFT_EQUAL = auto()          # >>=

    # ========================================================================
    # Keyword operators
    # ========================================================================
    AND = auto()                        # and
    OR = auto()                         # or
    NOT = auto()                        # not
    IS = auto()                         # is
    IS_NOT = auto()                     # is not
    IN = auto()                         # in
    NOT_IN = auto()                     # not in


class KeywordType(Enum):
    """Enumeration of the language keywords."""

    AND = auto()
    AS = auto()
    ASSERT = auto()
    ASYNC = auto()
    AWAIT = auto()
    BREAK = auto()
    CLASS = auto()
    CONTINUE = auto()
    DEBUG = auto()                      # __debug__
    DEF = auto()
    DEL = auto()
    ELIF = auto()
    ELSE = auto()
    EXCEPT = auto()
    FALSE = auto()
    FINALLY = auto()
    FOR = auto()
    FROM = auto()
    GLOBAL = auto()
    IF = auto()
    IMPORT = auto()
    IN = auto()
    IS = auto()
    LAMBDA = auto()
    NONE = auto()
    NONLOCAL = auto()
    NOT = auto()
    OR = auto()
    PASS = auto()
    RAISE = auto()
    RETURN = auto()
    TRUE = auto()
    TRY = auto()
    WHILE = auto()
    WITH = auto()
    YIELD = auto()


class StringTokenFlags(Flag):
    """Prefix and quoting options recorded by the tokenizer for a string literal."""

    NONE = 0

    # Quote style
    SINGLE_QUOTE = auto()               # 'x' rather than "x"
    TRIPLICATE = auto()                 # '''x''' or """x"""

    # Prefixes
    RAW = auto()                        # r
    UNICODE = auto()                    # u
    BYTES = auto()                      # b
    FORMAT = auto()                     # f


@dataclass(frozen=True)
class Token:
    """
    Base token record.

    Tokens are read-only views into tokenizer output: a token type plus the
    span of source text it was produced from.
    """
    type: TokenType
    start: int = 0
    length: int = 0

    @property
    def end(self) -> int:
        return self.start + self.length

    def __str__(self) -> str:
        return f"{self.type.name}@{self.start}"


@dataclass(frozen=True)
class NameToken(Token):
    """Identifier token."""
    value: str = ""

    def __str__(self) -> str:
        return f"{self.type.name}({self.value!r})"


@dataclass(frozen=True)
class NumberToken(Token):
    """Numeric literal token."""
    value: Union[int, float, complex] = 0
    is_integer: bool = True
    is_imaginary: bool = False

    def __str__(self) -> str:
        return f"{self.type.name}({self.value!r})"


@dataclass(frozen=True)
class StringToken(Token):
    """String literal token with its flags and the escaped text between the quotes."""
    flags: StringTokenFlags = StringTokenFlags.NONE
    escaped_value: str = ""

    def __str__(self) -> str:
        return f"{self.type.name}({self.escaped_value!r}, {self.flags})"


@dataclass(frozen=True)
class KeywordToken(Token):
    """Keyword token."""
    keyword_type: KeywordType = KeywordType.NONE

    def __str__(self) -> str:
        return f"{self.type.name}({self.keyword_type.name})"


def create_name_token(value: str, start: int = 0) -> NameToken:
    """Create an identifier token spanning ``value``."""
    return NameToken(TokenType.IDENTIFIER, start, len(value), value)


def create_number_token(value: Union[int, float, complex], start: int = 0,
                        length: int = 0) -> NumberToken:
    """Create a numeric token; the length defaults to the width of ``str(value)``."""
    return NumberToken(
        TokenType.NUMBER, start, length or len(str(value)), value,
        is_integer=isinstance(value, int),
        is_imaginary=isinstance(value, complex),
    )


def create_string_token(escaped_value: str,
                        flags: StringTokenFlags = StringTokenFlags.NONE,
                        start: int = 0, length: int = 0) -> StringToken:
    """Create a string token; the length defaults to the escaped value plus its quotes."""
    if not length:
        quote_length = 3 if flags & StringTokenFlags.TRIPLICATE else 1
        prefix_length = sum(
            1 for prefix in (StringTokenFlags.RAW, StringTokenFlags.UNICODE,
                             StringTokenFlags.BYTES, StringTokenFlags.FORMAT)
            if flags & prefix
        )
        length = prefix_length + 2 * quote_length + len(escaped_value)
    return StringToken(TokenType.STRING, start, length, flags, escaped_value)


def create_keyword_token(keyword_type: KeywordType, start: int = 0) -> KeywordToken:
    """Create a keyword token."""
    return KeywordToken(TokenType.KEYWORD, start, len(KEYWORD_TEXT[keyword_type]), keyword_type)


# Keyword lookup table used by tokenizers to classify identifiers
KEYWORDS = {
    "and": KeywordType.AND,
    "as": KeywordType.AS,
    "assert": KeywordType.ASSERT,
    "async": KeywordType.ASYNC,
    "await": KeywordType.AWAIT,
    "break": KeywordType.BREAK,
    "class": KeywordType.CLASS,
    "continue": KeywordType.CONTINUE,
    "__debug__": KeywordType.DEBUG,
    "def": KeywordType.DEF,
    "del": KeywordType.DEL,
    "elif": KeywordType.ELIF,
    "else": KeywordType.ELSE,
    "except": KeywordType.EXCEPT,
    "False": KeywordType.FALSE,
    "finally": KeywordType.FINALLY,
    "for": KeywordType.FOR,
    "from": KeywordType.FROM,
    "global": KeywordType.GLOBAL,
    "if": KeywordType.IF,
    "import": KeywordType.IMPORT,
    "in": KeywordType.IN,
    "is": KeywordType.IS,
    "lambda": KeywordType.LAMBDA,
    "None": KeywordType.NONE,
    "nonlocal": KeywordType.NONLOCAL,
    "not": KeywordType.NOT,
    "or": KeywordType.OR,
    "pass": KeywordType.PASS,
    "raise": KeywordType.RAISE,
    "return": KeywordType.RETURN,
    "True": KeywordType.TRUE,
    "try": KeywordType.TRY,
    "while": KeywordType.WHILE,
    "with": KeywordType.WITH,
    "yield": KeywordType.YIELD,
}

KEYWORD_TEXT = {keyword_type: text for text, keyword_type in KEYWORDS.items()}
