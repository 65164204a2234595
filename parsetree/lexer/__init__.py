"""
Lexer-side data model for parse tree utilities.

Defines the token payload that parse nodes carry and the text range model
used to locate nodes in source text.

Key Features:
- Operator and keyword enumerations
- String literal flags (prefixes and quote style)
- Text ranges with inclusive containment tests
- Line index and position/offset conversion

Author: xwest
"""

from .tokens import (
    Token, TokenType, OperatorType, KeywordType, StringTokenFlags,
    NameToken, NumberToken, StringToken, KeywordToken,
    create_name_token, create_number_token, create_string_token,
    create_keyword_token, KEYWORDS, KEYWORD_TEXT,
)
from .text_range import (
    TextRange, Position, TextRangeCollection, build_line_ranges,
    convert_position_to_offset, convert_offset_to_position,
)
from .errors import Diagnostic, TextRangeError

__all__ = [
    # Tokens
    "Token", "TokenType", "OperatorType", "KeywordType", "StringTokenFlags",
    "NameToken", "NumberToken", "StringToken", "KeywordToken",
    "create_name_token", "create_number_token", "create_string_token",
    "create_keyword_token", "KEYWORDS", "KEYWORD_TEXT",

    # Text ranges
    "TextRange", "Position", "TextRangeCollection", "build_line_ranges",
    "convert_position_to_offset", "convert_offset_to_position",

    # Error handling
    "Diagnostic", "TextRangeError",
]
