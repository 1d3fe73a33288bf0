"""
The scanner breaks up a buffer of yang source into a lazy sequence of
tokens: quoted strings, dates, numbers, comments, curly braces, semicolons
and "other", which covers keywords, identifiers and unquoted strings.

Scanning works on the utf-8 encoded bytes of the document, so spans are
byte offsets. Whitespace is skipped and never emitted. The scanner has no
knowledge of nesting, that is left to the parser (see _yangparse.parser).
"""

from .errors import (
    DecodeError,
    ScanError,
    UnexpectedCharacterError,
    UnterminatedCommentError,
    UnterminatedStringError,
    YangParseError,
)
from .text_position import TextPosition
from .token import Token
from .token_kind import TokenKind
from .yang_scanner import YangScanner, scan

__all__ = [
    "DecodeError",
    "ScanError",
    "TextPosition",
    "Token",
    "TokenKind",
    "UnexpectedCharacterError",
    "UnterminatedCommentError",
    "UnterminatedStringError",
    "YangParseError",
    "YangScanner",
    "scan",
]
