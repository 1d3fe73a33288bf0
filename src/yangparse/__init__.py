import yangparse.version
from _yangparse.formatting import format_tokens, format_tree
from _yangparse.nodes import (
    BlockNode,
    CommentNode,
    DateValue,
    LeafNode,
    NodeValue,
    NumberValue,
    OtherValue,
    RootNode,
    StringValue,
)
from _yangparse.parser import (
    MissingValueError,
    ParseError,
    UnexpectedEndOfInputError,
    UnexpectedTokenError,
    YangParser,
    parse,
)
from _yangparse.reading import read, read_tokens
from _yangparse.scanner import (
    DecodeError,
    ScanError,
    TextPosition,
    Token,
    TokenKind,
    UnexpectedCharacterError,
    UnterminatedCommentError,
    UnterminatedStringError,
    YangParseError,
    YangScanner,
    scan,
)
from _yangparse.statement_keyword import (
    STATEMENT_KEYWORDS,
    ExtensionKeyword,
    Invalid,
    Keyword,
    classify,
)

__version__ = yangparse.version.version

__all__ = [
    "BlockNode",
    "CommentNode",
    "DateValue",
    "DecodeError",
    "ExtensionKeyword",
    "Invalid",
    "Keyword",
    "LeafNode",
    "MissingValueError",
    "NodeValue",
    "NumberValue",
    "OtherValue",
    "ParseError",
    "RootNode",
    "STATEMENT_KEYWORDS",
    "ScanError",
    "StringValue",
    "TextPosition",
    "Token",
    "TokenKind",
    "UnexpectedCharacterError",
    "UnexpectedEndOfInputError",
    "UnexpectedTokenError",
    "UnterminatedCommentError",
    "UnterminatedStringError",
    "YangParseError",
    "YangParser",
    "YangScanner",
    "classify",
    "format_tokens",
    "format_tree",
    "parse",
    "read",
    "read_tokens",
    "scan",
]
