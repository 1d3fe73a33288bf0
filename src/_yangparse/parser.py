"""
A parser consumes an iterator of tokens (see _yangparse.scanner) and builds
the syntax tree of the document (see _yangparse.nodes).

Each level of nesting is parsed by its own small state machine,
StatementLevel, which is either clean (between statements), has seen a
keyword, or has seen a keyword and a value. An opening brace pushes a new
level and the matching closing brace pops it, turning it into a BlockNode
of the level below. Levels are kept on an explicit stack rather than the
call stack, so the nesting depth of a document is not limited by the
recursion limit.

The parser does not enforce the yang grammar, eg. a document with several
modules, or no module at all, is parsed just fine.
"""

import logging
from enum import Enum, auto, unique

from _yangparse.nodes import BlockNode, CommentNode, LeafNode, NodeValue, RootNode
from _yangparse.scanner import TokenKind, YangParseError, scan
from _yangparse.statement_keyword import STATEMENT_KEYWORDS, classify

logger = logging.getLogger(__name__)


class ParseError(YangParseError):
    """
    Raised by the parser if the tokens do not form a sequence of
    statements.
    """

    def __init__(self, message, token=None):
        """
        :param message: Description of the error.
        :param token: The offending token, if any.
        """
        super().__init__(message)
        self.token = token

    @property
    def offset(self):
        if self.token is None:
            return None
        return self.token.start


class UnexpectedTokenError(ParseError):
    pass


class MissingValueError(ParseError):
    """
    Raised when a keyword is directly followed by a semicolon.
    """

    pass


class UnexpectedEndOfInputError(ParseError):
    """
    Raised when the tokens run out in the middle of a statement or inside
    a block that was never closed. The token is the one that started the
    incomplete statement or opened the block.
    """

    pass


def describe(token):
    return f"{token.kind.value} {token.text!r} at offset {token.start}"


@unique
class ParseState(Enum):
    CLEAN = auto()
    GOT_KEYWORD = auto()
    GOT_VALUE = auto()


class StatementLevel:
    """
    The statements of one block (or the root of the document) together
    with the state of the statement currently being read.
    """

    def __init__(self, keyword=None, value=None, opened_by=None):
        """
        :param keyword: keyword of the block statement this level is the
            body of, None for the root level.
        :param value: value of that block statement.
        :param opened_by: The open brace token of the block.
        """
        self.keyword = keyword
        self.value = value
        self.opened_by = opened_by
        self.children = []
        self.reset()

    def reset(self):
        self.state = ParseState.CLEAN
        self.keyword_token = None
        self.pending_keyword = None
        self.pending_value = None

    def as_block(self):
        return BlockNode(self.keyword, self.value, tuple(self.children))


class YangParser:
    """
    Parser of a yang document, ie. consumes the output of
    _yangparse.scanner.scan and returns the RootNode of the document.

    >>> parser = YangParser(scan(b"leaf foo { type string; }"))
    >>> root = parser.parse()
    >>> root.children[0].keyword
    Keyword(name='leaf')

    """

    def __init__(self, tokens, keywords=STATEMENT_KEYWORDS):
        """
        :param tokens: iterator of tokens, ie. YangScanner.
        :param keywords: Collection of statement keywords recognized as
            Keyword, see _yangparse.statement_keyword.classify.
        """
        self.tokens = tokens
        self.keywords = keywords
        self.levels = []

    def parse(self):
        self.levels = [StatementLevel()]
        for token in self.tokens:
            level = self.levels[-1]
            if level.state == ParseState.CLEAN:
                self.parse_statement_start(level, token)
            elif level.state == ParseState.GOT_KEYWORD:
                self.parse_after_keyword(level, token)
            else:
                self.parse_after_value(level, token)
        return self.parse_end_of_input()

    def parse_statement_start(self, level, token):
        if token.kind == TokenKind.COMMENT:
            level.children.append(CommentNode(token.text))
        elif token.kind == TokenKind.CLOSE_BRACE:
            self.close_block(token)
        elif token.kind in TokenKind.value_kinds():
            level.state = ParseState.GOT_KEYWORD
            level.keyword_token = token
            level.pending_keyword = classify(token.text, self.keywords)
        else:
            raise UnexpectedTokenError(
                f"Unexpected token {describe(token)}, "
                "expected a statement keyword, a comment or '}'",
                token,
            )

    def parse_after_keyword(self, level, token):
        if token.kind == TokenKind.OPEN_BRACE:
            self.open_block(level, None, token)
        elif token.kind == TokenKind.SEMICOLON:
            raise MissingValueError(
                f"Expected to find a value for {describe(level.keyword_token)}, "
                f'not ";" at offset {token.start}',
                token,
            )
        elif token.kind in TokenKind.value_kinds():
            level.state = ParseState.GOT_VALUE
            level.pending_value = NodeValue.from_token(token)
        else:
            raise UnexpectedTokenError(
                f"Unexpected token {describe(token)}, expected a value or '{{' "
                f"after {describe(level.keyword_token)}",
                token,
            )

    def parse_after_value(self, level, token):
        if token.kind == TokenKind.OPEN_BRACE:
            self.open_block(level, level.pending_value, token)
        elif token.kind == TokenKind.SEMICOLON:
            level.children.append(LeafNode(level.pending_keyword, level.pending_value))
            level.reset()
        else:
            raise UnexpectedTokenError(
                f"Expected semicolon or block after {describe(level.keyword_token)}, "
                f"got {describe(token)}",
                token,
            )

    def open_block(self, level, value, token):
        self.levels.append(StatementLevel(level.pending_keyword, value, token))
        level.reset()

    def close_block(self, token):
        if len(self.levels) == 1:
            raise UnexpectedTokenError(
                f"Unexpected token {describe(token)}, no block to close", token
            )
        block = self.levels.pop()
        self.levels[-1].children.append(block.as_block())

    def parse_end_of_input(self):
        level = self.levels[-1]
        if level.state != ParseState.CLEAN:
            raise UnexpectedEndOfInputError(
                "Unexpected end of input, statement starting with "
                f"{describe(level.keyword_token)} is incomplete",
                level.keyword_token,
            )
        if len(self.levels) > 1:
            raise UnexpectedEndOfInputError(
                f"Unexpected end of input, block of {level.keyword.text!r} "
                f"opened by {describe(level.opened_by)} was never closed",
                level.opened_by,
            )
        return RootNode(tuple(level.children))


def parse(buffer, keywords=STATEMENT_KEYWORDS):
    """
    Parses the buffer as a yang document and returns its syntax tree.

    :param buffer: bytes (or a string) of yang source.
    :param keywords: Collection of recognized statement keywords.
    :returns: The RootNode of the document.
    """
    root = YangParser(scan(buffer), keywords).parse()
    logger.debug("Parsed document with %d top level nodes", len(root.children))
    return root
