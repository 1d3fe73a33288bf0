"""
The syntax tree returned by the parser. All nodes are immutable and
compare by value, so two parses of the same buffer give equal trees.
"""

from dataclasses import dataclass
from typing import Optional, Tuple, Union

from _yangparse.scanner import Token, TokenKind
from _yangparse.statement_keyword import ExtensionKeyword, Invalid, Keyword

StatementKeyword = Union[Keyword, ExtensionKeyword, Invalid]


@dataclass(frozen=True)
class NodeValue:
    """
    The value of a statement. Holds the raw text of the token it was
    created from, so string values keep their quotes.
    """

    text: str

    @staticmethod
    def from_token(token: Token) -> "NodeValue":
        return _value_types.get(token.kind, OtherValue)(token.text)


@dataclass(frozen=True)
class StringValue(NodeValue):
    pass


@dataclass(frozen=True)
class NumberValue(NodeValue):
    pass


@dataclass(frozen=True)
class DateValue(NodeValue):
    pass


@dataclass(frozen=True)
class OtherValue(NodeValue):
    """
    Any value not identifiable as a quoted string, number or date, eg.
    identifiers, booleans and unquoted strings.
    """

    pass


_value_types = {
    TokenKind.STRING: StringValue,
    TokenKind.NUMBER: NumberValue,
    TokenKind.DATE: DateValue,
}


@dataclass(frozen=True)
class CommentNode:
    text: str


@dataclass(frozen=True)
class LeafNode:
    """
    A statement terminated by a semicolon, eg. 'type string;'.
    """

    keyword: StatementKeyword
    value: NodeValue


@dataclass(frozen=True)
class BlockNode:
    """
    A statement with a block of child statements, eg. 'leaf foo { ... }'.
    The value is None for blocks such as 'input { ... }'.
    """

    keyword: StatementKeyword
    value: Optional[NodeValue]
    children: Tuple["Node", ...] = ()


Node = Union[BlockNode, LeafNode, CommentNode]


@dataclass(frozen=True)
class RootNode:
    """
    Virtual top level node of a document. Holds any number of statements
    and the comments around them, a document is not required to contain
    exactly one module.
    """

    children: Tuple[Node, ...] = ()

    def __str__(self):
        from _yangparse.formatting import format_tree

        return format_tree(self)
