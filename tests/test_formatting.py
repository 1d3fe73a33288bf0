import textwrap

from _yangparse.formatting import format_tokens, format_tree
from _yangparse.nodes import (
    BlockNode,
    CommentNode,
    DateValue,
    LeafNode,
    RootNode,
    StringValue,
)
from _yangparse.parser import parse
from _yangparse.scanner import Token, TokenKind
from _yangparse.statement_keyword import ExtensionKeyword, Invalid, Keyword


def test_format_tree():
    root = parse(b"module test { yang-version 1.1; }")
    assert format_tree(root) == textwrap.dedent(
        """\
        (root
          (Keyword "module" Other
            (Keyword "yang-version" Number)))"""
    )


def test_str_of_root_is_tree():
    root = parse(b"module test { yang-version 1.1; }")
    assert str(root) == format_tree(root)


def test_format_empty_tree():
    assert format_tree(RootNode(())) == "(root)"


def test_format_all_node_kinds():
    root = RootNode(
        (
            CommentNode("// a comment"),
            BlockNode(
                Invalid("foo"),
                None,
                (
                    LeafNode(ExtensionKeyword("ex", "tag"), StringValue('"x"')),
                    BlockNode(Keyword("input"), None, ()),
                ),
            ),
            LeafNode(Keyword("revision"), DateValue("2018-12-03")),
        )
    )
    assert format_tree(root) == textwrap.dedent(
        """\
        (root
          (comment)
          (INVALID "foo"
            (ExtensionKeyword "ex:tag" String)
            (Keyword "input"))
          (Keyword "revision" Date))"""
    )


def test_format_deep_tree():
    depth = 3000
    root = parse(b"c x {" * depth + b"}" * depth)
    lines = format_tree(root).splitlines()
    assert len(lines) == depth + 1
    assert lines[-1] == "  " * depth + '(INVALID "c" Other' + ")" * (depth + 1)


def test_format_tokens():
    tokens = [
        Token(TokenKind.OTHER, 0, 5, "module"),
        Token(TokenKind.COMMENT, 7, 11, "//\t\"a\""),
    ]
    assert format_tokens(tokens) == (
        'Other                0 -> 5          "module"\n'
        'Comment              7 -> 11         "//\\t\\"a\\""\n'
    )


def test_format_tokens_keeps_non_ascii():
    (line,) = format_tokens([Token(TokenKind.STRING, 0, 3, '"ø"')]).splitlines()
    assert line.endswith('"\\"ø\\""')
