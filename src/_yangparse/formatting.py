"""
Human readable renderings of tokens and syntax trees, for troubleshooting.
Neither format can be parsed back into a document.
"""

import json

from _yangparse.nodes import BlockNode, LeafNode
from _yangparse.statement_keyword import ExtensionKeyword, Keyword

INDENT = "  "


def quoted(text):
    return json.dumps(text, ensure_ascii=False)


def format_tokens(tokens):
    """
    One line per token with the kind, span and quoted text, eg.

    Other                0 -> 5          "module"

    """
    lines = []
    for token in tokens:
        span = f"{token.start} -> {token.end}"
        lines.append(f"{token.kind.value:<20} {span:<15} {quoted(token.text)}\n")
    return "".join(lines)


def format_keyword(keyword):
    if isinstance(keyword, Keyword):
        return f"Keyword {quoted(keyword.name)}"
    if isinstance(keyword, ExtensionKeyword):
        return f"ExtensionKeyword {quoted(keyword.text)}"
    return f"INVALID {quoted(keyword.text)}"


def format_value(value):
    return type(value).__name__[: -len("Value")]


def format_tree(root):
    """
    Render the tree as nested s-expressions, eg.

    (root
      (Keyword "module" Other
        (Keyword "yang-version" Number)))

    Comments are rendered as (comment) regardless of their text.
    """
    out = ["(root"]
    # Stack of iterators over the children of the blocks being rendered
    stack = [iter(root.children)]
    while stack:
        node = next(stack[-1], None)
        if node is None:
            stack.pop()
            out.append(")")
            continue
        out.append("\n" + INDENT * len(stack))
        if isinstance(node, BlockNode):
            out.append(f"({format_keyword(node.keyword)}")
            if node.value is not None:
                out.append(f" {format_value(node.value)}")
            stack.append(iter(node.children))
        elif isinstance(node, LeafNode):
            out.append(f"({format_keyword(node.keyword)} {format_value(node.value)})")
        else:
            out.append("(comment)")
    return "".join(out)
