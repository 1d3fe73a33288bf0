import string

import hypothesis.strategies as st

from _yangparse.nodes import (
    BlockNode,
    CommentNode,
    DateValue,
    LeafNode,
    NumberValue,
    OtherValue,
    StringValue,
)
from _yangparse.scanner import TokenKind
from _yangparse.statement_keyword import STATEMENT_KEYWORDS, classify

identifiers = st.builds(
    lambda head, tail: head + tail,
    st.sampled_from(string.ascii_lowercase + "_"),
    st.text(alphabet=string.ascii_lowercase + string.digits + "-_.", max_size=10),
)

extension_keywords = st.builds(lambda p, n: f"{p}:{n}", identifiers, identifiers)

statement_keywords = st.one_of(
    st.sampled_from(sorted(STATEMENT_KEYWORDS)), identifiers, extension_keywords
)


@st.composite
def numbers(draw):
    sign = draw(st.sampled_from(["", "-"]))
    integer = draw(st.integers(min_value=0, max_value=10**9))
    if integer == 0:
        return sign + "0"
    fraction = draw(st.one_of(st.none(), st.integers(min_value=0, max_value=99999)))
    if fraction is None:
        return f"{sign}{integer}"
    return f"{sign}{integer}.{fraction}"


dates = st.builds(
    lambda y, m, d: f"{y:04d}-{m:02d}-{d:02d}",
    st.integers(min_value=0, max_value=9999),
    st.integers(min_value=0, max_value=99),
    st.integers(min_value=0, max_value=99),
)


@st.composite
def quoted_strings(draw):
    quote = draw(st.sampled_from(['"', "'"]))
    body = draw(
        st.text(
            alphabet=st.characters(
                exclude_categories=("Cs",), exclude_characters=quote + "\\"
            ),
            max_size=20,
        )
    )
    return quote + body + quote


@st.composite
def line_comments(draw):
    body = draw(
        st.text(
            alphabet=st.characters(
                exclude_categories=("Cs",), exclude_characters="\r\n"
            ),
            max_size=20,
        )
    )
    return "//" + body


@st.composite
def block_comments(draw):
    body = draw(
        st.text(
            alphabet=st.characters(exclude_categories=("Cs",), exclude_characters="*"),
            max_size=20,
        )
    )
    return "/*" + body + "*/"


whitespace = st.text(alphabet=" \t\r\n", min_size=1, max_size=5)

tokens = st.one_of(
    identifiers.map(lambda t: (TokenKind.OTHER, t)),
    numbers().map(lambda t: (TokenKind.NUMBER, t)),
    dates.map(lambda t: (TokenKind.DATE, t)),
    quoted_strings().map(lambda t: (TokenKind.STRING, t)),
    line_comments().map(lambda t: (TokenKind.COMMENT, t)),
    block_comments().map(lambda t: (TokenKind.COMMENT, t)),
    st.sampled_from(
        [
            (TokenKind.SEMICOLON, ";"),
            (TokenKind.OPEN_BRACE, "{"),
            (TokenKind.CLOSE_BRACE, "}"),
        ]
    ),
)


@st.composite
def token_documents(draw):
    """
    A document of whitespace separated tokens, together with the list of
    (kind, text) of the tokens in it.
    """
    expected = draw(st.lists(tokens, max_size=20))
    document = draw(st.one_of(st.just(""), whitespace))
    for kind, text in expected:
        document += text
        if text.startswith("//"):
            document += "\n"
        document += draw(whitespace)
    return document, expected


values = st.one_of(
    identifiers.map(lambda t: (t, OtherValue(t))),
    numbers().map(lambda t: (t, NumberValue(t))),
    dates.map(lambda t: (t, DateValue(t))),
    quoted_strings().map(lambda t: (t, StringValue(t))),
)

comments = st.one_of(line_comments(), block_comments()).map(
    lambda t: (t, CommentNode(t))
)


@st.composite
def leaf_statements(draw):
    keyword = draw(statement_keywords)
    text, value = draw(values)
    return f"{keyword} {text};", LeafNode(classify(keyword), value)


def block_statements(children):
    @st.composite
    def block_statement(draw):
        keyword = draw(statement_keywords)
        value = draw(st.one_of(st.none(), values))
        body = draw(st.lists(children, max_size=3))
        head = keyword if value is None else f"{keyword} {value[0]}"
        text = head + " {\n" + "".join(t + "\n" for t, _ in body) + "}"
        node = BlockNode(
            classify(keyword),
            None if value is None else value[1],
            tuple(n for _, n in body),
        )
        return text, node

    return block_statement()


statements = st.recursive(
    st.one_of(leaf_statements(), comments), block_statements, max_leaves=8
)


@st.composite
def yang_documents(draw):
    """
    A well formed document, together with the top level nodes it should
    parse into.
    """
    body = draw(st.lists(statements, max_size=4))
    return "".join(t + "\n" for t, _ in body), tuple(n for _, n in body)
