"""
Classification of the token in keyword position of a statement. Keywords
are never rejected: anything that is neither a yang statement keyword nor
an extension keyword becomes an Invalid keyword, which is kept in the tree
so that linters can report it.
"""

import re
from dataclasses import dataclass

# Statement keywords of yang 1.1, see RFC 7950 section 14.
STATEMENT_KEYWORDS = frozenset(
    [
        "action",
        "anydata",
        "anyxml",
        "argument",
        "augment",
        "base",
        "belongs-to",
        "bit",
        "case",
        "choice",
        "config",
        "contact",
        "container",
        "default",
        "description",
        "deviate",
        "deviation",
        "enum",
        "error-app-tag",
        "error-message",
        "extension",
        "feature",
        "fraction-digits",
        "grouping",
        "identity",
        "if-feature",
        "import",
        "include",
        "input",
        "key",
        "leaf",
        "leaf-list",
        "length",
        "list",
        "mandatory",
        "max-elements",
        "min-elements",
        "modifier",
        "module",
        "must",
        "namespace",
        "notification",
        "ordered-by",
        "organization",
        "output",
        "path",
        "pattern",
        "position",
        "prefix",
        "presence",
        "range",
        "reference",
        "refine",
        "require-instance",
        "revision",
        "revision-date",
        "rpc",
        "status",
        "submodule",
        "type",
        "typedef",
        "unique",
        "units",
        "uses",
        "value",
        "when",
        "yang-version",
        "yin-element",
    ]
)

# identifier ":" identifier, see "unknown-statement" in the ABNF grammar
EXTENSION_KEYWORD = re.compile(
    r"([a-zA-Z_][a-zA-Z0-9\-_.]*):([a-zA-Z_][a-zA-Z0-9\-_.]*)"
)


@dataclass(frozen=True)
class Keyword:
    name: str

    @property
    def text(self):
        return self.name


@dataclass(frozen=True)
class ExtensionKeyword:
    prefix: str
    name: str

    @property
    def text(self):
        return f"{self.prefix}:{self.name}"


@dataclass(frozen=True)
class Invalid:
    raw_text: str

    @property
    def text(self):
        return self.raw_text


def classify(text, keywords=STATEMENT_KEYWORDS):
    """
    :param text: The raw text of a token in keyword position.
    :param keywords: Collection of recognized statement keywords.
    :returns: Keyword if text is one of keywords, ExtensionKeyword if it
        is of the form prefix:name and Invalid otherwise.
    """
    if text in keywords:
        return Keyword(text)
    match = EXTENSION_KEYWORD.fullmatch(text)
    if match:
        return ExtensionKeyword(match.group(1), match.group(2))
    return Invalid(text)
