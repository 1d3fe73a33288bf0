from dataclasses import dataclass

from _yangparse.scanner.token_kind import TokenKind


@dataclass(frozen=True)
class Token:
    """
    A token in a yang document.

    start and end are inclusive byte offsets into the scanned buffer, and
    text is the exact source slice for that range, quotes and comment
    delimiters included.
    """

    kind: TokenKind
    start: int
    end: int
    text: str

    @property
    def span(self):
        return (self.start, self.end)
