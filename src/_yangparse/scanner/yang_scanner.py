import re

from _yangparse.scanner.errors import (
    DecodeError,
    UnexpectedCharacterError,
    UnterminatedCommentError,
    UnterminatedStringError,
)
from _yangparse.scanner.text_position import TextPosition
from _yangparse.scanner.token import Token
from _yangparse.scanner.token_kind import TokenKind

BACKSLASH = ord("\\")
CARRIAGE_RETURN = ord("\r")
QUOTES = (b'"', b"'")

WHITESPACE = re.compile(rb"[ \t\r\n]+")

# Any run of bytes up to the next delimiter, ie. whitespace, ";", "{" or "}"
RAW_RUN = re.compile(rb"[^ \t\r\n;{}]+")

# "integer-value" and "decimal-value" from the yang ABNF grammar
NUMBER = re.compile(rb"-?(0|[1-9][0-9]*(\.[0-9]+)?)")
DATE = re.compile(rb"[0-9]{4}-[0-9]{2}-[0-9]{2}")


def as_bytes(buffer):
    """
    Strings are scanned as their utf-8 encoding, other buffers are
    copied into an immutable bytes object.
    """
    if isinstance(buffer, str):
        return buffer.encode("utf-8")
    return bytes(buffer)


def classify_raw_run(raw_run):
    """
    :param raw_run: bytes of a run of non-delimiter characters.
    :returns: TokenKind.NUMBER, TokenKind.DATE or TokenKind.OTHER.
    """
    if NUMBER.fullmatch(raw_run):
        return TokenKind.NUMBER
    if DATE.fullmatch(raw_run):
        return TokenKind.DATE
    return TokenKind.OTHER


class YangScanner:
    """
    An iterable of the tokens in a buffer of yang source. Tokens are
    generated lazily, and each new iteration starts over from the
    beginning of the buffer.

    >>> [t.text for t in YangScanner(b'leaf "a b";')]
    ['leaf', '"a b"', ';']

    """

    def __init__(self, buffer):
        """
        :param buffer: bytes containing utf-8 encoded yang source, or a
            string which is scanned as its utf-8 encoding.
        """
        self.buffer = as_bytes(buffer)

    def __iter__(self):
        return self.tokenize()

    def tokenize(self):
        cursor = 0
        size = len(self.buffer)
        while cursor < size:
            space = WHITESPACE.match(self.buffer, cursor)
            if space:
                cursor = space.end()
                continue
            token = self.tokenize_at(cursor)
            yield token
            cursor = token.end + 1

    def tokenize_at(self, start):
        """
        Tokenize the token starting at the given offset, which must not be
        whitespace.
        """
        char = self.buffer[start : start + 1]
        for kind, delimiter in TokenKind.delimiters().items():
            if char == delimiter:
                return self.make_token(kind, start, start)
        if char in QUOTES:
            return self.make_token(TokenKind.STRING, start, self.scan_string(start))
        if self.buffer.startswith(b"//", start):
            return self.make_token(
                TokenKind.COMMENT, start, self.scan_line_comment(start)
            )
        if self.buffer.startswith(b"/*", start):
            return self.make_token(
                TokenKind.COMMENT, start, self.scan_block_comment(start)
            )
        end = self.scan_raw_run(start)
        kind = classify_raw_run(self.buffer[start : end + 1])
        return self.make_token(kind, start, end)

    def scan_string(self, start):
        """
        Find the end of a quoted string opened at start. The string is
        closed by the first matching quote not directly preceded by a
        backslash.

        :returns: offset of the closing quote.
        """
        quote = self.buffer[start : start + 1]
        end = self.buffer.find(quote, start + 1)
        while end != -1 and self.buffer[end - 1] == BACKSLASH:
            end = self.buffer.find(quote, end + 1)
        if end == -1:
            raise UnterminatedStringError(
                "Unexpected end of input, string started at "
                f"{self.position(start)} was never terminated",
                start,
                self.position(start),
            )
        return end

    def scan_line_comment(self, start):
        """
        A single line comment lasts until the next line break ("\\n" or
        "\\r\\n") or the end of the buffer. The line break is not part of
        the comment.

        :returns: offset of the last character in the comment.
        """
        newline = self.buffer.find(b"\n", start)
        if newline == -1:
            return len(self.buffer) - 1
        end = newline - 1
        if self.buffer[end] == CARRIAGE_RETURN:
            end -= 1
        return end

    def scan_block_comment(self, start):
        """
        :returns: offset of the "/" in the closing "*/".
        """
        close = self.buffer.find(b"*/", start + 2)
        if close == -1:
            raise UnterminatedCommentError(
                "Unexpected end of input, block comment started at "
                f"{self.position(start)} was never terminated",
                start,
                self.position(start),
            )
        return close + 1

    def scan_raw_run(self, start):
        match = RAW_RUN.match(self.buffer, start)
        if not match:
            raise UnexpectedCharacterError(
                f"Failed to scan input at {self.position(start)}: "
                f"{self.buffer[start : start + 1]!r}",
                start,
                self.position(start),
            )
        return match.end() - 1

    def make_token(self, kind, start, end):
        try:
            text = self.buffer[start : end + 1].decode("utf-8")
        except UnicodeDecodeError as err:
            raise DecodeError(
                f"Invalid utf-8 in {kind.value} token at {self.position(start)}: {err}",
                start,
                self.position(start),
            ) from err
        return Token(kind, start, end, text)

    def position(self, offset):
        return TextPosition.from_offset(self.buffer, offset)


def scan(buffer):
    """
    :param buffer: bytes or string of yang source.
    :returns: Iterator of the tokens in buffer.
    """
    return iter(YangScanner(buffer))
