class YangParseError(Exception):
    """
    Base class for all errors raised while scanning or parsing a yang
    document.
    """

    pass


class ScanError(YangParseError):
    """
    The scanner will throw a ScanError when the buffer cannot be broken
    up into tokens at the given offset.
    """

    def __init__(self, message, offset, position):
        """
        :param message: Description of the error.
        :param offset: Byte offset in the buffer where the offending
            construct starts.
        :param position: TextPosition of that offset.
        """
        super().__init__(message)
        self.offset = offset
        self.position = position


class UnterminatedStringError(ScanError):
    pass


class UnterminatedCommentError(ScanError):
    pass


class UnexpectedCharacterError(ScanError):
    pass


class DecodeError(ScanError):
    """
    Raised when the text of a token is not valid utf-8.
    """

    pass
