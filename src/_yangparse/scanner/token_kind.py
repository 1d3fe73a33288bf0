from enum import Enum, unique


@unique
class TokenKind(Enum):
    """
    The kinds of tokens produced by the scanner. The value of each kind is
    the name used for it in token dumps.
    """

    STRING = "String"
    DATE = "Date"
    NUMBER = "Number"
    COMMENT = "Comment"
    OPEN_BRACE = "OpenBrace"
    CLOSE_BRACE = "CloseBrace"
    SEMICOLON = "Semicolon"
    OTHER = "Other"

    @classmethod
    def value_kinds(cls):
        """
        Kinds that may stand in keyword or value position of a statement.
        """
        return (
            cls.STRING,
            cls.DATE,
            cls.NUMBER,
            cls.OTHER,
        )

    @classmethod
    def delimiters(cls):
        return {
            cls.SEMICOLON: b";",
            cls.OPEN_BRACE: b"{",
            cls.CLOSE_BRACE: b"}",
        }
