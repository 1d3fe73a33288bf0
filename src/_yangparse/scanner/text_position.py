from dataclasses import dataclass


@dataclass(frozen=True)
class TextPosition:
    """
    1-based line and column of a location in a buffer. Columns count
    characters, not bytes.
    """

    line: int
    column: int

    @classmethod
    def from_offset(cls, buffer, offset):
        """
        :param buffer: The bytes (or string) the offset refers to.
        :param offset: Byte offset into buffer.
        :returns: The TextPosition of the given offset.
        """
        prefix = buffer[:offset]
        if not isinstance(prefix, str):
            prefix = bytes(prefix).decode("utf-8", errors="replace")
        line_start = prefix.rfind("\n") + 1
        return cls(prefix.count("\n") + 1, len(prefix) - line_start + 1)

    def __str__(self):
        return f"line {self.line} col {self.column}"
