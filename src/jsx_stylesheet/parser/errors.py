"""Parser error types."""


class ParseError(Exception):
    """Raised when module source cannot be scanned."""

    def __init__(
        self, message: str, line: int | None = None, column: int | None = None
    ):
        self.line = line
        self.column = column
        if line is not None and column is not None:
            message = f"{message} (line {line}, column {column})"
        super().__init__(message)

    @classmethod
    def at(cls, message: str, source: str, offset: int) -> "ParseError":
        """Build an error positioned at *offset* within *source*."""
        line = source.count("\n", 0, offset) + 1
        column = offset - (source.rfind("\n", 0, offset) + 1) + 1
        return cls(message, line=line, column=column)
