"""ARINC 424 decode exceptions.

Every decode error is fatal: the decoder stops at the first one and no
partial collections are returned.
"""


class ARINC424Error(ValueError):
    """Base exception for all ARINC 424 decode errors."""

    def __init__(self, message: str, line_number: int | None = None):
        self.message = message
        self.line_number = line_number
        super().__init__(message)

    def __str__(self) -> str:
        if self.line_number is None:
            return self.message
        return f"line {self.line_number}: {self.message}"


class LineLengthError(ARINC424Error):
    """Raised when a record is not exactly one fixed-length line."""

    def __init__(self, line_number: int, length: int, expected: int):
        self.length = length
        self.expected = expected
        super().__init__(
            f"unexpected line length {length} (expected {expected})", line_number
        )


class FieldParseError(ARINC424Error):
    """Raised when a numeric column holds something other than digits."""

    def __init__(self, field: str, value: str, line_number: int | None = None):
        self.field = field
        self.value = value
        super().__init__(f"cannot parse {field} from {value!r}", line_number)


class UnknownCodeError(ARINC424Error):
    """Raised when an enumerated column holds an unrecognized code."""

    def __init__(self, field: str, code: str, line_number: int | None = None):
        self.field = field
        self.code = code
        super().__init__(f"unexpected {field} code {code!r}", line_number)
