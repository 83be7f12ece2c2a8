"""Errors raised by the bookmark store and its collaborators."""


class FmarkError(Exception):
    """Base error for this package."""


class ParseError(FmarkError):
    """Raised when the bookmark file cannot be parsed into records."""


class MalformedLine(ParseError):
    """A line is missing a tag marker or has them out of order."""

    def __init__(self, line_number: int, raw_text: str):
        self.line_number = line_number
        self.raw_text = raw_text
        super().__init__(f"line {line_number}: malformed bookmark: {raw_text!r}")


class EmptyField(ParseError):
    """A line parsed, but one of its fields is blank."""

    def __init__(self, line_number: int, field_name: str):
        self.line_number = line_number
        self.field_name = field_name
        super().__init__(f"line {line_number}: empty {field_name}")


class ValidationError(FmarkError):
    """Raised when a record built from user input is invalid."""

    def __init__(self, field_name: str, message: str):
        self.field_name = field_name
        super().__init__(f"{field_name}: {message}")


class IndexOutOfRange(FmarkError, IndexError):
    """Raised when a record position does not exist in the store."""

    def __init__(self, index: int, size: int):
        self.index = index
        self.size = size
        super().__init__(f"no bookmark at position {index} (store holds {size})")


class CollaboratorSpawnError(FmarkError):
    """Raised when the menu or browser program cannot be started."""

    def __init__(self, program: str, reason: str):
        self.program = program
        self.reason = reason
        super().__init__(f"failed to run {program}: {reason}")


class StorageError(FmarkError):
    """Raised when the bookmark file cannot be read or written."""

    def __init__(self, path, message: str):
        self.path = path
        super().__init__(f"{path}: {message}")


class ConfigError(FmarkError):
    """Raised when command-line or environment options are invalid."""
