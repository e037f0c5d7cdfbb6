"""
Error types raised while extracting DOCU archives.

Every error carries a formatted message built from one of the
``ErrorMessage`` templates, plus the offending path (or offset for parse
errors) so callers can report it without string parsing.
"""

from enum import Enum
from typing import Optional


class ErrorMessage(Enum):
    """Message templates shared by the error types and the CLI."""

    READ_WRITE_FILE_ERROR = "Error: read/write error processing file -> %s"
    DIRECTORY_CREATE_ERROR = "Error: Could not create output directory -> %s"
    FILE_NOT_FOUND_ERROR = "Error: File not found -> %s"
    INVALID_FORMAT_ERROR = "Error: Invalid format -> %s"
    EMPTY_FILE_ERROR = "Error: Empty file -> %s"
    PARSE_ERROR = "Error: Malformed block at offset %s -> %s"

    def format(self, *args: object) -> str:
        return self.value % args


class ArchiveError(Exception):
    """Base class for archive extraction errors."""

    def __init__(self, message: str, path: Optional[str] = None) -> None:
        super().__init__(message)
        self.path = path


class ArchiveFileMissingError(ArchiveError):
    """The input archive does not exist or cannot be read."""

    def __init__(self, path: str) -> None:
        super().__init__(ErrorMessage.FILE_NOT_FOUND_ERROR.format(path), path)


class InvalidFormatError(ArchiveError):
    """The input is not a DOCU archive."""

    def __init__(self, path: Optional[str], error: ErrorMessage = ErrorMessage.INVALID_FORMAT_ERROR, *details: object) -> None:
        super().__init__(error.format(*(details or (path,))), path)


class EmptyArchiveError(InvalidFormatError):
    def __init__(self, path: str) -> None:
        super().__init__(path, ErrorMessage.EMPTY_FILE_ERROR)


class ArchiveParseError(InvalidFormatError):
    """A block inside the archive is malformed."""

    def __init__(self, offset: int, reason: str, path: Optional[str] = None) -> None:
        super().__init__(path, ErrorMessage.PARSE_ERROR, f"0x{offset:08X}", reason)
        self.offset = offset
        self.reason = reason


class ArchiveIOError(ArchiveError):
    """Reading the archive or writing extracted content failed."""

    def __init__(self, path: str, error: ErrorMessage = ErrorMessage.READ_WRITE_FILE_ERROR) -> None:
        super().__init__(error.format(path), path)
