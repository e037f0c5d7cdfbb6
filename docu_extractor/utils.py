"""
Byte-level helpers for scanning DOCU archives.
"""

from typing import Optional

from .errors import ArchiveParseError
from .markers import PRINTABLE_MAX, PRINTABLE_MIN


def matches_marker(data: bytes, offset: int, marker: bytes) -> bool:
    """
    Check whether the bytes at offset equal the marker.

    Returns False when fewer than len(marker) bytes remain.
    """
    if offset < 0 or offset + len(marker) > len(data):
        return False
    return data[offset : offset + len(marker)] == marker


def find_marker(data: bytes, marker: bytes, start: int = 0, end: Optional[int] = None) -> Optional[int]:
    """
    Find the leftmost occurrence of a marker at or after start.

    Args:
        data: Data to search in
        marker: Marker to search for
        start: Starting offset
        end: Optional exclusive bound; the whole marker must fit before it

    Returns:
        Offset of the marker or None if not found
    """
    if end is None:
        end = len(data)
    pos = data.find(marker, start, end)
    return None if pos == -1 else pos


def is_printable(byte: int) -> bool:
    return PRINTABLE_MIN <= byte <= PRINTABLE_MAX


def read_printable_field(data: bytes, offset: int, end: Optional[int] = None) -> str:
    """
    Read a printable ASCII field that starts right after a header.

    The field ends at the first non-printable byte. A run that reaches the end
    of the buffer (or ``end``) without a terminator is rejected.

    Args:
        data: Archive buffer
        offset: First byte of the field
        end: Optional exclusive bound for the read

    Returns:
        The field value

    Raises:
        ArchiveParseError: if the field starts out of bounds or is unterminated
    """
    if end is None:
        end = len(data)
    if offset < 0 or offset >= end:
        raise ArchiveParseError(offset, "field starts beyond the end of the block")

    pos = offset
    while pos < end and is_printable(data[pos]):
        pos += 1

    if pos >= end:
        raise ArchiveParseError(offset, "field is not terminated before the end of the block")
    return data[offset:pos].decode("ascii")


def is_safe_filename(filename: str) -> bool:
    """
    Check that a filename extracted from an archive stays inside the output directory.

    Args:
        filename: Filename read from the block metadata

    Returns:
        True if the name is a plain file name
    """
    if not filename or filename in (".", ".."):
        return False
    return not any(sep in filename for sep in ("/", "\\", "\x00"))


def format_size(size_bytes: int) -> str:
    """
    Format byte size to human-readable string.

    Args:
        size_bytes: Size in bytes

    Returns:
        Formatted string (e.g., "1.5 MB")
    """
    size_float = float(size_bytes)
    for unit in ["B", "KB", "MB", "GB", "TB"]:
        if size_float < 1024.0:
            return f"{size_float:.2f} {unit}"
        size_float /= 1024.0
    return f"{size_float:.2f} PB"
