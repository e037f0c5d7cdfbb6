"""
Block parser for DOCU archives.

A block runs from one section marker to the next (or to the end of the
archive) and holds an EXT/ field, a FILENAME/ field and the payload that
follows the _SIG/D.C. marker.
"""

from dataclasses import dataclass
from typing import Iterator, Optional

from .errors import ArchiveParseError
from .markers import CONTENT_START_MARKER, EXTENSION_HEADER, FILENAME_HEADER, SECTION_MARKER, TRASH_BYTES
from .utils import find_marker, is_safe_filename, matches_marker, read_printable_field


@dataclass
class ArchiveBlock:
    """One embedded file sliced out of the archive buffer."""

    filename: str
    extension: str
    content: bytes
    offset: int  # Offset of the block's section marker
    content_offset: int  # First payload byte
    content_end: int  # Next section marker or end of buffer

    @property
    def size(self) -> int:
        return len(self.content)


class BlockParser:
    """Parser for the blocks of a DOCU archive."""

    def __init__(self, legacy_offset: bool = False) -> None:
        """
        Initialize the block parser.

        Args:
            legacy_offset: Start the payload one byte early, as older
                extractors did (the last padding byte becomes payload)
        """
        self.content_overlap = 1 if legacy_offset else 0

    @staticmethod
    def first_section(data: bytes) -> Optional[int]:
        """Offset of the first section marker, or None for a non-archive buffer."""
        return find_marker(data, SECTION_MARKER)

    @staticmethod
    def next_section(data: bytes, start: int) -> int:
        """Offset of the next section marker at or after start, or len(data) at end of stream."""
        pos = find_marker(data, SECTION_MARKER, start)
        return len(data) if pos is None else pos

    def parse_block(self, data: bytes, cursor: int) -> ArchiveBlock:
        """
        Parse the block whose section marker sits at cursor.

        Args:
            data: Archive buffer
            cursor: Offset of the block's section marker

        Returns:
            The parsed block; its content_end is the next cursor

        Raises:
            ArchiveParseError: if a header is missing or a field is malformed
        """
        if not matches_marker(data, cursor, SECTION_MARKER):
            raise ArchiveParseError(cursor, "expected a section marker")

        # Metadata must live inside this block
        block_end = self.next_section(data, cursor + len(SECTION_MARKER))

        ext_pos = self._require(data, EXTENSION_HEADER, cursor, block_end, "extension header")
        extension = read_printable_field(data, ext_pos + len(EXTENSION_HEADER), block_end)
        if not extension:
            raise ArchiveParseError(ext_pos, "empty extension field")

        name_pos = self._require(data, FILENAME_HEADER, ext_pos, block_end, "filename header")
        filename = read_printable_field(data, name_pos + len(FILENAME_HEADER), block_end)
        if not is_safe_filename(filename):
            raise ArchiveParseError(name_pos, f"unusable filename {filename!r}")

        sig_pos = self._require(data, CONTENT_START_MARKER, name_pos, block_end, "content-start marker")
        content_begin = sig_pos + len(CONTENT_START_MARKER) - self.content_overlap

        content_end = self.next_section(data, content_begin)
        payload_start = min(content_begin + TRASH_BYTES, content_end)

        return ArchiveBlock(
            filename=filename,
            extension=extension,
            content=data[payload_start:content_end],
            offset=cursor,
            content_offset=payload_start,
            content_end=content_end,
        )

    def iter_blocks(self, data: bytes) -> Iterator[ArchiveBlock]:
        """Yield every block from the first section marker to the end of the buffer."""
        cursor = self.first_section(data)
        if cursor is None:
            return
        while cursor < len(data):
            block = self.parse_block(data, cursor)
            yield block
            cursor = block.content_end

    @staticmethod
    def _require(data: bytes, marker: bytes, start: int, end: int, name: str) -> int:
        pos = find_marker(data, marker, start, end)
        if pos is None:
            raise ArchiveParseError(start, f"missing {name}")
        return pos
