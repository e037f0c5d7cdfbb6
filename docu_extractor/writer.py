"""
Persist extracted blocks to the output directory.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Union

from .errors import ArchiveIOError
from .markers import is_textual_extension
from .parsers import ArchiveBlock
from .utils import format_size

logger = logging.getLogger(__name__)


@dataclass
class ExtractedFile:
    """Record of an extracted file with its archive location."""

    filename: str
    extension: str
    offset: int  # Offset of the block in the archive
    size: int  # Payload size in bytes
    is_text: bool


class ContentWriter:
    """Write block payloads as UTF-8 text or raw bytes depending on extension."""

    def __init__(self, output_dir: Union[str, Path]) -> None:
        self.output_dir = Path(output_dir)

    def write(self, block: ArchiveBlock) -> ExtractedFile:
        """
        Create or overwrite output_dir/filename with the block payload.

        Raises:
            ArchiveIOError: if the file cannot be written
        """
        path = self.output_dir / block.filename
        is_text = is_textual_extension(block.extension)
        try:
            if is_text:
                text = block.content.decode("utf-8", errors="replace")
                with open(path, "w", encoding="utf-8", newline="") as f:
                    f.write(text)
            else:
                with open(path, "wb") as f:
                    f.write(block.content)
        except OSError as e:
            raise ArchiveIOError(str(path)) from e

        logger.debug(f"Extracted: {block.filename} ({format_size(block.size)}) at offset {block.offset:08X}")
        return ExtractedFile(filename=block.filename, extension=block.extension, offset=block.offset, size=block.size, is_text=is_text)
