"""
DOCU Archive Extractor

Extracts the files embedded in ".env" DOCU archives. Each embedded file is a
block framed by fixed markers:

- "**%%DOCU" section marker
- "EXT/" and "FILENAME/" metadata fields
- "_SIG/D.C." content marker followed by the payload
"""

__version__ = "1.0.0"

from .errors import (
    ArchiveError,
    ArchiveFileMissingError,
    ArchiveIOError,
    ArchiveParseError,
    EmptyArchiveError,
    ErrorMessage,
    InvalidFormatError,
)
from .extractor import ArchiveExtractor, extract_archive
from .parsers import ArchiveBlock, BlockParser
from .report import ReportGenerator, render_tree
from .writer import ContentWriter, ExtractedFile

__all__ = [
    # Core extraction
    "ArchiveExtractor",
    "extract_archive",
    "BlockParser",
    "ArchiveBlock",
    "ContentWriter",
    "ExtractedFile",
    # Reports
    "ReportGenerator",
    "render_tree",
    # Errors
    "ErrorMessage",
    "ArchiveError",
    "ArchiveFileMissingError",
    "ArchiveIOError",
    "ArchiveParseError",
    "EmptyArchiveError",
    "InvalidFormatError",
]
