"""
Archive extraction engine: validates the input, scans its blocks and writes
each embedded file to the output directory.
"""

import logging
import os
from pathlib import Path
from typing import List, Union

from tqdm import tqdm

from .errors import ArchiveFileMissingError, ArchiveIOError, EmptyArchiveError, ErrorMessage, InvalidFormatError
from .markers import DEFAULT_OUTPUT_DIR
from .parsers import BlockParser
from .utils import format_size
from .writer import ContentWriter, ExtractedFile

logger = logging.getLogger(__name__)


class ArchiveExtractor:
    """DOCU archive extractor that scans the whole archive in memory."""

    def __init__(self, output_dir: Union[str, Path] = DEFAULT_OUTPUT_DIR, legacy_offset: bool = False, show_progress: bool = True):
        """
        Initialize the extractor.

        Args:
            output_dir: Directory that receives the extracted files
            legacy_offset: Reproduce the one-byte-early payload start of older extractors
            show_progress: Display a tqdm progress bar while scanning
        """
        self.output_dir = Path(output_dir)
        self.show_progress = show_progress
        self.parser = BlockParser(legacy_offset=legacy_offset)
        self.writer = ContentWriter(self.output_dir)
        # Manifest of the files written by the last run
        self.manifest: List[ExtractedFile] = []

    @staticmethod
    def validate_archive(archive_path: Union[str, Path]) -> Path:
        """
        Check that the archive exists, is readable and is not empty.

        Raises:
            ArchiveFileMissingError: if the file is missing or unreadable
            EmptyArchiveError: if the file has no content
        """
        path = Path(archive_path)
        if not path.is_file() or not os.access(path, os.R_OK):
            raise ArchiveFileMissingError(str(archive_path))
        if path.stat().st_size == 0:
            raise EmptyArchiveError(str(archive_path))
        return path

    @staticmethod
    def read_archive(archive_path: Union[str, Path]) -> bytes:
        try:
            with open(archive_path, "rb") as f:
                return f.read()
        except FileNotFoundError as e:
            raise ArchiveFileMissingError(str(archive_path)) from e
        except OSError as e:
            raise ArchiveIOError(str(archive_path)) from e

    def extract(self, archive_path: Union[str, Path]) -> List[str]:
        """
        Extract every embedded file of an archive.

        Args:
            archive_path: Path to the archive

        Returns:
            Names of the extracted files, in archive order
        """
        path = self.validate_archive(archive_path)
        data = self.read_archive(path)

        logger.info(f"Processing: {archive_path}")
        logger.info(f"Archive size: {format_size(len(data))}")

        if not data:
            raise EmptyArchiveError(str(archive_path))
        if self.parser.first_section(data) is None:
            raise InvalidFormatError(str(archive_path))

        try:
            return self.scan(data, desc=f"Extracting {path.name}")
        except InvalidFormatError as e:
            if e.path is None:
                e.path = str(archive_path)
            raise

    def scan(self, data: bytes, desc: str = "Extracting") -> List[str]:
        """
        Scan an in-memory archive and write every block.

        Returns:
            Names of the extracted files, in archive order

        Raises:
            InvalidFormatError: if the buffer holds no section marker
            ArchiveParseError: if a block is malformed
            ArchiveIOError: if the output directory or a file cannot be written
        """
        cursor = self.parser.first_section(data)
        if cursor is None:
            raise InvalidFormatError("<buffer>")

        self._create_output_directory()
        self.manifest.clear()
        filenames: List[str] = []

        logger.info(f"Output directory: {self.output_dir}")

        pbar = tqdm(total=len(data), unit="B", unit_scale=True, desc=desc, disable=not self.show_progress)
        try:
            pbar.update(cursor)
            while cursor < len(data):
                block = self.parser.parse_block(data, cursor)
                self.manifest.append(self.writer.write(block))
                filenames.append(block.filename)
                pbar.update(block.content_end - cursor)
                cursor = block.content_end
        finally:
            pbar.close()

        logger.info(f"Extracted {len(filenames)} file(s)")
        return filenames

    def _create_output_directory(self) -> None:
        try:
            self.output_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise ArchiveIOError(str(self.output_dir), ErrorMessage.DIRECTORY_CREATE_ERROR) from e


def extract_archive(archive_path: Union[str, Path], output_dir: Union[str, Path] = DEFAULT_OUTPUT_DIR, **options) -> List[str]:
    """Extract an archive into output_dir and return the extracted filenames."""
    return ArchiveExtractor(output_dir, **options).extract(archive_path)
