"""
Pytest configuration and fixtures
"""
import sys
from pathlib import Path
from typing import Callable, Iterable, Tuple

import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from docu_extractor.markers import CONTENT_START_MARKER, EXTENSION_HEADER, FILENAME_HEADER, SECTION_MARKER  # noqa: E402

PADDING = b"\x00\x01\x02\x03\x04"


def _build_block(filename: str, payload: bytes, extension: str = "", padding: bytes = PADDING) -> bytes:
    if not extension:
        extension = filename.rsplit(".", 1)[-1]
    return (
        SECTION_MARKER
        + b"\x00\x10"
        + EXTENSION_HEADER
        + extension.encode("ascii")
        + b"\x00"
        + FILENAME_HEADER
        + filename.encode("ascii")
        + b"\x00\x00"
        + CONTENT_START_MARKER
        + padding
        + payload
    )


@pytest.fixture
def build_block() -> Callable[..., bytes]:
    """Return a helper that serialises one archive block."""
    return _build_block


@pytest.fixture
def make_archive(tmp_path: Path) -> Callable[..., Path]:
    """Return a helper that writes an archive made of (filename, payload) blocks."""

    def _make(blocks: Iterable[Tuple[str, bytes]], name: str = "sample.env", prefix: bytes = b"") -> Path:
        data = prefix + b"".join(_build_block(filename, payload) for filename, payload in blocks)
        path = tmp_path / name
        path.write_bytes(data)
        return path

    return _make


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    return tmp_path / "output"
