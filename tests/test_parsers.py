import pytest

from docu_extractor.errors import ArchiveParseError
from docu_extractor.markers import CONTENT_START_MARKER, EXTENSION_HEADER, FILENAME_HEADER, SECTION_MARKER
from docu_extractor.parsers import BlockParser


@pytest.fixture
def parser():
    return BlockParser()


def test_parse_single_block(parser, build_block):
    data = build_block("note.txt", b"hello")
    block = parser.parse_block(data, 0)

    assert block.filename == "note.txt"
    assert block.extension == "txt"
    assert block.content == b"hello"
    assert block.offset == 0
    assert block.content_end == len(data)
    assert block.size == 5


def test_content_ends_at_next_section_marker(parser, build_block):
    first = build_block("a.bin", b"\x01\x02\x03")
    data = first + build_block("b.bin", b"\x04")

    block = parser.parse_block(data, 0)

    assert block.content == b"\x01\x02\x03"
    assert block.content_end == len(first)
    assert SECTION_MARKER not in block.content


def test_extension_field_can_differ_from_filename(parser, build_block):
    data = build_block("README", b"docs", extension="TXT")
    block = parser.parse_block(data, 0)
    assert block.filename == "README"
    assert block.extension == "TXT"


def test_legacy_offset_starts_payload_one_byte_early(build_block):
    data = build_block("note.txt", b"hello", padding=b"\x00\x00\x00\x00!")
    block = BlockParser(legacy_offset=True).parse_block(data, 0)
    assert block.content == b"!hello"


def test_payload_shorter_than_padding_is_empty(parser):
    data = SECTION_MARKER + EXTENSION_HEADER + b"bin\x00" + FILENAME_HEADER + b"x.bin\x00" + CONTENT_START_MARKER + b"\x00\x00"
    block = parser.parse_block(data, 0)
    assert block.content == b""
    assert block.content_end == len(data)


def test_cursor_must_point_at_section_marker(parser, build_block):
    data = build_block("note.txt", b"hello")
    with pytest.raises(ArchiveParseError):
        parser.parse_block(data, 1)


def test_section_marker_only_is_a_parse_error(parser):
    with pytest.raises(ArchiveParseError) as exc_info:
        parser.parse_block(SECTION_MARKER, 0)
    assert "extension header" in str(exc_info.value)


def test_missing_filename_header(parser):
    data = SECTION_MARKER + EXTENSION_HEADER + b"txt\x00" + CONTENT_START_MARKER + b"\x00" * 5 + b"hello"
    with pytest.raises(ArchiveParseError) as exc_info:
        parser.parse_block(data, 0)
    assert "filename header" in str(exc_info.value)


def test_missing_content_start_marker(parser):
    data = SECTION_MARKER + EXTENSION_HEADER + b"txt\x00" + FILENAME_HEADER + b"note.txt\x00hello"
    with pytest.raises(ArchiveParseError) as exc_info:
        parser.parse_block(data, 0)
    assert "content-start marker" in str(exc_info.value)


def test_metadata_is_not_borrowed_from_the_next_block(parser, build_block):
    # First block has no EXT/ of its own; the second block's header must not be used
    data = SECTION_MARKER + b"\x00garbage\x00" + build_block("b.txt", b"b")
    with pytest.raises(ArchiveParseError):
        parser.parse_block(data, 0)


def test_unsafe_filename_rejected(parser, build_block):
    data = build_block("../evil.txt", b"x", extension="txt")
    with pytest.raises(ArchiveParseError):
        parser.parse_block(data, 0)


def test_iter_blocks(parser, build_block):
    data = b"junk" + build_block("a.txt", b"A") + build_block("b.png", b"\x89PNG")
    blocks = list(parser.iter_blocks(data))
    assert [b.filename for b in blocks] == ["a.txt", "b.png"]
    assert [b.content for b in blocks] == [b"A", b"\x89PNG"]
    assert blocks[0].offset == 4


def test_iter_blocks_without_marker_yields_nothing(parser):
    assert list(parser.iter_blocks(b"plain data")) == []


def test_next_section_returns_buffer_length_at_end(parser):
    assert parser.next_section(b"abcdef", 0) == 6
    assert parser.first_section(b"abcdef") is None


def test_empty_extension_field_is_a_parse_error(parser):
    data = SECTION_MARKER + EXTENSION_HEADER + b"\x00" + FILENAME_HEADER + b"note.txt\x00" + CONTENT_START_MARKER + b"\x00" * 5 + b"hello"
    with pytest.raises(ArchiveParseError) as exc_info:
        parser.parse_block(data, 0)
    assert exc_info.value.reason == "empty extension field"
    assert exc_info.value.offset == len(SECTION_MARKER)
