"""
Marker definitions for the DOCU archive format.

Every embedded file is framed by fixed byte sequences: a section marker opens
the block, EXT/ and FILENAME/ introduce printable metadata fields, and
_SIG/D.C. announces the payload.
"""

SECTION_MARKER = b"\x2a\x2a\x25\x25\x44\x4f\x43\x55"  # "**%%DOCU"
FILENAME_HEADER = b"\x46\x49\x4c\x45\x4e\x41\x4d\x45\x2f"  # "FILENAME/"
EXTENSION_HEADER = b"\x45\x58\x54\x2f"  # "EXT/"
CONTENT_START_MARKER = b"\x5f\x53\x49\x47\x2f\x44\x2e\x43\x2e"  # "_SIG/D.C."

# Padding between the content-start marker and the payload
TRASH_BYTES = 5

# Printable ASCII range accepted in metadata fields (inclusive)
PRINTABLE_MIN = 0x20
PRINTABLE_MAX = 0x7E

# Extensions written as UTF-8 text; everything else is an opaque blob
TEXTUAL_EXTENSIONS = frozenset({"xml", "txt", "json", "csv", "html"})

ARCHIVE_SUFFIX = ".env"
DEFAULT_OUTPUT_DIR = "output"


def is_textual_extension(extension: str) -> bool:
    return extension.lower() in TEXTUAL_EXTENSIONS
