"""Plain-text checksum manifest format.

One record per line::

    <hex-digest><space><space-or-asterisk><filename>

The second separator records whether the file was hashed in text (" ")
or binary ("*") mode. Filenames are stored verbatim with no escaping, so a
name containing a newline or trailing whitespace cannot be represented.
"""

from typing import BinaryIO, Iterable, Iterator

from skeinsum.models.checksum import ManifestLine, MalformedLine, ReadMode, WellFormedLine
from skeinsum.utils.hexcodec import FormatError, decode

# Encoding used for manifest files; surrogateescape keeps undecodable
# filename bytes intact between reading and opening.
MANIFEST_ENCODING = "utf-8"
MANIFEST_ERRORS = "surrogateescape"


def parse_line(line: str, line_number: int = 0) -> ManifestLine:
    """Parse one manifest line.

    Args:
        line: Raw line, with or without its trailing newline.
        line_number: 1-based position in the manifest, for diagnostics.

    Returns:
        WellFormedLine on success, MalformedLine otherwise.
    """
    text = line.rstrip()
    if not text:
        return MalformedLine(raw_text=line, line_number=line_number)

    hex_end = text.find(" ")
    # Need the digest, two separator characters and at least one filename character
    if hex_end <= 0 or len(text) < hex_end + 3:
        return MalformedLine(raw_text=line, line_number=line_number)

    hex_digest = text[:hex_end]
    marker = text[hex_end + 1]
    filename = text[hex_end + 2 :]

    try:
        decode(hex_digest)
    except FormatError:
        return MalformedLine(raw_text=line, line_number=line_number)

    if marker not in (ReadMode.TEXT.marker, ReadMode.BINARY.marker):
        return MalformedLine(raw_text=line, line_number=line_number)

    return WellFormedLine(
        hex_digest=hex_digest,
        filename=filename,
        read_mode=ReadMode.from_marker(marker),
        line_number=line_number,
    )


def format_line(hex_digest: str, filename: str, binary: bool = False) -> str:
    """Serialize one manifest record, including the trailing newline.

    Args:
        hex_digest: Encoded digest.
        filename: Name exactly as it should be reopened when checking.
        binary: True to mark the record as hashed in binary mode.

    Returns:
        Manifest line.
    """
    mode = ReadMode.BINARY if binary else ReadMode.TEXT
    return f"{hex_digest} {mode.marker}{filename}\n"


def read_manifest(stream: Iterable[str]) -> Iterator[ManifestLine]:
    """Parse every line of a manifest, numbering lines from 1."""
    for line_number, line in enumerate(stream, start=1):
        yield parse_line(line, line_number)


def decode_lines(stream: BinaryIO) -> Iterator[str]:
    """Split a binary manifest stream into decoded text lines."""
    for raw in stream:
        yield raw.decode(MANIFEST_ENCODING, MANIFEST_ERRORS)
