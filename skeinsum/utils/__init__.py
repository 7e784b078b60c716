"""Utility modules for hashing, hex encoding, manifests and logging."""

from skeinsum.utils.hashing import StreamHasher
from skeinsum.utils.hexcodec import FormatError, decode, encode
from skeinsum.utils.manifest import format_line, parse_line, read_manifest

__all__ = [
    "StreamHasher",
    "FormatError",
    "encode",
    "decode",
    "format_line",
    "parse_line",
    "read_manifest",
]
