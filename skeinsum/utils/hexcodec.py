"""Hex encoding of digest buffers."""

import string

from skeinsum.models.checksum import bits_to_bytes

HEX_DIGITS = frozenset(string.hexdigits)


class FormatError(ValueError):
    """Raised when text is not a valid hex digest."""

    pass


def encode(digest: bytes, output_bits: int) -> str:
    """Encode the leading bytes of a digest buffer as lowercase hex.

    Args:
        digest: Digest buffer, at least ceil(output_bits / 8) bytes long.
        output_bits: Configured output length in bits.

    Returns:
        Exactly ceil(output_bits / 8) * 2 hex characters, most
        significant byte first.

    Raises:
        ValueError: If the buffer is shorter than the output length.
    """
    nbytes = bits_to_bytes(output_bits)
    if len(digest) < nbytes:
        raise ValueError(
            f"digest buffer holds {len(digest)} bytes, need {nbytes}"
        )
    return digest[:nbytes].hex()


def decode(text: str) -> bytes:
    """Decode a hex string (either case) into bytes.

    Args:
        text: Hex string without separators.

    Returns:
        Decoded bytes.

    Raises:
        FormatError: If the length is odd or a non-hex character appears.
    """
    if len(text) % 2:
        raise FormatError(f"odd-length hex string ({len(text)} characters)")
    if not is_hex(text):
        raise FormatError("hex string contains non-hex characters")
    return bytes.fromhex(text)


def is_hex(text: str) -> bool:
    """Check that every character is a hex digit."""
    return all(c in HEX_DIGITS for c in text)
