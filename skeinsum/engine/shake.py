"""Digest engine backed by the SHAKE extendable-output functions."""

from cryptography.hazmat.primitives import hashes

from skeinsum.engine.base import EngineError
from skeinsum.models.checksum import (
    MAX_OUTPUT_BITS,
    MIN_OUTPUT_BITS,
    VALID_STATE_WIDTHS,
    bits_to_bytes,
)


class ShakeEngine:
    """DigestEngine implementation using cryptography's SHAKE128/SHAKE256.

    The 256-bit state width maps to SHAKE128 and the wider states to
    SHAKE256. Because both are XOFs, a shorter output is always a prefix
    of a longer one for the same state width. Outputs that are not a whole
    number of bytes have their unused low-order bits cleared.
    """

    # State width -> XOF family
    ALGORITHMS = {
        256: hashes.SHAKE128,
        512: hashes.SHAKE256,
        1024: hashes.SHAKE256,
    }

    def __init__(self) -> None:
        """Create an unprepared engine."""
        self._state_width: int | None = None
        self._output_bits: int | None = None
        self._hash: hashes.Hash | None = None

    def prepare(self, state_width: int) -> None:
        """Select the internal state width.

        Raises:
            EngineError: If the width is not supported.
        """
        if state_width not in VALID_STATE_WIDTHS:
            raise EngineError(f"unsupported state width {state_width}")
        self._state_width = state_width
        self._output_bits = None
        self._hash = None

    def init(self, output_bits: int) -> None:
        """Start a new digest with the given output length.

        Raises:
            EngineError: If the engine is unprepared or the length is invalid.
        """
        if self._state_width is None:
            raise EngineError("engine used before prepare()")
        if not MIN_OUTPUT_BITS <= output_bits <= min(self._state_width, MAX_OUTPUT_BITS):
            raise EngineError(
                f"output length {output_bits} not supported for state width "
                f"{self._state_width}"
            )
        algorithm = self.ALGORITHMS[self._state_width](
            digest_size=bits_to_bytes(output_bits)
        )
        self._hash = hashes.Hash(algorithm)
        self._output_bits = output_bits

    def update(self, data: bytes) -> None:
        """Absorb data into the running digest."""
        if self._hash is None:
            raise EngineError("engine used before init()")
        self._hash.update(data)

    def final(self) -> bytes:
        """Squeeze the digest and close the running context.

        Raises:
            EngineError: If no digest is in progress.
        """
        if self._hash is None or self._output_bits is None:
            raise EngineError("final() called without an active digest")
        digest = bytearray(self._hash.finalize())
        self._hash = None

        spare_bits = len(digest) * 8 - self._output_bits
        if spare_bits:
            digest[-1] &= (0xFF << spare_bits) & 0xFF
        return bytes(digest)

    def reset(self) -> None:
        """Drop any in-progress digest, keeping the prepared state width."""
        self._hash = None
        self._output_bits = None
