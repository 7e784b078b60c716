"""Checksum production and verification."""

from skeinsum.processor.producer import Producer
from skeinsum.processor.verifier import Verifier

__all__ = ["Producer", "Verifier"]
