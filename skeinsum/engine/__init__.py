"""Digest engine interface and the bundled implementation."""

from skeinsum.engine.base import DigestEngine, EngineError
from skeinsum.engine.shake import ShakeEngine

__all__ = ["DigestEngine", "EngineError", "ShakeEngine"]
