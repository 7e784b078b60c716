"""Interface every digest engine must provide."""

from typing import Protocol


class EngineError(Exception):
    """Raised when a digest engine rejects its parameters or fails to finalize."""

    pass


class DigestEngine(Protocol):
    """Stateful hash primitive driven by the stream hasher.

    Call order per stream is prepare -> init -> update* -> final, followed
    by reset before the next stream. Implementations raise EngineError from
    prepare, init or final; update never signals failure.
    """

    def prepare(self, state_width: int) -> None:
        ...

    def init(self, output_bits: int) -> None:
        ...

    def update(self, data: bytes) -> None:
        ...

    def final(self) -> bytes:
        ...

    def reset(self) -> None:
        ...
