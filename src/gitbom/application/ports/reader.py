"""Byte reader port - sequential content sources."""

from typing import Protocol


class ByteReader(Protocol):
    """Anything with a binary ``read(size)``, e.g. a file opened in ``rb`` mode."""

    def read(self, size: int = -1, /) -> bytes: ...
