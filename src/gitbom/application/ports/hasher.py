"""Hasher port - incremental digest functions."""

from collections.abc import Callable
from typing import Protocol


class Hasher(Protocol):
    """Port for an incremental hash function."""

    def update(self, data: bytes, /) -> None: ...

    def hexdigest(self) -> str: ...


HasherFactory = Callable[[], Hasher]
