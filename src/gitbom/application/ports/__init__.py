"""Application ports - interfaces for external adapters."""

from gitbom.application.ports.hasher import Hasher, HasherFactory
from gitbom.application.ports.reader import ByteReader

__all__ = [
    "ByteReader",
    "Hasher",
    "HasherFactory",
]
