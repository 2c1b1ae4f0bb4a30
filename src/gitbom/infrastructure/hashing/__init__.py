"""Hash function adapters."""

from gitbom.infrastructure.hashing.hashlib_hasher import (
    get_hasher_factory,
    supported_algorithms,
)

__all__ = ["get_hasher_factory", "supported_algorithms"]
