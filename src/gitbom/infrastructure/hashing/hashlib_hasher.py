"""Registry: select a hashlib constructor by hash algorithm."""

import hashlib

from gitbom.application.ports import HasherFactory
from gitbom.domain.value_objects import HashAlgorithm

# algorithm -> hasher factory
_HASHERS_BY_ALGORITHM: dict[str, HasherFactory] = {
    HashAlgorithm.SHA1: hashlib.sha1,
    HashAlgorithm.SHA256: hashlib.sha256,
}


def get_hasher_factory(algorithm: HashAlgorithm | str) -> HasherFactory:
    """Return hasher factory for algorithm. Raises ValueError if unsupported."""
    try:
        return _HASHERS_BY_ALGORITHM[HashAlgorithm(algorithm)]
    except (KeyError, ValueError):
        raise ValueError(f"Unsupported hash algorithm: {algorithm}") from None


def supported_algorithms() -> list[str]:
    """Return sorted list of supported algorithm names."""
    return sorted(str(a) for a in _HASHERS_BY_ALGORITHM)
