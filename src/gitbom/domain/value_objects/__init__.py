"""Domain value objects."""

from gitbom.domain.value_objects.hash_algorithm import HashAlgorithm

__all__ = [
    "HashAlgorithm",
]
