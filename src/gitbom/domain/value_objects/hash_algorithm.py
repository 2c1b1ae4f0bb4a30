"""Hash algorithm used for gitoid computation."""

from enum import StrEnum


class HashAlgorithm(StrEnum):
    """Supported gitoid hash algorithms."""

    SHA1 = "sha1"
    SHA256 = "sha256"

    @classmethod
    def _missing_(cls, value: object) -> "HashAlgorithm | None":
        # accept "SHA1", "Sha256", ...
        if isinstance(value, str):
            for member in cls:
                if member.value == value.lower():
                    return member
        return None

    @property
    def hex_length(self) -> int:
        """Number of hex characters in a digest."""
        return 40 if self is HashAlgorithm.SHA1 else 64
