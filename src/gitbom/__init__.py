"""GitBOM: git blob object identifiers and bills of materials."""

from gitbom.application.gitoid import GitOid, blob_header
from gitbom.domain.entities import GitBom
from gitbom.domain.exceptions import GitBomError, LengthMismatch, StreamReadError
from gitbom.domain.value_objects import HashAlgorithm

__version__ = "0.1.0"

__all__ = [
    "GitBom",
    "GitBomError",
    "GitOid",
    "HashAlgorithm",
    "LengthMismatch",
    "StreamReadError",
    "blob_header",
]
