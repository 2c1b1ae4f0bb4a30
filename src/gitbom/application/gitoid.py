"""Gitoid generation: git blob framing hashed with a selectable algorithm.

A gitoid is the hex digest of ``b"blob <length>\\0"`` followed by the content,
exactly as git names blob objects. SHA1 gitoids match ``git hash-object``.
"""

import functools
import hashlib
import logging
import zlib

from gitbom.application.ports import ByteReader, Hasher, HasherFactory
from gitbom.domain.exceptions import LengthMismatch, StreamReadError
from gitbom.domain.value_objects import HashAlgorithm

logger = logging.getLogger(__name__)

# linux default page size
DEFAULT_CHUNK_SIZE = 4096

# failures a reader may raise mid-stream: I/O errors, truncated or corrupt
# compressed streams (gzip, bz2, lzma, zlib) and reads on closed handles
READ_ERRORS = (OSError, EOFError, ValueError, zlib.error)


def blob_header(length: int) -> bytes:
    """Return the git blob header for content of the given length."""
    if length < 0:
        raise ValueError(f"Content length must be non-negative, got {length}")
    return b"blob %d\x00" % length


class GitOid:
    """Computes gitoids for in-memory content and byte streams.

    Holds no per-call state, so one instance can be shared across threads.
    Without a hasher_factory the digest comes from hashlib; an injected
    factory must produce digests of the width hash_algorithm declares.
    """

    def __init__(
        self,
        hash_algorithm: HashAlgorithm | str = HashAlgorithm.SHA256,
        *,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        strict_length: bool = False,
        hasher_factory: HasherFactory | None = None,
    ) -> None:
        if chunk_size <= 0:
            raise ValueError(f"chunk_size must be positive, got {chunk_size}")
        self.hash_algorithm = HashAlgorithm(hash_algorithm)
        self.chunk_size = chunk_size
        self.strict_length = strict_length
        if hasher_factory is None:
            hasher_factory = functools.partial(hashlib.new, self.hash_algorithm.value)
        digest_length = len(hasher_factory().hexdigest())
        if digest_length != self.hash_algorithm.hex_length:
            raise ValueError(
                f"Hasher produces {digest_length} hex chars, "
                f"{self.hash_algorithm} needs {self.hash_algorithm.hex_length}"
            )
        self._hasher_factory = hasher_factory

    def _new_hasher(self, length: int) -> Hasher:
        hasher = self._hasher_factory()
        hasher.update(blob_header(length))
        return hasher

    def generate(self, content: bytes) -> str:
        """Return the gitoid of content held in memory."""
        hasher = self._new_hasher(len(content))
        hasher.update(content)
        gitoid = hasher.hexdigest()
        logger.debug(
            "Generated %s gitoid %s for %d bytes", self.hash_algorithm, gitoid, len(content)
        )
        return gitoid

    def generate_from_reader(self, reader: ByteReader, expected_length: int) -> str:
        """Return the gitoid of a stream whose length is declared by the caller.

        The header is built from expected_length, not from the bytes read.
        When the stream ends early or runs long the digest is still returned
        (it then differs from the gitoid of the actual bytes) unless
        strict_length is set, in which case LengthMismatch is raised.

        Raises:
            StreamReadError: reader.read raised one of READ_ERRORS; carries the
                bytes hashed so far.
            LengthMismatch: strict_length is set and the lengths differ.
        """
        hasher = self._new_hasher(expected_length)
        amount_read = 0
        while True:
            try:
                chunk = reader.read(self.chunk_size)
            except READ_ERRORS as exc:
                logger.error(
                    "Read failed after %d of %d bytes: %s", amount_read, expected_length, exc
                )
                raise StreamReadError(amount_read) from exc
            if not chunk:
                break
            hasher.update(chunk)
            amount_read += len(chunk)

        if amount_read != expected_length:
            if self.strict_length:
                raise LengthMismatch(expected_length, amount_read)
            logger.warning(
                "Declared length %d does not match %d bytes read; "
                "gitoid reflects the declared length",
                expected_length,
                amount_read,
            )

        gitoid = hasher.hexdigest()
        logger.debug(
            "Generated %s gitoid %s from stream of %d bytes",
            self.hash_algorithm,
            gitoid,
            amount_read,
        )
        return gitoid

    def __repr__(self) -> str:
        return (
            f"GitOid(hash_algorithm={self.hash_algorithm!r}, "
            f"chunk_size={self.chunk_size}, strict_length={self.strict_length})"
        )
