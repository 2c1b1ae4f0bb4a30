"""Domain exceptions."""


class GitBomError(Exception):
    """Base exception for GitBOM."""

    pass


class StreamReadError(GitBomError):
    """Reading the content stream failed before end of data."""

    def __init__(self, bytes_hashed: int) -> None:
        super().__init__(f"Stream read failed after {bytes_hashed} bytes")
        self.bytes_hashed = bytes_hashed


class LengthMismatch(GitBomError):
    """Stream length differs from the length declared in the blob header."""

    def __init__(self, expected: int, actual: int) -> None:
        super().__init__(f"Expected {expected} bytes, stream had {actual}")
        self.expected = expected
        self.actual = actual
