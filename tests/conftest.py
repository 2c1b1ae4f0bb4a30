"""Pytest fixtures for GitBOM tests."""

from __future__ import annotations

import io
from pathlib import Path

import pytest

from gitbom.application.gitoid import GitOid
from gitbom.domain.value_objects import HashAlgorithm

DATA_DIR = Path(__file__).parent / "data"


# --- Fake readers ---


class FailingReader:
    """Reader that serves data and then raises OSError on the next read."""

    def __init__(self, data: bytes, error: OSError | None = None) -> None:
        self._buffer = io.BytesIO(data)
        self._error = error or OSError("device unplugged")
        self.reads = 0

    def read(self, size: int = -1) -> bytes:
        self.reads += 1
        chunk = self._buffer.read(size)
        if not chunk:
            raise self._error
        return chunk


class TrickleReader:
    """Reader that returns at most one byte per call."""

    def __init__(self, data: bytes) -> None:
        self._buffer = io.BytesIO(data)

    def read(self, size: int = -1) -> bytes:
        return self._buffer.read(1)


# --- Fixtures ---


@pytest.fixture
def sha1_gitoid() -> GitOid:
    """SHA1 gitoid generator."""
    return GitOid(HashAlgorithm.SHA1)


@pytest.fixture
def sha256_gitoid() -> GitOid:
    """SHA256 gitoid generator."""
    return GitOid(HashAlgorithm.SHA256)


@pytest.fixture
def hello_world_path() -> Path:
    """Path to a file containing exactly b"hello world"."""
    return DATA_DIR / "hello_world.txt"
