"""Composition root - build gitoid generators and BOMs from settings."""

import logging

from gitbom.application.gitoid import GitOid
from gitbom.config import Settings, get_settings
from gitbom.domain.entities import GitBom
from gitbom.infrastructure.hashing import get_hasher_factory


def configure_logging(settings: Settings | None = None) -> None:
    """Apply the configured log level to the gitbom logger."""
    settings = settings or get_settings()
    logging.getLogger("gitbom").setLevel(settings.log_level.upper())


def create_gitoid(settings: Settings | None = None) -> GitOid:
    """Build a GitOid configured from settings, hashing through the hashlib registry."""
    settings = settings or get_settings()
    return GitOid(
        settings.hash_algorithm,
        chunk_size=settings.chunk_size,
        strict_length=settings.strict_length,
        hasher_factory=get_hasher_factory(settings.hash_algorithm),
    )


def create_bom() -> GitBom:
    """Return an empty GitBom."""
    return GitBom()
