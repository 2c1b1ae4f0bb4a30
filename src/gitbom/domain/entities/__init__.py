"""Domain entities."""

from gitbom.domain.entities.bom import GitBom

__all__ = [
    "GitBom",
]
