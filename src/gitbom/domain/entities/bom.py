"""GitBom entity."""

import bisect
import threading
from collections.abc import Iterator


class GitBom:
    """Bill of materials: gitoids kept in ascending order.

    Duplicates are kept. Every operation takes the instance lock, so a single
    GitBom may be filled from several threads.
    """

    def __init__(self) -> None:
        self._gitoids: list[str] = []
        self._lock = threading.Lock()

    def add(self, gitoid: str) -> None:
        """Insert gitoid at its sorted position."""
        with self._lock:
            bisect.insort(self._gitoids, gitoid)

    @property
    def gitoids(self) -> list[str]:
        """Snapshot of the ordered gitoids."""
        with self._lock:
            return list(self._gitoids)

    def __len__(self) -> int:
        with self._lock:
            return len(self._gitoids)

    def __getitem__(self, index: int) -> str:
        with self._lock:
            return self._gitoids[index]

    def __iter__(self) -> Iterator[str]:
        return iter(self.gitoids)

    def __contains__(self, gitoid: object) -> bool:
        with self._lock:
            return gitoid in self._gitoids

    def __repr__(self) -> str:
        return f"GitBom(gitoids={self.gitoids!r})"
