"""Catalog lock that also holds across processes.

Every CLI invocation is its own process working on the same data file,
so the in-process readers/writer lock is paired with an ``flock`` on a
sidecar lock file: shared for reads, exclusive for mutations.
"""

from __future__ import annotations

import fcntl
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from pms.domain.service.catalog_lock import CatalogLock


class FileCatalogLock(CatalogLock):

    def __init__(self, lock_path: Path) -> None:
        super().__init__()
        self._lock_path = lock_path

    @contextmanager
    def shared(self) -> Iterator[None]:
        with super().shared():
            if self.held_by_current_thread:
                # The exclusive file lock is already ours.
                yield
            else:
                with self._flock(fcntl.LOCK_SH):
                    yield

    @contextmanager
    def exclusive(self) -> Iterator[None]:
        with super().exclusive():
            with self._flock(fcntl.LOCK_EX):
                yield

    @contextmanager
    def _flock(self, operation: int) -> Iterator[None]:
        self._lock_path.parent.mkdir(parents=True, exist_ok=True)
        with open(self._lock_path, "a", encoding="utf-8") as fh:
            fcntl.flock(fh.fileno(), operation)
            try:
                yield
            finally:
                fcntl.flock(fh.fileno(), fcntl.LOCK_UN)
