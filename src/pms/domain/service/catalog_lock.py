"""Readers/writer lock guarding the whole catalog.

Mutations read every product, recompute, and write every product back.
Holding ``exclusive()`` for that sequence keeps two mutations from
interleaving, and holding ``shared()`` while reading keeps a reader from
seeing a half-written recompute pass.
"""

from __future__ import annotations

import threading
from collections.abc import Iterator
from contextlib import contextmanager


class CatalogLock:
    """Many readers or one writer; waiting writers block new readers."""

    def __init__(self) -> None:
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer: int | None = None
        self._writers_waiting = 0

    @contextmanager
    def shared(self) -> Iterator[None]:
        me = threading.get_ident()
        with self._cond:
            if self._writer == me:
                # A writer reading its own catalog already excludes everyone.
                reentrant = True
            else:
                reentrant = False
                while self._writer is not None or self._writers_waiting:
                    self._cond.wait()
                self._readers += 1
        try:
            yield
        finally:
            if not reentrant:
                with self._cond:
                    self._readers -= 1
                    if self._readers == 0:
                        self._cond.notify_all()

    @property
    def held_by_current_thread(self) -> bool:
        """True while the calling thread holds ``exclusive()``."""
        return self._writer == threading.get_ident()

    @contextmanager
    def exclusive(self) -> Iterator[None]:
        me = threading.get_ident()
        with self._cond:
            if self._writer == me:
                raise RuntimeError("CatalogLock.exclusive() is not re-entrant")
            self._writers_waiting += 1
            try:
                while self._writer is not None or self._readers:
                    self._cond.wait()
            finally:
                self._writers_waiting -= 1
            self._writer = me
        try:
            yield
        finally:
            with self._cond:
                self._writer = None
                self._cond.notify_all()
