"""Readers-writer lock for the currency registry.

Lookups (find, find_by_code, parse) take the shared side; registration takes
the exclusive side. Waiting writers block new readers so a steady stream of
lookups cannot starve registration.

Rules:
    - The read side is reentrant per thread.
    - Holding the read side and asking for the write side raises RuntimeError.
    - Holding the write side and asking for either side raises RuntimeError.
    - An optional timeout raises TimeoutError when the deadline passes.

Python 3.13+.
"""

from __future__ import annotations

import threading
import time
from contextlib import contextmanager
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable, Generator

__all__ = ["RWLock"]


class RWLock:
    """Readers-writer lock with writer preference.

    Example:
        >>> lock = RWLock()
        >>> with lock.read():
        ...     pass
        >>> with lock.write(timeout=1.0):
        ...     pass
    """

    __slots__ = ("_cond", "_readers", "_waiting_writers", "_writer")

    def __init__(self) -> None:
        self._cond = threading.Condition(threading.Lock())
        # thread id -> reentrant depth
        self._readers: dict[int, int] = {}
        self._writer: int | None = None
        self._waiting_writers = 0

    @contextmanager
    def read(self, timeout: float | None = None) -> Generator[None]:
        """Hold the shared side for the duration of the block.

        Raises:
            RuntimeError: If this thread holds the write side.
            TimeoutError: If the lock is not acquired within timeout seconds.
            ValueError: If timeout is negative.
        """
        self._acquire_read(timeout)
        try:
            yield
        finally:
            self._release_read()

    @contextmanager
    def write(self, timeout: float | None = None) -> Generator[None]:
        """Hold the exclusive side for the duration of the block.

        Raises:
            RuntimeError: If this thread already holds either side.
            TimeoutError: If the lock is not acquired within timeout seconds.
            ValueError: If timeout is negative.
        """
        self._acquire_write(timeout)
        try:
            yield
        finally:
            self._release_write()

    def _wait_until(
        self, ready: Callable[[], bool], timeout: float | None, side: str
    ) -> None:
        # Caller holds self._cond.
        deadline = None if timeout is None else time.monotonic() + timeout
        while not ready():
            if deadline is None:
                self._cond.wait()
                continue
            remaining = deadline - time.monotonic()
            if remaining <= 0:
                msg = f"Timed out waiting for {side} lock"
                raise TimeoutError(msg)
            self._cond.wait(timeout=remaining)

    @staticmethod
    def _check_timeout(timeout: float | None) -> None:
        if timeout is not None and timeout < 0:
            msg = f"Timeout must be non-negative, got {timeout}"
            raise ValueError(msg)

    def _acquire_read(self, timeout: float | None) -> None:
        self._check_timeout(timeout)
        me = threading.get_ident()

        with self._cond:
            if me in self._readers:
                self._readers[me] += 1
                return
            if self._writer == me:
                msg = "Cannot acquire read lock while holding write lock"
                raise RuntimeError(msg)

            self._wait_until(
                lambda: self._writer is None and self._waiting_writers == 0,
                timeout,
                "read",
            )
            self._readers[me] = 1

    def _release_read(self) -> None:
        me = threading.get_ident()

        with self._cond:
            depth = self._readers.get(me)
            if depth is None:
                msg = "Thread does not hold read lock"
                raise RuntimeError(msg)
            if depth > 1:
                self._readers[me] = depth - 1
                return
            del self._readers[me]
            if not self._readers:
                self._cond.notify_all()

    def _acquire_write(self, timeout: float | None) -> None:
        self._check_timeout(timeout)
        me = threading.get_ident()

        with self._cond:
            if me in self._readers:
                msg = "Cannot upgrade read lock to write lock"
                raise RuntimeError(msg)
            if self._writer == me:
                msg = "Write lock is not reentrant"
                raise RuntimeError(msg)

            self._waiting_writers += 1
            try:
                self._wait_until(
                    lambda: self._writer is None and not self._readers,
                    timeout,
                    "write",
                )
                self._writer = me
            finally:
                # Readers blocked on _waiting_writers must re-check, including
                # after a timed-out writer gives up.
                self._waiting_writers -= 1
                self._cond.notify_all()

    def _release_write(self) -> None:
        with self._cond:
            if self._writer != threading.get_ident():
                msg = "Thread does not hold write lock"
                raise RuntimeError(msg)
            self._writer = None
            self._cond.notify_all()

    @property
    def reader_count(self) -> int:
        """Distinct threads currently holding the read side."""
        with self._cond:
            return len(self._readers)

    @property
    def writer_active(self) -> bool:
        with self._cond:
            return self._writer is not None
