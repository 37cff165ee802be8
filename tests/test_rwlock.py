"""Tests for the registry readers-writer lock.

Tests:
- Shared and exclusive acquisition
- Reentrancy rules and the RuntimeErrors for forbidden transitions
- Timeouts
"""

import threading

import pytest

from moneypattern.runtime import RWLock


class TestAcquisition:
    """Basic shared and exclusive acquisition."""

    def test_read_then_write(self) -> None:
        lock = RWLock()

        with lock.read():
            assert lock.reader_count == 1
        with lock.write():
            assert lock.writer_active

        assert lock.reader_count == 0
        assert not lock.writer_active

    def test_read_is_reentrant(self) -> None:
        lock = RWLock()

        with lock.read(), lock.read():
            assert lock.reader_count == 1

        assert lock.reader_count == 0

    def test_readers_share_the_lock(self) -> None:
        """A second thread reads while the first still holds the read side."""
        lock = RWLock()
        acquired = threading.Event()
        release = threading.Event()

        def hold_read() -> None:
            with lock.read():
                acquired.set()
                release.wait(timeout=5)

        holder = threading.Thread(target=hold_read)
        holder.start()
        try:
            assert acquired.wait(timeout=5)
            with lock.read(timeout=1.0):
                assert lock.reader_count == 2
        finally:
            release.set()
            holder.join()

    def test_lock_released_on_exception(self) -> None:
        lock = RWLock()

        with pytest.raises(KeyError), lock.write():
            raise KeyError("boom")

        assert not lock.writer_active


class TestForbiddenTransitions:
    """Upgrades and write reentry raise RuntimeError."""

    def test_upgrade_raises(self) -> None:
        lock = RWLock()

        with lock.read(), pytest.raises(RuntimeError, match="upgrade"):
            with lock.write():
                pass

    def test_write_reentry_raises(self) -> None:
        lock = RWLock()

        with lock.write(), pytest.raises(RuntimeError, match="not reentrant"):
            with lock.write():
                pass

    def test_read_while_writing_raises(self) -> None:
        lock = RWLock()

        with lock.write(), pytest.raises(RuntimeError, match="holding write lock"):
            with lock.read():
                pass

    def test_negative_timeout_raises(self) -> None:
        lock = RWLock()

        with pytest.raises(ValueError, match="non-negative"), lock.read(timeout=-1):
            pass


class TestTimeouts:
    """A timeout raises TimeoutError and leaves the lock usable."""

    def test_writer_times_out_while_reader_holds(self) -> None:
        lock = RWLock()
        acquired = threading.Event()
        release = threading.Event()

        def hold_read() -> None:
            with lock.read():
                acquired.set()
                release.wait(timeout=5)

        holder = threading.Thread(target=hold_read)
        holder.start()
        try:
            assert acquired.wait(timeout=5)
            with pytest.raises(TimeoutError), lock.write(timeout=0.05):
                pass
        finally:
            release.set()
            holder.join()

        with lock.write(timeout=1.0):
            assert lock.writer_active

    def test_reader_times_out_while_writer_holds(self) -> None:
        lock = RWLock()
        acquired = threading.Event()
        release = threading.Event()

        def hold_write() -> None:
            with lock.write():
                acquired.set()
                release.wait(timeout=5)

        holder = threading.Thread(target=hold_write)
        holder.start()
        try:
            assert acquired.wait(timeout=5)
            with pytest.raises(TimeoutError), lock.read(timeout=0.05):
                pass
        finally:
            release.set()
            holder.join()

        with lock.read(timeout=1.0):
            assert lock.reader_count == 1

    def test_zero_timeout_on_free_lock_succeeds(self) -> None:
        lock = RWLock()

        with lock.write(timeout=0):
            assert lock.writer_active
