import threading
import time

import pytest

from bus_reservation.platform.state.read_write_lock import ReadWriteLock


pytestmark = pytest.mark.unit


class TestReadWriteLock:
    def test_readers_share_the_lock(self) -> None:
        lock = ReadWriteLock()
        both_inside = threading.Barrier(2, timeout=2)

        def reader() -> None:
            with lock.read_lock():
                # Both readers must reach the barrier while holding the lock
                both_inside.wait()

        threads = [threading.Thread(target=reader) for _ in range(2)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join(timeout=3)

        assert not both_inside.broken

    def test_writer_excludes_readers(self) -> None:
        lock = ReadWriteLock()
        events: list[str] = []

        def reader() -> None:
            with lock.read_lock():
                events.append('read')

        with lock.write_lock():
            thread = threading.Thread(target=reader)
            thread.start()
            time.sleep(0.05)
            events.append('write-done')
        thread.join(timeout=2)

        assert events == ['write-done', 'read']

    def test_waiting_writer_blocks_new_readers(self) -> None:
        lock = ReadWriteLock()
        events: list[str] = []
        lock.acquire_read()

        def writer() -> None:
            with lock.write_lock():
                events.append('write')

        def late_reader() -> None:
            with lock.read_lock():
                events.append('late-read')

        writer_thread = threading.Thread(target=writer)
        writer_thread.start()
        time.sleep(0.05)
        reader_thread = threading.Thread(target=late_reader)
        reader_thread.start()
        time.sleep(0.05)

        assert events == []
        lock.release_read()
        writer_thread.join(timeout=2)
        reader_thread.join(timeout=2)

        assert events == ['write', 'late-read']

    def test_lock_is_released_when_body_raises(self) -> None:
        lock = ReadWriteLock()

        with pytest.raises(RuntimeError, match='boom'):
            with lock.write_lock():
                raise RuntimeError('boom')

        with lock.read_lock():
            pass

    def test_unbalanced_release_is_an_error(self) -> None:
        lock = ReadWriteLock()

        with pytest.raises(RuntimeError):
            lock.release_read()
        with pytest.raises(RuntimeError):
            lock.release_write()
