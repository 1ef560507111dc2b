"""
Readers-Writer Lock

In-process lock guarding the reservation ledger. Sync FastAPI endpoints run
on a thread pool, so queries share the read side while commands hold the
write side across their whole check-and-mutate sequence.
"""

from collections.abc import Iterator
from contextlib import contextmanager
import threading

from bus_reservation.platform.logging.loguru_io import Logger


class ReadWriteLock:
    """
    Writer-preferring: once a writer is waiting, new readers block until it
    has acquired and released the lock.
    """

    def __init__(self) -> None:
        self._condition = threading.Condition(threading.Lock())
        self._active_readers = 0
        self._waiting_writers = 0
        self._writer_active = False

    def acquire_read(self) -> None:
        with self._condition:
            while self._writer_active or self._waiting_writers:
                self._condition.wait()
            self._active_readers += 1

    def release_read(self) -> None:
        with self._condition:
            if self._active_readers == 0:
                raise RuntimeError('release_read called without a matching acquire_read')
            self._active_readers -= 1
            if self._active_readers == 0:
                self._condition.notify_all()

    def acquire_write(self) -> None:
        with self._condition:
            self._waiting_writers += 1
            try:
                while self._writer_active or self._active_readers:
                    self._condition.wait()
            finally:
                self._waiting_writers -= 1
            self._writer_active = True

    def release_write(self) -> None:
        with self._condition:
            if not self._writer_active:
                raise RuntimeError('release_write called without a matching acquire_write')
            self._writer_active = False
            self._condition.notify_all()

    @contextmanager
    def read_lock(self) -> Iterator[None]:
        self.acquire_read()
        try:
            yield
        finally:
            self.release_read()

    @contextmanager
    def write_lock(self) -> Iterator[None]:
        self.acquire_write()
        Logger.base.debug('🔒 [LOCK] Acquired ledger write lock')
        try:
            yield
        finally:
            self.release_write()
            Logger.base.debug('🔓 [LOCK] Released ledger write lock')
