from collections.abc import Iterator
from contextlib import contextmanager

from bus_reservation.platform.state.read_write_lock import ReadWriteLock
from bus_reservation.service.reservation.app.interface.i_ledger_store import ILedgerStore
from bus_reservation.service.reservation.domain.aggregate.reservation_ledger_aggregate import (
    DEFAULT_MAX_BUSES,
    ReservationLedger,
)


class InMemoryLedgerStore(ILedgerStore):
    """Volatile ledger living for one process run."""

    def __init__(self, *, max_buses: int = DEFAULT_MAX_BUSES) -> None:
        self._ledger = ReservationLedger(max_buses=max_buses)
        self._lock = ReadWriteLock()

    @contextmanager
    def read(self) -> Iterator[ReservationLedger]:
        with self._lock.read_lock():
            yield self._ledger

    @contextmanager
    def write(self) -> Iterator[ReservationLedger]:
        with self._lock.write_lock():
            yield self._ledger
