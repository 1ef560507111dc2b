from abc import ABC, abstractmethod
from contextlib import AbstractContextManager

from bus_reservation.service.reservation.domain.aggregate.reservation_ledger_aggregate import (
    ReservationLedger,
)


class ILedgerStore(ABC):
    """Single in-process holder of the reservation ledger."""

    @abstractmethod
    def read(self) -> AbstractContextManager[ReservationLedger]:
        """Shared access for queries; must not mutate the yielded ledger."""
        pass

    @abstractmethod
    def write(self) -> AbstractContextManager[ReservationLedger]:
        """Exclusive access held across a whole check-and-mutate sequence."""
        pass
