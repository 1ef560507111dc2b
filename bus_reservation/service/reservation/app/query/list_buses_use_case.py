from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from bus_reservation.platform.config.di import Container
from bus_reservation.platform.logging.loguru_io import Logger
from bus_reservation.service.reservation.app.interface.i_ledger_store import ILedgerStore
from bus_reservation.service.reservation.domain.value_object.ticket_info import BusSummary


class ListBusesUseCase:
    def __init__(self, *, ledger_store: ILedgerStore) -> None:
        self.ledger_store = ledger_store

    @classmethod
    @inject
    def depends(
        cls,
        ledger_store: ILedgerStore = Depends(Provide[Container.ledger_store]),
    ) -> Self:
        return cls(ledger_store=ledger_store)

    @Logger.io
    def execute(self) -> List[BusSummary]:
        """Raises EmptyCollectionError when no bus is registered."""
        with self.ledger_store.read() as ledger:
            return ledger.list_buses()
