from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from bus_reservation.platform.config.di import Container
from bus_reservation.platform.logging.loguru_io import Logger
from bus_reservation.service.reservation.app.interface.i_ledger_store import ILedgerStore
from bus_reservation.service.reservation.domain.enum.operation_outcome import OperationOutcome
from bus_reservation.service.reservation.domain.value_object.operation_result import (
    DeleteBusResult,
)


class DeleteBusUseCase:
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
    def execute(self, *, bus_number: str, confirmed: bool) -> DeleteBusResult:
        with self.ledger_store.write() as ledger:
            result = ledger.delete_bus(bus_number=bus_number, confirmed=confirmed)

        if result.outcome is OperationOutcome.COMPLETED:
            Logger.base.info(f'🗑️  [BUS] Deleted bus {bus_number}')
        else:
            Logger.base.info(f'↩️  [BUS] Deletion of bus {bus_number} not confirmed')
        return result
