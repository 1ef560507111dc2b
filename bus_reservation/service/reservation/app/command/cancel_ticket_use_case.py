from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from bus_reservation.platform.config.di import Container
from bus_reservation.platform.logging.loguru_io import Logger
from bus_reservation.service.reservation.app.interface.i_ledger_store import ILedgerStore
from bus_reservation.service.reservation.domain.enum.operation_outcome import OperationOutcome
from bus_reservation.service.reservation.domain.value_object.operation_result import (
    CancelTicketResult,
)


class CancelTicketUseCase:
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
    def execute(self, *, ticket_id: str, confirmed: bool) -> CancelTicketResult:
        """
        Cancel the ticket matching ticket_id (case-insensitive).

        Declining confirmation is not an error: the ticket is returned unchanged
        with outcome ABORTED.
        """
        with self.ledger_store.write() as ledger:
            result = ledger.cancel_ticket(ticket_id=ticket_id, confirmed=confirmed)

        if result.outcome is OperationOutcome.COMPLETED:
            Logger.base.info(
                f'❌ [TICKET] Cancelled ticket {result.ticket.ticket_id} '
                f'(bus {result.ticket.bus_number}, seat {result.ticket.seat_number})'
            )
        return result
