from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from bus_reservation.platform.config.core_setting import Settings
from bus_reservation.platform.config.di import Container
from bus_reservation.platform.logging.loguru_io import Logger
from bus_reservation.service.reservation.app.interface.i_ledger_store import ILedgerStore
from bus_reservation.service.reservation.domain.service.i_ticket_id_generator import (
    ITicketIdGenerator,
)
from bus_reservation.service.reservation.domain.value_object.ticket_info import TicketInfo


class AllotSeatUseCase:
    """
    Reserve one seat on a bus.

    The occupancy check and the write of the new ticket happen under one write
    lock, so two concurrent bookings of the same vacant seat cannot both win.
    """

    def __init__(
        self,
        *,
        ledger_store: ILedgerStore,
        ticket_id_generator: ITicketIdGenerator,
        ticket_id_max_attempts: int,
    ) -> None:
        self.ledger_store = ledger_store
        self.ticket_id_generator = ticket_id_generator
        self.ticket_id_max_attempts = ticket_id_max_attempts

    @classmethod
    @inject
    def depends(
        cls,
        ledger_store: ILedgerStore = Depends(Provide[Container.ledger_store]),
        ticket_id_generator: ITicketIdGenerator = Depends(Provide[Container.ticket_id_generator]),
        config_service: Settings = Depends(Provide[Container.config_service]),
    ) -> Self:
        return cls(
            ledger_store=ledger_store,
            ticket_id_generator=ticket_id_generator,
            ticket_id_max_attempts=config_service.TICKET_ID_MAX_ATTEMPTS,
        )

    @Logger.io
    def execute(
        self, *, bus_number: str, seat_number: int | str | float, passenger_name: str
    ) -> TicketInfo:
        with self.ledger_store.write() as ledger:
            ticket = ledger.allot_seat(
                bus_number=bus_number,
                seat_number=seat_number,
                passenger_name=passenger_name,
                ticket_id_generator=self.ticket_id_generator,
                max_attempts=self.ticket_id_max_attempts,
            )

        Logger.base.info(
            f'🎫 [SEAT] Allotted seat {ticket.seat_number} on bus {ticket.bus_number} '
            f'(ticket {ticket.ticket_id})'
        )
        return ticket
