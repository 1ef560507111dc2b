from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from bus_reservation.platform.config.di import Container
from bus_reservation.platform.logging.loguru_io import Logger
from bus_reservation.service.reservation.app.interface.i_ledger_store import ILedgerStore
from bus_reservation.service.reservation.domain.value_object.ticket_info import BusSummary


class AddBusUseCase:
    def __init__(self, *, ledger_store: ILedgerStore) -> None:
        self.ledger_store = ledger_store

    @classmethod
    @inject
    def depends(
        cls,
        ledger_store: ILedgerStore = Depends(Provide[Container.ledger_store]),
    ) -> Self:
        return cls(ledger_store=ledger_store)

    def ensure_capacity(self) -> None:
        """Fail early when the fleet is full, before any bus details are collected."""
        with self.ledger_store.read() as ledger:
            ledger.ensure_capacity()

    @Logger.io
    def execute(
        self,
        *,
        bus_number: str,
        driver_name: str,
        arrival_time: str,
        departure_time: str,
        origin: str,
        destination: str,
    ) -> BusSummary:
        with self.ledger_store.write() as ledger:
            bus = ledger.add_bus(
                bus_number=bus_number,
                driver_name=driver_name,
                arrival_time=arrival_time,
                departure_time=departure_time,
                origin=origin,
                destination=destination,
            )
            summary = bus.to_summary()
            total = ledger.bus_count

        Logger.base.info(
            f'🚌 [BUS] Added bus {bus_number} ({origin} -> {destination}), {total} in service'
        )
        return summary
