"""
Concurrency tests for InMemoryLedgerStore

Many threads race to book the same seats; the write lock must let exactly
one booking per seat succeed.
"""

from concurrent.futures import ThreadPoolExecutor
import threading

import pytest

from bus_reservation.platform.exception.exceptions import SeatTakenError
from bus_reservation.service.reservation.app.command.allot_seat_use_case import (
    AllotSeatUseCase,
)
from bus_reservation.service.reservation.domain.value_object.seat_position import MAX_SEATS
from bus_reservation.service.reservation.driven_adapter.random_ticket_id_generator import (
    RandomTicketIdGenerator,
)
from bus_reservation.service.reservation.driven_adapter.state.in_memory_ledger_store import (
    InMemoryLedgerStore,
)


pytestmark = pytest.mark.unit


class TestInMemoryLedgerStore:
    def test_read_and_write_yield_the_same_ledger(self, ledger_store) -> None:
        with ledger_store.write() as ledger:
            written = ledger
        with ledger_store.read() as ledger:
            assert ledger is written

    def test_capacity_comes_from_constructor(self) -> None:
        store = InMemoryLedgerStore(max_buses=3)

        with store.read() as ledger:
            assert ledger.max_buses == 3

    def test_concurrent_bookings_of_one_seat(self, ledger_store, bus_fields) -> None:
        with ledger_store.write() as ledger:
            ledger.add_bus(**bus_fields())
        use_case = AllotSeatUseCase(
            ledger_store=ledger_store,
            ticket_id_generator=RandomTicketIdGenerator(),
            ticket_id_max_attempts=10,
        )
        start = threading.Barrier(16)

        def book(passenger_index: int) -> str:
            start.wait()
            try:
                use_case.execute(
                    bus_number='1234', seat_number=1, passenger_name=f'P{passenger_index}'
                )
                return 'ok'
            except SeatTakenError:
                return 'taken'

        with ThreadPoolExecutor(max_workers=16) as pool:
            outcomes = list(pool.map(book, range(16)))

        assert outcomes.count('ok') == 1
        assert outcomes.count('taken') == 15
        with ledger_store.read() as ledger:
            assert ledger.show_seats(bus_number='1234').empty_seat_count == MAX_SEATS - 1

    def test_concurrent_bookings_fill_the_bus_with_unique_ids(
        self, ledger_store, bus_fields
    ) -> None:
        with ledger_store.write() as ledger:
            ledger.add_bus(**bus_fields())
        use_case = AllotSeatUseCase(
            ledger_store=ledger_store,
            ticket_id_generator=RandomTicketIdGenerator(),
            ticket_id_max_attempts=10,
        )

        with ThreadPoolExecutor(max_workers=8) as pool:
            tickets = list(
                pool.map(
                    lambda seat: use_case.execute(
                        bus_number='1234', seat_number=seat, passenger_name=f'P{seat}'
                    ),
                    range(1, MAX_SEATS + 1),
                )
            )

        assert len({ticket.ticket_id for ticket in tickets}) == MAX_SEATS
        with ledger_store.read() as ledger:
            assert ledger.issued_ticket_ids() == {ticket.ticket_id for ticket in tickets}
