"""
Unit tests for the reservation use cases

Each use case runs against a real in-memory store; lock usage is verified
with a Mock wrapping the store.
"""

from unittest.mock import MagicMock

import pytest

from bus_reservation.platform.exception.exceptions import (
    EmptyCollectionError,
    NotFoundError,
    SeatTakenError,
    TicketIdExhaustedError,
)
from bus_reservation.service.reservation.app.command.add_bus_use_case import AddBusUseCase
from bus_reservation.service.reservation.app.command.allot_seat_use_case import (
    AllotSeatUseCase,
)
from bus_reservation.service.reservation.app.command.cancel_ticket_use_case import (
    CancelTicketUseCase,
)
from bus_reservation.service.reservation.app.command.delete_bus_use_case import (
    DeleteBusUseCase,
)
from bus_reservation.service.reservation.app.query.find_ticket_use_case import FindTicketUseCase
from bus_reservation.service.reservation.app.query.list_buses_use_case import ListBusesUseCase
from bus_reservation.service.reservation.app.query.show_seats_use_case import ShowSeatsUseCase
from bus_reservation.service.reservation.domain.enum.operation_outcome import OperationOutcome


pytestmark = pytest.mark.unit


@pytest.fixture
def spy_store(ledger_store):
    """Wraps the store so calls to read()/write() can be asserted."""
    spy = MagicMock(wraps=ledger_store)
    spy.read.side_effect = ledger_store.read
    spy.write.side_effect = ledger_store.write
    return spy


@pytest.fixture
def allot_use_case(ledger_store, ticket_id_generator) -> AllotSeatUseCase:
    return AllotSeatUseCase(
        ledger_store=ledger_store,
        ticket_id_generator=ticket_id_generator,
        ticket_id_max_attempts=10,
    )


@pytest.fixture
def seeded_store(ledger_store, bus_fields):
    AddBusUseCase(ledger_store=ledger_store).execute(**bus_fields())
    return ledger_store


class TestCommandsTakeWriteLock:
    def test_add_bus(self, spy_store, bus_fields) -> None:
        summary = AddBusUseCase(ledger_store=spy_store).execute(**bus_fields())

        assert summary.bus_number == '1234'
        spy_store.write.assert_called_once()
        spy_store.read.assert_not_called()

    def test_allot_seat(self, spy_store, bus_fields, ticket_id_generator) -> None:
        AddBusUseCase(ledger_store=spy_store).execute(**bus_fields())
        spy_store.reset_mock()

        AllotSeatUseCase(
            ledger_store=spy_store,
            ticket_id_generator=ticket_id_generator,
            ticket_id_max_attempts=10,
        ).execute(bus_number='1234', seat_number=1, passenger_name='Alice')

        spy_store.write.assert_called_once()

    def test_queries_take_read_lock(self, spy_store, bus_fields) -> None:
        AddBusUseCase(ledger_store=spy_store).execute(**bus_fields())
        spy_store.reset_mock()

        ListBusesUseCase(ledger_store=spy_store).execute()
        ShowSeatsUseCase(ledger_store=spy_store).execute(bus_number='1234')

        assert spy_store.read.call_count == 2
        spy_store.write.assert_not_called()

    def test_capacity_check_takes_read_lock(self, spy_store) -> None:
        AddBusUseCase(ledger_store=spy_store).ensure_capacity()

        spy_store.read.assert_called_once()
        spy_store.write.assert_not_called()


class TestAllotSeatUseCase:
    def test_returns_ticket(self, seeded_store, allot_use_case) -> None:
        # Given: a bus with all seats free
        # When: seat 3 is allotted
        ticket = allot_use_case.execute(bus_number='1234', seat_number=3, passenger_name='Alice')

        # Then: the ticket points at that seat and can be found again
        assert ticket.seat_number == 3
        found = FindTicketUseCase(ledger_store=seeded_store).execute(ticket_id=ticket.ticket_id)
        assert found == ticket

    def test_seat_taken_propagates(self, seeded_store, allot_use_case) -> None:
        allot_use_case.execute(bus_number='1234', seat_number=3, passenger_name='Alice')

        with pytest.raises(SeatTakenError):
            allot_use_case.execute(bus_number='1234', seat_number=3, passenger_name='Bob')

    def test_store_lock_is_released_after_error(self, seeded_store, allot_use_case) -> None:
        with pytest.raises(NotFoundError):
            allot_use_case.execute(bus_number='0000', seat_number=1, passenger_name='Alice')

        # A second writer would block forever if the lock leaked
        ticket = allot_use_case.execute(bus_number='1234', seat_number=1, passenger_name='Alice')
        assert ticket.seat_number == 1

    def test_uses_configured_attempt_budget(self, seeded_store, make_ticket_id_generator) -> None:
        generator = make_ticket_id_generator(['dup00000', 'dup00000', 'dup00000'])
        use_case = AllotSeatUseCase(
            ledger_store=seeded_store,
            ticket_id_generator=generator,
            ticket_id_max_attempts=2,
        )
        use_case.execute(bus_number='1234', seat_number=1, passenger_name='Alice')

        with pytest.raises(TicketIdExhaustedError, match='after 2 attempts'):
            use_case.execute(bus_number='1234', seat_number=2, passenger_name='Bob')

        assert generator.calls == 3


class TestDeleteAndCancelUseCases:
    def test_delete_bus(self, seeded_store) -> None:
        use_case = DeleteBusUseCase(ledger_store=seeded_store)

        declined = use_case.execute(bus_number='1234', confirmed=False)
        assert declined.outcome is OperationOutcome.ABORTED
        deleted = use_case.execute(bus_number='1234', confirmed=True)
        assert deleted.outcome is OperationOutcome.COMPLETED
        with pytest.raises(EmptyCollectionError):
            ListBusesUseCase(ledger_store=seeded_store).execute()

    def test_cancel_ticket(self, seeded_store, allot_use_case) -> None:
        ticket = allot_use_case.execute(bus_number='1234', seat_number=8, passenger_name='Alice')
        use_case = CancelTicketUseCase(ledger_store=seeded_store)

        declined = use_case.execute(ticket_id=ticket.ticket_id, confirmed=False)
        cancelled = use_case.execute(ticket_id=ticket.ticket_id, confirmed=True)

        assert declined.outcome is OperationOutcome.ABORTED
        assert cancelled.outcome is OperationOutcome.COMPLETED
        assert cancelled.ticket == ticket
        seat_map = ShowSeatsUseCase(ledger_store=seeded_store).execute(bus_number='1234')
        assert not seat_map.occupancy[7]
