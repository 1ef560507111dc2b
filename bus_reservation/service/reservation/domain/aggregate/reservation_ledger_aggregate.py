"""
Reservation Ledger Aggregate - Aggregate Root for Bus Reservations

[DDD Design Principles]
- ReservationLedger is the Aggregate Root
- Bus and SeatCell are entities within the aggregate
- Adapters only ever receive value-object snapshots (BusSummary, SeatMap, TicketInfo)

[Business Invariants]
- Bus numbers are unique across the ledger
- Every bus has exactly MAX_SEATS cells for its lifetime
- A canonical ticket id identifies at most one occupied cell
- Every failed operation leaves the ledger untouched
"""

from typing import Iterator, List, Set, Tuple

import attrs

from bus_reservation.platform.exception.exceptions import (
    CapacityExceededError,
    DuplicateKeyError,
    EmptyCollectionError,
    InvalidFormatError,
    NotFoundError,
    SeatTakenError,
    TicketIdExhaustedError,
)
from bus_reservation.platform.logging.loguru_io import Logger
from bus_reservation.service.reservation.domain.entity.bus_entity import Bus, SeatCell
from bus_reservation.service.reservation.domain.enum.operation_outcome import OperationOutcome
from bus_reservation.service.reservation.domain.service.i_ticket_id_generator import (
    ITicketIdGenerator,
)
from bus_reservation.service.reservation.domain.validators import (
    validate_bus_number,
    validate_non_empty,
    validate_time,
)
from bus_reservation.service.reservation.domain.value_object.operation_result import (
    CancelTicketResult,
    DeleteBusResult,
)
from bus_reservation.service.reservation.domain.value_object.seat_position import (
    SeatPosition,
    all_positions,
)
from bus_reservation.service.reservation.domain.value_object.ticket_info import (
    BusSummary,
    SeatMap,
    TicketInfo,
)


DEFAULT_MAX_BUSES = 25
DEFAULT_TICKET_ID_MAX_ATTEMPTS = 10


def canonical_ticket_id(ticket_id: str) -> str:
    return ticket_id.lower()


@attrs.define
class ReservationLedger:
    max_buses: int = DEFAULT_MAX_BUSES
    # Insertion-ordered; bus count is always len(buses)
    buses: List[Bus] = attrs.field(factory=list)

    @property
    def bus_count(self) -> int:
        return len(self.buses)

    def _get_bus(self, bus_number: str) -> Bus | None:
        for bus in self.buses:
            if bus.bus_number == bus_number:
                return bus
        return None

    def _require_bus(self, bus_number: str) -> Bus:
        bus = self._get_bus(bus_number)
        if bus is None:
            raise NotFoundError(f'Bus with number {bus_number} not found.')
        return bus

    def _occupied_cells(self) -> Iterator[Tuple[Bus, SeatPosition, SeatCell]]:
        # Scan order: bus, then row, then column
        for bus in self.buses:
            for position in all_positions():
                cell = bus.cell_at(position)
                if cell.is_occupied:
                    yield bus, position, cell

    def _locate_ticket(self, ticket_id: str) -> Tuple[Bus, SeatPosition, SeatCell]:
        wanted = canonical_ticket_id(ticket_id)
        for bus, position, cell in self._occupied_cells():
            if canonical_ticket_id(cell.ticket_id) == wanted:
                return bus, position, cell
        raise NotFoundError(f'Ticket with ID {ticket_id} not found.')

    def ensure_capacity(self) -> None:
        if self.bus_count >= self.max_buses:
            raise CapacityExceededError('Cannot add more buses. Maximum limit reached.')

    @Logger.io
    def add_bus(
        self,
        *,
        bus_number: str,
        driver_name: str,
        arrival_time: str,
        departure_time: str,
        origin: str,
        destination: str,
    ) -> Bus:
        """
        Register a new bus with an all-vacant seat grid.

        Checks run in a fixed order and the first failure wins; nothing is
        mutated unless every check passes.
        """
        self.ensure_capacity()
        if not validate_bus_number(bus_number):
            raise InvalidFormatError(
                'Invalid bus number format. Please enter a valid 4-digit bus number.'
            )
        if self._get_bus(bus_number) is not None:
            raise DuplicateKeyError('Bus number already exists. Please enter a unique bus number.')
        if not validate_non_empty(driver_name):
            raise InvalidFormatError("Driver's name cannot be empty. Please re-enter.")
        if not validate_time(arrival_time):
            raise InvalidFormatError(
                'Invalid arrival time format. Please enter time in the format HH:MM AM/PM.'
            )
        if not validate_time(departure_time):
            raise InvalidFormatError(
                'Invalid departure time format. Please enter time in the format HH:MM AM/PM.'
            )
        if not validate_non_empty(origin):
            raise InvalidFormatError('Source cannot be empty. Please re-enter.')
        if not validate_non_empty(destination):
            raise InvalidFormatError('Destination cannot be empty. Please re-enter.')

        bus = Bus(
            bus_number=bus_number,
            driver_name=driver_name,
            arrival_time=arrival_time,
            departure_time=departure_time,
            origin=origin,
            destination=destination,
        )
        self.buses.append(bus)
        return bus

    @Logger.io
    def allot_seat(
        self,
        *,
        bus_number: str,
        seat_number: int | str | float,
        passenger_name: str,
        ticket_id_generator: ITicketIdGenerator,
        max_attempts: int = DEFAULT_TICKET_ID_MAX_ATTEMPTS,
    ) -> TicketInfo:
        """
        Book one vacant seat and issue a ticket id for it.

        The first booking of a seat wins; a second attempt raises SeatTakenError
        and leaves the occupant untouched. Generated ids colliding with an
        already issued one are re-rolled up to max_attempts times.
        """
        bus = self._require_bus(bus_number)
        position = SeatPosition.parse(seat_number)
        cell = bus.cell_at(position)
        if cell.is_occupied:
            raise SeatTakenError(
                f'Seat number {position.seat_number} is already occupied. '
                'Please select another seat.'
            )
        if not validate_non_empty(passenger_name):
            raise InvalidFormatError('Passenger name cannot be empty. Please re-enter.')

        ticket_id = self._issue_ticket_id(
            ticket_id_generator=ticket_id_generator, max_attempts=max_attempts
        )
        cell.occupy(passenger_name=passenger_name, ticket_id=ticket_id)
        return TicketInfo(
            passenger_name=passenger_name,
            ticket_id=ticket_id,
            bus_number=bus.bus_number,
            seat_number=position.seat_number,
        )

    def _issue_ticket_id(
        self, *, ticket_id_generator: ITicketIdGenerator, max_attempts: int
    ) -> str:
        issued = self.issued_ticket_ids()
        for attempt in range(1, max_attempts + 1):
            candidate = canonical_ticket_id(ticket_id_generator.generate())
            if candidate not in issued:
                return candidate
            Logger.base.warning(
                f'🎲 [TICKET] Generated id collided with an issued ticket, re-rolling '
                f'(attempt {attempt}/{max_attempts})'
            )
        raise TicketIdExhaustedError(
            f'Could not generate a unique ticket ID after {max_attempts} attempts.'
        )

    @Logger.io
    def show_seats(self, *, bus_number: str) -> SeatMap:
        bus = self._require_bus(bus_number)
        return SeatMap(bus=bus.to_summary(), seats=bus.seat_views())

    @Logger.io
    def list_buses(self) -> List[BusSummary]:
        if not self.buses:
            raise EmptyCollectionError('No buses available at the moment.')
        return [bus.to_summary() for bus in self.buses]

    @Logger.io
    def delete_bus(self, *, bus_number: str, confirmed: bool) -> DeleteBusResult:
        bus = self._require_bus(bus_number)
        if not confirmed:
            return DeleteBusResult(bus_number=bus_number, outcome=OperationOutcome.ABORTED)
        # Tickets on the removed bus become unreachable with it
        self.buses.remove(bus)
        return DeleteBusResult(bus_number=bus_number, outcome=OperationOutcome.COMPLETED)

    @Logger.io
    def find_ticket(self, *, ticket_id: str) -> TicketInfo:
        bus, position, cell = self._locate_ticket(ticket_id)
        return TicketInfo(
            passenger_name=cell.passenger_name,
            ticket_id=cell.ticket_id,
            bus_number=bus.bus_number,
            seat_number=position.seat_number,
        )

    @Logger.io
    def cancel_ticket(self, *, ticket_id: str, confirmed: bool) -> CancelTicketResult:
        bus, position, cell = self._locate_ticket(ticket_id)
        ticket = TicketInfo(
            passenger_name=cell.passenger_name,
            ticket_id=cell.ticket_id,
            bus_number=bus.bus_number,
            seat_number=position.seat_number,
        )
        if not confirmed:
            return CancelTicketResult(ticket=ticket, outcome=OperationOutcome.ABORTED)
        cell.vacate()
        return CancelTicketResult(ticket=ticket, outcome=OperationOutcome.COMPLETED)

    def issued_ticket_ids(self) -> Set[str]:
        return {canonical_ticket_id(cell.ticket_id) for _, _, cell in self._occupied_cells()}
