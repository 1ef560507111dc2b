"""
Read models handed from the ledger to the driving adapters.

Snapshots only: mutating the ledger afterwards never changes them.
"""

from typing import List

import attrs

from bus_reservation.service.reservation.domain.value_object.seat_position import MAX_SEATS


@attrs.frozen
class TicketInfo:
    passenger_name: str
    ticket_id: str
    bus_number: str
    seat_number: int


@attrs.frozen
class BusSummary:
    bus_number: str
    driver_name: str
    arrival_time: str
    departure_time: str
    origin: str
    destination: str
    empty_seat_count: int
    total_seats: int = MAX_SEATS


@attrs.frozen
class SeatView:
    seat_number: int
    row: int
    col: int
    passenger_name: str
    is_occupied: bool


@attrs.frozen
class SeatMap:
    bus: BusSummary
    seats: List[SeatView]

    @property
    def occupancy(self) -> List[bool]:
        return [seat.is_occupied for seat in self.seats]

    @property
    def empty_seat_count(self) -> int:
        return sum(1 for seat in self.seats if not seat.is_occupied)
