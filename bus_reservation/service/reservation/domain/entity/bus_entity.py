from typing import List

import attrs

from bus_reservation.service.reservation.domain.value_object.seat_position import (
    MAX_SEATS,
    SeatPosition,
    all_positions,
)
from bus_reservation.service.reservation.domain.value_object.ticket_info import (
    BusSummary,
    SeatView,
)


@attrs.define
class SeatCell:
    """One seat of the grid; both fields empty when vacant, both set when occupied."""

    passenger_name: str = ''
    ticket_id: str = ''

    @property
    def is_occupied(self) -> bool:
        return self.ticket_id != ''

    def occupy(self, *, passenger_name: str, ticket_id: str) -> None:
        if not passenger_name or not ticket_id:
            raise ValueError('Occupied seat needs both passenger name and ticket id')
        self.passenger_name = passenger_name
        self.ticket_id = ticket_id

    def vacate(self) -> None:
        self.passenger_name = ''
        self.ticket_id = ''


def _empty_grid() -> List[SeatCell]:
    return [SeatCell() for _ in range(MAX_SEATS)]


@attrs.define
class Bus:
    bus_number: str = attrs.field(on_setattr=attrs.setters.frozen)
    driver_name: str
    arrival_time: str
    departure_time: str
    origin: str
    destination: str
    # Flat row-major grid, always MAX_SEATS long
    seats: List[SeatCell] = attrs.field(factory=_empty_grid, on_setattr=attrs.setters.frozen)

    def cell_at(self, position: SeatPosition) -> SeatCell:
        return self.seats[position.index]

    @property
    def empty_seat_count(self) -> int:
        return sum(1 for cell in self.seats if not cell.is_occupied)

    def to_summary(self) -> BusSummary:
        return BusSummary(
            bus_number=self.bus_number,
            driver_name=self.driver_name,
            arrival_time=self.arrival_time,
            departure_time=self.departure_time,
            origin=self.origin,
            destination=self.destination,
            empty_seat_count=self.empty_seat_count,
        )

    def seat_views(self) -> List[SeatView]:
        return [
            SeatView(
                seat_number=position.seat_number,
                row=position.row,
                col=position.col,
                passenger_name=self.cell_at(position).passenger_name,
                is_occupied=self.cell_at(position).is_occupied,
            )
            for position in all_positions()
        ]
