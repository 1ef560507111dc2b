from typing import List, Optional

from pydantic import BaseModel

from bus_reservation.service.reservation.domain.value_object.ticket_info import (
    BusSummary,
    SeatMap,
)


class BusCreateRequest(BaseModel):
    # Formats are enforced by the ledger so errors carry their domain kind
    bus_number: str
    driver_name: str
    arrival_time: str
    departure_time: str
    origin: str
    destination: str

    class Config:
        json_schema_extra = {
            'example': {
                'bus_number': '1234',
                'driver_name': 'Jane',
                'arrival_time': '09:00 AM',
                'departure_time': '05:30 PM',
                'origin': 'Springfield',
                'destination': 'Shelbyville',
            }
        }


class BusResponse(BaseModel):
    model_config = {
        'json_schema_extra': {
            'example': {
                'bus_number': '1234',
                'driver_name': 'Jane',
                'arrival_time': '09:00 AM',
                'departure_time': '05:30 PM',
                'origin': 'Springfield',
                'destination': 'Shelbyville',
                'empty_seat_count': 32,
                'total_seats': 32,
            }
        },
    }

    bus_number: str
    driver_name: str
    arrival_time: str
    departure_time: str
    origin: str
    destination: str
    empty_seat_count: int
    total_seats: int

    @classmethod
    def from_summary(cls, summary: BusSummary) -> 'BusResponse':
        return cls(
            bus_number=summary.bus_number,
            driver_name=summary.driver_name,
            arrival_time=summary.arrival_time,
            departure_time=summary.departure_time,
            origin=summary.origin,
            destination=summary.destination,
            empty_seat_count=summary.empty_seat_count,
            total_seats=summary.total_seats,
        )


class BusListResponse(BaseModel):
    buses: List[BusResponse]
    message: Optional[str] = None  # Set when no bus is registered


class SeatResponse(BaseModel):
    seat_number: int
    row: int
    col: int
    passenger_name: str
    is_occupied: bool


class SeatMapResponse(BaseModel):
    bus: BusResponse
    seats: List[SeatResponse]
    empty_seat_count: int

    @classmethod
    def from_seat_map(cls, seat_map: SeatMap) -> 'SeatMapResponse':
        return cls(
            bus=BusResponse.from_summary(seat_map.bus),
            seats=[
                SeatResponse(
                    seat_number=seat.seat_number,
                    row=seat.row,
                    col=seat.col,
                    passenger_name=seat.passenger_name,
                    is_occupied=seat.is_occupied,
                )
                for seat in seat_map.seats
            ],
            empty_seat_count=seat_map.empty_seat_count,
        )


class DeleteBusResponse(BaseModel):
    bus_number: str
    outcome: str
    message: str
