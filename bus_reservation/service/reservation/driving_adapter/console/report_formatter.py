"""
Plain-text reports for the interactive console.

Every function returns the rendered text; printing is left to the caller.
"""

from typing import List

from bus_reservation.service.reservation.domain.value_object.seat_position import (
    MAX_SEATS,
    NUM_COLS,
)
from bus_reservation.service.reservation.domain.value_object.ticket_info import (
    BusSummary,
    SeatMap,
    TicketInfo,
)


RULE_WIDTH = 75
EMPTY_SEAT_LABEL = 'Empty'


def rule(char: str = '*', width: int = RULE_WIDTH) -> str:
    return char * width


def render_menu() -> str:
    options = (
        '1. Add new Bus Details',
        '2. Reserve your seats',
        '3. Show the available seats in a bus',
        '4. Buses Available Now',
        '5. Delete Bus',
        '6. Show Ticket Info',
        '7. Cancel Ticket',
        '8. Exit',
    )
    body = ''.join(f'\t\t\t{option}\n' for option in options)
    return f'{rule()}\n\n\n{body}{rule()}'


def render_bus_header(bus: BusSummary) -> str:
    return (
        f'{rule()}\n'
        f'Bus no: \t{bus.bus_number}\n'
        f'Driver: \t{bus.driver_name}\t\tArrival time: \t{bus.arrival_time}'
        f'\tDeparture time:{bus.departure_time}\n'
        f'From: \t\t{bus.origin}\t\tTo: \t\t{bus.destination}\n'
        f'{rule()}'
    )


def render_seat_grid(seat_map: SeatMap) -> str:
    """Four seats per line as `{number:>5}.{name or Empty:>10}`."""
    lines: List[str] = []
    for start in range(0, len(seat_map.seats), NUM_COLS):
        row = seat_map.seats[start : start + NUM_COLS]
        lines.append(
            ''.join(
                f'{seat.seat_number:>5}.'
                f'{seat.passenger_name if seat.is_occupied else EMPTY_SEAT_LABEL:>10}'
                for seat in row
            )
        )
    return '\n'.join(lines)


def render_available_seats(seat_map: SeatMap) -> str:
    return (
        f'{render_bus_header(seat_map.bus)}\n'
        f'{render_seat_grid(seat_map)}\n\n'
        f'There are {seat_map.empty_seat_count} seats empty in Bus No: {seat_map.bus.bus_number}'
    )


def render_reserved_seats(seat_map: SeatMap) -> str:
    return (
        f'{render_seat_grid(seat_map)}\n\n'
        f'There are {len(seat_map.seats)} seats in Bus No: {seat_map.bus.bus_number}'
    )


def _departure_width(departure_time: str) -> int:
    # Width up to and including the meridiem
    positions = [departure_time.find(c) for c in 'APM' if c in departure_time]
    return min(positions) + 2 if positions else len(departure_time)


def render_bus_list(buses: List[BusSummary]) -> str:
    departure_width = max((_departure_width(bus.departure_time) for bus in buses), default=0)
    blocks = [
        f'{rule()}\n'
        f'Bus no: \t{bus.bus_number}\n'
        f'Driver: \t{bus.driver_name}\t\tArrival time: \t{bus.arrival_time}'
        f'\tDeparture Time: \t{bus.departure_time:<{departure_width}}\n'
        f'From: \t\t{bus.origin}\t\tTo: \t\t\t{bus.destination:<20}\n'
        f'{rule()}\n'
        f'{rule("_")}\n'
        f'Available Seats: {bus.empty_seat_count}/{MAX_SEATS}'
        for bus in buses
    ]
    return '\n'.join(blocks)


def render_ticket(ticket: TicketInfo) -> str:
    return (
        'Ticket Info:\n'
        f'Name: {ticket.passenger_name}\n'
        f'Ticket ID: {ticket.ticket_id}\n'
        f'Bus Number: {ticket.bus_number}\n'
        f'Seat Number: {ticket.seat_number}'
    )


def render_allotment(ticket: TicketInfo) -> str:
    return (
        f'Seat number {ticket.seat_number} allotted to passenger {ticket.passenger_name}.\n'
        f'{render_ticket(ticket)}'
    )
