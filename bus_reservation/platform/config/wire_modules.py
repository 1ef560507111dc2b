"""
Wire Modules Configuration

Defines the modules that need dependency injection wiring.
Shared between production and test environments.
"""

from types import ModuleType

from bus_reservation.service.reservation.app.command import (
    add_bus_use_case,
    allot_seat_use_case,
    cancel_ticket_use_case,
    delete_bus_use_case,
)
from bus_reservation.service.reservation.app.query import (
    find_ticket_use_case,
    list_buses_use_case,
    show_seats_use_case,
)


WIRE_MODULES: list[ModuleType] = [
    add_bus_use_case,
    allot_seat_use_case,
    delete_bus_use_case,
    cancel_ticket_use_case,
    list_buses_use_case,
    show_seats_use_case,
    find_ticket_use_case,
]
