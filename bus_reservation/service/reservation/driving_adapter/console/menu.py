#!/usr/bin/env python3
"""
Interactive console for the bus reservation ledger.

Example usage:
    bus-reservation
    bus-reservation --verbose   # keep log lines on the terminal
"""

import argparse
from typing import Callable

from bus_reservation.platform.config.di import Container, container
from bus_reservation.platform.exception.exceptions import CustomBaseError
from bus_reservation.platform.logging.loguru_io import Logger
from bus_reservation.platform.logging.loguru_io_config import console_sink_id
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
from bus_reservation.service.reservation.domain.value_object.seat_position import SeatPosition
from bus_reservation.service.reservation.driving_adapter.console import report_formatter


EXIT_CHOICE = 8

Reader = Callable[[str], str]
Writer = Callable[[str], None]


def _is_yes(answer: str) -> bool:
    return answer.strip()[:1] in ('y', 'Y')


class ConsoleMenu:
    def __init__(
        self,
        *,
        add_bus: AddBusUseCase,
        allot_seat: AllotSeatUseCase,
        show_seats: ShowSeatsUseCase,
        list_buses: ListBusesUseCase,
        delete_bus: DeleteBusUseCase,
        find_ticket: FindTicketUseCase,
        cancel_ticket: CancelTicketUseCase,
        reader: Reader = input,
        writer: Writer = print,
    ) -> None:
        self.add_bus = add_bus
        self.allot_seat = allot_seat
        self.show_seats = show_seats
        self.list_buses = list_buses
        self.delete_bus = delete_bus
        self.find_ticket = find_ticket
        self.cancel_ticket = cancel_ticket
        self.read = reader
        self.write = writer
        self.actions: dict[int, Callable[[], None]] = {
            1: self.handle_add_bus,
            2: self.handle_allot_seat,
            3: self.handle_show_seats,
            4: self.handle_list_buses,
            5: self.handle_delete_bus,
            6: self.handle_find_ticket,
            7: self.handle_cancel_ticket,
        }

    @classmethod
    def from_container(
        cls, di_container: Container, *, reader: Reader = input, writer: Writer = print
    ) -> 'ConsoleMenu':
        ledger_store = di_container.ledger_store()
        return cls(
            add_bus=AddBusUseCase(ledger_store=ledger_store),
            allot_seat=AllotSeatUseCase(
                ledger_store=ledger_store,
                ticket_id_generator=di_container.ticket_id_generator(),
                ticket_id_max_attempts=di_container.config_service().TICKET_ID_MAX_ATTEMPTS,
            ),
            show_seats=ShowSeatsUseCase(ledger_store=ledger_store),
            list_buses=ListBusesUseCase(ledger_store=ledger_store),
            delete_bus=DeleteBusUseCase(ledger_store=ledger_store),
            find_ticket=FindTicketUseCase(ledger_store=ledger_store),
            cancel_ticket=CancelTicketUseCase(ledger_store=ledger_store),
            reader=reader,
            writer=writer,
        )

    def run(self) -> None:
        """Loop until the exit option is chosen or input runs out."""
        while True:
            self.write(report_formatter.render_menu())
            try:
                raw_choice = self.read('\n\t\t\tEnter your choice:-> ')
            except EOFError:
                break

            try:
                choice = int(raw_choice.strip())
            except ValueError:
                self.write('Invalid input. Please enter a valid integer.')
                continue
            if not 1 <= choice <= EXIT_CHOICE:
                self.write(f'Invalid choice. Please enter a number between 1 and {EXIT_CHOICE}.')
                continue
            if choice == EXIT_CHOICE:
                break

            try:
                self.actions[choice]()
            except CustomBaseError as e:
                self.write(e.message)
            except EOFError:
                break

        self.write('Thank You ... Visit Again!')

    def handle_add_bus(self) -> None:
        self.add_bus.ensure_capacity()
        bus = self.add_bus.execute(
            bus_number=self.read('Enter bus number (4 digits): '),
            driver_name=self.read("Enter driver's name: "),
            arrival_time=self.read('Enter arrival time (HH:MM AM/PM): '),
            departure_time=self.read('Enter departure time (HH:MM AM/PM): '),
            origin=self.read('Enter source: '),
            destination=self.read('Enter destination: '),
        )
        self.write(f'New bus {bus.bus_number} added successfully.')

    def handle_allot_seat(self) -> None:
        bus_number = self.read('Enter bus number: ').strip()
        seat_map = self.show_seats.execute(bus_number=bus_number)
        self.write(report_formatter.render_reserved_seats(seat_map))

        raw_seat = self.read(f'\nEnter seat number for bus number {bus_number}: ')
        position = SeatPosition.parse(raw_seat)
        if seat_map.occupancy[position.index]:
            # Early feedback; the ledger re-checks under the write lock
            self.write(
                f'Seat number {position.seat_number} is already occupied. '
                'Please select another seat.'
            )
            return

        ticket = self.allot_seat.execute(
            bus_number=bus_number,
            seat_number=position.seat_number,
            passenger_name=self.read('Enter passenger name: '),
        )
        self.write(report_formatter.render_allotment(ticket))

    def handle_show_seats(self) -> None:
        seat_map = self.show_seats.execute(bus_number=self.read('Enter bus no: ').strip())
        self.write(report_formatter.render_available_seats(seat_map))

    def handle_list_buses(self) -> None:
        # EmptyCollectionError carries the "no buses" message shown by run()
        self.write(report_formatter.render_bus_list(self.list_buses.execute()))

    def handle_delete_bus(self) -> None:
        bus_number = self.read('Enter the bus number you want to delete: ').strip()
        self.show_seats.execute(bus_number=bus_number)
        answer = self.read(f'Are you sure you want to delete bus number {bus_number}? (Y/N): ')

        result = self.delete_bus.execute(bus_number=bus_number, confirmed=_is_yes(answer))
        if result.outcome is OperationOutcome.COMPLETED:
            self.write(f'Bus number {bus_number} deleted successfully.')
        else:
            self.write(f'Deletion cancelled. Bus number {bus_number} not deleted.')

    def handle_find_ticket(self) -> None:
        ticket = self.find_ticket.execute(ticket_id=self.read('Enter ticket ID: ').strip())
        self.write(report_formatter.render_ticket(ticket))

    def handle_cancel_ticket(self) -> None:
        ticket_id = self.read('Enter ticket ID: ').strip()
        self.write(report_formatter.render_ticket(self.find_ticket.execute(ticket_id=ticket_id)))
        answer = self.read('Are you sure you want to cancel this ticket? (Y/N): ')

        result = self.cancel_ticket.execute(ticket_id=ticket_id, confirmed=_is_yes(answer))
        if result.outcome is OperationOutcome.COMPLETED:
            self.write(
                f'Ticket for seat number {result.ticket.seat_number} cancelled successfully.'
            )
        else:
            self.write('Ticket cancellation cancelled. No changes made.')


def main() -> None:
    parser = argparse.ArgumentParser(description='Bus reservation console')
    parser.add_argument(
        '--verbose', action='store_true', help='Keep log output on the terminal'
    )
    args = parser.parse_args()

    if not args.verbose:
        Logger.base.remove(console_sink_id)

    ConsoleMenu.from_container(container).run()


if __name__ == '__main__':
    main()
