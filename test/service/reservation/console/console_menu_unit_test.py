"""
Unit tests for ConsoleMenu

The menu is driven by a scripted reader; everything it writes is captured
and asserted on as plain text.
"""

from collections.abc import Callable

import pytest

from bus_reservation.platform.config.di import Container
from bus_reservation.service.reservation.driven_adapter.state.in_memory_ledger_store import (
    InMemoryLedgerStore,
)
from bus_reservation.service.reservation.driving_adapter.console.menu import ConsoleMenu


pytestmark = pytest.mark.unit


ADD_BUS_INPUTS = ['1', '1234', 'Jane', '09:00 AM', '05:30 PM', 'Springfield', 'Shelbyville']


class ScriptedConsole:
    def __init__(self, inputs: list[str]) -> None:
        self._inputs = list(inputs)
        self.prompts: list[str] = []
        self.output: list[str] = []

    def read(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self._inputs:
            raise EOFError
        return self._inputs.pop(0)

    def write(self, text: str) -> None:
        self.output.append(text)

    @property
    def text(self) -> str:
        return '\n'.join(self.output)


@pytest.fixture
def run_menu(ticket_id_generator) -> Callable[..., ScriptedConsole]:
    def _run(inputs: list[str], *, max_buses: int | None = None) -> ScriptedConsole:
        container = Container()
        container.ticket_id_generator.override(ticket_id_generator)
        if max_buses is not None:
            container.ledger_store.override(InMemoryLedgerStore(max_buses=max_buses))
        console = ScriptedConsole(inputs)
        ConsoleMenu.from_container(container, reader=console.read, writer=console.write).run()
        return console

    return _run


class TestMenuLoop:
    def test_exit_option(self, run_menu) -> None:
        console = run_menu(['8'])

        assert console.output[-1] == 'Thank You ... Visit Again!'

    def test_end_of_input_exits_cleanly(self, run_menu) -> None:
        console = run_menu([])

        assert console.output[-1] == 'Thank You ... Visit Again!'

    @pytest.mark.parametrize(
        'choice,message',
        [
            ('abc', 'Invalid input. Please enter a valid integer.'),
            ('0', 'Invalid choice. Please enter a number between 1 and 8.'),
            ('9', 'Invalid choice. Please enter a number between 1 and 8.'),
        ],
    )
    def test_bad_choice_redisplays_menu(self, run_menu, choice, message) -> None:
        console = run_menu([choice, '8'])

        assert message in console.output
        assert sum('8. Exit' in line for line in console.output) == 2


class TestMenuActions:
    def test_add_and_list_buses(self, run_menu) -> None:
        console = run_menu([*ADD_BUS_INPUTS, '4', '8'])

        assert 'New bus 1234 added successfully.' in console.output
        assert 'Available Seats: 32/32' in console.text

    def test_list_with_no_buses(self, run_menu) -> None:
        console = run_menu(['4', '8'])

        assert 'No buses available at the moment.' in console.output

    def test_invalid_bus_is_reported_and_loop_continues(self, run_menu) -> None:
        console = run_menu(['1', '12', 'Jane', '09:00 AM', '05:30 PM', 'A', 'B', '8'])

        assert (
            'Invalid bus number format. Please enter a valid 4-digit bus number.'
            in console.output
        )
        assert console.output[-1] == 'Thank You ... Visit Again!'

    def test_reserve_seat_and_show_ticket(self, run_menu) -> None:
        console = run_menu([*ADD_BUS_INPUTS, '2', '1234', '5', 'Alice', '6', 'TKT00001', '8'])

        assert 'Seat number 5 allotted to passenger Alice.' in console.text
        assert console.text.count('Ticket ID: tkt00001') == 2

    def test_reserve_taken_seat(self, run_menu) -> None:
        console = run_menu(
            [*ADD_BUS_INPUTS, '2', '1234', '5', 'Alice', '2', '1234', '5', '8']
        )

        assert 'Seat number 5 is already occupied. Please select another seat.' in console.output

    def test_reserve_with_non_numeric_seat(self, run_menu) -> None:
        console = run_menu([*ADD_BUS_INPUTS, '2', '1234', 'x', '8'])

        assert (
            'Invalid input for seat number. Please enter a valid integer.' in console.output
        )

    def test_show_seats_of_unknown_bus(self, run_menu) -> None:
        console = run_menu(['3', '9999', '8'])

        assert 'Bus with number 9999 not found.' in console.output

    def test_delete_bus_needs_confirmation(self, run_menu) -> None:
        console = run_menu([*ADD_BUS_INPUTS, '5', '1234', 'n', '5', '1234', 'Y', '4', '8'])

        assert 'Deletion cancelled. Bus number 1234 not deleted.' in console.output
        assert 'Bus number 1234 deleted successfully.' in console.output
        assert 'No buses available at the moment.' in console.output

    def test_cancel_ticket(self, run_menu) -> None:
        console = run_menu(
            [
                *ADD_BUS_INPUTS,
                '2', '1234', '3', 'Alice',
                '7', 'tkt00001', 'no',
                '7', 'tkt00001', 'y',
                '6', 'tkt00001',
                '8',
            ]
        )

        assert 'Ticket cancellation cancelled. No changes made.' in console.output
        assert 'Ticket for seat number 3 cancelled successfully.' in console.output
        assert 'Ticket with ID tkt00001 not found.' in console.output

    def test_full_fleet_is_reported_before_prompting(self, run_menu) -> None:
        console = run_menu([*ADD_BUS_INPUTS, '1', '4', '8'], max_buses=1)

        assert 'Cannot add more buses. Maximum limit reached.' in console.output
        # The second add stops at the menu; option 4 is read as the next choice
        assert console.prompts.count('Enter bus number (4 digits): ') == 1
        assert 'Available Seats: 32/32' in console.text

    def test_bus_number_and_ticket_id_are_trimmed(self, run_menu) -> None:
        console = run_menu(
            [*ADD_BUS_INPUTS, '2', ' 1234 ', '5', 'Alice', '3', '1234 ', '6', ' tkt00001 ', '8']
        )

        assert 'Seat number 5 allotted to passenger Alice.' in console.text
        assert 'Bus with number' not in console.text
        assert 'Ticket with ID' not in console.text

    @pytest.mark.parametrize('answer', ['yes', 'Yes', ' y '])
    def test_delete_accepts_answers_starting_with_y(self, run_menu, answer) -> None:
        console = run_menu([*ADD_BUS_INPUTS, '5', ' 1234', answer, '8'])

        assert 'Bus number 1234 deleted successfully.' in console.output
