import re

import attrs

from bus_reservation.platform.exception.exceptions import InvalidInputError


NUM_ROWS = 8
NUM_COLS = 4
MAX_SEATS = NUM_ROWS * NUM_COLS

_SEAT_NUMBER_PATTERN = re.compile(r'[+-]?[0-9]+')


@attrs.frozen
class SeatPosition:
    """Zero-based cell of the fixed 8x4 seat grid."""

    row: int = attrs.field(validator=[attrs.validators.ge(0), attrs.validators.lt(NUM_ROWS)])
    col: int = attrs.field(validator=[attrs.validators.ge(0), attrs.validators.lt(NUM_COLS)])

    @property
    def seat_number(self) -> int:
        return self.row * NUM_COLS + self.col + 1

    @property
    def index(self) -> int:
        return self.seat_number - 1

    @classmethod
    def from_seat_number(cls, seat_number: int) -> 'SeatPosition':
        if not 1 <= seat_number <= MAX_SEATS:
            raise InvalidInputError(
                f'Invalid seat number. Please enter a number between 1 and {MAX_SEATS}.'
            )
        return cls(row=(seat_number - 1) // NUM_COLS, col=(seat_number - 1) % NUM_COLS)

    @classmethod
    def parse(cls, raw: object) -> 'SeatPosition':
        """
        Build a position from user input.

        Accepts an int or a string of ASCII digits with an optional sign
        (surrounding blanks allowed). Bools, floats and anything else are rejected.

        Raises:
            InvalidInputError: not an integer, or outside 1..32
        """
        if isinstance(raw, int) and not isinstance(raw, bool):
            return cls.from_seat_number(raw)
        if not isinstance(raw, str) or not _SEAT_NUMBER_PATTERN.fullmatch(raw.strip()):
            raise InvalidInputError('Invalid input for seat number. Please enter a valid integer.')
        return cls.from_seat_number(int(raw.strip()))


def all_positions() -> list[SeatPosition]:
    """Every cell in seat-number order."""
    return [SeatPosition.from_seat_number(n) for n in range(1, MAX_SEATS + 1)]
