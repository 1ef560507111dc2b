"""
Input validators guarding entry into the reservation ledger.

Pure predicates: they never raise, callers decide which error to signal.
"""

import re


_BUS_NUMBER_PATTERN = re.compile(r'[0-9]{4}')
_TIME_PATTERN = re.compile(r'(0?[1-9]|1[0-2]):[0-5][0-9] (AM|PM)', re.IGNORECASE)


def validate_bus_number(value: str) -> bool:
    """Exactly four ASCII decimal digits."""
    return _BUS_NUMBER_PATTERN.fullmatch(value) is not None


def validate_time(value: str) -> bool:
    """`H:MM AM/PM` or `HH:MM AM/PM`, hour 1-12, meridiem in any case."""
    return _TIME_PATTERN.fullmatch(value) is not None


def validate_non_empty(value: str) -> bool:
    # Whitespace-only text is accepted
    return value != ''
