from enum import StrEnum


class ErrorKind(StrEnum):
    INVALID_FORMAT = 'invalid_format'
    DUPLICATE_KEY = 'duplicate_key'
    CAPACITY_EXCEEDED = 'capacity_exceeded'
    NOT_FOUND = 'not_found'
    INVALID_INPUT = 'invalid_input'
    SEAT_TAKEN = 'seat_taken'
    EMPTY_COLLECTION = 'empty_collection'
    TICKET_ID_EXHAUSTED = 'ticket_id_exhausted'


class CustomBaseError(Exception):
    """Base class for all custom exceptions - controls logging behavior in @Logger.io"""

    kind: ErrorKind | None = None
    # Informational errors describe an expected state and are logged below ERROR
    informational: bool = False

    def __init__(self, message: str, status_code: int) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class InvalidFormatError(CustomBaseError):
    kind = ErrorKind.INVALID_FORMAT

    def __init__(self, message: str) -> None:
        super().__init__(message, 400)


class DuplicateKeyError(CustomBaseError):
    kind = ErrorKind.DUPLICATE_KEY

    def __init__(self, message: str) -> None:
        super().__init__(message, 409)


class CapacityExceededError(CustomBaseError):
    kind = ErrorKind.CAPACITY_EXCEEDED

    def __init__(self, message: str) -> None:
        super().__init__(message, 409)


class NotFoundError(CustomBaseError):
    kind = ErrorKind.NOT_FOUND

    def __init__(self, message: str) -> None:
        super().__init__(message, 404)


class InvalidInputError(CustomBaseError):
    kind = ErrorKind.INVALID_INPUT

    def __init__(self, message: str) -> None:
        super().__init__(message, 400)


class SeatTakenError(CustomBaseError):
    kind = ErrorKind.SEAT_TAKEN

    def __init__(self, message: str) -> None:
        super().__init__(message, 409)


class EmptyCollectionError(CustomBaseError):
    """Informational: the ledger holds no buses. Adapters render it, they do not fail on it."""

    kind = ErrorKind.EMPTY_COLLECTION
    informational = True

    def __init__(self, message: str) -> None:
        super().__init__(message, 404)


class TicketIdExhaustedError(CustomBaseError):
    kind = ErrorKind.TICKET_ID_EXHAUSTED

    def __init__(self, message: str) -> None:
        super().__init__(message, 503)
