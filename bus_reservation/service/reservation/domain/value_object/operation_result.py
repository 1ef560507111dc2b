import attrs

from bus_reservation.service.reservation.domain.enum.operation_outcome import OperationOutcome
from bus_reservation.service.reservation.domain.value_object.ticket_info import TicketInfo


@attrs.frozen
class DeleteBusResult:
    bus_number: str
    outcome: OperationOutcome


@attrs.frozen
class CancelTicketResult:
    # Ticket as it was before cancellation
    ticket: TicketInfo
    outcome: OperationOutcome
