from fastapi import APIRouter, Depends

from bus_reservation.platform.logging.loguru_io import Logger
from bus_reservation.service.reservation.app.command.cancel_ticket_use_case import (
    CancelTicketUseCase,
)
from bus_reservation.service.reservation.app.query.find_ticket_use_case import FindTicketUseCase
from bus_reservation.service.reservation.domain.enum.operation_outcome import OperationOutcome
from bus_reservation.service.reservation.driving_adapter.http_controller.schema.ticket_schema import (
    CancelTicketRequest,
    CancelTicketResponse,
    TicketResponse,
)


router = APIRouter()


@router.get('/{ticket_id}')
@Logger.io
def get_ticket(
    ticket_id: str,
    use_case: FindTicketUseCase = Depends(FindTicketUseCase.depends),
) -> TicketResponse:
    return TicketResponse.from_ticket(use_case.execute(ticket_id=ticket_id))


@router.post('/{ticket_id}/cancel')
@Logger.io
def cancel_ticket(
    ticket_id: str,
    request: CancelTicketRequest,
    use_case: CancelTicketUseCase = Depends(CancelTicketUseCase.depends),
) -> CancelTicketResponse:
    result = use_case.execute(ticket_id=ticket_id, confirmed=request.confirmed)
    if result.outcome is OperationOutcome.COMPLETED:
        message = f'Ticket for seat number {result.ticket.seat_number} cancelled successfully.'
    else:
        message = 'Ticket cancellation cancelled. No changes made.'
    return CancelTicketResponse(
        ticket=TicketResponse.from_ticket(result.ticket),
        outcome=result.outcome.value,
        message=message,
    )
