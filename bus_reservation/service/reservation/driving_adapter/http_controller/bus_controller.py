from fastapi import APIRouter, Depends, status

from bus_reservation.platform.exception.exceptions import EmptyCollectionError
from bus_reservation.platform.logging.loguru_io import Logger
from bus_reservation.service.reservation.app.command.add_bus_use_case import AddBusUseCase
from bus_reservation.service.reservation.app.command.allot_seat_use_case import (
    AllotSeatUseCase,
)
from bus_reservation.service.reservation.app.command.delete_bus_use_case import (
    DeleteBusUseCase,
)
from bus_reservation.service.reservation.app.query.list_buses_use_case import ListBusesUseCase
from bus_reservation.service.reservation.app.query.show_seats_use_case import ShowSeatsUseCase
from bus_reservation.service.reservation.domain.enum.operation_outcome import OperationOutcome
from bus_reservation.service.reservation.driving_adapter.http_controller.schema.bus_schema import (
    BusCreateRequest,
    BusListResponse,
    BusResponse,
    DeleteBusResponse,
    SeatMapResponse,
)
from bus_reservation.service.reservation.driving_adapter.http_controller.schema.ticket_schema import (
    SeatAllotRequest,
    TicketResponse,
)


router = APIRouter()


@router.post('', status_code=status.HTTP_201_CREATED)
@Logger.io
def create_bus(
    request: BusCreateRequest,
    use_case: AddBusUseCase = Depends(AddBusUseCase.depends),
) -> BusResponse:
    summary = use_case.execute(
        bus_number=request.bus_number,
        driver_name=request.driver_name,
        arrival_time=request.arrival_time,
        departure_time=request.departure_time,
        origin=request.origin,
        destination=request.destination,
    )
    return BusResponse.from_summary(summary)


@router.get('')
@Logger.io
def list_buses(
    use_case: ListBusesUseCase = Depends(ListBusesUseCase.depends),
) -> BusListResponse:
    try:
        summaries = use_case.execute()
    except EmptyCollectionError as e:
        # An empty fleet is a normal answer, not a failure
        return BusListResponse(buses=[], message=e.message)
    return BusListResponse(buses=[BusResponse.from_summary(summary) for summary in summaries])


@router.get('/{bus_number}/seats')
@Logger.io
def show_seats(
    bus_number: str,
    use_case: ShowSeatsUseCase = Depends(ShowSeatsUseCase.depends),
) -> SeatMapResponse:
    return SeatMapResponse.from_seat_map(use_case.execute(bus_number=bus_number))


@router.post('/{bus_number}/seats', status_code=status.HTTP_201_CREATED)
@Logger.io
def allot_seat(
    bus_number: str,
    request: SeatAllotRequest,
    use_case: AllotSeatUseCase = Depends(AllotSeatUseCase.depends),
) -> TicketResponse:
    ticket = use_case.execute(
        bus_number=bus_number,
        seat_number=request.seat_number,
        passenger_name=request.passenger_name,
    )
    return TicketResponse.from_ticket(ticket)


@router.delete('/{bus_number}')
@Logger.io
def delete_bus(
    bus_number: str,
    confirmed: bool = False,
    use_case: DeleteBusUseCase = Depends(DeleteBusUseCase.depends),
) -> DeleteBusResponse:
    result = use_case.execute(bus_number=bus_number, confirmed=confirmed)
    if result.outcome is OperationOutcome.COMPLETED:
        message = f'Bus number {bus_number} deleted successfully.'
    else:
        message = f'Deletion cancelled. Bus number {bus_number} not deleted.'
    return DeleteBusResponse(
        bus_number=result.bus_number, outcome=result.outcome.value, message=message
    )
