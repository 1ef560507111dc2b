from pydantic import BaseModel, StrictBool, StrictFloat, StrictInt, StrictStr

from bus_reservation.service.reservation.domain.value_object.ticket_info import TicketInfo


class SeatAllotRequest(BaseModel):
    # Strict members keep JSON true and 2.0 from coercing to a seat; the ledger rejects them
    seat_number: StrictInt | StrictStr | StrictBool | StrictFloat
    passenger_name: str

    class Config:
        json_schema_extra = {'example': {'seat_number': 1, 'passenger_name': 'Alice'}}


class TicketResponse(BaseModel):
    model_config = {
        'json_schema_extra': {
            'example': {
                'passenger_name': 'Alice',
                'ticket_id': 'ab3defgh',
                'bus_number': '1234',
                'seat_number': 1,
            }
        },
    }

    passenger_name: str
    ticket_id: str
    bus_number: str
    seat_number: int

    @classmethod
    def from_ticket(cls, ticket: TicketInfo) -> 'TicketResponse':
        return cls(
            passenger_name=ticket.passenger_name,
            ticket_id=ticket.ticket_id,
            bus_number=ticket.bus_number,
            seat_number=ticket.seat_number,
        )


class CancelTicketRequest(BaseModel):
    confirmed: bool = False

    class Config:
        json_schema_extra = {'example': {'confirmed': True}}


class CancelTicketResponse(BaseModel):
    ticket: TicketResponse
    outcome: str
    message: str
