import random
import string

from bus_reservation.service.reservation.domain.service.i_ticket_id_generator import (
    TICKET_ID_LENGTH,
    ITicketIdGenerator,
)


TICKET_ID_CHARSET = string.digits + string.ascii_letters


class RandomTicketIdGenerator(ITicketIdGenerator):
    def __init__(self, *, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()

    def generate(self) -> str:
        # Mixed case here; the ledger lowercases before storing
        return ''.join(self._rng.choices(TICKET_ID_CHARSET, k=TICKET_ID_LENGTH))
