from abc import ABC, abstractmethod


TICKET_ID_LENGTH = 8


class ITicketIdGenerator(ABC):
    @abstractmethod
    def generate(self) -> str:
        """Return TICKET_ID_LENGTH characters drawn from [0-9A-Za-z]."""
        pass
