"""
Test Configuration and Fixtures

- Log directory is redirected before any application module is imported
- Every test starts from a fresh ledger (container singletons reset)
- Ticket ids are deterministic through SequenceTicketIdGenerator
"""

# =============================================================================
# Environment setup MUST happen before application imports: logging config
# reads TEST_LOG_DIR at import time
# =============================================================================
import os
from pathlib import Path


def _early_setup_test_environment() -> None:
    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)
    os.environ.setdefault('SERVICE_NAME', 'bus-reservation-test')


_early_setup_test_environment()

from collections.abc import Callable, Generator, Iterable  # noqa: E402
from typing import Any  # noqa: E402

from dependency_injector import providers  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
import pytest  # noqa: E402

from bus_reservation.platform.config.di import container  # noqa: E402
from bus_reservation.service.reservation.domain.aggregate.reservation_ledger_aggregate import (  # noqa: E402
    ReservationLedger,
)
from bus_reservation.service.reservation.domain.service.i_ticket_id_generator import (  # noqa: E402
    ITicketIdGenerator,
)
from bus_reservation.service.reservation.driven_adapter.state.in_memory_ledger_store import (  # noqa: E402
    InMemoryLedgerStore,
)


class SequenceTicketIdGenerator(ITicketIdGenerator):
    """Hands out the given ids in order, then falls back to numbered ones."""

    def __init__(self, ticket_ids: Iterable[str] = ()) -> None:
        self._queued = list(ticket_ids)
        self._counter = 0
        self.calls = 0

    def generate(self) -> str:
        self.calls += 1
        if self._queued:
            return self._queued.pop(0)
        self._counter += 1
        return f'tkt{self._counter:05d}'


DEFAULT_BUS: dict[str, str] = {
    'bus_number': '1234',
    'driver_name': 'Jane',
    'arrival_time': '09:00 AM',
    'departure_time': '05:30 PM',
    'origin': 'Springfield',
    'destination': 'Shelbyville',
}


@pytest.fixture
def bus_fields() -> Callable[..., dict[str, str]]:
    """Build add_bus keyword arguments, overriding any field."""

    def _build(**overrides: str) -> dict[str, str]:
        return {**DEFAULT_BUS, **overrides}

    return _build


@pytest.fixture
def make_ticket_id_generator() -> type[SequenceTicketIdGenerator]:
    return SequenceTicketIdGenerator


@pytest.fixture
def ticket_id_generator() -> SequenceTicketIdGenerator:
    return SequenceTicketIdGenerator()


@pytest.fixture
def ledger() -> ReservationLedger:
    return ReservationLedger()


@pytest.fixture
def ledger_store() -> InMemoryLedgerStore:
    return InMemoryLedgerStore()


@pytest.fixture
def client(ticket_id_generator: SequenceTicketIdGenerator) -> Generator[TestClient, Any, None]:
    """HTTP client against a fresh in-memory ledger."""
    from bus_reservation.main import app

    container.reset_singletons()
    with container.ticket_id_generator.override(providers.Object(ticket_id_generator)):
        with TestClient(app) as test_client:
            yield test_client
    container.reset_singletons()
