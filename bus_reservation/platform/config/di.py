"""
https://python-dependency-injector.ets-labs.org/index.html
https://python-dependency-injector.ets-labs.org/examples/fastapi.html
"""

from dependency_injector import containers, providers

from bus_reservation.platform.config.core_setting import Settings
from bus_reservation.service.reservation.driven_adapter.random_ticket_id_generator import (
    RandomTicketIdGenerator,
)
from bus_reservation.service.reservation.driven_adapter.state.in_memory_ledger_store import (
    InMemoryLedgerStore,
)


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # Ticket id source (replaceable with a deterministic one in tests)
    ticket_id_generator = providers.Singleton(RandomTicketIdGenerator)

    # The one ledger for this process
    ledger_store = providers.Singleton(
        InMemoryLedgerStore,
        max_buses=config_service.provided.MAX_BUSES,
    )


container = Container()


def setup() -> None:
    container.config_service()
    container.ledger_store()


def cleanup() -> None:
    container.reset_singletons()
