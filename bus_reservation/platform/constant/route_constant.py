"""HTTP route paths, shared by routers and tests."""

API_PREFIX = '/api'

BUS_BASE = f'{API_PREFIX}/bus'
BUS_DELETE = f'{BUS_BASE}/{{bus_number}}'
BUS_SEATS = f'{BUS_BASE}/{{bus_number}}/seats'

TICKET_BASE = f'{API_PREFIX}/ticket'
TICKET_GET = f'{TICKET_BASE}/{{ticket_id}}'
TICKET_CANCEL = f'{TICKET_BASE}/{{ticket_id}}/cancel'

HEALTH = '/health'
