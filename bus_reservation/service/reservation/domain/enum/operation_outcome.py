from enum import Enum


class OperationOutcome(Enum):
    """Result of a confirmable operation."""

    COMPLETED = 'completed'
    ABORTED = 'aborted'  # Confirmation declined, nothing changed
