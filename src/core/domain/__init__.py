"""
Domain models and value objects.

Contains the immutable entities of the multi-signature wallet: Transaction,
event records, ExecutionOutcome and identifier helpers.
"""

from src.core.domain.events import (
    ApproveEvent,
    DepositEvent,
    Event,
    EventRecord,
    EventType,
    ExecutedEvent,
    RevokeEvent,
    SubmitEvent,
)
from src.core.domain.execution import ExecutionOutcome
from src.core.domain.identifiers import (
    ZERO_ADDRESS,
    is_identifier,
    is_zero_identifier,
    normalize_identifier,
)
from src.core.domain.transaction import Transaction

__all__ = [
    # Identifiers
    "ZERO_ADDRESS",
    "is_identifier",
    "is_zero_identifier",
    "normalize_identifier",
    # Transaction model
    "Transaction",
    # Execution boundary
    "ExecutionOutcome",
    # Events
    "EventType",
    "EventRecord",
    "Event",
    "DepositEvent",
    "SubmitEvent",
    "ApproveEvent",
    "RevokeEvent",
    "ExecutedEvent",
]
