"""ApprovalLedger — голоса owners по транзакциям.

approved[t] — множество owners, подтвердивших транзакцию t;
approvals_count[t] поддерживается инкрементально в approve/revoke и
всегда равен |approved[t]|. Независимо установить счётчик нельзя.
Голоса по разным транзакциям независимы.
"""

import logging
from typing import Dict, FrozenSet, Optional, Set, Tuple

from src.core.domain.events import ApproveEvent, RevokeEvent
from src.core.domain.identifiers import is_identifier, is_zero_identifier, normalize_identifier
from src.multisig.event_log import EventLog
from src.multisig.guards import (
    Guard01OwnerAccess,
    Guard02TransactionState,
    Guard03Approval,
    raise_if_blocked,
)
from src.multisig.owner_registry import OwnerRegistry
from src.multisig.transaction_log import TransactionLog


logger = logging.getLogger(__name__)


class ApprovalLedger:
    """Реестр подтверждений (approve/revoke) с поддерживаемым счётчиком."""

    def __init__(self, registry: OwnerRegistry, log: TransactionLog, events: EventLog):
        self._registry = registry
        self._log = log
        self._events = events

        self._approved: Dict[int, Set[str]] = {}
        self._counts: Dict[int, int] = {}

        self._owner_guard = Guard01OwnerAccess()
        self._state_guard = Guard02TransactionState()
        self._approval_guard = Guard03Approval()

    def approve(self, transaction_id: int, owner_id: str) -> int:
        """
        Подтверждение транзакции owner-ом.

        Returns:
            approvals_count после подтверждения

        Raises:
            NotOwner, NotFound, AlreadyExecuted, AlreadyApproved
        """
        self._check_vote(transaction_id, owner_id)
        owner = normalize_identifier(owner_id)
        raise_if_blocked(self._approval_guard.evaluate_approve(self, transaction_id, owner))

        self._approved.setdefault(transaction_id, set()).add(owner)
        self._counts[transaction_id] = self._counts.get(transaction_id, 0) + 1
        self._events.emit(ApproveEvent, owner=owner, transaction_id=transaction_id)

        count = self._counts[transaction_id]
        logger.info("approve tx=%d owner=%s approvals=%d", transaction_id, owner, count)
        return count

    def revoke(self, transaction_id: int, owner_id: str) -> int:
        """
        Отзыв подтверждения.

        Returns:
            approvals_count после отзыва

        Raises:
            NotOwner, NotFound, AlreadyExecuted, NotYetApproved
        """
        self._check_vote(transaction_id, owner_id)
        owner = normalize_identifier(owner_id)
        raise_if_blocked(self._approval_guard.evaluate_revoke(self, transaction_id, owner))

        self._approved[transaction_id].discard(owner)
        self._counts[transaction_id] -= 1
        self._events.emit(RevokeEvent, owner=owner, transaction_id=transaction_id)

        count = self._counts[transaction_id]
        logger.info("revoke tx=%d owner=%s approvals=%d", transaction_id, owner, count)
        return count

    def has_approved(self, transaction_id: int, owner_id: Optional[str]) -> bool:
        if not is_identifier(owner_id) or is_zero_identifier(owner_id):
            return False
        return normalize_identifier(owner_id) in self._approved.get(transaction_id, ())

    def approvals_count(self, transaction_id: int) -> int:
        return self._counts.get(transaction_id, 0)

    def approvers(self, transaction_id: int) -> Tuple[str, ...]:
        """Owners, подтверждающие транзакцию сейчас, в порядке реестра."""
        approved = self._approved.get(transaction_id, set())
        return tuple(owner for owner in self._registry.owners if owner in approved)

    def checkpoint(self) -> Tuple[Dict[int, FrozenSet[str]], Dict[int, int]]:
        return (
            {tx_id: frozenset(owners) for tx_id, owners in self._approved.items()},
            dict(self._counts),
        )

    def restore(self, checkpoint: Tuple[Dict[int, FrozenSet[str]], Dict[int, int]]) -> None:
        approved, counts = checkpoint
        self._approved = {tx_id: set(owners) for tx_id, owners in approved.items()}
        self._counts = dict(counts)

    def _check_vote(self, transaction_id: int, owner_id: str) -> None:
        raise_if_blocked(self._owner_guard.evaluate(self._registry, owner_id))
        raise_if_blocked(self._state_guard.evaluate(self._log, transaction_id))
