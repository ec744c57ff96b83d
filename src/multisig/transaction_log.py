"""TransactionLog — append-only хранилище предложенных операций.

- submit: только owner; новая Transaction с executed=False и
  последовательным id; запись Submit в журнал
- get: NotFound для id вне диапазона
- executed меняется только через mark_executed (вызывает ExecutionEngine)
"""

import logging
from typing import List, Optional, Tuple

from src.core.domain.events import SubmitEvent
from src.core.domain.identifiers import normalize_identifier
from src.core.domain.transaction import Transaction
from src.multisig.event_log import EventLog
from src.multisig.guards import (
    Guard01OwnerAccess,
    Guard02TransactionState,
    Guard05Arguments,
    raise_if_blocked,
)
from src.multisig.owner_registry import OwnerRegistry


logger = logging.getLogger(__name__)


class TransactionLog:
    """Журнал транзакций кошелька."""

    def __init__(self, registry: OwnerRegistry, events: EventLog):
        self._registry = registry
        self._events = events
        self._transactions: List[Transaction] = []

        self._owner_guard = Guard01OwnerAccess()
        self._state_guard = Guard02TransactionState()
        self._arguments_guard = Guard05Arguments()

    def submit(self, owner_id: str, target: str, value: int = 0, payload: bytes = b"") -> int:
        """
        Предложение новой операции.

        Args:
            owner_id: вызывающий owner
            target: адресат forwarded call
            value: сумма (int ≥ 0)
            payload: непрозрачные данные вызова

        Returns:
            transaction_id новой транзакции

        Raises:
            NotOwner, InvalidTarget, InvalidAmount, InvalidPayload
        """
        raise_if_blocked(self._owner_guard.evaluate(self._registry, owner_id))
        raise_if_blocked(self._arguments_guard.evaluate_submission(target, value, payload))

        transaction = Transaction(
            transaction_id=len(self._transactions),
            owner=normalize_identifier(owner_id),
            target=normalize_identifier(target),
            value=value,
            payload=bytes(payload),
        )
        self._transactions.append(transaction)
        self._events.emit(
            SubmitEvent,
            transaction_id=transaction.transaction_id,
            owner=transaction.owner,
            target=transaction.target,
            value=transaction.value,
            payload=transaction.payload.hex(),
        )
        logger.info(
            "submit tx=%d owner=%s target=%s value=%d payload=%d bytes",
            transaction.transaction_id,
            transaction.owner,
            transaction.target,
            transaction.value,
            len(transaction.payload),
        )
        return transaction.transaction_id

    def get(self, transaction_id: int) -> Transaction:
        """
        Raises:
            NotFound: id вне диапазона
        """
        raise_if_blocked(self._state_guard.evaluate_exists(self, transaction_id))
        return self._transactions[transaction_id]

    def peek(self, transaction_id: int) -> Optional[Transaction]:
        """Transaction или None, без исключений."""
        if 0 <= transaction_id < len(self._transactions):
            return self._transactions[transaction_id]
        return None

    def mark_executed(self, transaction_id: int) -> Transaction:
        """Перевод Pending → Executed (замена снапшота)."""
        raise_if_blocked(self._state_guard.evaluate(self, transaction_id))
        executed = self._transactions[transaction_id].mark_executed()
        self._transactions[transaction_id] = executed
        return executed

    def transactions(self, pending_only: bool = False) -> Tuple[Transaction, ...]:
        if pending_only:
            return tuple(tx for tx in self._transactions if tx.is_pending)
        return tuple(self._transactions)

    def checkpoint(self) -> Tuple[Transaction, ...]:
        # Transaction immutable, поверхностной копии достаточно
        return tuple(self._transactions)

    def restore(self, checkpoint: Tuple[Transaction, ...]) -> None:
        self._transactions = list(checkpoint)

    def __len__(self) -> int:
        return len(self._transactions)
