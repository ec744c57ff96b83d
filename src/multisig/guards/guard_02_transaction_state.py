"""GUARD 2: Transaction state — транзакция существует и не исполнена

- tx_not_found: id не int или вне диапазона [0, transaction_count)
- tx_already_executed: executed=True (терминальное состояние)
"""

from typing import Optional, Protocol

from src.core.domain.transaction import Transaction
from src.multisig.guards.result import GuardResult


GUARD_NAME = "guard_02_transaction_state"


class TransactionLookup(Protocol):
    def __len__(self) -> int: ...

    def peek(self, transaction_id: int) -> Optional[Transaction]: ...


class Guard02TransactionState:
    """GUARD 2: проверка существования и статуса транзакции."""

    def evaluate_exists(self, log: TransactionLookup, transaction_id: int) -> GuardResult:
        if isinstance(transaction_id, bool) or not isinstance(transaction_id, int):
            return GuardResult.block(
                GUARD_NAME, "tx_not_found", f"transaction id must be an integer, got {transaction_id!r}"
            )
        if log.peek(transaction_id) is None:
            return GuardResult.block(
                GUARD_NAME,
                "tx_not_found",
                f"tx does not exist: id={transaction_id}, count={len(log)}",
            )
        return GuardResult.allow(GUARD_NAME, f"tx={transaction_id} exists")

    def evaluate(self, log: TransactionLookup, transaction_id: int) -> GuardResult:
        exists = self.evaluate_exists(log, transaction_id)
        if not exists.passed:
            return exists

        transaction = log.peek(transaction_id)
        if transaction.executed:
            return GuardResult.block(
                GUARD_NAME, "tx_already_executed", f"tx already executed: id={transaction_id}"
            )
        return GuardResult.allow(GUARD_NAME, f"tx={transaction_id} pending")
