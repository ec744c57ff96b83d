"""ExecutionEngine — quorum-gated исполнение и удерживаемый баланс.

State machine транзакции:
    Pending → (approvals_count ≥ quorum) → Executable → execute() → Executed

Executable — производное условие, не хранимое состояние. Executed —
терминальное. Cancel/expiry в этом компоненте нет.

Порядок execute (строгий, checks-effects-interactions):
1. guards: транзакция существует, не исполнена, approvals ≥ quorum
2. effects: executed=True и списание value с баланса ДО вызова
3. interaction: forward(target, value, payload) через Executor
4. неуспех (success=False, исключение исполнителя, нехватка баланса):
   откат всех изменений этого вызова как единого целого → ExecutionFailed;
   транзакция остаётся Executable и execute можно повторить
5. успех: запись Executed, возврат return_payload

Флаг executed фиксируется до forwarded call, поэтому реентерабельный
execute той же транзакции изнутри forward получает AlreadyExecuted.
"""

import logging
from typing import Dict, FrozenSet, Optional, Tuple

from src.core.domain.events import DepositEvent, ExecutedEvent
from src.core.domain.identifiers import normalize_identifier
from src.core.domain.transaction import Transaction
from src.multisig.approval_ledger import ApprovalLedger
from src.multisig.errors import ExecutionFailed
from src.multisig.event_log import EventLog
from src.multisig.executor import Executor, to_outcome
from src.multisig.guards import (
    Guard02TransactionState,
    Guard04Quorum,
    Guard05Arguments,
    raise_if_blocked,
)
from src.multisig.transaction_log import TransactionLog


logger = logging.getLogger(__name__)


ANONYMOUS_CALLER = "anonymous"

# (transactions, (approvals, counts), events length, balance)
EngineCheckpoint = Tuple[
    Tuple[Transaction, ...],
    Tuple[Dict[int, FrozenSet[str]], Dict[int, int]],
    int,
    int,
]


class ExecutionEngine:
    """Исполнение транзакций и учёт удерживаемого баланса."""

    def __init__(
        self,
        quorum: int,
        log: TransactionLog,
        ledger: ApprovalLedger,
        events: EventLog,
        executor: Executor,
    ):
        self._log = log
        self._ledger = ledger
        self._events = events
        self._executor = executor
        self._balance = 0

        self._state_guard = Guard02TransactionState()
        self._quorum_guard = Guard04Quorum(quorum)
        self._arguments_guard = Guard05Arguments()

    @property
    def quorum(self) -> int:
        return self._quorum_guard.quorum

    @property
    def balance(self) -> int:
        return self._balance

    def is_executable(self, transaction_id: int) -> bool:
        """True если execute сейчас прошёл бы все guards."""
        return (
            self._state_guard.evaluate(self._log, transaction_id).passed
            and self._quorum_guard.evaluate(
                transaction_id, self._ledger.approvals_count(transaction_id)
            ).passed
        )

    def deposit(self, sender: str, amount: int) -> int:
        """
        Зачисление на удерживаемый баланс (любой вызывающий).

        Returns:
            баланс после зачисления

        Raises:
            InvalidAmount: amount не int или < 0
        """
        raise_if_blocked(self._arguments_guard.evaluate_amount(amount))
        sender_id = normalize_identifier(sender) or ANONYMOUS_CALLER

        self._balance += amount
        self._events.emit(DepositEvent, sender=sender_id, amount=amount, balance=self._balance)
        logger.info("deposit sender=%s amount=%d balance=%d", sender_id, amount, self._balance)
        return self._balance

    def execute(self, transaction_id: int, caller: Optional[str] = None) -> bytes:
        """
        Исполнение транзакции, набравшей quorum (любой вызывающий).

        Returns:
            return_payload forwarded call

        Raises:
            NotFound, AlreadyExecuted, InsufficientApprovals: до любых изменений
            ExecutionFailed: forwarded call неуспешен, состояние откатано
        """
        # 1. Checks
        raise_if_blocked(self._state_guard.evaluate(self._log, transaction_id))
        raise_if_blocked(
            self._quorum_guard.evaluate(transaction_id, self._ledger.approvals_count(transaction_id))
        )
        caller_id = normalize_identifier(caller) or ANONYMOUS_CALLER

        # 2. Effects (до interaction)
        checkpoint = self._checkpoint()
        transaction = self._log.mark_executed(transaction_id)

        if transaction.value > self._balance:
            self._restore(checkpoint)
            logger.warning(
                "execute tx=%d rolled back: balance=%d < value=%d",
                transaction_id,
                self._balance,
                transaction.value,
            )
            raise ExecutionFailed(
                transaction_id,
                f"insufficient balance for tx {transaction_id}: "
                f"balance={self._balance}, value={transaction.value}",
            )
        self._balance -= transaction.value

        # 3. Interaction
        try:
            outcome = to_outcome(
                self._executor.forward(transaction.target, transaction.value, transaction.payload)
            )
        except Exception as exc:
            self._restore(checkpoint)
            logger.warning("execute tx=%d rolled back: executor raised %r", transaction_id, exc)
            raise ExecutionFailed(transaction_id, f"tx {transaction_id} failed: {exc}") from exc

        if not outcome.success:
            self._restore(checkpoint)
            logger.warning("execute tx=%d rolled back: forwarded call failed", transaction_id)
            raise ExecutionFailed(
                transaction_id, f"tx {transaction_id} failed", return_payload=outcome.return_payload
            )

        self._events.emit(
            ExecutedEvent,
            transaction_id=transaction_id,
            executor=caller_id,
            value=transaction.value,
        )
        logger.info(
            "execute tx=%d caller=%s target=%s value=%d",
            transaction_id,
            caller_id,
            transaction.target,
            transaction.value,
        )
        return outcome.return_payload

    def _checkpoint(self) -> EngineCheckpoint:
        return (
            self._log.checkpoint(),
            self._ledger.checkpoint(),
            self._events.checkpoint(),
            self._balance,
        )

    def _restore(self, checkpoint: EngineCheckpoint) -> None:
        log_state, ledger_state, events_state, balance = checkpoint
        self._log.restore(log_state)
        self._ledger.restore(ledger_state)
        self._events.restore(events_state)
        self._balance = balance
