"""MultiSigWallet — публичная поверхность multisig кошелька.

Собирает OwnerRegistry → TransactionLog → ApprovalLedger → ExecutionEngine
и сериализует каждую операцию через re-entrant lock: операции разных
потоков глобально упорядочены, а forwarded call внутри execute может
повторно войти в кошелёк в том же потоке (и быть отклонён guards).

Операции:
- submit / approve / revoke — только owners
- execute / deposit — любой вызывающий
- запросы: is_owner, get_transaction, approvals_count, has_approved, ...
"""

import logging
import threading
from typing import Iterable, Optional, Tuple

from src.core.domain.events import Event
from src.core.domain.transaction import Transaction
from src.multisig.approval_ledger import ApprovalLedger
from src.multisig.config import MultiSigConfig
from src.multisig.event_log import EventLog
from src.multisig.execution_engine import ExecutionEngine
from src.multisig.executor import Executor, RoutingExecutor
from src.multisig.guards import Guard00Configuration, raise_if_blocked
from src.multisig.owner_registry import OwnerRegistry
from src.multisig.transaction_log import TransactionLog


logger = logging.getLogger(__name__)


class MultiSigWallet:
    """Multisig кошелёк: owners + quorum + quorum-gated forwarded calls."""

    def __init__(
        self,
        owners: Iterable[str],
        quorum: int,
        executor: Optional[Executor] = None,
    ):
        """
        Args:
            owners: неизменяемый набор владельцев
            quorum: 1 ≤ quorum ≤ len(owners)
            executor: исполнитель forwarded call (по умолчанию RoutingExecutor
                без обработчиков — простой перевод value)

        Raises:
            InvalidConfiguration: пустые/дублирующиеся/нулевые owners, quorum вне диапазона
        """
        self._registry = OwnerRegistry(owners)
        raise_if_blocked(Guard00Configuration().evaluate_quorum(quorum, self._registry.owner_count))

        self._events = EventLog()
        self._log = TransactionLog(self._registry, self._events)
        self._ledger = ApprovalLedger(self._registry, self._log, self._events)
        self._engine = ExecutionEngine(
            quorum=quorum,
            log=self._log,
            ledger=self._ledger,
            events=self._events,
            executor=executor if executor is not None else RoutingExecutor(),
        )
        self._lock = threading.RLock()
        logger.info("multisig wallet created: %d owners, quorum=%d", self._registry.owner_count, quorum)

    @classmethod
    def from_config(cls, config: MultiSigConfig, executor: Optional[Executor] = None) -> "MultiSigWallet":
        return cls(owners=config.owners, quorum=config.quorum, executor=executor)

    # -------------------------------------------------------------------------
    # Operations
    # -------------------------------------------------------------------------

    def submit(self, owner_id: str, target: str, value: int = 0, payload: bytes = b"") -> int:
        with self._lock:
            return self._log.submit(owner_id, target, value, payload)

    def approve(self, transaction_id: int, owner_id: str) -> int:
        with self._lock:
            return self._ledger.approve(transaction_id, owner_id)

    def revoke(self, transaction_id: int, owner_id: str) -> int:
        with self._lock:
            return self._ledger.revoke(transaction_id, owner_id)

    def execute(self, transaction_id: int, caller: Optional[str] = None) -> bytes:
        with self._lock:
            return self._engine.execute(transaction_id, caller)

    def deposit(self, sender: str, amount: int) -> int:
        with self._lock:
            return self._engine.deposit(sender, amount)

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def is_owner(self, identifier: Optional[str]) -> bool:
        return self._registry.is_owner(identifier)

    def get_transaction(self, transaction_id: int) -> Transaction:
        with self._lock:
            return self._log.get(transaction_id)

    def get_transactions(self, pending_only: bool = False) -> Tuple[Transaction, ...]:
        with self._lock:
            return self._log.transactions(pending_only=pending_only)

    def approvals_count(self, transaction_id: int) -> int:
        with self._lock:
            return self._ledger.approvals_count(transaction_id)

    def has_approved(self, transaction_id: int, owner_id: Optional[str]) -> bool:
        with self._lock:
            return self._ledger.has_approved(transaction_id, owner_id)

    def approvers(self, transaction_id: int) -> Tuple[str, ...]:
        with self._lock:
            return self._ledger.approvers(transaction_id)

    def is_executable(self, transaction_id: int) -> bool:
        with self._lock:
            return self._engine.is_executable(transaction_id)

    @property
    def owners(self) -> Tuple[str, ...]:
        return self._registry.owners

    @property
    def owner_count(self) -> int:
        return self._registry.owner_count

    @property
    def quorum(self) -> int:
        return self._engine.quorum

    @property
    def transaction_count(self) -> int:
        with self._lock:
            return len(self._log)

    @property
    def balance(self) -> int:
        with self._lock:
            return self._engine.balance

    @property
    def events(self) -> Tuple[Event, ...]:
        with self._lock:
            return self._events.events

    @property
    def event_log(self) -> EventLog:
        return self._events
