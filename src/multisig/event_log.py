"""EventLog — append-only журнал зафиксированных переходов.

Каждая запись получает монотонный sequence (0-based). Записи immutable;
единственная операция кроме append — откат к checkpoint, которым
ExecutionEngine отменяет проваленный execute целиком (включая записи,
сделанные реентерабельными операциями внутри forwarded call).

replay() восстанавливает состояние кошелька только по записям журнала.
"""

from dataclasses import dataclass, field
import logging
from typing import Dict, Iterable, Iterator, List, Set, Tuple, Type

from src.core.contracts import EventRecordValidator
from src.core.domain.events import (
    ApproveEvent,
    DepositEvent,
    Event,
    EventRecord,
    ExecutedEvent,
    RevokeEvent,
    SubmitEvent,
)
from src.core.domain.transaction import Transaction


logger = logging.getLogger(__name__)


class EventLog:
    """Append-only журнал событий кошелька."""

    def __init__(self):
        self._events: List[Event] = []

    def emit(self, event_cls: Type[EventRecord], **fields) -> Event:
        """Добавление записи с очередным sequence."""
        event = event_cls(sequence=len(self._events), **fields)
        self._events.append(event)
        logger.debug("event #%d %s", event.sequence, event.event_type.value)
        return event

    @property
    def events(self) -> Tuple[Event, ...]:
        return tuple(self._events)

    def records(self) -> List[dict]:
        """JSON-совместимые записи (валидируются против event_record.json)."""
        return [event.to_record() for event in self._events]

    def validate(self) -> None:
        """Проверка всех записей против JSON Schema контракта.

        Raises:
            jsonschema.ValidationError: первая невалидная запись
        """
        validator = EventRecordValidator()
        for record in self.records():
            validator.validate(record)

    def checkpoint(self) -> int:
        return len(self._events)

    def restore(self, checkpoint: int) -> None:
        discarded = len(self._events) - checkpoint
        if discarded > 0:
            logger.debug("discarding %d events after #%d", discarded, checkpoint)
        del self._events[checkpoint:]

    def __iter__(self) -> Iterator[Event]:
        return iter(self._events)

    def __len__(self) -> int:
        return len(self._events)

    @staticmethod
    def replay(events: Iterable[Event]) -> "ReplayState":
        """Восстановление состояния по записям журнала (в порядке sequence)."""
        state = ReplayState()
        for event in sorted(events, key=lambda e: e.sequence):
            state.apply(event)
        return state


@dataclass
class ReplayState:
    """Состояние, восстановленное из журнала событий."""

    balance: int = 0
    transactions: List[Transaction] = field(default_factory=list)
    approvals: Dict[int, Set[str]] = field(default_factory=dict)

    def apply(self, event: Event) -> None:
        if isinstance(event, DepositEvent):
            self.balance += event.amount
        elif isinstance(event, SubmitEvent):
            self.transactions.append(
                Transaction(
                    transaction_id=event.transaction_id,
                    owner=event.owner,
                    target=event.target,
                    value=event.value,
                    payload=bytes.fromhex(event.payload),
                )
            )
            self.approvals[event.transaction_id] = set()
        elif isinstance(event, ApproveEvent):
            self.approvals[event.transaction_id].add(event.owner)
        elif isinstance(event, RevokeEvent):
            self.approvals[event.transaction_id].discard(event.owner)
        elif isinstance(event, ExecutedEvent):
            tx = self.transactions[event.transaction_id]
            self.transactions[event.transaction_id] = tx.mark_executed()
            self.balance -= event.value
        else:
            raise TypeError(f"unknown event record: {type(event).__name__}")

    def approvals_count(self, transaction_id: int) -> int:
        return len(self.approvals.get(transaction_id, ()))
