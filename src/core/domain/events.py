"""
Events — Наблюдаемый журнал переходов состояния

Одна запись на каждый зафиксированный переход:
- Deposit(sender, amount)
- Submit(transaction_id)
- Approve(owner, transaction_id)
- Revoke(owner, transaction_id)
- Executed(transaction_id)

Записи несут достаточно данных, чтобы внешний наблюдатель восстановил
полное состояние кошелька replay-ем (см. src.multisig.event_log).
Соответствует схеме contracts/schema/event_record.json.
"""

from enum import Enum
from typing import Literal, Union

from pydantic import BaseModel, Field


# =============================================================================
# ENUMS
# =============================================================================


class EventType(str, Enum):
    """Тип записи журнала"""

    DEPOSIT = "Deposit"
    SUBMIT = "Submit"
    APPROVE = "Approve"
    REVOKE = "Revoke"
    EXECUTED = "Executed"


# =============================================================================
# EVENT MODELS
# =============================================================================


class EventRecord(BaseModel):
    """Базовая запись журнала (immutable)."""

    sequence: int = Field(..., ge=0, description="Монотонный номер записи")

    model_config = {"frozen": True}

    def to_record(self) -> dict:
        """JSON-совместимое представление записи."""
        return self.model_dump(mode="json")


class DepositEvent(EventRecord):
    event_type: Literal[EventType.DEPOSIT] = EventType.DEPOSIT
    sender: str = Field(..., min_length=1)
    amount: int = Field(..., ge=0)
    balance: int = Field(..., ge=0, description="Баланс после зачисления")


class SubmitEvent(EventRecord):
    event_type: Literal[EventType.SUBMIT] = EventType.SUBMIT
    transaction_id: int = Field(..., ge=0)
    owner: str = Field(..., min_length=1)
    target: str = Field(..., min_length=1)
    value: int = Field(..., ge=0)
    payload: str = Field(default="", description="Payload в hex")


class ApproveEvent(EventRecord):
    event_type: Literal[EventType.APPROVE] = EventType.APPROVE
    owner: str = Field(..., min_length=1)
    transaction_id: int = Field(..., ge=0)


class RevokeEvent(EventRecord):
    event_type: Literal[EventType.REVOKE] = EventType.REVOKE
    owner: str = Field(..., min_length=1)
    transaction_id: int = Field(..., ge=0)


class ExecutedEvent(EventRecord):
    event_type: Literal[EventType.EXECUTED] = EventType.EXECUTED
    transaction_id: int = Field(..., ge=0)
    executor: str = Field(..., min_length=1, description="Кто вызвал execute")
    value: int = Field(..., ge=0)


Event = Union[DepositEvent, SubmitEvent, ApproveEvent, RevokeEvent, ExecutedEvent]
