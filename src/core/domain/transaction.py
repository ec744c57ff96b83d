"""
Transaction — Модель предложенной операции

Immutable Pydantic модель. Создаётся только через submit; единственное
изменяемое поле — executed (false → true ровно один раз), и оно меняется
заменой снапшота через mark_executed(), а не мутацией объекта.
"""

from pydantic import BaseModel, Field, field_validator

from .identifiers import normalize_identifier


class Transaction(BaseModel):
    """
    Предложенная операция: (target, value, payload) + флаг исполнения.

    Immutable модель (frozen=True).
    """

    transaction_id: int = Field(..., ge=0, description="Последовательный 0-based идентификатор")
    owner: str = Field(..., min_length=1, description="Owner, предложивший операцию")
    target: str = Field(..., min_length=1, description="Адресат forwarded call")
    value: int = Field(..., ge=0, description="Сумма, передаваемая адресату")
    payload: bytes = Field(default=b"", description="Непрозрачные данные вызова")
    executed: bool = Field(default=False, description="Исполнена ли операция")

    model_config = {"frozen": True}

    @field_validator("owner", "target")
    @classmethod
    def normalize(cls, v: str) -> str:
        """Hex-адреса приводятся к нижнему регистру"""
        return normalize_identifier(v)

    @property
    def is_pending(self) -> bool:
        """True пока операция не исполнена"""
        return not self.executed

    def mark_executed(self) -> "Transaction":
        """Новый снапшот с executed=True (все остальные поля неизменны)."""
        if self.executed:
            raise ValueError(f"transaction {self.transaction_id} is already executed")
        return self.model_copy(update={"executed": True})

    def to_record(self) -> dict:
        """JSON-совместимое представление (payload в hex)."""
        return {
            "transaction_id": self.transaction_id,
            "owner": self.owner,
            "target": self.target,
            "value": self.value,
            "payload": self.payload.hex(),
            "executed": self.executed,
        }
