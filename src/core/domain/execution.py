"""
ExecutionOutcome — Результат forwarded call

Граница внешнего исполнителя (Executor): (target, value, payload) →
(success, return_payload). Движок не интерпретирует return_payload.
"""

from pydantic import BaseModel, Field


class ExecutionOutcome(BaseModel):
    """Результат вызова Executor.forward()."""

    success: bool = Field(..., description="Успешен ли forwarded call")
    return_payload: bytes = Field(default=b"", description="Данные, возвращённые адресатом")

    model_config = {"frozen": True}

    @classmethod
    def ok(cls, return_payload: bytes = b"") -> "ExecutionOutcome":
        return cls(success=True, return_payload=return_payload)

    @classmethod
    def failed(cls, return_payload: bytes = b"") -> "ExecutionOutcome":
        return cls(success=False, return_payload=return_payload)
