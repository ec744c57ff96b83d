"""Executor — capability внешнего исполнителя forwarded call.

Контракт: forward(target, value, payload) -> ExecutionOutcome(success, return_payload).
Движок не интерпретирует содержимое, кроме флага success.

Реализации:
- CallableExecutor: адаптер для функции, возвращающей (bool, bytes)
- RecordingExecutor: записывает вызовы и отвечает заданным outcome
- RoutingExecutor: диспетчеризация по target; неизвестный target —
  простой перевод value (успех, пустой payload)
"""

from dataclasses import dataclass
import logging
from typing import Callable, Dict, List, Optional, Protocol, Tuple, Union

from src.core.domain.execution import ExecutionOutcome
from src.core.domain.identifiers import normalize_identifier


logger = logging.getLogger(__name__)


OutcomeLike = Union[ExecutionOutcome, Tuple[bool, bytes], bool]
Handler = Callable[[str, int, bytes], OutcomeLike]


class Executor(Protocol):
    def forward(self, target: str, value: int, payload: bytes) -> ExecutionOutcome: ...


def to_outcome(result: OutcomeLike) -> ExecutionOutcome:
    """Приведение (bool, bytes) / bool / ExecutionOutcome к ExecutionOutcome."""
    if isinstance(result, ExecutionOutcome):
        return result
    if isinstance(result, bool):
        return ExecutionOutcome(success=result)
    if not isinstance(result, (tuple, list)) or len(result) != 2:
        raise TypeError(f"executor returned {type(result).__name__}, expected (success, return_payload)")
    success, return_payload = result
    if return_payload is None:
        return_payload = b""
    if not isinstance(success, bool) or not isinstance(return_payload, (bytes, bytearray)):
        raise TypeError(f"executor returned malformed outcome: {result!r}")
    return ExecutionOutcome(success=success, return_payload=bytes(return_payload))


class CallableExecutor:
    """Executor поверх обычной функции handler(target, value, payload)."""

    def __init__(self, handler: Handler):
        self._handler = handler

    def forward(self, target: str, value: int, payload: bytes) -> ExecutionOutcome:
        return to_outcome(self._handler(target, value, payload))


@dataclass(frozen=True)
class ForwardedCall:
    """Запись одного forwarded call."""

    target: str
    value: int
    payload: bytes


class RecordingExecutor:
    """Записывает каждый forwarded call; отвечает outcome (по умолчанию успех).

    on_forward (если задан) вызывается после записи и до ответа; через него
    forwarded call может выполнить произвольную логику, в том числе
    повторно войти в кошелёк.
    """

    def __init__(
        self,
        outcome: Optional[ExecutionOutcome] = None,
        on_forward: Optional[Callable[[ForwardedCall], None]] = None,
    ):
        self.outcome = outcome or ExecutionOutcome.ok()
        self.on_forward = on_forward
        self.calls: List[ForwardedCall] = []

    def forward(self, target: str, value: int, payload: bytes) -> ExecutionOutcome:
        call = ForwardedCall(target=target, value=value, payload=payload)
        self.calls.append(call)
        if self.on_forward is not None:
            self.on_forward(call)
        return self.outcome


class RoutingExecutor:
    """Диспетчеризация forwarded call по target."""

    def __init__(self, handlers: Optional[Dict[str, Handler]] = None):
        self._handlers: Dict[str, Handler] = {}
        for target, handler in (handlers or {}).items():
            self.register(target, handler)

    def register(self, target: str, handler: Handler) -> None:
        self._handlers[normalize_identifier(target)] = handler

    def forward(self, target: str, value: int, payload: bytes) -> ExecutionOutcome:
        handler = self._handlers.get(normalize_identifier(target))
        if handler is None:
            logger.debug("plain transfer to %s value=%d", target, value)
            return ExecutionOutcome.ok()
        return to_outcome(handler(target, value, payload))
