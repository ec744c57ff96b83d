"""GuardResult — структурированный результат проверки предусловия.

Guards никогда не бросают исключений: они возвращают GuardResult,
а граница операции (registry/log/ledger/engine) превращает заблокированный
результат в типизированную ошибку через raise_if_blocked().
"""

from dataclasses import dataclass
import logging

from src.multisig.errors import error_for_reason


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GuardResult:
    """Результат guard-проверки."""

    passed: bool
    block_reason: str

    # Имя guard-а для диагностики
    guard: str

    # Детали
    details: str

    @classmethod
    def allow(cls, guard: str, details: str = "") -> "GuardResult":
        return cls(passed=True, block_reason="", guard=guard, details=details or "PASS")

    @classmethod
    def block(cls, guard: str, block_reason: str, details: str) -> "GuardResult":
        return cls(passed=False, block_reason=block_reason, guard=guard, details=details)


def raise_if_blocked(result: GuardResult) -> None:
    """Бросает PreconditionViolation (подкласс по block_reason), если guard заблокировал."""
    if result.passed:
        logger.debug("%s passed: %s", result.guard, result.details)
        return
    logger.warning("%s blocked (%s): %s", result.guard, result.block_reason, result.details)
    raise error_for_reason(result.block_reason, result.details)
