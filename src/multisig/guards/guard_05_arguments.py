"""GUARD 5: Arguments — value/amount, target и payload операции

- invalid_amount: сумма не int или < 0 (deposit amount, submit value)
- invalid_target: пустой или нестроковый target
- invalid_payload: payload не bytes

Нулевой target допустим (перевод на нулевой адрес — решение owners).
Размер payload не ограничивается.
"""

from typing import Optional

from src.core.domain.identifiers import is_identifier, normalize_identifier
from src.multisig.guards.result import GuardResult


GUARD_NAME = "guard_05_arguments"


class Guard05Arguments:
    """GUARD 5: валидация аргументов submit/deposit."""

    def evaluate_amount(self, amount: int, field_name: str = "amount") -> GuardResult:
        if isinstance(amount, bool) or not isinstance(amount, int):
            return GuardResult.block(
                GUARD_NAME, "invalid_amount", f"{field_name} must be an integer, got {amount!r}"
            )
        if amount < 0:
            return GuardResult.block(GUARD_NAME, "invalid_amount", f"{field_name} must be >= 0, got {amount}")
        return GuardResult.allow(GUARD_NAME, f"{field_name}={amount}")

    def evaluate_target(self, target: Optional[str]) -> GuardResult:
        if target is not None and not is_identifier(target):
            return GuardResult.block(
                GUARD_NAME, "invalid_target", f"target must be a string, got {type(target).__name__}"
            )
        if not normalize_identifier(target):
            return GuardResult.block(GUARD_NAME, "invalid_target", "target required")
        return GuardResult.allow(GUARD_NAME, f"target={normalize_identifier(target)}")

    def evaluate_payload(self, payload: bytes) -> GuardResult:
        if not isinstance(payload, (bytes, bytearray)):
            return GuardResult.block(
                GUARD_NAME, "invalid_payload", f"payload must be bytes, got {type(payload).__name__}"
            )
        return GuardResult.allow(GUARD_NAME, f"payload={len(payload)} bytes")

    def evaluate_submission(self, target: Optional[str], value: int, payload: bytes) -> GuardResult:
        for result in (
            self.evaluate_target(target),
            self.evaluate_amount(value, "value"),
            self.evaluate_payload(payload),
        ):
            if not result.passed:
                return result
        return GuardResult.allow(GUARD_NAME, "submission arguments valid")
