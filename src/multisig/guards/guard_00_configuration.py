"""GUARD 0: Configuration — owners и quorum при конструировании

Блокирует конструирование при:
- пустом списке owners
- нестроковом идентификаторе (int и т.п.)
- нулевом идентификаторе (None, "", "0", 0x000...0)
- дубликате (после нормализации идентификатора)
- quorum вне диапазона 1 ≤ quorum ≤ owner_count (или не int)
"""

from typing import Sequence

from src.core.domain.identifiers import is_identifier, is_zero_identifier, normalize_identifier
from src.multisig.guards.result import GuardResult


GUARD_NAME = "guard_00_configuration"
BLOCK_REASON = "invalid_configuration"


class Guard00Configuration:
    """GUARD 0: проверка owners и quorum.

    Порядок проверок:
    1. owners не пуст
    2. только строковые, ненулевые идентификаторы
    3. нет дубликатов
    4. quorum — int в [1, owner_count]
    """

    def evaluate_owners(self, owners: Sequence[str]) -> GuardResult:
        if owners is None or len(owners) == 0:
            return GuardResult.block(GUARD_NAME, BLOCK_REASON, "owners required")

        seen = set()
        for index, owner in enumerate(owners):
            if owner is not None and not is_identifier(owner):
                return GuardResult.block(
                    GUARD_NAME,
                    BLOCK_REASON,
                    f"invalid owner at index {index}: must be a string, got {type(owner).__name__}",
                )
            if is_zero_identifier(owner):
                return GuardResult.block(
                    GUARD_NAME, BLOCK_REASON, f"invalid owner at index {index}: zero identifier"
                )
            normalized = normalize_identifier(owner)
            if normalized in seen:
                return GuardResult.block(
                    GUARD_NAME, BLOCK_REASON, f"owner not unique: {normalized}"
                )
            seen.add(normalized)

        return GuardResult.allow(GUARD_NAME, f"owners={len(owners)}")

    def evaluate_quorum(self, quorum: int, owner_count: int) -> GuardResult:
        # bool является подклассом int
        if isinstance(quorum, bool) or not isinstance(quorum, int):
            return GuardResult.block(
                GUARD_NAME, BLOCK_REASON, f"quorum must be an integer, got {type(quorum).__name__}"
            )
        if quorum < 1 or quorum > owner_count:
            return GuardResult.block(
                GUARD_NAME,
                BLOCK_REASON,
                f"invalid number of required confirmations: quorum={quorum}, owners={owner_count}",
            )
        return GuardResult.allow(GUARD_NAME, f"quorum={quorum}/{owner_count}")

    def evaluate(self, owners: Sequence[str], quorum: int) -> GuardResult:
        owners_result = self.evaluate_owners(owners)
        if not owners_result.passed:
            return owners_result
        return self.evaluate_quorum(quorum, len(owners))
