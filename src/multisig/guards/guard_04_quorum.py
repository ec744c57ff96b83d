"""GUARD 4: Quorum — approvals_count ≥ quorum перед execute"""

from src.multisig.guards.result import GuardResult


GUARD_NAME = "guard_04_quorum"


class Guard04Quorum:
    """GUARD 4: достаточно ли подтверждений."""

    def __init__(self, quorum: int):
        self.quorum = quorum

    def evaluate(self, transaction_id: int, approvals_count: int) -> GuardResult:
        if approvals_count < self.quorum:
            return GuardResult.block(
                GUARD_NAME,
                "insufficient_approvals",
                f"cannot execute tx {transaction_id}: approvals={approvals_count} < quorum={self.quorum}",
            )
        return GuardResult.allow(
            GUARD_NAME, f"approvals={approvals_count} >= quorum={self.quorum}"
        )
