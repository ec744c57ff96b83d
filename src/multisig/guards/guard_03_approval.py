"""GUARD 3: Approval — предыдущий голос owner-а по транзакции

- approve: owner ещё не подтвердил (иначе tx_already_approved)
- revoke: owner уже подтвердил (иначе tx_not_approved)
"""

from typing import Protocol

from src.multisig.guards.result import GuardResult


GUARD_NAME = "guard_03_approval"


class ApprovalLookup(Protocol):
    def has_approved(self, transaction_id: int, owner: str) -> bool: ...


class Guard03Approval:
    """GUARD 3: проверка голоса owner-а."""

    def evaluate_approve(self, ledger: ApprovalLookup, transaction_id: int, owner: str) -> GuardResult:
        if ledger.has_approved(transaction_id, owner):
            return GuardResult.block(
                GUARD_NAME, "tx_already_approved", f"tx already confirmed: id={transaction_id}, owner={owner}"
            )
        return GuardResult.allow(GUARD_NAME)

    def evaluate_revoke(self, ledger: ApprovalLookup, transaction_id: int, owner: str) -> GuardResult:
        if not ledger.has_approved(transaction_id, owner):
            return GuardResult.block(
                GUARD_NAME, "tx_not_approved", f"tx not confirmed: id={transaction_id}, owner={owner}"
            )
        return GuardResult.allow(GUARD_NAME)
