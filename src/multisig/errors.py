"""Ошибки multisig кошелька.

Два рода ошибок:
- PreconditionViolation — операция отклонена до любой мутации состояния.
- ExecutionFailed — forwarded call сообщил о неуспехе; попытка execute
  откатывается целиком, транзакция остаётся Executable.
"""

from typing import Optional


class MultiSigError(Exception):
    """Base class for wallet errors."""

    reason: str = "multisig_error"

    def __init__(self, details: str = ""):
        super().__init__(details or self.reason)
        self.details = details


class PreconditionViolation(MultiSigError):
    """Raised before any state mutation when a guard blocks the operation."""

    reason = "precondition_violation"


class InvalidConfiguration(PreconditionViolation):
    """Raised when owners or quorum are invalid at construction."""

    reason = "invalid_configuration"


class NotOwner(PreconditionViolation):
    """Raised when the caller is not a registered owner."""

    reason = "not_owner"


class NotFound(PreconditionViolation):
    """Raised when the transaction id is out of range."""

    reason = "tx_not_found"


class AlreadyExecuted(PreconditionViolation):
    """Raised when the transaction has already been executed."""

    reason = "tx_already_executed"


class AlreadyApproved(PreconditionViolation):
    """Raised when the owner has already approved the transaction."""

    reason = "tx_already_approved"


class NotYetApproved(PreconditionViolation):
    """Raised on revoke without a prior approval."""

    reason = "tx_not_approved"


class InsufficientApprovals(PreconditionViolation):
    """Raised when approvals count is below quorum at execute time."""

    reason = "insufficient_approvals"


class InvalidAmount(PreconditionViolation):
    """Raised when an amount is not a non-negative integer."""

    reason = "invalid_amount"


class InvalidTarget(PreconditionViolation):
    """Raised when the transaction target is empty."""

    reason = "invalid_target"


class InvalidPayload(PreconditionViolation):
    """Raised when the payload is not bytes."""

    reason = "invalid_payload"


class ExecutionFailed(MultiSigError):
    """Raised when the forwarded call reports failure."""

    reason = "execution_failed"

    def __init__(
        self,
        transaction_id: int,
        details: str = "",
        return_payload: bytes = b"",
    ):
        super().__init__(details or f"execution of transaction {transaction_id} failed")
        self.transaction_id = transaction_id
        self.return_payload = return_payload


PRECONDITION_ERRORS = {
    cls.reason: cls
    for cls in (
        InvalidConfiguration,
        NotOwner,
        NotFound,
        AlreadyExecuted,
        AlreadyApproved,
        NotYetApproved,
        InsufficientApprovals,
        InvalidAmount,
        InvalidTarget,
        InvalidPayload,
    )
}


def error_for_reason(reason: str, details: str = "") -> PreconditionViolation:
    """Typed PreconditionViolation for a guard block_reason."""
    error_cls: Optional[type] = PRECONDITION_ERRORS.get(reason)
    if error_cls is None:
        return PreconditionViolation(f"{reason}: {details}" if details else reason)
    return error_cls(details)
