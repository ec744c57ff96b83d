"""Guards — предусловия операций multisig кошелька.

- GUARD 0: Configuration (owners, quorum)
- GUARD 1: Owner access (submit/approve/revoke)
- GUARD 2: Transaction state (exists, not executed)
- GUARD 3: Approval (duplicate approve / revoke без approve)
- GUARD 4: Quorum (approvals_count ≥ quorum)
- GUARD 5: Arguments (amount ≥ 0, target, payload)
"""

from .result import GuardResult, raise_if_blocked
from .guard_00_configuration import Guard00Configuration
from .guard_01_owner_access import Guard01OwnerAccess
from .guard_02_transaction_state import Guard02TransactionState
from .guard_03_approval import Guard03Approval
from .guard_04_quorum import Guard04Quorum
from .guard_05_arguments import Guard05Arguments

__all__ = [
    "GuardResult",
    "raise_if_blocked",
    "Guard00Configuration",
    "Guard01OwnerAccess",
    "Guard02TransactionState",
    "Guard03Approval",
    "Guard04Quorum",
    "Guard05Arguments",
]
