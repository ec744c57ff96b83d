"""Multisig — совместное управление балансом и forwarded calls с quorum.

Компоненты (от листьев):
- OwnerRegistry — неизменяемый набор владельцев
- TransactionLog — append-only журнал предложенных операций
- ApprovalLedger — голоса owners и поддерживаемый счётчик
- ExecutionEngine — quorum-gated исполнение, ровно один раз
"""

from .approval_ledger import ApprovalLedger
from .config import MultiSigConfig
from .errors import (
    AlreadyApproved,
    AlreadyExecuted,
    ExecutionFailed,
    InsufficientApprovals,
    InvalidAmount,
    InvalidConfiguration,
    InvalidPayload,
    InvalidTarget,
    MultiSigError,
    NotFound,
    NotOwner,
    NotYetApproved,
    PreconditionViolation,
)
from .event_log import EventLog, ReplayState
from .execution_engine import ExecutionEngine
from .executor import (
    CallableExecutor,
    Executor,
    ForwardedCall,
    RecordingExecutor,
    RoutingExecutor,
)
from .owner_registry import OwnerRegistry
from .transaction_log import TransactionLog
from .wallet import MultiSigWallet

__all__ = [
    "MultiSigWallet",
    "MultiSigConfig",
    "OwnerRegistry",
    "TransactionLog",
    "ApprovalLedger",
    "ExecutionEngine",
    "EventLog",
    "ReplayState",
    "Executor",
    "CallableExecutor",
    "RecordingExecutor",
    "RoutingExecutor",
    "ForwardedCall",
    "MultiSigError",
    "PreconditionViolation",
    "InvalidConfiguration",
    "NotOwner",
    "NotFound",
    "AlreadyExecuted",
    "AlreadyApproved",
    "NotYetApproved",
    "InsufficientApprovals",
    "InvalidAmount",
    "InvalidTarget",
    "InvalidPayload",
    "ExecutionFailed",
]
