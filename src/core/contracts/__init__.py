"""
Contract Validation Module

Модуль для валидации JSON контрактов multisig кошелька.
"""

from .validators import (
    ContractValidator,
    EventRecordValidator,
    MultiSigConfigValidator,
    SchemaLoader,
    TransactionValidator,
    validate_event_record,
    validate_multisig_config,
    validate_transaction,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "MultiSigConfigValidator",
    "TransactionValidator",
    "EventRecordValidator",
    # Functions
    "validate_multisig_config",
    "validate_transaction",
    "validate_event_record",
]
