"""
Tests for JSON Schema Contract Validators

Комплексное тестирование JSON Schema валидаторов:
- Валидность самих схем
- Валидация правильных данных
- Детекция нарушений required полей
- Детекция нарушений типов и constraints (min/enum/pattern)
- Интеграция с Pydantic моделями (to_record)
"""

import pytest
from jsonschema import ValidationError

from src.core.contracts import (
    EventRecordValidator,
    MultiSigConfigValidator,
    SchemaLoader,
    TransactionValidator,
    validate_event_record,
    validate_multisig_config,
    validate_transaction,
)
from src.core.domain import (
    ApproveEvent,
    DepositEvent,
    ExecutedEvent,
    RevokeEvent,
    SubmitEvent,
    Transaction,
)


# =============================================================================
# FIXTURES - VALID DATA SAMPLES
# =============================================================================


@pytest.fixture
def valid_config():
    return {"owners": ["0x" + "aa" * 20, "0x" + "bb" * 20], "quorum": 2}


@pytest.fixture
def valid_transaction():
    return {
        "transaction_id": 3,
        "owner": "alice",
        "target": "dave",
        "value": 10,
        "payload": "cafe",
        "executed": False,
    }


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class TestSchemaLoader:
    """Тесты загрузчика схем."""

    @pytest.mark.parametrize("name", ["multisig_config", "transaction", "event_record"])
    def test_schemas_load(self, name):
        schema = SchemaLoader().load_schema(name)

        assert schema["$schema"] == "https://json-schema.org/draft/2020-12/schema"

    def test_schema_is_cached(self):
        loader = SchemaLoader()

        assert loader.load_schema("transaction") is loader.load_schema("transaction")

    def test_missing_schema(self):
        with pytest.raises(FileNotFoundError):
            SchemaLoader().load_schema("does_not_exist")


# =============================================================================
# MULTISIG CONFIG
# =============================================================================


class TestMultiSigConfigContract:
    """multisig_config.json"""

    def test_valid(self, valid_config):
        validate_multisig_config(valid_config)

    def test_empty_owners(self, valid_config):
        valid_config["owners"] = []

        with pytest.raises(ValidationError):
            validate_multisig_config(valid_config)

    def test_zero_quorum(self, valid_config):
        valid_config["quorum"] = 0

        assert not MultiSigConfigValidator().is_valid(valid_config)

    def test_error_messages_are_sorted_paths(self, valid_config):
        valid_config["owners"] = ["", 5]

        messages = MultiSigConfigValidator().error_messages(valid_config)

        assert len(messages) == 2
        assert messages[0].startswith("owners/0:")
        assert messages[1].startswith("owners/1:")


# =============================================================================
# TRANSACTION
# =============================================================================


class TestTransactionContract:
    """transaction.json"""

    def test_valid(self, valid_transaction):
        validate_transaction(valid_transaction)

    def test_model_record_is_valid(self):
        tx = Transaction(transaction_id=0, owner="alice", target="dave", value=1, payload=b"\x00\xff")

        validate_transaction(tx.to_record())

    @pytest.mark.parametrize("payload", ["0xcafe", "abc", "CAFE", "zz"])
    def test_payload_must_be_lower_hex_bytes(self, valid_transaction, payload):
        valid_transaction["payload"] = payload

        assert not TransactionValidator().is_valid(valid_transaction)

    def test_negative_value(self, valid_transaction):
        valid_transaction["value"] = -1

        with pytest.raises(ValidationError):
            validate_transaction(valid_transaction)

    def test_missing_executed(self, valid_transaction):
        del valid_transaction["executed"]

        with pytest.raises(ValidationError):
            validate_transaction(valid_transaction)


# =============================================================================
# EVENT RECORD
# =============================================================================


class TestEventRecordContract:
    """event_record.json"""

    @pytest.mark.parametrize(
        "event",
        [
            DepositEvent(sequence=0, sender="funder", amount=5, balance=5),
            SubmitEvent(sequence=1, transaction_id=0, owner="a", target="b", value=0, payload="00"),
            ApproveEvent(sequence=2, owner="a", transaction_id=0),
            RevokeEvent(sequence=3, owner="a", transaction_id=0),
            ExecutedEvent(sequence=4, transaction_id=0, executor="x", value=0),
        ],
    )
    def test_model_records_are_valid(self, event):
        validate_event_record(event.to_record())

    def test_unknown_event_type(self):
        record = {"sequence": 0, "event_type": "Cancel", "transaction_id": 0}

        assert not EventRecordValidator().is_valid(record)

    def test_approve_without_owner(self):
        with pytest.raises(ValidationError):
            validate_event_record({"sequence": 0, "event_type": "Approve", "transaction_id": 0})

    def test_deposit_negative_amount(self):
        record = {"sequence": 0, "event_type": "Deposit", "sender": "x", "amount": -1, "balance": 0}

        assert not EventRecordValidator().is_valid(record)
