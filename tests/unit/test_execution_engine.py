"""Тесты для ExecutionEngine (через MultiSigWallet).

Coverage:
- execute: InsufficientApprovals / AlreadyExecuted / NotFound до любых изменений
- forwarding (target, value, payload), возврат return_payload
- ExecutionFailed: откат флага, баланса, голосов и журнала; повторная попытка
- deposit и удерживаемый баланс
- порядок checks-effects-interactions
"""

import pytest

from src.core.domain import DepositEvent, ExecutedEvent, ExecutionOutcome
from src.multisig import (
    AlreadyExecuted,
    CallableExecutor,
    ExecutionFailed,
    ForwardedCall,
    InsufficientApprovals,
    InvalidAmount,
    MultiSigWallet,
    NotFound,
    RecordingExecutor,
)


class TestDeposit:
    """Тесты deposit."""

    def test_deposit_from_anyone(self):
        wallet = MultiSigWallet(["alice", "bob"], 1)

        assert wallet.deposit("stranger", 100) == 100
        assert wallet.deposit("alice", 50) == 150
        assert wallet.balance == 150

    def test_deposit_emits_record(self):
        wallet = MultiSigWallet(["alice"], 1)

        wallet.deposit("stranger", 7)

        (event,) = wallet.events
        assert isinstance(event, DepositEvent)
        assert (event.sender, event.amount, event.balance) == ("stranger", 7, 7)

    def test_zero_deposit_allowed(self):
        wallet = MultiSigWallet(["alice"], 1)

        assert wallet.deposit("stranger", 0) == 0
        assert len(wallet.events) == 1

    def test_anonymous_sender(self):
        wallet = MultiSigWallet(["alice"], 1)

        wallet.deposit(None, 1)

        assert wallet.events[0].sender == "anonymous"

    @pytest.mark.parametrize("amount", [-1, 2.5, "10", True])
    def test_invalid_amount(self, amount):
        wallet = MultiSigWallet(["alice"], 1)

        with pytest.raises(InvalidAmount):
            wallet.deposit("stranger", amount)

        assert wallet.balance == 0
        assert wallet.events == ()


class TestExecute:
    """Тесты execute."""

    @pytest.fixture
    def executor(self):
        return RecordingExecutor(outcome=ExecutionOutcome.ok(b"\x00\x01"))

    @pytest.fixture
    def wallet(self, executor):
        wallet = MultiSigWallet(["alice", "bob", "carol"], 2, executor=executor)
        wallet.deposit("funder", 1_000)
        wallet.submit("alice", "dave", 300, b"\xca\xfe")
        return wallet

    def test_execute_below_quorum_fails(self, wallet, executor):
        wallet.approve(0, "alice")

        with pytest.raises(InsufficientApprovals):
            wallet.execute(0)

        assert not wallet.get_transaction(0).executed
        assert executor.calls == []
        assert wallet.balance == 1_000

    def test_execute_forwards_and_returns_payload(self, wallet, executor):
        wallet.approve(0, "alice")
        wallet.approve(0, "bob")

        result = wallet.execute(0, caller="anyone")

        assert result == b"\x00\x01"
        assert executor.calls == [ForwardedCall(target="dave", value=300, payload=b"\xca\xfe")]
        assert wallet.get_transaction(0).executed
        assert wallet.balance == 700

        event = wallet.events[-1]
        assert isinstance(event, ExecutedEvent)
        assert (event.transaction_id, event.executor, event.value) == (0, "anyone", 300)

    def test_execute_open_to_non_owner(self, wallet):
        wallet.approve(0, "alice")
        wallet.approve(0, "bob")

        wallet.execute(0, caller="mallory")

        assert wallet.get_transaction(0).executed

    def test_execute_twice_fails(self, wallet, executor):
        wallet.approve(0, "alice")
        wallet.approve(0, "bob")
        wallet.execute(0)

        with pytest.raises(AlreadyExecuted):
            wallet.execute(0)

        assert len(executor.calls) == 1
        assert wallet.balance == 700

    def test_execute_missing_transaction(self, wallet):
        with pytest.raises(NotFound):
            wallet.execute(5)

    def test_is_executable(self, wallet):
        assert not wallet.is_executable(0)
        wallet.approve(0, "alice")
        wallet.approve(0, "bob")
        assert wallet.is_executable(0)
        wallet.execute(0)
        assert not wallet.is_executable(0)
        assert not wallet.is_executable(42)

    def test_revoke_after_quorum_blocks_execute(self, wallet):
        wallet.approve(0, "alice")
        wallet.approve(0, "bob")
        wallet.revoke(0, "bob")

        with pytest.raises(InsufficientApprovals):
            wallet.execute(0)

    def test_execution_failed_rolls_back(self, wallet, executor):
        wallet.approve(0, "alice")
        wallet.approve(0, "bob")
        events_before = wallet.events
        executor.outcome = ExecutionOutcome.failed(b"revert: nope")

        with pytest.raises(ExecutionFailed) as exc_info:
            wallet.execute(0)

        assert exc_info.value.transaction_id == 0
        assert exc_info.value.return_payload == b"revert: nope"
        assert not wallet.get_transaction(0).executed
        assert wallet.balance == 1_000
        assert wallet.approvals_count(0) == 2
        assert wallet.events == events_before
        assert wallet.is_executable(0)

    def test_retry_after_failure(self, wallet, executor):
        wallet.approve(0, "alice")
        wallet.approve(0, "bob")
        executor.outcome = ExecutionOutcome.failed()
        with pytest.raises(ExecutionFailed):
            wallet.execute(0)

        executor.outcome = ExecutionOutcome.ok(b"done")

        assert wallet.execute(0) == b"done"
        assert len(executor.calls) == 2
        assert wallet.balance == 700

    def test_insufficient_balance_is_execution_failure(self, executor):
        wallet = MultiSigWallet(["alice"], 1, executor=executor)
        wallet.deposit("funder", 10)
        wallet.submit("alice", "dave", 11)
        wallet.approve(0, "alice")

        with pytest.raises(ExecutionFailed, match="insufficient balance"):
            wallet.execute(0)

        assert executor.calls == []
        assert not wallet.get_transaction(0).executed
        assert wallet.balance == 10

        wallet.deposit("funder", 1)
        wallet.execute(0)
        assert wallet.balance == 0

    def test_executor_exception_rolls_back(self):
        def explode(target, value, payload):
            raise RuntimeError("target crashed")

        wallet = MultiSigWallet(["alice"], 1, executor=CallableExecutor(explode))
        wallet.submit("alice", "dave")
        wallet.approve(0, "alice")

        with pytest.raises(ExecutionFailed, match="target crashed") as exc_info:
            wallet.execute(0)

        assert isinstance(exc_info.value.__cause__, RuntimeError)
        assert not wallet.get_transaction(0).executed

    def test_flag_and_balance_committed_before_forward(self, wallet, executor):
        """executed=True и списание value видны внутри forwarded call.

        Поведение отличается от порядка «сначала вызов, потом флаг»:
        флаг фиксируется до interaction и откатывается при неуспехе.
        """
        observed = {}

        def inspect(call):
            observed["executed"] = wallet.get_transaction(0).executed
            observed["balance"] = wallet.balance
            observed["executable"] = wallet.is_executable(0)

        executor.on_forward = inspect
        wallet.approve(0, "alice")
        wallet.approve(0, "bob")

        wallet.execute(0)

        assert observed == {"executed": True, "balance": 700, "executable": False}

    def test_approvals_above_quorum(self, wallet):
        for owner in ("alice", "bob", "carol"):
            wallet.approve(0, owner)

        assert wallet.approvals_count(0) == 3
        wallet.execute(0)
        assert wallet.get_transaction(0).executed


class TestExecutorResults:
    """Результат forward, не являющийся ExecutionOutcome."""

    class FixedResultExecutor:
        """Executor без ExecutionOutcome: возвращает заданное значение как есть."""

        def __init__(self, result):
            self.result = result
            self.calls = 0

        def forward(self, target, value, payload):
            self.calls += 1
            return self.result

    def _wallet(self, executor):
        wallet = MultiSigWallet(["alice"], 1, executor=executor)
        wallet.deposit("funder", 100)
        wallet.submit("alice", "dave", 40)
        wallet.approve(0, "alice")
        return wallet

    def _assert_matches_replay(self, wallet):
        state = wallet.event_log.replay(wallet.events)

        assert state.balance == wallet.balance
        assert state.transactions == list(wallet.get_transactions())

    def test_tuple_success(self):
        wallet = self._wallet(self.FixedResultExecutor((True, b"ok")))

        assert wallet.execute(0) == b"ok"
        assert wallet.get_transaction(0).executed
        assert wallet.balance == 60
        self._assert_matches_replay(wallet)

    def test_tuple_failure(self):
        wallet = self._wallet(self.FixedResultExecutor((False, b"revert")))

        with pytest.raises(ExecutionFailed) as exc_info:
            wallet.execute(0)

        assert exc_info.value.return_payload == b"revert"
        assert not wallet.get_transaction(0).executed
        assert wallet.balance == 100
        self._assert_matches_replay(wallet)

    @pytest.mark.parametrize(
        "result",
        [None, 42, "ok", (True,), (True, b"x", b"y"), ("yes", b""), (True, "text")],
    )
    def test_malformed_result_rolls_back(self, result):
        executor = self.FixedResultExecutor(result)
        wallet = self._wallet(executor)
        events_before = wallet.events

        with pytest.raises(ExecutionFailed) as exc_info:
            wallet.execute(0)

        assert isinstance(exc_info.value.__cause__, TypeError)
        assert executor.calls == 1
        assert not wallet.get_transaction(0).executed
        assert wallet.balance == 100
        assert wallet.events == events_before
        assert wallet.is_executable(0)
        self._assert_matches_replay(wallet)

    def test_retry_after_malformed_result(self):
        executor = self.FixedResultExecutor(None)
        wallet = self._wallet(executor)
        with pytest.raises(ExecutionFailed):
            wallet.execute(0)

        executor.result = (True, b"")

        assert wallet.execute(0) == b""
        assert wallet.balance == 60
        self._assert_matches_replay(wallet)
