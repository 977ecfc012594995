"""Tests for the gate state machine."""

import pytest

from gradsync.application.gate import GateMachine, GateState
from gradsync.core.exceptions import GateTransitionError


class TestGateMachine:
    """Tests for GateMachine transitions."""

    @pytest.fixture
    def gate(self):
        return GateMachine(secret="74511")

    def test_starts_locked(self, gate):
        assert gate.state is GateState.LOCKED
        assert not gate.is_unlocked
        assert not gate.is_visible

    def test_open_prompts(self, gate):
        assert gate.open() is GateState.UNLOCKING

    def test_open_while_prompting_is_noop(self, gate):
        gate.open()
        assert gate.open() is GateState.UNLOCKING

    def test_correct_secret_unlocks_visible(self, gate):
        gate.open()

        assert gate.submit("74511")
        assert gate.state is GateState.UNLOCKED_VISIBLE
        assert gate.is_unlocked
        assert gate.is_visible

    def test_incorrect_secret_stays_prompting(self, gate):
        gate.open()

        assert not gate.submit("12345")
        assert not gate.submit("")
        assert gate.state is GateState.UNLOCKING
        assert gate.failed_attempts == 2

    def test_correct_secret_resets_failures(self, gate):
        gate.open()
        gate.submit("nope")
        gate.submit("74511")

        assert gate.failed_attempts == 0

    def test_cancel_relocks(self, gate):
        gate.open()

        assert gate.cancel() is GateState.LOCKED

    def test_toggle_flips_visibility(self, gate):
        gate.open()
        gate.submit("74511")

        assert gate.toggle() is GateState.UNLOCKED_HIDDEN
        assert gate.is_unlocked
        assert not gate.is_visible
        assert gate.toggle() is GateState.UNLOCKED_VISIBLE

    def test_open_while_unlocked_toggles(self, gate):
        gate.open()
        gate.submit("74511")

        assert gate.open() is GateState.UNLOCKED_HIDDEN
        assert gate.open() is GateState.UNLOCKED_VISIBLE

    def test_submit_while_locked_raises(self, gate):
        with pytest.raises(GateTransitionError):
            gate.submit("74511")

    def test_cancel_while_locked_raises(self, gate):
        with pytest.raises(GateTransitionError):
            gate.cancel()

    def test_toggle_while_locked_raises(self, gate):
        with pytest.raises(GateTransitionError):
            gate.toggle()

    def test_toggle_while_prompting_raises(self, gate):
        gate.open()
        with pytest.raises(GateTransitionError):
            gate.toggle()

    def test_custom_secret(self):
        gate = GateMachine(secret="hunter2")
        gate.open()

        assert not gate.submit("74511")
        assert gate.submit("hunter2")

