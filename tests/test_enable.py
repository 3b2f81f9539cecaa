"""Tests for the enable state machine"""

import pytest

from teleop.enable import EnableStateMachine, classify
from teleop.types import DispatchState, EnableState, InputSample, TeleopConfig

from helpers import pad, pad_config


def test_enable_pressed_is_normal():
    assert classify(pad(enable=True), pad_config()) == EnableState.NORMAL


def test_enable_released_is_disabled():
    assert classify(pad(), pad_config()) == EnableState.DISABLED


@pytest.mark.parametrize("enable", [True, False])
def test_turbo_wins_regardless_of_enable(enable):
    """Turbo held always yields TURBO"""
    assert classify(pad(enable=enable, turbo=True), pad_config()) == EnableState.TURBO


def test_turbo_ignored_when_not_configured():
    config = pad_config()
    config.turbo_button = -1
    assert classify(pad(turbo=True), config) == EnableState.DISABLED
    assert classify(pad(enable=True, turbo=True), config) == EnableState.NORMAL


def test_turbo_button_beyond_sample():
    """Short button list is released, not an error"""
    config = pad_config()
    config.turbo_button = 7
    assert classify(pad(enable=True), config) == EnableState.NORMAL


def test_enable_button_beyond_sample():
    config = TeleopConfig(enable_button=9)
    assert classify(InputSample(buttons=[True] * 3), config) == EnableState.DISABLED


def test_enable_not_required():
    config = pad_config(require_enable_button=False)
    assert classify(pad(), config) == EnableState.NORMAL
    assert classify(InputSample(), config) == EnableState.NORMAL


@pytest.fixture
def machine():
    return EnableStateMachine(pad_config(), DispatchState())


def test_disabled_from_start_needs_no_stop(machine):
    """Nothing to stop before anything was enabled"""
    transition = machine.update(pad())
    assert transition.state == EnableState.DISABLED
    assert transition.stop_required is False


def test_single_stop_per_disable_edge(machine):
    machine.update(pad(enable=True))
    assert machine.dispatch_state.sent_disable_msg is True

    stops = [machine.update(pad()).stop_required for _ in range(5)]
    assert stops == [True, False, False, False, False]
    assert machine.dispatch_state.sent_disable_msg is False


def test_edge_rearms_after_enable(machine):
    machine.update(pad(enable=True))
    assert machine.update(pad()).stop_required is True
    machine.update(pad(turbo=True))
    assert machine.update(pad()).stop_required is True


def test_state_callbacks(machine):
    """Callbacks see every state change once"""
    seen = []
    machine.add_state_callback(lambda old, new: seen.append((old, new)))

    machine.update(pad(enable=True))
    machine.update(pad(enable=True))
    machine.update(pad(turbo=True))
    machine.update(pad())

    assert seen == [
        (None, EnableState.NORMAL),
        (EnableState.NORMAL, EnableState.TURBO),
        (EnableState.TURBO, EnableState.DISABLED),
    ]


def test_failing_callback_does_not_propagate(machine):
    def broken(old, new):
        raise RuntimeError("boom")

    machine.add_state_callback(broken)
    transition = machine.update(pad(enable=True))
    assert transition.state == EnableState.NORMAL
    assert machine.state == EnableState.NORMAL
