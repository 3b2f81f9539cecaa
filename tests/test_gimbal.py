"""Tests for the gimbal integrator"""

import pytest

from teleop.gimbal import GimbalIntegrator
from teleop.types import ChannelGroup, GimbalState, InputSample


@pytest.fixture
def group():
    return ChannelGroup(
        axes={"yaw": 0, "pitch": 1, "roll": -1},
        profiles={
            "normal": {"yaw": 1.0, "pitch": 0.5},
            "turbo": {"yaw": 2.0, "pitch": 1.0},
        },
    )


def rates(yaw: float, pitch: float = 0.0) -> InputSample:
    return InputSample(axes=[yaw, pitch])


def test_first_step_sets_baseline(group):
    """No accumulation on the first step"""
    integrator = GimbalIntegrator(group)
    state = integrator.step(rates(1.0, 1.0), "normal", now=10.0)
    assert state.yaw == 0.0
    assert state.pitch == 0.0
    assert state.last_time == 10.0


def test_constant_rate_accumulates(group):
    """yaw = v*dt1 + v*dt2"""
    integrator = GimbalIntegrator(group)
    v = 0.7
    integrator.step(rates(v), "normal", now=0.0)
    integrator.step(rates(v), "normal", now=0.1)
    state = integrator.step(rates(v), "normal", now=0.35)
    assert state.yaw == pytest.approx(v * 0.1 + v * 0.25)


def test_pitch_uses_its_scale(group):
    integrator = GimbalIntegrator(group)
    integrator.step(rates(0.0, 1.0), "normal", now=0.0)
    state = integrator.step(rates(0.0, 1.0), "normal", now=2.0)
    assert state.pitch == pytest.approx(1.0)
    assert state.yaw == 0.0


def test_turbo_profile_scales_rate(group):
    integrator = GimbalIntegrator(group)
    integrator.step(rates(1.0), "turbo", now=0.0)
    state = integrator.step(rates(1.0), "turbo", now=1.0)
    assert state.yaw == pytest.approx(2.0)


def test_state_is_not_reset(group):
    """Opposite rates walk back, nothing snaps to zero"""
    integrator = GimbalIntegrator(group)
    integrator.step(rates(1.0), "normal", now=0.0)
    integrator.step(rates(1.0), "normal", now=1.0)
    integrator.step(rates(0.0), "normal", now=5.0)
    state = integrator.step(rates(-0.5), "normal", now=6.0)
    assert state.yaw == pytest.approx(0.5)


def test_continues_from_given_state(group):
    """Existing state object is the one updated"""
    shared = GimbalState(pitch=1.0, yaw=2.0, last_time=0.0)
    integrator = GimbalIntegrator(group, shared)
    integrator.step(rates(1.0), "normal", now=1.0)
    assert shared.yaw == pytest.approx(3.0)
    assert integrator.state is shared


def test_command_reports_state(group):
    integrator = GimbalIntegrator(group, GimbalState(pitch=0.25, yaw=-0.5))
    command = integrator.command(stamp=4.0)
    assert command.positions == (0.25, -0.5)
    assert command.names == ("gimbal_pitch_joint", "gimbal_yaw_joint")
    assert command.stamp == 4.0
