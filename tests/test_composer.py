"""Tests for the command composer"""

import pytest

from teleop.composer import CommandComposer, compose_velocity
from teleop.types import GimbalState

from helpers import pad, pad_config


def test_linear_and_angular_channels():
    config = pad_config()
    command = compose_velocity(pad(x=0.4, y=-0.2, yaw=0.3, pitch=0.1), "normal", config)
    assert command.linear.x == pytest.approx(0.4)
    assert command.linear.y == pytest.approx(-0.2)
    assert command.linear.z == 0.0
    assert command.angular.z == pytest.approx(0.3)
    assert command.angular.y == pytest.approx(0.1)
    assert command.angular.x == 0.0


def test_turbo_profile():
    command = compose_velocity(pad(x=0.4, yaw=0.3), "turbo", pad_config())
    assert command.linear.x == pytest.approx(0.8)
    assert command.angular.z == pytest.approx(0.6)


@pytest.mark.parametrize("x, expected_yaw", [(-0.5, -0.3), (0.5, 0.3), (0.0, 0.3)])
def test_inverted_reverse(x, expected_yaw):
    """Yaw flips only while lin.x is negative"""
    config = pad_config(inverted_reverse=True)
    command = compose_velocity(pad(x=x, yaw=0.3), "normal", config)
    assert command.angular.z == pytest.approx(expected_yaw)


def test_reverse_without_inversion():
    command = compose_velocity(pad(x=-0.5, yaw=0.3), "normal", pad_config())
    assert command.angular.z == pytest.approx(0.3)


def test_unstamped_by_default():
    command = compose_velocity(pad(x=0.1), "normal", pad_config(), stamp=5.0)
    assert command.is_stamped is False
    assert command.frame_id is None


def test_stamped_twist():
    config = pad_config(publish_stamped_twist=True, robot_base_frame="chassis")
    command = compose_velocity(pad(x=0.1), "normal", config, stamp=5.0)
    assert command.stamp == 5.0
    assert command.frame_id == "chassis"


def test_compose_integrates_gimbal_first():
    """Gimbal positions include this sample's integration step"""
    state = GimbalState()
    composer = CommandComposer(pad_config(), state)

    _, first = composer.compose(pad(yaw=0.5, pitch=-0.2), "normal", now=1.0)
    assert first.positions == (0.0, 0.0)

    velocity, second = composer.compose(pad(yaw=0.5, pitch=-0.2), "normal", now=1.5)
    assert second.yaw == pytest.approx(0.25)
    assert second.pitch == pytest.approx(-0.1)
    assert second.stamp == 1.5
    assert state.yaw == pytest.approx(0.25)
    assert velocity.angular.z == pytest.approx(0.5)
