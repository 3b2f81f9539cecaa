"""Tests for the value mapper"""

import pytest

from teleop.mapper import map_value
from teleop.types import UNMAPPED, InputSample


AXES = {"x": 1, "y": UNMAPPED, "yaw": 4}
SCALES = {"x": 0.5, "y": 1.0}


def test_scaled_value():
    """Mapped channel is axis * scale"""
    sample = InputSample(axes=[0.0, 0.8])
    assert map_value(AXES, SCALES, "x", sample) == pytest.approx(0.4)


def test_negative_input_keeps_sign():
    sample = InputSample(axes=[0.0, -1.0])
    assert map_value(AXES, SCALES, "x", sample) == pytest.approx(-0.5)


def test_channel_not_in_axis_map():
    sample = InputSample(axes=[1.0, 1.0])
    assert map_value(AXES, SCALES, "pitch", sample) == 0.0


def test_unmapped_channel():
    """Sentinel axis index reads as zero"""
    sample = InputSample(axes=[1.0, 1.0])
    assert map_value(AXES, SCALES, "y", sample) == 0.0


def test_channel_without_scale():
    """yaw is mapped but has no scale"""
    sample = InputSample(axes=[1.0] * 6)
    assert map_value(AXES, SCALES, "yaw", sample) == 0.0


@pytest.mark.parametrize("axis_count", [0, 1, 2, 4])
def test_short_sample_reads_zero(axis_count):
    """Axis index beyond the sample is exactly 0.0, no error"""
    sample = InputSample(axes=[1.0] * axis_count)
    assert map_value({"yaw": 4}, {"yaw": 3.0}, "yaw", sample) == 0.0


def test_last_axis_in_range():
    sample = InputSample(axes=[0.0] * 4 + [1.0])
    assert map_value({"yaw": 4}, {"yaw": 3.0}, "yaw", sample) == pytest.approx(3.0)


def test_mapper_is_pure():
    """Same inputs, same output, inputs untouched"""
    axes = dict(AXES)
    scales = dict(SCALES)
    sample = InputSample(axes=[0.0, 0.8])
    first = map_value(axes, scales, "x", sample)
    second = map_value(axes, scales, "x", sample)
    assert first == second
    assert axes == AXES
    assert scales == SCALES
