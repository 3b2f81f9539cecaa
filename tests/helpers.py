"""Test helpers: fake clock and the test controller layout"""

from teleop.types import InputSample, TeleopConfig


class FakeClock:
    """Manually advanced monotonic clock"""

    def __init__(self, start: float = 100.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def pad(x: float = 0.0, y: float = 0.0, yaw: float = 0.0, pitch: float = 0.0,
        enable: bool = False, turbo: bool = False) -> InputSample:
    """
    Sample on the test layout.

    Axes: 0=x, 1=y, 2=yaw, 3=pitch. Buttons: 0=enable, 1=turbo.
    """
    return InputSample(axes=(x, y, yaw, pitch), buttons=(enable, turbo))


def pad_config(**overrides) -> TeleopConfig:
    """Config matching pad(): normal scales 1.0, turbo scales 2.0"""
    config = TeleopConfig(enable_button=0, turbo_button=1, **overrides)
    config.chassis.axes = {"x": 0, "y": 1, "yaw": -1}
    config.chassis.profiles = {
        "normal": {"x": 1.0, "y": 1.0, "z": 0.0},
        "turbo": {"x": 2.0, "y": 2.0, "z": 0.0},
    }
    config.gimbal.axes = {"yaw": 2, "pitch": 3, "roll": -1}
    config.gimbal.profiles = {
        "normal": {"yaw": 1.0, "pitch": 1.0, "roll": 0.0},
        "turbo": {"yaw": 2.0, "pitch": 2.0, "roll": 0.0},
    }
    return config
