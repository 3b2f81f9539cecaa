"""
Mock (test) input provider.

Provides scripted controller samples for testing without physical hardware.

Scripts assume the default controller layout: axis 5 drives chassis x,
axis 2 drives gimbal yaw, button 5 enables, button 4 is turbo when
configured.
"""

import logging
from typing import List, Optional

from teleop.types import InputSample


logger = logging.getLogger(__name__)

AXIS_COUNT = 8
BUTTON_COUNT = 12
ENABLE_BUTTON = 5
TURBO_BUTTON = 4


def make_sample(
    x: float = 0.0,
    yaw: float = 0.0,
    enable: bool = False,
    turbo: bool = False,
) -> InputSample:
    """Build a sample on the default layout"""
    axes = [0.0] * AXIS_COUNT
    axes[5] = x
    axes[2] = yaw
    buttons = [False] * BUTTON_COUNT
    buttons[ENABLE_BUTTON] = enable
    buttons[TURBO_BUTTON] = turbo
    return InputSample(axes=axes, buttons=buttons)


class MockInput:
    """
    Mock input provider for testing.

    Returns scripted samples in order, then keeps returning the last one.
    """

    def __init__(self, samples: Optional[List[InputSample]] = None) -> None:
        """
        Initialize mock input.

        Args:
            samples: Samples to return in sequence.
                     If None, returns an idle (disabled) sample.
        """
        self._samples = samples or []
        self._index = 0
        self._running = False
        self._default_sample = make_sample()

    async def start(self) -> None:
        """Start the input provider"""
        logger.info(f"[MOCK INPUT] Started - Script mode ({len(self._samples)} samples)")
        self._running = True
        self._index = 0

    async def stop(self) -> None:
        """Stop the input provider"""
        logger.info("[MOCK INPUT] Stopped")
        self._running = False

    async def read_sample(self) -> Optional[InputSample]:
        """Return next scripted sample"""
        if not self._running:
            return None

        if not self._samples:
            return self._default_sample

        if self._index >= len(self._samples):
            return self._samples[-1]

        sample = self._samples[self._index]
        self._index += 1
        return sample

    @property
    def exhausted(self) -> bool:
        """True once every scripted sample has been read"""
        return self._index >= len(self._samples)

    def reset(self) -> None:
        """Reset to beginning of script"""
        self._index = 0

    def load_script(self, script_name: str) -> None:
        """
        Load a predefined test script.

        Args:
            script_name: Name of script to load from TestScripts

        Raises:
            KeyError: if the script name is unknown
        """
        script_map = {
            "forward": TestScripts.forward_drive,
            "release": TestScripts.enable_release,
            "turbo": TestScripts.turbo_burst,
            "reverse": TestScripts.reverse_turn,
        }

        if script_name not in script_map:
            raise KeyError(f"Unknown script '{script_name}'")

        self._samples = script_map[script_name]()
        self._index = 0
        logger.info(f"Loaded script '{script_name}' with {len(self._samples)} samples")

    @staticmethod
    def script_names() -> List[str]:
        return ["forward", "release", "turbo", "reverse"]


class TestScripts:
    """Pre-defined test scripts"""

    __test__ = False

    @staticmethod
    def forward_drive() -> List[InputSample]:
        """Enable, drive forward while panning, release"""
        return [
            make_sample(),
            make_sample(enable=True),
            make_sample(x=0.3, enable=True),
            make_sample(x=0.6, yaw=0.2, enable=True),
            make_sample(x=0.8, yaw=0.2, enable=True),
            make_sample(x=0.8, enable=True),
            make_sample(x=0.4, enable=True),
            make_sample(x=0.0, enable=True),
            make_sample(),
        ]

    @staticmethod
    def enable_release() -> List[InputSample]:
        """Release the enable button mid-drive and stay released"""
        return [
            make_sample(x=0.8, enable=True),
            make_sample(x=0.8, enable=True),
            make_sample(x=0.8),
            make_sample(x=0.8),
            make_sample(),
        ]

    @staticmethod
    def turbo_burst() -> List[InputSample]:
        """Normal drive, turbo without enable, back to normal"""
        return [
            make_sample(x=0.5, enable=True),
            make_sample(x=0.5, turbo=True),
            make_sample(x=1.0, turbo=True),
            make_sample(x=0.5, enable=True),
            make_sample(),
        ]

    @staticmethod
    def reverse_turn() -> List[InputSample]:
        """Turn forwards then backwards"""
        return [
            make_sample(x=0.5, yaw=0.6, enable=True),
            make_sample(x=-0.5, yaw=0.6, enable=True),
            make_sample(x=-0.5, yaw=-0.6, enable=True),
            make_sample(),
        ]
