"""Input provider base module"""

from joy_input.mock_input import MockInput, TestScripts, make_sample
from joy_input.gamepad_input import GamepadInput, HAS_PYGAME

__all__ = ["MockInput", "TestScripts", "make_sample", "GamepadInput", "HAS_PYGAME"]
