"""
Gamepad Input Provider

Reads raw axes and buttons from USB/wireless game controllers.
Which axis drives which channel is decided by the teleop configuration,
not here.
"""

import logging
from typing import Iterable, Optional

try:
    import pygame
    HAS_PYGAME = True
except ImportError:
    HAS_PYGAME = False

from teleop.types import InputSample


logger = logging.getLogger(__name__)


class GamepadInput:
    """
    Game controller input provider.

    Every axis and button of the selected controller ends up in the sample,
    index for index. Sticks report up as negative in pygame; list those axes
    in inverted_axes to get up = positive.
    """

    def __init__(
        self,
        joystick_index: int = 0,
        inverted_axes: Optional[Iterable[int]] = None,
    ) -> None:
        """
        Initialize gamepad input.

        Args:
            joystick_index: Which controller to use
            inverted_axes: Axis indices whose sign is flipped
        """
        if not HAS_PYGAME:
            raise RuntimeError(
                "pygame not installed. Install with: pip install pygame"
            )

        self._joystick_index = joystick_index
        self._inverted_axes = frozenset(inverted_axes or ())

        self._joystick: Optional["pygame.joystick.Joystick"] = None
        self._running = False

    async def start(self) -> None:
        """Initialize pygame and connect to controller"""
        if self._running:
            return

        logger.info("Initializing gamepad input...")

        pygame.init()
        pygame.joystick.init()

        joystick_count = pygame.joystick.get_count()
        logger.info(f"Found {joystick_count} game controller(s)")

        if joystick_count <= self._joystick_index:
            raise RuntimeError(f"Game controller {self._joystick_index} not found")

        self._joystick = pygame.joystick.Joystick(self._joystick_index)
        self._joystick.init()
        logger.info(f"Selected: {self._joystick.get_name()}")
        logger.info(f"Axes: {self._joystick.get_numaxes()}")
        logger.info(f"Buttons: {self._joystick.get_numbuttons()}")

        self._running = True

    async def stop(self) -> None:
        """Disconnect from controller"""
        logger.info("Stopping gamepad input")
        self._running = False

        if self._joystick:
            self._joystick.quit()
            self._joystick = None

        pygame.joystick.quit()
        pygame.quit()

    async def read_sample(self) -> Optional[InputSample]:
        """Read current controller state"""
        if not self._running or not self._joystick:
            return None

        # Process pygame events (required to update joystick state)
        pygame.event.pump()
        return self._sample_from(self._joystick)

    def _sample_from(self, joystick) -> InputSample:
        axes = []
        for i in range(joystick.get_numaxes()):
            value = joystick.get_axis(i)
            axes.append(-value if i in self._inverted_axes else value)

        buttons = [bool(joystick.get_button(i)) for i in range(joystick.get_numbuttons())]

        logger.debug(
            "Axes: [" + ", ".join(f"{a:+.2f}" for a in axes) + "] | "
            f"Buttons: [{', '.join(str(i) for i, b in enumerate(buttons) if b) or 'none'}]"
        )
        return InputSample(axes=axes, buttons=buttons)
