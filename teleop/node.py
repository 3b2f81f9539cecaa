"""
Teleop node - Per-sample control flow and the input loop.

The node is the main control loop. It:
- Classifies every sample with the enable state machine
- Sends a single stop command on each disable edge
- Composes velocity and gimbal commands for enabled samples
- Routes them through the mode router

Each sample is processed to completion before the next one is read.
"""

import asyncio
import logging
import time
from dataclasses import dataclass
from typing import Any, Callable, Optional

from .composer import CommandComposer
from .enable import EnableStateMachine
from .interfaces import CommandSink, GoalClient, InputProvider, TransformProvider
from .router import DispatchResult, ModeRouter
from .types import (
    DispatchState,
    EnableState,
    GimbalCommand,
    GimbalState,
    InputSample,
    TeleopConfig,
    VelocityCommand,
)


logger = logging.getLogger(__name__)


@dataclass
class StepResult:
    """Everything one processing step produced"""
    state: EnableState
    velocity: Optional[VelocityCommand] = None
    gimbal: Optional[GimbalCommand] = None
    dispatch: Optional[DispatchResult] = None
    stopped: bool = False


class TeleopNode:
    """
    Input-to-command translation engine.

    Owns the gimbal and dispatch state; nothing else writes to them.
    """

    def __init__(
        self,
        config: TeleopConfig,
        sink: CommandSink,
        transforms: TransformProvider,
        goals: GoalClient,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """
        Initialize the node.

        Args:
            config: Teleop configuration
            sink: Velocity and gimbal output
            transforms: Frame transform lookup (goal-directed mode)
            goals: Navigation goal client (goal-directed mode)
            clock: Monotonic time source in seconds
        """
        self.config = config
        self.clock = clock

        self.gimbal_state = GimbalState()
        self.dispatch_state = DispatchState()

        self.enable = EnableStateMachine(config, self.dispatch_state)
        self.composer = CommandComposer(config, self.gimbal_state)
        self.router = ModeRouter(config, sink, transforms, goals, self.dispatch_state)

        self._running = False

    def add_state_callback(
        self, callback: Callable[[Optional[EnableState], EnableState], Any]
    ) -> None:
        """Register callback(old_state, new_state) for enable state changes"""
        self.enable.add_state_callback(callback)

    def process(self, sample: InputSample) -> StepResult:
        """
        Process one sample to completion.

        Args:
            sample: Controller sample

        Returns:
            What the step produced
        """
        now = self.clock()
        transition = self.enable.update(sample)
        state = transition.state

        if not state.is_enabled:
            result = StepResult(state=state)
            if transition.stop_required:
                result.velocity = self.router.stop(now)
                result.stopped = True
            return result

        profile = state.profile
        velocity, gimbal = self.composer.compose(sample, profile, now)
        dispatch = self.router.dispatch(sample, profile, velocity, gimbal, now)

        return StepResult(
            state=state,
            velocity=velocity if dispatch == DispatchResult.VELOCITY else None,
            gimbal=gimbal,
            dispatch=dispatch,
        )

    async def run(self, input_provider: InputProvider) -> None:
        """
        Read and process samples until stopped.

        A failing step is logged and the loop carries on with the next
        sample.
        """
        logger.info("Teleop node starting")
        self.log_configuration()
        self._running = True

        try:
            await input_provider.start()

            while self._running:
                try:
                    sample = await input_provider.read_sample()
                    if sample is not None:
                        self.process(sample)
                except Exception as e:
                    logger.error(f"Error processing input sample: {e}", exc_info=True)
                await asyncio.sleep(self.config.loop_interval)

        finally:
            logger.info("Teleop node stopping")
            try:
                await input_provider.stop()
            except Exception as e:
                logger.error(f"Error during cleanup: {e}", exc_info=True)

    def stop(self) -> None:
        """Stop the input loop"""
        self._running = False

    def log_configuration(self) -> None:
        """Log buttons and axis mappings"""
        config = self.config
        logger.info(f"Teleop enable button {config.enable_button}.")
        logger.info(f"Turbo on button {config.turbo_button}.")
        if config.inverted_reverse:
            logger.info("Teleop enable inverted reverse.")
        logger.info(f"Control mode {config.control_mode.value}.")

        for label, group in (("Linear", config.chassis), ("Angular", config.gimbal)):
            normal = group.scales("normal")
            turbo = group.scales("turbo")
            for name, index in sorted(group.mapped_channels().items()):
                logger.info(
                    f"{label} axis {name} on {index} at scale {normal.get(name, 0.0):f}."
                )
                if config.turbo_enabled:
                    logger.info(
                        f"Turbo for {label.lower()} axis {name} is scale {turbo.get(name, 0.0):f}."
                    )

    # Public properties for monitoring

    @property
    def enable_state(self) -> Optional[EnableState]:
        """Enable state of the last processed sample"""
        return self.enable.state

    @property
    def is_running(self) -> bool:
        return self._running
