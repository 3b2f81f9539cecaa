"""
Gimbal integrator - Turns gimbal rate input into joint positions.

Pitch and yaw are accumulated as rate * elapsed time. The accumulators are
never reset; the integrator is only stepped for enabled samples, so the
elapsed time of the first step after a disabled stretch spans that stretch.
"""

import logging
from typing import Optional

from .mapper import map_value
from .types import ChannelGroup, GimbalCommand, GimbalState, InputSample


logger = logging.getLogger(__name__)


class GimbalIntegrator:
    """Accumulates gimbal pitch and yaw from rate samples"""

    def __init__(self, group: ChannelGroup, state: Optional[GimbalState] = None) -> None:
        """
        Args:
            group: Gimbal axis map and scale profiles
            state: Existing state to continue from (a fresh one by default)
        """
        self.group = group
        self.state = state if state is not None else GimbalState()

    def step(self, sample: InputSample, profile: str, now: float) -> GimbalState:
        """
        Integrate one sample.

        The first call only records the time baseline.

        Args:
            sample: Controller sample
            profile: Scale profile name ("normal" or "turbo")
            now: Monotonic time in seconds

        Returns:
            The updated state
        """
        state = self.state
        if state.last_time is None:
            state.last_time = now
            return state

        dt = now - state.last_time
        state.last_time = now

        scales = self.group.scales(profile)
        state.pitch += map_value(self.group.axes, scales, "pitch", sample) * dt
        state.yaw += map_value(self.group.axes, scales, "yaw", sample) * dt

        logger.debug(f"Gimbal dt={dt:.3f}s pitch={state.pitch:+.3f} yaw={state.yaw:+.3f}")
        return state

    def command(self, stamp: Optional[float] = None) -> GimbalCommand:
        """Joint command for the current accumulated orientation"""
        return GimbalCommand(positions=(self.state.pitch, self.state.yaw), stamp=stamp)
