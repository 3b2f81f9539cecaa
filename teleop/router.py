"""
Mode router - Sends composed commands where the control mode says.

MANUAL mode publishes the velocity command as is. GOAL_DIRECTED mode turns
the chassis x/y input into an offset in the robot base frame, moves it into
the world frame and submits it as a navigation goal, at most once per
goal_period. The gimbal command is published in both modes.

The router also owns the stop sequence sent on a disable edge.
"""

import logging
from enum import Enum
from typing import Optional

from .exceptions import TransformLookupError
from .interfaces import CommandSink, GoalClient, TransformProvider
from .mapper import map_value
from .types import (
    DispatchState,
    GimbalCommand,
    Goal,
    InputSample,
    Pose,
    TeleopConfig,
    Vector3,
    VelocityCommand,
)


logger = logging.getLogger(__name__)


class DispatchResult(Enum):
    """What a dispatch did with the chassis part of a sample"""
    VELOCITY = "velocity"                  # Velocity command published
    GOAL_SUBMITTED = "goal_submitted"      # Goal sent to the goal client
    DEADZONE = "deadzone"                  # Input too small for a goal
    THROTTLED = "throttled"                # Goal skipped, sent too recently
    TRANSFORM_FAILED = "transform_failed"  # Goal dropped, no transform


class ModeRouter:
    """Routes enabled samples to velocity or goal output"""

    def __init__(
        self,
        config: TeleopConfig,
        sink: CommandSink,
        transforms: TransformProvider,
        goals: GoalClient,
        dispatch_state: Optional[DispatchState] = None,
    ) -> None:
        self.config = config
        self.sink = sink
        self.transforms = transforms
        self.goals = goals
        self.state = dispatch_state if dispatch_state is not None else DispatchState()

    def dispatch(
        self,
        sample: InputSample,
        profile: str,
        velocity: VelocityCommand,
        gimbal: GimbalCommand,
        now: float,
    ) -> DispatchResult:
        """
        Route one enabled sample.

        Args:
            sample: Controller sample
            profile: Scale profile name
            velocity: Composed velocity command (published in MANUAL mode)
            gimbal: Composed gimbal command (always published)
            now: Monotonic time in seconds

        Returns:
            What happened to the chassis command
        """
        if self.config.is_goal_directed:
            result = self._dispatch_goal(sample, profile, now)
        else:
            self.sink.publish_velocity(velocity)
            result = DispatchResult.VELOCITY

        self.sink.publish_gimbal(gimbal)
        return result

    def stop(self, now: float) -> VelocityCommand:
        """
        Stop sequence for a disable edge.

        Cancels outstanding goals in GOAL_DIRECTED mode (best effort, not
        awaited) and publishes an explicit zero velocity command. Gimbal
        state is left alone.
        """
        if self.config.is_goal_directed:
            try:
                self.goals.cancel_goals_before(now)
            except Exception as e:
                logger.error(f"Goal cancellation failed: {e}", exc_info=True)

        if self.config.publish_stamped_twist:
            command = VelocityCommand.zero(stamp=now, frame_id=self.config.robot_base_frame)
        else:
            command = VelocityCommand.zero()

        logger.info("Enable released, sending stop command")
        self.sink.publish_velocity(command)
        return command

    def _dispatch_goal(self, sample: InputSample, profile: str, now: float) -> DispatchResult:
        chassis = self.config.chassis
        scales = chassis.scales(profile)
        x = map_value(chassis.axes, scales, "x", sample)
        y = map_value(chassis.axes, scales, "y", sample)

        deadzone = self.config.goal_deadzone
        if abs(x) <= deadzone and abs(y) <= deadzone:
            # Near-zero stick counts as an already-consumed disable edge
            self.state.sent_disable_msg = True
            return DispatchResult.DEADZONE

        offset = Pose(position=Vector3(x=x, y=y))
        world = self.config.world_frame
        base = self.config.robot_base_frame

        try:
            transform = self.transforms.lookup_transform(world, base)
        except TransformLookupError as e:
            logger.warning(f"Failed to transform goal pose from {base} to {world}: {e}")
            return DispatchResult.TRANSFORM_FAILED

        goal = Goal(pose=transform.apply(offset), frame_id=world, stamp=now)

        last = self.state.last_goal_time
        if last is not None and now - last < self.config.goal_period:
            logger.debug(f"Goal throttled ({now - last:.3f}s since last submission)")
            return DispatchResult.THROTTLED

        self.goals.send_goal(goal)
        self.state.last_goal_time = now
        logger.debug(
            f"Goal submitted: ({goal.pose.position.x:+.2f}, {goal.pose.position.y:+.2f}) "
            f"in {world}"
        )
        return DispatchResult.GOAL_SUBMITTED
