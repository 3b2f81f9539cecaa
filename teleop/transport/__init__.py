"""
Mock collaborators - For running and testing without a robot.

Records published commands and submitted goals instead of sending them,
and serves transforms from a fixed table.
"""

import itertools
import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from teleop.exceptions import TransformLookupError
from teleop.types import GimbalCommand, Goal, Transform, VelocityCommand


logger = logging.getLogger(__name__)


class MockCommandSink:
    """
    Command sink that keeps everything it is given.

    Logs commands instead of sending them.
    """

    def __init__(self) -> None:
        self.velocities: List[VelocityCommand] = []
        self.gimbals: List[GimbalCommand] = []

    def publish_velocity(self, command: VelocityCommand) -> None:
        self.velocities.append(command)
        logger.debug(
            f"[MOCK] cmd_vel #{len(self.velocities)}: "
            f"lin=({command.linear.x:+.2f}, {command.linear.y:+.2f}, {command.linear.z:+.2f}) "
            f"ang=({command.angular.x:+.2f}, {command.angular.y:+.2f}, {command.angular.z:+.2f})"
        )

    def publish_gimbal(self, command: GimbalCommand) -> None:
        self.gimbals.append(command)
        logger.debug(f"[MOCK] gimbal pitch={command.pitch:+.3f} yaw={command.yaw:+.3f}")

    @property
    def last_velocity(self) -> Optional[VelocityCommand]:
        """Get last velocity command (for testing)"""
        return self.velocities[-1] if self.velocities else None

    @property
    def last_gimbal(self) -> Optional[GimbalCommand]:
        """Get last gimbal command (for testing)"""
        return self.gimbals[-1] if self.gimbals else None

    @property
    def stop_count(self) -> int:
        """Number of zero velocity commands published"""
        return sum(1 for command in self.velocities if command.is_zero)


class StaticTransformProvider:
    """
    Transform lookup from a fixed table.

    Unknown frame pairs, or every pair while failing is set, raise
    TransformLookupError.
    """

    def __init__(
        self,
        transforms: Optional[Dict[Tuple[str, str], Transform]] = None,
        failing: bool = False,
    ) -> None:
        """
        Args:
            transforms: (target_frame, source_frame) to transform
            failing: If True, every lookup fails
        """
        self._transforms = dict(transforms or {})
        self.failing = failing
        self.lookup_count = 0

    def set_transform(self, target_frame: str, source_frame: str, transform: Transform) -> None:
        self._transforms[(target_frame, source_frame)] = transform

    def lookup_transform(self, target_frame: str, source_frame: str) -> Transform:
        self.lookup_count += 1
        if self.failing:
            raise TransformLookupError(target_frame, source_frame, "lookup disabled")

        transform = self._transforms.get((target_frame, source_frame))
        if transform is None:
            raise TransformLookupError(target_frame, source_frame, "frame pair unknown")
        return transform


@dataclass
class GoalHandle:
    """Receipt for a submitted goal"""
    goal_id: int
    goal: Goal


class MockGoalClient:
    """Goal client that records submissions and cancellations"""

    def __init__(self) -> None:
        self.goals: List[Goal] = []
        self.cancellations: List[float] = []
        self._ids = itertools.count(1)

    def send_goal(self, goal: Goal) -> GoalHandle:
        self.goals.append(goal)
        handle = GoalHandle(goal_id=next(self._ids), goal=goal)
        logger.debug(
            f"[MOCK] Goal #{handle.goal_id}: ({goal.pose.position.x:+.2f}, "
            f"{goal.pose.position.y:+.2f}) in {goal.frame_id}"
        )
        return handle

    def cancel_goals_before(self, stamp: float) -> int:
        self.cancellations.append(stamp)
        cancelled = sum(1 for goal in self.goals if goal.stamp < stamp)
        logger.debug(f"[MOCK] Cancel goals before {stamp:.3f} ({cancelled} affected)")
        return cancelled

    @property
    def goal_count(self) -> int:
        """Get total goals submitted (for testing)"""
        return len(self.goals)
