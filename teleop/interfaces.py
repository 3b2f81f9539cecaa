"""
Core interfaces (protocols) for pluggable components.

These define the contracts the teleop core consumes from its collaborators.
Nothing here blocks: publishing, transform lookup and goal submission either
complete within the call or fail immediately.
"""

from typing import Any, Optional, Protocol

from .types import GimbalCommand, Goal, InputSample, Transform, VelocityCommand


class InputProvider(Protocol):
    """
    Interface for input sources (gamepad, scripted, network, etc.).

    Samples are delivered in arrival order, one at a time.
    """

    async def start(self) -> None:
        """
        Initialize and start the input provider.

        Called once when the system starts up.
        May open devices, create connections, etc.
        """
        ...

    async def stop(self) -> None:
        """
        Stop and cleanup the input provider.

        Must close devices, release resources, etc.
        """
        ...

    async def read_sample(self) -> Optional[InputSample]:
        """
        Read the current controller sample.

        This should be non-blocking and return immediately.

        Returns:
            InputSample with the current axes and buttons, or None if no
            input is available yet
        """
        ...


class CommandSink(Protocol):
    """Output channels for velocity and gimbal commands"""

    def publish_velocity(self, command: VelocityCommand) -> None:
        """Publish a velocity command (manual mode and stop commands)"""
        ...

    def publish_gimbal(self, command: GimbalCommand) -> None:
        """Publish gimbal joint positions"""
        ...


class TransformProvider(Protocol):
    """Coordinate-transform lookup service"""

    def lookup_transform(self, target_frame: str, source_frame: str) -> Transform:
        """
        Latest available transform taking poses from source_frame to target_frame.

        Raises:
            TransformLookupError: if the transform cannot be resolved
        """
        ...


class GoalClient(Protocol):
    """
    Navigation goal submission service.

    Both calls are fire-and-forget: they return an opaque handle that the
    core never awaits. A cancellation issued after a submission is not
    guaranteed to be ordered after it on the executor side.
    """

    def send_goal(self, goal: Goal) -> Any:
        """Submit a navigation goal"""
        ...

    def cancel_goals_before(self, stamp: float) -> Any:
        """Request cancellation of every goal submitted before stamp"""
        ...
