"""
Command composer - Builds velocity and gimbal commands from a sample.
"""

from typing import Optional, Tuple

from .gimbal import GimbalIntegrator
from .mapper import map_value
from .types import (
    GimbalCommand,
    GimbalState,
    InputSample,
    TeleopConfig,
    Vector3,
    VelocityCommand,
)


def compose_velocity(
    sample: InputSample,
    profile: str,
    config: TeleopConfig,
    stamp: Optional[float] = None,
) -> VelocityCommand:
    """
    Map a sample to a velocity command.

    Linear components come from the chassis group, angular ones from the
    gimbal group (roll, pitch, yaw on x, y, z). With inverted_reverse the
    yaw sign flips while driving backwards.

    Args:
        sample: Controller sample
        profile: Scale profile name
        config: Teleop configuration
        stamp: Time to stamp the command with, used only when stamped
               output is configured
    """
    chassis_axes = config.chassis.axes
    chassis_scales = config.chassis.scales(profile)
    gimbal_axes = config.gimbal.axes
    gimbal_scales = config.gimbal.scales(profile)

    lin_x = map_value(chassis_axes, chassis_scales, "x", sample)
    ang_z = map_value(gimbal_axes, gimbal_scales, "yaw", sample)
    if config.inverted_reverse and lin_x < 0.0:
        ang_z = -ang_z

    command = VelocityCommand(
        linear=Vector3(
            x=lin_x,
            y=map_value(chassis_axes, chassis_scales, "y", sample),
            z=map_value(chassis_axes, chassis_scales, "z", sample),
        ),
        angular=Vector3(
            x=map_value(gimbal_axes, gimbal_scales, "roll", sample),
            y=map_value(gimbal_axes, gimbal_scales, "pitch", sample),
            z=ang_z,
        ),
    )

    if config.publish_stamped_twist:
        command.stamp = stamp
        command.frame_id = config.robot_base_frame

    return command


class CommandComposer:
    """Produces the velocity and gimbal commands for one enabled sample"""

    def __init__(self, config: TeleopConfig, gimbal_state: Optional[GimbalState] = None) -> None:
        self.config = config
        self.gimbal = GimbalIntegrator(config.gimbal, gimbal_state)

    def compose(
        self, sample: InputSample, profile: str, now: float
    ) -> Tuple[VelocityCommand, GimbalCommand]:
        """Velocity command plus gimbal positions after this sample's integration"""
        velocity = compose_velocity(sample, profile, self.config, stamp=now)
        self.gimbal.step(sample, profile, now)
        return velocity, self.gimbal.command(stamp=now)
