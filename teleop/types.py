"""
Core data types for the teleop command core.

All the data structures that flow through the system, fully typed.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional, Tuple
import math
import time


UNMAPPED = -1                      # Axis index sentinel: channel not wired
PROFILE_NORMAL = "normal"
PROFILE_TURBO = "turbo"

AxisMap = Dict[str, int]
ScaleProfile = Dict[str, float]


class EnableState(Enum):
    """Per-sample enable classification"""
    DISABLED = "disabled"   # Enable button released, robot must stop
    NORMAL = "normal"       # Enable button held (or not required)
    TURBO = "turbo"         # Turbo button held

    @property
    def is_enabled(self) -> bool:
        return self != EnableState.DISABLED

    @property
    def profile(self) -> Optional[str]:
        """Scale profile name used while in this state"""
        return {
            EnableState.NORMAL: PROFILE_NORMAL,
            EnableState.TURBO: PROFILE_TURBO,
        }.get(self)


class ControlMode(Enum):
    """How enabled input is turned into motion"""
    MANUAL = "manual_control"       # Velocity commands straight out
    GOAL_DIRECTED = "auto_control"  # Navigation goals in the world frame

    @classmethod
    def parse(cls, value: str) -> "ControlMode":
        """
        Resolve a mode from its value or a short alias.

        Raises:
            ValueError: if the name is unknown
        """
        aliases = {
            "manual": cls.MANUAL,
            "goal": cls.GOAL_DIRECTED,
            "auto": cls.GOAL_DIRECTED,
        }
        key = value.strip().lower()
        if key in aliases:
            return aliases[key]
        return cls(key)


@dataclass(frozen=True)
class InputSample:
    """
    One controller reading.

    Axes are open-range floats, buttons are booleans, both addressed by index.
    Immutable once received.
    """
    axes: Tuple[float, ...] = ()
    buttons: Tuple[bool, ...] = ()
    timestamp: float = field(default_factory=time.time)

    def __post_init__(self) -> None:
        object.__setattr__(self, "axes", tuple(float(a) for a in self.axes))
        object.__setattr__(self, "buttons", tuple(bool(b) for b in self.buttons))

    def button(self, index: int) -> bool:
        """Button state, False when the index is negative or out of range"""
        if index < 0 or index >= len(self.buttons):
            return False
        return self.buttons[index]


@dataclass
class ChannelGroup:
    """An axis map together with its named scale profiles"""
    axes: AxisMap = field(default_factory=dict)
    profiles: Dict[str, ScaleProfile] = field(default_factory=dict)

    def scales(self, profile: str) -> ScaleProfile:
        """Scale profile by name, empty if unknown"""
        return self.profiles.get(profile, {})

    def mapped_channels(self) -> Dict[str, int]:
        """Channels wired to a real axis"""
        return {name: index for name, index in self.axes.items() if index >= 0}


@dataclass
class Vector3:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


@dataclass
class Quaternion:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0

    def __mul__(self, other: "Quaternion") -> "Quaternion":
        return Quaternion(
            x=self.w * other.x + self.x * other.w + self.y * other.z - self.z * other.y,
            y=self.w * other.y - self.x * other.z + self.y * other.w + self.z * other.x,
            z=self.w * other.z + self.x * other.y - self.y * other.x + self.z * other.w,
            w=self.w * other.w - self.x * other.x - self.y * other.y - self.z * other.z,
        )

    def rotate(self, v: Vector3) -> Vector3:
        """Rotate a vector by this (unit) quaternion"""
        # v' = v + 2w(q x v) + 2 q x (q x v)
        tx = 2.0 * (self.y * v.z - self.z * v.y)
        ty = 2.0 * (self.z * v.x - self.x * v.z)
        tz = 2.0 * (self.x * v.y - self.y * v.x)
        return Vector3(
            x=v.x + self.w * tx + (self.y * tz - self.z * ty),
            y=v.y + self.w * ty + (self.z * tx - self.x * tz),
            z=v.z + self.w * tz + (self.x * ty - self.y * tx),
        )

    @classmethod
    def from_yaw(cls, yaw: float) -> "Quaternion":
        """Rotation about +z by yaw radians"""
        return cls(z=math.sin(yaw / 2.0), w=math.cos(yaw / 2.0))

    @property
    def yaw(self) -> float:
        return math.atan2(
            2.0 * (self.w * self.z + self.x * self.y),
            1.0 - 2.0 * (self.y * self.y + self.z * self.z),
        )


@dataclass
class Pose:
    position: Vector3 = field(default_factory=Vector3)
    orientation: Quaternion = field(default_factory=Quaternion)


@dataclass
class Transform:
    """Rigid transform taking poses from a source frame into a target frame"""
    translation: Vector3 = field(default_factory=Vector3)
    rotation: Quaternion = field(default_factory=Quaternion)

    def apply(self, pose: Pose) -> Pose:
        rotated = self.rotation.rotate(pose.position)
        return Pose(
            position=Vector3(
                x=rotated.x + self.translation.x,
                y=rotated.y + self.translation.y,
                z=rotated.z + self.translation.z,
            ),
            orientation=self.rotation * pose.orientation,
        )


@dataclass
class VelocityCommand:
    """
    Velocity command for the chassis.

    angular.x is roll, angular.y is pitch, angular.z is yaw. When the command
    is stamped it carries the time and the robot base frame.
    """
    linear: Vector3 = field(default_factory=Vector3)
    angular: Vector3 = field(default_factory=Vector3)
    stamp: Optional[float] = None
    frame_id: Optional[str] = None

    @property
    def is_zero(self) -> bool:
        """Check if every velocity component is zero"""
        return all(
            value == 0.0
            for value in (
                self.linear.x, self.linear.y, self.linear.z,
                self.angular.x, self.angular.y, self.angular.z,
            )
        )

    @property
    def is_stamped(self) -> bool:
        return self.stamp is not None

    @classmethod
    def zero(cls, stamp: Optional[float] = None, frame_id: Optional[str] = None) -> "VelocityCommand":
        """Create a stop command"""
        return cls(stamp=stamp, frame_id=frame_id)


GIMBAL_JOINT_NAMES = ("gimbal_pitch_joint", "gimbal_yaw_joint")


@dataclass
class GimbalCommand:
    """Joint positions for the gimbal, names paired positionally with positions"""
    positions: Tuple[float, float]
    names: Tuple[str, str] = GIMBAL_JOINT_NAMES
    stamp: Optional[float] = None

    @property
    def pitch(self) -> float:
        return self.positions[0]

    @property
    def yaw(self) -> float:
        return self.positions[1]


@dataclass
class Goal:
    """Navigation target pose in a fixed reference frame"""
    pose: Pose
    frame_id: str
    stamp: float


@dataclass
class GimbalState:
    """Accumulated gimbal orientation, updated only by the integrator"""
    pitch: float = 0.0
    yaw: float = 0.0
    last_time: Optional[float] = None


@dataclass
class DispatchState:
    """Disable-edge flag and goal throttle timestamp"""
    sent_disable_msg: bool = False
    last_goal_time: Optional[float] = None


def default_chassis_group() -> ChannelGroup:
    return ChannelGroup(
        axes={"x": 5, "y": UNMAPPED, "yaw": UNMAPPED},
        profiles={
            PROFILE_NORMAL: {"x": 0.5, "y": 0.0, "z": 0.0},
            PROFILE_TURBO: {"x": 1.0, "y": 0.0, "z": 0.0},
        },
    )


def default_gimbal_group() -> ChannelGroup:
    return ChannelGroup(
        axes={"yaw": 2, "pitch": UNMAPPED, "roll": UNMAPPED},
        profiles={
            PROFILE_NORMAL: {"yaw": 0.5, "pitch": 0.0, "roll": 0.0},
            PROFILE_TURBO: {"yaw": 1.0, "pitch": 0.0, "roll": 0.0},
        },
    )


@dataclass
class TeleopConfig:
    """Configuration for the teleop core, resolved once at startup"""
    chassis: ChannelGroup = field(default_factory=default_chassis_group)
    gimbal: ChannelGroup = field(default_factory=default_gimbal_group)
    enable_button: int = 5               # Hold-to-drive button
    turbo_button: int = -1               # Negative disables turbo
    require_enable_button: bool = True
    inverted_reverse: bool = False       # Flip yaw sign while reversing
    control_mode: ControlMode = ControlMode.MANUAL
    robot_base_frame: str = "base_link"
    world_frame: str = "map"
    publish_stamped_twist: bool = False
    goal_deadzone: float = 0.1           # Below this on x and y no goal is sent
    goal_period: float = 0.25            # Min seconds between goal submissions
    loop_interval: float = 0.02          # Input polling interval (50Hz)

    @property
    def turbo_enabled(self) -> bool:
        return self.turbo_button >= 0

    @property
    def is_goal_directed(self) -> bool:
        return self.control_mode == ControlMode.GOAL_DIRECTED
