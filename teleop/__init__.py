"""
Teleop Core - Controller input to robot motion commands.

This package contains the decision logic between a gamepad and a robot:
- Types: Data classes for samples, commands, goals and configuration
- Interfaces: Protocols for pluggable collaborators (input, output, transforms, goals)
- Mapper: Channel resolution and scaling
- Enable: Enable/turbo/disable state machine
- Composer / Gimbal: Velocity commands and integrated gimbal positions
- Router: Manual vs goal-directed dispatch, stop on disable
- Node: Per-sample control flow and input loop
"""

from .types import (
    ControlMode,
    EnableState,
    GimbalCommand,
    Goal,
    InputSample,
    TeleopConfig,
    VelocityCommand,
)
from .interfaces import (
    CommandSink,
    GoalClient,
    InputProvider,
    TransformProvider,
)
from .exceptions import ConfigError, TeleopError, TransformLookupError
from .node import StepResult, TeleopNode

__all__ = [
    "ControlMode",
    "EnableState",
    "GimbalCommand",
    "Goal",
    "InputSample",
    "TeleopConfig",
    "VelocityCommand",
    "CommandSink",
    "GoalClient",
    "InputProvider",
    "TransformProvider",
    "ConfigError",
    "TeleopError",
    "TransformLookupError",
    "StepResult",
    "TeleopNode",
]
