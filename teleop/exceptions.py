"""Exceptions raised by the teleop core and its collaborators."""


class TeleopError(Exception):
    """Base class for teleop errors"""


class TransformLookupError(TeleopError):
    """A frame transform could not be resolved"""

    def __init__(self, target_frame: str, source_frame: str, reason: str = "") -> None:
        self.target_frame = target_frame
        self.source_frame = source_frame
        self.reason = reason
        message = f"No transform from {source_frame} to {target_frame}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class ConfigError(TeleopError):
    """Configuration values could not be turned into a TeleopConfig"""
