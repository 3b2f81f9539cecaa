#!/usr/bin/env python3
"""
Teleop Environment Configuration Helper

Provides easy access to .env configuration for the teleop tools.
Automatically loads .env file and provides defaults.

Map variables are comma separated name=value pairs:
    TELEOP_AXIS_CHASSIS="x=5,y=-1,yaw=-1"
    TELEOP_SCALE_CHASSIS="x=0.5,y=0.0,z=0.0"
"""

import os
from pathlib import Path
from typing import Callable, Dict, Optional, TypeVar

from dotenv import load_dotenv

from teleop.exceptions import ConfigError
from teleop.types import (
    PROFILE_NORMAL,
    PROFILE_TURBO,
    ChannelGroup,
    ControlMode,
    TeleopConfig,
    default_chassis_group,
    default_gimbal_group,
)


T = TypeVar("T")

_TRUE_WORDS = {"1", "true", "yes", "on"}
_FALSE_WORDS = {"0", "false", "no", "off"}


def parse_bool(value: str) -> bool:
    """Parse a boolean environment value"""
    word = value.strip().lower()
    if word in _TRUE_WORDS:
        return True
    if word in _FALSE_WORDS:
        return False
    raise ValueError(f"not a boolean: {value!r}")


def parse_map(value: str, convert: Callable[[str], T]) -> Dict[str, T]:
    """
    Parse "name=value,name=value" into a dict.

    Raises:
        ValueError: on a malformed pair or value
    """
    result: Dict[str, T] = {}
    for pair in value.split(","):
        pair = pair.strip()
        if not pair:
            continue
        name, sep, raw = pair.partition("=")
        if not sep or not name.strip():
            raise ValueError(f"expected name=value, got {pair!r}")
        result[name.strip()] = convert(raw.strip())
    return result


class EnvConfig:
    """Configuration manager for the teleop tools"""

    def __init__(self, env_file: Optional[str] = None):
        """
        Initialize configuration

        Args:
            env_file: Path to .env file (default: .env in current directory)
        """
        env_path = Path(".env") if env_file is None else Path(env_file)

        self._loaded = False
        if env_path.exists():
            load_dotenv(env_path)
            self._loaded = True

    @property
    def loaded(self) -> bool:
        """Whether a .env file was found and loaded"""
        return self._loaded

    @property
    def enable_button(self) -> int:
        """Enable (deadman) button index (default: 5)"""
        return int(os.getenv("TELEOP_ENABLE_BUTTON", "5"))

    @property
    def turbo_button(self) -> int:
        """Turbo button index, negative disables turbo (default: -1)"""
        return int(os.getenv("TELEOP_TURBO_BUTTON", "-1"))

    @property
    def require_enable_button(self) -> bool:
        return parse_bool(os.getenv("TELEOP_REQUIRE_ENABLE_BUTTON", "true"))

    @property
    def inverted_reverse(self) -> bool:
        return parse_bool(os.getenv("TELEOP_INVERTED_REVERSE", "false"))

    @property
    def publish_stamped_twist(self) -> bool:
        return parse_bool(os.getenv("TELEOP_PUBLISH_STAMPED_TWIST", "false"))

    @property
    def control_mode(self) -> ControlMode:
        """manual_control / auto_control (aliases: manual, goal, auto)"""
        return ControlMode.parse(os.getenv("TELEOP_CONTROL_MODE", "manual_control"))

    @property
    def robot_base_frame(self) -> str:
        return os.getenv("TELEOP_ROBOT_BASE_FRAME", "base_link")

    @property
    def world_frame(self) -> str:
        return os.getenv("TELEOP_WORLD_FRAME", "map")

    @property
    def chassis(self) -> ChannelGroup:
        """Chassis axis map and normal/turbo scales"""
        return self._group("CHASSIS", default_chassis_group())

    @property
    def gimbal(self) -> ChannelGroup:
        """Gimbal axis map and normal/turbo scales"""
        return self._group("GIMBAL", default_gimbal_group())

    def _group(self, name: str, group: ChannelGroup) -> ChannelGroup:
        axes = os.getenv(f"TELEOP_AXIS_{name}")
        if axes:
            group.axes.update(parse_map(axes, int))

        for profile, suffix in ((PROFILE_NORMAL, ""), (PROFILE_TURBO, "_TURBO")):
            scales = os.getenv(f"TELEOP_SCALE_{name}{suffix}")
            if scales:
                group.profiles[profile].update(parse_map(scales, float))

        return group

    def validate(self) -> tuple[bool, list[str]]:
        """
        Validate configuration

        Returns:
            (is_valid, list_of_errors)
        """
        errors = []

        checks = [
            ("TELEOP_ENABLE_BUTTON", lambda: self.enable_button),
            ("TELEOP_TURBO_BUTTON", lambda: self.turbo_button),
            ("TELEOP_REQUIRE_ENABLE_BUTTON", lambda: self.require_enable_button),
            ("TELEOP_INVERTED_REVERSE", lambda: self.inverted_reverse),
            ("TELEOP_PUBLISH_STAMPED_TWIST", lambda: self.publish_stamped_twist),
            ("TELEOP_CONTROL_MODE", lambda: self.control_mode),
            ("TELEOP_AXIS_CHASSIS / TELEOP_SCALE_CHASSIS*", lambda: self.chassis),
            ("TELEOP_AXIS_GIMBAL / TELEOP_SCALE_GIMBAL*", lambda: self.gimbal),
        ]
        for name, read in checks:
            try:
                read()
            except ValueError as e:
                errors.append(f"{name} is invalid: {e}")

        if not errors and self.require_enable_button and self.enable_button < 0:
            errors.append("TELEOP_ENABLE_BUTTON must be >= 0 when the enable button is required")

        return len(errors) == 0, errors

    def to_teleop_config(self) -> TeleopConfig:
        """
        Build the core configuration

        Raises:
            ConfigError: if any value is invalid
        """
        is_valid, errors = self.validate()
        if not is_valid:
            raise ConfigError("; ".join(errors))

        return TeleopConfig(
            chassis=self.chassis,
            gimbal=self.gimbal,
            enable_button=self.enable_button,
            turbo_button=self.turbo_button,
            require_enable_button=self.require_enable_button,
            inverted_reverse=self.inverted_reverse,
            control_mode=self.control_mode,
            robot_base_frame=self.robot_base_frame,
            world_frame=self.world_frame,
            publish_stamped_twist=self.publish_stamped_twist,
        )

    def print_status(self):
        """Print configuration status"""
        print("Teleop Configuration Status:")
        print(f"  .env loaded:     {'Yes' if self._loaded else 'No'}")

        is_valid, errors = self.validate()
        if is_valid:
            config = self.to_teleop_config()
            print(f"  Enable button:   {config.enable_button}"
                  f"{'' if config.require_enable_button else ' (not required)'}")
            print(f"  Turbo button:    {config.turbo_button if config.turbo_enabled else '(off)'}")
            print(f"  Control mode:    {config.control_mode.value}")
            print(f"  Base frame:      {config.robot_base_frame} -> {config.world_frame}")
            print(f"  Chassis axes:    {config.chassis.mapped_channels()}")
            print(f"  Gimbal axes:     {config.gimbal.mapped_channels()}")
            print("\n  Status: Configuration is valid")
        else:
            print("\n  Status: Configuration has errors:")
            for error in errors:
                print(f"    - {error}")


# Global config instance
_config = None

def get_config(reload: bool = False, env_file: Optional[str] = None) -> EnvConfig:
    """
    Get the global configuration instance

    Args:
        reload: Force reload of .env file
        env_file: Path to .env file

    Returns:
        EnvConfig instance
    """
    global _config
    if _config is None or reload:
        _config = EnvConfig(env_file)
    return _config


def main():
    """Command-line utility to check configuration"""
    import argparse

    parser = argparse.ArgumentParser(description="Teleop Configuration Utility")
    parser.add_argument("--env-file", help="Path to .env file (default: ./.env)")
    args = parser.parse_args()

    get_config(env_file=args.env_file).print_status()


if __name__ == "__main__":
    main()
