#!/usr/bin/env python3
"""
Teleop Launcher - Easy start for joystick teleop

Usage:
    python launch.py --gamepad              # Drive from a game controller
    python launch.py --script forward       # Play a scripted input
    python launch.py --demo                 # Run core demo
    python launch.py --check-config         # Show .env configuration

Commands go to the mock collaborators; the robot-side transport is wired in
by the host application.
"""

import sys
import argparse
import asyncio
import logging
from typing import Optional


def setup_logging(level: str = "INFO") -> None:
    """Configure logging"""
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        stream=sys.stdout
    )


def build_node(env_file: Optional[str], mode: Optional[str]):
    """Create a node from the environment configuration"""
    from teleop.exceptions import ConfigError
    from teleop.node import TeleopNode
    from teleop.transport import MockCommandSink, MockGoalClient, StaticTransformProvider
    from teleop.types import ControlMode, Transform
    from teleop_config import get_config

    try:
        config = get_config(env_file=env_file).to_teleop_config()
    except ConfigError as e:
        print(f"ERROR: invalid configuration: {e}")
        sys.exit(1)

    if mode:
        config.control_mode = ControlMode.parse(mode)

    transforms = StaticTransformProvider({
        (config.world_frame, config.robot_base_frame): Transform(),
    })
    return TeleopNode(config, MockCommandSink(), transforms, MockGoalClient())


def launch(input_provider, env_file: Optional[str], mode: Optional[str]) -> None:
    """Run the node until Ctrl+C"""
    node = build_node(env_file, mode)

    try:
        asyncio.run(node.run(input_provider))
    except KeyboardInterrupt:
        print("\nShutting down...")
    except Exception as e:
        print(f"Error: {e}")
        sys.exit(1)


def launch_gamepad(env_file: Optional[str], mode: Optional[str], inverted_axes: list[int]) -> None:
    """Launch gamepad control"""
    print("Starting gamepad control mode...")

    from joy_input.gamepad_input import GamepadInput, HAS_PYGAME

    if not HAS_PYGAME:
        print("\nERROR: pygame not installed")
        print("Install with: pip install pygame")
        sys.exit(1)

    print("Hold the enable button to drive")
    launch(GamepadInput(inverted_axes=inverted_axes), env_file, mode)


def launch_script(name: str, env_file: Optional[str], mode: Optional[str]) -> None:
    """Launch with a scripted mock input"""
    from joy_input import MockInput

    input_provider = MockInput()
    try:
        input_provider.load_script(name)
    except KeyError as e:
        print(f"ERROR: {e.args[0]}")
        print(f"Available scripts: {', '.join(MockInput.script_names())}")
        sys.exit(1)

    launch(input_provider, env_file, mode)


def launch_demo() -> None:
    """Launch core architecture demo"""
    print("Starting core architecture demo...")
    from demo_core import main
    main()


def main():
    """Main entry point"""
    parser = argparse.ArgumentParser(
        description="Joystick teleop - controller input to robot commands",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python launch.py --gamepad --invert-axis 1    Drive with a controller
  python launch.py --script release --mode goal Scripted input, goal mode
  python launch.py --demo                       Run core demo
        """
    )

    parser.add_argument(
        "--gamepad",
        action="store_true",
        help="Use gamepad input (requires pygame)"
    )
    parser.add_argument(
        "--script",
        metavar="NAME",
        help="Use a scripted mock input (forward, release, turbo, reverse)"
    )
    parser.add_argument(
        "--mode",
        choices=["manual", "goal", "manual_control", "auto_control"],
        help="Override the control mode from the configuration"
    )
    parser.add_argument(
        "--invert-axis",
        type=int,
        action="append",
        default=[],
        metavar="INDEX",
        help="Flip the sign of a gamepad axis (repeatable)"
    )
    parser.add_argument(
        "--env-file",
        help="Path to .env file (default: ./.env)"
    )
    parser.add_argument(
        "--check-config",
        action="store_true",
        help="Print the configuration status and exit"
    )
    parser.add_argument(
        "--demo",
        action="store_true",
        help="Run core architecture demo"
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Set logging level"
    )

    args = parser.parse_args()

    setup_logging(args.log_level)

    if args.check_config:
        from teleop_config import get_config
        get_config(env_file=args.env_file).print_status()
    elif args.demo:
        launch_demo()
    elif args.gamepad:
        launch_gamepad(args.env_file, args.mode, args.invert_axis)
    elif args.script:
        launch_script(args.script, args.env_file, args.mode)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
