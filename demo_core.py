#!/usr/bin/env python3
"""
Teleop Core Demo - Simple example application.

Plays scripted controller input through the core with mock collaborators,
once in manual mode and once in goal-directed mode.
"""

import asyncio
import logging
import sys

from teleop.node import TeleopNode
from teleop.transport import MockCommandSink, MockGoalClient, StaticTransformProvider
from teleop.types import ControlMode, EnableState, Quaternion, TeleopConfig, Transform, Vector3
from joy_input import MockInput, TestScripts


# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    stream=sys.stdout
)

logger = logging.getLogger(__name__)


async def play(mode: ControlMode) -> None:
    """Run the forward-drive script in one control mode"""
    config = TeleopConfig(control_mode=mode, loop_interval=0.1)

    sink = MockCommandSink()
    goals = MockGoalClient()
    transforms = StaticTransformProvider({
        (config.world_frame, config.robot_base_frame): Transform(
            translation=Vector3(x=2.0, y=1.0),
            rotation=Quaternion.from_yaw(0.5),
        ),
    })

    node = TeleopNode(config, sink, transforms, goals)

    def on_state_change(old_state, new_state: EnableState):
        logger.info(f"STATE CHANGE: {old_state.value if old_state else 'none'} -> {new_state.value}")

    node.add_state_callback(on_state_change)

    input_provider = MockInput(TestScripts.forward_drive())
    task = asyncio.create_task(node.run(input_provider))

    while not input_provider.exhausted:
        await asyncio.sleep(config.loop_interval)
    await asyncio.sleep(config.loop_interval * 2)

    node.stop()
    await task

    gimbal = sink.last_gimbal
    logger.info(
        f"Mode {mode.value}: {len(sink.velocities)} velocity commands "
        f"({sink.stop_count} stops), {goals.goal_count} goals, "
        f"{len(goals.cancellations)} cancellations"
    )
    if gimbal:
        logger.info(f"Final gimbal: pitch={gimbal.pitch:+.3f} yaw={gimbal.yaw:+.3f}")


async def run_demo():
    """Run a simple demo with mock components"""
    logger.info("=" * 60)
    logger.info("Teleop Core Demo")
    logger.info("=" * 60)

    for mode in (ControlMode.MANUAL, ControlMode.GOAL_DIRECTED):
        logger.info("-" * 60)
        await play(mode)

    logger.info("=" * 60)
    logger.info("Demo finished successfully!")
    logger.info("=" * 60)


def main():
    """Main entry point"""
    try:
        asyncio.run(run_demo())
    except KeyboardInterrupt:
        logger.info("\nDemo interrupted by user")
    except Exception as e:
        logger.error(f"Demo failed: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
