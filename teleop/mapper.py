"""
Mapper - Resolves logical channels to scaled axis values.

This is the single place where a channel name is turned into a number.
Every other component reads axes through map_value().
"""

from .types import AxisMap, InputSample, ScaleProfile


def map_value(
    axis_map: AxisMap,
    scale_profile: ScaleProfile,
    channel: str,
    sample: InputSample,
) -> float:
    """
    Read a channel from a sample and apply its scale.

    Missing channels, unmapped axes (negative index), missing scales and
    samples with too few axes all read as 0.0. Nothing is raised.

    Args:
        axis_map: Channel name to axis index
        scale_profile: Channel name to scale factor
        channel: Logical channel, e.g. "x" or "yaw"
        sample: Controller sample

    Returns:
        axes[index] * scale, or 0.0
    """
    index = axis_map.get(channel)
    if index is None or index < 0:
        return 0.0

    scale = scale_profile.get(channel)
    if scale is None:
        return 0.0

    if len(sample.axes) <= index:
        return 0.0

    return sample.axes[index] * scale
