"""Shared fixtures for the teleop tests"""

import pytest

from teleop.node import TeleopNode
from teleop.transport import MockCommandSink, MockGoalClient, StaticTransformProvider
from teleop.types import TeleopConfig, Transform

from helpers import FakeClock, pad_config


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def sink():
    return MockCommandSink()


@pytest.fixture
def goals():
    return MockGoalClient()


@pytest.fixture
def transforms():
    """Identity transform from base_link into map"""
    return StaticTransformProvider({("map", "base_link"): Transform()})


@pytest.fixture
def make_node(sink, transforms, goals, clock):
    """Factory for a node wired to the mock collaborators"""
    def factory(config: TeleopConfig = None) -> TeleopNode:
        return TeleopNode(config or pad_config(), sink, transforms, goals, clock=clock)
    return factory
