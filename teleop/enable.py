"""
Enable state machine - Decides whether a sample may move the robot.

Each sample is classified on its own as DISABLED, NORMAL or TURBO. The only
memory is the disable-edge flag in DispatchState, which guarantees a single
stop command per transition into DISABLED.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, List, Optional

from .types import DispatchState, EnableState, InputSample, TeleopConfig


logger = logging.getLogger(__name__)


def classify(sample: InputSample, config: TeleopConfig) -> EnableState:
    """
    Classify a sample.

    Turbo wins over everything when its button is configured and held.
    Otherwise the sample is NORMAL when no enable button is required or the
    enable button is held, and DISABLED in every other case.
    """
    if config.turbo_enabled and sample.button(config.turbo_button):
        return EnableState.TURBO

    if not config.require_enable_button or sample.button(config.enable_button):
        return EnableState.NORMAL

    return EnableState.DISABLED


@dataclass
class Transition:
    """Outcome of feeding one sample to the state machine"""
    state: EnableState
    previous: Optional[EnableState]
    stop_required: bool = False

    @property
    def changed(self) -> bool:
        return self.state != self.previous


class EnableStateMachine:
    """
    Tracks the enable state across samples.

    Entering NORMAL or TURBO arms the disable edge. The first DISABLED sample
    after that asks for a stop and disarms it, so staying disabled produces
    nothing further.
    """

    def __init__(self, config: TeleopConfig, dispatch_state: DispatchState) -> None:
        self.config = config
        self.dispatch_state = dispatch_state
        self.state: Optional[EnableState] = None
        self._state_callbacks: List[Callable[[Optional[EnableState], EnableState], Any]] = []

    def add_state_callback(
        self, callback: Callable[[Optional[EnableState], EnableState], Any]
    ) -> None:
        """
        Register callback for state changes.

        Callback signature: callback(old_state, new_state)
        """
        self._state_callbacks.append(callback)

    def update(self, sample: InputSample) -> Transition:
        """Classify a sample and apply the disable-edge rule"""
        new_state = classify(sample, self.config)
        transition = Transition(state=new_state, previous=self.state)

        if new_state.is_enabled:
            self.dispatch_state.sent_disable_msg = True
        elif self.dispatch_state.sent_disable_msg:
            transition.stop_required = True
            self.dispatch_state.sent_disable_msg = False

        if transition.changed:
            self._transition_to(new_state)

        return transition

    def _transition_to(self, new_state: EnableState) -> None:
        old_state = self.state
        old_name = old_state.value if old_state else "none"
        logger.info(f"Enable state: {old_name} -> {new_state.value}")
        self.state = new_state

        for callback in self._state_callbacks:
            try:
                callback(old_state, new_state)
            except Exception as e:
                logger.error(f"Error in state callback: {e}", exc_info=True)
