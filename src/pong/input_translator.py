"""
input_translator.py: Turns player intents into paddle moves and phase changes.
"""

import logging
from enum import Enum
from typing import Iterable

from .constants import PADDLE_STEP_DIVISOR
from .data_models import Phase, World

logger = logging.getLogger(__name__)


class Intent(Enum):
    MOVE_UP = "move_up"
    MOVE_DOWN = "move_down"
    TOGGLE_PAUSE = "toggle_pause"
    QUIT = "quit"


class InputTranslator:
    """Applies intents to the world, gated by the current phase."""

    def apply(self, world: World, intents: Iterable[Intent]) -> bool:
        """
        Processes intents in order. Returns True once QUIT is seen;
        anything after it in the same frame is dropped.
        """
        for intent in intents:
            if intent is Intent.QUIT:
                logger.info("Quit requested")
                world.quit_requested = True
                return True

            if intent is Intent.TOGGLE_PAUSE:
                self._toggle_pause(world)
            elif intent in (Intent.MOVE_UP, Intent.MOVE_DOWN):
                self._move_player(world, intent)
            else:
                raise ValueError(f"Unknown intent: {intent!r}")
        return False

    def _toggle_pause(self, world: World):
        if world.phase is Phase.PLAYING:
            world.phase = Phase.PAUSED
        elif world.phase is Phase.PAUSED:
            world.phase = Phase.PLAYING
        else:
            return
        logger.debug("Phase is now %s", world.phase.value)

    def _move_player(self, world: World, intent: Intent):
        if world.phase is not Phase.PLAYING:
            return

        paddle = world.player
        step = paddle.height / PADDLE_STEP_DIVISOR
        if intent is Intent.MOVE_UP:
            paddle.y -= step
        else:
            paddle.y += step
        paddle.clamp(world.bounds)
