"""
game_engine.py: Scoring, the Playing / Paused / GameOver phases and the
per-frame update order.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, Tuple

from .constants import TICK_TIME, WINNING_SCORE
from .data_models import (
    Ball, FieldBounds, Paddle, Phase, Score, Side, Snapshot, World
)
from .input_translator import Intent, InputTranslator
from .opponent import OpponentController
from .physics_core import PhysicsCore

logger = logging.getLogger(__name__)


class ScoreKeeper:
    """Counts points and knows when a side has won."""

    def __init__(self, winning_score: int = WINNING_SCORE):
        self.winning_score = winning_score

    def point_scored(self, score: Score, side: Side) -> bool:
        """Adds a point for side. Returns True if that point wins the game."""
        if side is Side.PLAYER:
            score.player += 1
        else:
            score.opponent += 1
        return score.of(side) == self.winning_score


@dataclass
class GameEngine(PhysicsCore):
    """
    Drives one World a fixed step at a time.
    Inherits ball movement and collisions from PhysicsCore.
    """
    tick_count: int = 0
    side_walls: bool = False
    translator: InputTranslator = field(default_factory=InputTranslator)
    opponent_controller: OpponentController = field(default_factory=OpponentController)
    score_keeper: ScoreKeeper = field(default_factory=ScoreKeeper)

    def create_world(self, bounds: FieldBounds, paddle_size: Tuple[float, float],
                     ball_size: Tuple[float, float]) -> World:
        """
        Builds the world once the sprite sizes are known. Bats sit a tenth of
        the field in from each edge, the ball is served from the centre.
        """
        paddle_w, paddle_h = paddle_size
        ball_w, ball_h = ball_size
        if paddle_h > bounds.height:
            raise ValueError(f"Paddle height {paddle_h} does not fit a field {bounds.height} high")
        if ball_w > bounds.width or ball_h > bounds.height:
            raise ValueError(f"Ball {ball_w}x{ball_h} does not fit a {bounds.width}x{bounds.height} field")

        player = Paddle(
            x=bounds.width / 10 - paddle_w / 2,
            y=bounds.center_y - paddle_h / 2,
            width=paddle_w, height=paddle_h)
        opponent = Paddle(
            x=bounds.width - bounds.width / 10 - paddle_w / 2,
            y=bounds.center_y - paddle_h / 2,
            width=paddle_w, height=paddle_h)
        ball = Ball(x=0.0, y=0.0, width=ball_w, height=ball_h)

        world = World(bounds=bounds, player=player, opponent=opponent, ball=ball)
        self.serve(world.ball, bounds)
        return world

    def step(self, world: World, intents: Iterable[Intent] = ()) -> Snapshot:
        """
        The main simulation step.
        1. Input  2. Ball  3. Walls and scoring  4. Paddles  5. Opponent
        """
        # 1. Apply input (quit and pause are honoured even when frozen)
        if self.translator.apply(world, intents):
            return world.snapshot()

        if world.phase is not Phase.PLAYING:
            return world.snapshot()

        self.tick_count += 1

        # 2. Move the ball
        self.advance(world.ball, TICK_TIME)

        # 3. Walls, then scoring
        scorer = self.resolve_walls(world.ball, world.bounds, self.side_walls)
        if scorer is not None:
            self._point_scored(world, scorer)
            if world.phase is Phase.GAME_OVER:
                return world.snapshot()

        # 4. Paddle hits
        if self.check_hit(world.ball, world.player):
            self.reflect(world.ball, world.player, Side.PLAYER)
        if self.check_hit(world.ball, world.opponent):
            self.reflect(world.ball, world.opponent, Side.OPPONENT)

        # 5. Opponent reacts to the post-collision ball
        self.opponent_controller.update(world, TICK_TIME)

        return world.snapshot()

    def _point_scored(self, world: World, side: Side):
        won = self.score_keeper.point_scored(world.score, side)
        logger.info("Point to %s (%d - %d)", side.value,
                    world.score.player, world.score.opponent)

        self.serve(world.ball, world.bounds)

        if won:
            world.phase = Phase.GAME_OVER
            world.winner = side
            logger.info("Game over, %s wins at tick %d", side.value, self.tick_count)
