"""
opponent.py: Rule-based controller for the computer's paddle.
"""

from dataclasses import dataclass

from .constants import OPPONENT_SPEED, TICK_TIME
from .data_models import World


@dataclass
class OpponentController:
    """
    Re-evaluated every frame, no memory between frames.
    Chases the ball while it is heading into the opponent's half,
    otherwise drifts back to the middle of the field.
    """
    speed: float = OPPONENT_SPEED

    def target_y(self, world: World) -> float:
        ball = world.ball
        if ball.x > world.bounds.center_x and ball.velocity.x > 0:
            return ball.center_y
        return world.bounds.center_y

    def update(self, world: World, dt: float = TICK_TIME):
        paddle = world.opponent
        delta_y = self.speed * dt
        target = self.target_y(world)

        if paddle.center_y < target:
            paddle.y += delta_y
        elif paddle.center_y > target:
            paddle.y -= delta_y

        paddle.clamp(world.bounds)
