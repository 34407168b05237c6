"""
physics_core.py: The deterministic kinematic functions and collision logic.
"""

import random
from dataclasses import dataclass, field
from typing import Optional

from .constants import (
    BALL_SPEED, MAX_REFLECTION, SERVE_MAX, SERVE_MIN, TICK_TIME
)
from .data_models import Ball, FieldBounds, Paddle, Side, Vector2


def reflection_component(paddle: Paddle, hit_y: float) -> float:
    """
    Vertical part of the outgoing direction for a hit at hit_y.
    Runs from -MAX_REFLECTION at the paddle top to +MAX_REFLECTION at the bottom.
    """
    hit_y = max(paddle.y, min(hit_y, paddle.y + paddle.height))
    local = hit_y - paddle.y - paddle.height / 2
    return MAX_REFLECTION * (local / (paddle.height / 2))


@dataclass
class PhysicsCore:
    """
    Ball movement, walls and paddle collisions.
    The random source is only used for serving.
    """

    rng: random.Random = field(default_factory=random.Random)

    def advance(self, ball: Ball, dt: float = TICK_TIME):
        """Moves the ball along its velocity for one time step."""
        ball.x += ball.velocity.x * dt
        ball.y += ball.velocity.y * dt

    def set_direction(self, ball: Ball, dir_x: float, dir_y: float):
        """Points the ball along (dir_x, dir_y) at the fixed BALL_SPEED."""
        length = Vector2(dir_x, dir_y).length()
        if length == 0:
            raise ValueError("Ball direction must have a non-zero length")
        ball.velocity = Vector2(BALL_SPEED * dir_x / length, BALL_SPEED * dir_y / length)

    def serve(self, ball: Ball, bounds: FieldBounds):
        """Re-centres the ball and sends it off in a random direction."""
        ball.x = bounds.center_x - ball.width / 2
        ball.y = bounds.center_y - ball.height / 2

        dir_x = self.rng.randint(SERVE_MIN, SERVE_MAX) * self.rng.choice((-1, 1))
        dir_y = self.rng.randint(SERVE_MIN, SERVE_MAX) * self.rng.choice((-1, 1))
        self.set_direction(ball, dir_x, dir_y)

    def resolve_walls(self, ball: Ball, bounds: FieldBounds, side_walls: bool = False) -> Optional[Side]:
        """
        Bounces the ball off the top and bottom edges.
        Returns the side that scored when the ball leaves through the left or
        right edge, or None. With side_walls the left and right edges bounce
        too and nothing ever scores.
        """
        if ball.y < 0:
            ball.y = 0.0
            ball.velocity.y = -ball.velocity.y
        elif ball.y + ball.height > bounds.height:
            ball.y = bounds.height - ball.height
            ball.velocity.y = -ball.velocity.y

        if side_walls:
            if ball.x < 0:
                ball.x = 0.0
                ball.velocity.x = -ball.velocity.x
            elif ball.x + ball.width > bounds.width:
                ball.x = bounds.width - ball.width
                ball.velocity.x = -ball.velocity.x
            return None

        if ball.x < 0:
            return Side.OPPONENT
        if ball.x + ball.width > bounds.width:
            return Side.PLAYER
        return None

    def check_hit(self, ball: Ball, paddle: Paddle) -> bool:
        return ball.box().overlaps(paddle.box())

    def reflect(self, ball: Ball, paddle: Paddle, side: Side):
        """
        Sends the ball back off a paddle. The outgoing angle depends only on
        where along the paddle the ball's centre struck.
        """
        # Snap flush against the facing edge so the ball can't stick inside the bat
        if side is Side.PLAYER:
            ball.x = paddle.x + paddle.width
            horizontal = 1.0
        else:
            ball.x = paddle.x - ball.width
            horizontal = -1.0

        self.set_direction(ball, horizontal, reflection_component(paddle, ball.box().center_y))
