"""
data_models.py: Data structures for the game state.
"""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from .geometry import Box


class Phase(Enum):
    PLAYING = "playing"
    PAUSED = "paused"
    GAME_OVER = "game_over"


class Side(Enum):
    """PLAYER is the near (left) side, OPPONENT the far (right) side."""
    PLAYER = "player"
    OPPONENT = "opponent"


@dataclass
class Vector2:
    x: float = 0.0
    y: float = 0.0

    def length(self) -> float:
        return math.hypot(self.x, self.y)


@dataclass(frozen=True)
class FieldBounds:
    """The playing area, fixed for the lifetime of the process."""
    width: float
    height: float

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Field must have a positive size, got {self.width}x{self.height}")

    @property
    def center_x(self) -> float:
        return self.width / 2

    @property
    def center_y(self) -> float:
        return self.height / 2


def _check_size(kind: str, width: float, height: float):
    if width <= 0 or height <= 0:
        raise ValueError(f"{kind} sprite must have a positive size, got {width}x{height}")


@dataclass
class Paddle:
    """A bat. Width and height come from the sprite and never change."""
    x: float
    y: float
    width: float
    height: float

    def __post_init__(self):
        _check_size("Paddle", self.width, self.height)

    def box(self) -> Box:
        return Box(self.x, self.y, self.width, self.height)

    @property
    def center_y(self) -> float:
        return self.y + self.height / 2

    def clamp(self, bounds: FieldBounds):
        """Keeps the paddle inside [0, field height - paddle height]."""
        if self.y < 0:
            self.y = 0.0
        if self.y + self.height > bounds.height:
            self.y = bounds.height - self.height


@dataclass
class Ball:
    x: float
    y: float
    width: float
    height: float
    velocity: Vector2 = field(default_factory=Vector2)

    def __post_init__(self):
        _check_size("Ball", self.width, self.height)

    def box(self) -> Box:
        return Box(self.x, self.y, self.width, self.height)

    @property
    def center_y(self) -> float:
        return self.y + self.height / 2


@dataclass
class Score:
    player: int = 0
    opponent: int = 0

    def of(self, side: Side) -> int:
        return self.player if side is Side.PLAYER else self.opponent


@dataclass
class World:
    """Everything the simulation mutates, passed explicitly to each component."""
    bounds: FieldBounds
    player: Paddle
    opponent: Paddle
    ball: Ball
    score: Score = field(default_factory=Score)
    phase: Phase = Phase.PLAYING
    quit_requested: bool = False
    winner: Optional[Side] = None

    def snapshot(self) -> "Snapshot":
        return Snapshot(
            player=self.player.box(),
            opponent=self.opponent.box(),
            ball=self.ball.box(),
            ball_velocity=(self.ball.velocity.x, self.ball.velocity.y),
            player_score=self.score.player,
            opponent_score=self.score.opponent,
            phase=self.phase,
        )


@dataclass(frozen=True)
class Snapshot:
    """Read-only view of one frame, enough for presentation."""
    player: Box
    opponent: Box
    ball: Box
    ball_velocity: tuple[float, float]
    player_score: int
    opponent_score: int
    phase: Phase

    def to_client_state(self) -> dict:
        """Prepares a plain dictionary for the per-frame debug log."""
        def rect(box: Box) -> dict:
            return {"x": round(box.x, 2), "y": round(box.y, 2),
                    "w": box.width, "h": box.height}

        return {
            "player": rect(self.player),
            "opponent": rect(self.opponent),
            "ball": rect(self.ball),
            "ball_velocity": [round(v, 2) for v in self.ball_velocity],
            "scores": [self.player_score, self.opponent_score],
            "phase": self.phase.value,
        }
