"""
Pong: a fixed-step simulation of a two-paddle ball game against a
rule-based computer opponent.
"""

from .data_models import Ball, FieldBounds, Paddle, Phase, Score, Side, Snapshot, Vector2, World
from .game_engine import GameEngine, ScoreKeeper
from .input_translator import Intent, InputTranslator
from .opponent import OpponentController
from .physics_core import PhysicsCore

__version__ = "0.1.0"
