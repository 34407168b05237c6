import random

import pytest

from pong.data_models import Ball, FieldBounds, Paddle, Vector2
from pong.game_engine import GameEngine


@pytest.fixture
def bounds():
    return FieldBounds(1024, 768)


@pytest.fixture
def engine():
    return GameEngine(rng=random.Random(1234))


@pytest.fixture
def world(engine, bounds):
    return engine.create_world(bounds, paddle_size=(20, 100), ball_size=(20, 20))


def make_ball(x=500.0, y=300.0, vx=0.0, vy=0.0, size=20):
    return Ball(x=x, y=y, width=size, height=size, velocity=Vector2(vx, vy))


def make_paddle(x=100.0, y=300.0, width=20, height=100):
    return Paddle(x=x, y=y, width=width, height=height)
