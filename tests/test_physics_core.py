import math
import random

import pytest

from conftest import make_ball, make_paddle
from pong.constants import BALL_SPEED
from pong.data_models import FieldBounds, Side
from pong.physics_core import PhysicsCore, reflection_component


@pytest.fixture
def core():
    return PhysicsCore(rng=random.Random(7))


def speed(ball):
    return math.hypot(ball.velocity.x, ball.velocity.y)


def test_advance_moves_by_velocity_times_dt(core):
    ball = make_ball(x=10.0, y=20.0, vx=60.0, vy=-120.0)
    core.advance(ball, 0.5)
    assert ball.x == pytest.approx(40.0)
    assert ball.y == pytest.approx(-40.0)


@pytest.mark.parametrize("direction", [(1, 0), (0, -1), (3, 4), (-1, 2), (-10, -1), (0.001, 5)])
def test_set_direction_keeps_ball_speed(core, direction):
    ball = make_ball()
    core.set_direction(ball, *direction)
    assert speed(ball) == pytest.approx(BALL_SPEED)
    assert math.copysign(1, ball.velocity.x) == math.copysign(1, direction[0])


def test_set_direction_rejects_zero_vector(core):
    with pytest.raises(ValueError):
        core.set_direction(make_ball(), 0, 0)


def test_serve_centres_ball_at_fixed_speed(core):
    bounds = FieldBounds(1024, 768)
    ball = make_ball(x=-50.0, y=900.0)
    for _ in range(50):
        core.serve(ball, bounds)
        assert ball.x == pytest.approx(502.0)
        assert ball.y == pytest.approx(374.0)
        assert speed(ball) == pytest.approx(BALL_SPEED)
        assert ball.velocity.x != 0
        assert ball.velocity.y != 0


def test_serve_uses_both_directions(core):
    bounds = FieldBounds(1024, 768)
    ball = make_ball()
    signs = set()
    for _ in range(200):
        core.serve(ball, bounds)
        signs.add((ball.velocity.x > 0, ball.velocity.y > 0))
    assert len(signs) == 4


def test_serve_is_reproducible_with_seed():
    bounds = FieldBounds(1024, 768)
    first, second = make_ball(), make_ball()
    PhysicsCore(rng=random.Random(99)).serve(first, bounds)
    PhysicsCore(rng=random.Random(99)).serve(second, bounds)
    assert first.velocity == second.velocity


def test_top_wall_clamps_and_flips(core):
    ball = make_ball(y=-5.0, vx=100.0, vy=-200.0)
    assert core.resolve_walls(ball, FieldBounds(1024, 768)) is None
    assert ball.y == 0.0
    assert ball.velocity.y == 200.0
    assert ball.velocity.x == 100.0


def test_bottom_wall_clamps_and_flips(core):
    ball = make_ball(y=760.0, vy=200.0)
    assert core.resolve_walls(ball, FieldBounds(1024, 768)) is None
    assert ball.y + ball.height == 768
    assert ball.velocity.y == -200.0


def test_left_edge_scores_for_opponent(core):
    ball = make_ball(x=-0.5, vx=-300.0)
    assert core.resolve_walls(ball, FieldBounds(1024, 768)) is Side.OPPONENT


def test_right_edge_scores_for_player(core):
    ball = make_ball(x=1005.0, vx=300.0)
    assert core.resolve_walls(ball, FieldBounds(1024, 768)) is Side.PLAYER


def test_side_walls_bounce_instead_of_scoring(core):
    bounds = FieldBounds(1024, 768)
    left = make_ball(x=-3.0, vx=-50.0)
    right = make_ball(x=1010.0, vx=50.0)

    assert core.resolve_walls(left, bounds, side_walls=True) is None
    assert core.resolve_walls(right, bounds, side_walls=True) is None
    assert left.x == 0.0 and left.velocity.x == 50.0
    assert right.x == 1004.0 and right.velocity.x == -50.0


@pytest.mark.parametrize("ball_pos,hit", [
    ((110.0, 340.0), True),     # overlapping
    ((120.0, 340.0), True),     # touching the right edge
    ((121.0, 340.0), False),    # right of the paddle
    ((79.0, 340.0), False),     # left of the paddle
    ((110.0, 279.0), False),    # above
    ((110.0, 401.0), False),    # below
    ((110.0, 400.0), True),     # touching the bottom edge
])
def test_check_hit(core, ball_pos, hit):
    paddle = make_paddle(x=100.0, y=300.0)
    ball = make_ball(*ball_pos)
    assert core.check_hit(ball, paddle) is hit


def test_reflect_off_player_paddle_top_edge(core):
    # Field 1024x768, bat at a tenth of the width, ball centre level with the bat top
    paddle = make_paddle(x=92.4, y=300.0, height=100)
    ball = make_ball(x=100.0, y=290.0, vx=-550.0)

    core.reflect(ball, paddle, Side.PLAYER)

    assert ball.x == pytest.approx(112.4)
    assert ball.velocity.x == pytest.approx(245.97, abs=0.01)
    assert ball.velocity.y == pytest.approx(-491.93, abs=0.01)


def test_reflect_off_opponent_paddle_goes_left(core):
    paddle = make_paddle(x=900.0, y=300.0, height=100)
    ball = make_ball(x=890.0, y=380.0, vx=550.0)

    core.reflect(ball, paddle, Side.OPPONENT)

    assert ball.x + ball.width == pytest.approx(paddle.x)
    assert ball.velocity.x < 0
    assert ball.velocity.y > 0
    assert speed(ball) == pytest.approx(BALL_SPEED)


def test_reflect_through_centre_goes_straight_across(core):
    paddle = make_paddle(x=92.4, y=300.0, height=100)
    ball = make_ball(x=100.0, y=340.0, vx=-550.0, vy=30.0)
    core.reflect(ball, paddle, Side.PLAYER)
    assert ball.velocity.x == pytest.approx(BALL_SPEED)
    assert ball.velocity.y == pytest.approx(0.0)


def test_reflection_component_is_monotonic():
    paddle = make_paddle(y=300.0, height=100)
    hits = [300.0, 310.0, 325.0, 349.0, 350.0, 351.0, 380.0, 400.0]
    values = [reflection_component(paddle, y) for y in hits]

    assert values == sorted(values)
    assert len(set(values)) == len(values)
    assert values[0] == pytest.approx(-2.0)
    assert values[4] == pytest.approx(0.0)
    assert values[-1] == pytest.approx(2.0)


def test_reflection_component_clamps_outside_paddle():
    paddle = make_paddle(y=300.0, height=100)
    assert reflection_component(paddle, 250.0) == pytest.approx(-2.0)
    assert reflection_component(paddle, 460.0) == pytest.approx(2.0)
