"""Tests for paddle, ball and block behaviour."""
from __future__ import annotations

import math
import random

import pytest

from breakout.config import GameConfig
from breakout.entities import Ball, Block, Player
from breakout.geometry import Rect, Vector2
from breakout.models import BlockKind, FrameInput


class FixedRandom:
    """Random source whose ``uniform`` always returns the same value."""

    def __init__(self, value: float) -> None:
        self.value = value

    def uniform(self, a: float, b: float) -> float:
        return self.value


@pytest.fixture()
def player() -> Player:
    return Player.centered(GameConfig(), lives=3)


def test_player_starts_centered_near_bottom(player: Player) -> None:
    assert player.rect == Rect(325, 500, 150, 20)
    assert player.lives == 3


def test_player_moves_left_and_right(player: Player) -> None:
    player.update(0.1, FrameInput(left=True), board_width=800)
    assert player.rect.x == pytest.approx(255)
    player.update(0.1, FrameInput(right=True), board_width=800)
    assert player.rect.x == pytest.approx(325)
    assert player.rect.y == 500


def test_player_ignores_opposing_keys(player: Player) -> None:
    player.update(0.5, FrameInput(left=True, right=True), board_width=800)
    assert player.rect.x == 325


def test_player_is_clamped_to_board(player: Player) -> None:
    player.update(5.0, FrameInput(left=True), board_width=800)
    assert player.rect.x == 0
    player.update(5.0, FrameInput(right=True), board_width=800)
    assert player.rect.x == 650


def test_spawned_ball_heads_towards_paddle() -> None:
    rng = random.Random(1234)
    for _ in range(50):
        ball = Ball.spawn(Vector2(10, 20), speed=200, size=15, rng=rng)
        assert ball.velocity.y > 0
        assert math.isclose(ball.velocity.length(), 1.0)
        assert ball.rect == Rect(10, 20, 15, 15)
        assert ball.speed == 200


def test_spawned_ball_direction_uses_random_x() -> None:
    ball = Ball.spawn(Vector2(0, 0), speed=200, size=15, rng=FixedRandom(1.0))
    assert ball.velocity.x == pytest.approx(math.sqrt(0.5))
    assert ball.velocity.y == pytest.approx(math.sqrt(0.5))


def test_ball_moves_with_speed_and_time() -> None:
    ball = Ball(rect=Rect(100, 100, 15, 15), velocity=Vector2(0.6, 0.8), speed=100)
    ball.update(0.5, board_width=800)
    assert ball.rect.x == pytest.approx(130)
    assert ball.rect.y == pytest.approx(140)


@pytest.mark.parametrize(
    "rect, velocity, expected",
    [
        (Rect(0, 100, 15, 15), Vector2(-0.6, 0.8), Vector2(0.6, 0.8)),
        (Rect(790, 100, 15, 15), Vector2(0.6, 0.8), Vector2(-0.6, 0.8)),
        (Rect(100, 0, 15, 15), Vector2(0.6, -0.8), Vector2(0.6, 0.8)),
    ],
    ids=["left", "right", "top"],
)
def test_ball_bounces_off_walls(rect: Rect, velocity: Vector2, expected: Vector2) -> None:
    ball = Ball(rect=rect, velocity=velocity, speed=200)
    ball.update(0.1, board_width=800)
    assert ball.velocity == expected


def test_ball_falls_through_bottom() -> None:
    ball = Ball(rect=Rect(100, 590, 15, 15), velocity=Vector2(0.0, 1.0), speed=200)
    ball.update(0.1, board_width=800)
    assert ball.rect.y == pytest.approx(610)
    assert ball.velocity == Vector2(0.0, 1.0)


def test_block_is_destroyed_on_last_hit() -> None:
    block = Block(rect=Rect(0, 0, 100, 40), lives=2, kind=BlockKind.REGULAR)
    assert block.hit() is False
    assert block.is_alive()
    assert block.hit() is True
    assert not block.is_alive()
    # Further hits in the same frame do not count as another destruction.
    assert block.hit() is False
