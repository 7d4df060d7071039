"""Entities that live on the Breakout board."""
from __future__ import annotations

import random
from dataclasses import dataclass

from .config import GameConfig
from .geometry import Rect, Vector2
from .models import BlockKind, FrameInput


@dataclass
class Player:
    """The paddle together with the player's remaining lives."""

    rect: Rect
    lives: int
    speed: float

    @classmethod
    def centered(cls, config: GameConfig, lives: int) -> "Player":
        rect = Rect(
            config.board_width * 0.5 - config.paddle_width * 0.5,
            config.board_height - config.paddle_bottom_offset,
            config.paddle_width,
            config.paddle_height,
        )
        return cls(rect=rect, lives=lives, speed=config.paddle_speed)

    def update(self, dt: float, frame_input: FrameInput, board_width: float) -> None:
        if frame_input.left and not frame_input.right:
            direction = -1.0
        elif frame_input.right and not frame_input.left:
            direction = 1.0
        else:
            direction = 0.0
        self.rect.x += direction * dt * self.speed
        self.rect.x = max(0.0, min(self.rect.x, board_width - self.rect.w))


@dataclass
class Block:
    rect: Rect
    lives: int
    kind: BlockKind = BlockKind.REGULAR

    def is_alive(self) -> bool:
        return self.lives > 0

    def hit(self) -> bool:
        """Take one life; returns ``True`` only for the hit that destroyed the block."""
        self.lives -= 1
        return self.lives == 0


@dataclass
class Ball:
    rect: Rect
    velocity: Vector2
    speed: float

    @classmethod
    def spawn(cls, position: Vector2, speed: float, size: float, rng: random.Random) -> "Ball":
        """Create a ball heading towards the paddle side at a random angle."""
        direction = Vector2(rng.uniform(-1.0, 1.0), 1.0).normalized()
        return cls(rect=Rect(position.x, position.y, size, size), velocity=direction, speed=speed)

    def update(self, dt: float, board_width: float) -> None:
        self.rect.x += self.velocity.x * dt * self.speed
        self.rect.y += self.velocity.y * dt * self.speed
        # The bottom edge is open: balls falling past it are lost.
        if self.rect.x <= 0:
            self.velocity.x = abs(self.velocity.x)
        if self.rect.x >= board_width - self.rect.w:
            self.velocity.x = -abs(self.velocity.x)
        if self.rect.y <= 0:
            self.velocity.y = abs(self.velocity.y)
