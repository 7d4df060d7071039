"""Frame-driven Breakout simulation."""
from __future__ import annotations

import logging
import random
from collections import deque
from typing import Deque, List, Optional

from . import config as defaults
from .config import GameConfig
from .entities import Ball, Block, Player
from .geometry import Vector2, resolve_collision
from .level import ball_speed, build_block_grid
from .models import BlockKind, BlockView, FrameInput, GamePhase, GameSnapshot

logger = logging.getLogger(__name__)


class BreakoutGame:
    """Encapsulates the state of a single Breakout game.

    The host calls :meth:`update` once per frame with the elapsed time and the
    sampled input, then reads :meth:`snapshot` to draw the frame.
    """

    def __init__(self, config: Optional[GameConfig] = None, rng: Optional[random.Random] = None):
        self.config = config or GameConfig()
        self.config.validate()
        self.random = rng or random.Random()
        self.phase = GamePhase.MENU
        self.level: int = 0
        self.score: int = 0
        self.player = Player.centered(self.config, self.config.lives_initial)
        self.blocks: List[Block] = []
        self.balls: List[Ball] = []
        self.events: Deque[str] = deque(maxlen=defaults.EVENT_LOG_SIZE)
        self.reset_game()

    # ------------------------------------------------------------------
    # Level bookkeeping
    # ------------------------------------------------------------------
    @property
    def ball_speed(self) -> float:
        return ball_speed(self.config, self.level)

    def reset_level(self) -> None:
        """Recentre the paddle and rebuild the balls and blocks for the current level."""
        self.player = Player.centered(self.config, self.player.lives)
        self.balls.clear()
        self.balls.append(
            Ball.spawn(
                Vector2(
                    self.config.board_width * 0.5 - self.config.ball_size * 0.5,
                    self.config.board_height * 0.5,
                ),
                self.ball_speed,
                self.config.ball_size,
                self.random,
            )
        )
        self.blocks.clear()
        self.blocks.extend(build_block_grid(self.config, self.random))
        logger.debug("Level %d reset with ball speed %.1f", self.level, self.ball_speed)
        self.add_event(f"Level {self.level + 1} ready.")

    def reset_game(self) -> None:
        self.level = 0
        self.score = 0
        self.player.lives = self.config.lives_initial
        self.reset_level()

    def level_up(self) -> None:
        self.level += 1
        self.reset_level()

    # ------------------------------------------------------------------
    # State machine
    # ------------------------------------------------------------------
    def update(self, dt: float, frame_input: FrameInput) -> None:
        """Advance the game by one frame."""
        if dt < 0:
            raise ValueError("Elapsed time cannot be negative")
        if self.phase is GamePhase.MENU:
            if frame_input.confirm:
                self._set_phase(GamePhase.GAME)
        elif self.phase is GamePhase.GAME:
            self._step(dt, frame_input)
        elif self.phase is GamePhase.LEVEL_COMPLETED:
            if frame_input.confirm:
                self._set_phase(GamePhase.MENU)
                self.level_up()
        elif self.phase is GamePhase.DEAD:
            if frame_input.confirm:
                self._set_phase(GamePhase.MENU)
                self.reset_game()

    def _set_phase(self, phase: GamePhase) -> None:
        logger.info("Phase %s -> %s", self.phase.value, phase.value)
        self.phase = phase

    # ------------------------------------------------------------------
    # Simulation step
    # ------------------------------------------------------------------
    def _step(self, dt: float, frame_input: FrameInput) -> None:
        board_width = self.config.board_width
        self.player.update(dt, frame_input, board_width)
        for ball in self.balls:
            ball.update(dt, board_width)

        spawn_later: List[Ball] = []
        for ball in self.balls:
            resolve_collision(ball.rect, ball.velocity, self.player.rect)
            for block in self.blocks:
                if not resolve_collision(ball.rect, ball.velocity, block.rect):
                    continue
                if block.hit():
                    self.score += self.config.points_per_block
                    spawned = self._on_block_destroyed(block, ball)
                    if spawned is not None:
                        spawn_later.append(spawned)
        self.balls.extend(spawn_later)

        self._remove_lost_balls()
        self.blocks = [block for block in self.blocks if block.is_alive()]
        if not self.blocks and self.phase is GamePhase.GAME:
            self.add_event("Level completed!")
            self._set_phase(GamePhase.LEVEL_COMPLETED)

    def _on_block_destroyed(self, block: Block, ball: Ball) -> Optional[Ball]:
        if block.kind is BlockKind.SPAWN_BALL_ON_DEATH:
            logger.debug("Special block destroyed, spawning a ball at %s", ball.rect.point())
            self.add_event("Extra ball released!")
            return Ball.spawn(ball.rect.point(), self.ball_speed, self.config.ball_size, self.random)
        return None

    def _remove_lost_balls(self) -> None:
        remaining = [ball for ball in self.balls if ball.rect.y < self.config.board_height]
        removed = len(self.balls) - len(remaining)
        self.balls = remaining
        if removed == 0 or self.balls:
            return
        self.player.lives -= 1
        logger.debug("Last ball lost, %d lives left", self.player.lives)
        if self.player.lives > 0:
            self.add_event(f"Ball lost. {self.player.lives} lives left.")
            self.balls.append(self._serve_ball())
        else:
            self.add_event("Game over.")
            self._set_phase(GamePhase.DEAD)

    def _serve_ball(self) -> Ball:
        paddle = self.player.rect
        position = Vector2(
            paddle.x + paddle.w * 0.5 - self.config.ball_size * 0.5,
            paddle.y - self.config.ball_respawn_offset,
        )
        return Ball.spawn(position, self.ball_speed, self.config.ball_size, self.random)

    # ------------------------------------------------------------------
    # Snapshotting
    # ------------------------------------------------------------------
    def snapshot(self) -> GameSnapshot:
        snapshot = GameSnapshot(
            phase=self.phase,
            level=self.level,
            score=self.score,
            lives=self.player.lives,
            player=self.player.rect.copy(),
            blocks=[
                BlockView(rect=block.rect.copy(), kind=block.kind, lives=block.lives)
                for block in self.blocks
            ],
            balls=[ball.rect.copy() for ball in self.balls],
            events=list(self.events),
        )
        self.events.clear()
        return snapshot

    def add_event(self, message: str) -> None:
        self.events.append(message)


__all__ = ["BreakoutGame"]
