"""pygame shell that drives ``BreakoutGame`` and draws its snapshots."""
from __future__ import annotations

import logging
from typing import Iterable, Optional, Sequence, Tuple

import pygame

from .config import GameConfig
from .game import BreakoutGame
from .geometry import Rect
from .models import BlockKind, BlockView, FrameInput, GamePhase, GameSnapshot

logger = logging.getLogger(__name__)

WINDOW_TITLE = "breakout"
FPS = 60
TITLE_FONT_SIZE = 50
HUD_FONT_SIZE = 30
HUD_MARGIN = 30
HUD_BASELINE = 40

Color = Tuple[int, int, int]

WHITE: Color = (255, 255, 255)
BLACK: Color = (0, 0, 0)
RED: Color = (230, 41, 55)
ORANGE: Color = (255, 161, 0)
GREEN: Color = (0, 228, 48)
BLUE: Color = (0, 121, 241)
DARKGRAY: Color = (80, 80, 80)


def read_input(pressed: Sequence[bool], events: Iterable[pygame.event.Event]) -> FrameInput:
    """Build the frame input from held keys and this frame's key presses."""
    confirm = any(
        event.type == pygame.KEYDOWN and event.key == pygame.K_SPACE for event in events
    )
    return FrameInput(
        left=bool(pressed[pygame.K_LEFT]),
        right=bool(pressed[pygame.K_RIGHT]),
        confirm=confirm,
    )


def block_color(block: BlockView) -> Color:
    if block.kind is BlockKind.SPAWN_BALL_ON_DEATH:
        return GREEN
    return RED if block.lives >= 2 else ORANGE


def title_text(snapshot: GameSnapshot) -> Optional[str]:
    if snapshot.phase is GamePhase.MENU:
        return "Press SPACE to start"
    if snapshot.phase is GamePhase.LEVEL_COMPLETED:
        return f"Level completed! {snapshot.score} score"
    if snapshot.phase is GamePhase.DEAD:
        return f"Game over! {snapshot.score} score"
    return None


def _to_pygame(rect: Rect) -> pygame.Rect:
    return pygame.Rect(round(rect.x), round(rect.y), round(rect.w), round(rect.h))


class Client:
    """Desktop window around a single game."""

    def __init__(self, config: Optional[GameConfig] = None):
        self.game = BreakoutGame(config)
        pygame.init()
        size = (int(self.game.config.board_width), int(self.game.config.board_height))
        self.screen = pygame.display.set_mode(size)
        pygame.display.set_caption(WINDOW_TITLE)
        self.clock = pygame.time.Clock()
        self.title_font = pygame.font.SysFont(None, TITLE_FONT_SIZE)
        self.hud_font = pygame.font.SysFont(None, HUD_FONT_SIZE)

    def run(self) -> None:
        running = True
        while running:
            dt = self.clock.tick(FPS) / 1000.0
            events = pygame.event.get()
            for event in events:
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False

            self.game.update(dt, read_input(pygame.key.get_pressed(), events))
            snapshot = self.game.snapshot()
            for message in snapshot.events:
                logger.info(message)
            self.render(snapshot)
            pygame.display.flip()

    def render(self, snapshot: GameSnapshot) -> None:
        self.screen.fill(WHITE)
        pygame.draw.rect(self.screen, BLUE, _to_pygame(snapshot.player))
        for block in snapshot.blocks:
            pygame.draw.rect(self.screen, block_color(block), _to_pygame(block.rect))
        for ball in snapshot.balls:
            pygame.draw.rect(self.screen, DARKGRAY, _to_pygame(ball))

        title = title_text(snapshot)
        if title is not None:
            surface = self.title_font.render(title, True, BLACK)
            self.screen.blit(surface, surface.get_rect(center=self.screen.get_rect().center))
            return
        self.render_hud(snapshot)

    def render_hud(self, snapshot: GameSnapshot) -> None:
        width = self.screen.get_width()
        score = self.hud_font.render(f"score: {snapshot.score}", True, BLACK)
        lives = self.hud_font.render(f"lives: {snapshot.lives}", True, BLACK)
        level = self.hud_font.render(f"level: {snapshot.level}", True, BLACK)
        self.screen.blit(score, score.get_rect(midbottom=(width // 2, HUD_BASELINE)))
        self.screen.blit(lives, lives.get_rect(bottomleft=(HUD_MARGIN, HUD_BASELINE)))
        self.screen.blit(level, level.get_rect(bottomright=(width - HUD_MARGIN, HUD_BASELINE)))


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    client = Client()
    try:
        client.run()
    finally:
        pygame.quit()


if __name__ == "__main__":
    main()
