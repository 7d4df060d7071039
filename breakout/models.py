"""Data exchanged between the simulation and the host each frame."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List

from .geometry import Rect


class GamePhase(Enum):
    """Top-level state of the game."""

    MENU = "menu"
    GAME = "game"
    LEVEL_COMPLETED = "level_completed"
    DEAD = "dead"


class BlockKind(Enum):
    REGULAR = "regular"
    SPAWN_BALL_ON_DEATH = "spawn_ball_on_death"


@dataclass(frozen=True)
class FrameInput:
    """Input sampled by the host for a single frame.

    ``confirm`` is edge triggered: it is only set on the frame the button went
    down, never while it is held.
    """

    left: bool = False
    right: bool = False
    confirm: bool = False


@dataclass(frozen=True)
class BlockView:
    rect: Rect
    kind: BlockKind
    lives: int


@dataclass
class GameSnapshot:
    """Read-only view of the game handed to the renderer."""

    phase: GamePhase
    level: int
    score: int
    lives: int
    player: Rect
    blocks: List[BlockView] = field(default_factory=list)
    balls: List[Rect] = field(default_factory=list)
    events: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, object]:
        return {
            "phase": self.phase.value,
            "level": self.level,
            "score": self.score,
            "lives": self.lives,
            "player": self.player.to_tuple(),
            "blocks": [
                {"rect": block.rect.to_tuple(), "kind": block.kind.value, "lives": block.lives}
                for block in self.blocks
            ],
            "balls": [ball.to_tuple() for ball in self.balls],
            "events": list(self.events),
        }
