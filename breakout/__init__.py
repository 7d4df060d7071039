"""Core package for the Breakout arcade game.

The package exposes a frame-driven simulation that a host loop feeds with
elapsed time and input, and reads back as a snapshot for drawing.  The
simulation itself has no graphical dependencies and can be unit tested
headless; ``breakout.client`` provides the pygame shell around it.
"""

from .config import ConfigurationError, GameConfig
from .game import BreakoutGame
from .models import BlockKind, FrameInput, GamePhase, GameSnapshot

__all__ = [
    "BlockKind",
    "BreakoutGame",
    "ConfigurationError",
    "FrameInput",
    "GameConfig",
    "GamePhase",
    "GameSnapshot",
]
