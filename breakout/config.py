"""Configuration for the Breakout simulation.

Module level constants hold the tuning values of the game; ``GameConfig``
bundles them into a validated object the simulation is constructed with.
All distances are in pixels and all speeds in pixels per second.
"""
from __future__ import annotations

from dataclasses import dataclass

BOARD_WIDTH = 800.0
BOARD_HEIGHT = 600.0

# Block grid layout.
GRID_COLUMNS = 6
GRID_ROWS = 4
BLOCK_WIDTH = 100.0
BLOCK_HEIGHT = 40.0
BLOCK_PADDING = 5.0
GRID_TOP_MARGIN = 50.0
BLOCK_LIVES = 2
SPECIAL_BLOCK_PICKS = 3

PADDLE_WIDTH = 150.0
PADDLE_HEIGHT = 20.0
PADDLE_BOTTOM_OFFSET = 100.0  # distance from the bottom edge to the paddle top
PADDLE_SPEED = 700.0

BALL_SIZE = 15.0
BALL_SPEED_INITIAL = 200.0
BALL_SPEED_INCREMENT = 50.0  # added per level
BALL_RESPAWN_OFFSET = 50.0  # respawned balls appear this far above the paddle

LIVES_INITIAL = 3
POINTS_PER_BLOCK = 10

EVENT_LOG_SIZE = 50


class ConfigurationError(ValueError):
    """Raised when a ``GameConfig`` describes an unplayable board."""


@dataclass(frozen=True)
class GameConfig:
    """Static configuration describing the board and its pacing.

    Attributes
    ----------
    board_width, board_height:
        Size of the playfield.  The origin is the top-left corner and y grows
        towards the paddle.
    grid_columns, grid_rows:
        Dimensions of the block grid generated for every level.
    block_padding:
        Gap between neighbouring blocks.  The grid is centred horizontally
        and starts ``grid_top_margin`` below the top wall.
    special_block_picks:
        How many random picks (with replacement) turn a regular block into
        one that releases an extra ball when destroyed.
    ball_speed_initial, ball_speed_increment:
        Ball speed on level 0 and the amount added for every level after it.
    """

    board_width: float = BOARD_WIDTH
    board_height: float = BOARD_HEIGHT
    grid_columns: int = GRID_COLUMNS
    grid_rows: int = GRID_ROWS
    block_width: float = BLOCK_WIDTH
    block_height: float = BLOCK_HEIGHT
    block_padding: float = BLOCK_PADDING
    grid_top_margin: float = GRID_TOP_MARGIN
    block_lives: int = BLOCK_LIVES
    special_block_picks: int = SPECIAL_BLOCK_PICKS
    paddle_width: float = PADDLE_WIDTH
    paddle_height: float = PADDLE_HEIGHT
    paddle_bottom_offset: float = PADDLE_BOTTOM_OFFSET
    paddle_speed: float = PADDLE_SPEED
    ball_size: float = BALL_SIZE
    ball_speed_initial: float = BALL_SPEED_INITIAL
    ball_speed_increment: float = BALL_SPEED_INCREMENT
    ball_respawn_offset: float = BALL_RESPAWN_OFFSET
    lives_initial: int = LIVES_INITIAL
    points_per_block: int = POINTS_PER_BLOCK

    @property
    def grid_width(self) -> float:
        return (self.block_width + self.block_padding) * self.grid_columns

    @property
    def grid_bottom(self) -> float:
        return self.grid_top_margin + (self.block_height + self.block_padding) * self.grid_rows

    def validate(self) -> None:
        if self.board_width <= 0 or self.board_height <= 0:
            raise ConfigurationError("Board dimensions must be positive")
        if self.grid_columns <= 0 or self.grid_rows <= 0:
            raise ConfigurationError("Block grid dimensions must be positive")
        if self.block_width <= 0 or self.block_height <= 0 or self.block_padding < 0:
            raise ConfigurationError("Invalid block size or padding")
        if self.grid_width > self.board_width:
            raise ConfigurationError("Block grid does not fit on the board")
        if self.block_lives <= 0:
            raise ConfigurationError("Blocks need at least one life")
        if self.special_block_picks < 0:
            raise ConfigurationError("special_block_picks cannot be negative")
        if self.paddle_width <= 0 or self.paddle_height <= 0:
            raise ConfigurationError("Paddle dimensions must be positive")
        if self.board_width < self.paddle_width:
            raise ConfigurationError("Board is narrower than the paddle")
        if self.paddle_bottom_offset <= 0 or self.paddle_bottom_offset > self.board_height:
            raise ConfigurationError("Paddle must sit inside the board")
        if self.grid_bottom >= self.board_height - self.paddle_bottom_offset:
            raise ConfigurationError("Block grid reaches the paddle")
        if self.paddle_speed <= 0:
            raise ConfigurationError("Paddle speed must be positive")
        if self.ball_size <= 0 or self.ball_size > self.board_width:
            raise ConfigurationError("Invalid ball size")
        if self.ball_speed_initial <= 0 or self.ball_speed_increment < 0:
            raise ConfigurationError("Invalid ball speed settings")
        if self.lives_initial <= 0:
            raise ConfigurationError("Players need at least one life")
        if self.points_per_block < 0:
            raise ConfigurationError("points_per_block cannot be negative")
