"""Level layout and difficulty scaling."""
from __future__ import annotations

import logging
import random
from typing import List

from .config import ConfigurationError, GameConfig
from .entities import Block
from .geometry import Rect
from .models import BlockKind

logger = logging.getLogger(__name__)


def ball_speed(config: GameConfig, level: int) -> float:
    """Speed of every ball spawned while ``level`` is the current level."""
    return config.ball_speed_initial + config.ball_speed_increment * level


def build_block_grid(config: GameConfig, rng: random.Random) -> List[Block]:
    """Lay out a fresh grid of blocks and mark a few of them as special.

    Blocks are produced row by row.  After the grid is complete,
    ``special_block_picks`` indices are drawn with replacement, so the same
    block may be picked more than once.
    """
    cell_width = config.block_width + config.block_padding
    cell_height = config.block_height + config.block_padding
    start_x = (config.board_width - config.grid_width) * 0.5
    start_y = config.grid_top_margin

    blocks: List[Block] = []
    for index in range(config.grid_columns * config.grid_rows):
        column = index % config.grid_columns
        row = index // config.grid_columns
        rect = Rect(
            start_x + column * cell_width,
            start_y + row * cell_height,
            config.block_width,
            config.block_height,
        )
        blocks.append(Block(rect=rect, lives=config.block_lives))

    if not blocks:
        raise ConfigurationError("Cannot pick special blocks from an empty grid")
    for _ in range(config.special_block_picks):
        blocks[rng.randrange(len(blocks))].kind = BlockKind.SPAWN_BALL_ON_DEATH

    special = sum(1 for block in blocks if block.kind is BlockKind.SPAWN_BALL_ON_DEATH)
    logger.debug("Generated %d blocks (%d special)", len(blocks), special)
    return blocks


__all__ = ["ball_speed", "build_block_grid"]
