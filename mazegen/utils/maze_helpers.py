from typing import Optional

from mazegen.config import MazeConfig
from mazegen.core import Maze
from mazegen.utils.logger import Logger


def setup_maze(config: MazeConfig, logger: Optional[Logger] = None, file=None) -> Maze:
    """Build a Maze from the configuration."""
    return Maze(
        config.grid.width,
        config.grid.height,
        seed=config.seed,
        logger=logger,
        file=file,
        **config.builder.get_builder_cfg(),
        **config.opening.get_opening_cfg(),
    )
