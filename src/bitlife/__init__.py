"""Conway's Game of Life on a world packed into a single integer."""

__version__ = "0.1.0"

from .core import bitgrid
from .core.world import World
from .core.errors import WorldConstructionError, SizeTooSmall, SizeTooLarge

__all__ = ["bitgrid", "World", "WorldConstructionError", "SizeTooSmall", "SizeTooLarge"]
