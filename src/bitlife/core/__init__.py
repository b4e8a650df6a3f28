"""Core bit-packed Game of Life logic."""

from . import bitgrid
from .world import World
from .errors import WorldConstructionError, SizeTooSmall, SizeTooLarge

__all__ = ["bitgrid", "World", "WorldConstructionError", "SizeTooSmall", "SizeTooLarge"]
