"""Errors raised when a world cannot be constructed."""


class WorldConstructionError(ValueError):
    """Base class for invalid world parameters."""


class SizeTooSmall(WorldConstructionError):
    """World side length is less than 1."""

    def __init__(self, world_size: int) -> None:
        self.world_size = world_size
        super().__init__("World size must be greater than 0")


class SizeTooLarge(WorldConstructionError):
    """World side length exceeds what the world can hold."""

    def __init__(self, world_size: int, max_world_size: int) -> None:
        self.world_size = world_size
        self.max_world_size = max_world_size
        super().__init__("World size exceeds maximum allowed.")
