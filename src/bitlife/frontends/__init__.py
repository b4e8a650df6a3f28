"""Frontend interfaces for the bit-packed Game of Life."""

from .cli import CLIWorld

__all__ = ["CLIWorld"]
