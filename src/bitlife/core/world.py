"""Conway's Game of Life on a bit-packed world."""

from typing import Dict, List, Tuple
import numpy as np

from . import bitgrid
from .errors import SizeTooLarge, SizeTooSmall


class World:
    """Conway's Game of Life simulation over a packed integer state.

    Implements the classic rules:
    - Live cell with 2-3 neighbors survives
    - Dead cell with exactly 3 neighbors becomes alive
    - All other cells die or stay dead

    Every state the world passes through is kept in ``history``. Once the
    next computed state is already in that history the world is stable and
    further calls to ``advance`` do nothing.
    """

    MAX_WORLD_SIZE = 50
    UNDERPOPULATION_THRESHOLD = 2
    OVERPOPULATION_THRESHOLD = 3
    REPRODUCTION_TRIGGER = 3

    def __init__(self, seed: int, world_size: int = 3) -> None:
        """Initialize a new world.

        Bits of ``seed`` beyond ``world_size ** 2`` are kept, so an oversized
        seed is accepted as is. Only bits ``size ** 2`` and ``size ** 2 + 1``
        are ever read, as the lower neighbors of the bottom-left cell (see
        ``bitgrid.edge_flags``); higher bits are never addressed.

        Args:
            seed: Initial packed state, a non-negative integer
            world_size: Side length of the square world

        Raises:
            SizeTooSmall: If world_size is less than 1
            SizeTooLarge: If world_size exceeds MAX_WORLD_SIZE
            ValueError: If seed is negative
            TypeError: If seed or world_size is not an integer
        """
        if not _is_int(seed):
            raise TypeError(f"Seed must be an integer, got {type(seed).__name__}")
        if not _is_int(world_size):
            raise TypeError(f"World size must be an integer, got {type(world_size).__name__}")
        seed, world_size = int(seed), int(world_size)

        if world_size > self.MAX_WORLD_SIZE:
            raise SizeTooLarge(world_size, self.MAX_WORLD_SIZE)
        if world_size < 1:
            raise SizeTooSmall(world_size)
        if seed < 0:
            raise ValueError(f"Seed must be non-negative, got {seed}")

        self._world_size = world_size
        self._state = seed
        self._states: List[int] = [seed]
        self._seen_states: Dict[int, int] = {seed: 0}
        self._population_history: List[int] = [bitgrid.population(seed, world_size)]
        self._stable = False
        self._cycle_length = 0
        self._cycle_start_generation = 0

    @property
    def state(self) -> int:
        """Current packed state."""
        return self._state

    @property
    def world_size(self) -> int:
        """Side length of the world."""
        return self._world_size

    @property
    def history(self) -> Tuple[int, ...]:
        """Every state produced so far, starting with the seed."""
        return tuple(self._states)

    @property
    def generation(self) -> int:
        """Current generation number."""
        return len(self._states) - 1

    @property
    def population(self) -> int:
        """Current number of living cells."""
        return bitgrid.population(self._state, self._world_size)

    @property
    def population_history(self) -> list:
        """Population of every state in history."""
        return list(self._population_history)

    @property
    def stable(self) -> bool:
        """Whether the world has reached a repeated state."""
        return self._stable

    @property
    def cycle_length(self) -> int:
        """Period of the repetition that made the world stable (0 if not stable)."""
        return self._cycle_length

    @property
    def cycle_start_generation(self) -> int:
        """Generation where the repeated state first appeared (0 if not stable)."""
        return self._cycle_start_generation

    def is_stable(self) -> bool:
        """Return whether the world has reached a repeated state."""
        return self._stable

    def advance(self) -> None:
        """Advance the simulation by one generation."""
        if self._stable:
            return

        next_state = self._next_state()

        if next_state in self._seen_states:
            first_occurrence = self._seen_states[next_state]
            self._stable = True
            self._cycle_length = self.generation + 1 - first_occurrence
            self._cycle_start_generation = first_occurrence
            return

        self._state = next_state
        self._states.append(next_state)
        self._seen_states[next_state] = self.generation
        self._population_history.append(bitgrid.population(next_state, self._world_size))

    step = advance

    def _next_state(self) -> int:
        """Apply Conway's rules against the current state without modifying it."""
        state = self._state
        size = self._world_size
        next_state = state

        for index in range(size * size):
            neighbor_count = bitgrid.count_neighbors(state, size, index)
            current = bitgrid.get_cell(state, size, index)

            if current == 1 and (
                neighbor_count < self.UNDERPOPULATION_THRESHOLD
                or neighbor_count > self.OVERPOPULATION_THRESHOLD
            ):
                next_state = bitgrid.set_cell(next_state, index, False)
            elif current == 0 and neighbor_count == self.REPRODUCTION_TRIGGER:
                next_state = bitgrid.set_cell(next_state, index, True)

        return next_state

    def run_until_stable(self, max_generations: int = 10000) -> Tuple[int, str]:
        """Run simulation until it becomes stable.

        Args:
            max_generations: Maximum number of advance calls

        Returns:
            Tuple of (final_generation, reason) where reason is one of:
            'stable', 'max_generations'
        """
        for _ in range(max_generations):
            if self._stable:
                break
            self.advance()

        if self._stable:
            return self.generation, "stable"
        return self.generation, "max_generations"

    def get_population_change_rate(self, window_size: int = 10) -> float:
        """Calculate recent population change rate.

        Args:
            window_size: Number of recent generations to consider

        Returns:
            Average population change per generation
        """
        recent_history = self._population_history[-window_size:]
        if len(recent_history) < 2:
            return 0.0

        changes = np.diff(recent_history)
        return float(np.mean(changes))

    def get_statistics(self) -> Dict:
        """Get simulation statistics.

        Returns:
            Dictionary with various statistics
        """
        return {
            "generation": self.generation,
            "population": self.population,
            "population_density": self.population / (self._world_size * self._world_size),
            "population_history": self.population_history,
            "population_change_rate": self.get_population_change_rate(),
            "stable": self._stable,
            "cycle_length": self._cycle_length,
            "cycle_start_generation": self._cycle_start_generation,
            "world_size": self._world_size,
            "state": self._state,
        }

    def to_array(self) -> np.ndarray:
        """Decode the current state into a ``[row, column]`` array."""
        return bitgrid.to_array(self._state, self._world_size)

    def to_text(self) -> str:
        """Render the world inside a box-drawing border.

        Living cells are drawn as a full block two characters wide and dead
        cells as two spaces, so the world looks roughly square in a terminal.
        """
        spacer = "─" * (self._world_size * 2)
        lines = [f"┌{spacer}┐"]
        for row in self.to_array():
            lines.append("|" + "".join("██" if cell else "  " for cell in row) + "|")
        lines.append(f"└{spacer}┘")
        return "\n".join(lines)

    def __eq__(self, other: object) -> bool:
        """Check if two worlds are equal."""
        if not isinstance(other, World):
            return False
        return (
            self._world_size == other._world_size
            and self._state == other._state
            and self._states == other._states
            and self._stable == other._stable
        )

    def __repr__(self) -> str:
        return (
            f"World(state={hex(self._state)}, world_size={self._world_size}, "
            f"generation={self.generation}, stable={self._stable})"
        )

    def __str__(self) -> str:
        return self.to_text()


def _is_int(value: object) -> bool:
    return isinstance(value, (int, np.integer)) and not isinstance(value, bool)
