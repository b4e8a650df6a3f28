"""Bit-packed grid encoding for cellular automata.

A square world of side ``size`` is stored as a single non-negative integer.
Bit ``i`` holds the cell at row ``i // size`` and column ``i % size``, so the
whole board is addressed through one flattened row-major index.
"""

from typing import List, NamedTuple, Sequence
import numpy as np

ALIVE_CHARS = "1#*O"
DEAD_CHARS = "0. "


class EdgeFlags(NamedTuple):
    """Boundary position of a flattened index."""

    first_column: bool
    last_column: bool
    first_row: bool
    last_row: bool


def get_cell(state: int, size: int, index: int) -> int:
    """Get the state of a cell.

    Args:
        state: Packed world state
        size: Side length of the world
        index: Flattened row-major index, ``0 <= index < size ** 2``

    Returns:
        1 if the cell is alive, 0 if dead
    """
    return (state >> index) & 1


def set_cell(state: int, index: int, alive: bool) -> int:
    """Return a copy of ``state`` with the bit at ``index`` set or cleared."""
    if alive:
        return state | (1 << index)
    return state & ~(1 << index)


def edge_flags(size: int, index: int) -> EdgeFlags:
    """Compute which grid borders a flattened index touches.

    The last-row test is strict, so the first cell of the bottom row is not
    flagged and still looks one row further down. Those bits lie past
    ``size ** 2`` and are never set by ``advance``.
    """
    return EdgeFlags(
        first_column=index % size == 0,
        last_column=(index + 1) % size == 0,
        first_row=index < size,
        last_row=index > size * size - size,
    )


def count_neighbors(state: int, size: int, index: int) -> int:
    """Count living neighbors of a cell.

    Args:
        state: Packed world state
        size: Side length of the world
        index: Flattened row-major index of the cell

    Returns:
        Number of living neighbors (0-8)
    """
    flags = edge_flags(size, index)
    count = 0

    if not flags.first_column:
        count += get_cell(state, size, index - 1)
    if not flags.last_column:
        count += get_cell(state, size, index + 1)

    if not flags.first_row:
        count += get_cell(state, size, index - size)
        if not flags.first_column:
            count += get_cell(state, size, index - size - 1)
        if not flags.last_column:
            count += get_cell(state, size, index - size + 1)

    if not flags.last_row:
        count += get_cell(state, size, index + size)
        if not flags.first_column:
            count += get_cell(state, size, index + size - 1)
        if not flags.last_column:
            count += get_cell(state, size, index + size + 1)

    return count


def mask(size: int) -> int:
    """Bit mask covering every addressable cell of a ``size`` x ``size`` world."""
    return (1 << (size * size)) - 1


def population(state: int, size: int) -> int:
    """Get the number of living cells among the addressable bits."""
    return bin(state & mask(size)).count("1")


def to_array(state: int, size: int) -> np.ndarray:
    """Decode a packed state into a 2D array.

    Returns:
        ``int8`` array of shape ``(size, size)`` indexed ``[row, column]``
    """
    cells = np.zeros(size * size, dtype=np.int8)
    for index in range(size * size):
        cells[index] = get_cell(state, size, index)
    return cells.reshape(size, size)


def from_array(cells: Sequence) -> int:
    """Encode a square 2D array-like of cell states.

    Args:
        cells: Nested rows indexed ``[row][column]``; any truthy value is alive

    Returns:
        Packed state

    Raises:
        ValueError: If the data is not a square 2D array
    """
    arr = np.asarray(cells)
    if arr.ndim != 2 or arr.shape[0] != arr.shape[1]:
        raise ValueError(f"Cell data must be a square 2D array, got shape {arr.shape}")

    state = 0
    for index, alive in enumerate(arr.reshape(-1)):
        if alive:
            state |= 1 << index
    return state


def from_rows(rows: List[str]) -> int:
    """Encode a list of row strings such as ``["110", "010", "110"]``.

    Raises:
        ValueError: If rows are ragged, not square, or contain unknown characters
    """
    size = len(rows)
    cells = []
    for row_number, row in enumerate(rows):
        if len(row) != size:
            raise ValueError(
                f"Row {row_number} has {len(row)} cells, expected {size} for a square world"
            )
        parsed = []
        for char in row:
            if char in ALIVE_CHARS:
                parsed.append(1)
            elif char in DEAD_CHARS:
                parsed.append(0)
            else:
                raise ValueError(f"Unknown cell character {char!r} in row {row_number}")
        cells.append(parsed)

    return from_array(cells)


def to_rows(state: int, size: int) -> List[str]:
    """Decode a packed state into ``"0"``/``"1"`` row strings."""
    return ["".join(str(cell) for cell in row) for row in to_array(state, size)]
