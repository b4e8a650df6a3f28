"""Tests for the World class."""

import pytest
from bitlife.core import bitgrid
from bitlife.core.world import World
from bitlife.core.errors import SizeTooLarge, SizeTooSmall, WorldConstructionError


class TestWorldConstruction:
    """Test cases for creating a World."""

    def test_initialization(self):
        """Test world initialization."""
        world = World(0b010010001, 3)

        assert world.state == 0b010010001
        assert world.world_size == 3
        assert world.history == (0b010010001,)
        assert world.generation == 0
        assert world.population == 3
        assert not world.is_stable()
        assert not world.stable
        assert world.cycle_length == 0

    def test_default_world_size(self):
        """Test that the world size defaults to 3."""
        assert World(1).world_size == 3

    def test_size_too_small(self):
        """Test that a zero side length is rejected."""
        with pytest.raises(SizeTooSmall, match="greater than 0"):
            World(0, 0)

        with pytest.raises(SizeTooSmall):
            World(0, -4)

    def test_size_too_large(self):
        """Test that a side length one above the maximum is rejected."""
        with pytest.raises(SizeTooLarge, match="exceeds maximum"):
            World(0, World.MAX_WORLD_SIZE + 1)

    def test_size_at_maximum(self):
        """Test that the maximum side length is accepted."""
        world = World(1, World.MAX_WORLD_SIZE)
        assert world.world_size == 50

    def test_construction_errors_are_value_errors(self):
        """Test the error hierarchy."""
        with pytest.raises(WorldConstructionError):
            World(0, 0)

        with pytest.raises(ValueError):
            World(0, 51)

    def test_negative_seed(self):
        """Test that a negative seed is rejected."""
        with pytest.raises(ValueError, match="non-negative"):
            World(-1, 3)

    def test_non_integer_arguments(self):
        """Test that non-integer seeds and sizes are rejected."""
        with pytest.raises(TypeError):
            World("5", 3)

        with pytest.raises(TypeError):
            World(5, 3.0)

        with pytest.raises(TypeError):
            World(True, 3)

    def test_oversized_seed_is_accepted(self):
        """Test that bits past size squared are kept and not counted as population."""
        seed = (1 << 20) | 0b1
        world = World(seed, 2)

        assert world.state == seed
        assert world.population == 1

    def test_bottom_left_cell_reads_bits_past_size_squared(self):
        """Test that bits size squared and size squared plus one act as lower neighbors."""
        # Bit 7 is in the world; bits 9 and 10 lie past the 3x3 grid.
        seed = (1 << 7) | (1 << 9) | (1 << 10)
        world = World(seed, 3)

        assert bitgrid.count_neighbors(seed, 3, 6) == 3

        world.advance()
        assert bitgrid.get_cell(world.state, 3, 6) == 1
        assert world.state & ((1 << 9) | (1 << 10)) == (1 << 9) | (1 << 10)


class TestWorldAdvance:
    """Test cases for advancing a World."""

    def test_advance_sequence(self):
        """Test a 3x3 world stepping to extinction.

        110  ->  110  -> 010 -> 000 -> 000
        010      001     001    011    000
        110      110     010    000    000
        """
        world = World(0b011010011, 3)

        world.advance()
        assert world.state == 0b011100011

        world.advance()
        assert world.state == 0b010100010

        world.advance()
        assert world.state == 0b000110000

        world.advance()
        assert world.state == 0
        assert not world.is_stable()

        world.advance()
        assert world.state == 0
        assert world.is_stable()

        assert world.history == (
            0b011010011,
            0b011100011,
            0b010100010,
            0b000110000,
            0,
        )
        assert world.generation == 4
        assert world.cycle_length == 1
        assert world.cycle_start_generation == 4

    def test_still_life_block(self):
        """Test that a block becomes stable after one advance."""
        seed = bitgrid.from_rows(["0000", "0110", "0110", "0000"])
        world = World(seed, 4)

        world.advance()

        assert world.is_stable()
        assert world.state == seed
        assert world.history == (seed,)
        assert world.generation == 0
        assert world.cycle_length == 1

    def test_blinker_cycle(self):
        """Test that a blinker is detected as a period 2 cycle."""
        vertical = bitgrid.from_rows(["00000", "00100", "00100", "00100", "00000"])
        horizontal = bitgrid.from_rows(["00000", "00000", "01110", "00000", "00000"])
        world = World(vertical, 5)

        world.advance()
        assert world.state == horizontal
        assert not world.is_stable()

        world.advance()
        assert world.is_stable()
        assert world.state == horizontal
        assert world.cycle_length == 2
        assert world.cycle_start_generation == 0

    def test_advance_is_noop_once_stable(self):
        """Test that advance does nothing after stability is reached."""
        world = World(0b011010011, 3)
        world.run_until_stable()
        assert world.is_stable()

        state = world.state
        history = world.history
        for _ in range(5):
            world.advance()
            assert world.is_stable()
            assert world.state == state
            assert world.history == history

    def test_step_alias(self):
        """Test that step behaves like advance."""
        world = World(0b011010011, 3)
        world.step()
        assert world.state == 0b011100011

    def test_determinism(self):
        """Test that identical worlds evolve identically."""
        seed = 0b1011_0110_0011_1001_0110
        first = World(seed, 5)
        second = World(seed, 5)

        for _ in range(7):
            first.advance()
            second.advance()

            assert first.state == second.state
            assert first.history == second.history
            assert first.is_stable() == second.is_stable()

        assert first == second

    def test_single_cell_dies(self):
        """Test that a lone cell dies and the world then settles."""
        world = World(0b000010000, 3)

        world.advance()
        assert world.state == 0
        assert world.population == 0

        world.advance()
        assert world.is_stable()

    def test_large_world(self):
        """Test a block in the corner of the largest world."""
        size = World.MAX_WORLD_SIZE
        seed = 0
        for index in (size + 1, size + 2, 2 * size + 1, 2 * size + 2):
            seed = bitgrid.set_cell(seed, index, True)
        world = World(seed, size)

        world.advance()
        assert world.is_stable()
        assert world.state == seed


class TestWorldHelpers:
    """Test cases for run_until_stable, statistics and rendering."""

    def test_run_until_stable(self):
        """Test running to stability."""
        world = World(0b011010011, 3)
        generation, reason = world.run_until_stable()

        assert reason == "stable"
        assert generation == 4

    def test_run_until_stable_max_generations(self):
        """Test that the generation limit stops the run."""
        world = World(0b011010011, 3)
        generation, reason = world.run_until_stable(max_generations=2)

        assert reason == "max_generations"
        assert generation == 2
        assert not world.is_stable()

    def test_population_history(self):
        """Test population tracking across generations."""
        world = World(0b011010011, 3)
        world.run_until_stable()

        assert world.population_history == [5, 5, 3, 2, 0]

    def test_population_change_rate(self):
        """Test the average population change."""
        world = World(0b011010011, 3)
        assert world.get_population_change_rate() == 0.0

        world.run_until_stable()
        assert world.get_population_change_rate() == pytest.approx(-1.25)

    def test_get_statistics(self):
        """Test statistics contents."""
        world = World(0b010010001, 3)
        stats = world.get_statistics()

        assert stats["generation"] == 0
        assert stats["population"] == 3
        assert stats["population_density"] == pytest.approx(3 / 9)
        assert stats["stable"] is False
        assert stats["world_size"] == 3
        assert stats["state"] == 0b010010001

    def test_to_array(self):
        """Test decoding the current state."""
        world = World(0b010010001, 3)
        assert world.to_array().tolist() == [[1, 0, 0], [0, 1, 0], [0, 1, 0]]

    def test_to_text(self):
        """Test the bordered rendering."""
        world = World(0b010010001, 3)
        expected = "\n".join(
            [
                "┌──────┐",
                "|██    |",
                "|  ██  |",
                "|  ██  |",
                "└──────┘",
            ]
        )

        assert world.to_text() == expected
        assert str(world) == expected

    def test_to_text_empty_world(self):
        """Test rendering a dead 1x1 world."""
        assert World(0, 1).to_text() == "┌──┐\n|  |\n└──┘"

    def test_to_text_does_not_mutate(self):
        """Test that rendering leaves the world untouched."""
        world = World(0b011010011, 3)
        world.to_text()
        assert world.state == 0b011010011
        assert world.generation == 0

    def test_equality(self):
        """Test world comparison."""
        assert World(5, 3) == World(5, 3)
        assert World(5, 3) != World(5, 4)
        assert World(5, 3) != "World"

    def test_repr(self):
        """Test repr contents."""
        assert repr(World(5, 3)) == "World(state=0x5, world_size=3, generation=0, stable=False)"

    def test_repr_huge_seed(self):
        """Test repr of a seed too long for decimal string conversion."""
        text = repr(World(1 << 20000, 3))

        assert text.startswith("World(state=0x1")
        assert text.endswith("world_size=3, generation=0, stable=False)")
