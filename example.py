#!/usr/bin/env python3
"""
Example usage of the bitlife package.
"""

from bitlife import World, bitgrid


def main():
    """Demonstrate programmatic usage of the bitlife package."""
    # A glider in the top-left corner of a 6x6 world
    seed = bitgrid.from_rows(
        [
            ".#....",
            "..#...",
            "###...",
            "......",
            "......",
            "......",
        ]
    )
    world = World(seed, 6)

    print(f"Seed: {seed}")
    print("Initial state:")
    print(world)
    print(f"Population: {world.population}")
    print()

    # Run simulation for at most 30 generations
    for _ in range(30):
        world.advance()

        if world.is_stable():
            print(f"Stable! Cycle length: {world.cycle_length}")
            break

        print(f"Generation {world.generation}:")
        print(world)
        print(f"Population: {world.population}")
        print()

    # Show statistics
    stats = world.get_statistics()
    print("Final statistics:")
    for key, value in stats.items():
        print(f"  {key}: {value}")


if __name__ == "__main__":
    main()
