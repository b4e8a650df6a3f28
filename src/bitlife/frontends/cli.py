"""Command-line interface for the bit-packed Game of Life."""

import argparse
import sys
import time
from typing import List, NoReturn, Optional, Tuple

from ..core.world import World
from ..core.errors import WorldConstructionError

CLEAR_SCREEN = "\x1b[2J\x1b[1;1H"
USAGE_ERROR = 1


class UsageArgumentParser(argparse.ArgumentParser):
    """Argument parser that reports invalid usage with exit code 1."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(USAGE_ERROR, f"{self.prog}: error: {message}\n")


class CLIWorld:
    """Command-line interface for running bit-packed Game of Life worlds."""

    def run_simulation(
        self,
        seed: int,
        world_size: int,
        interval_ms: int = 500,
        max_generations: Optional[int] = None,
        clear_screen: bool = True,
        verbose: bool = False,
    ) -> Tuple[int, str, dict]:
        """Animate a world in the terminal until it becomes stable.

        Args:
            seed: Initial packed state
            world_size: Side length of the world
            interval_ms: Delay between frames in milliseconds
            max_generations: Optional bound on the number of advance calls
            clear_screen: Clear the terminal before each frame
            verbose: Print progress updates

        Returns:
            Tuple of (final_generation, finish_reason, statistics)

        Raises:
            WorldConstructionError: If world_size is out of range
        """
        world = World(seed, world_size)

        if verbose:
            print(f"Initializing {world_size}x{world_size} world from seed {seed}")
            print(f"Initial population: {world.population} cells")

        start_time = time.time()
        steps = 0

        while not world.is_stable():
            if max_generations is not None and steps >= max_generations:
                break

            if clear_screen:
                print(CLEAR_SCREEN, end="")
            print(world)

            world.advance()
            steps += 1

            if verbose and not clear_screen:
                print(f"Generation {world.generation}: population {world.population}")

            if interval_ms > 0:
                time.sleep(interval_ms / 1000)

        duration = time.time() - start_time
        reason = "stable" if world.is_stable() else "max_generations"

        stats = world.get_statistics()
        stats["duration_seconds"] = duration
        stats["advance_calls"] = steps

        return world.generation, reason, stats


def create_parser() -> UsageArgumentParser:
    """Create command-line argument parser.

    Returns:
        Configured ArgumentParser
    """
    parser = UsageArgumentParser(
        prog="bitlife",
        description="Conway's Game of Life simulation",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Create a 4 x 4 world with the starting value of 23
  bitlife -s 23 -w 4

  # Run a blinker-like block quickly, without clearing the terminal
  bitlife --seed 211 --interval 100 --no-clear

  # Stop after 20 generations even if the world never settles
  bitlife -s 1234567 -w 5 --max-generations 20 --verbose
        """,
    )

    parser.add_argument(
        "-s",
        "--seed",
        type=int,
        required=True,
        help="REQUIRED, the initial value of the world, written as a decimal number",
    )

    parser.add_argument(
        "-w",
        "--world-size",
        type=int,
        default=3,
        help=f"Side length of the square world, 1-{World.MAX_WORLD_SIZE} (default: 3)",
    )

    parser.add_argument(
        "-i",
        "--interval",
        type=int,
        default=500,
        help="Delay between frames in milliseconds (default: 500)",
    )

    parser.add_argument(
        "-m",
        "--max-generations",
        type=int,
        help="Stop after this many generations even if the world is not stable",
    )

    parser.add_argument(
        "--no-clear",
        action="store_true",
        help="Do not clear the terminal between frames",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Print detailed progress information",
    )

    return parser


def validate_args(args: argparse.Namespace) -> List[str]:
    """Validate command-line arguments.

    Args:
        args: Parsed arguments

    Returns:
        List of error messages, empty if arguments are valid
    """
    errors = []

    if args.seed <= 0:
        errors.append("Seed must be a positive number")

    if args.world_size < 1:
        errors.append("World size must be greater than 0")
    elif args.world_size > World.MAX_WORLD_SIZE:
        errors.append(f"World size exceeds maximum allowed ({World.MAX_WORLD_SIZE})")

    if args.interval < 0:
        errors.append("Interval must be non-negative")

    if args.max_generations is not None and args.max_generations <= 0:
        errors.append("Max generations must be positive")

    return errors


def format_finish_reason(reason: str, stats: dict) -> str:
    """Format the simulation finish reason for display."""
    if reason == "stable":
        if stats.get("population", 0) == 0:
            return "World is stable (all cells dead)"
        if stats.get("cycle_length", 0) == 1:
            return "World is stable (still life)"
        return f"World is stable (cycle length {stats['cycle_length']})"
    if reason == "max_generations":
        return f"Stopped after {stats.get('advance_calls', 0)} generations without becoming stable"
    return reason


def print_results(final_generation: int, reason: str, stats: dict, verbose: bool) -> None:
    """Print simulation results.

    Args:
        final_generation: Generation the world finished at
        reason: Why the simulation stopped
        stats: Statistics dictionary
        verbose: Whether to print detailed statistics
    """
    if reason == "stable":
        print("World is stable")
    else:
        print(format_finish_reason(reason, stats))

    if verbose:
        print(f"\nSimulation completed after {final_generation} generations")
        print(f"Finish reason: {format_finish_reason(reason, stats)}")
        print("\nDetailed Statistics:")
        print(f"  World size: {stats['world_size']}x{stats['world_size']}")
        print(f"  Final population: {stats['population']}")
        print(f"  Population density: {stats['population_density']:.2%}")
        print(f"  Population change rate: {stats['population_change_rate']:.2f}")
        if reason == "stable":
            print(f"  Cycle started at generation: {stats['cycle_start_generation']}")
        print(f"  Duration: {stats['duration_seconds']:.3f} seconds")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI interface.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    errors = validate_args(args)
    if errors:
        parser.print_usage(sys.stderr)
        print("Error: Invalid arguments:", file=sys.stderr)
        for error in errors:
            print(f"  - {error}", file=sys.stderr)
        return USAGE_ERROR

    cli = CLIWorld()

    try:
        final_generation, reason, stats = cli.run_simulation(
            seed=args.seed,
            world_size=args.world_size,
            interval_ms=args.interval,
            max_generations=args.max_generations,
            clear_screen=not args.no_clear,
            verbose=args.verbose,
        )
    except WorldConstructionError as e:
        parser.print_usage(sys.stderr)
        print(f"Error: {e}", file=sys.stderr)
        return USAGE_ERROR
    except KeyboardInterrupt:
        print("\nSimulation interrupted by user")
        return 1

    print_results(final_generation, reason, stats, args.verbose)
    return 0


if __name__ == "__main__":
    sys.exit(main())
