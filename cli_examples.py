#!/usr/bin/env python3
"""
Examples of using the bitlife CLI for different scenarios.

Each example states the exit code it should produce: 0 when the world runs
until stable (or help is printed), 1 for invalid usage.
"""

import subprocess

EXIT_CODE_MEANINGS = {
    0: "success",
    1: "usage error",
}


def run_cli_command(args, expected_code=0):
    """Run a CLI command and report whether it exited with the expected code.

    Args:
        args: Arguments passed to the ``bitlife`` command
        expected_code: Exit code the example should produce

    Returns:
        True if the command exited with ``expected_code``
    """
    cmd = ["bitlife"] + args
    print(f"$ {' '.join(cmd)}")
    try:
        result = subprocess.run(cmd, capture_output=True, text=True, timeout=10)
    except subprocess.TimeoutExpired:
        print("Command timed out")
        return False
    except FileNotFoundError:
        print("bitlife is not installed (try `pip install -e .`)")
        return False

    if result.stdout:
        print(result.stdout.rstrip())
    if result.stderr:
        print(f"[stderr] {result.stderr.rstrip()}")

    meaning = EXIT_CODE_MEANINGS.get(result.returncode, "unexpected")
    print(f"Exit code: {result.returncode} ({meaning}), expected {expected_code}")
    return result.returncode == expected_code


def main():
    """Run various CLI examples."""
    print("bitlife CLI Examples")
    print("=" * 50)

    examples = [
        (["-s", "211", "-i", "0", "--no-clear"], 0,
         "3x3 block that dies out"),

        (["-s", "1632", "-w", "4", "-i", "0", "--no-clear", "--verbose"], 0,
         "Still life block (should be stable after one step)"),

        (["-s", "14336", "-w", "5", "-i", "0", "--no-clear"], 0,
         "Blinker (cycle length 2)"),

        (["--help"], 0,
         "Usage text"),

        (["-s", "0"], 1,
         "Zero seed is rejected"),

        (["-s", "23", "-w", "51"], 1,
         "World larger than 50x50 is rejected"),
    ]

    matched = 0
    for args, expected_code, description in examples:
        print(f"\nExample: {description}")
        print("-" * len(f"Example: {description}"))
        if run_cli_command(args, expected_code):
            matched += 1
        else:
            print("Unexpected result")

    print(f"\nSummary: {matched}/{len(examples)} examples exited as expected")


if __name__ == "__main__":
    main()
