"""Command line entry point: cross-bridge --people <filename>."""

import argparse
import sys
from typing import List, Optional

from .bridge import Bridge
from .config import Config, ALL_SOLVERS, NAIVE_SOLVER, SOLVER_NAMES
from .data_loader import RosterLoadError
from .logger import configure_logging, generate_report
from .models.crossing import CrossingEvent
from .solvers import GreedySolver, resolve_solver_names
from .validator import InvalidInputError

PROG_NAME = "cross-bridge"

SEQUENCE_HEADINGS = {
    "naive": "Naive sequence of bridge crossings:",
    "optimal": "Optimal sequence of bridge crossings:",
}


def build_parser(config: Config) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG_NAME,
        description="Compute the fastest time for a group of people to cross a narrow bridge at night.",
    )
    parser.add_argument(
        "--people", required=True, metavar="FILENAME",
        help="YAML (or CSV) file listing each person's name and speed",
    )
    parser.add_argument(
        "--solver", choices=SOLVER_NAMES + [ALL_SOLVERS], default=config.DEFAULT_SOLVER,
        help="crossing method to run (default: %(default)s)",
    )
    parser.add_argument(
        "--report", metavar="PATH",
        help="also write a JSON and a text report next to PATH",
    )
    parser.add_argument(
        "--log-level", default=config.LOG_LEVEL,
        help="logging level (default: %(default)s)",
    )
    return parser


def print_event(event: CrossingEvent) -> None:
    print(event.describe())


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the bridge crossing comparison.

    Args:
        argv: Command line arguments without the program name

    Returns:
        Process exit code
    """
    config = Config()
    args = build_parser(config).parse_args(argv)
    configure_logging(args.log_level, config.LOG_FILE)

    print("Running...")

    bridge = Bridge(config=config)
    try:
        roster = bridge.read_people_file(args.people)
    except (FileNotFoundError, RosterLoadError, InvalidInputError) as e:
        print(f"{PROG_NAME}: ERROR: {e}", file=sys.stderr)
        return 1

    print()
    if len(roster) > 0:
        print("List of all people:")
        for i, person in enumerate(roster):
            print(f"Person {i} -  Name: {person.name}  Speed: {person.speed}")
    else:
        print("No people found in input file")

    results = []
    for name in resolve_solver_names(args.solver):
        if name == NAIVE_SOLVER and len(roster) >= 2:
            _, fastest = GreedySolver.escort(roster)
            print()
            print(f"Fastest overall person: {fastest}")

        print()
        print(SEQUENCE_HEADINGS[name])
        result = bridge.run(name, sink=print_event)[0]
        results.append(result)

        print()
        print(f"The {name} fastest total time is: {result.total}")

    if args.report:
        generate_report(results, args.report)

    return 0


def run() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
