"""Emergency dispatch helpers and the command-line entry point."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from collections.abc import Iterable, Iterator, Sequence

DEFAULT_VEHICLES = ("Ambulance", "Fire Truck", "Police Van")

EMERGENCY_CODES = {
    101: "Ambulance - Medical Emergency",
    102: "Police Department",
    103: "Fire Brigade",
    104: "Disaster Response Team",
}

UNIT_STATUS = {
    "AMB101": "Free",
    "FIRE03": "Busy",
    "POL12": "On Duty",
}

INVALID_CODE_MESSAGE = "Invalid Code!"


class InvalidCodeError(KeyError):
    """Raised for an emergency code that has no service assigned."""


def dispatch_order(vehicles: Iterable[str]) -> Iterator[str]:
    """Yield vehicles in the order they joined the dispatch queue."""
    queue = deque(vehicles)
    while queue:
        yield queue.popleft()


def describe_code(code: int) -> str:
    """Return the service assigned to an emergency code."""
    try:
        return EMERGENCY_CODES[code]
    except KeyError:
        raise InvalidCodeError(code) from None


def multiples_of_ten(n: int) -> list[int]:
    """Return the first ``n`` multiples of ten, starting at zero."""
    if n < 0:
        raise ValueError(f"size must not be negative, got {n}")
    return [i * 10 for i in range(n)]


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="algokit", description="Emergency dispatch tools.")
    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser("queue", help="print the default vehicles in dispatch order")
    lookup = commands.add_parser("lookup", help="describe an emergency code")
    lookup.add_argument("code", nargs="?", type=int)
    status = commands.add_parser("status", help="show a unit's status")
    status.add_argument("unit")
    multiples = commands.add_parser("multiples", help="print multiples of ten")
    multiples.add_argument("size", nargs="?", type=int)
    return parser


def _read_int(prompt: str) -> int | None:
    try:
        return int(input(prompt).strip())
    except (ValueError, EOFError):
        return None


def main(argv: Sequence[str] | None = None) -> int:
    """Run the dispatch command line and return an exit status."""
    args = _build_parser().parse_args(argv)

    if args.command == "queue":
        for vehicle in dispatch_order(DEFAULT_VEHICLES):
            print(vehicle)
        return 0

    if args.command == "lookup":
        code = args.code if args.code is not None else _read_int("Enter emergency code: ")
        try:
            print(describe_code(code))
        except InvalidCodeError:
            print(INVALID_CODE_MESSAGE)
        return 0

    if args.command == "status":
        try:
            print(UNIT_STATUS[args.unit])
        except KeyError:
            print(f"unknown unit: {args.unit}", file=sys.stderr)
            return 1
        return 0

    size = args.size if args.size is not None else _read_int("Enter size: ")
    if size is None:
        print("size must be an integer", file=sys.stderr)
        return 1
    try:
        values = multiples_of_ten(size)
    except ValueError as error:
        print(error, file=sys.stderr)
        return 1
    print(" ".join(map(str, values)))
    return 0


if __name__ == "__main__":
    sys.exit(main())