"""
Print a roster sorted by surname, one "<last>, <first>" per line.
Run: python -m roster [FULL NAME ...] [--json PATH|-] [--numbers]
"""

import argparse
import logging
import sys
from pathlib import Path

from pydantic import BaseModel, TypeAdapter, ValidationError

from roster.application import RosterService
from roster.config import load_settings
from roster.infrastructure import InMemoryPersonRepository

logger = logging.getLogger(__name__)

EXIT_INVALID_INPUT = 2

SAMPLE_CREW = [
    ("Arnold", "Rimmer"),
    ("Kristine", "Kochanski"),
    ("David", "Lister"),
]

SAMPLE_NUMBERS = [1, 5, 3, 6, 2, 9]


class PersonIn(BaseModel):
    first_name: str
    last_name: str


_people_adapter = TypeAdapter(list[PersonIn])


def _first_last(name: str) -> tuple[str, str]:
    """Split name into first_name and last_name (first word vs rest)."""
    parts = (name or "").strip().split(None, 1)
    if not parts:
        return "", ""
    if len(parts) == 1:
        return parts[0], ""
    return parts[0], parts[1]


def _read_json_people(source: str) -> list[tuple[str, str]]:
    if source == "-":
        raw = sys.stdin.buffer.read()
    else:
        raw = Path(source).read_bytes()
    people = _people_adapter.validate_json(raw)
    return [(p.first_name, p.last_name) for p in people]


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="roster", description="List people sorted by surname."
    )
    parser.add_argument("names", nargs="*", help='full names, e.g. "David Lister"')
    parser.add_argument(
        "--json",
        metavar="PATH",
        help='JSON list of {"first_name", "last_name"} objects; "-" reads stdin',
    )
    parser.add_argument(
        "--numbers", action="store_true", help="also print the sorted sample integers"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    settings = load_settings()
    logging.basicConfig(format=settings.log_format, level=settings.log_level)
    args = _build_parser().parse_args(argv)

    pairs = [_first_last(n) for n in args.names]
    if args.json is not None:
        try:
            pairs.extend(_read_json_people(args.json))
        except OSError as e:
            logger.error("Cannot read %s: %s", args.json, e)
            return EXIT_INVALID_INPUT
        except (ValidationError, UnicodeDecodeError) as e:
            logger.error("Invalid people JSON: %s", e)
            return EXIT_INVALID_INPUT
    if not args.names and args.json is None:
        pairs = list(SAMPLE_CREW)

    service = RosterService(InMemoryPersonRepository())
    for first_name, last_name in pairs:
        service.add_person(first_name, last_name)
    logger.info("Listing %d people by surname", len(pairs))

    for line in service.display_lines():
        print(line)
    if args.numbers:
        print(" ".join(str(n) for n in sorted(SAMPLE_NUMBERS)))
    return 0


if __name__ == "__main__":
    sys.exit(main())
