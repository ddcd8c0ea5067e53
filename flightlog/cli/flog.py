"""
Log a flight.

Appends one line of JSON per flight to the flight log. Without --notes, your editor is
opened so you can write notes for the flight.
"""

import sys
from argparse import ArgumentParser, Namespace
from pathlib import Path
from typing import Optional, Sequence

from colorama import Fore, Style

from flightlog.cli.common import add_common_args, setup_logging
from flightlog.elapsed import ElapsedTime
from flightlog.errors import FlightLogError
from flightlog.notes import Editor, NotesAcquirer, SubprocessEditor
from flightlog.record import FlightRecord, build_record
from flightlog.store import FlightLog


def main(argv: Optional[Sequence[str]] = None, editor: Optional[Editor] = None) -> None:
    args = parse_args(argv)
    setup_logging(args.v)

    try:
        if editor is None:
            editor = SubprocessEditor(args.editor)
        run(args, editor)
    except FlightLogError as e:
        if args.v:
            raise

        msg = str(e)
        if e.__cause__ is not None:
            msg += f": {e.__cause__}"
        print(f"{Fore.RED}error: {msg}{Style.RESET_ALL}", file=sys.stderr)
        sys.exit(1)


def parse_args(argv: Optional[Sequence[str]] = None) -> Namespace:
    parser = ArgumentParser(description=__doc__)
    add_common_args(parser)

    parser.add_argument(
        "-n",
        "--notes",
        help="Notes for the flight. Skips opening an editor, even if empty.",
    )
    parser.add_argument("origin", help="Where the flight started")
    parser.add_argument(
        "waypoints",
        nargs="+",
        help=(
            "Every waypoint after the origin, in order. The last one is the "
            "destination."
        ),
    )
    parser.add_argument(
        "elapsed",
        help='Flight time, in minutes or hours+minutes, e.g. "123" or "2+03"',
    )
    return parser.parse_args(argv)


def run(args: Namespace, editor: Editor) -> FlightRecord:
    # Parse before the editor is opened
    elapsed = ElapsedTime.parse(args.elapsed)
    notes = NotesAcquirer(editor).acquire(args.notes)
    record = build_record(args.origin, args.waypoints, elapsed, notes)
    FlightLog(Path(args.log_file)).append(record)
    print(f"Logged {record.route} ({elapsed})")
    return record


if __name__ == "__main__":
    main()
