import logging
from argparse import ArgumentParser

from flightlog.constants import DEFAULT_EDITOR, DEFAULT_LOG_FILE
from flightlog.version import VERSION


def add_common_args(parser: ArgumentParser) -> None:
    parser.add_argument(
        "-v",
        help="Verbose mode",
        action="store_true",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    parser.add_argument(
        "--log-file",
        help=f"Flight log to append to, default: {DEFAULT_LOG_FILE}",
        default=DEFAULT_LOG_FILE,
    )
    parser.add_argument(
        "--editor",
        help=f"Editor to write notes with, default: {DEFAULT_EDITOR}",
        default=DEFAULT_EDITOR,
    )


def setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(name)s: %(levelname)s: %(message)s",
    )
