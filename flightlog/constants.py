import os
import tempfile
from pathlib import Path

DATA_HOME = Path(
    os.environ.get("XDG_DATA_HOME") or Path(Path.home(), ".local", "share")
)
DATA_DIR = Path(DATA_HOME, "flightlog")
DEFAULT_LOG_FILE = Path(DATA_DIR, "flights.jsonl")

# Fixed name, so two flog runs waiting on an editor at once will share this file
DEFAULT_NOTE_FILE = Path(tempfile.gettempdir(), "flightlog-notes.txt")

DEFAULT_EDITOR = os.environ.get("VISUAL") or os.environ.get("EDITOR") or "hx"

NOTES_TEMPLATE = """\
# Write any notes about this flight below.
#
# Lines starting with '#' are ignored. Save an empty file (or leave only these
# comments) to log the flight without notes.
"""
