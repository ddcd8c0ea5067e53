"""
Append-only flight log, stored as JSON Lines: one record per line, never rewritten
"""

import logging
from dataclasses import dataclass
from pathlib import Path

from flightlog.constants import DEFAULT_LOG_FILE
from flightlog.errors import StoreIo
from flightlog.record import FlightRecord

logger = logging.getLogger(__name__)


@dataclass
class FlightLog:
    path: Path

    @classmethod
    def default(cls) -> "FlightLog":
        return cls(DEFAULT_LOG_FILE)

    def append(self, record: FlightRecord) -> None:
        """
        Add a record to the end of the log, creating the log and its directory if
        needed. Nothing already in the file is read or touched.
        """
        # Serialize before opening anything so a bad record can't leave half a line
        line = record.to_json() + "\n"

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with self.path.open("a", encoding="utf-8") as f:
                f.write(line)
        except OSError as e:
            raise StoreIo(f"Could not write to flight log {self.path}") from e

        logger.debug(f"Appended record to {self.path}")
