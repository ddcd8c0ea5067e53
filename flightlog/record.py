import json
import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Optional

from flightlog.elapsed import ElapsedTime

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class FlightRecord:
    # Origin first, destination last
    waypoints: list[str]
    elapsed: timedelta
    notes: Optional[str] = None

    # Older log lines were written without a timestamp, so this is optional
    created: Optional[datetime] = None

    @property
    def route(self) -> str:
        return " -> ".join(self.waypoints)

    def to_dict(self) -> dict[str, Any]:
        """
        Returns the record as JSON-ready types. Fields without a value are left out
        entirely rather than written as null.
        """
        d: dict[str, Any] = {}
        if self.created is not None:
            d["created"] = self.created.isoformat()
        d["waypoints"] = list(self.waypoints)
        d["elapsed"] = int(self.elapsed.total_seconds())
        if self.notes is not None:
            d["notes"] = self.notes
        return d

    def to_json(self) -> str:
        return json.dumps(self.to_dict())

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> "FlightRecord":
        """
        Load a record from a parsed log line. Accepts lines with or without "created".
        """
        created = d.get("created")
        return cls(
            waypoints=list(d["waypoints"]),
            elapsed=timedelta(seconds=d["elapsed"]),
            notes=d.get("notes"),
            created=datetime.fromisoformat(created) if created else None,
        )


def build_record(
    origin: str,
    waypoints: list[str],
    elapsed: ElapsedTime,
    notes: str = "",
    created: Optional[datetime] = None,
) -> FlightRecord:
    """
    Put together a record for one flight.

    Args:
        origin: Where the flight started
        waypoints: Every stop after the origin, in order, ending at the destination
        elapsed: Flight time
        notes: Free text. Left out of the record if it's only whitespace.
        created: Timestamp for the record, defaults to the current UTC time
    """
    if not waypoints:
        raise ValueError("At least one waypoint besides the origin is required")

    stripped = notes.strip()
    record = FlightRecord(
        waypoints=[w.upper() for w in [origin, *waypoints]],
        elapsed=elapsed.to_timedelta(),
        notes=stripped or None,
        created=created or utc_now(),
    )
    logger.debug(f"Built record: {record}")
    return record
