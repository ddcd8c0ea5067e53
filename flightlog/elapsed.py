"""
Elapsed flight time, written either as total minutes ("123") or as hours+minutes
("2+03")
"""

import re
from dataclasses import dataclass
from datetime import timedelta

from flightlog.errors import MalformedDuration

# An optional sign and some digits, nothing else. int() on its own would also take
# whitespace and underscores.
INT_RE = re.compile(r"[+-]?[0-9]+")


def parse_int(text: str) -> int:
    if not INT_RE.fullmatch(text):
        raise ValueError(f"invalid integer: '{text}'")
    return int(text)


@dataclass(frozen=True)
class ElapsedTime:
    hours: int
    minutes: int

    def __str__(self) -> str:
        return f"{self.hours}+{self.minutes}"

    @classmethod
    def parse(cls, text: str) -> "ElapsedTime":
        """
        Parse an elapsed time.

        "H+M" is taken as-is, so "2+75" is 2 hours and 75 minutes. The minutes are only
        folded into hours when converting to a duration.

        A plain number is total minutes. Negative totals truncate towards zero, so
        "-90" is -1 hours and -30 minutes.
        """
        try:
            if "+" in text:
                hours, minutes = text.split("+", 1)
                return cls(parse_int(hours), parse_int(minutes))

            total = parse_int(text)
        except ValueError as e:
            raise MalformedDuration(f"Malformed elapsed time '{text}'") from e

        hours, minutes = divmod(abs(total), 60)
        if total < 0:
            hours, minutes = -hours, -minutes
        return cls(hours, minutes)

    @property
    def total_seconds(self) -> int:
        return self.hours * 3600 + self.minutes * 60

    def to_timedelta(self) -> timedelta:
        return timedelta(seconds=self.total_seconds)
