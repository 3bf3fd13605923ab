"""Whole seconds since the Unix epoch."""

import time
from dataclasses import dataclass
from datetime import timedelta


@dataclass(frozen=True, order=True)
class Unixtime:
    """A count of seconds since 1970-01-01 UTC, ignoring leap seconds."""

    seconds: int

    @classmethod
    def now(cls):
        """The current time from the system clock."""
        elapsed = time.time()
        if elapsed < 0:
            raise OSError("system clock is set before the Unix epoch")
        return cls(int(elapsed))

    def __add__(self, other):
        if isinstance(other, timedelta):
            return Unixtime(self.seconds + int(other.total_seconds()))
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, timedelta):
            return Unixtime(self.seconds - int(other.total_seconds()))
        if isinstance(other, Unixtime):
            return timedelta(seconds=abs(self.seconds - other.seconds))
        return NotImplemented

    def __int__(self):
        return self.seconds

    def __str__(self):
        return str(self.seconds)