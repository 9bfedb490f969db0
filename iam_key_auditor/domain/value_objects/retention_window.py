"""Retention window value object."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True, slots=True)
class RetentionWindow:
    """How long an access key may go unused before it counts as stale."""

    years: int = 1

    def __post_init__(self) -> None:
        """Validate the window is positive."""
        if self.years <= 0:
            msg = f"Retention window must be at least one year, got {self.years}"
            raise ValueError(msg)

    def cutoff(self, now: datetime) -> datetime:
        """Return the instant `years` calendar years before `now`."""
        try:
            return now.replace(year=now.year - self.years)
        except ValueError:
            # Feb 29 in a non-leap target year
            return now.replace(year=now.year - self.years, day=28)
