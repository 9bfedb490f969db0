"""Staleness verdict value object."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..entities import AccessKey


@dataclass(frozen=True, slots=True)
class StalenessVerdict:
    """Outcome of classifying one user's access keys."""

    is_stale: bool
    most_recent_key: AccessKey
    most_recent_used_at: datetime | None

    @property
    def never_used(self) -> bool:
        """Check if none of the user's keys has a usage record."""
        return self.most_recent_used_at is None
