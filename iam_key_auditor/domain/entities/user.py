"""User entity representing an IAM user."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True, slots=True)
class User:
    """An IAM user as returned by the directory."""

    name: str
    user_id: str | None = None
    arn: str | None = None
    created_at: datetime | None = None

    def __str__(self) -> str:
        return self.name
