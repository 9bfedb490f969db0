"""Access key entity representing a long-lived IAM credential."""

from dataclasses import dataclass, replace
from datetime import UTC, datetime
from typing import Self

from ..value_objects import KeyStatus


def _aware(value: datetime | None) -> datetime | None:
    """Treat naive datetimes as UTC."""
    if value is None or value.tzinfo:
        return value
    return value.replace(tzinfo=UTC)


@dataclass(frozen=True, slots=True)
class AccessKey:
    """An access key belonging to exactly one user."""

    key_id: str
    user_name: str
    status: KeyStatus
    created_at: datetime | None = None
    last_used_at: datetime | None = None
    last_used_service: str | None = None
    last_used_region: str | None = None
    usage_unknown: bool = False

    def __post_init__(self) -> None:
        """Normalize timestamps to timezone-aware values."""
        object.__setattr__(self, "created_at", _aware(self.created_at))
        object.__setattr__(self, "last_used_at", _aware(self.last_used_at))

    @property
    def is_active(self) -> bool:
        """Check if the key can currently authenticate."""
        return self.status is KeyStatus.ACTIVE

    @property
    def has_been_used(self) -> bool:
        """Check if a usage record exists for this key."""
        return self.last_used_at is not None

    def with_last_used(
        self,
        used_at: datetime | None,
        *,
        service: str | None = None,
        region: str | None = None,
    ) -> Self:
        """Return a copy enriched with its last-used record."""
        return replace(
            self,
            last_used_at=used_at,
            last_used_service=service,
            last_used_region=region,
            usage_unknown=False,
        )

    def with_unknown_usage(self) -> Self:
        """Return a copy marked as having an unreadable usage record."""
        return replace(self, last_used_at=None, usage_unknown=True)

    @classmethod
    def create(
        cls,
        *,
        key_id: str,
        user_name: str,
        status: str,
        created_at: datetime | None = None,
    ) -> Self:
        """Factory method to create an AccessKey from raw IAM data."""
        return cls(
            key_id=key_id,
            user_name=user_name,
            status=KeyStatus.from_aws(status),
            created_at=created_at,
        )
