"""Domain service for deciding whether a user's access keys are stale."""

from collections.abc import Iterable
from datetime import datetime

from ..entities import AccessKey
from ..exceptions import EmptyCredentialSetError
from ..value_objects import RetentionWindow, StalenessVerdict


def _usage_order(key: AccessKey) -> tuple[bool, datetime]:
    """Sort key placing never-used keys before any used key."""
    if key.last_used_at is None:
        return (False, datetime.min)
    return (True, key.last_used_at)


def most_recently_used(access_keys: Iterable[AccessKey]) -> AccessKey:
    """
    Pick the access key with the latest usage record.

    Never-used keys rank below used ones. Equal timestamps keep input
    order, so the last of them wins.

    Raises:
        EmptyCredentialSetError: If there are no keys.
    """
    ordered = sorted(access_keys, key=_usage_order)
    if not ordered:
        msg = "Cannot determine the most recently used key of an empty set"
        raise EmptyCredentialSetError(msg)
    return ordered[-1]


def classify(
    access_keys: Iterable[AccessKey],
    now: datetime,
    retention_window: RetentionWindow,
) -> StalenessVerdict:
    """
    Classify one user's access keys.

    The user is stale when its most recently used key was never used, or
    was last used strictly before the retention cutoff.

    Args:
        access_keys: The user's keys, enriched with last-used timestamps.
        now: Reference instant captured at the start of the run.
        retention_window: How long a key may sit unused.

    Returns:
        StalenessVerdict for the user.

    Raises:
        EmptyCredentialSetError: If `access_keys` is empty.
    """
    latest = most_recently_used(access_keys)
    used_at = latest.last_used_at
    is_stale = used_at is None or used_at < retention_window.cutoff(now)
    return StalenessVerdict(
        is_stale=is_stale,
        most_recent_key=latest,
        most_recent_used_at=used_at,
    )


class StalenessClassifier:
    """Domain service bound to a retention window."""

    def __init__(self, retention_window: RetentionWindow) -> None:
        """Initialize classifier with the retention window."""
        self._retention_window = retention_window

    @property
    def retention_window(self) -> RetentionWindow:
        return self._retention_window

    def classify(self, access_keys: Iterable[AccessKey], now: datetime) -> StalenessVerdict:
        """Classify a user's keys against the configured window."""
        return classify(access_keys, now, self._retention_window)
