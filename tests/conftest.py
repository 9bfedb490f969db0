"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest

from iam_key_auditor.domain.entities import AccessKey
from iam_key_auditor.domain.value_objects import KeyStatus, RetentionWindow

from .fakes import FakeDirectory, FakePrompt, ListWriter


@pytest.fixture
def now() -> datetime:
    """Fixed reference instant for a run."""
    return datetime(2025, 6, 15, 12, 0, tzinfo=UTC)


@pytest.fixture
def retention_window() -> RetentionWindow:
    """The one year retention window."""
    return RetentionWindow()


@pytest.fixture
def make_key(now: datetime):
    """Build an access key last used `days_ago` days before `now`."""

    def _make(key_id: str, days_ago: int | None = None, *, user_name: str = "alice") -> AccessKey:
        used_at = None if days_ago is None else now - timedelta(days=days_ago)
        return AccessKey(
            key_id=key_id,
            user_name=user_name,
            status=KeyStatus.ACTIVE,
            last_used_at=used_at,
        )

    return _make


@pytest.fixture
def directory() -> FakeDirectory:
    """Empty in-memory directory."""
    return FakeDirectory()


@pytest.fixture
def writer() -> ListWriter:
    """Report writer collecting lines."""
    return ListWriter()


@pytest.fixture
def accepting_prompt() -> FakePrompt:
    """Prompt that always confirms."""
    return FakePrompt(answer=True)


@pytest.fixture
def declining_prompt() -> FakePrompt:
    """Prompt that always declines."""
    return FakePrompt(answer=False)
