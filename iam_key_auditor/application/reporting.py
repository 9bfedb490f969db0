"""Human-readable report lines for an audit run."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..domain.entities import User
    from ..domain.value_objects import StalenessVerdict
    from .ports import ReportWriter
    from .use_cases.audit_stale_keys import AuditResult

NEVER = "never"


def format_last_used(used_at: datetime | None) -> str:
    """Render a usage timestamp as e.g. "March 5 2024", or "never"."""
    if used_at is None:
        return NEVER
    used_at = used_at.astimezone(UTC)
    return f"{used_at:%B} {used_at.day} {used_at.year}"


class AuditReporter:
    """Formats audit events and hands them to a report writer."""

    def __init__(self, writer: ReportWriter) -> None:
        self._writer = writer

    def destructive_mode_started(self) -> None:
        self._writer.write("Running in destructive mode")

    def stale_user(self, user: User, verdict: StalenessVerdict) -> None:
        self._writer.write(f"{user.name} - Last used {format_last_used(verdict.most_recent_used_at)}")

    def disabling_keys(self, user: User) -> None:
        self._writer.write(f"Disabling access keys for {user.name}")

    def disabling_key(self, key_id: str) -> None:
        self._writer.write(f"- {key_id}")

    def mutation_failed(self, user: User, key_id: str, error: Exception) -> None:
        self._writer.write(f"Failed to disable {key_id} for {user.name}: {error}")

    def summary(self, result: AuditResult) -> None:
        self._writer.write(result.summary())
