"""Port for notification sending - driven/secondary port."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..use_cases.audit_stale_keys import AuditResult


class NotificationSender(Protocol):
    """
    Port for sending notifications.

    This is a driven (secondary) port that defines how the application
    sends a run summary to external systems.
    """

    async def send(self, result: AuditResult) -> bool:
        """
        Send a notification describing the audit result.

        Args:
            result: The completed audit run.

        Returns:
            True if notification was sent successfully.
        """
        ...

    def is_configured(self) -> bool:
        """
        Check if this notification sender is properly configured.

        Returns:
            True if the sender is ready to send notifications.
        """
        ...
