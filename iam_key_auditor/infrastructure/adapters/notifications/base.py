"""Base notification sender with common functionality."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from ....application.reporting import format_last_used

if TYPE_CHECKING:
    from ....application.use_cases import AuditResult, StaleUserFinding


class BaseNotificationSender(ABC):
    """Abstract base class for notification senders."""

    def __init__(self) -> None:
        """Initialize the notification sender."""
        self._logger = logging.getLogger(self.__class__.__name__)

    @abstractmethod
    async def send(self, result: AuditResult) -> bool:
        """Send notification for the given audit result."""
        ...

    @abstractmethod
    def is_configured(self) -> bool:
        """Check if the sender is properly configured."""
        ...

    def format_finding_list(
        self,
        findings: tuple[StaleUserFinding, ...],
        *,
        max_items: int = 10,
    ) -> str:
        """Format stale users for display."""
        lines: list[str] = []

        for finding in findings[:max_items]:
            line = f"• {finding.user_name} - last used {format_last_used(finding.last_used_at)}"
            if finding.keys_disabled:
                line += f" ({finding.keys_disabled} keys disabled)"
            lines.append(line)

        if len(findings) > max_items:
            lines.append(f"... and {len(findings) - max_items} more")

        return "\n".join(lines)
