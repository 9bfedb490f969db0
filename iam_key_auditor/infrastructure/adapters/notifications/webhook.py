"""Generic webhook notification sender."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime
from typing import TYPE_CHECKING

import httpx

from .base import BaseNotificationSender

if TYPE_CHECKING:
    from ....application.use_cases import AuditResult


@dataclass(frozen=True, slots=True)
class WebhookConfig:
    """Webhook notification configuration."""

    enabled: bool = False
    url: str = ""


class WebhookNotificationSender(BaseNotificationSender):
    """Send notifications via generic HTTP webhook with JSON payload."""

    def __init__(self, config: WebhookConfig) -> None:
        """Initialize the webhook sender."""
        super().__init__()
        self._config = config

    def is_configured(self) -> bool:
        """Check if webhook is properly configured."""
        return self._config.enabled and bool(self._config.url)

    async def send(self, result: AuditResult) -> bool:
        """Send webhook notification with JSON payload."""
        if not self.is_configured():
            self._logger.warning("Webhook sender not configured")
            return False

        try:
            payload = self._build_payload(result)

            async with httpx.AsyncClient(timeout=30.0) as client:
                response = await client.post(
                    self._config.url,
                    json=payload,
                    headers={"Content-Type": "application/json"},
                )
                response.raise_for_status()

            self._logger.info("Webhook notification sent to %s", self._config.url)
            return True

        except Exception:
            self._logger.exception("Failed to send webhook notification")
            return False

    def _build_payload(self, result: AuditResult) -> dict:
        """Build the JSON payload for the webhook."""
        return {
            "event_type": "iam_stale_access_keys",
            "timestamp": datetime.now(UTC).isoformat(),
            "mode": str(result.mode),
            "summary": result.summary(),
            "statistics": {
                "users_scanned": result.users_scanned,
                "stale_users": result.stale_count,
                "keys_disabled": result.keys_disabled,
                "mutation_failures": len(result.mutation_failures),
            },
            "stale_users": [
                {
                    "user_name": finding.user_name,
                    "last_used": finding.last_used_at.isoformat() if finding.last_used_at else None,
                    "access_key_ids": list(finding.key_ids),
                    "keys_disabled": finding.keys_disabled,
                }
                for finding in result.findings
            ],
            "failures": [
                {"user_name": f.user_name, "access_key_id": f.key_id, "error": f.error}
                for f in result.mutation_failures
            ],
        }
