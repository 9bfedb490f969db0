"""Slack notification sender."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import httpx

from .base import BaseNotificationSender

if TYPE_CHECKING:
    from ....application.use_cases import AuditResult


@dataclass(frozen=True, slots=True)
class SlackConfig:
    """Slack notification configuration."""

    enabled: bool = False
    webhook_url: str = ""


class SlackNotificationSender(BaseNotificationSender):
    """Send notifications to Slack via incoming webhook."""

    def __init__(self, config: SlackConfig) -> None:
        """Initialize the Slack sender."""
        super().__init__()
        self._config = config

    def is_configured(self) -> bool:
        """Check if Slack is properly configured."""
        return self._config.enabled and bool(self._config.webhook_url)

    async def send(self, result: AuditResult) -> bool:
        """Send Slack notification using Block Kit."""
        if not self.is_configured():
            self._logger.warning("Slack sender not configured")
            return False

        try:
            message = self._build_slack_message(result)

            async with httpx.AsyncClient(timeout=30.0) as client:
                response = await client.post(
                    self._config.webhook_url,
                    json=message,
                    headers={"Content-Type": "application/json"},
                )
                response.raise_for_status()

            self._logger.info("Slack notification sent")
            return True

        except Exception:
            self._logger.exception("Failed to send Slack notification")
            return False

    def _build_slack_message(self, result: AuditResult) -> dict:
        """Build a Slack message using Block Kit."""
        title = "IAM keys disabled" if result.keys_disabled else "Stale IAM access keys"
        blocks: list[dict] = [
            {
                "type": "header",
                "text": {"type": "plain_text", "text": title, "emoji": True},
            },
            {
                "type": "section",
                "text": {"type": "mrkdwn", "text": f"*{result.summary()}*"},
            },
            {
                "type": "section",
                "fields": [
                    {"type": "mrkdwn", "text": f"*Users scanned:*\n{result.users_scanned}"},
                    {"type": "mrkdwn", "text": f"*Stale users:*\n{result.stale_count}"},
                    {"type": "mrkdwn", "text": f"*Keys disabled:*\n{result.keys_disabled}"},
                    {"type": "mrkdwn", "text": f"*Failures:*\n{len(result.mutation_failures)}"},
                ],
            },
        ]

        if result.findings:
            blocks.append({"type": "divider"})
            blocks.append({
                "type": "section",
                "text": {"type": "mrkdwn", "text": self.format_finding_list(result.findings)},
            })

        blocks.append({"type": "divider"})
        blocks.append({
            "type": "context",
            "elements": [{"type": "mrkdwn", "text": f"IAM Key Auditor ({result.mode})"}],
        })

        return {"blocks": blocks}
