"""Infrastructure adapters - Implementations of application ports."""

from .aws_iam import IamDirectoryService
from .notifications import (
    SlackNotificationSender,
    WebhookNotificationSender,
)
from .terminal import ConsoleReportWriter, TerminalConfirmationPrompt

__all__ = [
    "ConsoleReportWriter",
    "IamDirectoryService",
    "SlackNotificationSender",
    "TerminalConfirmationPrompt",
    "WebhookNotificationSender",
]
