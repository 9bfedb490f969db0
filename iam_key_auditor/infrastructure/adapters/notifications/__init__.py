"""Notification sender adapter implementations."""

from .base import BaseNotificationSender
from .slack import SlackConfig, SlackNotificationSender
from .webhook import WebhookConfig, WebhookNotificationSender

__all__ = [
    "BaseNotificationSender",
    "SlackConfig",
    "SlackNotificationSender",
    "WebhookConfig",
    "WebhookNotificationSender",
]
