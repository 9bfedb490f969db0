"""Application ports - Interfaces for external adapters."""

from .confirmation_prompt import ConfirmationPrompt
from .directory_service import DirectoryService, LastUsedRecord
from .notification_sender import NotificationSender
from .report_writer import ReportWriter

__all__ = [
    "ConfirmationPrompt",
    "DirectoryService",
    "LastUsedRecord",
    "NotificationSender",
    "ReportWriter",
]
