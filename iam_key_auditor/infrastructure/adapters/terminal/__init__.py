"""Terminal I/O adapters."""

from .console import ConsoleReportWriter
from .prompt import TerminalConfirmationPrompt

__all__ = ["ConsoleReportWriter", "TerminalConfirmationPrompt"]
