#!/usr/bin/env python3
"""
IAM Key Auditor

Composition root and application entry point.
Wires together all layers following hexagonal architecture principles.
"""

from __future__ import annotations

import asyncio
import logging
import sys
from collections.abc import Sequence
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from .application.reporting import AuditReporter
from .application.use_cases import AuditStaleAccessKeys
from .domain.value_objects import RetentionWindow, RunMode
from .infrastructure.adapters import (
    ConsoleReportWriter,
    IamDirectoryService,
    SlackNotificationSender,
    TerminalConfirmationPrompt,
    WebhookNotificationSender,
)
from .infrastructure.config import Settings, load_settings

if TYPE_CHECKING:
    from .application.ports import NotificationSender

# Report lines go to stdout, so logs go to stderr
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stderr)],
)
logger = logging.getLogger(__name__)

# Application version
__version__ = "1.0.0"


class ApplicationContainer:
    """
    Dependency injection container.

    Responsible for creating and wiring all application components.
    """

    def __init__(self, settings: Settings) -> None:
        """Initialize container with settings."""
        self._settings = settings

    def create_directory_service(self) -> IamDirectoryService:
        """Create the IAM directory adapter."""
        return IamDirectoryService(self._settings.iam_config)

    def create_reporter(self) -> AuditReporter:
        """Create the reporter writing to standard output."""
        return AuditReporter(ConsoleReportWriter())

    def create_notification_senders(self) -> list[NotificationSender]:
        """Create all configured notification sender adapters."""
        senders: list[NotificationSender] = [
            SlackNotificationSender(self._settings.slack_config),
            WebhookNotificationSender(self._settings.webhook_config),
        ]

        configured = [s for s in senders if s.is_configured()]
        logger.info(
            "Configured notification senders: %s",
            [s.__class__.__name__ for s in configured] or "None",
        )

        return senders

    def create_audit_use_case(self, mode: RunMode, now: datetime) -> AuditStaleAccessKeys:
        """Create the main use case with all dependencies."""
        return AuditStaleAccessKeys(
            directory=self.create_directory_service(),
            prompt=TerminalConfirmationPrompt(),
            reporter=self.create_reporter(),
            mode=mode,
            now=now,
            retention_window=RetentionWindow(years=1),
            failure_policy=self._settings.failure_policy,
            abort_on_mutation_error=self._settings.abort_on_mutation_error,
            notification_senders=self.create_notification_senders(),
        )


class Application:
    """
    Main application orchestrator.

    Runs a single audit pass over the directory.
    """

    def __init__(self, settings: Settings, *, container: ApplicationContainer | None = None) -> None:
        """Initialize application with settings."""
        self._settings = settings
        self._container = container or ApplicationContainer(settings)

    async def run(self, mode: RunMode) -> int:
        """
        Run one audit in the given mode.

        Returns:
            Exit code (0 for success, 1 if any key could not be disabled).
        """
        now = datetime.now(UTC)
        logger.info("Running in %s mode", mode)

        use_case = self._container.create_audit_use_case(mode, now)
        result = await use_case.execute()
        return 0 if result.success else 1


async def async_main(argv: Sequence[str] | None = None) -> int:
    """Async entry point."""
    args = sys.argv[1:] if argv is None else argv
    logger.info("IAM Key Auditor %s starting...", __version__)
    try:
        settings = load_settings()
        logging.getLogger().setLevel(settings.log_level.upper())
    except ValueError as e:
        logger.error("Configuration error: %s", e)
        return 1

    try:
        app = Application(settings)
        return await app.run(RunMode.from_argv(args))
    except KeyboardInterrupt:
        logger.info("Shutting down...")
        return 0
    except Exception:
        logger.exception("Unexpected error")
        return 1


def main() -> None:
    """Main entry point."""
    exit_code = asyncio.run(async_main())
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
