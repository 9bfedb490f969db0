"""Use case for reporting and optionally disabling stale access keys."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import datetime

from ...domain.entities import CredentialBundle, User
from ...domain.services import StalenessClassifier
from ...domain.value_objects import (
    EnrichmentFailurePolicy,
    KeyStatus,
    RetentionWindow,
    RunMode,
    StalenessVerdict,
)
from ..exceptions import MutationError
from ..ports import ConfirmationPrompt, DirectoryService, NotificationSender
from ..reporting import AuditReporter
from .enumerate_credentials import DEFAULT_PAGE_SIZE, CredentialEnumerator

logger = logging.getLogger(__name__)

CONFIRMATION_MESSAGE = "Continue?"


@dataclass(frozen=True, slots=True)
class StaleUserFinding:
    """A user whose access keys were flagged as stale."""

    user_name: str
    last_used_at: datetime | None
    key_ids: tuple[str, ...]
    keys_disabled: int = 0


@dataclass(frozen=True, slots=True)
class MutationFailure:
    """A status update that did not go through."""

    user_name: str
    key_id: str
    error: str


@dataclass(frozen=True, slots=True)
class AuditResult:
    """Result of the stale access key audit use case."""

    mode: RunMode
    started_at: datetime
    confirmed: bool = True
    users_scanned: int = 0
    findings: tuple[StaleUserFinding, ...] = ()
    keys_disabled: int = 0
    mutation_failures: tuple[MutationFailure, ...] = ()

    @property
    def stale_count(self) -> int:
        """Number of users flagged as stale."""
        return len(self.findings)

    @property
    def success(self) -> bool:
        """Check if every requested status update succeeded."""
        return not self.mutation_failures

    def summary(self) -> str:
        """Generate a one-line summary of the run."""
        return (
            f"Scanned {self.users_scanned} users, {self.stale_count} stale, "
            f"{self.keys_disabled} keys disabled, {len(self.mutation_failures)} failures"
        )


@dataclass(slots=True)
class _RunState:
    users_scanned: int = 0
    findings: list[StaleUserFinding] = field(default_factory=list)
    keys_disabled: int = 0
    mutation_failures: list[MutationFailure] = field(default_factory=list)


class AuditStaleAccessKeys:
    """
    Use case for flagging users whose access keys have gone unused.

    In report-only mode every stale user is reported. In destructive mode
    the operator must confirm before anything is fetched; afterwards every
    key of a stale user is set to inactive.
    """

    def __init__(
        self,
        directory: DirectoryService,
        prompt: ConfirmationPrompt,
        reporter: AuditReporter,
        *,
        mode: RunMode,
        now: datetime,
        retention_window: RetentionWindow | None = None,
        failure_policy: EnrichmentFailurePolicy = EnrichmentFailurePolicy.NEVER_USED,
        page_size: int = DEFAULT_PAGE_SIZE,
        abort_on_mutation_error: bool = False,
        notification_senders: Sequence[NotificationSender] = (),
    ) -> None:
        """
        Initialize the use case.

        Args:
            directory: Adapter for the identity directory.
            prompt: Asks the operator to confirm destructive runs.
            reporter: Emits report lines.
            mode: Report-only or destructive.
            now: Reference instant for the whole run.
            retention_window: Unused period after which keys are stale.
            failure_policy: Handling of keys whose usage lookup fails.
            page_size: Users requested per directory page.
            abort_on_mutation_error: Stop the run on the first failed update.
            notification_senders: Adapters told about stale users after the run.
        """
        self._directory = directory
        self._prompt = prompt
        self._reporter = reporter
        self._mode = mode
        self._now = now
        self._classifier = StalenessClassifier(retention_window or RetentionWindow())
        self._enumerator = CredentialEnumerator(
            directory,
            page_size=page_size,
            failure_policy=failure_policy,
        )
        self._abort_on_mutation_error = abort_on_mutation_error
        self._senders = [s for s in notification_senders if s.is_configured()]

    async def execute(self) -> AuditResult:
        """
        Execute the audit.

        Returns:
            AuditResult describing what was found and changed.

        Raises:
            DirectoryServiceError: If enumeration fails.
            MutationError: If an update fails and aborting is enabled.
        """
        if self._mode.is_destructive:
            self._reporter.destructive_mode_started()
            if not await self._prompt.confirm(CONFIRMATION_MESSAGE):
                logger.info("Destructive run declined, nothing was changed")
                return AuditResult(mode=self._mode, started_at=self._now, confirmed=False)

        logger.info("Starting stale access key audit (%s)", self._mode)
        state = _RunState()

        async for bundle in self._enumerator.iter_bundles():
            state.users_scanned += 1
            await self._process(bundle, state)

        result = AuditResult(
            mode=self._mode,
            started_at=self._now,
            users_scanned=state.users_scanned,
            findings=tuple(state.findings),
            keys_disabled=state.keys_disabled,
            mutation_failures=tuple(state.mutation_failures),
        )
        self._reporter.summary(result)
        logger.info("Audit complete: %s", result.summary())

        if result.findings:
            await self._send_notifications(result)

        return result

    async def _process(self, bundle: CredentialBundle, state: _RunState) -> None:
        """Classify one user and act on the verdict."""
        if bundle.is_empty:
            logger.debug("User %s has no access keys", bundle.user.name)
            return

        verdict = self._classifier.classify(bundle.access_keys, self._now)
        if not verdict.is_stale:
            return

        self._reporter.stale_user(bundle.user, verdict)
        disabled = 0
        if self._mode.is_destructive:
            disabled = await self._disable_keys(bundle, state)

        state.findings.append(self._finding(bundle, verdict, disabled))

    async def _disable_keys(self, bundle: CredentialBundle, state: _RunState) -> int:
        """Set every key of a stale user to inactive, in bundle order."""
        user = bundle.user
        self._reporter.disabling_keys(user)
        disabled = 0

        for key in bundle.access_keys:
            self._reporter.disabling_key(key.key_id)
            try:
                await self._directory.set_access_key_status(user.name, key.key_id, KeyStatus.INACTIVE)
            except MutationError as e:
                if self._abort_on_mutation_error:
                    raise
                self._record_failure(user, key.key_id, e, state)
                break
            disabled += 1
            state.keys_disabled += 1

        return disabled

    def _record_failure(self, user: User, key_id: str, error: MutationError, state: _RunState) -> None:
        logger.error("Failed to disable %s for %s, skipping the rest of this user: %s", key_id, user.name, error)
        self._reporter.mutation_failed(user, key_id, error)
        state.mutation_failures.append(MutationFailure(user_name=user.name, key_id=key_id, error=str(error)))

    @staticmethod
    def _finding(bundle: CredentialBundle, verdict: StalenessVerdict, disabled: int) -> StaleUserFinding:
        return StaleUserFinding(
            user_name=bundle.user.name,
            last_used_at=verdict.most_recent_used_at,
            key_ids=tuple(bundle.key_ids),
            keys_disabled=disabled,
        )

    async def _send_notifications(self, result: AuditResult) -> None:
        """Send the run summary through all configured senders."""
        for sender in self._senders:
            try:
                if await sender.send(result):
                    logger.info("Notification sent via %s", sender.__class__.__name__)
                else:
                    logger.warning("Notification failed via %s", sender.__class__.__name__)
            except Exception:
                logger.exception("Error sending notification via %s", sender.__class__.__name__)
