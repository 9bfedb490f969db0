"""Tests for the stale access key audit use case."""

from __future__ import annotations

import asyncio
from datetime import timedelta

import pytest

from iam_key_auditor.application.exceptions import MutationError
from iam_key_auditor.application.reporting import AuditReporter
from iam_key_auditor.application.use_cases import AuditResult, AuditStaleAccessKeys
from iam_key_auditor.domain.value_objects import EnrichmentFailurePolicy, KeyStatus, RunMode

from ..fakes import FakeDirectory, FakeKey, FakePrompt, ListWriter, RecordingSender


def run_audit(
    directory: FakeDirectory,
    prompt: FakePrompt,
    writer: ListWriter,
    now,
    mode: RunMode = RunMode.REPORT_ONLY,
    **kwargs,
) -> AuditResult:
    """Execute the use case synchronously."""
    use_case = AuditStaleAccessKeys(
        directory,
        prompt,
        AuditReporter(writer),
        mode=mode,
        now=now,
        **kwargs,
    )
    return asyncio.run(use_case.execute())


@pytest.fixture
def fleet(directory: FakeDirectory, now) -> FakeDirectory:
    """alice is stale, bob is fresh, carol has no keys, dave never used any of the keys."""
    directory.add_user("alice", FakeKey("AKIA_ALICE", last_used_at=now - timedelta(days=400)))
    directory.add_user(
        "bob",
        FakeKey("AKIA_BOB_NEVER"),
        FakeKey("AKIA_BOB_RECENT", last_used_at=now - timedelta(days=10)),
    )
    directory.add_user("carol")
    directory.add_user("dave", FakeKey("AKIA_DAVE1"), FakeKey("AKIA_DAVE2"))
    return directory


class TestReportOnlyMode:
    """Report-only runs."""

    def test_reports_stale_users_only(self, fleet, accepting_prompt, writer, now) -> None:
        """Stale users get a line; fresh and keyless users do not."""
        expected_date = now - timedelta(days=400)

        result = run_audit(fleet, accepting_prompt, writer, now)

        assert writer.lines == [
            f"alice - Last used {expected_date:%B} {expected_date.day} {expected_date.year}",
            "dave - Last used never",
            "Scanned 4 users, 2 stale, 0 keys disabled, 0 failures",
        ]
        assert [f.user_name for f in result.findings] == ["alice", "dave"]
        assert result.users_scanned == 4

    def test_never_prompts_or_mutates(self, fleet, accepting_prompt, writer, now) -> None:
        """Report-only mode neither asks nor changes anything."""
        result = run_audit(fleet, accepting_prompt, writer, now)

        assert accepting_prompt.messages == []
        assert fleet.status_updates == []
        assert result.keys_disabled == 0
        assert result.success is True

    def test_empty_directory(self, directory, accepting_prompt, writer, now) -> None:
        """An empty directory produces only the summary."""
        result = run_audit(directory, accepting_prompt, writer, now)
        assert writer.lines == ["Scanned 0 users, 0 stale, 0 keys disabled, 0 failures"]
        assert result.stale_count == 0

    def test_unreadable_only_key_is_flagged(self, directory, accepting_prompt, writer, now) -> None:
        """A single key with an unreadable record counts as never used."""
        directory.add_user("frank", FakeKey("AKIA_F", last_used_at=now, lookup_fails=True))

        result = run_audit(directory, accepting_prompt, writer, now)

        assert writer.lines[0] == "frank - Last used never"
        assert result.stale_count == 1

    def test_unreadable_only_key_is_ignored_under_drop(self, directory, accepting_prompt, writer, now) -> None:
        """Under the drop policy the user has nothing left to judge."""
        directory.add_user("frank", FakeKey("AKIA_F", lookup_fails=True))

        result = run_audit(
            directory,
            accepting_prompt,
            writer,
            now,
            failure_policy=EnrichmentFailurePolicy.DROP,
        )

        assert result.stale_count == 0


class TestDestructiveMode:
    """Destructive runs."""

    def test_declined_confirmation_stops_everything(self, fleet, declining_prompt, writer, now) -> None:
        """Declining means no directory calls and no output beyond the prompt."""
        result = run_audit(fleet, declining_prompt, writer, now, mode=RunMode.DESTRUCTIVE)

        assert declining_prompt.messages == ["Continue?"]
        assert fleet.calls == []
        assert writer.lines == ["Running in destructive mode"]
        assert result.confirmed is False
        assert result.users_scanned == 0

    def test_confirmed_run_disables_every_key_of_stale_users(self, fleet, accepting_prompt, writer, now) -> None:
        """dave's two keys are both set to inactive, alice's one key too."""
        result = run_audit(fleet, accepting_prompt, writer, now, mode=RunMode.DESTRUCTIVE)

        assert fleet.status_updates == [
            ("alice", "AKIA_ALICE", KeyStatus.INACTIVE),
            ("dave", "AKIA_DAVE1", KeyStatus.INACTIVE),
            ("dave", "AKIA_DAVE2", KeyStatus.INACTIVE),
        ]
        assert result.keys_disabled == 3
        assert result.confirmed is True

    def test_dave_gets_exactly_two_updates(self, directory, accepting_prompt, writer, now) -> None:
        """A flagged user with two keys yields exactly two inactive updates."""
        directory.add_user("dave", FakeKey("AKIA_DAVE1"), FakeKey("AKIA_DAVE2"))

        run_audit(directory, accepting_prompt, writer, now, mode=RunMode.DESTRUCTIVE)

        assert fleet_updates(directory) == {("dave", "AKIA_DAVE1"), ("dave", "AKIA_DAVE2")}
        assert all(status is KeyStatus.INACTIVE for *_, status in directory.status_updates)
        assert len(directory.status_updates) == 2

    def test_report_lines_precede_each_mutation(self, directory, accepting_prompt, writer, now) -> None:
        """Intent and key lines are written in order."""
        directory.add_user("dave", FakeKey("AKIA_DAVE1"), FakeKey("AKIA_DAVE2"))

        run_audit(directory, accepting_prompt, writer, now, mode=RunMode.DESTRUCTIVE)

        assert writer.lines == [
            "Running in destructive mode",
            "dave - Last used never",
            "Disabling access keys for dave",
            "- AKIA_DAVE1",
            "- AKIA_DAVE2",
            "Scanned 1 users, 1 stale, 2 keys disabled, 0 failures",
        ]

    def test_fresh_users_are_untouched(self, fleet, accepting_prompt, writer, now) -> None:
        """bob and carol are never mutated."""
        run_audit(fleet, accepting_prompt, writer, now, mode=RunMode.DESTRUCTIVE)
        touched = {user for user, *_ in fleet.status_updates}
        assert "bob" not in touched
        assert "carol" not in touched

    def test_mutation_failure_is_isolated_per_user(self, directory, accepting_prompt, writer, now) -> None:
        """A failed update skips the rest of that user but not later users."""
        directory.add_user("dave", FakeKey("AKIA_DAVE1", update_fails=True), FakeKey("AKIA_DAVE2"))
        directory.add_user("erin", FakeKey("AKIA_ERIN"))

        result = run_audit(directory, accepting_prompt, writer, now, mode=RunMode.DESTRUCTIVE)

        assert [(u, k) for u, k, _ in directory.status_updates] == [
            ("dave", "AKIA_DAVE1"),
            ("erin", "AKIA_ERIN"),
        ]
        assert result.success is False
        assert [(f.user_name, f.key_id) for f in result.mutation_failures] == [("dave", "AKIA_DAVE1")]
        assert result.keys_disabled == 1
        assert any(line.startswith("Failed to disable AKIA_DAVE1 for dave") for line in writer.lines)
        assert writer.lines[-1] == "Scanned 2 users, 2 stale, 1 keys disabled, 1 failures"

    def test_abort_on_mutation_error(self, directory, accepting_prompt, writer, now) -> None:
        """Fail-fast mode lets the error end the run."""
        directory.add_user("dave", FakeKey("AKIA_DAVE1", update_fails=True))
        directory.add_user("erin", FakeKey("AKIA_ERIN"))

        with pytest.raises(MutationError):
            run_audit(
                directory,
                accepting_prompt,
                writer,
                now,
                mode=RunMode.DESTRUCTIVE,
                abort_on_mutation_error=True,
            )

        assert [u for u, *_ in directory.status_updates] == ["dave"]


class TestNotifications:
    """Post-run notifications."""

    def test_configured_senders_receive_result(self, fleet, accepting_prompt, writer, now) -> None:
        """Senders are told about stale users."""
        sender = RecordingSender()
        result = run_audit(fleet, accepting_prompt, writer, now, notification_senders=[sender])
        assert sender.sent == [result]

    def test_unconfigured_senders_are_skipped(self, fleet, accepting_prompt, writer, now) -> None:
        """Disabled senders are never called."""
        sender = RecordingSender(configured=False)
        run_audit(fleet, accepting_prompt, writer, now, notification_senders=[sender])
        assert sender.sent == []

    def test_no_notification_without_findings(self, directory, accepting_prompt, writer, now) -> None:
        """Clean runs stay quiet."""
        directory.add_user("bob", FakeKey("AKIA_BOB", last_used_at=now))
        sender = RecordingSender()
        run_audit(directory, accepting_prompt, writer, now, notification_senders=[sender])
        assert sender.sent == []

    def test_failing_sender_does_not_fail_run(self, fleet, accepting_prompt, writer, now) -> None:
        """Sender errors are logged, not raised."""

        class ExplodingSender(RecordingSender):
            async def send(self, result) -> bool:
                raise RuntimeError("boom")

        result = run_audit(fleet, accepting_prompt, writer, now, notification_senders=[ExplodingSender()])
        assert result.success is True

    def test_declined_run_sends_nothing(self, fleet, declining_prompt, writer, now) -> None:
        """A declined destructive run notifies nobody."""
        sender = RecordingSender()
        run_audit(fleet, declining_prompt, writer, now, mode=RunMode.DESTRUCTIVE, notification_senders=[sender])
        assert sender.sent == []


def fleet_updates(directory: FakeDirectory) -> set[tuple[str, str]]:
    return {(user, key) for user, key, _ in directory.status_updates}
