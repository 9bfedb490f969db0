"""Use case for walking every user and its access keys."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import AsyncIterator
from typing import TYPE_CHECKING

from ...domain.entities import AccessKey, CredentialBundle, User
from ...domain.value_objects import EnrichmentFailurePolicy
from ..exceptions import DirectoryServiceError

if TYPE_CHECKING:
    from ..ports import DirectoryService, LastUsedRecord

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 10


class CredentialEnumerator:
    """
    Lazily yields one CredentialBundle per user in directory order.

    Users are fetched a page at a time. For each user the access keys are
    listed and their last-used records are looked up concurrently; the
    bundle is only yielded once every lookup has settled. Users are
    processed strictly one after another.
    """

    def __init__(
        self,
        directory: DirectoryService,
        *,
        page_size: int = DEFAULT_PAGE_SIZE,
        failure_policy: EnrichmentFailurePolicy = EnrichmentFailurePolicy.NEVER_USED,
    ) -> None:
        """
        Initialize the enumerator.

        Args:
            directory: Adapter for the identity directory.
            page_size: Maximum users requested per page.
            failure_policy: Handling of keys whose usage lookup fails.
        """
        if page_size <= 0:
            msg = f"Page size must be positive, got {page_size}"
            raise ValueError(msg)
        self._directory = directory
        self._page_size = page_size
        self._failure_policy = failure_policy

    async def iter_bundles(self) -> AsyncIterator[CredentialBundle]:
        """
        Yield a bundle for every user in the directory.

        Raises:
            DirectoryServiceError: If a page or key listing fails.
        """
        marker: str | None = None
        page_number = 0

        while True:
            page = await self._directory.list_users(self._page_size, marker)
            page_number += 1
            logger.debug("Fetched user page %d with %d users", page_number, len(page.users))

            for user in page.users:
                yield await self._build_bundle(user)

            marker = page.next_marker
            if not page.is_truncated:
                break
            if marker is None:
                msg = "directory reported more users but returned no marker"
                raise DirectoryServiceError("ListUsers", msg)

    async def _build_bundle(self, user: User) -> CredentialBundle:
        """Fetch a user's keys and enrich them with usage records."""
        keys = await self._directory.list_access_keys(user.name)
        results = await asyncio.gather(
            *(self._directory.get_access_key_last_used(key.key_id) for key in keys),
            return_exceptions=True,
        )

        enriched: list[AccessKey] = []
        for key, result in zip(keys, results, strict=True):
            if isinstance(result, BaseException):
                if not isinstance(result, Exception):
                    raise result
                enriched.extend(self._handle_failed_lookup(user, key, result))
            else:
                enriched.append(self._enrich(key, result))

        return CredentialBundle(user=user, access_keys=tuple(enriched))

    @staticmethod
    def _enrich(key: AccessKey, record: LastUsedRecord) -> AccessKey:
        return key.with_last_used(
            record.used_at,
            service=record.service_name,
            region=record.region,
        )

    def _handle_failed_lookup(self, user: User, key: AccessKey, error: Exception) -> list[AccessKey]:
        if self._failure_policy.keeps_key:
            logger.warning(
                "Could not read last use of %s for %s, treating it as never used: %s",
                key.key_id,
                user.name,
                error,
            )
            return [key.with_unknown_usage()]

        logger.warning(
            "Could not read last use of %s for %s, leaving it out: %s",
            key.key_id,
            user.name,
            error,
        )
        return []
