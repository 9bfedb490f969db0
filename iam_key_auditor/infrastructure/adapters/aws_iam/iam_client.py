"""AWS IAM API client."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar

import boto3
from botocore.config import Config

if TYPE_CHECKING:
    from botocore.client import BaseClient

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class IamClientConfig:
    """Configuration for the IAM API client."""

    profile_name: str | None = None
    region_name: str | None = None
    max_attempts: int = 5
    timeout: float = 30.0


class IamClient:
    """
    Async facade over the boto3 IAM client.

    boto3 is blocking, so every call runs in a worker thread. Credentials
    and region are resolved by boto3 itself.
    """

    SERVICE_NAME: ClassVar[str] = "iam"
    RETRY_MODE: ClassVar[str] = "standard"

    def __init__(self, config: IamClientConfig, *, client: BaseClient | None = None) -> None:
        """Initialize the IAM client."""
        self._config = config
        self._client = client

    def _get_client(self) -> BaseClient:
        """Get or create the boto3 client."""
        if self._client is None:
            session = boto3.Session(
                profile_name=self._config.profile_name,
                region_name=self._config.region_name,
            )
            self._client = session.client(
                self.SERVICE_NAME,
                config=Config(
                    retries={"max_attempts": self._config.max_attempts, "mode": self.RETRY_MODE},
                    connect_timeout=self._config.timeout,
                    read_timeout=self._config.timeout,
                ),
            )
        return self._client

    async def list_users(self, max_items: int, marker: str | None = None) -> dict[str, Any]:
        """
        Fetch a single page of IAM users.

        Returns:
            Raw ListUsers response.
        """
        kwargs: dict[str, Any] = {"MaxItems": max_items}
        if marker:
            kwargs["Marker"] = marker
        return await asyncio.to_thread(self._get_client().list_users, **kwargs)

    async def list_access_keys(self, user_name: str) -> list[dict[str, Any]]:
        """
        Retrieve all access key metadata for a user.

        Returns:
            Combined AccessKeyMetadata across all pages.
        """
        return await asyncio.to_thread(self._list_access_keys, user_name)

    def _list_access_keys(self, user_name: str) -> list[dict[str, Any]]:
        paginator = self._get_client().get_paginator("list_access_keys")
        keys: list[dict[str, Any]] = []
        for page in paginator.paginate(UserName=user_name):
            keys.extend(page.get("AccessKeyMetadata", []))
        return keys

    async def get_access_key_last_used(self, access_key_id: str) -> dict[str, Any]:
        """
        Fetch the last-used record of an access key.

        Returns:
            Raw GetAccessKeyLastUsed response.
        """
        return await asyncio.to_thread(
            self._get_client().get_access_key_last_used,
            AccessKeyId=access_key_id,
        )

    async def update_access_key(self, user_name: str, access_key_id: str, status: str) -> None:
        """Set the status of an access key ("Active" or "Inactive")."""
        await asyncio.to_thread(
            self._get_client().update_access_key,
            UserName=user_name,
            AccessKeyId=access_key_id,
            Status=status,
        )
        logger.debug("Set %s of %s to %s", access_key_id, user_name, status)
