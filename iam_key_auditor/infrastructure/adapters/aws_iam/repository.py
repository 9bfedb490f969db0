"""IAM implementation of the directory service port."""

from __future__ import annotations

import logging
from typing import Any

from botocore.exceptions import BotoCoreError, ClientError

from ....application.exceptions import DirectoryServiceError, MutationError
from ....application.ports import LastUsedRecord
from ....domain.entities import AccessKey, User, UserPage
from ....domain.value_objects import KeyStatus
from .iam_client import IamClient, IamClientConfig

logger = logging.getLogger(__name__)

# IAM reports this region/service for keys that have never been used
_NOT_APPLICABLE = "N/A"


class IamDirectoryService:
    """
    Directory service implementation using the AWS IAM API.

    Implements the DirectoryService port for IAM users and access keys.
    """

    def __init__(self, config: IamClientConfig, *, client: IamClient | None = None) -> None:
        """
        Initialize the directory service.

        Args:
            config: Configuration for the IAM client.
            client: Pre-built client, mainly for tests.
        """
        self._client = client or IamClient(config)

    async def list_users(self, page_size: int, marker: str | None) -> UserPage:
        """Fetch one page of IAM users."""
        try:
            response = await self._client.list_users(page_size, marker)
        except (BotoCoreError, ClientError) as e:
            logger.exception("Failed to list IAM users")
            raise DirectoryServiceError("ListUsers", str(e)) from e

        users = tuple(self._map_user(raw) for raw in response.get("Users", []))
        return UserPage(
            users=users,
            is_truncated=bool(response.get("IsTruncated", False)),
            marker=response.get("Marker"),
        )

    async def list_access_keys(self, user_name: str) -> list[AccessKey]:
        """Fetch every access key of an IAM user."""
        try:
            raw_keys = await self._client.list_access_keys(user_name)
        except (BotoCoreError, ClientError) as e:
            logger.exception("Failed to list access keys for %s", user_name)
            raise DirectoryServiceError("ListAccessKeys", str(e)) from e

        return [
            AccessKey.create(
                key_id=raw["AccessKeyId"],
                user_name=raw.get("UserName", user_name),
                status=raw.get("Status", "Active"),
                created_at=raw.get("CreateDate"),
            )
            for raw in raw_keys
        ]

    async def get_access_key_last_used(self, key_id: str) -> LastUsedRecord:
        """Fetch the last-used record of an access key."""
        try:
            response = await self._client.get_access_key_last_used(key_id)
        except (BotoCoreError, ClientError) as e:
            raise DirectoryServiceError("GetAccessKeyLastUsed", str(e)) from e

        info = response.get("AccessKeyLastUsed", {})
        return LastUsedRecord(
            used_at=info.get("LastUsedDate"),
            service_name=self._applicable(info.get("ServiceName")),
            region=self._applicable(info.get("Region")),
        )

    async def set_access_key_status(self, user_name: str, key_id: str, status: KeyStatus) -> None:
        """Change the status of an access key."""
        try:
            await self._client.update_access_key(user_name, key_id, status.aws_value)
        except (BotoCoreError, ClientError) as e:
            raise MutationError(user_name, key_id, str(e)) from e

    @staticmethod
    def _map_user(raw: dict[str, Any]) -> User:
        """Map a raw ListUsers entry to the domain entity."""
        return User(
            name=raw["UserName"],
            user_id=raw.get("UserId"),
            arn=raw.get("Arn"),
            created_at=raw.get("CreateDate"),
        )

    @staticmethod
    def _applicable(value: str | None) -> str | None:
        return None if value in (None, _NOT_APPLICABLE) else value
