"""Port for the identity directory - driven/secondary port."""

from dataclasses import dataclass
from datetime import datetime
from typing import Protocol

from ...domain.entities import AccessKey, UserPage
from ...domain.value_objects import KeyStatus


@dataclass(frozen=True, slots=True)
class LastUsedRecord:
    """Usage record the directory keeps for one access key."""

    used_at: datetime | None = None
    service_name: str | None = None
    region: str | None = None


class DirectoryService(Protocol):
    """
    Port for reading users and access keys and updating key status.

    This is a driven (secondary) port that defines how the application
    talks to the external identity directory.
    """

    async def list_users(self, page_size: int, marker: str | None) -> UserPage:
        """
        Fetch one page of users.

        Args:
            page_size: Maximum number of users in the page.
            marker: Continuation marker from the previous page, or None.

        Raises:
            DirectoryServiceError: If the listing fails.
        """
        ...

    async def list_access_keys(self, user_name: str) -> list[AccessKey]:
        """
        Fetch every access key belonging to a user.

        Raises:
            DirectoryServiceError: If the listing fails.
        """
        ...

    async def get_access_key_last_used(self, key_id: str) -> LastUsedRecord:
        """
        Fetch the last-used record of an access key.

        Raises:
            DirectoryServiceError: If the lookup fails.
        """
        ...

    async def set_access_key_status(self, user_name: str, key_id: str, status: KeyStatus) -> None:
        """
        Change the status of an access key.

        Raises:
            MutationError: If the update fails.
        """
        ...
