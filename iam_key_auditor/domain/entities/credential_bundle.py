"""Credential bundle: one user with all of its access keys."""

from dataclasses import dataclass

from .access_key import AccessKey
from .user import User


@dataclass(frozen=True, slots=True)
class CredentialBundle:
    """A user paired with every access key it had at fetch time."""

    user: User
    access_keys: tuple[AccessKey, ...] = ()

    @property
    def is_empty(self) -> bool:
        """Check if the user has no access keys to evaluate."""
        return not self.access_keys

    @property
    def key_ids(self) -> list[str]:
        """Access key IDs in bundle order."""
        return [key.key_id for key in self.access_keys]
