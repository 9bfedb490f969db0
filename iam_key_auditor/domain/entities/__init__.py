"""Domain entities - Objects with identity and lifecycle."""

from .access_key import AccessKey
from .credential_bundle import CredentialBundle
from .user import User
from .user_page import UserPage

__all__ = [
    "AccessKey",
    "CredentialBundle",
    "User",
    "UserPage",
]
