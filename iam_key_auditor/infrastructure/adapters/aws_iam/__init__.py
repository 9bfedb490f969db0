"""AWS IAM adapter."""

from .iam_client import IamClient, IamClientConfig
from .repository import IamDirectoryService

__all__ = ["IamClient", "IamClientConfig", "IamDirectoryService"]
