"""Access key status value object."""

from enum import StrEnum, auto
from typing import Self


class KeyStatus(StrEnum):
    """Status IAM assigns to an access key."""

    ACTIVE = auto()
    INACTIVE = auto()

    def __str__(self) -> str:
        return self.value

    @property
    def aws_value(self) -> str:
        """Value as the IAM API spells it."""
        return self.value.capitalize()

    @classmethod
    def from_aws(cls, value: str) -> Self:
        """Parse the IAM spelling ("Active" / "Inactive")."""
        return cls(value.lower())
