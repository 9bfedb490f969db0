"""Run mode value object."""

import re
from collections.abc import Iterable
from enum import StrEnum, auto
from typing import Self

_DESTRUCTIVE_FLAG = re.compile(r"--destructive")


class RunMode(StrEnum):
    """Whether a run only reports or also disables stale keys."""

    REPORT_ONLY = auto()
    DESTRUCTIVE = auto()

    def __str__(self) -> str:
        return self.value

    @property
    def is_destructive(self) -> bool:
        """Check if this mode mutates key status."""
        return self is RunMode.DESTRUCTIVE

    @classmethod
    def from_argv(cls, argv: Iterable[str]) -> Self:
        """Select the mode from process arguments."""
        if any(_DESTRUCTIVE_FLAG.search(arg) for arg in argv):
            return cls.DESTRUCTIVE
        return cls.REPORT_ONLY
