"""Policy for access keys whose last-used lookup failed."""

from enum import StrEnum, auto


class EnrichmentFailurePolicy(StrEnum):
    """What to do with a key when its usage record cannot be read."""

    NEVER_USED = auto()
    DROP = auto()

    def __str__(self) -> str:
        return self.value

    @property
    def keeps_key(self) -> bool:
        """Check if the key stays in its bundle."""
        return self is EnrichmentFailurePolicy.NEVER_USED
