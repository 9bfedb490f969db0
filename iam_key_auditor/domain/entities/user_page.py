"""One page of a paginated user listing."""

from dataclasses import dataclass

from .user import User


@dataclass(frozen=True, slots=True)
class UserPage:
    """Users returned by a single ListUsers call."""

    users: tuple[User, ...]
    is_truncated: bool = False
    marker: str | None = None

    @property
    def next_marker(self) -> str | None:
        """Continuation marker for the following page, if any."""
        return self.marker if self.is_truncated else None
