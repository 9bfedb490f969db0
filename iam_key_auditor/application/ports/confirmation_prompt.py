"""Port for interactive confirmation - driven/secondary port."""

from typing import Protocol


class ConfirmationPrompt(Protocol):
    """Asks the operator a yes/no question."""

    async def confirm(self, message: str) -> bool:
        """
        Ask the operator to confirm.

        Returns:
            True only if the operator explicitly agreed.
        """
        ...
