"""Port for report output - driven/secondary port."""

from typing import Protocol


class ReportWriter(Protocol):
    """Sink for human-readable report lines."""

    def write(self, line: str) -> None:
        """Emit a single report line."""
        ...
