"""Console report writer."""

from __future__ import annotations

import sys
from typing import TextIO


class ConsoleReportWriter:
    """Writes report lines to standard output."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def write(self, line: str) -> None:
        stream = self._stream or sys.stdout
        stream.write(f"{line}\n")
        stream.flush()
