"""Console sink for settlement summaries."""

import sys
from typing import TextIO

from account_sim.logging import get_logger
from account_sim.models import MonthlyStatement

logger = get_logger(__name__)


class ConsoleSink:
    """Print one tab-separated line per settled account."""

    def __init__(self, stream: TextIO | None = None) -> None:
        """Initialize console sink.

        Parameters
        ----------
        stream : TextIO | None
            Where to write lines; ``sys.stdout`` at write time when omitted.
        """
        self.stream = stream
        self._counts: dict[str, int] = {}

    def write_statement(self, statement: MonthlyStatement) -> None:
        """Write a single settlement line."""
        print(statement.format_line(), file=self.stream or sys.stdout)
        kind = statement.kind.value
        self._counts[kind] = self._counts.get(kind, 0) + 1

    def write_batch(self, statements: list[MonthlyStatement]) -> None:
        """Write several settlement lines in order."""
        for statement in statements:
            self.write_statement(statement)

    def close(self) -> None:
        """Log a per-kind summary of what was written."""
        for kind, count in self._counts.items():
            logger.info("Console sink wrote %d %s statements", count, kind)
