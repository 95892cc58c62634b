"""JSON Lines file sink for exporting settlement summaries."""

import json
from pathlib import Path
from typing import TextIO

from account_sim.exceptions import SinkError
from account_sim.logging import get_logger
from account_sim.models import MonthlyStatement
from account_sim.sinks.serialization import to_dict

logger = get_logger(__name__)


class JsonFileSink:
    """Append statements to ``<output_dir>/statements.jsonl``."""

    FILENAME = "statements.jsonl"

    def __init__(self, output_dir: str | Path, pretty: bool = False) -> None:
        """Initialize JSON file sink.

        Parameters
        ----------
        output_dir : str | Path
            Directory to write the statements file into.
        pretty : bool
            Indent each JSON object. The output is then no longer one
            object per line.
        """
        self.output_dir = Path(output_dir)
        self.pretty = pretty
        self._file: TextIO | None = None
        self._count = 0

    @property
    def file_path(self) -> Path:
        return self.output_dir / self.FILENAME

    def write_statement(self, statement: MonthlyStatement) -> None:
        """Write one statement as a JSON object."""
        data = to_dict(statement)
        try:
            if self._file is None:
                self.output_dir.mkdir(parents=True, exist_ok=True)
                self._file = open(self.file_path, "w", encoding="utf-8")
            if self.pretty:
                self._file.write(json.dumps(data, indent=2, ensure_ascii=False) + "\n")
            else:
                self._file.write(json.dumps(data, ensure_ascii=False) + "\n")
        except OSError as exc:
            raise SinkError(f"Cannot write to {self.file_path}: {exc}") from exc
        self._count += 1

    def write_batch(self, statements: list[MonthlyStatement]) -> None:
        """Write several statements in order."""
        for statement in statements:
            self.write_statement(statement)

    def close(self) -> None:
        """Flush and close the output file."""
        if self._file is not None:
            self._file.close()
            self._file = None
        logger.info("Wrote %d statements to %s", self._count, self.file_path)
