from __future__ import annotations

import logging
import sys
from collections.abc import Iterable
from pathlib import Path
from typing import Protocol, TextIO

logger = logging.getLogger(__name__)


class ReportSink(Protocol):
    def write(self, lines: Iterable[str]) -> Path | None:  # pragma: no cover
        ...


class TextReportSink:
    """Write report lines, newline-terminated, to a stream or a UTF-8 text file.

    With ``out_path`` the file is (over)written and its path returned; otherwise
    lines go to ``stream`` (stdout by default) and None is returned.
    """

    def __init__(
        self, stream: TextIO | None = None, out_path: str | Path | None = None
    ) -> None:
        if stream is not None and out_path is not None:
            raise ValueError("pass either stream or out_path, not both")
        self.stream = stream
        self.out_path = Path(out_path) if out_path is not None else None

    def write(self, lines: Iterable[str]) -> Path | None:
        if self.out_path is None:
            self._write_to(self.stream or sys.stdout, lines)
            return None

        self.out_path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.out_path, "w", encoding="utf-8", newline="\n") as fp:
            count = self._write_to(fp, lines)
        logger.debug("Wrote %d report line(s) to %s", count, self.out_path)
        return self.out_path

    @staticmethod
    def _write_to(fp: TextIO, lines: Iterable[str]) -> int:
        count = 0
        for line in lines:
            fp.write(line + "\n")
            count += 1
        return count
