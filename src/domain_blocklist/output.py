from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from typing import TextIO

import structlog

from .models import CheckResult, RunStats

log = structlog.get_logger()


class OutputHandler(ABC):
    @abstractmethod
    def emit_result(self, result: CheckResult) -> None: ...

    @abstractmethod
    def emit_summary(self, stats: RunStats) -> None: ...


class StdoutHandler(OutputHandler):
    """One ``Bad``/``Good`` line per query; nothing else goes to stdout."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream if stream is not None else sys.stdout

    def emit_result(self, result: CheckResult) -> None:
        print(result.verdict.value, file=self.stream)

    def emit_summary(self, stats: RunStats) -> None:
        self.stream.flush()
        log.debug("verdicts_written", count=stats.queries)
