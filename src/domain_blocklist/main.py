from __future__ import annotations

import sys
from typing import BinaryIO

import structlog

from .checker import DomainChecker
from .config import settings
from .logging_config import setup_logging
from .models import CheckResult, RunStats, Verdict
from .output import OutputHandler, StdoutHandler
from .reader import InputError, read_count, read_domains

log = structlog.get_logger()


def run(stdin: BinaryIO, handlers: list[OutputHandler], encoding: str = "utf-8") -> RunStats:
    stats = RunStats()

    # 1. Read the block-list and build the checker
    forbidden = read_domains(stdin, read_count(stdin, encoding), encoding)
    checker = DomainChecker(forbidden)
    stats.forbidden_declared = len(forbidden)
    stats.forbidden_unique = len(checker)

    # 2. Read the queries
    queries = read_domains(stdin, read_count(stdin, encoding), encoding)
    stats.queries = len(queries)

    # 3. Emit one verdict per query, in input order
    for domain in queries:
        if checker.is_forbidden(domain):
            verdict = Verdict.BAD
            stats.bad_count += 1
        else:
            verdict = Verdict.GOOD
            stats.good_count += 1
        result = CheckResult(domain=domain, verdict=verdict)
        for h in handlers:
            h.emit_result(result)

    for h in handlers:
        h.emit_summary(stats)

    log.info("run_complete", **stats.model_dump())
    return stats


def main() -> None:
    setup_logging()
    try:
        run(sys.stdin.buffer, [StdoutHandler()], settings.input_encoding)
    except InputError as e:
        log.error("input_error", error=str(e))
        raise SystemExit(2)


if __name__ == "__main__":
    main()
