"""Shared pytest fixtures for domain_blocklist tests."""

from __future__ import annotations

import io
import sys
from collections.abc import Iterator

import pytest
import structlog

from domain_blocklist.checker import DomainChecker
from domain_blocklist.domain import Domain

SCENARIO_FORBIDDEN = ["gdz.ru", "maps.me", "com"]

SCENARIO_QUERIES = [
    ("gdz.ru", "Bad"),
    ("gdz.com", "Bad"),
    ("m.maps.me", "Bad"),
    ("gdz.ru.com", "Bad"),
    ("maps.com", "Bad"),
    ("gdz.ru1", "Good"),
    ("gdz.su", "Good"),
    ("supermaps.ru", "Good"),
]


def make_input(forbidden: list[str], queries: list[str], newline: str = "\n") -> io.BytesIO:
    """Build the line-oriented stdin payload for a run."""
    lines = [str(len(forbidden)), *forbidden, str(len(queries)), *queries]
    return io.BytesIO("".join(line + newline for line in lines).encode())


@pytest.fixture
def scenario_checker() -> DomainChecker:
    """Checker built from the gdz.ru / maps.me / com block-list."""
    return DomainChecker(Domain(d) for d in SCENARIO_FORBIDDEN)


@pytest.fixture(autouse=True)
def _logs_to_stderr() -> Iterator[None]:
    """Keep structlog output off stdout, which carries verdict lines only."""
    structlog.configure(logger_factory=structlog.PrintLoggerFactory(file=sys.stderr))
    try:
        yield
    finally:
        structlog.reset_defaults()
