"""Line-oriented input: a count line followed by that many domain lines."""

from __future__ import annotations

import re
from typing import BinaryIO

import structlog

from .domain import Domain

log = structlog.get_logger()

_LEADING_COUNT_RE = re.compile(r"\s*(\d+)", re.ASCII)


class InputError(Exception):
    """Raised when the input stream does not match the declared layout."""


def read_line(stream: BinaryIO, encoding: str = "utf-8") -> str | None:
    """Read one line without its newline and trailing carriage return.

    Returns None at end of stream. Undecodable bytes are kept as surrogates.
    """
    raw = stream.readline()
    if not raw:
        return None
    if raw.endswith(b"\n"):
        raw = raw[:-1]
    if raw.endswith(b"\r"):
        raw = raw[:-1]
    return raw.decode(encoding, errors="surrogateescape")


def read_count(stream: BinaryIO, encoding: str = "utf-8") -> int:
    # Leading whitespace is skipped and anything after the digits ignored.
    line = read_line(stream, encoding)
    if line is None:
        raise InputError("expected a count line, got end of input")
    match = _LEADING_COUNT_RE.match(line)
    if match is None:
        raise InputError(f"malformed count line: {line!r}")
    return int(match.group(1))


def read_domains(stream: BinaryIO, count: int, encoding: str = "utf-8") -> list[Domain]:
    """Read exactly ``count`` lines as domains."""
    domains: list[Domain] = []
    for i in range(count):
        line = read_line(stream, encoding)
        if line is None:
            raise InputError(f"expected {count} domain lines, got {i}")
        domains.append(Domain(line))
    log.debug("domains_read", count=count)
    return domains
