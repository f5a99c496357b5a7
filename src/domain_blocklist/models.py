from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel

from .domain import Domain


class Verdict(StrEnum):
    BAD = "Bad"
    GOOD = "Good"


class CheckResult(BaseModel):
    """Verdict for a single query domain."""

    model_config = {"arbitrary_types_allowed": True, "frozen": True}

    domain: Domain
    verdict: Verdict


class RunStats(BaseModel):
    """Statistics for a single run."""

    forbidden_declared: int = 0
    forbidden_unique: int = 0
    queries: int = 0
    bad_count: int = 0
    good_count: int = 0
