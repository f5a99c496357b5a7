"""Forbidden-domain lookups over reversed domain suffixes."""

from __future__ import annotations

from collections.abc import Iterable

import structlog

from .domain import LABEL_SEPARATOR, Domain

log = structlog.get_logger()


class DomainChecker:
    """Set of forbidden domains; a domain is blocked with all its subdomains.

    Build it once, then share it: ``is_forbidden`` never writes, so any number
    of readers can query a fully built checker. ``add`` is for callers that
    grow the block-list before handing the checker out.
    """

    def __init__(self, forbidden: Iterable[Domain] = ()) -> None:
        self._forbidden_reversed: set[str] = set()
        declared = 0
        for domain in forbidden:
            self._forbidden_reversed.add(domain.reversed)
            declared += 1
        log.debug("checker_built", declared=declared, unique=len(self._forbidden_reversed))

    def add(self, domain: Domain) -> None:
        self._forbidden_reversed.add(domain.reversed)

    def is_forbidden(self, domain: Domain) -> bool:
        """True if the domain or one of its ancestor domains is forbidden."""
        return self.matching_rule(domain) is not None

    def matching_rule(self, domain: Domain) -> Domain | None:
        """Return the shortest forbidden suffix covering ``domain``, if any.

        Probes ``ru``, ``ru.gdz``, ``ru.gdz.math`` for ``math.gdz.ru``, one
        set lookup per label.
        """
        suffix = ""
        for i, label in enumerate(domain.reversed.split(LABEL_SEPARATOR)):
            suffix = label if i == 0 else suffix + LABEL_SEPARATOR + label
            if suffix in self._forbidden_reversed:
                return Domain(LABEL_SEPARATOR.join(reversed(suffix.split(LABEL_SEPARATOR))))
        return None

    def __contains__(self, domain: object) -> bool:
        return isinstance(domain, Domain) and domain.reversed in self._forbidden_reversed

    def __len__(self) -> int:
        return len(self._forbidden_reversed)
