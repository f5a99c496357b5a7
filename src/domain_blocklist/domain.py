"""Domain names stored in reversed label order."""

from __future__ import annotations

from functools import total_ordering

LABEL_SEPARATOR = "."


@total_ordering
class Domain:
    """An immutable domain name keyed by its reversed form.

    ``math.gdz.ru`` is stored as ``ru.gdz.math`` so that "A is an ancestor of
    or equal to B" becomes "reversed(A) is a whole-label prefix of
    reversed(B)". Splitting is a plain ``str.split``: empty labels from
    leading, trailing or doubled dots are kept, and no case folding or
    syntax validation happens.
    """

    __slots__ = ("_reversed",)

    def __init__(self, raw: str) -> None:
        object.__setattr__(self, "_reversed", _reverse_labels(raw))

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def reversed(self) -> str:
        return self._reversed

    @property
    def labels(self) -> tuple[str, ...]:
        """Labels in natural order, top-level label last."""
        return tuple(reversed(self._reversed.split(LABEL_SEPARATOR)))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Domain):
            return NotImplemented
        return self._reversed == other._reversed

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Domain):
            return NotImplemented
        return self._reversed < other._reversed

    def __hash__(self) -> int:
        return hash(self._reversed)

    def __str__(self) -> str:
        return _reverse_labels(self._reversed)

    def __repr__(self) -> str:
        return f"Domain({str(self)!r})"


def _reverse_labels(name: str) -> str:
    return LABEL_SEPARATOR.join(reversed(name.split(LABEL_SEPARATOR)))
