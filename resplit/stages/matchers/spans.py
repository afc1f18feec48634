from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

from ...types import Span


def to_span(item: Any) -> Span:
    """Normalise a Span, a (start, end) pair or a match object."""
    if isinstance(item, Span):
        return item
    if isinstance(item, tuple) and len(item) == 2:
        start, end = item
        return Span(start=int(start), end=int(end))
    start = getattr(item, "start", None)
    end = getattr(item, "end", None)
    if callable(start) and callable(end):
        return Span(start=start(), end=end())
    raise TypeError(
        f"Expected a Span, a (start, end) pair or a match object, got {item!r}"
    )


def iter_spans(items: Iterable[Any]) -> Iterator[Span]:
    # Pulls one item per span requested; nothing is read ahead.
    for item in items:
        yield to_span(item)
