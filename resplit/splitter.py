from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from typing import Any, AnyStr, Generic, Literal

import numpy as np

from .constants import DELIMITER_END, DELIMITER_START, SPLIT_MODES
from .runtime.offsets import piece_bounds
from .stages.matchers.spans import iter_spans
from .types import Piece, Span

logger = logging.getLogger(__name__)

__all__ = ["BoundarySplitter"]


class BoundarySplitter(Generic[AnyStr]):
    """Lazily cut ``text`` at the boundaries of a stream of delimiter spans.

    In ``delimiter_end`` mode each matched delimiter closes the piece before
    it; in ``delimiter_start`` mode it opens the piece after it. The span
    source is pulled at most once per piece and never before the first
    piece is requested. Concatenating every piece gives back ``text``.

    Spans must be ascending and non-overlapping, with bounds inside ``text``.
    They may be :class:`Span` records, ``(start, end)`` pairs or match
    objects.
    """

    def __init__(
        self,
        text: AnyStr,
        spans: Iterable[Any],
        mode: Literal["delimiter_end", "delimiter_start"] = DELIMITER_END,
    ) -> None:
        if mode not in SPLIT_MODES:
            raise ValueError(
                f"Unknown split mode {mode!r}; expected one of {SPLIT_MODES}"
            )
        self.text = text
        self.mode = mode
        self._spans: Iterator[Span] = iter_spans(spans)
        self._cursor = 0
        self._started = False
        self._emitted = False
        # Set once the tail has been produced; the next call finishes the split.
        self._tail_done = False
        self._finished = False
        # delimiter_start only: the span whose start opens the next piece.
        self._pending: Span | None = None

    @property
    def finished(self) -> bool:
        return self._finished

    def __iter__(self) -> BoundarySplitter[AnyStr]:
        return self

    def __next__(self) -> Piece[AnyStr]:
        bounds = self.next_piece()
        if bounds is None:
            raise StopIteration
        start, end = bounds
        return Piece(self.text, start, end)

    def next_piece(self) -> tuple[int, int] | None:
        """Return the bounds of the next piece, or None once exhausted."""
        if self._finished:
            return None
        if self._tail_done:
            self._finished = True
            return None
        if self.mode == DELIMITER_START:
            bounds = self._next_delimiter_start()
        else:
            bounds = self._next_delimiter_end()
        if bounds is None:
            self._finished = True
        else:
            self._emitted = True
        return bounds

    def remaining_bounds(self) -> np.ndarray:
        """Drain the splitter into an ``(n, 2)`` array of piece offsets."""
        return piece_bounds(self)

    def _next_span(self) -> Span | None:
        return next(self._spans, None)

    def _finish(self, start: int) -> tuple[int, int] | None:
        """Close the split with the tail ``text[start:]``.

        The tail is dropped when it is empty and something was already
        produced, so a delimiter touching end-of-text leaves no empty piece.
        """
        self._tail_done = True
        self._pending = None
        length = len(self.text)
        self._cursor = length
        if start < length or not self._emitted:
            logger.debug("Final piece (%d, %d)", start, length)
            return (start, length)
        logger.debug("Split exhausted at offset %d", start)
        return None

    def _next_delimiter_end(self) -> tuple[int, int] | None:
        span = self._next_span()
        if span is None:
            return self._finish(self._cursor)
        bounds = (self._cursor, span.end)
        self._cursor = span.end
        return bounds

    def _next_delimiter_start(self) -> tuple[int, int] | None:
        if not self._started:
            self._started = True
            first = self._next_span()
            if first is None:
                return self._finish(0)
            self._pending = first
            if first.start > 0:
                self._cursor = first.start
                return (0, first.start)

        current = self._pending
        assert current is not None
        following = self._next_span()
        if following is None:
            return self._finish(current.start)
        self._pending = following
        self._cursor = following.start
        return (current.start, following.start)

    def __repr__(self) -> str:
        state = "finished" if self._finished else "active"
        return (
            f"{type(self).__name__}(mode={self.mode!r}, cursor={self._cursor}, "
            f"state={state!r})"
        )
