from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import replace
from typing import Any, AnyStr, Literal

from .constants import DELIMITER_END, DELIMITER_START
from .split_config import SplitConfig
from .splitter import BoundarySplitter
from .stages.matchers.regex import compile_pattern, finditer_spans
from .stages.protocols import Matcher

logger = logging.getLogger(__name__)

__all__ = [
    "RegexSplitter",
    "iter_pieces",
    "split_inclusive",
    "split_inclusive_left",
]


def iter_pieces(
    pattern: Any, text: AnyStr, *, config: SplitConfig | None = None
) -> BoundarySplitter[AnyStr]:
    """Return a lazy splitter over ``text`` using ``config.mode``.

    Each item is a :class:`~resplit.types.Piece` carrying its offsets.
    """
    cfg = config or SplitConfig()
    matcher = compile_pattern(pattern, cfg.flags)
    logger.debug("Splitting %d-long text in %s mode", len(text), cfg.mode)
    return BoundarySplitter(text, finditer_spans(matcher, text), cfg.mode)


def split_inclusive(
    pattern: Any, text: AnyStr, *, config: SplitConfig | None = None
) -> Iterator[AnyStr]:
    """Split ``text`` on ``pattern``, keeping each match at the end of a piece.

    >>> list(split_inclusive(r"\\r?\\n", "Mary had a little lamb\\nlittle lamb"))
    ['Mary had a little lamb\\n', 'little lamb']
    """
    cfg = replace(config or SplitConfig(), mode=DELIMITER_END)
    return (piece.text for piece in iter_pieces(pattern, text, config=cfg))


def split_inclusive_left(
    pattern: Any, text: AnyStr, *, config: SplitConfig | None = None
) -> Iterator[AnyStr]:
    """Split ``text`` on ``pattern``, keeping each match at the start of a piece.

    >>> list(split_inclusive_left(r"\\r?\\n", "Mary had a little lamb\\nlittle lamb"))
    ['Mary had a little lamb', '\\nlittle lamb']
    """
    cfg = replace(config or SplitConfig(), mode=DELIMITER_START)
    return (piece.text for piece in iter_pieces(pattern, text, config=cfg))


class RegexSplitter:
    """A compiled pattern bound to both inclusive split operations."""

    def __init__(self, pattern: Any, config: SplitConfig | None = None) -> None:
        self.config = config or SplitConfig()
        self.matcher: Matcher = compile_pattern(pattern, self.config.flags)

    def pieces(
        self,
        text: AnyStr,
        mode: Literal["delimiter_end", "delimiter_start"] | None = None,
    ) -> BoundarySplitter[AnyStr]:
        cfg = self.config if mode is None else replace(self.config, mode=mode)
        return iter_pieces(self.matcher, text, config=cfg)

    def split_inclusive(self, text: AnyStr) -> Iterator[AnyStr]:
        return (piece.text for piece in self.pieces(text, DELIMITER_END))

    def split_inclusive_left(self, text: AnyStr) -> Iterator[AnyStr]:
        return (piece.text for piece in self.pieces(text, DELIMITER_START))

    def __repr__(self) -> str:
        pattern = getattr(self.matcher, "pattern", self.matcher)
        return f"RegexSplitter({pattern!r}, mode={self.config.mode!r})"
