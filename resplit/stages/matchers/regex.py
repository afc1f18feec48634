from __future__ import annotations

import logging
import re
from collections.abc import Iterator
from typing import Any

from ...types import Span
from ..protocols import Matcher
from .spans import iter_spans

logger = logging.getLogger(__name__)


def compile_pattern(pattern: Any, flags: int = 0) -> Matcher:
    """Return a matcher for ``pattern``.

    Compiled patterns (anything exposing ``finditer``) are used as-is;
    str/bytes sources go through :func:`re.compile`.
    """
    if isinstance(pattern, str | bytes):
        logger.debug("Compiling pattern %r with flags %d", pattern, flags)
        return re.compile(pattern, flags)
    if callable(getattr(pattern, "finditer", None)):
        return pattern
    raise TypeError(
        f"Expected a str/bytes pattern or an object with finditer(), got "
        f"{type(pattern).__name__}"
    )


def finditer_spans(matcher: Matcher, text: Any) -> Iterator[Span]:
    # finditer() is deferred until the first span is pulled.
    yield from iter_spans(matcher.finditer(text))
