from __future__ import annotations

from dataclasses import dataclass
from typing import AnyStr, Generic


@dataclass(frozen=True)
class Span:
    """A matched delimiter (offsets refer to the text being split)."""

    start: int
    end: int

    def __len__(self) -> int:
        return self.end - self.start


@dataclass(frozen=True)
class Piece(Generic[AnyStr]):
    """A contiguous piece of the source text.

    Only the bounds are stored; the text is sliced when asked for.
    """

    source: AnyStr
    start: int
    end: int

    @property
    def text(self) -> AnyStr:
        return self.source[self.start : self.end]

    @property
    def bounds(self) -> tuple[int, int]:
        return (self.start, self.end)

    def view(self) -> memoryview:
        """Zero-copy view of a bytes-like source."""
        if isinstance(self.source, str):
            raise TypeError("view() requires a bytes-like source, got str")
        return memoryview(self.source)[self.start : self.end]

    def __len__(self) -> int:
        return self.end - self.start

    def __hash__(self) -> int:
        # Bounds only: equal pieces share bounds, and bytearray sources
        # are unhashable.
        return hash((self.start, self.end))

    def __repr__(self) -> str:
        return f"Piece({self.start}, {self.end}, {self.text!r})"
