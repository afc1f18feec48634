from __future__ import annotations

from collections.abc import Iterator
from typing import Any, Protocol


class MatchLike(Protocol):
    def start(self) -> int: ...
    def end(self) -> int: ...


class Matcher(Protocol):
    def finditer(self, string: Any) -> Iterator[MatchLike]: ...
