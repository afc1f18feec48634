from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from .constants import DEFAULT_MODE


@dataclass(frozen=True)
class SplitConfig:
    """Controls how a split attaches delimiters and compiles string patterns."""

    mode: Literal["delimiter_end", "delimiter_start"] = DEFAULT_MODE

    # Only used when the pattern is passed as a str/bytes source.
    flags: int = 0
