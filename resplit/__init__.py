"""resplit - delimiter-preserving regex splitting."""

from .api import RegexSplitter, iter_pieces, split_inclusive, split_inclusive_left
from .runtime.offsets import check_contiguous, piece_bounds
from .split_config import SplitConfig
from .splitter import BoundarySplitter
from .types import Piece, Span

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "BoundarySplitter",
    "Piece",
    "RegexSplitter",
    "Span",
    "SplitConfig",
    "check_contiguous",
    "iter_pieces",
    "piece_bounds",
    "split_inclusive",
    "split_inclusive_left",
]
