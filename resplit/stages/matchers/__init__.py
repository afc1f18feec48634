from .regex import compile_pattern, finditer_spans
from .spans import iter_spans, to_span

__all__ = ["compile_pattern", "finditer_spans", "iter_spans", "to_span"]
