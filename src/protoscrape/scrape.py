"""Pattern scraping over the source text of generated functions.

Generated message and service code follows fixed templates, so the source of
its accessor functions is the only place the erased structure survives. This
module reads that source and returns the captured groups of every match.
"""

from __future__ import annotations

import inspect
import re
from collections.abc import Callable
from typing import Any

import structlog

logger = structlog.get_logger(__name__)


def get_source(func: Callable[..., Any]) -> str | None:
    """Return the source text of a callable, or None if it is unavailable."""
    try:
        return inspect.getsource(func)
    except (OSError, TypeError) as e:
        logger.debug(
            "source unavailable",
            func=getattr(func, "__qualname__", repr(func)),
            error=str(e),
        )
        return None


def scrape_source(
    func_or_source: Callable[..., Any] | str,
    pattern: re.Pattern[str],
) -> list[tuple[str, ...]]:
    """Collect the capture groups of every match of pattern, in source order.

    Args:
        func_or_source: A function whose source is scraped, or the source
            text itself.
        pattern: Compiled pattern with capture groups.

    Returns:
        One tuple of groups per non-overlapping match; empty when nothing
        matches or the source cannot be read.
    """
    if isinstance(func_or_source, str):
        source = func_or_source
    else:
        source = get_source(func_or_source)
        if source is None:
            return []

    # finditer keeps no state on the pattern between calls
    return [m.groups() for m in pattern.finditer(source)]
