"""Autocomplete suggestions from a fixed phrase catalog."""

import logging
from collections.abc import Sequence

from corpdash.core.config import DEFAULT_CATALOG

logger = logging.getLogger(__name__)

DEFAULT_MAX_RESULTS = 8
POPULAR_COUNT = 6


def suggest(
    query: str | None,
    catalog: Sequence[str] = DEFAULT_CATALOG,
    max_results: int = DEFAULT_MAX_RESULTS,
    popular_count: int = POPULAR_COUNT,
) -> list[str]:
    """Return catalog phrases containing ``query``, in catalog order.

    A blank query returns the first ``popular_count`` phrases instead.
    """
    q = (query or "").strip().lower()
    if not q:
        return list(catalog[:popular_count])
    matches = [s for s in catalog if q in s.lower()]
    logger.debug("suggest(%r): %d matches", q, len(matches))
    return matches[:max_results]
