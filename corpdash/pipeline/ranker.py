"""Relevance ranking for search candidates.

Relevance scores are static per candidate (0-100); the query only narrows the
set. Order: relevance desc, then timestamp desc (newer first). Python's sort
is stable, so candidates with equal keys keep their original order.
"""

import logging
from datetime import datetime

from corpdash.core.schemas import SearchCandidate, SearchFilters
from corpdash.pipeline.matcher import build_filters, run_filter_chain

logger = logging.getLogger(__name__)


def rank_key(candidate: SearchCandidate) -> tuple[int, int]:
    """Sort key giving relevance desc, timestamp desc under an ascending sort."""
    return (-candidate.relevance, -candidate.timestamp)


def sort_candidates(candidates: list[SearchCandidate]) -> list[SearchCandidate]:
    """Return a new list ordered by relevance then recency."""
    return sorted(candidates, key=rank_key)


def rank(
    candidates: list[SearchCandidate],
    query: str | None,
    filters: SearchFilters | None = None,
    now: datetime | None = None,
) -> list[SearchCandidate]:
    """Filter candidates by query and facets, then order them.

    Args:
        candidates: The fixed candidate set; never mutated.
        query: Free-text query; blank matches everything.
        filters: Facet filters; defaults to no restrictions.
        now: Reference time for recency windows (defaults to local now).

    Returns:
        A new ordered list, possibly empty.
    """
    filters = filters or SearchFilters()
    matched = run_filter_chain(candidates, build_filters(query, filters, now))
    ranked = sort_candidates(matched)
    logger.debug("Ranked %d of %d candidates for query %r", len(ranked), len(candidates), query)
    return ranked
