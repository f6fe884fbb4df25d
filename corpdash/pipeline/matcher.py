"""Filter chain for search candidates.

Filter order:
  1. QueryTextFilter     — free-text, title OR snippet, case-insensitive
  2. ContentTypeFilter   — documents / images
  3. AuthorFilter        — exact author, case-insensitive
  4. AIAnalyzedFilter    — optional, requires ai_analyzed
  5. HighRatingFilter    — optional, rating >= 4.5
  6. RecencyFilter       — timestamp at or after the period window start

Every filter is an AND condition; none mutates its input.
"""

import calendar
import logging
from collections.abc import Callable
from datetime import datetime, timedelta

from corpdash.core.demo_data import to_millis
from corpdash.core.schemas import Period, SearchCandidate, SearchFilters

logger = logging.getLogger(__name__)

HIGH_RATING_THRESHOLD = 4.5

# A filter is a callable that takes candidates and returns a subset.
Filter = Callable[[list[SearchCandidate]], list[SearchCandidate]]


class QueryTextFilter:
    """Keep candidates whose title or snippet contains the query.

    A blank query is a no-op (passes all candidates through).
    """

    def __init__(self, query: str | None) -> None:
        self._query = (query or "").strip().lower()

    def __call__(self, candidates: list[SearchCandidate]) -> list[SearchCandidate]:
        if not self._query:
            return list(candidates)
        result = [c for c in candidates if self._matches(c)]
        _log_removed("QueryTextFilter", candidates, result)
        return result

    def _matches(self, candidate: SearchCandidate) -> bool:
        text = f"{candidate.title} {candidate.snippet or ''}".lower()
        return self._query in text


class ContentTypeFilter:
    """Restrict results to documents or images; ``all`` passes everything."""

    _KINDS = {"documents": "document", "images": "image"}

    def __init__(self, content_type: str) -> None:
        self._kind = self._KINDS.get(content_type)

    def __call__(self, candidates: list[SearchCandidate]) -> list[SearchCandidate]:
        if self._kind is None:
            return list(candidates)
        result = [c for c in candidates if c.kind == self._kind]
        _log_removed("ContentTypeFilter", candidates, result)
        return result


class AuthorFilter:
    """Keep candidates by one author; ``any`` or blank disables the filter."""

    def __init__(self, author: str | None) -> None:
        value = (author or "").strip().lower()
        self._author = "" if value == "any" else value

    def __call__(self, candidates: list[SearchCandidate]) -> list[SearchCandidate]:
        if not self._author:
            return list(candidates)
        result = [c for c in candidates if (c.author or "").lower() == self._author]
        _log_removed("AuthorFilter", candidates, result)
        return result


class AIAnalyzedFilter:
    def __init__(self, enabled: bool) -> None:
        self._enabled = enabled

    def __call__(self, candidates: list[SearchCandidate]) -> list[SearchCandidate]:
        if not self._enabled:
            return list(candidates)
        result = [c for c in candidates if c.ai_analyzed]
        _log_removed("AIAnalyzedFilter", candidates, result)
        return result


class HighRatingFilter:
    """Keep candidates rated at least 4.5; unrated candidates count as 0."""

    def __init__(self, enabled: bool, threshold: float = HIGH_RATING_THRESHOLD) -> None:
        self._enabled = enabled
        self._threshold = threshold

    def __call__(self, candidates: list[SearchCandidate]) -> list[SearchCandidate]:
        if not self._enabled:
            return list(candidates)
        result = [c for c in candidates if (c.rating or 0.0) >= self._threshold]
        _log_removed("HighRatingFilter", candidates, result)
        return result


class RecencyFilter:
    """Keep candidates whose timestamp falls inside the period window."""

    def __init__(self, period: Period, now: datetime | None = None) -> None:
        self._period = period
        self._now = now or datetime.now().astimezone()

    def __call__(self, candidates: list[SearchCandidate]) -> list[SearchCandidate]:
        start = period_start(self._period, self._now)
        if start is None:
            return list(candidates)
        start_ms = to_millis(start)
        result = [c for c in candidates if c.timestamp >= start_ms]
        _log_removed("RecencyFilter", candidates, result)
        return result


def period_start(period: Period, now: datetime) -> datetime | None:
    """Return the earliest moment admitted by ``period``, or None for ``all``."""
    if period == "today":
        return now.replace(hour=0, minute=0, second=0, microsecond=0)
    if period == "week":
        return now - timedelta(days=7)
    if period == "month":
        return _minus_one_month(now)
    return None


def _minus_one_month(moment: datetime) -> datetime:
    year, month = (moment.year, moment.month - 1) if moment.month > 1 else (moment.year - 1, 12)
    day = min(moment.day, calendar.monthrange(year, month)[1])
    return moment.replace(year=year, month=month, day=day)


def build_filters(
    query: str | None,
    filters: SearchFilters,
    now: datetime | None = None,
) -> list[Filter]:
    """Build the filter chain for a query and its facets."""
    return [
        QueryTextFilter(query),
        ContentTypeFilter(filters.type),
        AuthorFilter(filters.author),
        AIAnalyzedFilter(filters.with_analysis),
        HighRatingFilter(filters.high_rating),
        RecencyFilter(filters.period, now),
    ]


def run_filter_chain(
    candidates: list[SearchCandidate],
    filters: list[Filter],
) -> list[SearchCandidate]:
    """Apply filters in order, returning the surviving candidates."""
    result = list(candidates)
    for f in filters:
        result = f(result)
    return result


def _log_removed(
    name: str,
    before: list[SearchCandidate],
    after: list[SearchCandidate],
) -> None:
    removed = len(before) - len(after)
    if removed:
        logger.debug("%s: removed %d candidates", name, removed)
