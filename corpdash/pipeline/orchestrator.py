"""Orchestrator: wires filter chain, ranker, paginator and latency simulation.

Data flow:
  1. Simulated network latency (cooperative sleep)
  2. Filter chain → matched candidates
  3. Ranker → ordered candidates
  4. Paginator → requested page + total
  5. Elapsed time measured around the whole call
"""

import json
import logging
import time
from datetime import datetime

from corpdash.core.config import SearchConfig, SuggestConfig
from corpdash.core.demo_data import demo_candidates
from corpdash.core.latency import simulate_latency
from corpdash.core.schemas import RankedPage, SearchCandidate, SearchFilters
from corpdash.pipeline.paginator import paginate
from corpdash.pipeline.ranker import rank
from corpdash.pipeline.staleness import RequestSequencer
from corpdash.pipeline.suggest import suggest

logger = logging.getLogger(__name__)

MIN_ELAPSED_SECONDS = 0.08
SUGGEST_LATENCY_SECONDS = 0.12


def search_page(
    candidates: list[SearchCandidate],
    query: str | None,
    filters: SearchFilters | None,
    page: int,
    page_size: int,
    now: datetime | None = None,
    *,
    started: float | None = None,
    min_elapsed: float = MIN_ELAPSED_SECONDS,
) -> RankedPage:
    """Rank candidates and cut out one page, measuring elapsed time.

    ``started`` is a ``time.perf_counter()`` reading taken by the caller when
    latency spent before this call should count towards the elapsed time.
    """
    t0 = time.perf_counter() if started is None else started
    ranked = rank(candidates, query, filters, now)
    items, total = paginate(ranked, page, page_size)
    elapsed = max(min_elapsed, round(time.perf_counter() - t0, 2))
    return RankedPage(
        items=items,
        total=total,
        elapsed_seconds=elapsed,
        page=max(1, page),
        page_size=page_size,
    )


async def rank_and_paginate(
    query: str | None,
    filters: SearchFilters | None,
    page: int,
    page_size: int,
    *,
    candidates: list[SearchCandidate] | None = None,
    latency: float = 0.18,
    now: datetime | None = None,
    min_elapsed: float = MIN_ELAPSED_SECONDS,
) -> RankedPage:
    """Run a search against the candidate set after a simulated network delay.

    Uses the demo corpus when no candidates are given.
    """
    started = time.perf_counter()
    if candidates is None:
        candidates = demo_candidates(now)
    await simulate_latency(latency)
    result = search_page(
        candidates, query, filters, page, page_size, now,
        started=started, min_elapsed=min_elapsed,
    )
    logger.info(
        "Search %r page %d: %d items of %d total in %.2fs",
        query or "", result.page, len(result.items), result.total, result.elapsed_seconds,
    )
    return result


async def get_autocomplete_suggestions(
    query: str | None,
    config: SuggestConfig | None = None,
    latency: float = SUGGEST_LATENCY_SECONDS,
) -> list[str]:
    """Autocomplete with a short simulated delay."""
    config = config or SuggestConfig()
    await simulate_latency(latency)
    return suggest(
        query,
        config.catalog,
        max_results=config.max_results,
        popular_count=config.default_count,
    )


class SearchSession:
    """Stateful search view: applies only the newest of overlapping queries.

    Each ``run`` call is tagged by a RequestSequencer. When a newer call was
    issued while this one was waiting, its result (or its error) is dropped
    and ``run`` returns None; ``current`` keeps the last applied page.
    """

    def __init__(
        self,
        config: SearchConfig | None = None,
        candidates: list[SearchCandidate] | None = None,
    ) -> None:
        self._config = config or SearchConfig()
        self._candidates = candidates
        self._sequencer = RequestSequencer()
        self.current: RankedPage | None = None
        self.loading = False

    async def run(
        self,
        query: str | None,
        filters: SearchFilters | None = None,
        page: int = 1,
        now: datetime | None = None,
    ) -> RankedPage | None:
        seq = self._sequencer.issue()
        self.loading = True
        try:
            result = await rank_and_paginate(
                query,
                filters,
                page,
                self._config.page_size,
                candidates=self._candidates,
                latency=self._config.latency_seconds,
                now=now,
                min_elapsed=self._config.min_elapsed_seconds,
            )
        except Exception:
            if self._sequencer.is_current(seq):
                raise
            logger.debug("Dropping failure of stale request %d", seq)
            return None
        finally:
            if seq == self._sequencer.latest:
                self.loading = False
        if not self._sequencer.is_current(seq):
            logger.debug("Dropping stale result for request %d", seq)
            return None
        self.current = result
        return result


def export_page_json(page: RankedPage) -> str:
    """Export a result page as a JSON string."""
    data = {
        "total": page.total,
        "page": page.page,
        "page_count": page.page_count,
        "elapsed_seconds": page.elapsed_seconds,
        "items": [c.model_dump(exclude_none=True) for c in page.items],
    }
    return json.dumps(data, indent=2, ensure_ascii=False)
