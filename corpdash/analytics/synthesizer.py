"""Synthetic dashboard analytics: a bounded random walk of daily metrics.

Each metric starts from a random seed level, takes one bounded random step
per day and is clamped into a fixed band, so no value ever leaves its band
regardless of cumulative drift. All randomness flows through the ``rng``
argument; pass a seeded ``random.Random`` for reproducible output.
"""

import logging
import math
import random
from datetime import datetime, timedelta

from pydantic import BaseModel, ConfigDict

from corpdash.core.latency import simulate_latency
from corpdash.core.schemas import (
    AnalyticsDataset,
    AnalyticsPoint,
    BreakdownEntry,
    HeatmapCell,
)

logger = logging.getLogger(__name__)

SUPPORTED_PERIODS = (7, 14, 30)


class WalkSpec(BaseModel):
    """Seed range, per-day step range and clamp band for one metric."""

    model_config = ConfigDict(frozen=True)

    seed: tuple[int, int]
    step: tuple[int, int]
    bounds: tuple[int, int]


DOCUMENTS = WalkSpec(seed=(800, 1200), step=(-40, 60), bounds=(500, 5000))
AI_OPS = WalkSpec(seed=(2500, 4200), step=(-120, 180), bounds=(800, 12000))
TIME_SAVED = WalkSpec(seed=(80, 180), step=(-6, 10), bounds=(20, 600))
ACCURACY = WalkSpec(seed=(90, 96), step=(-1, 2), bounds=(80, 100))

# (name, source metric, share of the metric's total)
TASK_SPLIT: tuple[tuple[str, str, float], ...] = (
    ("Анализ документов", "documents", 0.35),
    ("Обработка изображений", "ai_ops", 0.25),
    ("Переводы", "ai_ops", 0.2),
    ("Генерация контента", "ai_ops", 0.2),
)
SOURCE_SPLIT: tuple[tuple[str, float], ...] = (
    ("Загрузки", 0.4),
    ("Интеграции", 0.35),
    ("Email", 0.15),
    ("Другое", 0.1),
)

HEATMAP_DAYS = range(7)
HEATMAP_HOURS = range(8, 21)
HEATMAP_MAX = 8


def rnd(rng: random.Random, lo: int, hi: int, step: int = 1) -> int:
    """Uniform random multiple of ``step`` offset from ``lo``, within [lo, hi]."""
    return lo + step * rng.randint(0, (hi - lo) // step)


def clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))


def round_half_up(value: float, digits: int = 0) -> float:
    """Round like a dashboard does: halves go up, not to even."""
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


def _seed(rng: random.Random, spec: WalkSpec) -> int:
    return rnd(rng, *spec.seed)


def _step(rng: random.Random, value: float, spec: WalkSpec) -> float:
    return clamp(value + rnd(rng, *spec.step), *spec.bounds)


def build_points(
    period_days: int,
    rng: random.Random,
    now: datetime | None = None,
) -> list[AnalyticsPoint]:
    """Generate ``period_days`` daily points, oldest first, newest at ``now``."""
    now = now or datetime.now().astimezone()
    docs = _seed(rng, DOCUMENTS)
    ops = _seed(rng, AI_OPS)
    saved = _seed(rng, TIME_SAVED)
    acc = _seed(rng, ACCURACY)

    points: list[AnalyticsPoint] = []
    for days_ago in range(period_days - 1, -1, -1):
        docs = _step(rng, docs, DOCUMENTS)
        ops = _step(rng, ops, AI_OPS)
        saved = _step(rng, saved, TIME_SAVED)
        acc = _step(rng, acc, ACCURACY)
        points.append(
            AnalyticsPoint(
                date=now - timedelta(days=days_ago),
                documents=int(round_half_up(docs)),
                ai_ops=int(round_half_up(ops)),
                time_saved_hours=int(round_half_up(saved)),
                accuracy=round_half_up(acc, 1),
            )
        )
    return points


def task_breakdown(total_docs: int, total_ops: int) -> list[BreakdownEntry]:
    totals = {"documents": total_docs, "ai_ops": total_ops}
    return [
        BreakdownEntry(name=name, value=int(round_half_up(totals[metric] * share)))
        for name, metric, share in TASK_SPLIT
    ]


def source_breakdown(total_docs: int) -> list[BreakdownEntry]:
    return [
        BreakdownEntry(name=name, value=int(round_half_up(total_docs * share)))
        for name, share in SOURCE_SPLIT
    ]


def activity_heatmap(rng: random.Random) -> list[HeatmapCell]:
    """Weekday x working-hour grid of independent noise, not tied to the series."""
    return [
        HeatmapCell(day=day, hour=hour, value=rnd(rng, 0, HEATMAP_MAX))
        for day in HEATMAP_DAYS
        for hour in HEATMAP_HOURS
    ]


def synthesize(
    period_days: int,
    rng: random.Random | None = None,
    now: datetime | None = None,
) -> AnalyticsDataset:
    """Produce a bounded random-walk dataset for the last ``period_days`` days.

    Args:
        period_days: One of 7, 14 or 30.
        rng: Random stream; defaults to an entropy-seeded ``random.Random``.
        now: Date of the newest point (defaults to local now).

    Raises:
        ValueError: If ``period_days`` is not a supported period.
    """
    if period_days not in SUPPORTED_PERIODS:
        msg = f"period_days must be one of {SUPPORTED_PERIODS}, got {period_days}"
        raise ValueError(msg)
    rng = rng or random.Random()

    points = build_points(period_days, rng, now)
    total_docs = sum(p.documents or 0 for p in points)
    total_ops = sum(p.ai_ops or 0 for p in points)
    logger.debug(
        "Synthesized %d days: %d documents, %d AI operations",
        period_days, total_docs, total_ops,
    )

    return AnalyticsDataset(
        points=points,
        by_task=task_breakdown(total_docs, total_ops),
        sources=source_breakdown(total_docs),
        heatmap=activity_heatmap(rng),
    )


async def synthesize_analytics(
    period_days: int,
    rng: random.Random | None = None,
    latency: float = 0.35,
    now: datetime | None = None,
) -> AnalyticsDataset:
    """``synthesize`` behind a simulated network delay."""
    await simulate_latency(latency)
    dataset = synthesize(period_days, rng, now)
    logger.info("Analytics ready for %d days", period_days)
    return dataset
