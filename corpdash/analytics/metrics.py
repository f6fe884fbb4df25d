"""Helpers that read metric series out of an analytics dataset."""

import math
from typing import Literal

from corpdash.analytics.synthesizer import round_half_up
from corpdash.core.schemas import AnalyticsDataset, AnalyticsPoint, DashboardStats

NBSP = "\u00a0"

MetricKey = Literal["documents", "ai_ops", "time_saved_hours", "accuracy"]

# Used when the dataset has no points at all.
FALLBACK_STATS = DashboardStats(
    documents=1247,
    ai_ops=3892,
    time_saved_hours=156,
    accuracy_percent=94.5,
)


def metric_series(points: list[AnalyticsPoint], key: MetricKey) -> list[float]:
    """Extract one metric across points; missing values read as 0."""
    values: list[float] = []
    for p in points:
        v = getattr(p, key)
        values.append(v if isinstance(v, (int, float)) else 0)
    return values


def delta_percent(values: list[float]) -> int:
    """Percent change from the first to the last value, rounded."""
    if len(values) < 2:
        return 0
    first, last = values[0], values[-1]
    if not first:
        return 0
    return int(round_half_up((last - first) / first * 100))


def latest_stats(dataset: AnalyticsDataset) -> DashboardStats:
    """Summary stats from the newest point, filling gaps from FALLBACK_STATS."""
    if not dataset.points:
        return FALLBACK_STATS
    last = dataset.points[-1]

    def pick(value: float | None, fallback: float) -> float:
        return fallback if value is None else value

    return DashboardStats(
        documents=int(round_half_up(pick(last.documents, FALLBACK_STATS.documents))),
        ai_ops=int(round_half_up(pick(last.ai_ops, FALLBACK_STATS.ai_ops))),
        time_saved_hours=int(
            round_half_up(pick(last.time_saved_hours, FALLBACK_STATS.time_saved_hours))
        ),
        accuracy_percent=round_half_up(pick(last.accuracy, FALLBACK_STATS.accuracy_percent), 1),
    )


def format_metric(value: float, key: MetricKey) -> str:
    if not math.isfinite(value):
        return "—"
    if key == "accuracy":
        return f"{int(round_half_up(value))}%"
    if key == "time_saved_hours":
        return f"{int(round_half_up(value))} ч"
    return f"{int(round_half_up(value)):,}".replace(",", NBSP)
