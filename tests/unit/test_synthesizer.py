"""Tests for the bounded random-walk analytics synthesizer."""

import asyncio
import random
from datetime import datetime, timedelta, timezone
from unittest.mock import AsyncMock, patch

import pytest

from corpdash.analytics.synthesizer import (
    ACCURACY,
    AI_OPS,
    DOCUMENTS,
    TIME_SAVED,
    WalkSpec,
    activity_heatmap,
    clamp,
    rnd,
    round_half_up,
    source_breakdown,
    synthesize,
    synthesize_analytics,
    task_breakdown,
)

NOW = datetime(2026, 3, 15, 12, 0, tzinfo=timezone.utc)


class _ExtremeRandom(random.Random):
    """Always picks the top (or bottom) of every integer range."""

    def __init__(self, high: bool) -> None:
        super().__init__(0)
        self._high = high

    def randint(self, a: int, b: int) -> int:
        return b if self._high else a


# ---------------------------------------------------------------------------
# Primitives
# ---------------------------------------------------------------------------


class TestPrimitives:
    def test_rnd_within_bounds(self) -> None:
        rng = random.Random(1)
        values = [rnd(rng, -40, 60) for _ in range(500)]
        assert min(values) >= -40
        assert max(values) <= 60

    def test_rnd_respects_step(self) -> None:
        rng = random.Random(2)
        assert all(rnd(rng, 0, 100, 10) % 10 == 0 for _ in range(100))

    def test_rnd_reaches_both_ends(self) -> None:
        rng = random.Random(3)
        values = {rnd(rng, 0, 2) for _ in range(200)}
        assert values == {0, 1, 2}

    def test_clamp(self) -> None:
        assert clamp(5, 0, 3) == 3
        assert clamp(-1, 0, 3) == 0
        assert clamp(2, 0, 3) == 2

    def test_round_half_up(self) -> None:
        assert round_half_up(2.5) == 3
        assert round_half_up(3.5) == 4
        assert round_half_up(94.25, 1) == 94.3
        assert round_half_up(-0.5) == 0


# ---------------------------------------------------------------------------
# synthesize
# ---------------------------------------------------------------------------


def _assert_in(value: float | None, spec: WalkSpec) -> None:
    assert value is not None
    lo, hi = spec.bounds
    assert lo <= value <= hi


class TestSynthesize:
    @pytest.mark.parametrize("period", [7, 14, 30])
    def test_length_matches_period(self, period: int) -> None:
        dataset = synthesize(period, random.Random(period), NOW)
        assert len(dataset.points) == period

    @pytest.mark.parametrize("seed", range(25))
    def test_values_stay_in_bounds(self, seed: int) -> None:
        dataset = synthesize(30, random.Random(seed), NOW)
        for p in dataset.points:
            _assert_in(p.documents, DOCUMENTS)
            _assert_in(p.ai_ops, AI_OPS)
            _assert_in(p.time_saved_hours, TIME_SAVED)
            _assert_in(p.accuracy, ACCURACY)

    def test_upward_drift_is_clamped(self) -> None:
        dataset = synthesize(30, _ExtremeRandom(high=True), NOW)
        assert dataset.points[-1].accuracy == 100
        assert all(p.accuracy is not None and p.accuracy <= 100 for p in dataset.points)

    def test_downward_drift_is_clamped(self) -> None:
        dataset = synthesize(30, _ExtremeRandom(high=False), NOW)
        assert dataset.points[-1].accuracy == 80
        assert all(p.accuracy is not None and p.accuracy >= 80 for p in dataset.points)

    def test_first_point_steps_from_seed(self) -> None:
        dataset = synthesize(7, _ExtremeRandom(high=True), NOW)
        first = dataset.points[0]
        assert first.documents == 1200 + 60
        assert first.ai_ops == 4200 + 180
        assert first.time_saved_hours == 180 + 10
        assert first.accuracy == 96 + 2

    def test_dates_oldest_first_newest_today(self) -> None:
        dataset = synthesize(14, random.Random(0), NOW)
        assert dataset.points[-1].date == NOW
        assert dataset.points[0].date == NOW - timedelta(days=13)
        dates = [p.date for p in dataset.points]
        assert dates == sorted(dates)

    def test_same_seed_same_output(self) -> None:
        a = synthesize(14, random.Random(42), NOW)
        b = synthesize(14, random.Random(42), NOW)
        assert a == b

    def test_default_rng(self) -> None:
        assert len(synthesize(7).points) == 7

    @pytest.mark.parametrize("period", [0, 1, 8, 31, -7])
    def test_unsupported_period_raises(self, period: int) -> None:
        with pytest.raises(ValueError, match="period_days"):
            synthesize(period)


# ---------------------------------------------------------------------------
# Breakdowns
# ---------------------------------------------------------------------------


class TestBreakdowns:
    def test_task_breakdown_values(self) -> None:
        entries = task_breakdown(total_docs=1000, total_ops=2000)
        assert [(e.name, e.value) for e in entries] == [
            ("Анализ документов", 350),
            ("Обработка изображений", 500),
            ("Переводы", 400),
            ("Генерация контента", 400),
        ]

    def test_source_breakdown_sums_to_documents(self) -> None:
        entries = source_breakdown(1000)
        assert [e.value for e in entries] == [400, 350, 150, 100]
        assert sum(e.value for e in entries) == 1000

    def test_dataset_breakdowns_follow_totals(self) -> None:
        dataset = synthesize(30, random.Random(7), NOW)
        total_docs = sum(p.documents or 0 for p in dataset.points)
        total_ops = sum(p.ai_ops or 0 for p in dataset.points)
        assert len(dataset.by_task) == 4
        assert len(dataset.sources) == 4
        # four rounded shares of the whole total
        assert abs(sum(e.value for e in dataset.sources) - total_docs) <= 2
        ops_share = sum(e.value for e in dataset.by_task[1:])
        assert abs(ops_share - total_ops * 0.65) <= 2
        assert abs(dataset.by_task[0].value - total_docs * 0.35) <= 0.5

    def test_heatmap_shape(self) -> None:
        cells = activity_heatmap(random.Random(0))
        assert len(cells) == 7 * 13
        assert {c.day for c in cells} == set(range(7))
        assert {c.hour for c in cells} == set(range(8, 21))
        assert all(0 <= c.value <= 8 for c in cells)


# ---------------------------------------------------------------------------
# synthesize_analytics
# ---------------------------------------------------------------------------


class TestSynthesizeAnalytics:
    async def test_sleeps_then_synthesizes(self) -> None:
        with patch.object(asyncio, "sleep", new_callable=AsyncMock) as mock_sleep:
            dataset = await synthesize_analytics(14, random.Random(0), now=NOW)
        mock_sleep.assert_called_once_with(0.35)
        assert len(dataset.points) == 14
