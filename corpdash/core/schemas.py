"""Core data models for the dashboard search and analytics engine."""

import math
from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, computed_field

ContentKind = Literal["document", "image"]
ContentType = Literal["all", "documents", "images"]
Period = Literal["all", "today", "week", "month"]
AnalyticsPeriod = Literal[7, 14, 30]


class SearchCandidate(BaseModel):
    """A searchable document or image with a precomputed relevance score.

    Frozen — built once as demo data and only read during a query.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    kind: ContentKind
    title: str
    snippet: str = ""
    relevance: int = Field(ge=0, le=100)
    timestamp: int  # epoch millis
    author: str | None = None
    rating: float | None = Field(default=None, ge=0.0, le=5.0)
    ai_analyzed: bool | None = None
    # document metadata
    format: str | None = None
    meta: str | None = None
    # image metadata
    dimensions: str | None = None
    ocr: bool | None = None


class SearchFilters(BaseModel):
    """Facet filters passed with every query."""

    model_config = ConfigDict(frozen=True)

    type: ContentType = "all"
    period: Period = "all"
    author: str = "any"
    with_analysis: bool = False
    high_rating: bool = False


class RankedPage(BaseModel):
    """One page of ranked results plus the pre-pagination total."""

    items: list[SearchCandidate] = Field(default_factory=list)
    total: int = Field(default=0, ge=0)
    elapsed_seconds: float = Field(default=0.0, ge=0.0)
    page: int = Field(default=1, ge=1)
    page_size: int = Field(default=5, ge=1)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def page_count(self) -> int:
        return max(1, math.ceil(self.total / self.page_size))


class AnalyticsPoint(BaseModel):
    """One day of synthesized dashboard metrics."""

    date: datetime
    documents: int | None = None
    ai_ops: int | None = None
    time_saved_hours: int | None = None
    accuracy: float | None = None


class BreakdownEntry(BaseModel):
    name: str
    value: int


class HeatmapCell(BaseModel):
    day: int = Field(ge=0, le=6)
    hour: int = Field(ge=0, le=23)
    value: int = Field(ge=0)


class AnalyticsDataset(BaseModel):
    """Daily series (oldest first) plus breakdowns derived from its totals."""

    points: list[AnalyticsPoint] = Field(default_factory=list)
    by_task: list[BreakdownEntry] = Field(default_factory=list)
    sources: list[BreakdownEntry] = Field(default_factory=list)
    heatmap: list[HeatmapCell] = Field(default_factory=list)


class CurrencyRate(BaseModel):
    """Exchange rate expressed as base units per one unit of ``code``."""

    model_config = ConfigDict(frozen=True)

    code: str
    value: float
    delta: float = 0.0


class ConversionResult(BaseModel):
    """Outcome of a conversion; ``available`` is False for unparseable amounts."""

    result: float
    cross_rate: float
    available: bool = True


class DashboardStats(BaseModel):
    model_config = ConfigDict(frozen=True)

    documents: int
    ai_ops: int
    time_saved_hours: int
    accuracy_percent: float


class DashboardSnapshot(BaseModel):
    """Aggregated demo data for the dashboard home view."""

    rates: list[CurrencyRate] = Field(default_factory=list)
    items: list[SearchCandidate] = Field(default_factory=list)
    stats: DashboardStats
