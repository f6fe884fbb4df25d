"""Configuration models and YAML loader for the dashboard engine."""

from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field, field_validator

DEFAULT_CATALOG: tuple[str, ...] = (
    "договоры 2024",
    "презентации клиентам",
    "финансовые отчеты",
    "изображения продуктов",
    "стратегический план 2025",
    "AI аналитика эффективности",
    "отчет о продажах",
    "перевод на английский",
)

DEFAULT_CURRENCY_ORDER: tuple[str, ...] = ("RUB", "KGS", "USD", "EUR", "CNY", "KZT")


class SearchConfig(BaseModel):
    """Search pipeline settings."""

    page_size: int = Field(default=5, ge=1, le=50)
    latency_seconds: float = Field(default=0.18, ge=0.0)
    min_elapsed_seconds: float = Field(default=0.08, ge=0.0)


class AnalyticsConfig(BaseModel):
    """Analytics synthesizer settings."""

    default_period: Literal[7, 14, 30] = 7
    latency_seconds: float = Field(default=0.35, ge=0.0)
    seed: int | None = None


class CurrencyConfig(BaseModel):
    """Currency converter settings."""

    base_code: str = "RUB"
    preferred_order: list[str] = Field(default_factory=lambda: list(DEFAULT_CURRENCY_ORDER))

    @field_validator("base_code")
    @classmethod
    def base_code_not_empty(cls, v: str) -> str:
        if not v.strip():
            msg = "base_code must not be empty"
            raise ValueError(msg)
        return v.strip().upper()


class SuggestConfig(BaseModel):
    """Autocomplete settings."""

    max_results: int = Field(default=8, ge=1)
    default_count: int = Field(default=6, ge=0)
    catalog: list[str] = Field(default_factory=lambda: list(DEFAULT_CATALOG))


class Settings(BaseModel):
    """Top-level settings loaded from YAML."""

    search: SearchConfig = Field(default_factory=SearchConfig)
    analytics: AnalyticsConfig = Field(default_factory=AnalyticsConfig)
    currency: CurrencyConfig = Field(default_factory=CurrencyConfig)
    suggest: SuggestConfig = Field(default_factory=SuggestConfig)

    @classmethod
    def from_yaml(cls, path: str | Path) -> "Settings":
        """Load settings from a YAML file."""
        path = Path(path)
        if not path.exists():
            msg = f"Config file not found: {path}"
            raise FileNotFoundError(msg)
        raw: dict[str, Any] = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
        return cls.model_validate(raw)
