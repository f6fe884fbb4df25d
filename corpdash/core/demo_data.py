"""Static demo data: the searchable candidate set and the exchange-rate table.

Candidate timestamps are expressed relative to ``now`` so recency filters
behave the same whenever the demo runs.
"""

import random
from datetime import datetime

from corpdash.core.schemas import CurrencyRate, SearchCandidate

HOUR_MS = 3600 * 1000
DAY_MS = 24 * HOUR_MS

FEATURED_IDS: tuple[str, ...] = (
    "doc-q3-2024",
    "img-showcase-2024",
    "doc-plan-2025",
    "img-team-photos",
)


def to_millis(moment: datetime) -> int:
    return int(moment.timestamp() * 1000)


def demo_candidates(now: datetime | None = None) -> list[SearchCandidate]:
    """Return the fixed six-candidate search corpus anchored at ``now``."""
    now_ms = to_millis(now or datetime.now().astimezone())
    return [
        SearchCandidate(
            id="doc-q3-2024",
            kind="document",
            title="Квартальный финансовый отчет Q3 2024.docx",
            snippet=(
                "Подробный анализ финансовых показателей за третий квартал 2024 года "
                "включая прибыль, убытки и прогнозы..."
            ),
            relevance=98,
            timestamp=now_ms - 2 * DAY_MS,
            author="Анна Иванова",
            rating=4.8,
            ai_analyzed=True,
            format="DOCX",
            meta="28 страниц • 5.2 MB",
        ),
        SearchCandidate(
            id="img-showcase-2024",
            kind="image",
            title="product-showcase-2024.jpg",
            snippet=(
                "Изображение содержит: продукты, логотип компании, финансовые графики. "
                "Обнаружено 3 объекта..."
            ),
            relevance=95,
            timestamp=now_ms - 7 * DAY_MS,
            author="Петр Смирнов",
            rating=4.6,
            ai_analyzed=True,
            dimensions="1920x1080",
            ocr=True,
        ),
        SearchCandidate(
            id="doc-plan-2025",
            kind="document",
            title="Стратегический план 2025",
            snippet="Ключевые инициативы и цели на 2025 год. Влияние на выручку и оптимизацию затрат...",
            relevance=92,
            timestamp=now_ms - 5 * HOUR_MS,
            author="Мария Козлова",
            rating=4.4,
            ai_analyzed=True,
            format="PDF",
            meta="12 страниц • 2.1 MB",
        ),
        SearchCandidate(
            id="img-team-photos",
            kind="image",
            title="team-photos-august.webp",
            snippet="Распознаны лица: 5. OCR: найдено 2 текста. Теги: команда, ивент, август.",
            relevance=88,
            timestamp=now_ms - 10 * DAY_MS,
            author="Анна Иванова",
            rating=4.2,
            ai_analyzed=False,
            dimensions="4032x3024",
            ocr=True,
        ),
        SearchCandidate(
            id="doc-contract-2024",
            kind="document",
            title="Контракт №2024-458",
            snippet="Юридическая проверка завершена. Извлечены ключевые действия и сроки исполнения.",
            relevance=90,
            timestamp=now_ms - 36 * HOUR_MS,
            author="Петр Смирнов",
            rating=4.9,
            ai_analyzed=True,
            format="PDF",
            meta="12 страниц • 2.3 MB",
        ),
        SearchCandidate(
            id="img-product-hero",
            kind="image",
            title="product-hero-2024.avif",
            snippet="DETR: 4 объекта, OCR: найден текст, Точность анализа: 96%",
            relevance=88,
            timestamp=now_ms - 3 * DAY_MS,
            author="Анна Иванова",
            rating=4.7,
            ai_analyzed=True,
            dimensions="2560x1440",
            ocr=True,
        ),
    ]


def featured_candidates(now: datetime | None = None) -> list[SearchCandidate]:
    """Candidates highlighted on the dashboard home view, in display order."""
    by_id = {c.id: c for c in demo_candidates(now)}
    return [by_id[i] for i in FEATURED_IDS]


def demo_rates(rng: random.Random | None = None) -> list[CurrencyRate]:
    """Build a randomized rate table in RUB per one unit of each currency."""
    rng = rng or random.Random()

    def jitter(base: float, spread: float, digits: int = 2) -> float:
        return round(base + rng.random() * spread, digits)

    return [
        CurrencyRate(code="RUB", value=1, delta=0),
        CurrencyRate(code="KGS", value=jitter(0.98, 0.06), delta=jitter(-0.2, 0.5)),
        CurrencyRate(code="USD", value=jitter(88, 3), delta=jitter(0.1, 0.8)),
        CurrencyRate(code="EUR", value=jitter(96, 3), delta=jitter(-0.3, 0.6)),
        CurrencyRate(code="CNY", value=jitter(12, 0.6), delta=jitter(-0.2, 0.5)),
        CurrencyRate(code="KZT", value=jitter(0.20, 0.02, 3), delta=jitter(-0.2, 0.5)),
    ]
