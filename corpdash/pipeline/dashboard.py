"""Dashboard home data: rates, featured results and headline stats."""

import logging
import random
from datetime import datetime

from corpdash.analytics.metrics import latest_stats
from corpdash.analytics.synthesizer import synthesize
from corpdash.core.demo_data import demo_rates, featured_candidates, to_millis
from corpdash.core.latency import simulate_latency
from corpdash.core.schemas import DashboardSnapshot

logger = logging.getLogger(__name__)


async def get_dashboard_data(
    rng: random.Random | None = None,
    latency: float = 0.4,
    now: datetime | None = None,
) -> DashboardSnapshot:
    """Aggregate the dashboard view after a simulated network delay.

    Stats come from the newest point of a fresh 7-day analytics series.
    """
    rng = rng or random.Random()
    await simulate_latency(latency)
    rates = demo_rates(rng)
    stats = latest_stats(synthesize(7, rng, now))
    logger.info("Dashboard data: %d rates, %d documents today", len(rates), stats.documents)
    return DashboardSnapshot(rates=rates, items=featured_candidates(now), stats=stats)


def format_relative(moment: float | str | datetime, now: datetime | None = None) -> str:
    """Describe how long ago ``moment`` was, in Russian.

    ``moment`` may be epoch millis, an ISO string or a datetime. Anything
    older than about a month falls back to a ``DD.MM.YY`` date.
    """
    now = now or datetime.now().astimezone()
    if isinstance(moment, (int, float)):
        ts = int(moment)
    elif isinstance(moment, str):
        # fromisoformat only learned the "Z" suffix in 3.11
        ts = to_millis(datetime.fromisoformat(moment.replace("Z", "+00:00")))
    else:
        ts = to_millis(moment)

    diff = max(0, to_millis(now) - ts)
    sec = diff // 1000
    minutes = sec // 60
    hours = minutes // 60
    days = hours // 24
    weeks = days // 7

    if sec < 45:
        return "только что"
    if minutes < 2:
        return "минуту назад"
    if minutes < 5:
        return "несколько минут назад"
    if minutes < 60:
        return f"{minutes} мин назад"
    if hours < 2:
        return "час назад"
    if days < 1:
        return f"{hours} ч назад"
    if days == 1:
        return "вчера"
    if days < 7:
        return f"{days} дн назад"
    if weeks == 1:
        return "неделю назад"
    if weeks < 5:
        return f"{weeks} нед назад"
    return datetime.fromtimestamp(ts / 1000, tz=now.tzinfo).strftime("%d.%m.%y")
