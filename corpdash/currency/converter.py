"""Multi-currency conversion over a table of base-unit rates.

Every rate is "base units per one unit of the currency" (RUB by default), so
any pair converts through the base: ``amount * v(from) / v(to)``. The engine
never raises on user input: unknown codes read as 1.0 and an unparseable
amount produces a NaN result flagged as unavailable.
"""

import logging
import math
import re
from collections.abc import Iterable, Mapping, Sequence

from corpdash.core.schemas import ConversionResult, CurrencyRate

logger = logging.getLogger(__name__)

DEFAULT_BASE_CODE = "RUB"
UNAVAILABLE = "—"
NBSP = "\u00a0"

# ASCII digits only; float() alone also takes "1_000", "inf" and non-Latin digits
_DECIMAL_RE = re.compile(r"[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?", re.ASCII)

RateTable = Iterable[CurrencyRate] | Mapping[str, float]


def normalize_rates(
    table: RateTable,
    base_code: str = DEFAULT_BASE_CODE,
) -> dict[str, CurrencyRate]:
    """Index a rate table by code, synthesizing ``base_code = 1`` if absent.

    Accepts either CurrencyRate records or a plain ``{code: value}`` mapping.
    Later entries for the same code override earlier ones.
    """
    if isinstance(table, Mapping):
        rates = [CurrencyRate(code=code, value=value) for code, value in table.items()]
    else:
        rates = list(table)
    by_code = {r.code: r for r in rates}
    if base_code not in by_code:
        logger.debug("Base currency %s missing from table - adding it at 1.0", base_code)
        by_code[base_code] = CurrencyRate(code=base_code, value=1, delta=0)
    return by_code


def parse_amount(text: str | float | int | None) -> float:
    """Parse a user-entered amount; comma or period may be the decimal mark.

    Returns NaN for anything that is not a number.
    """
    if text is None:
        return math.nan
    if isinstance(text, (int, float)):
        return float(text)
    cleaned = text.strip().replace(",", ".", 1)
    if not _DECIMAL_RE.fullmatch(cleaned):
        return math.nan
    return float(cleaned)


def rate_value(rates: Mapping[str, CurrencyRate], code: str) -> float:
    """Base-unit value of ``code``; unknown codes degrade to 1.0."""
    rate = rates.get(code)
    return 1.0 if rate is None else rate.value


def convert(
    table: RateTable,
    amount: str | float | int | None,
    from_code: str,
    to_code: str,
    base_code: str = DEFAULT_BASE_CODE,
) -> ConversionResult:
    """Convert ``amount`` of ``from_code`` into ``to_code``.

    Returns:
        ConversionResult with the converted amount and the cross-rate (the
        price of one ``from_code`` unit in ``to_code``). ``available`` is
        False when the amount is not a finite number.
    """
    rates = normalize_rates(table, base_code)
    from_value = rate_value(rates, from_code)
    to_value = rate_value(rates, to_code)
    cross_rate = from_value / to_value if to_value else math.nan
    value = parse_amount(amount)
    result = value * cross_rate
    available = math.isfinite(result)
    if not available:
        logger.debug("Conversion unavailable for amount %r (%s -> %s)", amount, from_code, to_code)
    return ConversionResult(result=result, cross_rate=cross_rate, available=available)


def swap(from_code: str, to_code: str) -> tuple[str, str]:
    """Exchange source and target currencies; nothing is recomputed."""
    return to_code, from_code


def ordered_codes(table: RateTable, preferred_order: Sequence[str] = ()) -> list[str]:
    """Codes for a picker: preferred ones first in given order, the rest A-Z."""
    codes = list(table.keys()) if isinstance(table, Mapping) else [r.code for r in table]
    present = set(codes)
    priority = [c for c in preferred_order if c in present]
    rest = sorted(present - set(priority))
    return priority + rest


def format_number(n: float) -> str:
    """Format like the ru-RU locale: NBSP thousands, comma decimal.

    Values below 1 keep up to 4 fraction digits, others 2; trailing zeros
    are trimmed. Non-finite values render as an em dash.
    """
    if not math.isfinite(n):
        return UNAVAILABLE
    digits = 4 if n < 1 else 2
    text = f"{n:,.{digits}f}"
    whole, _, fraction = text.partition(".")
    fraction = fraction.rstrip("0")
    whole = whole.replace(",", NBSP)
    if whole in ("-0", "-") and not fraction:
        whole = "0"
    return f"{whole},{fraction}" if fraction else whole
