"""Currency conversion over base-unit rate tables.

Usage:
    from corpdash.currency import convert, format_number

    out = convert({"RUB": 1, "USD": 88}, "100", "USD", "RUB")
    print(format_number(out.result))
"""

from corpdash.currency.converter import (
    convert,
    format_number,
    normalize_rates,
    ordered_codes,
    parse_amount,
    swap,
)

__all__ = ["convert", "format_number", "normalize_rates", "ordered_codes", "parse_amount", "swap"]
