"""
Locale-aware date and number formatting.

Only the German target locale is carried; rendering follows the browser's
``Intl`` output for ``de-DE``:

- day + month            -> ``03. März``
- day + month + year     -> ``03. Juni 2024``
- with weekday           -> ``Montag, 03. Juni 2024``
- grouped number         -> ``1.234,56``
"""

import re
from dataclasses import dataclass
from datetime import date
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Iterable, Tuple


class NumberParseError(ValueError):
    """Text is not a numeric literal"""
    pass


# ── Locale Definitions ─────────────────────────────────────

@dataclass(frozen=True)
class LocaleConfig:
    code: str                  # e.g., "de-DE"
    decimal_separator: str     # "," or "."
    thousands_separator: str   # "." or ","
    month_names: Tuple[str, ...]
    weekday_names: Tuple[str, ...]  # Monday first, like date.weekday()


LOCALES = {
    "de-DE": LocaleConfig(
        code="de-DE",
        decimal_separator=",",
        thousands_separator=".",
        month_names=(
            "Januar", "Februar", "März", "April", "Mai", "Juni",
            "Juli", "August", "September", "Oktober", "November", "Dezember",
        ),
        weekday_names=(
            "Montag", "Dienstag", "Mittwoch", "Donnerstag", "Freitag", "Samstag", "Sonntag",
        ),
    ),
}

MAX_FRACTION_DIGITS = 3


def get_locale(code: str) -> LocaleConfig:
    try:
        return LOCALES[code]
    except KeyError:
        raise ValueError(f"Unsupported locale '{code}'") from None


# ── Dates ──────────────────────────────────────────────────

def format_date(value: date, fields: Iterable[str], locale: str = "de-DE") -> str:
    """Render ``value`` with the requested subset of day/month/year/weekday."""
    cfg = get_locale(locale)
    fields = set(fields)
    parts = []
    if "day" in fields:
        parts.append(f"{value.day:02d}.")
    if "month" in fields:
        parts.append(cfg.month_names[value.month - 1])
    if "year" in fields:
        parts.append(str(value.year))
    text = " ".join(parts)
    if "weekday" in fields:
        text = f"{cfg.weekday_names[value.weekday()]}, {text}"
    return text


# ── Numbers ────────────────────────────────────────────────

_PLAIN_NUMBER = re.compile(r"^[+-]?\d+(?:\.\d+)?$")
_COMMA_DECIMAL = re.compile(r"^[+-]?\d*,\d+$")
_GERMAN_GROUPED = re.compile(r"^[+-]?\d{1,3}(?:\.\d{3})+(?:,\d+)?$")
_DOT_GROUPED = re.compile(r"^[+-]?\d{1,3}(?:\.\d{3})+$")


def parse_number(text: str, dots_group: bool = False) -> Decimal:
    """
    Parse a numeric literal as shown in shop UIs.

    Accepts ``1234``, ``1234.5``, ``19,99``, ``,99`` and ``1.234,56``.
    With ``dots_group`` a comma-less ``12.500`` is read as thousands
    grouping instead of a decimal point.
    Raises NumberParseError for anything else.
    """
    candidate = text.strip()
    if dots_group and _DOT_GROUPED.match(candidate):
        normalized = candidate.replace(".", "")
    elif _PLAIN_NUMBER.match(candidate):
        normalized = candidate
    elif _COMMA_DECIMAL.match(candidate):
        normalized = candidate.replace(",", ".")
    elif _GERMAN_GROUPED.match(candidate):
        normalized = candidate.replace(".", "").replace(",", ".")
    else:
        raise NumberParseError(f"Not a number: {text!r}")
    try:
        return Decimal(normalized)
    except InvalidOperation as e:
        raise NumberParseError(f"Not a number: {text!r}") from e


def _group(digits: str, separator: str) -> str:
    head = len(digits) % 3 or 3
    groups = [digits[:head]] + [digits[i:i + 3] for i in range(head, len(digits), 3)]
    return separator.join(groups)


def format_number(value: Decimal, locale: str = "de-DE") -> str:
    """
    Format with locale grouping. Fraction digits of ``value`` are kept,
    rounded half-up to at most three.
    """
    cfg = get_locale(locale)
    value = Decimal(value)
    if value.as_tuple().exponent < -MAX_FRACTION_DIGITS:
        value = value.quantize(Decimal(1).scaleb(-MAX_FRACTION_DIGITS), rounding=ROUND_HALF_UP)
    sign = "-" if value < 0 else ""
    integer, _, fraction = format(abs(value), "f").partition(".")
    text = sign + _group(integer, cfg.thousands_separator)
    if fraction:
        text += cfg.decimal_separator + fraction
    return text
