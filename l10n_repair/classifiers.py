"""
Text classifiers.

Each classifier looks at the text of one leaf and either returns None or a
ClassificationResult describing the rewrite to apply later. Everything the
rewrite needs (trimmed text, resolved date string, year) is captured here so
that applying it later does not depend on state that may have moved on.

Priority order: small date, medium date, large date, dictionary.
"""

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Callable, List, Optional, Sequence, Tuple, Union

from .dictionary import Dictionary, DictionaryEntry
from .formatting import format_date


# ── Name tables ────────────────────────────────────────────

_MONTH_TOKENS = {
    1: ("january", "jan", "januar"),
    2: ("february", "feb", "februar"),
    3: ("march", "mar", "märz", "mär", "mrz"),
    4: ("april", "apr"),
    5: ("may", "mai"),
    6: ("june", "jun", "juni"),
    7: ("july", "jul", "juli"),
    8: ("august", "aug"),
    9: ("september", "sep", "sept"),
    10: ("october", "oct", "oktober", "okt"),
    11: ("november", "nov"),
    12: ("december", "dec", "dezember", "dez"),
}
MONTHS = {token: number for number, tokens in _MONTH_TOKENS.items() for token in tokens}

WEEKDAY_ABBREVIATIONS = frozenset({
    "mon", "tue", "wed", "thu", "fri", "sat", "sun",
    "mo.", "di.", "mi.", "do.", "fr.", "sa.", "so.",
    "die", "mit", "don", "fre", "sam", "son",
})

ORDINAL_SUFFIX = re.compile(r"\b(\d{1,2})[a-z]{1,2}\b")


def month_number(token: str) -> Optional[int]:
    """Month 1-12 for an English or German month name, None if unknown."""
    return MONTHS.get(token.lower().rstrip("."))


def strip_ordinal_suffix(text: str) -> str:
    """``June 3rd, 2024`` -> ``June 3, 2024``"""
    return ORDINAL_SUFFIX.sub(r"\1", text)


# ── Results ────────────────────────────────────────────────

class DateGranularity(Enum):
    SMALL = (
        "small_date",
        re.compile(r"^(?P<day>\d{1,2}) (?P<month>\S+)$"),
        ("day", "month"),
    )
    MEDIUM = (
        "medium_date",
        re.compile(r"^(?P<month>\S+) (?P<day>\d{1,2})(?:[a-z]{1,2})?, (?P<year>\d{4})$"),
        ("day", "month", "year"),
    )
    LARGE = (
        "large_date",
        re.compile(r"^(?P<month>\S+) (?P<weekday>\S{3}) (?P<day>\d{1,2})(?:[a-z]{1,2})?, (?P<year>\d{4})$"),
        ("day", "month", "year", "weekday"),
    )

    def __init__(self, kind: str, pattern: "re.Pattern", fields: Tuple[str, ...]):
        self.kind = kind
        self.pattern = pattern
        self.fields = fields


@dataclass(frozen=True)
class DateRewrite:
    granularity: DateGranularity
    date_string: str
    value: date
    locale: str = "de-DE"

    @property
    def kind(self) -> str:
        return self.granularity.kind

    def apply(self, text: str) -> str:
        # the whole leaf becomes the date
        return format_date(self.value, self.granularity.fields, self.locale)


@dataclass(frozen=True)
class DictionaryRewrite:
    entries: Tuple[DictionaryEntry, ...]

    kind = "dictionary"

    @property
    def phrases(self) -> Tuple[str, ...]:
        return tuple(entry.source for entry in self.entries)

    def apply(self, text: str) -> str:
        for entry in self.entries:
            text = text.replace(entry.source, entry.target)
        return text


ClassificationResult = Union[DateRewrite, DictionaryRewrite]


# ── Classifiers ────────────────────────────────────────────

class Classifier(ABC):
    name = "classifier"

    @abstractmethod
    def classify(self, text: str) -> Optional[ClassificationResult]:
        """Return the rewrite for ``text`` or None when it does not apply."""
        pass


class DateClassifier(Classifier):
    """
    Recognises one date granularity and validates it into a real date.

    A pattern match whose month, weekday or calendar day does not resolve
    yields None, so the leaf falls through to the next classifier instead
    of being rendered as an invalid date.
    """

    def __init__(self, granularity: DateGranularity, locale: str = "de-DE",
                 excluded_markers: Sequence[str] = (),
                 today: Callable[[], date] = date.today):
        self.granularity = granularity
        self.name = granularity.kind
        self.locale = locale
        self.excluded_markers = tuple(marker for marker in excluded_markers if marker)
        self.today = today

    def classify(self, text: str) -> Optional[DateRewrite]:
        trimmed = text.strip()
        if any(marker in trimmed for marker in self.excluded_markers):
            return None
        if not self.granularity.pattern.match(trimmed):
            return None

        if "year" in self.granularity.fields:
            date_string = strip_ordinal_suffix(trimmed)
            match = self.granularity.pattern.match(date_string)
            if match is None:
                return None
            year = int(match.group("year"))
        else:
            match = self.granularity.pattern.match(trimmed)
            year = self.today().year
            date_string = f"{trimmed} {year}"

        month = month_number(match.group("month"))
        if month is None:
            return None
        if "weekday" in self.granularity.fields and match.group("weekday").lower() not in WEEKDAY_ABBREVIATIONS:
            return None
        try:
            value = date(year, month, int(match.group("day")))
        except ValueError:
            return None
        return DateRewrite(self.granularity, date_string, value, self.locale)


class DictionaryClassifier(Classifier):
    name = "dictionary"

    def __init__(self, dictionary: Dictionary):
        self.dictionary = dictionary

    def classify(self, text: str) -> Optional[DictionaryRewrite]:
        entries = self.dictionary.matches(text)
        if not entries:
            return None
        return DictionaryRewrite(entries)


def default_classifiers(dictionary: Dictionary, locale: str = "de-DE",
                        duration_marker: str = "Wochen",
                        today: Callable[[], date] = date.today) -> List[Classifier]:
    """The fixed priority chain used by the text scanner."""
    return [
        DateClassifier(DateGranularity.SMALL, locale, excluded_markers=(duration_marker,), today=today),
        DateClassifier(DateGranularity.MEDIUM, locale, today=today),
        DateClassifier(DateGranularity.LARGE, locale, today=today),
        DictionaryClassifier(dictionary),
    ]


def classify(text: str, classifiers: Sequence[Classifier]) -> Optional[ClassificationResult]:
    """First non-None result wins."""
    for classifier in classifiers:
        result = classifier.classify(text)
        if result is not None:
            return result
    return None
