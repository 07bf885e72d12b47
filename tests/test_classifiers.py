"""
Tests for date and dictionary classifiers
"""

from datetime import date

import pytest

from l10n_repair.classifiers import (
    DateClassifier,
    DateGranularity,
    DateRewrite,
    DictionaryRewrite,
    classify,
    default_classifiers,
    month_number,
    strip_ordinal_suffix,
)


@pytest.fixture
def chain(dictionary, today):
    return default_classifiers(dictionary, today=today)


def rewrite(text, chain):
    result = classify(text, chain)
    assert result is not None, f"{text!r} was not classified"
    return result.kind, result.apply(text)


class TestSmallDate:
    """Day + month without a year"""

    def test_german_month(self, chain):
        assert rewrite("3 März", chain) == ("small_date", "03. März")

    def test_english_month_and_padding(self, chain):
        assert rewrite("  14 June ", chain) == ("small_date", "14. Juni")

    def test_year_captured_at_classification(self, today):
        classifier = DateClassifier(DateGranularity.SMALL, today=today)
        result = classifier.classify("3 März")
        assert result.date_string == "3 März 2024"
        assert result.value == date(2024, 3, 3)

    def test_leap_day_depends_on_current_year(self):
        leap = DateClassifier(DateGranularity.SMALL, today=lambda: date(2024, 5, 1))
        common = DateClassifier(DateGranularity.SMALL, today=lambda: date(2023, 5, 1))
        assert leap.classify("29 Feb") is not None
        assert common.classify("29 Feb") is None

    def test_duration_is_not_a_date(self, chain):
        assert DateClassifier(DateGranularity.SMALL, excluded_markers=("Wochen",)).classify("3 Wochen") is None
        assert classify("3 Wochen", chain) is None

    def test_unknown_month_falls_through_to_dictionary(self, chain):
        assert rewrite("3 weeks", chain) == ("dictionary", "3 Wochen")

    def test_impossible_day_is_rejected(self, chain):
        assert classify("31 Februar", chain) is None

    def test_trailing_content_is_rejected(self, chain):
        assert classify("3 März 2024 bis", chain) is None


class TestMediumDate:
    """Month day[ordinal], year"""

    def test_ordinal_suffix_stripped(self, chain):
        assert rewrite("Juni 3rd, 2024", chain) == ("medium_date", "03. Juni 2024")

    def test_resolved_date_string(self):
        result = DateClassifier(DateGranularity.MEDIUM).classify("June 21st, 2024")
        assert result.date_string == "June 21, 2024"
        assert result.apply("June 21st, 2024") == "21. Juni 2024"

    def test_without_suffix(self, chain):
        assert rewrite("Dezember 24, 2025", chain) == ("medium_date", "24. Dezember 2025")

    def test_unknown_month(self, chain):
        assert classify("Flavor 3rd, 2024", chain) is None


class TestLargeDate:
    """Month weekday day[ordinal], year"""

    def test_english_weekday(self, chain):
        assert rewrite("June Mon 3rd, 2024", chain) == ("large_date", "Montag, 03. Juni 2024")

    def test_german_weekday(self, chain):
        assert rewrite("Dezember Di. 24th, 2024", chain) == ("large_date", "Dienstag, 24. Dezember 2024")

    def test_unknown_weekday(self, chain):
        assert classify("June Xyz 3rd, 2024", chain) is None

    def test_ordinal_in_weekday_slot(self, chain):
        large = DateClassifier(DateGranularity.LARGE)
        assert large.classify("June 2nd 3rd, 2024") is None
        assert classify("June 2nd 3rd, 2024", chain) is None

    def test_ordinal_weekday_falls_through_to_dictionary(self, chain):
        assert rewrite("June 2nd 3rd, 2024 until", chain)[0] == "dictionary"


class TestDictionary:

    def test_longest_match_wins(self, chain):
        assert rewrite("Pause Subscription", chain) == ("dictionary", "Abonnement pausieren ;(")

    def test_all_occurrences_replaced(self, chain):
        assert rewrite("Subscription / Subscription", chain)[1] == "Abonnement / Abonnement"

    def test_several_phrases(self, chain):
        assert rewrite("Paused Subscriptions until", chain)[1] == "Pausierte Abonnements bis"

    def test_result_lists_phrases(self, chain):
        result = classify("Pause Subscription", chain)
        assert isinstance(result, DictionaryRewrite)
        assert result.phrases == ("Pause Subscription", "Subscription")


class TestPriority:

    def test_dates_win_over_dictionary(self, dictionary, today):
        result = classify("3 März", default_classifiers(dictionary, today=today))
        assert isinstance(result, DateRewrite)

    @pytest.mark.parametrize("text", [
        "3 März", "Juni 3rd, 2024", "June Mon 3rd, 2024", "Pause Subscription", "3 weeks",
    ])
    def test_output_is_not_classified_again(self, chain, text):
        _, output = rewrite(text, chain)
        assert classify(output, chain) is None


class TestHelpers:

    def test_month_number(self):
        assert month_number("März") == 3
        assert month_number("okt.") == 10
        assert month_number("Sept") == 9
        assert month_number("Wochen") is None

    def test_strip_ordinal_suffix(self):
        assert strip_ordinal_suffix("June 3rd, 2024") == "June 3, 2024"
        assert strip_ordinal_suffix("June 3, 2024") == "June 3, 2024"
