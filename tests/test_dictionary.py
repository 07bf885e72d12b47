"""
Tests for the translation table
"""

import pytest

from l10n_repair.config import ConfigError
from l10n_repair.dictionary import DEFAULT_TRANSLATIONS, Dictionary, build_dictionary, load_translations


class TestOrdering:
    """Entries come longest first"""

    def test_lengths_never_increase(self, dictionary):
        lengths = [len(entry.source) for entry in dictionary]
        assert lengths == sorted(lengths, reverse=True)

    def test_longer_phrase_before_its_substring(self, dictionary):
        sources = [entry.source for entry in dictionary]
        assert sources.index("Pause Subscription") < sources.index("Subscription")
        assert sources.index("Paused Subscriptions") < sources.index("Paused")

    def test_ties_keep_table_order(self):
        table = Dictionary({"bb": "1", "aa": "2", "c": "3"})
        assert [entry.source for entry in table] == ["bb", "aa", "c"]

    def test_case_variants_are_both_kept(self, dictionary):
        assert dictionary.lookup("Pause Subscription") == "Abonnement pausieren ;("
        assert dictionary.lookup("Pause subscription") == "Abonnement pausieren ;("
        assert len(dictionary) == len(DEFAULT_TRANSLATIONS)


class TestMatches:

    def test_all_contained_phrases_longest_first(self, dictionary):
        phrases = [entry.source for entry in dictionary.matches("Pause Subscription")]
        assert phrases == ["Pause Subscription", "Subscription"]

    def test_no_match(self, dictionary):
        assert dictionary.matches("Nichts zu tun") == ()


class TestLoading:

    def test_extra_yaml_extends_defaults(self, tmp_path):
        path = tmp_path / "extra.yaml"
        path.write_text('"Order history": "Bestellverlauf"\nCancel: "Abbrechen"\n', encoding="utf-8")

        table = build_dictionary(path)

        assert table.lookup("Order history") == "Bestellverlauf"
        assert table.lookup("Cancel") == "Abbrechen"
        assert table.lookup("City") == "Stadt"

    def test_empty_yaml(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")
        assert load_translations(path) == {}

    def test_non_mapping_yaml(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")
        with pytest.raises(ConfigError):
            load_translations(path)

    def test_non_text_values(self, tmp_path):
        path = tmp_path / "numbers.yaml"
        path.write_text("Cancel: 3\n", encoding="utf-8")
        with pytest.raises(ConfigError):
            load_translations(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError):
            load_translations(tmp_path / "missing.yaml")
