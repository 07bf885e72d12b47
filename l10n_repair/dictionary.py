"""
English → German label table.

The table is built once at startup and never mutated afterwards. Entries are
iterated longest source phrase first so that "Pause Subscription" is
replaced before "Subscription" can clobber part of it.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterator, Mapping, Optional, Tuple, Union

import yaml

from .config import ConfigError
from .diagnostics import get_logger

logger = get_logger(__name__)


# Add newly spotted English leftovers here; German is the only target.
DEFAULT_TRANSLATIONS: Dict[str, str] = {
    # profile
    "City": "Stadt",
    "Country": "Land",
    "Germany": "Deutschland",
    "Postal Code": "Plz",
    "Street Address": "Straße",

    # menu
    "Subscription Manager": "Abonement Verwaltung",

    # other controls
    "New Subscription": "Neues Abonnement",

    # subscriptions
    "Paused": "Pausiert",

    # subscription cards
    "Paused Subscriptions": "Pausierte Abonnements",
    "Next delivery": "Nächste Lieferung",
    "weeks": "Wochen",
    "Selected": "Ausgewählte",
    "Active": "Aktiv",
    "until": "bis",
    "flavors for": "Geschmacksrichtungen für",
    "Skipped": "Übersprungen",
    "Billed every": "Rechnung alle",
    "flavors": "Geschmacksrichtungen",
    "Subscriptions": "Abonnements",
    "Subscription": "Abonnement",
    "Started on": "Gestartet am: ",
    "Delivery Address": "Lieferadresse",
    "Update your delivery address for subscriptions":
        "Update pls. sonst kommen die Pakete beim Nachbar an!",
    "You have selected": "Deine Auswahl",
    " of ": " von ",
    "wöchige Subscription": "wöchiges Abonnement",

    # toast
    "skipped for": "übersprungen für",
    "resumed": "fortgesetzt",
    "Subscription paused": "Abonnement pausiert",

    # next delivery dialog
    "deine Subscription": "deine Abonnements",

    # pause dialog
    "Cancel": "Immer weiter",
    "Pause until": "Pause bis",
    "Select a date until when you want to pause your subscription.":
        "Wähle ein Datum bis wann du dein Abonnemnt pausieren möchtest",
    # both casings are rendered by the widget
    "Pause Subscription": "Abonnement pausieren ;(",
    "Pause subscription": "Abonnement pausieren ;(",
}


@dataclass(frozen=True)
class DictionaryEntry:
    source: str
    target: str


class Dictionary:
    """Immutable phrase table ordered by descending source length."""

    def __init__(self, translations: Mapping[str, str]):
        entries = [DictionaryEntry(source, target) for source, target in translations.items() if source]
        # sorted() is stable: equal lengths keep table order
        self._entries: Tuple[DictionaryEntry, ...] = tuple(
            sorted(entries, key=lambda entry: len(entry.source), reverse=True)
        )

    @property
    def entries(self) -> Tuple[DictionaryEntry, ...]:
        return self._entries

    def __iter__(self) -> Iterator[DictionaryEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def lookup(self, source: str) -> Optional[str]:
        for entry in self._entries:
            if entry.source == source:
                return entry.target
        return None

    def matches(self, text: str) -> Tuple[DictionaryEntry, ...]:
        """Entries whose source occurs in ``text``, longest first."""
        return tuple(entry for entry in self._entries if entry.source in text)


def load_translations(path: Union[str, Path]) -> Dict[str, str]:
    """
    Read extra ``source: target`` pairs from a YAML mapping.

    Raises:
        ConfigError: If the file is not a flat string mapping
    """
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Cannot read dictionary file {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Dictionary file {path} must contain a mapping")

    translations = {}
    for source, target in data.items():
        if not isinstance(source, str) or not isinstance(target, str):
            raise ConfigError(f"Dictionary entry {source!r} in {path} must map text to text")
        translations[source] = target
    return translations


def build_dictionary(extra_path: Optional[Union[str, Path]] = None) -> Dictionary:
    """Build the process-wide table: defaults, overridden by an optional YAML file."""
    translations = dict(DEFAULT_TRANSLATIONS)
    if extra_path:
        extra = load_translations(extra_path)
        logger.info(f"Loaded {len(extra)} extra translations from {extra_path}")
        translations.update(extra)
    return Dictionary(translations)
