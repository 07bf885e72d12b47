"""
l10n_repair - keep a re-rendered UI tree in German

Dates, currency amounts and leftover English labels are rewritten after
every change to the tree; every rewrite is idempotent so the repair loop
drains on its own.
"""

from .tree import ChangeKind, ChangeRecord, Document, Element, TextLeaf
from .dictionary import DEFAULT_TRANSLATIONS, Dictionary, DictionaryEntry, build_dictionary
from .classifiers import (
    DateGranularity,
    DateRewrite,
    DictionaryRewrite,
    DateClassifier,
    DictionaryClassifier,
    classify,
    default_classifiers,
)
from .dispatcher import Dispatcher
from .feed import ChangeFeed
from .service import RepairService
from .html_io import parse_html, to_html

__version__ = "0.1.0"

__all__ = [
    "ChangeKind",
    "ChangeRecord",
    "Document",
    "Element",
    "TextLeaf",
    "DEFAULT_TRANSLATIONS",
    "Dictionary",
    "DictionaryEntry",
    "build_dictionary",
    "DateGranularity",
    "DateRewrite",
    "DictionaryRewrite",
    "DateClassifier",
    "DictionaryClassifier",
    "classify",
    "default_classifiers",
    "Dispatcher",
    "ChangeFeed",
    "RepairService",
    "parse_html",
    "to_html",
]
