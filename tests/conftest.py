from datetime import date

import pytest

from l10n_repair.dictionary import build_dictionary
from l10n_repair.tree import Document, Element


@pytest.fixture
def today():
    return lambda: date(2024, 1, 15)


@pytest.fixture
def dictionary():
    return build_dictionary()


@pytest.fixture
def page():
    """<html><head/><body><div id="app">...</div></body></html> with a recorder"""
    app = Element("div", {"id": "app"})
    body = Element("body", children=[app])
    html = Element("html", children=[Element("head"), body])
    document = Document(html)
    records = []
    document.add_observer(records.append)
    document.records = records
    return document
