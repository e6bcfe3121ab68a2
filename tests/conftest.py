from pathlib import Path

import pytest
from bs4 import BeautifulSoup

from xiv_lodestone import config
from xiv_lodestone.document import parse_document

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def read_fixture(name: str) -> str:
    return (FIXTURES_DIR / name).read_text(encoding="utf-8")


def load_fixture(name: str) -> BeautifulSoup:
    return parse_document(read_fixture(name))


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    monkeypatch.setattr(config, "_settings", None)
