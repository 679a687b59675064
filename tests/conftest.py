"""Test setup for prose."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable

import pytest
from bs4 import BeautifulSoup

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture
def parse_html() -> Callable[[str], BeautifulSoup]:
    """Parse a rendered fragment with lxml so tests can walk its structure."""

    def _parse(fragment: str) -> BeautifulSoup:
        return BeautifulSoup(fragment, "lxml")

    return _parse
