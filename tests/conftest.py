# ruff: noqa: E402
# tests/conftest.py
from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

# Ensure project root importable
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from foodpark.extract import get_template, parse_html

FIXTURES = Path(__file__).resolve().parent / "fixtures"


@pytest.fixture(autouse=True)
def _clean_fp_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """
    Autouse: drop any FP_* variables a developer's shell or .env exported, so
    every test starts from the built-in defaults.
    """
    for name in list(os.environ):
        if name.startswith("FP_"):
            monkeypatch.delenv(name, raising=False)


@pytest.fixture
def grid_html() -> str:
    return (FIXTURES / "whos_trading_grid.html").read_text(encoding="utf-8")


@pytest.fixture
def grid_doc(grid_html: str):
    return parse_html(grid_html)


@pytest.fixture
def grid_strategy():
    return get_template("squarespace-grid")
