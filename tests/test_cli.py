# tests/test_cli.py
from __future__ import annotations

import json
from pathlib import Path

import respx
from httpx import Response

from foodpark.cli import EXIT_EXTRACTION, EXIT_FAILURE, EXIT_OK
from foodpark.cli import main as cli_main
from foodpark.config import DEFAULT_URL

PAGE = str(Path(__file__).resolve().parent / "fixtures" / "whos_trading_grid.html")
WEBHOOK = "https://hooks.slack.example/services/T000/B000/XXXX"


def test_extract_json(capsys):
    rc = cli_main(["extract", "--html", PAGE, "--date", "2024-01-04", "--json"])

    assert rc == EXIT_OK
    data = json.loads(capsys.readouterr().out)
    assert data["location"] == "Cambridge Science Park"
    assert data["any_walk_up_only"] is True
    assert [v["name"] for v in data["vendors"]] == ["Taco Truck", "Pizza Van*", "Dumpling Den"]


def test_extract_human_readable(capsys):
    rc = cli_main(["extract", "--html", PAGE, "--date", "2024-01-04"])

    out = capsys.readouterr().out
    assert rc == EXIT_OK
    assert "=== 2024-01-04 at Cambridge Science Park ===" in out
    assert "Pizza Van*" in out
    assert "not currently taking pre-orders" in out


def test_extract_uses_env_target_date(monkeypatch, capsys):
    monkeypatch.setenv("FP_TARGET_DATE", "2024-01-04")
    monkeypatch.setenv("FP_LOCATION_FILTER_VALUE", "granta")

    rc = cli_main(["extract", "--html", PAGE, "--json"])

    assert rc == EXIT_OK
    assert json.loads(capsys.readouterr().out)["location"] == "Granta Park"


def test_extraction_error_exit_code(capsys):
    # Nothing on the page is headed FRI 05 JANUARY.
    rc = cli_main(["extract", "--html", PAGE, "--date", "2024-01-05"])
    assert rc == EXIT_EXTRACTION
    assert capsys.readouterr().out == ""


def test_run_requires_slack_settings():
    assert cli_main(["run", "--html", PAGE, "--date", "2024-01-04"]) == EXIT_FAILURE


def test_run_dry_run_prints_payload(capsys):
    rc = cli_main(["run", "--html", PAGE, "--date", "2024-01-04", "--dry-run"])

    assert rc == EXIT_OK
    message = json.loads(capsys.readouterr().out)
    assert message["username"] == "foodPark"
    assert len(message["blocks"]) == 3


@respx.mock
def test_run_fetches_and_posts(monkeypatch, grid_html, capsys):
    monkeypatch.setenv("FP_SLACK_CHANNEL", "#lunch")
    monkeypatch.setenv("FP_SLACK_WEBHOOK", WEBHOOK)
    monkeypatch.setenv("FP_TARGET_DATE", "2024-01-04")
    page = respx.get(DEFAULT_URL).mock(return_value=Response(200, text=grid_html))
    hook = respx.post(WEBHOOK).mock(return_value=Response(200, text="ok"))

    rc = cli_main(["run"])

    assert rc == EXIT_OK
    assert page.called
    assert hook.called
    printed = json.loads(capsys.readouterr().out)
    assert json.loads(hook.calls.last.request.content) == printed
    assert printed["channel"] == "#lunch"


@respx.mock
def test_run_fetch_failure(monkeypatch):
    monkeypatch.setenv("FP_SLACK_CHANNEL", "#lunch")
    monkeypatch.setenv("FP_SLACK_WEBHOOK", WEBHOOK)
    respx.get(DEFAULT_URL).mock(return_value=Response(503))

    assert cli_main(["run", "--date", "2024-01-04"]) == EXIT_FAILURE


@respx.mock
def test_run_delivery_failure(monkeypatch):
    monkeypatch.setenv("FP_SLACK_CHANNEL", "#lunch")
    monkeypatch.setenv("FP_SLACK_WEBHOOK", WEBHOOK)
    respx.post(WEBHOOK).mock(return_value=Response(404, text="no_service"))

    assert cli_main(["run", "--html", PAGE, "--date", "2024-01-04"]) == EXIT_FAILURE


def test_templates(capsys):
    assert cli_main(["templates"]) == EXIT_OK
    out = capsys.readouterr().out
    assert "squarespace-grid" in out
    assert "squarespace-fluid" in out
