"""Tests for the itinerary-sorter CLI."""

import json

import pytest
from click.testing import CliRunner

from itinerary_sorter.cli import cli


def _train(origin, destination, **extra):
    return {
        "type": "train",
        "from": {"name": origin},
        "to": {"name": destination},
        "number": "IC 1",
        "platform": "2",
        **extra,
    }


def _bus(origin, destination):
    return {"type": "bus", "from": {"name": origin}, "to": {"name": destination}}


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def write_tickets(tmp_path):
    def _write(tickets, name="tickets.json"):
        path = tmp_path / name
        path.write_text(json.dumps({"tickets": tickets}), encoding="utf-8")
        return str(path)

    return _write


def test_sort_prints_json(runner, write_tickets):
    path = write_tickets([_bus("Bern", "Zurich"), _train("Geneva", "Bern")])

    result = runner.invoke(cli, ["--log-level", "ERROR", "sort", path])

    assert result.exit_code == 0, result.output
    data = json.loads(result.output)
    assert data["isValid"] is True
    assert [t["from"]["name"] for t in data["sortedTickets"]] == ["Geneva", "Bern"]
    assert data["endPlace"]["name"] == "Zurich"


def test_sort_human_output(runner, write_tickets):
    path = write_tickets([_bus("Bern", "Zurich"), _train("Geneva", "Bern")])

    result = runner.invoke(
        cli, ["--log-level", "ERROR", "sort", path, "--render", "human"]
    )

    assert result.exit_code == 0, result.output
    assert result.output.splitlines() == [
        "0. Start.",
        "1. Board train IC 1, Platform 2 from Geneva to Bern.",
        "2. Board the bus from Bern to Zurich. No seat assignment.",
        "3. Last destination reached.",
    ]


def test_sort_uses_configured_default_format(runner, write_tickets, monkeypatch):
    monkeypatch.setenv("ITS_RENDER_DEFAULT_FORMAT", "human")
    path = write_tickets([_train("Geneva", "Bern")])

    result = runner.invoke(cli, ["--log-level", "ERROR", "sort", path])

    assert result.exit_code == 0, result.output
    assert result.output.startswith("0. Start.")


def test_sort_business_rule_failure(runner, write_tickets):
    path = write_tickets([_train("A", "B"), _bus("C", "D")])

    result = runner.invoke(cli, ["--log-level", "ERROR", "sort", path])

    assert result.exit_code == 2
    assert "Route has 2 disconnected segments" in result.output


def test_sort_input_failure(runner, write_tickets):
    path = write_tickets([_train("A", "A")])

    result = runner.invoke(cli, ["--log-level", "ERROR", "sort", path])

    assert result.exit_code == 1
    assert "Ticket 1 has same 'from' and 'to' place: A" in result.output


def test_sort_invalid_payload(runner, write_tickets):
    path = write_tickets([{"type": "train", "from": {"name": "A"}}])

    result = runner.invoke(cli, ["--log-level", "ERROR", "sort", path])

    assert result.exit_code == 1
    assert "Invalid ticket data" in result.output


def test_validate_ok(runner, write_tickets):
    path = write_tickets([_train("A", "B"), _bus("B", "C")])

    result = runner.invoke(cli, ["--log-level", "ERROR", "validate", path])

    assert result.exit_code == 0
    assert "OK 2 tickets form one itinerary" in result.output


def test_validate_reports_tier(runner, write_tickets):
    path = write_tickets([_train("A", "B"), _bus("B", "C"), _bus("C", "A")])

    result = runner.invoke(cli, ["--log-level", "ERROR", "validate", path])

    assert result.exit_code == 2
    assert "FAIL (business_rule)" in result.output
    assert "Circular route detected at 'A'" in result.output


def test_version(runner):
    result = runner.invoke(cli, ["--version"])

    assert result.exit_code == 0
    assert "itinerary-sorter" in result.output


def test_sort_file_that_is_not_utf8(runner, tmp_path):
    path = tmp_path / "latin1.json"
    path.write_bytes(b'{"tickets": [{"type": "bus", "from": {"name": "\xff"}}]}')

    result = runner.invoke(cli, ["--log-level", "ERROR", "sort", str(path)])

    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)
    assert "Failed to read tickets" in result.output


def test_invalid_configuration_exits_with_input_code(
    runner, write_tickets, monkeypatch
):
    monkeypatch.setenv("ITS_RENDER_DEFAULT_FORMAT", "pdf")
    path = write_tickets([_train("A", "B")])

    result = runner.invoke(cli, ["sort", path])

    assert result.exit_code == 1
    assert "Configuration error" in result.output
    assert "ITS_RENDER_DEFAULT_FORMAT" in result.output
