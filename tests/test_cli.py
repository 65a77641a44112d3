from __future__ import annotations

import json
import logging

import pytest
from typer.testing import CliRunner

from tappable_text_kit.cli import app
from tappable_text_kit.notify import NOTIFIER_ENV

runner = CliRunner()


def test_segment_json_output() -> None:
    r = runner.invoke(app, ["segment", "Hello #world from @alice", "--json"])
    assert r.exit_code == 0, r.output
    data = json.loads(r.output)
    assert data["raw"] == "Hello #world from @alice"
    assert data["counts"]["hashtag"] == 1
    assert data["counts"]["mention"] == 1
    assert "".join(s["text"] for s in data["segments"]) == data["raw"]


def test_segment_flags_disable_recognizers() -> None:
    r = runner.invoke(app, ["segment", "#a @b", "--no-hashtags", "--no-mentions", "--json"])
    assert r.exit_code == 0, r.output
    data = json.loads(r.output)
    assert data["counts"]["hashtag"] == 0
    assert data["counts"]["mention"] == 0
    assert data["counts"]["plain"] == 2


def test_segment_plain_and_table_output() -> None:
    r = runner.invoke(app, ["segment", "see example.org"])
    assert r.exit_code == 0, r.output
    assert "example.org" in r.output

    r = runner.invoke(app, ["segment", "see example.org", "--table"])
    assert r.exit_code == 0, r.output
    assert "link" in r.output


def test_doctor_reports_packages() -> None:
    r = runner.invoke(app, ["doctor"])
    assert r.exit_code == 0, r.output
    data = json.loads(r.output)
    assert "python" in data
    assert "regex" in data["packages"]
    assert data["packages"]["typer"]["installed"] is True


def test_press_uses_log_notifier_by_default(
    monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
) -> None:
    monkeypatch.delenv(NOTIFIER_ENV, raising=False)
    with caplog.at_level(logging.INFO, logger="tappable_text_kit.notify"):
        r = runner.invoke(app, ["segment", "Ping #launch", "--press", "2"])
    assert r.exit_code == 0, r.output
    assert 'Hashtag: "#launch"' in caplog.text


def test_press_honors_notifier_env(monkeypatch: pytest.MonkeyPatch) -> None:
    # The alert notifier draws a panel on stderr, which the runner folds into output.
    monkeypatch.setenv(NOTIFIER_ENV, "alert")
    r = runner.invoke(app, ["segment", "Ping @alice", "--press", "2"])
    assert r.exit_code == 0, r.output
    assert 'Mention: "@alice"' in r.output


def test_press_explicit_notifier_overrides_env(
    monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
) -> None:
    monkeypatch.setenv(NOTIFIER_ENV, "alert")
    with caplog.at_level(logging.INFO, logger="tappable_text_kit.notify"):
        r = runner.invoke(app, ["segment", "?custom", "--press", "0", "--notifier", "log"])
    assert r.exit_code == 0, r.output
    assert 'Prop: "?custom"' in caplog.text


def test_press_and_notifier_validation() -> None:
    r = runner.invoke(app, ["segment", "hi", "--press", "5"])
    assert r.exit_code == 2

    r = runner.invoke(app, ["segment", "hi", "--notifier", "popup"])
    assert r.exit_code == 2
