from __future__ import annotations

import io
import logging

import pytest
from rich.console import Console

from tappable_text_kit.errors import InvalidConfigError
from tappable_text_kit.notify import (
    NOTIFIER_ENV,
    AlertNotifier,
    BrowserOpener,
    LogNotifier,
    default_press_handlers,
    format_press_message,
    get_notifier,
)


class RecordingNotifier:
    def __init__(self) -> None:
        self.messages: list[str] = []

    def notify(self, message: str) -> None:
        self.messages.append(message)


class FakeOpener:
    def __init__(self, openable: bool = True) -> None:
        self.openable = openable
        self.asked: list[str] = []
        self.opened: list[str] = []

    def can_open(self, url: str) -> bool:
        self.asked.append(url)
        return self.openable

    def open(self, url: str) -> bool:
        self.opened.append(url)
        return True


def test_format_press_message() -> None:
    assert format_press_message("Hashtag", "#world") == 'Hashtag: "#world"'


def test_log_notifier_writes_to_logger(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.INFO, logger="tappable_text_kit.notify"):
        LogNotifier().notify('Mention: "@alice"')
    assert 'Mention: "@alice"' in caplog.text


def test_alert_notifier_prints_panel() -> None:
    buf = io.StringIO()
    AlertNotifier(Console(file=buf, width=60), title="demo").notify('Prop: "?x"')
    out = buf.getvalue()
    assert 'Prop: "?x"' in out
    assert "demo" in out


def test_get_notifier_by_name_and_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(NOTIFIER_ENV, raising=False)
    assert isinstance(get_notifier(), LogNotifier)
    assert isinstance(get_notifier("alert"), AlertNotifier)

    monkeypatch.setenv(NOTIFIER_ENV, "ALERT")
    assert isinstance(get_notifier(), AlertNotifier)
    assert isinstance(get_notifier("log"), LogNotifier)

    with pytest.raises(InvalidConfigError):
        get_notifier("popup")


def test_default_handlers_notify() -> None:
    n = RecordingNotifier()
    h = default_press_handlers(notifier=n, opener=FakeOpener())
    assert h.on_press_hashtag is not None
    assert h.on_press_mention is not None
    assert h.on_press_prop is not None

    h.on_press_hashtag(None, "#world")
    h.on_press_mention(None, "@alice", 3)
    h.on_press_prop(None, "?custom", 7)
    assert n.messages == ['Hashtag: "#world"', 'Mention: "@alice"', 'Prop: "?custom"']


def test_default_link_handler_checks_before_opening() -> None:
    ok = FakeOpener(openable=True)
    h = default_press_handlers(notifier=RecordingNotifier(), opener=ok)
    assert h.on_press_link is not None
    h.on_press_link(None, "http://t.co")
    assert ok.asked == ["http://t.co"]
    assert ok.opened == ["http://t.co"]

    nope = FakeOpener(openable=False)
    h = default_press_handlers(notifier=RecordingNotifier(), opener=nope)
    assert h.on_press_link is not None
    h.on_press_link(None, "weird://thing")
    assert nope.asked == ["weird://thing"]
    assert nope.opened == []


def test_browser_opener_can_open() -> None:
    o = BrowserOpener()
    assert o.can_open("https://example.com")
    assert o.can_open("mailto:a@b.org")
    assert o.can_open("example.org")
    assert not o.can_open("not a url")


def test_browser_opener_adds_scheme(monkeypatch: pytest.MonkeyPatch) -> None:
    opened: list[str] = []
    monkeypatch.setattr("webbrowser.open", lambda url: opened.append(url) or True)
    o = BrowserOpener()
    assert o.open("example.org")
    assert o.open("me@example.org")
    assert o.open("https://t.co")
    assert opened == ["http://example.org", "mailto:me@example.org", "https://t.co"]


def test_mention_and_prop_handlers_require_token_index() -> None:
    h = default_press_handlers(notifier=RecordingNotifier(), opener=FakeOpener())
    assert h.on_press_mention is not None
    assert h.on_press_prop is not None
    with pytest.raises(TypeError):
        h.on_press_mention(None, "@alice")
    with pytest.raises(TypeError):
        h.on_press_prop(None, "?custom")
