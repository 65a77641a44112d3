"""
Default press behaviours.

Hashtag, mention and prop presses format a short message and hand it to a notifier
(`alert` shows it in the terminal, `log` writes it to the logger). Link presses ask a URL
opener whether the URL can be opened before opening it.
"""

from __future__ import annotations

import logging
import os
import webbrowser
from dataclasses import dataclass
from typing import Any, Callable, Optional, Protocol

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from .errors import InvalidConfigError
from .links import is_link, url_scheme

logger = logging.getLogger(__name__)

NOTIFIER_ENV = "TTK_NOTIFIER"

# (event, value) or (event, value, token_index)
PressHandler = Callable[..., Any]


class Notifier(Protocol):
    def notify(self, message: str) -> None: ...


class LogNotifier:
    def __init__(self, log: Optional[logging.Logger] = None, *, level: int = logging.INFO) -> None:
        self._log = log or logger
        self._level = level

    def notify(self, message: str) -> None:
        self._log.log(self._level, "%s", message)


class AlertNotifier:
    """Interactive variant: shows the message as a panel on the console."""

    def __init__(self, console: Optional[Console] = None, *, title: str = "tappable-text") -> None:
        self._console = console or Console(stderr=True)
        self._title = title

    def notify(self, message: str) -> None:
        self._console.print(Panel(Text(message), title=self._title, expand=False))


def get_notifier(kind: Optional[str] = None) -> Notifier:
    """Build a notifier by name (`alert` or `log`); defaults to $TTK_NOTIFIER, then `log`."""

    name = (kind or os.getenv(NOTIFIER_ENV) or "log").strip().lower()
    if name == "alert":
        return AlertNotifier()
    if name == "log":
        return LogNotifier()
    raise InvalidConfigError(f"notifier must be one of: alert, log (got {name!r})")


class UrlOpener(Protocol):
    def can_open(self, url: str) -> bool: ...

    def open(self, url: str) -> bool: ...


_OPENABLE_SCHEMES = {"http", "https", "ftp", "mailto"}


class BrowserOpener:
    """Opens links with the system browser; scheme-less links are opened over http."""

    def can_open(self, url: str) -> bool:
        if url_scheme(url) in _OPENABLE_SCHEMES:
            return True
        return is_link(url)

    def open(self, url: str) -> bool:
        target = url
        if not url_scheme(url):
            target = f"mailto:{url}" if "@" in url else f"http://{url}"
        logger.debug("opening %s", target)
        return bool(webbrowser.open(target))


def format_press_message(label: str, value: str) -> str:
    return f'{label}: "{value}"'


@dataclass(frozen=True)
class PressHandlers:
    on_press_link: Optional[PressHandler] = None
    on_press_hashtag: Optional[PressHandler] = None
    on_press_mention: Optional[PressHandler] = None
    on_press_prop: Optional[PressHandler] = None


def default_press_handlers(
    *,
    notifier: Optional[Notifier] = None,
    opener: Optional[UrlOpener] = None,
) -> PressHandlers:
    n = notifier or get_notifier()
    o = opener or BrowserOpener()

    def on_press_hashtag(event: Any, hashtag: str) -> None:
        n.notify(format_press_message("Hashtag", hashtag))

    def on_press_mention(event: Any, mention: str, index: int) -> None:
        n.notify(format_press_message("Mention", mention))

    def on_press_prop(event: Any, prop: str, index: int) -> None:
        n.notify(format_press_message("Prop", prop))

    def on_press_link(event: Any, url: str) -> None:
        if o.can_open(url):
            o.open(url)
        else:
            logger.info("cannot open %s", url)

    return PressHandlers(
        on_press_link=on_press_link,
        on_press_hashtag=on_press_hashtag,
        on_press_mention=on_press_mention,
        on_press_prop=on_press_prop,
    )
