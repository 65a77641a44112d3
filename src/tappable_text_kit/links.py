from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

import regex as re

# Generic TLDs recognised for scheme-less links. Any two-letter ASCII label is treated as a
# country-code TLD.
_GENERIC_TLDS = frozenset(
    {
        "aero",
        "ai",
        "app",
        "art",
        "asia",
        "biz",
        "blog",
        "cat",
        "cloud",
        "club",
        "com",
        "coop",
        "design",
        "dev",
        "edu",
        "email",
        "gov",
        "info",
        "int",
        "io",
        "jobs",
        "live",
        "mil",
        "mobi",
        "museum",
        "name",
        "net",
        "news",
        "online",
        "org",
        "page",
        "pro",
        "shop",
        "site",
        "store",
        "tech",
        "tel",
        "travel",
        "website",
        "wiki",
        "xyz",
    }
)

_SCHEMES = ("http", "https", "ftp")

_LABEL = r"[\p{L}\p{N}](?:[\p{L}\p{N}\-]{0,61}[\p{L}\p{N}])?"
_HOST = rf"(?:{_LABEL}\.)+(?P<tld>\p{{L}}{{2,63}})"
_IPV4 = r"(?:(?:25[0-5]|2[0-4]\d|1?\d?\d)\.){3}(?:25[0-5]|2[0-4]\d|1?\d?\d)"
_PORT = r"(?::\d{1,5})?"
# Path/query/fragment: brackets only as balanced `(...)` pairs, no trailing sentence punctuation.
_TAIL = r"(?:[/?#](?:\([^\s()]*\)|[^\s()\[\]{}])*(?<![.,:;!?'\"]))?"

_SCHEME_URL_RE = re.compile(
    rf"(?i:(?:https?|ftp)://)(?:[^\s/?#@]+@)?(?:{_HOST}|{_IPV4}|localhost){_PORT}{_TAIL}",
    flags=re.VERSION1,
)
_BARE_URL_RE = re.compile(rf"{_HOST}{_PORT}{_TAIL}", flags=re.VERSION1)
_EMAIL_RE = re.compile(
    rf"(?i:mailto:)?[A-Za-z0-9._%+\-]+@{_HOST}",
    flags=re.VERSION1,
)

# Used for span search inside free text (hashtag/URL overlap checks). A URL never starts right
# after a word character or a `#`, `@` or `$` sign, so `#python.org` stays a hashtag.
_FIND_RE = re.compile(
    rf"(?<![\w@＠#＃$.\-/])(?:(?i:(?:https?|ftp)://)[^\s]+|(?:{_LABEL}\.)+\p{{L}}{{2,63}}{_PORT}{_TAIL})",
    flags=re.VERSION1,
)


def _known_tld(tld: str | None) -> bool:
    if not tld:
        return False
    t = tld.lower()
    return t in _GENERIC_TLDS or (len(t) == 2 and t.isascii() and t.isalpha())


class LinkTester(Protocol):
    def is_link(self, token: str) -> bool: ...


@dataclass(frozen=True)
class LinkifyTester:
    """
    Whole-token link test in the spirit of linkify's `test()`.

    A token is a link when all of it is one of: a scheme URL (http/https/ftp), a `mailto:`
    address, a bare e-mail address, or a bare domain whose TLD is known.
    """

    allow_bare_domains: bool = True
    allow_emails: bool = True

    def is_link(self, token: str) -> bool:
        if not token:
            return False
        if _SCHEME_URL_RE.fullmatch(token):
            return True
        if self.allow_emails:
            m = _EMAIL_RE.fullmatch(token)
            if m and _known_tld(m.group("tld")):
                return True
        if self.allow_bare_domains:
            m = _BARE_URL_RE.fullmatch(token)
            if m and _known_tld(m.group("tld")):
                return True
        return False


def find_url_spans(text: str) -> list[tuple[int, int]]:
    """Return (start, end) spans of URL-looking runs in free text."""

    spans: list[tuple[int, int]] = []
    for m in _FIND_RE.finditer(text or ""):
        s = m.group(0)
        if "://" not in s:
            tld = s.split("/", 1)[0].split("?", 1)[0].split("#", 1)[0].split(":", 1)[0].rsplit(".", 1)[-1]
            if not _known_tld(tld):
                continue
        spans.append((m.start(), m.end()))
    return spans


DEFAULT_LINK_TESTER = LinkifyTester()


def is_link(token: str) -> bool:
    return DEFAULT_LINK_TESTER.is_link(token)


def url_scheme(url: str) -> str:
    """Lower-cased scheme of `url`, or "" for scheme-less links."""

    m = re.match(r"([A-Za-z][A-Za-z0-9+.\-]*):", url or "")
    if not m:
        return ""
    scheme = m.group(1).lower()
    if scheme in _SCHEMES or scheme == "mailto":
        return scheme
    # "example.com:8080" parses as a scheme; it is a bare host with a port.
    return ""
