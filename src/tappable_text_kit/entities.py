"""
Twitter-style hashtag and mention extraction.

The grammar follows the published twitter-text extraction rules:
  - a hashtag is `#`/`＃` followed by hashtag characters with at least one letter/mark, not
    preceded by a hashtag character or `&`, and not followed by another hash sign or `://`;
    hashtags that fall inside a URL are dropped.
  - a mention is `@`/`＠` followed by 1-20 of `[A-Za-z0-9_]`, not preceded by an
    alphanumeric or one of `!#$%&*@＠`, and not followed by another at sign, a Latin accented
    character, or `://`. `@user/list` references are lists, not mentions.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional, Protocol

import regex as re

from .links import find_url_spans

_HASH_SIGNS = "#＃"
_AT_SIGNS = "@＠"

# Extra characters twitter-text allows inside hashtags (ZWNJ/ZWJ, Hebrew gershayim, CJK
# marks, Tibetan tsheg, middle dot).
_HASHTAG_SPECIAL = (
    "_\u200c\u200d\ua67e\u05be\u05f3\u05f4\uff5e\u301c\u309b\u309c\u30a0\u30fb\u3003\u0f0b\u0f0c\u00b7"
)
_HASHTAG_ALPHA = r"\p{L}\p{M}"
_HASHTAG_ALNUM = rf"\p{{L}}\p{{M}}\p{{Nd}}{_HASHTAG_SPECIAL}"

_LATIN_ACCENTS = (
    "\u00c0-\u00d6\u00d8-\u00f6\u00f8-\u00ff\u0100-\u024f\u0253\u0254\u0256\u0257\u0259"
    "\u025b\u0263\u0268\u026f\u0272\u0289\u028b\u02bb\u0300-\u036f\u1e00-\u1eff"
)

_HASHTAG_RE = re.compile(
    rf"(?:^|[^&{_HASHTAG_ALNUM}])(?P<sign>[{_HASH_SIGNS}])(?!\ufe0f|\u20e3)"
    rf"(?P<tag>[{_HASHTAG_ALNUM}]*[{_HASHTAG_ALPHA}][{_HASHTAG_ALNUM}]*)",
    flags=re.VERSION1,
)
_HASHTAG_END_RE = re.compile(rf"^(?:[{_HASH_SIGNS}]|://)")

_MENTION_RE = re.compile(
    rf"(?:^|[^A-Za-z0-9_!#$%&*{_AT_SIGNS}])(?P<sign>[{_AT_SIGNS}])(?P<name>[A-Za-z0-9_]{{1,20}})"
    r"(?P<list>/[A-Za-z][A-Za-z0-9_\-]{0,24})?",
    flags=re.VERSION1,
)
_MENTION_END_RE = re.compile(rf"^(?:[{_AT_SIGNS}]|[{_LATIN_ACCENTS}]|://)")


@dataclass(frozen=True)
class Entity:
    """
    One extracted entity.

    `value` excludes the leading sign; `start` is the index of the `#`/`@` sign and `end` is
    exclusive, so `text[start:end]` is the sign plus the value.
    """

    value: str
    start: int
    end: int


class EntityExtractor(Protocol):
    def extract_hashtags(self, text: str) -> list[str]: ...

    def extract_mentions(self, text: str) -> list[str]: ...

    def extract_hashtags_with_indices(self, text: str) -> list[Entity]: ...

    def extract_mentions_with_indices(self, text: str) -> list[Entity]: ...


class TwitterEntityExtractor:
    """
    Default extractor implementing the twitter-text hashtag/mention rules.

    `url_spans` finds URL spans used to drop hashtags that are really URL fragments
    (`http://example.com#anchor`).
    """

    def __init__(
        self,
        *,
        check_url_overlap: bool = True,
        url_spans: Optional[Callable[[str], list[tuple[int, int]]]] = None,
    ) -> None:
        self.check_url_overlap = check_url_overlap
        self._url_spans = url_spans or find_url_spans

    def extract_hashtags_with_indices(self, text: str) -> list[Entity]:
        if not text or not any(c in text for c in _HASH_SIGNS):
            return []

        out: list[Entity] = []
        for m in _HASHTAG_RE.finditer(text):
            after = text[m.end() :]
            if _HASHTAG_END_RE.match(after):
                continue
            out.append(Entity(value=m.group("tag"), start=m.start("sign"), end=m.end()))

        if out and self.check_url_overlap:
            spans = self._url_spans(text)
            if spans:
                out = [e for e in out if not any(e.start < se and e.end > ss for ss, se in spans)]
        return out

    def extract_mentions_with_indices(self, text: str) -> list[Entity]:
        if not text or not any(c in text for c in _AT_SIGNS):
            return []

        out: list[Entity] = []
        for m in _MENTION_RE.finditer(text):
            after = text[m.end() :]
            if _MENTION_END_RE.match(after):
                continue
            if m.group("list"):
                continue
            out.append(Entity(value=m.group("name"), start=m.start("sign"), end=m.end("name")))
        return out

    def extract_hashtags(self, text: str) -> list[str]:
        return [e.value for e in self.extract_hashtags_with_indices(text)]

    def extract_mentions(self, text: str) -> list[str]:
        return [e.value for e in self.extract_mentions_with_indices(text)]


DEFAULT_ENTITY_EXTRACTOR = TwitterEntityExtractor()


def extract_hashtags(text: str) -> list[str]:
    return DEFAULT_ENTITY_EXTRACTOR.extract_hashtags(text)


def extract_mentions(text: str) -> list[str]:
    return DEFAULT_ENTITY_EXTRACTOR.extract_mentions(text)
