from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Protocol, Sequence

import regex as re

from .config import SegmentConfig
from .emoji import is_emoji
from .entities import DEFAULT_ENTITY_EXTRACTOR, Entity, EntityExtractor
from .links import DEFAULT_LINK_TESTER, LinkTester


class SegmentKind(str, Enum):
    LINK = "link"
    PROP = "prop"
    HASHTAG = "hashtag"
    MENTION = "mention"
    EMOJI = "emoji"
    PLAIN = "plain"


@dataclass(frozen=True)
class Classification:
    """
    Result of classifying one content token.

    `value` is the payload handed to press handlers (`#tag`, `@handle`, `?prop`, the URL).
    `matched + remainder` is always the original token text.
    """

    kind: SegmentKind
    value: str
    matched: str
    remainder: str = ""


@dataclass(frozen=True)
class ClassifyContext:
    config: SegmentConfig
    link_tester: LinkTester = DEFAULT_LINK_TESTER
    extractor: EntityExtractor = DEFAULT_ENTITY_EXTRACTOR


class Recognizer(Protocol):
    kind: SegmentKind

    def try_classify(self, token: str, context: ClassifyContext) -> Optional[Classification]: ...


_PROP_RE = re.compile(r"\?[A-Za-z0-9_]+")
_HASH_SIGNS = ("#", "＃")


def _first_entity(extractor: EntityExtractor, token: str, *, kind: SegmentKind) -> Optional[Entity]:
    """
    First entity the extractor reports for `token`, or None.

    Span-aware extractors are preferred. Extractors that only return plain strings are
    assumed to have matched right after a leading sign; the caller validates that.
    """

    if kind == SegmentKind.HASHTAG:
        with_indices = getattr(extractor, "extract_hashtags_with_indices", None)
        plain = extractor.extract_hashtags
    else:
        with_indices = getattr(extractor, "extract_mentions_with_indices", None)
        plain = extractor.extract_mentions

    if with_indices is not None:
        found = with_indices(token) or []
        if not found:
            return None
        return found[0]

    values = plain(token) or []
    if not values or not values[0]:
        return None
    return Entity(value=values[0], start=0, end=len(values[0]) + 1)


def _anchored_split(token: str, entity: Optional[Entity]) -> Optional[tuple[str, str]]:
    # The entity must cover token[0] (the sign) through its end, with the value right after.
    if entity is None or not entity.value:
        return None
    if entity.start != 0 or entity.end > len(token):
        return None
    if token[1 : entity.end] != entity.value:
        return None
    return token[: entity.end], token[entity.end :]


class LinkRecognizer:
    kind = SegmentKind.LINK

    def try_classify(self, token: str, context: ClassifyContext) -> Optional[Classification]:
        if not context.config.extract_links:
            return None
        if not context.link_tester.is_link(token):
            return None
        return Classification(kind=self.kind, value=token, matched=token)


class PropRecognizer:
    kind = SegmentKind.PROP

    def try_classify(self, token: str, context: ClassifyContext) -> Optional[Classification]:
        if not context.config.extract_props:
            return None
        m = _PROP_RE.match(token)
        if not m:
            return None
        prop = m.group(0)
        return Classification(kind=self.kind, value=prop, matched=prop, remainder=token[len(prop) :])


class HashtagRecognizer:
    kind = SegmentKind.HASHTAG

    def try_classify(self, token: str, context: ClassifyContext) -> Optional[Classification]:
        if not context.config.extract_hashtags:
            return None
        if not token.startswith(_HASH_SIGNS):
            return None
        entity = _first_entity(context.extractor, token, kind=self.kind)
        split = _anchored_split(token, entity)
        if entity is None or split is None:
            return None
        matched, remainder = split
        return Classification(kind=self.kind, value=f"#{entity.value}", matched=matched, remainder=remainder)


class MentionRecognizer:
    kind = SegmentKind.MENTION

    def try_classify(self, token: str, context: ClassifyContext) -> Optional[Classification]:
        if not context.config.extract_mentions:
            return None
        entity = _first_entity(context.extractor, token, kind=self.kind)
        # Extractors may find a bare handle inside e.g. `foo@bar`; only `@`-led tokens count.
        if entity is None or not token.startswith("@"):
            return None
        split = _anchored_split(token, entity)
        if split is None:
            return None
        matched, remainder = split
        return Classification(kind=self.kind, value=f"@{entity.value}", matched=matched, remainder=remainder)


class EmojiRecognizer:
    kind = SegmentKind.EMOJI

    def try_classify(self, token: str, context: ClassifyContext) -> Optional[Classification]:
        if not context.config.extract_emoji:
            return None
        if not is_emoji(token):
            return None
        return Classification(kind=self.kind, value=token, matched=token)


DEFAULT_RECOGNIZERS: tuple[Recognizer, ...] = (
    LinkRecognizer(),
    PropRecognizer(),
    HashtagRecognizer(),
    MentionRecognizer(),
    EmojiRecognizer(),
)


def classify_token(
    token: str,
    context: ClassifyContext,
    recognizers: Sequence[Recognizer] = DEFAULT_RECOGNIZERS,
) -> Classification:
    """Run recognizers in order; the first match wins, otherwise the token is plain."""

    for r in recognizers:
        result = r.try_classify(token, context)
        if result is not None:
            return result
    return Classification(kind=SegmentKind.PLAIN, value=token, matched=token)
