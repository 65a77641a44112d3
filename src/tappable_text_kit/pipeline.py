from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional, Sequence

from .config import SegmentConfig
from .entities import DEFAULT_ENTITY_EXTRACTOR, EntityExtractor
from .errors import CollaboratorError, InvalidInputError
from .links import DEFAULT_LINK_TESTER, LinkTester
from .notify import PressHandlers, default_press_handlers
from .recognizers import (
    DEFAULT_RECOGNIZERS,
    Classification,
    ClassifyContext,
    Recognizer,
    SegmentKind,
    classify_token,
)
from .sanitize import sanitize
from .segments import Segment, build_segments
from .styles import DEFAULT_STYLES, SegmentStyles
from .tokens import Token, split_words

logger = logging.getLogger(__name__)

EventHook = Callable[[dict[str, Any]], None]


def _emit(hook: Optional[EventHook], event: dict[str, Any]) -> None:
    if hook is None:
        return
    try:
        hook(event)
    except Exception:
        # Event hooks must never break text processing.
        logger.debug("event hook failed for stage %s", event.get("stage"), exc_info=True)


@dataclass(frozen=True)
class SegmentPipelineResult:
    raw: str
    sanitized: str
    tokens: list[Token]
    classifications: list[Optional[Classification]]
    segments: list[Segment]

    n_tokens: int
    counts: dict[str, int]


def sanitize_stage(text: str, *, config: SegmentConfig, on_event: Optional[EventHook] = None) -> str:
    out = sanitize(text, config.extract_hashtags, config.extract_mentions)
    _emit(on_event, {"stage": "sanitize", "raw_len": len(text), "sanitized_len": len(out)})
    return out


def split_stage(text: str, *, on_event: Optional[EventHook] = None) -> list[Token]:
    toks = split_words(text)
    _emit(
        on_event,
        {
            "stage": "split",
            "n_tokens": len(toks),
            "tokens_preview": [t.text for t in toks[:12]],
        },
    )
    return toks


def classify_stage(
    tokens: list[Token],
    *,
    context: ClassifyContext,
    recognizers: Sequence[Recognizer] = DEFAULT_RECOGNIZERS,
    on_event: Optional[EventHook] = None,
) -> list[Optional[Classification]]:
    # Whitespace runs are never classified (None).
    out: list[Optional[Classification]] = []
    counts = {k.value: 0 for k in SegmentKind}
    for tok in tokens:
        if tok.is_whitespace:
            out.append(None)
            continue
        c = classify_token(tok.text, context, recognizers)
        counts[c.kind.value] += 1
        out.append(c)
    _emit(on_event, {"stage": "classify", "counts": counts})
    return out


def build_stage(
    tokens: list[Token],
    classifications: list[Optional[Classification]],
    *,
    handlers: PressHandlers,
    styles: SegmentStyles,
    on_event: Optional[EventHook] = None,
) -> list[Segment]:
    segments: list[Segment] = []
    for tok, c in zip(tokens, classifications):
        segments.extend(build_segments(tok, c, handlers=handlers, styles=styles))
    _emit(
        on_event,
        {
            "stage": "build",
            "n_segments": len(segments),
            "n_tappable": sum(1 for s in segments if s.tappable),
        },
    )
    return segments


def _probe_collaborators(link_tester: LinkTester, extractor: EntityExtractor) -> None:
    try:
        link_tester.is_link("https://example.com")
        extractor.extract_hashtags("#probe")
        extractor.extract_mentions("@probe")
    except Exception as e:
        raise CollaboratorError(f"collaborator failed its startup probe: {e}") from e


class SegmentPipeline:
    """
    First-class pipeline API:
      sanitize -> split -> classify -> build segments

    A pipeline instance holds only immutable configuration and collaborators; every `run`
    creates fresh tokens and segments, so one instance can serve concurrent callers.
    """

    def __init__(
        self,
        *,
        config: Optional[SegmentConfig] = None,
        handlers: Optional[PressHandlers] = None,
        styles: Optional[SegmentStyles] = None,
        link_tester: Optional[LinkTester] = None,
        extractor: Optional[EntityExtractor] = None,
        recognizers: Optional[Sequence[Recognizer]] = None,
        on_event: Optional[EventHook] = None,
    ):
        self.config = (config or SegmentConfig()).normalized()
        self.handlers = handlers or default_press_handlers()
        self.styles = styles or DEFAULT_STYLES
        self.link_tester = link_tester or DEFAULT_LINK_TESTER
        self.extractor = extractor or DEFAULT_ENTITY_EXTRACTOR
        self.recognizers = tuple(recognizers) if recognizers is not None else DEFAULT_RECOGNIZERS
        self.on_event = on_event

        _probe_collaborators(self.link_tester, self.extractor)
        self._context = ClassifyContext(
            config=self.config, link_tester=self.link_tester, extractor=self.extractor
        )

    def run(self, text: str) -> SegmentPipelineResult:
        if not isinstance(text, str):
            raise InvalidInputError(f"text must be a str, got {type(text).__name__}")

        sanitized = sanitize_stage(text, config=self.config, on_event=self.on_event)
        toks = split_stage(sanitized, on_event=self.on_event)
        classes = classify_stage(
            toks, context=self._context, recognizers=self.recognizers, on_event=self.on_event
        )
        segs = build_stage(
            toks, classes, handlers=self.handlers, styles=self.styles, on_event=self.on_event
        )

        counts = {k.value: 0 for k in SegmentKind}
        for c in classes:
            if c is not None:
                counts[c.kind.value] += 1

        _emit(
            self.on_event,
            {
                "stage": "done",
                "n_tokens": len(toks),
                "n_segments": len(segs),
                "counts": counts,
            },
        )
        return SegmentPipelineResult(
            raw=text,
            sanitized=sanitized,
            tokens=toks,
            classifications=classes,
            segments=segs,
            n_tokens=len(toks),
            counts=counts,
        )

    def segments(self, text: str) -> list[Segment]:
        return self.run(text).segments

    def run_many(self, texts: Sequence[str]) -> list[SegmentPipelineResult]:
        """Batch helper; reuses the pipeline's collaborators across inputs."""

        out: list[SegmentPipelineResult] = []
        for t in texts:
            out.append(self.run(t))
        return out
