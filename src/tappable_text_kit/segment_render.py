from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .config import SegmentConfig
from .notify import PressHandlers
from .pipeline import EventHook, SegmentPipeline
from .segments import Segment, segments_to_dicts
from .styles import SegmentStyles


@dataclass(frozen=True)
class SegmentAnalysis:
    """
    Product-facing summary of one segmentation run.

    `segments` keeps the live callbacks; use `to_dict()` for a JSON-friendly copy.
    """

    raw: str
    segments: list[Segment]

    n_tokens: int
    n_segments: int
    n_tappable: int
    counts: dict[str, int]

    def to_dict(self) -> dict[str, object]:
        return {
            "raw": self.raw,
            "segments": segments_to_dicts(self.segments),
            "n_tokens": self.n_tokens,
            "n_segments": self.n_segments,
            "n_tappable": self.n_tappable,
            "counts": dict(self.counts),
        }


def analyze_segments_with_config(
    text: str,
    *,
    config: SegmentConfig,
    handlers: Optional[PressHandlers] = None,
    styles: Optional[SegmentStyles] = None,
    on_event: Optional[EventHook] = None,
) -> SegmentAnalysis:
    res = SegmentPipeline(config=config, handlers=handlers, styles=styles, on_event=on_event).run(text)
    return SegmentAnalysis(
        raw=res.raw,
        segments=res.segments,
        n_tokens=res.n_tokens,
        n_segments=len(res.segments),
        n_tappable=sum(1 for s in res.segments if s.tappable),
        counts=res.counts,
    )


def analyze_segments(
    text: str,
    *,
    extract_hashtags: bool = True,
    extract_mentions: bool = True,
    extract_links: bool = True,
    extract_props: bool = True,
    extract_emoji: bool = True,
    handlers: Optional[PressHandlers] = None,
    styles: Optional[SegmentStyles] = None,
) -> SegmentAnalysis:
    cfg = SegmentConfig(
        extract_hashtags=extract_hashtags,
        extract_mentions=extract_mentions,
        extract_links=extract_links,
        extract_props=extract_props,
        extract_emoji=extract_emoji,
    )
    return analyze_segments_with_config(text, config=cfg, handlers=handlers, styles=styles)


def render_segments(
    text: str,
    *,
    extract_hashtags: bool = True,
    extract_mentions: bool = True,
    extract_links: bool = True,
    extract_props: bool = True,
    extract_emoji: bool = True,
    handlers: Optional[PressHandlers] = None,
    styles: Optional[SegmentStyles] = None,
) -> list[Segment]:
    """Convenience wrapper returning just the segment list."""

    return analyze_segments(
        text,
        extract_hashtags=extract_hashtags,
        extract_mentions=extract_mentions,
        extract_links=extract_links,
        extract_props=extract_props,
        extract_emoji=extract_emoji,
        handlers=handlers,
        styles=styles,
    ).segments
