from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Optional

from .notify import PressHandler, PressHandlers
from .recognizers import Classification, SegmentKind
from .styles import DEFAULT_STYLES, SegmentStyles, Style
from .tokens import Token

OnPress = Callable[[Any], None]


@dataclass(frozen=True)
class Segment:
    """
    One renderable run of text.

    `on_press` takes the renderer's press event (anything, may be None) and is already bound
    to the segment's value.
    """

    text: str
    kind: SegmentKind = SegmentKind.PLAIN
    on_press: Optional[OnPress] = None
    style: Optional[Style] = None
    value: Optional[str] = None
    token_index: int = 0

    @property
    def tappable(self) -> bool:
        return self.on_press is not None

    def press(self, event: Any = None) -> None:
        if self.on_press is not None:
            self.on_press(event)


def _bind(handler: Optional[PressHandler], *args: Any) -> Optional[OnPress]:
    if handler is None:
        return None

    def on_press(event: Any = None) -> None:
        handler(event, *args)

    return on_press


def build_segments(
    token: Token,
    classification: Optional[Classification],
    *,
    handlers: PressHandlers,
    styles: SegmentStyles = DEFAULT_STYLES,
) -> list[Segment]:
    """
    Expand one token into its segments.

    Prop/hashtag/mention -> [matched, remainder]; link/emoji -> one styled segment;
    whitespace, plain, or unclassified -> one verbatim plain segment.
    """

    idx = token.index
    if token.is_whitespace or classification is None or classification.kind == SegmentKind.PLAIN:
        return [Segment(text=token.text, token_index=idx)]

    c = classification
    if c.kind == SegmentKind.EMOJI:
        return [Segment(text=token.text, kind=c.kind, style=styles.emoji, value=c.value, token_index=idx)]

    if c.kind == SegmentKind.LINK:
        return [
            Segment(
                text=token.text,
                kind=c.kind,
                on_press=_bind(handlers.on_press_link, c.value),
                style=styles.link,
                value=c.value,
                token_index=idx,
            )
        ]

    if c.kind == SegmentKind.PROP:
        on_press = _bind(handlers.on_press_prop, c.value, idx)
        style = styles.prop
    elif c.kind == SegmentKind.MENTION:
        on_press = _bind(handlers.on_press_mention, c.value, idx)
        style = styles.mention
    else:
        on_press = _bind(handlers.on_press_hashtag, c.value)
        style = styles.hashtag

    return [
        Segment(text=c.matched, kind=c.kind, on_press=on_press, style=style, value=c.value, token_index=idx),
        Segment(text=c.remainder, token_index=idx),
    ]


def segments_to_dicts(segments: Iterable[Segment]) -> list[dict[str, object]]:
    """JSON-friendly view (callbacks become a `tappable` flag)."""

    return [
        {
            "text": s.text,
            "kind": s.kind.value,
            "value": s.value,
            "style": None if s.style is None else s.style.to_dict(),
            "tappable": s.tappable,
            "token_index": s.token_index,
        }
        for s in segments
    ]


def join_segments(segments: Iterable[Segment]) -> str:
    return "".join(s.text for s in segments)
