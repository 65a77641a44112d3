from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

DEFAULT_LINK_COLOR = "#2980b9"
DEFAULT_EMOJI_FONT_FAMILY = "Noto Color Emoji"


@dataclass(frozen=True)
class Style:
    color: Optional[str] = None
    font_family: Optional[str] = None
    underline: bool = False

    def to_rich(self) -> str:
        """Rich style string; font family has no terminal equivalent and is dropped."""

        parts: list[str] = []
        if self.color:
            parts.append(self.color)
        if self.underline:
            parts.append("underline")
        return " ".join(parts)

    def to_dict(self) -> dict[str, object]:
        return {"color": self.color, "font_family": self.font_family, "underline": self.underline}


LINK_STYLE = Style(color=DEFAULT_LINK_COLOR)
EMOJI_STYLE = Style(font_family=DEFAULT_EMOJI_FONT_FAMILY)


@dataclass(frozen=True)
class SegmentStyles:
    """Per-category style references. Hashtags, mentions and props share the link colour by default."""

    link: Optional[Style] = field(default=LINK_STYLE)
    hashtag: Optional[Style] = field(default=LINK_STYLE)
    mention: Optional[Style] = field(default=LINK_STYLE)
    prop: Optional[Style] = field(default=LINK_STYLE)
    emoji: Optional[Style] = field(default=EMOJI_STYLE)


DEFAULT_STYLES = SegmentStyles()
