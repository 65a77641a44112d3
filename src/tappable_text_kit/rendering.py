from __future__ import annotations

from typing import Iterable, Optional

from rich.style import Style as RichStyle
from rich.text import Text

from .links import url_scheme
from .recognizers import SegmentKind
from .segments import Segment


def _rich_style(seg: Segment) -> Optional[RichStyle]:
    base = RichStyle.parse(seg.style.to_rich()) if seg.style is not None and seg.style.to_rich() else None
    if seg.kind == SegmentKind.LINK and seg.value:
        href = seg.value
        if not url_scheme(href):
            href = f"mailto:{href}" if "@" in href else f"http://{href}"
        link = RichStyle(link=href)
        return link if base is None else base + link
    return base


def to_rich_text(segments: Iterable[Segment]) -> Text:
    """
    Render segments into a single `rich` Text.

    Styled segments keep their colour; link segments also carry terminal hyperlink metadata.
    The plain text of the result is exactly the concatenated segment text.
    """

    out = Text()
    for seg in segments:
        out.append(seg.text, style=_rich_style(seg))
    return out
