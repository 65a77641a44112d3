from __future__ import annotations

import regex as re

_PICTO = r"\p{Extended_Pictographic}"
_FLAG = r"[\U0001F1E6-\U0001F1FF]{2}"
_KEYCAP = r"[0-9#*]\uFE0F?\u20E3"
# Variation selectors, skin tones, tag sequences (subdivision flags).
_MODIFIER = r"(?:[\uFE0E\uFE0F]|[\U0001F3FB-\U0001F3FF]|[\U000E0020-\U000E007F])"
_PICTO_SEQ = _PICTO + _MODIFIER + r"*(?:\u200D" + _PICTO + _MODIFIER + r"*)*"

_EMOJI_TOKEN_RE = re.compile(
    r"(?:" + _FLAG + r"|" + _KEYCAP + r"|" + _PICTO_SEQ + r")+",
    flags=re.VERSION1,
)


def is_emoji(token: str) -> bool:
    """True when the whole token is made of emoji sequences (no letters, no punctuation)."""

    if not token:
        return False
    return _EMOJI_TOKEN_RE.fullmatch(token) is not None
