from __future__ import annotations

from dataclasses import dataclass

import regex as re

# Capturing group keeps whitespace runs in the split output.
_SPLIT_RE = re.compile(r"(\s+)")


@dataclass(frozen=True)
class Token:
    text: str
    index: int
    is_whitespace: bool = False


def split_words(text: str) -> list[Token]:
    """
    Split text into alternating content words and whitespace runs.

    Lossless: joining every token's text in order gives back `text`. Empty input yields a
    single empty token.
    """

    # Odd positions are always the captured separators.
    parts = _SPLIT_RE.split(text)
    return [Token(text=p, index=i, is_whitespace=(i % 2 == 1)) for i, p in enumerate(parts)]


def join_tokens(tokens: list[Token]) -> str:
    return "".join(t.text for t in tokens)
