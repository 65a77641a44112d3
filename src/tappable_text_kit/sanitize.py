from __future__ import annotations


def sanitize(text: str, extract_hashtags: bool = True, extract_mentions: bool = True) -> str:
    """
    Pre-split cleanup hook.

    Currently the identity for every flag combination. Any future cleanup must keep the
    output a pure function of its arguments; the flags are passed so that hashtag/mention
    specific cleanup can be gated the same way the recognizers are.
    """

    return text
