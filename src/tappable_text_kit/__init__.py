"""Tappable Text Kit.

Public API is intentionally small. Prefer using `SegmentPipeline` + `SegmentConfig` for SDK usage.
"""

from .config import SegmentConfig
from .emoji import is_emoji
from .entities import Entity, EntityExtractor, TwitterEntityExtractor, extract_hashtags, extract_mentions
from .errors import (
    CollaboratorError,
    InvalidConfigError,
    InvalidInputError,
    OptionalDependencyError,
    TtkError,
)
from .links import LinkifyTester, LinkTester, is_link
from .notify import (
    AlertNotifier,
    BrowserOpener,
    LogNotifier,
    Notifier,
    PressHandlers,
    UrlOpener,
    default_press_handlers,
    get_notifier,
)
from .pipeline import SegmentPipeline, SegmentPipelineResult
from .recognizers import (
    Classification,
    ClassifyContext,
    EmojiRecognizer,
    HashtagRecognizer,
    LinkRecognizer,
    MentionRecognizer,
    PropRecognizer,
    Recognizer,
    SegmentKind,
    classify_token,
)
from .rendering import to_rich_text
from .sanitize import sanitize
from .segment_render import (
    SegmentAnalysis,
    analyze_segments,
    analyze_segments_with_config,
    render_segments,
)
from .segments import Segment, build_segments, join_segments, segments_to_dicts
from .styles import SegmentStyles, Style
from .tokens import Token, split_words

__all__ = [
    "SegmentConfig",
    "SegmentPipeline",
    "SegmentPipelineResult",
    "SegmentAnalysis",
    "analyze_segments",
    "analyze_segments_with_config",
    "render_segments",
    "sanitize",
    "Token",
    "split_words",
    "SegmentKind",
    "Classification",
    "ClassifyContext",
    "Recognizer",
    "LinkRecognizer",
    "PropRecognizer",
    "HashtagRecognizer",
    "MentionRecognizer",
    "EmojiRecognizer",
    "classify_token",
    "Segment",
    "build_segments",
    "join_segments",
    "segments_to_dicts",
    "Style",
    "SegmentStyles",
    "to_rich_text",
    "is_emoji",
    "is_link",
    "LinkTester",
    "LinkifyTester",
    "Entity",
    "EntityExtractor",
    "TwitterEntityExtractor",
    "extract_hashtags",
    "extract_mentions",
    "Notifier",
    "LogNotifier",
    "AlertNotifier",
    "get_notifier",
    "UrlOpener",
    "BrowserOpener",
    "PressHandlers",
    "default_press_handlers",
    "TtkError",
    "InvalidConfigError",
    "InvalidInputError",
    "CollaboratorError",
    "OptionalDependencyError",
]

__version__ = "0.1.0"
