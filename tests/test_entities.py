from __future__ import annotations

from tappable_text_kit.entities import (
    Entity,
    TwitterEntityExtractor,
    extract_hashtags,
    extract_mentions,
)


def test_extract_hashtags_basic() -> None:
    assert extract_hashtags("#world") == ["world"]
    assert extract_hashtags("hello #world and #python3") == ["world", "python3"]
    assert extract_hashtags("#world,") == ["world"]
    assert extract_hashtags("＃tag") == ["tag"]


def test_extract_hashtags_rejects_non_hashtags() -> None:
    assert extract_hashtags("") == []
    assert extract_hashtags("no tags here") == []
    assert extract_hashtags("#123") == []
    assert extract_hashtags("foo#bar") == []
    assert extract_hashtags("&#39;") == []
    assert extract_hashtags("#a#b") == []


def test_hashtags_inside_urls_are_dropped() -> None:
    assert extract_hashtags("http://example.com/#hash") == []
    keep = TwitterEntityExtractor(check_url_overlap=False)
    assert keep.extract_hashtags("http://example.com/#hash") == ["hash"]


def test_extract_hashtags_with_indices() -> None:
    ex = TwitterEntityExtractor()
    assert ex.extract_hashtags_with_indices("say #hi") == [Entity(value="hi", start=4, end=7)]


def test_extract_mentions_basic() -> None:
    assert extract_mentions("@alice") == ["alice"]
    assert extract_mentions("hi @alice and @bob_2!") == ["alice", "bob_2"]
    assert extract_mentions("＠carol") == ["carol"]


def test_extract_mentions_rejects_non_mentions() -> None:
    assert extract_mentions("foo@bar") == []
    assert extract_mentions("alice@example.com") == []
    assert extract_mentions("@alice/list") == []
    assert extract_mentions("@alice@bob") == []
    assert extract_mentions("@") == []


def test_extract_mentions_with_indices() -> None:
    ex = TwitterEntityExtractor()
    assert ex.extract_mentions_with_indices("@alice!") == [Entity(value="alice", start=0, end=6)]


def test_domain_after_hash_is_not_a_url() -> None:
    # `python.org` right after the hash sign is not a URL, so the hashtag survives.
    assert extract_hashtags("#python.org") == ["python"]
    assert extract_hashtags("launching #launch.io today") == ["launch"]
    assert extract_hashtags("see example.org #tag") == ["tag"]
