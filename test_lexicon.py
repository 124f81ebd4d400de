#!/usr/bin/env python3
"""
Checks for the closed-list classifier, normalization and the validation gate.
"""
from auto_tagging.lexicon import (
    has_noun_suffix,
    is_adjective_stopword,
    is_any_stopword,
    is_likely_noun,
    is_stopword,
    is_url_path_junk_word,
    is_verb_stopword,
    is_video_junk_word,
)
from auto_tagging.text_utils import generate_slug, is_numeric, normalize_tag_name, segment_glued
from auto_tagging.validation import validate_tag


def test_stopword_lists_are_case_insensitive():
    for word in ("the", "The", "THE"):
        assert is_stopword(word)
        assert is_any_stopword(word)
    assert is_verb_stopword("Learning")
    assert is_adjective_stopword("AWESOME")
    assert is_video_junk_word("Official")
    assert is_url_path_junk_word("Docs")


def test_any_stopword_covers_every_category():
    for word in ("and", "getting", "beautiful", "remix", "watch"):
        assert is_any_stopword(word), word
    assert not is_any_stopword("sourdough")


def test_is_likely_noun_rules():
    # activity nouns override the verb list
    assert is_likely_noun("cooking")
    assert is_likely_noun("programming")
    assert not is_likely_noun("the")
    assert not is_likely_noun("xy")
    # non-noun suffix needs capitalization or an exception entry
    assert not is_likely_noun("quickly")
    assert not is_likely_noun("jumped")
    assert is_likely_noun("festival")
    assert is_likely_noun("beijing", "Beijing")
    assert is_likely_noun("photography")
    assert is_likely_noun("sunset")


def test_noun_suffix_detection():
    assert has_noun_suffix("collection")
    assert has_noun_suffix("technology")
    assert not has_noun_suffix("sunset")


def test_normalize_tag_name():
    assert normalize_tag_name("  React   Native ") == "react native"
    assert normalize_tag_name("") == ""
    assert normalize_tag_name(None) == ""
    once = normalize_tag_name("\tMachine\nLearning  ")
    assert normalize_tag_name(once) == once


def test_generate_slug():
    assert generate_slug("React Native") == "react-native"
    assert generate_slug("  rock & roll!! ") == "rock-roll"
    assert generate_slug("") == ""


def test_is_numeric():
    for s in ("2024", "3.14", "10-12", "12:30"):
        assert is_numeric(s), s
    assert not is_numeric("web3")
    assert not is_numeric("---")


def test_segment_glued_keeps_short_or_unsplittable_tokens():
    assert segment_glued("react") == ["react"]
    assert segment_glued("abc123xyz") == ["abc123xyz"]
    assert segment_glued("") == [""]


def test_validate_rejects_short_numeric_and_stopwords():
    assert validate_tag("ab") is None
    assert validate_tag("") is None
    assert validate_tag(None) is None
    assert validate_tag("2024") is None
    assert validate_tag("the") is None
    assert validate_tag("official") is None
    assert validate_tag("x" * 41) is None


def test_validate_accepts_nouns_and_activities():
    assert validate_tag("Programming") == "programming"
    assert validate_tag("  Sunset ") == "sunset"
    assert validate_tag("hiking") == "hiking"


def test_validate_phrases():
    assert validate_tag("React  Native") == "react native"
    assert validate_tag("golden gate bridge") == "golden gate bridge"
    assert validate_tag("the beatles") is None
    assert validate_tag("best of") is None
    assert validate_tag("official video") is None


def test_capitalized_original_overrides_adjective_collision():
    assert validate_tag("rich") is None
    assert validate_tag("rich", "Rich") == "rich"
    # verb collisions are not overridden by casing alone
    assert validate_tag("getting", "Getting") is None
