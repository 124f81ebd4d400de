#!/usr/bin/env python3
"""
Checks for title splitting, URL token derivation and file-name tokens.
"""
from auto_tagging.title_processing import extract_title_keyphrases, split_title
from auto_tagging.url_processing import (
    extract_domain_tokens,
    extract_filename_tokens,
    path_segments,
    registrable_label,
)


def _phrases(kps):
    return [kp.phrase for kp in kps]


def test_split_title_segments_and_brackets():
    segments, bracketed = split_title("Bruno Mars - Uptown Funk (Official Video)")
    assert segments == ["Bruno Mars", "Uptown Funk"]
    assert bracketed == ["Official Video"]
    segments, _ = split_title("Weekly Digest | Tech News // Issue 12")
    assert segments == ["Weekly Digest", "Tech News", "Issue 12"]


def test_music_title_keeps_artist_and_track():
    phrases = _phrases(extract_title_keyphrases("Bruno Mars - Uptown Funk (Official Video)"))
    assert "bruno mars" in phrases
    assert "uptown funk" in phrases
    assert "official" not in phrases
    assert "video" not in phrases


def test_title_scores_are_normalized():
    kps = extract_title_keyphrases("Golden Gate Bridge at sunset")
    assert kps[0].phrase == "golden gate bridge"
    assert kps[0].score == 1.0
    assert all(0.0 <= kp.score <= 1.0 for kp in kps)


def test_bracketed_material_is_down_weighted():
    kps = {kp.phrase: kp.score for kp in extract_title_keyphrases("Despacito (feat. Justin Bieber)")}
    assert kps["despacito"] == 1.0
    assert kps["justin bieber"] < kps["despacito"]


def test_title_with_proper_bridge():
    assert "react native" in _phrases(extract_title_keyphrases("React Native for beginners"))


def test_empty_title():
    assert extract_title_keyphrases("") == []
    assert extract_title_keyphrases(None) == []
    assert extract_title_keyphrases("(Official Video)") == []


def test_registrable_label():
    assert registrable_label("www.reactnative.dev") == "reactnative"
    assert registrable_label("news.bbc.co.uk") == "bbc"
    assert registrable_label("github.com") == "github"
    assert registrable_label("localhost") == "localhost"


def test_domain_label_of_docs_url():
    phrases = _phrases(extract_domain_tokens("https://reactnative.dev/docs/getting-started"))
    assert "reactnative" in phrases
    assert "docs" not in phrases
    assert "getting started" not in phrases


def test_platform_domains_map_to_platform_tags():
    kps = extract_domain_tokens("https://www.youtube.com/watch?v=dQw4w9WgXcQ")
    assert _phrases(kps) == ["youtube"]
    assert _phrases(extract_domain_tokens("https://youtu.be/dQw4w9WgXcQ")) == ["youtube"]
    assert "stack overflow" in _phrases(extract_domain_tokens("https://stackoverflow.com/questions/123"))


def test_path_segments_become_tokens():
    kps = extract_domain_tokens("https://news.bbc.co.uk/sport/football")
    phrases = _phrases(kps)
    assert "bbc" in phrases
    assert "football" in phrases
    assert all(0.0 <= kp.score <= 0.7 for kp in kps)


def test_url_without_scheme():
    assert "github" in _phrases(extract_domain_tokens("github.com/psf/requests"))


def test_malformed_urls_never_raise():
    for raw in ("not-a-valid-url", "http://[::1", "::::", "just some words", "https://"):
        assert isinstance(extract_domain_tokens(raw), list)
    assert extract_domain_tokens("") == []
    assert extract_domain_tokens(None) == []


def test_path_segments_drop_junk_versions_and_ids():
    assert path_segments("/docs/v2/getting-started.html") == ["getting started"]
    assert path_segments("/watch/2024/a1b2c3d4e5") == []
    assert path_segments("/recipes/lemon_tart/photos") == ["recipes", "lemon tart"]


def test_filename_tokens():
    phrases = _phrases(extract_filename_tokens("/photos/GoldenGate_sunset.jpg"))
    assert "golden gate" in phrases
    assert extract_filename_tokens("IMG_2041.jpg") == []
    assert extract_filename_tokens("a1b2c3d4e5f6.png") == []
    assert extract_filename_tokens(None) == []
    assert all(kp.score <= 0.5 for kp in extract_filename_tokens("C:\\Users\\me\\lemon_tart_recipe.pdf"))
