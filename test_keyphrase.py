#!/usr/bin/env python3
"""
Checks for free-text keyphrase extraction and category detection.
"""
from auto_tagging.keyphrase import detect_categories, extract_keyphrases
from auto_tagging.lexicon import is_any_stopword


def _phrases(text, n=5):
    return [kp.phrase for kp in extract_keyphrases(text, n)]


def test_empty_input_yields_nothing():
    assert extract_keyphrases("") == []
    assert extract_keyphrases("   \n ") == []
    assert extract_keyphrases(None) == []
    assert extract_keyphrases("some text here", 0) == []


def test_only_stopwords_yields_nothing():
    assert extract_keyphrases("the and of it is was") == []


def test_no_phrase_is_made_of_stopwords_only():
    text = "The best way to learn is by doing the things you love with friends and family."
    for kp in extract_keyphrases(text, 10):
        assert not all(is_any_stopword(w) for w in kp.phrase.split()), kp.phrase


def test_repeated_phrase_ranks_first():
    text = "Sourdough bread needs a strong starter. Sourdough bread rises slowly."
    kps = extract_keyphrases(text, 5)
    assert kps[0].phrase == "sourdough bread"
    assert all(kp.score >= 0 for kp in kps)
    assert [kp.score for kp in kps] == sorted((kp.score for kp in kps), reverse=True)


def test_proper_noun_phrase_beats_its_unigrams():
    kps = extract_keyphrases("Bruno Mars", 5)
    assert kps[0].phrase == "bruno mars"
    assert kps[0].original == "Bruno Mars"
    assert {"bruno", "mars"} <= {kp.phrase for kp in kps}


def test_phrases_do_not_cross_removed_tokens_or_sentences():
    assert "coffee tea" not in _phrases("coffee, the tea")
    assert "pizza pasta" not in _phrases("I ordered pizza. Pasta came later.")


def test_connector_only_inside_trigram():
    phrases = _phrases("history of science", 10)
    assert "history of science" in phrases
    assert "history of" not in phrases
    assert "of science" not in phrases


def test_capitalized_verb_collision_bridges_proper_noun():
    phrases = _phrases("Building apps with React Native")
    assert "react native" in phrases
    assert "react" not in phrases


def test_lowercase_verb_collision_is_a_boundary():
    assert "react native" not in _phrases("apps that react native to touch")


def test_detect_categories():
    assert [kp.phrase for kp in detect_categories("Best pasta recipe ever")] == ["cooking"]
    cats = {kp.phrase for kp in detect_categories("NBA finals and a Python script")}
    assert cats == {"basketball", "programming"}
    assert detect_categories("") == []
    assert detect_categories(None) == []


def test_detect_categories_reports_each_category_once():
    cats = detect_categories("recipe recipes cooking chef kitchen bake")
    assert [kp.phrase for kp in cats] == ["cooking"]


def test_max_phrases_is_an_upper_bound():
    text = (
        "Sourdough bread needs a strong starter. Sourdough bread rises slowly "
        "in a warm kitchen, and the crust turns golden in a cast iron oven."
    )
    for n in (0, 1, 2, 3, 5, 10):
        assert len(extract_keyphrases(text, n)) <= n


def test_equal_scores_keep_first_occurrence_order():
    kps = extract_keyphrases("Lamp. Cloud. Apple.", 5)
    assert [kp.phrase for kp in kps] == ["lamp", "cloud", "apple"]
    assert len({kp.score for kp in kps}) == 1
    assert _phrases("Apple. Cloud. Lamp.") == ["apple", "cloud", "lamp"]


def test_leading_verb_collision_does_not_start_a_trigram():
    phrases = _phrases("Learn React Native in 2024 | Full Course", 10)
    assert phrases[0] == "react native"
    assert "learn react native" not in phrases
    assert "learn react" not in phrases
