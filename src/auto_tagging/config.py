"""
Configuration defaults for automatic tagging and confidence feedback.
"""

# Tag shape
DEFAULT_MIN_TAG_LENGTH = 3
DEFAULT_MAX_TAG_LENGTH = 40  # room for trigram phrases like "natural language processing"
DEFAULT_MIN_TOKEN_LEN = 2

# Keyphrase scoring (favor multi-word phrases over generic unigrams)
DEFAULT_MAX_NGRAM = 3
DEFAULT_PHRASE_BOOST_BIGRAM = 1.2
DEFAULT_PHRASE_BOOST_TRIGRAM = 1.4
DEFAULT_PROPER_NOUN_BOOST = 1.25   # every token capitalized in source
DEFAULT_NOUN_SUFFIX_BONUS = 1.1    # -tion, -ment, -ity ...
DEFAULT_MAX_PHRASES = 5

# Content categories detected by closed patterns
DEFAULT_CATEGORY_SCORE = 0.6

# Title specialization
DEFAULT_TITLE_MAX_PHRASES = 6
DEFAULT_TITLE_BRACKET_WEIGHT = 0.5  # "(feat. X)" and similar side material

# URL specialization
DEFAULT_PLATFORM_SCORE = 0.7
DEFAULT_DOMAIN_SCORE = 0.5
DEFAULT_DOMAIN_SPLIT_SCORE = 0.4    # "reactnative" -> "react native"
DEFAULT_URL_MAX_PATH_SEGMENTS = 3
DEFAULT_PATH_SCORE_CEILING = 0.45
DEFAULT_SLUG_SCORE_CEILING = 0.35
DEFAULT_FILENAME_SCORE_CEILING = 0.5
DEFAULT_FILENAME_MAX_PHRASES = 3

# Per-field weights used by the candidate assembler
DEFAULT_TITLE_WEIGHT = 0.9
DEFAULT_NOTES_WEIGHT = 0.8
DEFAULT_TEXT_WEIGHT = 0.7
DEFAULT_EXTRA_TEXT_WEIGHT = 0.6
DEFAULT_EXTRA_KEYWORD_SCORE = 0.75
DEFAULT_MEDIA_TYPE_SCORE = 0.3
DEFAULT_NOTES_MAX_PHRASES = 3
DEFAULT_TEXT_MAX_PHRASES = 5

# Cross-source fusion: best + corroboration * sum(others), clamped.
# Calibrate against real usage data; tests only bound the range.
DEFAULT_FUSION_CORROBORATION = 0.5
DEFAULT_MULTIWORD_BOOST = 1.1
DEFAULT_FUSION_CAP = 1.5

# Assignment
DEFAULT_MIN_SCORE_THRESHOLD = 0.3
DEFAULT_MAX_TAGS_PER_ITEM = 5
DEFAULT_MAX_TAGS_WITH_CONTENT = 10

# Confidence feedback: move a fraction `step` of the remaining distance
# toward 1 (like) or 0 (dislike).
DEFAULT_LIKE_STEP = 0.1
DEFAULT_DISLIKE_STEP = 0.1
DEFAULT_SUPER_LIKE_STEP = 0.15
DEFAULT_NEUTRAL_CONFIDENCE = 0.5

# CLI
DEFAULT_OUTPUT_DIR = "output/tags"
DEFAULT_DB_PATH = "output/tags.sqlite"
