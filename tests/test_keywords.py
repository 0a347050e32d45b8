"""
Tests for keyword extraction.
"""

from acronify.keywords import extract_key_words, score_key_words, tokenize
from acronify.lexicon import Lexicon

SAMPLE = "Achieve great results through consistent daily effort and focus"


def test_tokenize_drops_stop_words_short_words_and_punctuation():
    assert tokenize("The cat, a dog; and an OWL!") == ["cat", "dog", "owl"]


def test_scores_favor_length_and_position():
    terms = {t.word: t.score for t in score_key_words(SAMPLE)}
    # 8 content words: achieve is first, consistent is longest
    assert terms["achieve"] == 7 + 8 * 0.5
    assert terms["consistent"] == 10 + 4 * 0.5
    assert terms["focus"] == 5 + 1 * 0.5


def test_extract_key_words_orders_by_score():
    assert extract_key_words(SAMPLE) == [
        "consistent", "achieve", "results", "through",
        "great", "effort", "daily", "focus",
    ]


def test_extract_key_words_caps_at_eight():
    text = " ".join(f"word{i:02d}" for i in range(20))
    words = extract_key_words(text)
    assert len(words) == 8
    # equal lengths, so earliest words win
    assert words[0] == "word00"


def test_ties_keep_document_order():
    # moon: 4 + 3 * 0.5, stars: 5 + 1 * 0.5
    assert extract_key_words("moon sun stars") == ["moon", "stars", "sun"]


def test_only_stop_words_yields_nothing():
    assert extract_key_words("the and with from that, is it to be") == []


def test_repeated_words_are_not_merged():
    assert extract_key_words("focus focus focus") == ["focus", "focus", "focus"]


def test_custom_stop_words():
    lexicon = Lexicon(stop_words=frozenset({"achieve"}), synonyms=())
    assert "achieve" not in extract_key_words(SAMPLE, lexicon)
    assert "and" in tokenize(SAMPLE, lexicon)
