"""
Keyword extraction.

Picks the words worth remembering from a piece of text. Longer words and
words that appear earlier rank higher. No NLP, just a length/position score.
"""

import re
from dataclasses import dataclass

from acronify.lexicon import DEFAULT_LEXICON, Lexicon

MAX_KEY_WORDS = 8
MIN_WORD_LENGTH = 3

_NON_WORD = re.compile(r"[^\w\s]")


@dataclass(frozen=True)
class KeyTerm:
    """A candidate key word and its relevance score."""

    word: str
    score: float
    index: int


def tokenize(text: str, lexicon: Lexicon = DEFAULT_LEXICON) -> list[str]:
    """Lower-case content words, punctuation stripped, stop words removed."""
    words = _NON_WORD.sub(" ", text.lower()).split()
    return [
        word for word in words
        if len(word) >= MIN_WORD_LENGTH and word not in lexicon.stop_words
    ]


def score_key_words(text: str, lexicon: Lexicon = DEFAULT_LEXICON) -> list[KeyTerm]:
    """
    Score every content word in text, best first.

    score = len(word) + (total - index) * 0.5

    Ties keep document order. Repeated words are scored separately.
    """
    words = tokenize(text, lexicon)
    total = len(words)
    terms = [
        KeyTerm(word=word, score=len(word) + (total - index) * 0.5, index=index)
        for index, word in enumerate(words)
    ]
    return sorted(terms, key=lambda term: term.score, reverse=True)


def extract_key_words(text: str, lexicon: Lexicon = DEFAULT_LEXICON) -> list[str]:
    """Return up to 8 key words, highest scoring first."""
    return [term.word for term in score_key_words(text, lexicon)[:MAX_KEY_WORDS]]
