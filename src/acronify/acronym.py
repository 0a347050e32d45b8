"""
Acronym synthesis from ranked key words.

Each attempt takes the top key words, uses their initials as the acronym and
sometimes swaps a word for a punchier synonym with the same initial. Several
attempts are scored for pronounceability and the best one wins.
"""

import math
import random

from acronify.lexicon import DEFAULT_LEXICON, Lexicon
from acronify.models import AcronymResult, BreakdownItem

MIN_LENGTH = 3
MAX_LENGTH = 7
LENGTH_RATIO = 0.7
SUBSTITUTION_RATE = 0.3
ATTEMPTS = 3

VOWELS = frozenset("AEIOU")


def ideal_length(key_word_count: int) -> int:
    """ceil(count * 0.7) clamped to 3..7."""
    return max(MIN_LENGTH, min(MAX_LENGTH, math.ceil(key_word_count * LENGTH_RATIO)))


def enhance_word(word: str, rng: random.Random, lexicon: Lexicon = DEFAULT_LEXICON) -> str:
    """Occasionally replace word with a synonym sharing its first letter."""
    if rng.random() < SUBSTITUTION_RATE:
        alternatives = lexicon.synonyms_for(word[0])
        if alternatives:
            return rng.choice(alternatives)
    return word


def build_acronym(
    key_words: list[str],
    rng: random.Random,
    lexicon: Lexicon = DEFAULT_LEXICON,
) -> AcronymResult | None:
    """One attempt: initials of the top key words plus a breakdown."""
    if not key_words:
        return None

    selected = key_words[:ideal_length(len(key_words))]
    # upper() can expand a character ("ß"), keep one letter per word
    acronym = "".join(word[0].upper()[0] for word in selected)

    breakdown = []
    for letter, word in zip(acronym, selected):
        enhanced = enhance_word(word, rng, lexicon)
        breakdown.append(
            BreakdownItem(letter=letter, word=enhanced[:1].upper() + enhanced[1:].lower())
        )

    return AcronymResult(acronym=acronym, breakdown=breakdown)


def score_acronym(acronym: str) -> int:
    """
    Pronounceability score.

    +10 for 3-5 letters, +2 per vowel, +1 per vowel/consonant switch.
    """
    score = 0

    if MIN_LENGTH <= len(acronym) <= 5:
        score += 10

    score += 2 * sum(1 for ch in acronym if ch in VOWELS)

    for current, following in zip(acronym, acronym[1:]):
        if (current in VOWELS) != (following in VOWELS):
            score += 1

    return score


def best_acronym(
    key_words: list[str],
    rng: random.Random,
    lexicon: Lexicon = DEFAULT_LEXICON,
    attempts: int = ATTEMPTS,
) -> AcronymResult | None:
    """Run several attempts and keep the highest scoring (first on ties)."""
    best: AcronymResult | None = None
    best_score = -1

    for _ in range(attempts):
        result = build_acronym(key_words, rng, lexicon)
        if result is None:
            continue
        score = score_acronym(result.acronym)
        if score > best_score:
            best, best_score = result, score

    return best
