"""
Extractive summaries.

Sentences are scored by how many key words they mention, whether they open
or close the text, and whether they are a comfortable length. The best few
are stitched back together in document order under a soft word budget.
"""

import re
from dataclasses import dataclass

TARGET_WORDS = 150
MAX_SENTENCES = 5
MIN_SENTENCE_CHARS = 10

_SENTENCE_END = re.compile(r"[.!?]+")


@dataclass(frozen=True)
class ScoredSentence:
    text: str
    index: int
    score: int

    @property
    def word_count(self) -> int:
        return len(self.text.split())


def split_sentences(text: str) -> list[str]:
    """Split on runs of . ! ? and drop fragments under 10 characters."""
    sentences = (s.strip() for s in _SENTENCE_END.split(text))
    return [s for s in sentences if len(s) >= MIN_SENTENCE_CHARS]


def score_sentences(sentences: list[str], key_words: list[str]) -> list[ScoredSentence]:
    """Score sentences in document order."""
    last = len(sentences) - 1
    scored = []

    for index, sentence in enumerate(sentences):
        lowered = sentence.lower()
        score = 2 * sum(1 for word in key_words if word.lower() in lowered)
        if index == 0 or index == last:
            score += 1
        if 20 <= len(sentence) <= 100:
            score += 1
        scored.append(ScoredSentence(text=sentence, index=index, score=score))

    return scored


class SummaryBuilder:
    """
    Assembles a summary of roughly target_words words.

    min_words and fill_stop_words default to 2/3 and 4/5 of the target
    (100 and 120 for 150 words).
    """

    def __init__(
        self,
        target_words: int = TARGET_WORDS,
        max_sentences: int = MAX_SENTENCES,
        tolerance: int = 20,
        fill_tolerance: int = 30,
        min_words: int | None = None,
        fill_stop_words: int | None = None,
    ):
        self.target_words = target_words
        self.max_sentences = max_sentences
        self.tolerance = tolerance
        self.fill_tolerance = fill_tolerance
        self.min_words = min_words if min_words is not None else target_words * 2 // 3
        self.fill_stop_words = (
            fill_stop_words if fill_stop_words is not None else target_words * 4 // 5
        )

    def select(self, scored: list[ScoredSentence]) -> list[ScoredSentence]:
        """Pick sentences for the summary, in the order they will be joined."""
        ranked = sorted(scored, key=lambda s: s.score, reverse=True)
        top = sorted(ranked[:min(self.max_sentences, len(ranked))], key=lambda s: s.index)

        chosen: list[ScoredSentence] = []
        words = 0
        for sentence in top:
            if words + sentence.word_count > self.target_words + self.tolerance:
                break
            chosen.append(sentence)
            words += sentence.word_count
            if words >= self.target_words - self.tolerance:
                break

        if words < self.min_words:
            taken = {s.index for s in chosen}
            for sentence in ranked:
                if sentence.index in taken:
                    continue
                if words + sentence.word_count <= self.target_words + self.fill_tolerance:
                    chosen.append(sentence)
                    words += sentence.word_count
                    if words >= self.fill_stop_words:
                        break

        return chosen

    def build(self, text: str, key_words: list[str]) -> str:
        """Summary text, or an empty string when nothing fits."""
        scored = score_sentences(split_sentences(text), key_words)
        chosen = self.select(scored)
        return " ".join(f"{s.text}." for s in chosen).strip()
