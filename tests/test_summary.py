"""
Tests for extractive summaries.
"""

import asyncio

import pytest

from acronify.config import get_default_config
from acronify.errors import ValidationError
from acronify.generator import Generator
from acronify.latency import Latency
from acronify.summary import SummaryBuilder, score_sentences, split_sentences

FILLER = (
    "explains how spaced review sessions strengthen long term memory "
    "for students who study a little every single day"
)


def _text(sentences):
    return " ".join(f"{s}." for s in sentences)


def test_split_sentences_on_runs_of_terminators():
    text = "Is this working?! Yes it is working... Ok. Short one here"
    assert split_sentences(text) == ["Is this working", "Yes it is working", "Short one here"]


def test_score_sentences():
    scored = score_sentences(
        ["memory helps recall", "nothing relevant is here at all", "final memory note"],
        ["memory", "recall"],
    )
    # first: two key words + first; 19 chars misses the length bonus
    assert [s.score for s in scored] == [5, 1, 3]


def test_key_words_count_once_per_sentence():
    scored = score_sentences(["memory memory memory memory"], ["memory"])
    # +2 key word, +1 first (and last), +1 length 27
    assert scored[0].score == 4


def test_short_text_is_returned_whole(generator):
    text = (
        "Photosynthesis converts light into chemical energy. "
        "Plants store that energy as glucose. "
        "Animals eat plants to obtain it."
    )
    result = asyncio.run(generator.summarize_text(text))
    assert result.summary == text


def test_selected_sentences_keep_document_order():
    sentences = [f"Note {i} {FILLER}" for i in range(8)]
    # make the last sentence the best scoring one
    sentences[-1] = "Memory memory retention " + FILLER
    summary = SummaryBuilder().build(_text(sentences), ["memory", "retention"])

    parts = [p.strip() for p in summary.split(".") if p.strip()]
    indexes = [sentences.index(p) for p in parts]
    assert indexes == sorted(indexes)
    assert parts[-1] == sentences[-1]


def test_twenty_word_sentences_stop_at_top_five(generator):
    text = _text(f"Note {i} {FILLER}" for i in range(12))
    result = asyncio.run(generator.summarize_text(text))
    assert len(result.summary.split()) == 100


def test_long_sentences_stop_inside_the_band(generator):
    text = _text(f"Note {i} {FILLER} and {FILLER}" for i in range(10))
    words = len(asyncio.run(generator.summarize_text(text)).summary.split())
    assert 150 - 20 <= words <= 150 + 20


def test_short_sentences_are_topped_up(generator):
    text = _text(f"Note {i} covers memory techniques for busy students" for i in range(20))
    result = asyncio.run(generator.summarize_text(text))
    # 5 selected sentences of 8 words, then 10 more until 120 words
    assert len(result.summary.split()) == 120


def test_top_up_skips_sentences_over_budget():
    builder = SummaryBuilder()
    long_one = " ".join(["word"] * 175)
    sentences = [f"Note {i} covers memory techniques for busy students" for i in range(6)]
    sentences.insert(0, long_one)
    scored = score_sentences(sentences, ["memory"])

    chosen = builder.select(scored)

    assert all(s.text != long_one for s in chosen)
    assert sum(s.word_count for s in chosen) == 48


def test_summarize_short_input(generator):
    with pytest.raises(ValidationError):
        asyncio.run(generator.summarize_text("Too short to summarize. Really."))


def test_summarize_needs_key_words(generator):
    text = "It is to be. " * 6
    with pytest.raises(ValidationError, match="meaningful words"):
        asyncio.run(generator.summarize_text(text))


def test_summarize_needs_sentences(generator):
    text = "Red fox. Blue owl. Tan cat. Big elk. Old ram. Sly eel. Wet hen."
    with pytest.raises(ValidationError, match="sentences"):
        asyncio.run(generator.summarize_text(text))


def test_fill_bands_scale_with_target():
    builder = SummaryBuilder(target_words=300)
    assert (builder.min_words, builder.fill_stop_words) == (200, 240)
    assert (SummaryBuilder().min_words, SummaryBuilder().fill_stop_words) == (100, 120)

    text = _text(f"Note {i} covers memory techniques for busy students" for i in range(40))
    summary = builder.build(text, ["memory"])
    # 8-word sentences, topped up until 240 words
    assert len(summary.split()) == 240


def test_summary_words_from_config():
    config = get_default_config()
    config["generation"]["summary_words"] = 60
    generator = Generator(config, latency=Latency.none())
    assert generator.summary_builder.target_words == 60
    assert generator.summary_builder.min_words == 40
