"""
Generator for Acronify.

Turns raw text into an acronym or a summary. Both paths are heuristic and
local; the awaited delay only mimics the feel of a remote model.
"""

import logging
import random
from typing import Any

from acronify.acronym import best_acronym
from acronify.config import load_config
from acronify.errors import ValidationError
from acronify.keywords import extract_key_words
from acronify.latency import Latency
from acronify.lexicon import Lexicon, get_lexicon
from acronify.models import AcronymResult, SummaryResult
from acronify.summary import SummaryBuilder

logger = logging.getLogger(__name__)

MIN_ACRONYM_CHARS = 10
MIN_SUMMARY_CHARS = 50


class Generator:
    """Heuristic acronym and summary generator."""

    def __init__(
        self,
        config: dict[str, Any] | None = None,
        rng: random.Random | None = None,
        latency: Latency | None = None,
        lexicon: Lexicon | None = None,
    ):
        self.config = config or load_config()
        gen_config = self.config.get("generation", {})

        self.rng = rng or random.Random()
        self.latency = latency or Latency(
            gen_config.get("min_latency", 1.0),
            gen_config.get("max_latency", 3.0),
        )
        self.lexicon = lexicon or get_lexicon(self.config)
        self.summary_builder = SummaryBuilder(
            target_words=gen_config.get("summary_words", 150),
        )

    def _key_words(self, text: str) -> list[str]:
        key_words = extract_key_words(text, self.lexicon)
        if not key_words:
            raise ValidationError("Unable to extract meaningful words from the text")
        return key_words

    async def generate_acronym(
        self, text: str, force_regenerate: bool = False
    ) -> AcronymResult:
        """
        Generate an acronym for text.

        force_regenerate marks a caller-initiated retry. Every call recomputes,
        so it does not change the result; it is only logged.
        """
        await self.latency.wait(self.rng)

        if not text or len(text.strip()) < MIN_ACRONYM_CHARS:
            raise ValidationError(
                f"Text must be at least {MIN_ACRONYM_CHARS} characters long"
            )

        key_words = self._key_words(text)
        result = best_acronym(key_words, self.rng, self.lexicon)
        if result is None:
            raise ValidationError("Failed to generate acronym from the provided text")

        logger.debug(
            f"Acronym {result.acronym} from {len(key_words)} key words"
            f"{' (regenerate)' if force_regenerate else ''}"
        )
        return result

    async def summarize_text(
        self, text: str, force_regenerate: bool = False
    ) -> SummaryResult:
        """
        Summarize text in roughly 150 words.

        force_regenerate behaves as in generate_acronym.
        """
        await self.latency.wait(self.rng)

        if not text or len(text.strip()) < MIN_SUMMARY_CHARS:
            raise ValidationError(
                f"Text must be at least {MIN_SUMMARY_CHARS} characters long"
            )

        key_words = self._key_words(text)
        summary = self.summary_builder.build(text, key_words)
        if not summary:
            raise ValidationError("Unable to find sentences to summarize")

        logger.debug(
            f"Summary of {len(summary.split())} words"
            f"{' (regenerate)' if force_regenerate else ''}"
        )
        return SummaryResult(summary=summary)


async def generate_acronym(text: str, force_regenerate: bool = False) -> AcronymResult:
    """Convenience function to generate a single acronym."""
    return await Generator().generate_acronym(text, force_regenerate)


async def summarize_text(text: str, force_regenerate: bool = False) -> SummaryResult:
    """Convenience function to summarize a single text."""
    return await Generator().summarize_text(text, force_regenerate)
