"""
Word tables used by the generators.

The built-in tables are English. A TOML file can replace either table:

    stop_words = ["le", "la", "les", ...]
    synonyms = ["Avancer", "Bâtir", ...]
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from acronify.errors import ConfigError


# Replacement words offered in acronym breakdowns, grouped loosely by flavor
IMPACTFUL_WORDS = (
    # Action words
    "Achieve", "Advance", "Aspire", "Build", "Create", "Develop", "Excel", "Focus",
    "Generate", "Improve", "Lead", "Master", "Optimize", "Perform", "Quality",
    "Reach", "Succeed", "Transform", "Unite", "Win",
    # Descriptive words
    "Amazing", "Brilliant", "Creative", "Dynamic", "Effective", "Fantastic",
    "Great", "Innovative", "Outstanding", "Perfect", "Smart", "Strategic",
    "Strong", "Unique", "Valuable", "Wonderful",
    # Concepts
    "Balance", "Change", "Direction", "Energy", "Freedom", "Growth", "Harmony",
    "Impact", "Knowledge", "Learning", "Mission", "Progress", "Results",
    "Success", "Vision", "Wisdom",
)

STOP_WORDS = frozenset({
    "a", "an", "and", "are", "as", "at", "be", "by", "for", "from", "has", "he",
    "in", "is", "it", "its", "of", "on", "that", "the", "to", "was", "will",
    "with", "you", "your", "we", "our", "us", "or", "but", "if", "this", "they",
    "them", "their", "can", "could", "would", "should", "have", "had", "do",
    "does", "did", "get", "got", "make", "made", "take", "took", "go", "went",
    "come", "came", "see", "saw", "know", "knew", "think", "thought", "say",
    "said", "tell", "told",
})


@dataclass(frozen=True)
class Lexicon:
    """Stop words filtered out of key terms, and synonyms for breakdowns."""

    stop_words: frozenset[str]
    synonyms: tuple[str, ...]

    def synonyms_for(self, letter: str) -> list[str]:
        """Synonyms starting with the given letter (case-insensitive)."""
        letter = letter.lower()
        return [word for word in self.synonyms if word[:1].lower() == letter]


DEFAULT_LEXICON = Lexicon(stop_words=STOP_WORDS, synonyms=IMPACTFUL_WORDS)


def _string_list(data: dict[str, Any], key: str, path: Path) -> list[str] | None:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ConfigError(f"{path}: '{key}' must be a list of strings")
    return [v.strip() for v in value if v.strip()]


def load_lexicon(path: Path) -> Lexicon:
    """
    Load a lexicon from a TOML file.

    Missing tables fall back to the built-in ones.
    """
    import tomli

    try:
        with open(path, "rb") as f:
            data = tomli.load(f)
    except (OSError, tomli.TOMLDecodeError) as e:
        raise ConfigError(f"Cannot read lexicon {path}: {e}") from e

    stop_words = _string_list(data, "stop_words", path)
    synonyms = _string_list(data, "synonyms", path)

    return Lexicon(
        stop_words=(
            frozenset(w.lower() for w in stop_words)
            if stop_words is not None else DEFAULT_LEXICON.stop_words
        ),
        synonyms=tuple(synonyms) if synonyms is not None else DEFAULT_LEXICON.synonyms,
    )


def get_lexicon(config: dict[str, Any]) -> Lexicon:
    """Return the lexicon named in config, or the built-in one."""
    path = config.get("lexicon", {}).get("path")
    if not path:
        return DEFAULT_LEXICON
    return load_lexicon(Path(path).expanduser())
