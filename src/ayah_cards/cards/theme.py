"""
Theme Classification

Pick a card background from the words in a translation. Each category
scores one point per keyword found anywhere in the text.
"""

import logging
import random
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional

from ayah_cards.models.theme import ThemeCategory, ThemeDecision

logger = logging.getLogger(__name__)

# Tie-break order: earlier wins
CATEGORY_PRIORITY = (ThemeCategory.NATURE, ThemeCategory.SKY, ThemeCategory.JANNAT)

DEFAULT_TEXT_COLOR = "white"
DEFAULT_OPACITY = 0.5


@dataclass(frozen=True)
class ThemeVocabulary:
    """Lowercase keywords associated with each category."""

    keywords: Mapping[ThemeCategory, tuple[str, ...]]

    def __post_init__(self) -> None:
        frozen = {
            category: tuple(word.lower() for word in self.keywords.get(category, ()))
            for category in CATEGORY_PRIORITY
        }
        object.__setattr__(self, "keywords", MappingProxyType(frozen))

    def score(self, text: str) -> dict[ThemeCategory, int]:
        """Count distinct keywords of each category present in ``text``."""
        text_lower = (text or "").lower()
        return {
            category: sum(1 for word in words if word in text_lower)
            for category, words in self.keywords.items()
        }


DEFAULT_VOCABULARY = ThemeVocabulary(
    keywords={
        ThemeCategory.JANNAT: (
            "paradise", "garden", "river", "heaven", "reward", "fruit", "shade",
            "eternity", "jannah", "bliss", "springs", "gold", "silk", "peace",
        ),
        ThemeCategory.SKY: (
            "sky", "sun", "moon", "star", "night", "day", "cloud", "rain",
            "thunder", "universe", "light", "darkness", "space", "planet",
            "orbit", "rising", "setting",
        ),
        ThemeCategory.NATURE: (
            "earth", "mountain", "sea", "ocean", "land", "water", "tree",
            "plant", "wind", "creation", "animal", "bird", "cattle", "camel",
            "desert", "rock",
        ),
    }
)


def classify_theme(
    text: str,
    vocabulary: ThemeVocabulary = DEFAULT_VOCABULARY,
    rng: Optional[random.Random] = None,
) -> ThemeDecision:
    """
    Choose a background category for a piece of translated text.

    Args:
        text: Translation text (may be empty)
        vocabulary: Keyword table to score against
        rng: Randomness used when nothing matches (default: module random)

    Returns:
        ThemeDecision with the chosen category and per-category scores
    """
    scores = vocabulary.score(text)

    best_type = CATEGORY_PRIORITY[0]
    max_score = -1
    for category in CATEGORY_PRIORITY:
        if scores[category] > max_score:
            max_score = scores[category]
            best_type = category

    fallback = max_score == 0
    if fallback:
        # Nothing matched, pick one for variety
        best_type = (rng or random).choice(CATEGORY_PRIORITY)
        logger.debug("No theme keywords matched, picked %s at random", best_type.value)

    return ThemeDecision(
        background_type=best_type,
        text_color=DEFAULT_TEXT_COLOR,
        opacity=DEFAULT_OPACITY,
        scores=scores,
        fallback=fallback,
    )
