"""
Card Builder

Runs a verse range through fetching, grouping and theming, and combines
the results into render-ready card configurations.
"""

import logging
import random
from dataclasses import dataclass, field
from typing import Optional

from ayah_cards.cards.segmenter import group_verses
from ayah_cards.cards.theme import DEFAULT_VOCABULARY, ThemeVocabulary, classify_theme
from ayah_cards.config import get_settings
from ayah_cards.models.card import CardConfig, Segment
from ayah_cards.models.theme import ThemeDecision
from ayah_cards.quran.client import QuranClient, normalize_range
from ayah_cards.quran.surahs import get_surah

logger = logging.getLogger(__name__)


@dataclass
class CardSet:
    """Output of one grouping pass."""

    surah_number: int
    surah_name: str
    language: str
    segments: list[Segment] = field(default_factory=list)
    design: Optional[ThemeDecision] = None
    cards: list[CardConfig] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "surahNumber": self.surah_number,
            "surah": self.surah_name,
            "language": self.language,
            "design": self.design.to_dict() if self.design else None,
            "cards": [c.to_dict() for c in self.cards],
        }


def build_cards(
    segments: list[Segment],
    decision: ThemeDecision,
    font_size: Optional[int] = None,
    show_translation: Optional[bool] = None,
) -> list[CardConfig]:
    """Apply one theme decision to every segment."""
    settings = get_settings()
    font_size = font_size if font_size is not None else settings.font_size
    if show_translation is None:
        show_translation = settings.show_translation

    return [
        CardConfig(
            verse=segment,
            background_type=decision.background_type,
            text_color=decision.text_color,
            opacity=decision.opacity,
            font_size=font_size,
            show_translation=show_translation,
        )
        for segment in segments
    ]


def clamp_range(surah: int, start: int, end: int) -> tuple[int, int]:
    """Keep a normalized range inside the surah's verse count."""
    info = get_surah(surah)
    if not 1 <= start <= info.verse_count:
        raise ValueError(
            f"Start ayah {start} is outside {info.name} (1-{info.verse_count})"
        )
    return start, min(end, info.verse_count)


def generate_cards(
    surah: int,
    start: int,
    end: Optional[int] = None,
    language: Optional[str] = None,
    capacity: Optional[int] = None,
    client: Optional[QuranClient] = None,
    vocabulary: ThemeVocabulary = DEFAULT_VOCABULARY,
    rng: Optional[random.Random] = None,
    clamp: bool = True,
) -> CardSet:
    """
    Fetch a verse range and turn it into themed cards.

    Args:
        surah: Surah number (1-114)
        start: First ayah
        end: Last ayah (missing or before start means just ``start``)
        language: Translation language (default from config)
        capacity: Max Arabic characters per card (default from config)
        client: Quran API client (default: one built from config)
        vocabulary: Keyword table for theme selection
        rng: Randomness for the no-match theme fallback
        clamp: Trim the end ayah to the surah's verse count

    Returns:
        CardSet with segments, the theme decision and card configs

    Raises:
        ValueError: If the surah, start ayah or capacity is out of range
        QuranAPIError: If the verses cannot be fetched
    """
    settings = get_settings()
    language = language or settings.default_language
    capacity = capacity if capacity is not None else settings.card_capacity
    if capacity < 1:
        raise ValueError(f"Card capacity must be at least 1, got {capacity}")
    client = client or QuranClient()

    start, end = normalize_range(start, end)
    if clamp:
        start, end = clamp_range(surah, start, end)

    fetched = client.fetch_verses(surah, start, end, language=language)
    segments = group_verses(fetched.verses, fetched.surah_name, capacity=capacity)

    # The first card's translation sets the mood for the whole range
    context_text = segments[0].translation if segments else ""
    decision = classify_theme(context_text, vocabulary=vocabulary, rng=rng)

    logger.info(
        "Surah %s %d-%d: %d cards, theme %s",
        fetched.surah_name, start, end, len(segments), decision.background_type.value,
    )

    return CardSet(
        surah_number=surah,
        surah_name=fetched.surah_name,
        language=language,
        segments=segments,
        design=decision,
        cards=build_cards(segments, decision),
    )
