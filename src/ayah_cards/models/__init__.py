"""Data models for verses, cards and themes."""

from ayah_cards.models.verse import SurahInfo, VerseUnit
from ayah_cards.models.card import CardConfig, Segment
from ayah_cards.models.theme import ThemeCategory, ThemeDecision

__all__ = [
    "SurahInfo",
    "VerseUnit",
    "Segment",
    "CardConfig",
    "ThemeCategory",
    "ThemeDecision",
]
