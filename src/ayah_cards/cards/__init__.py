"""Card building: ayah grouping, theme selection and export."""

from .segmenter import group_verses, to_arabic_numerals, range_label
from .theme import ThemeVocabulary, DEFAULT_VOCABULARY, classify_theme
from .builder import CardSet, build_cards, generate_cards
from .export import export_cards

__all__ = [
    # Grouping
    "group_verses",
    "to_arabic_numerals",
    "range_label",
    # Theme
    "ThemeVocabulary",
    "DEFAULT_VOCABULARY",
    "classify_theme",
    # Building
    "CardSet",
    "build_cards",
    "generate_cards",
    # Export
    "export_cards",
]
