"""Segment and card configuration models."""

from pydantic import BaseModel, ConfigDict

from ayah_cards.models.theme import ThemeCategory


class Segment(BaseModel):
    """One card's worth of consecutive ayahs, ready for display."""

    model_config = ConfigDict(frozen=True)

    arabic: str  # Verse texts, each followed by an end-of-ayah mark
    translation: str  # Translations, each followed by "(n)"
    surah: str
    ayah: str  # "5" or "5-8"
    first_ayah: int
    last_ayah: int

    @property
    def verse_numbers(self) -> list[int]:
        """Ayah numbers covered by this segment, in order."""
        return list(range(self.first_ayah, self.last_ayah + 1))

    def to_dict(self) -> dict:
        """Convert to the card wire shape."""
        return {
            "arabic": self.arabic,
            "translation": self.translation,
            "surah": self.surah,
            "ayah": self.ayah,
        }


class CardConfig(BaseModel):
    """Everything a renderer needs to draw one card."""

    model_config = ConfigDict(frozen=True)

    verse: Segment
    background_type: ThemeCategory
    text_color: str = "white"
    opacity: float = 0.5
    font_size: int = 55
    show_translation: bool = True

    def to_dict(self) -> dict:
        """Convert to the card wire shape."""
        return {
            "verse": self.verse.to_dict(),
            "backgroundType": self.background_type.value,
            "textColor": self.text_color,
            "opacity": self.opacity,
            "fontSize": self.font_size,
            "showTranslation": self.show_translation,
        }
