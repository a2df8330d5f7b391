"""
Quran API payload decoding.

The alquran.cloud endpoints answer with loosely shaped JSON. These models
validate the parts we rely on so that structural problems surface in one
place instead of deep inside field access.
"""

from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ayah_cards.models.verse import VerseUnit


class Edition(BaseModel):
    """Edition descriptor attached to each surah entry."""

    identifier: str = ""
    language: str = ""
    type: str = ""  # quran, translation, tafsir, ...


class AyahEntry(BaseModel):
    """One ayah as returned by the API."""

    model_config = ConfigDict(populate_by_name=True)

    number_in_surah: int = Field(alias="numberInSurah", ge=1)
    text: str = ""


class SurahEdition(BaseModel):
    """A surah slice in a single edition."""

    model_config = ConfigDict(populate_by_name=True)

    english_name: str = Field(default="", alias="englishName")
    edition: Edition | None = None
    ayahs: list[AyahEntry] = Field(default_factory=list)

    @property
    def identifier(self) -> str:
        return self.edition.identifier if self.edition else ""


class EditionsPayload(BaseModel):
    """Response of /surah/{n}/editions/{a},{b}."""

    data: list[SurahEdition]


class SurahPayload(BaseModel):
    """Response of /surah/{n}."""

    data: SurahEdition


@dataclass
class FetchedVerses:
    """Verses of one surah slice, paired with their translations."""

    surah_name: str
    verses: list[VerseUnit] = field(default_factory=list)


def decode_editions(raw: Any, arabic_edition: str = "quran-uthmani") -> FetchedVerses:
    """
    Decode a multi-edition response into paired verses.

    Raises:
        ValueError: If the payload has no data array or lacks the Arabic
            or the translation edition.
    """
    try:
        payload = EditionsPayload.model_validate(raw)
    except ValidationError as e:
        raise ValueError("Invalid response format from Quran API: data array missing") from e

    arabic, translation = select_editions(payload.data, arabic_edition)

    return FetchedVerses(
        surah_name=arabic.english_name,
        verses=pair_verses(arabic, translation),
    )


def decode_surah(raw: Any) -> SurahEdition:
    """Decode a single-edition surah response."""
    try:
        return SurahPayload.model_validate(raw).data
    except ValidationError as e:
        raise ValueError("Invalid response format from Quran API: surah data missing") from e


def select_editions(
    entries: list[SurahEdition],
    arabic_edition: str = "quran-uthmani",
) -> tuple[SurahEdition, SurahEdition]:
    """
    Pick the Arabic and the translation entries out of a response.

    Arabic is the configured edition, or any Arabic ``quran`` edition.
    The translation is the first other entry.
    """
    arabic = next(
        (
            e for e in entries
            if e.identifier == arabic_edition
            or (e.edition is not None and e.edition.language == "ar" and e.edition.type == "quran")
        ),
        None,
    )
    translation = next(
        (e for e in entries if e is not arabic and e.identifier != arabic_edition),
        None,
    )

    if arabic is None or translation is None:
        raise ValueError(
            "Invalid response format from Quran API: missing Arabic or Translation editions"
        )

    return arabic, translation


def pair_verses(arabic: SurahEdition, translation: SurahEdition) -> list[VerseUnit]:
    """Pair ayahs by position; a missing translation becomes an empty string."""
    verses: list[VerseUnit] = []

    for i, ayah in enumerate(arabic.ayahs):
        trans_text = translation.ayahs[i].text if i < len(translation.ayahs) else ""
        verses.append(
            VerseUnit(number=ayah.number_in_surah, text=ayah.text, translation=trans_text)
        )

    return verses
