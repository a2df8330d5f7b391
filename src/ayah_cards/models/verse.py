"""Verse and surah models."""

from pydantic import BaseModel, ConfigDict, Field


class VerseUnit(BaseModel):
    """A single ayah with its translation."""

    model_config = ConfigDict(frozen=True)

    number: int = Field(ge=1, description="1-based ayah number within its surah")
    text: str  # Arabic source text
    translation: str = ""  # Empty when the translation edition has no entry


class SurahInfo(BaseModel):
    """Static metadata for a surah."""

    model_config = ConfigDict(frozen=True)

    number: int = Field(ge=1, le=114)
    name: str
    verse_count: int = Field(ge=1)
