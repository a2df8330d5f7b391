"""Quran text source: surah metadata, editions and the verse API client."""

from ayah_cards.quran.client import QuranAPIError, QuranClient, normalize_range
from ayah_cards.quran.editions import LANGUAGE_EDITIONS, resolve_edition
from ayah_cards.quran.payload import FetchedVerses
from ayah_cards.quran.surahs import SURAHS, get_surah

__all__ = [
    "QuranAPIError",
    "QuranClient",
    "normalize_range",
    "LANGUAGE_EDITIONS",
    "resolve_edition",
    "FetchedVerses",
    "SURAHS",
    "get_surah",
]
