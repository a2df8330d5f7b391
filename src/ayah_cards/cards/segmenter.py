"""Group consecutive ayahs into display-sized cards."""

from typing import Iterable

from ayah_cards.models.card import Segment
from ayah_cards.models.verse import VerseUnit

DEFAULT_CAPACITY = 450

# U+06DD ARABIC END OF AYAH
AYAH_END_MARK = "۝"

ARABIC_INDIC_DIGITS = str.maketrans("0123456789", "٠١٢٣٤٥٦٧٨٩")


def to_arabic_numerals(n: int) -> str:
    """Render a decimal number with Arabic-Indic digits, e.g. 123 -> ١٢٣."""
    return str(n).translate(ARABIC_INDIC_DIGITS)


def range_label(first: int, last: int) -> str:
    """Return "5" for a single ayah, "5-8" for a run."""
    return f"{first}" if first == last else f"{first}-{last}"


def group_verses(
    verses: Iterable[VerseUnit],
    surah_name: str,
    capacity: int = DEFAULT_CAPACITY,
) -> list[Segment]:
    """
    Split verses into segments whose Arabic text fits ``capacity`` characters.

    A group is closed before a verse that would push it past capacity.
    A verse longer than capacity on its own still gets a segment of its own;
    verses are never split.
    """
    segments: list[Segment] = []

    chunk: list[VerseUnit] = []
    chunk_length = 0

    for verse in verses:
        verse_length = len(verse.text)

        if chunk_length + verse_length > capacity and chunk:
            segments.append(build_segment(chunk, surah_name))
            chunk = []
            chunk_length = 0

        chunk.append(verse)
        chunk_length += verse_length

    if chunk:
        segments.append(build_segment(chunk, surah_name))

    return segments


def build_segment(chunk: list[VerseUnit], surah_name: str) -> Segment:
    """Join a non-empty run of verses into one segment."""
    first = chunk[0].number
    last = chunk[-1].number

    arabic = " ".join(
        f"{v.text} {AYAH_END_MARK}{to_arabic_numerals(v.number)}" for v in chunk
    )
    translation = " ".join(f"{v.translation} ({v.number})" for v in chunk)

    return Segment(
        arabic=arabic,
        translation=translation,
        surah=surah_name,
        ayah=range_label(first, last),
        first_ayah=first,
        last_ayah=last,
    )
