"""Write card sets to disk for a renderer to pick up."""

import json
from pathlib import Path

from ayah_cards.cards.builder import CardSet


def default_filename(card_set: CardSet) -> str:
    """Return a stable file name such as ``surah_002_255-257.json``."""
    if card_set.segments:
        first = card_set.segments[0].first_ayah
        last = card_set.segments[-1].last_ayah
        span = f"{first}" if first == last else f"{first}-{last}"
    else:
        span = "empty"
    return f"surah_{card_set.surah_number:03d}_{span}.json"


def export_cards(card_set: CardSet, path: Path) -> Path:
    """
    Save a card set as JSON.

    If ``path`` is an existing directory the default file name is used
    inside it. Arabic text is written as-is (UTF-8).
    """
    path = Path(path)
    if path.is_dir():
        path = path / default_filename(card_set)

    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "w", encoding="utf-8") as f:
        json.dump(card_set.to_dict(), f, ensure_ascii=False, indent=2)

    return path
