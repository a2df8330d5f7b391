"""Translation editions offered for each display language."""

DEFAULT_EDITION = "en.sahih"

LANGUAGE_EDITIONS: dict[str, str] = {
    "English": "en.sahih",
    "French": "fr.hamidullah",
    "Spanish": "es.cortes",
    "German": "de.bubenheim",
    "Russian": "ru.kuliev",
    "Indonesian": "id.indonesian",
    "Turkish": "tr.diyanet",
    "Urdu": "ur.jalandhry",
    "Italian": "it.piccardo",
    "Dutch": "nl.keyzer",
    "Chinese": "zh.jian",
}


def resolve_edition(language: str) -> str:
    """Return the translation edition for a language, or the English default."""
    return LANGUAGE_EDITIONS.get(language, DEFAULT_EDITION)
