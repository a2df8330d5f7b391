"""Shared fixtures: fake Quran API payloads and transports."""

import httpx
import pytest

from ayah_cards._logging import disable_logging
from ayah_cards.config import get_settings
from ayah_cards.quran.client import QuranClient

BASE_URL = "https://api.test/v1"


def editions_payload(
    arabic_texts: list[str],
    translations: list[str],
    start: int = 1,
    surah_name: str = "Al-Faatiha",
    translation_edition: str = "en.sahih",
) -> dict:
    """Build a /surah/{n}/editions response body."""
    return {
        "code": 200,
        "status": "OK",
        "data": [
            {
                "number": 1,
                "englishName": surah_name,
                "edition": {"identifier": "quran-uthmani", "language": "ar", "type": "quran"},
                "ayahs": [
                    {"number": start + i, "text": text, "numberInSurah": start + i}
                    for i, text in enumerate(arabic_texts)
                ],
            },
            {
                "number": 1,
                "englishName": surah_name,
                "edition": {
                    "identifier": translation_edition,
                    "language": translation_edition.split(".")[0],
                    "type": "translation",
                },
                "ayahs": [
                    {"number": start + i, "text": text, "numberInSurah": start + i}
                    for i, text in enumerate(translations)
                ],
            },
        ],
    }


@pytest.fixture
def make_client():
    """Return a factory for clients answering every request with ``payload``.

    Requests are recorded on the returned client as ``client.requests``.
    """

    def factory(payload=None, status_code: int = 200, content: bytes | None = None) -> QuranClient:
        requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            if content is not None:
                return httpx.Response(status_code, content=content)
            return httpx.Response(status_code, json=payload)

        client = QuranClient(
            base_url=BASE_URL,
            arabic_edition="quran-uthmani",
            transport=httpx.MockTransport(handler),
        )
        client.requests = requests
        return client

    return factory


@pytest.fixture(autouse=True)
def isolate_package_state():
    """Fresh settings for each test and quiet logging afterwards."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    disable_logging()
