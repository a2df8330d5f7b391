"""HTTP client for the alquran.cloud verse API."""

import logging
from typing import Any, Optional

import httpx

from ayah_cards.config import get_settings
from ayah_cards.quran.editions import resolve_edition
from ayah_cards.quran.payload import FetchedVerses, decode_editions, decode_surah

logger = logging.getLogger(__name__)


class QuranAPIError(Exception):
    """Raised when verses cannot be fetched or the response is unusable."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


def normalize_range(start: int, end: Optional[int] = None) -> tuple[int, int]:
    """Collapse a missing or backwards range to the single verse ``start``."""
    if end is None or end < start:
        return start, start
    return start, end


class QuranClient:
    """Fetches Arabic text and translations for surah slices.

    Usage:
        client = QuranClient()  # Uses config defaults
        fetched = client.fetch_verses(1, 1, 7, language="French")

        # Tests inject a transport
        client = QuranClient(transport=httpx.MockTransport(handler))
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        arabic_edition: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        """Initialize the client.

        Args:
            base_url: API root (default from config)
            arabic_edition: Edition used for the Arabic text (default from config)
            timeout: Request timeout in seconds (default from config)
            transport: Optional httpx transport, mainly for tests
        """
        self.settings = get_settings()
        self.base_url = (base_url or self.settings.api_base_url).rstrip("/")
        self.arabic_edition = arabic_edition or self.settings.arabic_edition
        self.timeout = timeout if timeout is not None else self.settings.request_timeout
        self.transport = transport

    def fetch_verses(
        self,
        surah: int,
        start: int,
        end: Optional[int] = None,
        language: str = "English",
    ) -> FetchedVerses:
        """Fetch a verse range with its translation.

        Args:
            surah: Surah number
            start: First ayah (1-based)
            end: Last ayah; missing or smaller than start means a single ayah
            language: Display language of the translation

        Returns:
            FetchedVerses with the surah name and paired verses

        Raises:
            QuranAPIError: On HTTP failure or a malformed response
        """
        start, end = normalize_range(start, end)
        edition = resolve_edition(language)

        params = {"offset": start - 1, "limit": end - start + 1}
        raw = self._get_json(
            f"/surah/{surah}/editions/{self.arabic_edition},{edition}",
            params=params,
        )

        try:
            fetched = decode_editions(raw, arabic_edition=self.arabic_edition)
        except ValueError as e:
            logger.warning("Rejected response for surah %s: %s", surah, e)
            raise QuranAPIError(str(e)) from e

        logger.debug(
            "Fetched %d verses of %s (%s)", len(fetched.verses), fetched.surah_name, edition
        )
        return fetched

    def fetch_surah_preview(self, surah: int) -> list[tuple[int, str]]:
        """Fetch (ayah number, Arabic text) pairs for a whole surah."""
        raw = self._get_json(f"/surah/{surah}")

        try:
            entry = decode_surah(raw)
        except ValueError as e:
            logger.warning("Rejected preview for surah %s: %s", surah, e)
            raise QuranAPIError(str(e)) from e

        return [(a.number_in_surah, a.text) for a in entry.ayahs]

    def _get_json(self, path: str, params: Optional[dict] = None) -> Any:
        """GET a path under the API root and parse the JSON body."""
        url = f"{self.base_url}{path}"
        logger.debug("GET %s %s", url, params or "")

        try:
            with httpx.Client(timeout=self.timeout, transport=self.transport) as client:
                response = client.get(url, params=params)
        except (httpx.RequestError, httpx.TimeoutException) as e:
            raise QuranAPIError(f"Quran API request failed: {e}") from e

        logger.debug("%s -> %d", url, response.status_code)

        if not response.is_success:
            raise QuranAPIError(
                f"Quran API Error: {response.status_code} - {response.text}",
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError as e:
            raise QuranAPIError("Quran API returned a body that is not JSON") from e


# Convenience function
def get_quran_client() -> QuranClient:
    """Get a client configured from settings."""
    return QuranClient()
