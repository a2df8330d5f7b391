"""Remote visit counter (counterapi.dev)."""

import logging
from typing import Optional

import httpx

from ayah_cards.config import get_settings

logger = logging.getLogger(__name__)


def hit_counter(
    namespace: Optional[str] = None,
    key: Optional[str] = None,
    timeout: float = 5.0,
    transport: Optional[httpx.BaseTransport] = None,
) -> int | None:
    """Increment the visit counter and return the new count.

    Returns None if the counter service cannot be reached or answers
    without a usable count.
    """
    settings = get_settings()
    namespace = namespace or settings.counter_namespace
    key = key or settings.counter_key
    url = f"{settings.counter_base_url.rstrip('/')}/{namespace}/{key}/up"

    try:
        with httpx.Client(timeout=timeout, transport=transport) as client:
            response = client.get(url)
        response.raise_for_status()
        data = response.json()
    except (httpx.HTTPError, ValueError) as e:
        logger.warning("Counter API failed: %s", e)
        return None

    count = data.get("count") if isinstance(data, dict) else None
    if not count:
        return None

    try:
        return int(count)
    except (TypeError, ValueError):
        logger.warning("Counter API returned a non-numeric count: %r", count)
        return None
