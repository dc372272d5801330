# src/services/dexscreener.py
"""
DexScreener client.
One GET per token address against /latest/dex/tokens/<address>.
No retries and no caching here; callers decide what to do with failures.
"""

import logging

import requests

from src.config import settings
from src.errors import UpstreamError
from src.models.pulse import Pair

logger = logging.getLogger(__name__)

TOKENS_PATH = "/latest/dex/tokens"


def token_pairs_url(address: str, base_url: str | None = None) -> str:
    base = (base_url or settings.DEXSCREENER_API_BASE).rstrip("/")
    return f"{base}{TOKENS_PATH}/{address}"


def fetch_token_pairs(address: str, base_url: str | None = None, timeout: int | None = None) -> list[Pair]:
    """Fetch every pair DexScreener reports for a token, decoded to `Pair`."""
    url = token_pairs_url(address, base_url)
    try:
        r = requests.get(url, timeout=timeout or settings.PULSE_TIMEOUT_SECS)
    except requests.exceptions.RequestException as e:
        logger.warning("dexscreener request failed for %s: %s", address, e)
        raise UpstreamError(f"Dexscreener request failed: {e}") from e

    if not r.ok:
        logger.warning("dexscreener returned %s for %s", r.status_code, address)
        raise UpstreamError.from_status(r.status_code)

    # malformed JSON is left to propagate
    data = r.json()
    raw_pairs = data.get("pairs") if isinstance(data, dict) else None
    return [Pair.from_api(p) for p in raw_pairs or []]
