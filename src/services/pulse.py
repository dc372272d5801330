# src/services/pulse.py
"""
Token pulse lookups.

get_pulse()        one address: fetch -> pick main pair -> score -> record
get_batch_pulse()  many addresses on a thread pool, one failure never sinks the rest
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime, timezone
from typing import Sequence

from src.config import settings
from src.models.pulse import PairInfo, PulseResult, PulseStats, TokenInfo, Pair
from src.services.dexscreener import fetch_token_pairs
from src.services.pulse_score import calculate_pulse, select_main_pair

logger = logging.getLogger(__name__)


def _utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def build_pulse_result(address: str, pairs: Sequence[Pair]) -> PulseResult:
    if not pairs:
        return PulseResult.not_found(address)

    main = select_main_pair(pairs)
    return PulseResult(
        address=address,
        found=True,
        pulse=calculate_pulse(main),
        token=TokenInfo(name=main.name, symbol=main.symbol),
        stats=PulseStats(
            price=main.price_usd,
            mcap=main.market_cap,
            volume24h=main.volume_24h,
            change24h=main.change_24h,
            txns24h=main.txns_24h,
            liquidity=main.liquidity_usd,
        ),
        pair=PairInfo(dex=main.dex_id, chain=main.chain_id, url=main.url),
        pair_count=len(pairs),
        timestamp=_utc_now_iso(),
    )


def get_pulse(address: str, base_url: str | None = None, timeout: int | None = None) -> PulseResult:
    pairs = fetch_token_pairs(address, base_url=base_url, timeout=timeout)
    return build_pulse_result(address, pairs)


def _safe_pulse(address, base_url, timeout):
    try:
        return get_pulse(address, base_url=base_url, timeout=timeout)
    except Exception as e:
        logger.warning("pulse lookup failed for %s: %s", address, e)
        return PulseResult.failed(address, str(e))


def get_batch_pulse(addresses: Sequence[str], base_url: str | None = None,
                    timeout: int | None = None, max_workers: int | None = None) -> list[PulseResult]:
    """Results come back in the same order as `addresses`."""
    if not addresses:
        return []
    workers = max(1, min(max_workers or settings.PULSE_MAX_WORKERS, len(addresses)))
    logger.debug("batch pulse for %d tokens on %d workers", len(addresses), workers)
    with ThreadPoolExecutor(max_workers=workers) as ex:
        futs = [ex.submit(_safe_pulse, a, base_url, timeout) for a in addresses]
        return [fut.result() for fut in futs]
