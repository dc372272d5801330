# src/models/pulse.py
"""
Pulse data model.

DexScreener pair objects are decoded once into `Pair` at the client boundary.
Every metric the scorer reads has an explicit default, so nothing downstream
has to poke into nested upstream dicts.
"""

import math
import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class Pulse(str, Enum):
    STRONG = "strong"
    STABLE = "stable"
    WEAK = "weak"
    CRITICAL = "critical"
    DEAD = "dead"
    ERROR = "error"


def _number(value: Any) -> float:
    """Numeric upstream field, 0 when missing, null, zero, NaN, infinite or not a number."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0
    if not math.isfinite(value):
        return 0
    # whole floats (and -0.0) come back as plain ints
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


# leading number, the way parseFloat reads "1.5abc" as 1.5
_PRICE_RE = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def _price(value: Any) -> float:
    # priceUsd comes back as a string
    if value is None:
        return 0.0
    m = _PRICE_RE.match(str(value))
    if not m:
        return 0.0
    price = float(m.group(1))
    if not math.isfinite(price):
        return 0.0
    return price or 0.0


def _nested(d: Any, *keys: str) -> Any:
    for k in keys:
        if not isinstance(d, dict):
            return None
        d = d.get(k)
    return d


@dataclass(frozen=True)
class Pair:
    """One trading venue for a token, as reported by DexScreener."""
    volume_24h: float = 0
    market_cap: float = 0
    change_24h: float = 0
    buys_24h: int = 0
    sells_24h: int = 0
    liquidity_usd: float = 0
    price_usd: float = 0.0
    name: Optional[str] = None
    symbol: Optional[str] = None
    dex_id: Optional[str] = None
    chain_id: Optional[str] = None
    url: Optional[str] = None

    @property
    def txns_24h(self) -> int:
        return self.buys_24h + self.sells_24h

    @classmethod
    def from_api(cls, raw: Any) -> "Pair":
        if not isinstance(raw, dict):
            raw = {}
        return cls(
            volume_24h=_number(_nested(raw, "volume", "h24")),
            market_cap=_number(raw.get("marketCap")) or _number(raw.get("fdv")),
            change_24h=_number(_nested(raw, "priceChange", "h24")),
            buys_24h=_number(_nested(raw, "txns", "h24", "buys")),
            sells_24h=_number(_nested(raw, "txns", "h24", "sells")),
            liquidity_usd=_number(_nested(raw, "liquidity", "usd")),
            price_usd=_price(raw.get("priceUsd")),
            name=_nested(raw, "baseToken", "name"),
            symbol=_nested(raw, "baseToken", "symbol"),
            dex_id=raw.get("dexId"),
            chain_id=raw.get("chainId"),
            url=raw.get("url"),
        )


def _compact(d: dict) -> dict:
    return {k: v for k, v in d.items() if v is not None}


@dataclass
class TokenInfo:
    name: Optional[str] = None
    symbol: Optional[str] = None


@dataclass
class PulseStats:
    price: float = 0.0
    mcap: float = 0
    volume24h: float = 0
    change24h: float = 0
    txns24h: int = 0
    liquidity: float = 0


@dataclass
class PairInfo:
    dex: Optional[str] = None
    chain: Optional[str] = None
    url: Optional[str] = None


@dataclass
class PulseResult:
    """
    Per-token pulse record.

    found=True carries token/stats/pair/pair_count/timestamp.
    found=False carries either `message` (no pairs, pulse dead)
    or `error` (lookup failed, pulse error).
    """
    address: str
    found: bool
    pulse: Pulse
    token: Optional[TokenInfo] = None
    stats: Optional[PulseStats] = None
    pair: Optional[PairInfo] = None
    pair_count: Optional[int] = None
    timestamp: Optional[str] = None
    message: Optional[str] = None
    error: Optional[str] = None

    @classmethod
    def not_found(cls, address: str) -> "PulseResult":
        return cls(address=address, found=False, pulse=Pulse.DEAD,
                   message="No trading pairs found")

    @classmethod
    def failed(cls, address: str, error: str) -> "PulseResult":
        return cls(address=address, found=False, pulse=Pulse.ERROR, error=error)

    def to_dict(self) -> dict:
        out = {
            "address": self.address,
            "found": self.found,
            "pulse": self.pulse.value,
        }
        if self.token is not None:
            out["token"] = _compact(vars(self.token))
        if self.stats is not None:
            out["stats"] = dict(vars(self.stats))
        if self.pair is not None:
            out["pair"] = _compact(vars(self.pair))
        if self.pair_count is not None:
            out["pairCount"] = self.pair_count
        if self.timestamp is not None:
            out["timestamp"] = self.timestamp
        if self.message is not None:
            out["message"] = self.message
        if self.error is not None:
            out["error"] = self.error
        return out
