# src/services/pulse_format.py
"""
Rendering for pulse results: JSON payloads and one-line summaries.
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Sequence

from src.models.pulse import PulseResult

PULSE_EMOJI = {
    "strong": "💪",
    "stable": "✅",
    "weak": "⚠️",
    "critical": "🔴",
    "dead": "💀",
    "error": "❌",
}
UNKNOWN_EMOJI = "❓"

FORMAT_FULL = "full"
FORMAT_SUMMARY = "summary"


def _fixed(n, digits: int) -> str:
    """Fixed-point string, ties rounded away from zero."""
    q = Decimal(1).scaleb(-digits)
    return format(Decimal(n).quantize(q, rounding=ROUND_HALF_UP), "f")


def format_num(n) -> str:
    if n >= 1e6:
        return _fixed(n / 1e6, 1) + "M"
    if n >= 1e3:
        return _fixed(n / 1e3, 1) + "K"
    return _fixed(n, 0)


def _label(pulse) -> str:
    return getattr(pulse, "value", pulse)


def format_pulse_summary(result: PulseResult) -> str:
    label = _label(result.pulse)
    if not result.found:
        return f"{result.address[:10]}... — {label}"

    emoji = PULSE_EMOJI.get(label, UNKNOWN_EMOJI)
    stats = result.stats
    sign = "+" if stats.change24h >= 0 else ""
    return (
        f"{emoji} ${result.token.symbol} — {label.upper()}"
        f" | ${_fixed(stats.price, 6)}"
        f" | mcap ${format_num(stats.mcap)}"
        f" | vol ${format_num(stats.volume24h)}"
        f" | {sign}{_fixed(stats.change24h, 1)}%"
    )


def render_response(results: Sequence[PulseResult], fmt: str = FORMAT_FULL) -> dict:
    if fmt == FORMAT_SUMMARY:
        return {
            "count": len(results),
            "summaries": [format_pulse_summary(r) for r in results],
            "results": [r.to_dict() for r in results],
        }
    if len(results) == 1:
        return results[0].to_dict()
    return {
        "count": len(results),
        "results": [r.to_dict() for r in results],
    }
