# src/services/pulse_score.py
"""
Pulse scoring: pick the main pair for a token and map its metrics to a label.
"""

from typing import Optional, Sequence

from src.models.pulse import Pair, Pulse


def select_main_pair(pairs: Sequence[Pair]) -> Pair:
    """Highest 24h volume wins; on a tie the earlier pair is kept."""
    best = pairs[0]
    for pair in pairs[1:]:
        if pair.volume_24h > best.volume_24h:
            best = pair
    return best


def turnover_ratio(pair: Pair) -> float:
    if pair.market_cap > 0:
        return pair.volume_24h / pair.market_cap
    return 0


def pulse_score(pair: Pair) -> int:
    vol24h = pair.volume_24h
    txns24h = pair.txns_24h
    change24h = pair.change_24h
    vol_ratio = turnover_ratio(pair)

    score = 0

    # volume activity
    if vol24h > 10000:
        score += 3
    elif vol24h > 1000:
        score += 2
    elif vol24h > 100:
        score += 1

    # transaction count
    if txns24h > 50:
        score += 2
    elif txns24h > 10:
        score += 1

    # turnover
    if vol_ratio > 0.1:
        score += 2
    elif vol_ratio > 0.01:
        score += 1

    # momentum, bonus and penalty are checked separately
    if change24h > 20:
        score += 1
    if change24h < -50:
        score -= 2

    return score


def score_to_pulse(score: int) -> Pulse:
    if score >= 6:
        return Pulse.STRONG
    if score >= 4:
        return Pulse.STABLE
    if score >= 2:
        return Pulse.WEAK
    if score >= 0:
        return Pulse.CRITICAL
    return Pulse.DEAD


def calculate_pulse(pair: Optional[Pair]) -> Pulse:
    if pair is None:
        return Pulse.DEAD
    return score_to_pulse(pulse_score(pair))
