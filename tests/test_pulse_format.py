import pytest

from src.models.pulse import Pulse, PulseResult, PulseStats, TokenInfo
from src.services.pulse_format import format_num, format_pulse_summary, render_response


def _found(pulse=Pulse.CRITICAL, symbol="FOO", price=0.0000431, mcap=42809, volume=1654.9, change=-42.88):
    return PulseResult(
        address="0xabc",
        found=True,
        pulse=pulse,
        token=TokenInfo(name="Foo", symbol=symbol),
        stats=PulseStats(price=price, mcap=mcap, volume24h=volume, change24h=change, txns24h=3, liquidity=1),
        pair_count=1,
        timestamp="2026-01-01T00:00:00.000Z",
    )


def test_summary_line():
    assert format_pulse_summary(_found()) == (
        "🔴 $FOO — CRITICAL | $0.000043 | mcap $42.8K | vol $1.7K | -42.9%"
    )


def test_summary_positive_change_has_plus():
    line = format_pulse_summary(_found(pulse=Pulse.STRONG, price=1.5, mcap=2_500_000, volume=999, change=12.34))
    assert line == "💪 $FOO — STRONG | $1.500000 | mcap $2.5M | vol $999 | +12.3%"


def test_summary_zero_change_has_plus():
    assert format_pulse_summary(_found(change=0)).endswith("| +0.0%")


@pytest.mark.parametrize("pulse,emoji", [
    (Pulse.STRONG, "💪"), (Pulse.STABLE, "✅"), (Pulse.WEAK, "⚠️"),
    (Pulse.CRITICAL, "🔴"), (Pulse.DEAD, "💀"),
])
def test_summary_emoji(pulse, emoji):
    assert format_pulse_summary(_found(pulse=pulse)).startswith(emoji + " ")


def test_summary_unknown_label():
    assert format_pulse_summary(_found(pulse="mystery")).startswith("❓ $FOO — MYSTERY")


def test_summary_not_found_truncates_address():
    result = PulseResult.not_found("0x4dc5f49fc95427b984f27db843755787589314c0")
    assert format_pulse_summary(result) == "0x4dc5f49f... — dead"


def test_summary_error():
    assert format_pulse_summary(PulseResult.failed("0xB", "boom")) == "0xB... — error"


@pytest.mark.parametrize("n,expected", [
    (0, "0"),
    (999.4, "999"),
    (999.5, "1000"),
    (1000, "1.0K"),
    (1654.9, "1.7K"),
    (42809, "42.8K"),
    (999_999, "1000.0K"),
    (1_000_000, "1.0M"),
    (12_345_678, "12.3M"),
])
def test_format_num(n, expected):
    assert format_num(n) == expected


def test_render_single_full_is_the_result():
    r = _found()
    assert render_response([r]) == r.to_dict()


def test_render_many_full():
    out = render_response([_found(), PulseResult.not_found("0xB")], "full")
    assert out["count"] == 2
    assert [x["address"] for x in out["results"]] == ["0xabc", "0xB"]
    assert "summaries" not in out


def test_render_summary_wraps_even_single():
    out = render_response([_found()], "summary")
    assert out["count"] == 1
    assert out["summaries"] == ["🔴 $FOO — CRITICAL | $0.000043 | mcap $42.8K | vol $1.7K | -42.9%"]
    assert out["results"][0]["address"] == "0xabc"


def test_render_unknown_format_is_full():
    r = _found()
    assert render_response([r], "xml") == r.to_dict()
