import pytest
import requests


class FakeResponse:
    def __init__(self, status_code=200, payload=None, text=None):
        self.status_code = status_code
        self._payload = payload
        self._text = text

    @property
    def ok(self):
        return 200 <= self.status_code < 400

    def json(self):
        if self._text is not None:
            raise ValueError(f"Expecting value: {self._text!r}")
        return self._payload


def make_pair(volume=0, mcap=None, fdv=None, change=0, buys=0, sells=0,
              price="0.001", symbol="FOO", name="Foo Token", dex="uniswap",
              chain="base", liquidity=5000, url="https://dexscreener.com/base/0xpair"):
    pair = {
        "chainId": chain,
        "dexId": dex,
        "url": url,
        "baseToken": {"name": name, "symbol": symbol},
        "priceUsd": price,
        "volume": {"h24": volume},
        "priceChange": {"h24": change},
        "txns": {"h24": {"buys": buys, "sells": sells}},
        "liquidity": {"usd": liquidity},
    }
    if mcap is not None:
        pair["marketCap"] = mcap
    if fdv is not None:
        pair["fdv"] = fdv
    return pair


@pytest.fixture
def upstream(monkeypatch):
    """
    Route requests.get by the token address at the end of the URL.
    Values are FakeResponse objects or exceptions to raise.
    """
    routes = {}
    calls = []

    def fake_get(url, params=None, timeout=None):
        calls.append(url)
        address = url.rsplit("/", 1)[-1]
        resp = routes.get(address, FakeResponse(200, {"pairs": []}))
        if isinstance(resp, Exception):
            raise resp
        return resp

    monkeypatch.setattr(requests, "get", fake_get)
    fake_get.routes = routes
    fake_get.calls = calls
    return fake_get
