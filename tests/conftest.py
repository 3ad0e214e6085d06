"""Shared fixtures: in-process stand-ins for the wallet RPC and the price feed.

Both backends are plain ``httpx.MockTransport`` handlers, so the real clients
run their full request/response path without any network access.
"""

from __future__ import annotations

import json
from typing import Any, Optional

import httpx
import pytest

from merchd.core.config import Settings
from merchd.core.container import ApplicationContainer
from merchd.infrastructure.price_feed import PriceFeedClient
from merchd.infrastructure.wallet_rpc import WalletRpcClient

WALLET_URL = "http://wallet.test:18083"
PRICE_URL = "http://prices.test/api/v3/simple/price"


class StubWalletBackend:
    """Minimal monero-wallet-rpc imitation.

    ``create_address`` hands out increasing indices from a counter; transfers
    are served from the ``incoming`` and ``pool`` lists.
    """

    def __init__(self) -> None:
        self.next_index = 1
        self.incoming: list[dict[str, Any]] = []
        self.pool: list[dict[str, Any]] = []
        self.signature_good = True
        self.requests: list[dict[str, Any]] = []

    def methods(self) -> list[str]:
        return [payload["method"] for payload in self.requests]

    def __call__(self, request: httpx.Request) -> httpx.Response:
        payload = json.loads(request.content)
        self.requests.append(payload)
        method = payload["method"]

        if method == "open_wallet":
            result: dict[str, Any] = {}
        elif method == "create_address":
            index = self.next_index
            self.next_index += 1
            result = {"address": f"8StubSubaddress{index:04d}", "address_index": index}
        elif method == "get_transfers":
            result = {}
            if self.incoming:
                result["in"] = self.incoming
            if self.pool:
                result["pool"] = self.pool
        elif method == "verify":
            result = {"good": self.signature_good}
        else:
            return httpx.Response(
                200,
                json={"jsonrpc": "2.0", "id": "0", "error": {"code": -32601, "message": "Method not found"}},
            )
        return httpx.Response(200, json={"jsonrpc": "2.0", "id": "0", "result": result})


class StubPriceFeed:
    """CoinGecko style ``simple/price`` responder.

    Prices are kept as numeric literals so the response body carries them
    verbatim.
    """

    def __init__(self, prices: Optional[dict[str, str]] = None) -> None:
        self.prices = prices if prices is not None else {"usd": "150", "eur": "140.5"}
        self.status_code = 200
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.status_code != 200:
            return httpx.Response(self.status_code, text="upstream down")
        code = request.url.params.get("vs_currencies", "")
        entries = [f'"{code}": {self.prices[code]}'] if code in self.prices else []
        body = '{"monero": {' + ", ".join(entries) + "}}"
        return httpx.Response(200, content=body.encode(), headers={"content-type": "application/json"})


def make_wallet_client(handler, **kwargs) -> WalletRpcClient:
    return WalletRpcClient(WALLET_URL, transport=httpx.MockTransport(handler), **kwargs)


def make_price_client(handler) -> PriceFeedClient:
    return PriceFeedClient(PRICE_URL, transport=httpx.MockTransport(handler))


@pytest.fixture
def wallet_backend() -> StubWalletBackend:
    return StubWalletBackend()


@pytest.fixture
def price_feed() -> StubPriceFeed:
    return StubPriceFeed()


@pytest.fixture
def wallet(wallet_backend: StubWalletBackend) -> WalletRpcClient:
    return make_wallet_client(wallet_backend)


@pytest.fixture
def prices(price_feed: StubPriceFeed) -> PriceFeedClient:
    return make_price_client(price_feed)


@pytest.fixture
def settings() -> Settings:
    return Settings(environment="test")


@pytest.fixture
def container(settings: Settings, wallet: WalletRpcClient, prices: PriceFeedClient) -> ApplicationContainer:
    return ApplicationContainer(settings=settings, wallet=wallet, prices=prices)
