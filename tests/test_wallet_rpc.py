"""Wallet RPC client: envelope resolution and typed operations."""

from __future__ import annotations

import json

import httpx
import pytest

from merchd.domain.payments import Transfer
from merchd.infrastructure.wallet_rpc import (
    BackendRejectedError,
    BackendUnreachableError,
    ProtocolError,
    WalletRpcClient,
    normalize_rpc_url,
)

from .conftest import make_wallet_client


def respond_with(status_code: int = 200, **body):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, json=body)

    return handler


@pytest.mark.parametrize(
    "url, expected",
    [
        ("http://127.0.0.1:18083", "http://127.0.0.1:18083/json_rpc"),
        ("http://127.0.0.1:18083/", "http://127.0.0.1:18083/json_rpc"),
        ("http://127.0.0.1:18083/json_rpc", "http://127.0.0.1:18083/json_rpc"),
    ],
)
def test_normalize_rpc_url(url, expected):
    assert normalize_rpc_url(url) == expected


@pytest.mark.asyncio
async def test_open_wallet_sends_jsonrpc_envelope(wallet, wallet_backend):
    await wallet.open_wallet("merch")

    request = wallet_backend.requests[-1]
    assert request["jsonrpc"] == "2.0"
    assert request["method"] == "open_wallet"
    assert request["params"] == {"filename": "merch"}
    assert "id" in request


@pytest.mark.asyncio
async def test_requests_are_posted_to_json_rpc_endpoint():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append((request.method, str(request.url)))
        return httpx.Response(200, json={"jsonrpc": "2.0", "id": "0", "result": {}})

    client = make_wallet_client(handler)
    await client.open_wallet("merch")

    assert seen == [("POST", "http://wallet.test:18083/json_rpc")]


@pytest.mark.asyncio
async def test_create_subaddress_returns_distinct_indices(wallet):
    first = await wallet.create_subaddress(0)
    second = await wallet.create_subaddress(0)

    assert first.account_index == 0
    assert first.address_index != second.address_index
    assert first.address.startswith("8Stub")


@pytest.mark.asyncio
async def test_list_incoming_transfers_merges_confirmed_and_pool(wallet, wallet_backend):
    wallet_backend.incoming = [{"amount": 500000000000, "confirmations": 3, "txid": "aa"}]
    wallet_backend.pool = [{"amount": 10000000000, "txid": "bb"}]

    transfers = await wallet.list_incoming_transfers(0, [7])

    assert transfers == [
        Transfer(amount_atomic=500000000000, confirmations=3, txid="aa"),
        Transfer(amount_atomic=10000000000, confirmations=0, txid="bb", in_pool=True),
    ]
    params = wallet_backend.requests[-1]["params"]
    assert params["in"] is True
    assert params["pool"] is True
    assert params["account_index"] == 0
    assert params["subaddr_indices"] == [7]


@pytest.mark.asyncio
async def test_list_incoming_transfers_with_empty_result(wallet):
    assert await wallet.list_incoming_transfers(0, [1]) == []


@pytest.mark.asyncio
async def test_verify_mismatched_signature_is_false_not_error(wallet, wallet_backend):
    wallet_backend.signature_good = False

    assert await wallet.verify_signed_message("8addr", "hello", "SigV2bad") is False
    assert wallet_backend.requests[-1]["params"] == {
        "data": "hello",
        "address": "8addr",
        "signature": "SigV2bad",
    }


@pytest.mark.asyncio
async def test_non_2xx_status_is_unreachable_even_with_error_body():
    client = make_wallet_client(respond_with(503, error={"code": -1, "message": "busy"}))

    with pytest.raises(BackendUnreachableError):
        await client.open_wallet("merch")


@pytest.mark.asyncio
@pytest.mark.parametrize("error_type", [httpx.ConnectError, httpx.ReadTimeout])
async def test_transport_failures_are_unreachable(error_type):
    def handler(request: httpx.Request) -> httpx.Response:
        raise error_type("boom", request=request)

    client = make_wallet_client(handler)

    with pytest.raises(BackendUnreachableError) as excinfo:
        await client.create_subaddress(0)
    assert isinstance(excinfo.value.__cause__, error_type)


@pytest.mark.asyncio
async def test_error_object_is_rejected_with_code_and_message():
    client = make_wallet_client(respond_with(error={"code": -1, "message": "Wallet not found"}))

    with pytest.raises(BackendRejectedError) as excinfo:
        await client.open_wallet("missing")
    assert excinfo.value.code == -1
    assert excinfo.value.message == "Wallet not found"


@pytest.mark.asyncio
async def test_error_takes_precedence_over_result():
    client = make_wallet_client(
        respond_with(result={"good": True}, error={"code": -13, "message": "No wallet file"})
    )

    with pytest.raises(BackendRejectedError) as excinfo:
        await client.verify_signed_message("8addr", "m", "s")
    assert excinfo.value.code == -13


@pytest.mark.asyncio
async def test_malformed_error_object_is_still_rejected():
    client = make_wallet_client(respond_with(error="something broke"))

    with pytest.raises(BackendRejectedError) as excinfo:
        await client.open_wallet("merch")
    assert excinfo.value.code is None
    assert "something broke" in excinfo.value.message


@pytest.mark.asyncio
async def test_null_result_without_error_is_protocol_error():
    client = make_wallet_client(respond_with(jsonrpc="2.0", id="0", result=None))

    with pytest.raises(ProtocolError):
        await client.open_wallet("merch")


@pytest.mark.asyncio
async def test_missing_result_and_error_is_protocol_error():
    client = make_wallet_client(respond_with(jsonrpc="2.0", id="0"))

    with pytest.raises(ProtocolError):
        await client.list_incoming_transfers(0, [1])


@pytest.mark.asyncio
async def test_non_json_body_is_protocol_error():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text="<html>proxy error</html>")

    client = make_wallet_client(handler)

    with pytest.raises(ProtocolError):
        await client.open_wallet("merch")


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "result",
    [
        {"address": "8abc"},
        {"address": "8abc", "address_index": -1},
        {"address_index": 4},
    ],
)
async def test_unexpected_result_shape_is_protocol_error(result):
    client = make_wallet_client(respond_with(jsonrpc="2.0", id="0", result=result))

    with pytest.raises(ProtocolError):
        await client.create_subaddress(0)


@pytest.mark.asyncio
async def test_transfer_without_amount_is_protocol_error():
    client = make_wallet_client(respond_with(result={"in": [{"confirmations": 2, "txid": "aa"}]}))

    with pytest.raises(ProtocolError):
        await client.list_incoming_transfers(0, [1])


def test_credentials_use_digest_auth():
    client = WalletRpcClient("http://wallet.test", "merchant", "s3cret")

    assert isinstance(client._client.auth, httpx.DigestAuth)


def test_partial_credentials_are_not_sent():
    client = WalletRpcClient("http://wallet.test", "merchant", None)

    assert client._client.auth is None


@pytest.mark.asyncio
async def test_credentials_do_not_leak_into_envelope():
    bodies = []

    def handler(request: httpx.Request) -> httpx.Response:
        bodies.append(json.loads(request.content))
        return httpx.Response(200, json={"jsonrpc": "2.0", "id": "0", "result": {}})

    client = make_wallet_client(handler, user="merchant", password="s3cret")
    await client.open_wallet("merch")

    assert "s3cret" not in json.dumps(bodies)
