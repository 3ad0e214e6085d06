"""Thin async client over the monero-wallet-rpc JSON-RPC interface."""

from __future__ import annotations

import logging
from typing import Any, Iterable, Optional, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from merchd.domain.payments.models import Transfer

from .exceptions import BackendRejectedError, BackendUnreachableError, ProtocolError
from .models import (
    CreateAddressResult,
    EmptyResult,
    GetTransfersResult,
    RpcErrorObject,
    Subaddress,
    VerifyResult,
)

logger = logging.getLogger(__name__)

ResultT = TypeVar("ResultT", bound=BaseModel)

JSONRPC_VERSION = "2.0"
JSONRPC_PATH = "/json_rpc"


def normalize_rpc_url(url: str) -> str:
    """Return ``url`` pointing at the wallet's ``/json_rpc`` endpoint."""
    if url.endswith(JSONRPC_PATH):
        return url
    return f"{url.rstrip('/')}{JSONRPC_PATH}"


class WalletRpcClient:
    """Stateless request/response wrapper around a pooled ``httpx.AsyncClient``.

    Credentials, when both are given, are sent as HTTP digest authentication;
    they never appear in the JSON-RPC envelope.
    """

    def __init__(
        self,
        url: str,
        user: Optional[str] = None,
        password: Optional[str] = None,
        *,
        timeout: float = 5.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.url = normalize_rpc_url(url)
        auth = httpx.DigestAuth(user, password) if user and password else None
        self._client = httpx.AsyncClient(
            auth=auth,
            timeout=httpx.Timeout(timeout),
            transport=transport,
        )

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _call(self, method: str, params: dict[str, Any], result_type: type[ResultT]) -> ResultT:
        payload = {
            "jsonrpc": JSONRPC_VERSION,
            "id": "0",
            "method": method,
            "params": params,
        }
        logger.debug("wallet rpc call %s", method)
        try:
            response = await self._client.post(self.url, json=payload)
        except httpx.HTTPError as exc:
            raise BackendUnreachableError(f"{method}: {exc!s} ({type(exc).__name__})") from exc

        if not response.is_success:
            raise BackendUnreachableError(f"{method}: wallet returned HTTP {response.status_code}")

        try:
            body = response.json()
        except ValueError as exc:
            raise ProtocolError(f"{method}: response is not valid JSON") from exc
        if not isinstance(body, dict):
            raise ProtocolError(f"{method}: response is not a JSON object")

        error = body.get("error")
        if error is not None:
            try:
                parsed = RpcErrorObject.model_validate(error)
            except ValidationError:
                parsed = RpcErrorObject(message=str(error))
            logger.warning("wallet rejected %s: code=%s message=%s", method, parsed.code, parsed.message)
            raise BackendRejectedError(parsed.code, parsed.message)

        result = body.get("result")
        if result is None:
            raise ProtocolError(f"{method}: response carries neither result nor error")

        try:
            return result_type.model_validate(result)
        except ValidationError as exc:
            raise ProtocolError(f"{method}: unexpected result shape: {exc}") from exc

    async def open_wallet(self, filename: str) -> None:
        """Make the named wallet the active one on the backend."""
        await self._call("open_wallet", {"filename": filename}, EmptyResult)

    async def create_subaddress(self, account_index: int = 0) -> Subaddress:
        result = await self._call(
            "create_address",
            {"account_index": account_index},
            CreateAddressResult,
        )
        return Subaddress(
            address=result.address,
            account_index=account_index,
            address_index=result.address_index,
        )

    async def list_incoming_transfers(self, account_index: int, address_indexes: Iterable[int]) -> list[Transfer]:
        """Return confirmed incoming transfers followed by pool transfers."""
        result = await self._call(
            "get_transfers",
            {
                "in": True,
                "pool": True,
                "account_index": account_index,
                "subaddr_indices": list(address_indexes),
            },
            GetTransfersResult,
        )
        transfers = [
            Transfer(amount_atomic=entry.amount, confirmations=entry.confirmations, txid=entry.txid)
            for entry in result.incoming
        ]
        transfers.extend(
            Transfer(amount_atomic=entry.amount, confirmations=0, txid=entry.txid, in_pool=True)
            for entry in result.pool
        )
        return transfers

    async def verify_signed_message(self, address: str, message: str, signature: str) -> bool:
        result = await self._call(
            "verify",
            {"data": message, "address": address, "signature": signature},
            VerifyResult,
        )
        return result.good
