"""Wallet RPC specific exceptions."""

from __future__ import annotations

from typing import Optional


class WalletRpcError(Exception):
    """Base class for failures talking to the wallet backend."""


class BackendUnreachableError(WalletRpcError):
    """Raised when the transport fails, times out or returns a non-2xx status."""


class BackendRejectedError(WalletRpcError):
    """Raised when the wallet answers with a JSON-RPC error object."""

    def __init__(self, code: Optional[int], message: str) -> None:
        self.code = code
        self.message = message
        super().__init__(f"wallet rejected request (code {code}): {message}")


class ProtocolError(WalletRpcError):
    """Raised when the wallet response is malformed or carries no result."""
