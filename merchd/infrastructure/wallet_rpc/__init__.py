"""Wallet RPC client exports"""

from .client import WalletRpcClient, normalize_rpc_url
from .exceptions import BackendRejectedError, BackendUnreachableError, ProtocolError, WalletRpcError
from .models import Subaddress

__all__ = [
    "WalletRpcClient",
    "normalize_rpc_url",
    "Subaddress",
    "WalletRpcError",
    "BackendUnreachableError",
    "BackendRejectedError",
    "ProtocolError",
]
