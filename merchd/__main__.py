"""Run the gateway with uvicorn: ``python -m merchd``.

Command line flags override the environment / ``.env`` configuration.
"""

from __future__ import annotations

import argparse
from typing import Any, Optional, Sequence

import uvicorn

from merchd.core.config import Settings
from merchd.main import create_app


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="moneromerchd", description="Monero e-commerce payment daemon")
    parser.add_argument("--wallet-rpc-url", help="monero-wallet-rpc base URL")
    parser.add_argument("--wallet-rpc-user", help="wallet RPC login user")
    parser.add_argument("--wallet-rpc-password", help="wallet RPC login password")
    parser.add_argument("--wallet-dir", help="wallet directory (informational)")
    parser.add_argument("--listen", help="listen address, host:port")
    return parser


def settings_from_args(args: argparse.Namespace) -> Settings:
    wallet: dict[str, Any] = {}
    for flag, key in (
        ("wallet_rpc_url", "rpc_url"),
        ("wallet_rpc_user", "rpc_user"),
        ("wallet_rpc_password", "rpc_password"),
        ("wallet_dir", "wallet_dir"),
    ):
        value = getattr(args, flag)
        if value is not None:
            wallet[key] = value

    overrides: dict[str, Any] = {}
    if wallet:
        overrides["wallet"] = wallet
    if args.listen is not None:
        overrides["server"] = {"listen": args.listen}
    return Settings(**overrides)


def main(argv: Optional[Sequence[str]] = None) -> None:
    settings = settings_from_args(build_parser().parse_args(argv))
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
