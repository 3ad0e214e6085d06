"""Translate domain and upstream failures into HTTP errors."""

from __future__ import annotations

import logging

from fastapi import HTTPException, status

from merchd.domain.money import InvalidAmountError
from merchd.infrastructure.price_feed import PriceFeedError
from merchd.infrastructure.wallet_rpc import WalletRpcError

logger = logging.getLogger(__name__)


def to_http_exception(exc: InvalidAmountError | PriceFeedError | WalletRpcError) -> HTTPException:
    if isinstance(exc, InvalidAmountError):
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
    if isinstance(exc, PriceFeedError):
        logger.error("price feed error: %s", exc)
        return HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=f"price feed error: {exc}")
    logger.error("wallet error: %s", exc)
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=f"wallet error: {exc}")


HANDLED_ERRORS = (InvalidAmountError, PriceFeedError, WalletRpcError)
