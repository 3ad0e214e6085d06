"""Fiat pricing feed client (CoinGecko ``simple/price`` format)."""

from __future__ import annotations

import logging
from decimal import Decimal, InvalidOperation
from typing import Optional

import httpx

from .exceptions import InvalidPriceError, PriceUnavailableError, UnknownCurrencyError

logger = logging.getLogger(__name__)


def display_currency(code: str) -> str:
    return code.strip().upper()


def feed_currency(code: str) -> str:
    return code.strip().lower()


class PriceFeedClient:
    """Look up the current XMR price in a given currency.

    Every call performs a fresh request; nothing is cached and nothing is
    retried.
    """

    def __init__(
        self,
        url: str,
        *,
        coin_id: str = "monero",
        timeout: float = 5.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.url = url
        self.coin_id = coin_id
        self._client = httpx.AsyncClient(timeout=httpx.Timeout(timeout), transport=transport)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def quote(self, currency: str) -> Decimal:
        """Return the positive price of 1 XMR denominated in ``currency``."""
        display = display_currency(currency)
        code = feed_currency(currency)
        if not code:
            raise UnknownCurrencyError(display)

        try:
            response = await self._client.get(
                self.url,
                params={"ids": self.coin_id, "vs_currencies": code},
            )
        except httpx.HTTPError as exc:
            logger.warning("price feed request for %s failed: %s", display, exc)
            raise PriceUnavailableError(f"price feed unreachable: {exc!s} ({type(exc).__name__})") from exc

        if not response.is_success:
            raise PriceUnavailableError(f"price feed returned HTTP {response.status_code}")

        try:
            body = response.json(parse_float=Decimal, parse_int=Decimal)
        except ValueError as exc:
            raise PriceUnavailableError("price feed response is not valid JSON") from exc
        if not isinstance(body, dict):
            raise PriceUnavailableError("price feed response is not a JSON object")

        quotes = body.get(self.coin_id)
        if quotes is None:
            raise UnknownCurrencyError(display)
        if not isinstance(quotes, dict):
            raise PriceUnavailableError(f"price feed entry for {self.coin_id!r} is not an object")

        raw = quotes.get(code)
        if raw is None:
            raise UnknownCurrencyError(display)
        if isinstance(raw, bool):
            raise PriceUnavailableError(f"price feed returned non-numeric price for {display}")
        try:
            price = Decimal(raw) if isinstance(raw, Decimal) else Decimal(str(raw))
        except (InvalidOperation, ValueError) as exc:
            raise PriceUnavailableError(f"price feed returned non-numeric price for {display}") from exc
        if not price.is_finite():
            raise PriceUnavailableError(f"price feed returned non-numeric price for {display}")

        if price <= 0:
            raise InvalidPriceError(display, price)

        logger.debug("xmr price in %s is %s", display, price)
        return price
