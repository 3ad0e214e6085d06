"""Price feed specific exceptions."""

from __future__ import annotations

from decimal import Decimal


class PriceFeedError(Exception):
    """Base class for price lookup failures."""


class PriceUnavailableError(PriceFeedError):
    """Raised when the feed cannot be reached or its answer cannot be parsed."""


class UnknownCurrencyError(PriceFeedError):
    """Raised when the feed has no quote for the requested currency."""

    def __init__(self, currency: str) -> None:
        self.currency = currency
        super().__init__(f"no XMR price available for currency {currency!r}")


class InvalidPriceError(PriceFeedError):
    """Raised when the feed quotes a zero or negative price."""

    def __init__(self, currency: str, price: Decimal) -> None:
        self.currency = currency
        self.price = price
        super().__init__(f"price feed returned non-positive XMR price {price} for {currency}")
