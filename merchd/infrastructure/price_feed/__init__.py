"""Price feed client exports"""

from .client import PriceFeedClient, display_currency, feed_currency
from .exceptions import InvalidPriceError, PriceFeedError, PriceUnavailableError, UnknownCurrencyError

__all__ = [
    "PriceFeedClient",
    "display_currency",
    "feed_currency",
    "PriceFeedError",
    "PriceUnavailableError",
    "UnknownCurrencyError",
    "InvalidPriceError",
]
