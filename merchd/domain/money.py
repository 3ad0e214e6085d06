"""Decimal and atomic-unit helpers for XMR amounts.

All money handling goes through :class:`decimal.Decimal`; binary floats never
touch an amount.
"""

from __future__ import annotations

import decimal
from decimal import Decimal, InvalidOperation
from typing import Optional

XMR_DECIMALS = 12
ATOMIC_UNITS_PER_XMR = 10**XMR_DECIMALS
XMR_QUANTUM = Decimal(1).scaleb(-XMR_DECIMALS)

# Accepted amounts are below 10**MAX_INTEGER_DIGITS with at most
# MAX_FRACTION_DIGITS fractional digits.
MAX_INTEGER_DIGITS = 20
MAX_FRACTION_DIGITS = 24
MONEY_CONTEXT = decimal.Context(prec=60, rounding=decimal.ROUND_HALF_EVEN)

# Invoices live on the wallet's primary account.
INVOICE_ACCOUNT_INDEX = 0


class InvalidAmountError(ValueError):
    """Raised for malformed, non-finite or out-of-range amounts."""


def parse_amount(
    raw: Optional[str],
    *,
    allow_zero: bool = False,
    max_fraction_digits: int = MAX_FRACTION_DIGITS,
) -> Decimal:
    """Parse merchant supplied decimal text.

    Rejects anything that is not a finite decimal, anything not strictly
    positive unless ``allow_zero`` is set, values of ``10**MAX_INTEGER_DIGITS``
    or more, and values written with more than ``max_fraction_digits``
    fractional digits.
    """
    if raw is None:
        raise InvalidAmountError("amount is required")
    text = str(raw).strip()
    try:
        value = Decimal(text)
    except (InvalidOperation, ValueError) as exc:
        raise InvalidAmountError(f"invalid amount: {raw!r}") from exc
    if not value.is_finite():
        raise InvalidAmountError(f"invalid amount: {raw!r}")
    if value < 0 or (value == 0 and not allow_zero):
        raise InvalidAmountError(f"amount must be positive: {raw!r}")
    if value != 0 and value.adjusted() >= MAX_INTEGER_DIGITS:
        raise InvalidAmountError(f"amount too large: {raw!r}")
    if value.as_tuple().exponent < -max_fraction_digits:
        raise InvalidAmountError(f"amount has more than {max_fraction_digits} fractional digits: {raw!r}")
    return value


def convert_to_xmr(amount: Decimal, price: Decimal) -> Decimal:
    """``amount / price`` rounded to the ledger's 12 fractional digits."""
    if price <= 0:
        raise InvalidAmountError(f"price must be positive, got {price}")
    try:
        with decimal.localcontext(MONEY_CONTEXT):
            return (amount / price).quantize(XMR_QUANTUM)
    except InvalidOperation as exc:
        raise InvalidAmountError(f"{amount} at price {price} is out of range") from exc


def atomic_to_xmr(atomic: int) -> Decimal:
    with decimal.localcontext(MONEY_CONTEXT):
        return (Decimal(atomic) / ATOMIC_UNITS_PER_XMR).quantize(XMR_QUANTUM)


def format_amount(value: Decimal) -> str:
    """Plain positional notation, never exponent form."""
    return format(value, "f")


__all__ = [
    "ATOMIC_UNITS_PER_XMR",
    "INVOICE_ACCOUNT_INDEX",
    "MAX_FRACTION_DIGITS",
    "MAX_INTEGER_DIGITS",
    "XMR_DECIMALS",
    "XMR_QUANTUM",
    "InvalidAmountError",
    "atomic_to_xmr",
    "convert_to_xmr",
    "format_amount",
    "parse_amount",
]
