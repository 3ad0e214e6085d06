"""Invoice issuance domain service"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional, Protocol

from merchd.domain.money import (
    INVOICE_ACCOUNT_INDEX,
    MAX_FRACTION_DIGITS,
    XMR_DECIMALS,
    InvalidAmountError,
    convert_to_xmr,
    parse_amount,
)
from merchd.infrastructure.wallet_rpc.models import Subaddress

from .models import Invoice

logger = logging.getLogger(__name__)

XMR = "XMR"


class SubaddressAllocator(Protocol):
    async def create_subaddress(self, account_index: int = 0) -> Subaddress:
        ...


class PriceSource(Protocol):
    async def quote(self, currency: str) -> Decimal:
        ...


@dataclass(slots=True)
class InvoiceService:
    wallet: SubaddressAllocator
    prices: PriceSource

    async def amount_in_xmr(self, amount: Decimal, currency: str) -> Decimal:
        if currency == XMR:
            return amount
        price = await self.prices.quote(currency)
        if price <= 0:
            raise InvalidAmountError(f"refusing non-positive {currency} price {price}")
        return convert_to_xmr(amount, price)

    async def issue(self, amount: Optional[str], currency: Optional[str] = None) -> Invoice:
        """Validate and convert ``amount``, then allocate a fresh subaddress.

        Nothing is allocated in the wallet when validation or the price
        lookup fails.
        """
        code = (currency or XMR).strip().upper()
        # XMR amounts must be payable in whole atomic units.
        digits = XMR_DECIMALS if code == XMR else MAX_FRACTION_DIGITS
        value = parse_amount(amount, max_fraction_digits=digits)
        owed = await self.amount_in_xmr(value, code)

        subaddress = await self.wallet.create_subaddress(INVOICE_ACCOUNT_INDEX)
        logger.info(
            "issued invoice index=%s amount_xmr=%s (requested %s %s)",
            subaddress.address_index,
            owed,
            value,
            code,
        )
        return Invoice(
            address=subaddress.address,
            account_index=subaddress.account_index,
            address_index=subaddress.address_index,
            amount_xmr=owed,
        )
