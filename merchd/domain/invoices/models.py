"""Domain model for issued invoices."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(slots=True, frozen=True)
class Invoice:
    address: str
    account_index: int
    address_index: int
    amount_xmr: Decimal
