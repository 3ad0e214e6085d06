"""Domain models for payment verification."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


class ConfirmationPolicy(str, Enum):
    """How confirmations of several transfers fold into one number."""

    MINIMUM = "minimum"
    MAXIMUM = "maximum"


# An invoice is only as confirmed as its least confirmed contributing transfer.
DEFAULT_CONFIRMATION_POLICY = ConfirmationPolicy.MINIMUM


@dataclass(slots=True, frozen=True)
class Transfer:
    amount_atomic: int
    confirmations: int
    txid: str
    in_pool: bool = False


@dataclass(slots=True, frozen=True)
class PaymentStatus:
    total_received_xmr: Decimal
    confirmations: int
    tx_count: int
    paid: bool
