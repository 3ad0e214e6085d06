"""Payment verification domain service"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable, Protocol, Sequence

from merchd.domain.money import INVOICE_ACCOUNT_INDEX, XMR_DECIMALS, atomic_to_xmr, parse_amount

from .models import DEFAULT_CONFIRMATION_POLICY, ConfirmationPolicy, PaymentStatus, Transfer

logger = logging.getLogger(__name__)


class IncomingTransferSource(Protocol):
    async def list_incoming_transfers(self, account_index: int, address_indexes: Iterable[int]) -> list[Transfer]:
        ...


def aggregate_confirmations(transfers: Sequence[Transfer], policy: ConfirmationPolicy) -> int:
    if not transfers:
        return 0
    depths = [transfer.confirmations for transfer in transfers]
    if policy is ConfirmationPolicy.MAXIMUM:
        return max(depths)
    return min(depths)


def summarize_transfers(
    transfers: Sequence[Transfer],
    expected_xmr: Decimal,
    policy: ConfirmationPolicy = DEFAULT_CONFIRMATION_POLICY,
) -> PaymentStatus:
    total_atomic = sum(transfer.amount_atomic for transfer in transfers)
    total_xmr = atomic_to_xmr(total_atomic)
    return PaymentStatus(
        total_received_xmr=total_xmr,
        confirmations=aggregate_confirmations(transfers, policy),
        tx_count=len(transfers),
        paid=total_xmr >= expected_xmr,
    )


@dataclass(slots=True)
class PaymentService:
    wallet: IncomingTransferSource
    confirmation_policy: ConfirmationPolicy = DEFAULT_CONFIRMATION_POLICY

    async def check_payment(self, address_index: int, expected_amount_xmr: str) -> PaymentStatus:
        """Recompute the payment status of one invoice from the live transfer list."""
        expected = parse_amount(expected_amount_xmr, allow_zero=True, max_fraction_digits=XMR_DECIMALS)
        transfers = await self.wallet.list_incoming_transfers(INVOICE_ACCOUNT_INDEX, [address_index])
        status = summarize_transfers(transfers, expected, self.confirmation_policy)
        logger.info(
            "payment check index=%s received=%s expected=%s confirmations=%s txs=%s paid=%s",
            address_index,
            status.total_received_xmr,
            expected,
            status.confirmations,
            status.tx_count,
            status.paid,
        )
        return status
