"""Payment status endpoint."""
from __future__ import annotations

from fastapi import APIRouter, Depends

from merchd.domain.money import format_amount
from merchd.domain.payments import PaymentService
from merchd.interfaces.http.deps import get_payment_service
from merchd.schemas import PaymentCheckRequest, PaymentStatusResponse

from .errors import HANDLED_ERRORS, to_http_exception

router = APIRouter()


@router.post("/check_payment", response_model=PaymentStatusResponse, summary="Check whether an invoice is paid")
async def check_payment(
    payload: PaymentCheckRequest,
    service: PaymentService = Depends(get_payment_service),
) -> PaymentStatusResponse:
    try:
        result = await service.check_payment(payload.address_index, payload.expected_amount_xmr)
    except HANDLED_ERRORS as exc:
        raise to_http_exception(exc) from exc

    return PaymentStatusResponse(
        total_received_xmr=format_amount(result.total_received_xmr),
        confirmations=result.confirmations,
        tx_count=result.tx_count,
        paid=result.paid,
    )
