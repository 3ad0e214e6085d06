"""Invoice issuance endpoint."""
from __future__ import annotations

from fastapi import APIRouter, Depends

from merchd.domain.invoices import InvoiceService
from merchd.domain.money import format_amount
from merchd.interfaces.http.deps import get_invoice_service
from merchd.schemas import InvoiceCreateRequest, InvoiceResponse

from .errors import HANDLED_ERRORS, to_http_exception

router = APIRouter()


@router.post("/invoice", response_model=InvoiceResponse, summary="Issue an invoice on a fresh subaddress")
async def create_invoice(
    payload: InvoiceCreateRequest,
    service: InvoiceService = Depends(get_invoice_service),
) -> InvoiceResponse:
    try:
        invoice = await service.issue(payload.amount, payload.currency)
    except HANDLED_ERRORS as exc:
        raise to_http_exception(exc) from exc

    return InvoiceResponse(
        address=invoice.address,
        account_index=invoice.account_index,
        address_index=invoice.address_index,
        amount_xmr=format_amount(invoice.amount_xmr),
    )
