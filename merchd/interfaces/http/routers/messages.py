"""Signed message verification endpoint."""
from __future__ import annotations

from fastapi import APIRouter, Depends

from merchd.domain.messages import MessageService
from merchd.interfaces.http.deps import get_message_service
from merchd.schemas import VerifyRequest, VerifyResponse

from .errors import HANDLED_ERRORS, to_http_exception

router = APIRouter()


@router.post("/verify", response_model=VerifyResponse, summary="Verify a message signed by a wallet address")
async def verify_message(
    payload: VerifyRequest,
    service: MessageService = Depends(get_message_service),
) -> VerifyResponse:
    try:
        good = await service.verify(payload.address, payload.message, payload.signature)
    except HANDLED_ERRORS as exc:
        raise to_http_exception(exc) from exc
    return VerifyResponse(good=good)
