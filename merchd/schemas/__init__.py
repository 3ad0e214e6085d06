"""Pydantic schemas for the HTTP surface."""

from typing import Optional

from pydantic import AliasChoices, BaseModel, Field


class InvoiceCreateRequest(BaseModel):
    amount: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("amount", "amount_xmr"),
        description="Decimal amount as text",
    )
    currency: Optional[str] = Field(default="XMR", description="XMR or a fiat/crypto code known to the price feed")


class InvoiceResponse(BaseModel):
    address: str
    account_index: int
    address_index: int
    amount_xmr: str


class PaymentCheckRequest(BaseModel):
    address_index: int = Field(..., ge=0)
    expected_amount_xmr: str


class PaymentStatusResponse(BaseModel):
    total_received_xmr: str
    confirmations: int
    tx_count: int
    paid: bool


class VerifyRequest(BaseModel):
    address: str
    message: str
    signature: str


class VerifyResponse(BaseModel):
    good: bool
