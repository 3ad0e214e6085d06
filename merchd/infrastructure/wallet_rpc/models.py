"""Wire shapes for the monero-wallet-rpc methods used by the gateway."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class _RpcModel(BaseModel):
    model_config = ConfigDict(extra="ignore")


class EmptyResult(_RpcModel):
    pass


class RpcErrorObject(_RpcModel):
    code: Optional[int] = None
    message: str = ""


class CreateAddressResult(_RpcModel):
    address: str = Field(..., min_length=1)
    address_index: int = Field(..., ge=0)


class TransferEntry(_RpcModel):
    amount: int = Field(..., ge=0)
    confirmations: int = Field(default=0, ge=0)
    txid: str = ""


class GetTransfersResult(_RpcModel):
    incoming: list[TransferEntry] = Field(default_factory=list, alias="in")
    pool: list[TransferEntry] = Field(default_factory=list)


class VerifyResult(_RpcModel):
    good: bool


@dataclass(slots=True, frozen=True)
class Subaddress:
    address: str
    account_index: int
    address_index: int
