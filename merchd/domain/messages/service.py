"""Signed message verification passthrough."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


class SignatureVerifier(Protocol):
    async def verify_signed_message(self, address: str, message: str, signature: str) -> bool:
        ...


@dataclass(slots=True)
class MessageService:
    wallet: SignatureVerifier

    async def verify(self, address: str, message: str, signature: str) -> bool:
        return await self.wallet.verify_signed_message(address, message, signature)
