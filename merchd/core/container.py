"""Simple dependency container for wiring the long-lived client handles."""

from __future__ import annotations

from dataclasses import dataclass

from merchd.core.config import Settings, get_settings
from merchd.domain.invoices import InvoiceService
from merchd.domain.messages import MessageService
from merchd.domain.payments import ConfirmationPolicy, PaymentService
from merchd.infrastructure.price_feed import PriceFeedClient
from merchd.infrastructure.wallet_rpc import WalletRpcClient


@dataclass(slots=True)
class ApplicationContainer:
    settings: Settings
    wallet: WalletRpcClient
    prices: PriceFeedClient

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "ApplicationContainer":
        settings = settings or get_settings()
        wallet = WalletRpcClient(
            settings.wallet.rpc_url,
            settings.wallet.rpc_user,
            settings.wallet.rpc_password,
            timeout=settings.wallet.timeout,
        )
        prices = PriceFeedClient(
            settings.price_feed.url,
            coin_id=settings.price_feed.coin_id,
            timeout=settings.price_feed.timeout,
        )
        return cls(settings=settings, wallet=wallet, prices=prices)

    def invoice_service(self) -> InvoiceService:
        return InvoiceService(wallet=self.wallet, prices=self.prices)

    def payment_service(self) -> PaymentService:
        policy = ConfirmationPolicy(self.settings.payments.confirmation_policy)
        return PaymentService(wallet=self.wallet, confirmation_policy=policy)

    def message_service(self) -> MessageService:
        return MessageService(wallet=self.wallet)

    async def aclose(self) -> None:
        await self.wallet.aclose()
        await self.prices.aclose()


__all__ = ["ApplicationContainer"]
