"""Application configuration using pydantic settings with structured sections."""

from functools import lru_cache
from typing import Literal, Optional

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ServerSettings(BaseModel):
    listen: str = "127.0.0.1:8080"

    @property
    def host(self) -> str:
        host, _, _ = self.listen.rpartition(":")
        return host or "127.0.0.1"

    @property
    def port(self) -> int:
        _, _, port = self.listen.rpartition(":")
        return int(port)


class WalletSettings(BaseModel):
    rpc_url: str = "http://127.0.0.1:18083"
    rpc_user: Optional[str] = None
    rpc_password: Optional[str] = Field(default=None, repr=False)
    wallet_dir: str = "wallet"
    wallet_name: str = "merch"
    open_on_startup: bool = True
    timeout: float = Field(default=5.0, gt=0)


class PriceFeedSettings(BaseModel):
    url: str = "https://api.coingecko.com/api/v3/simple/price"
    coin_id: str = "monero"
    timeout: float = Field(default=5.0, gt=0)


class PaymentSettings(BaseModel):
    confirmation_policy: Literal["minimum", "maximum"] = "minimum"


class Settings(BaseSettings):
    """Top-level application settings with nested sections."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_nested_delimiter="__",
        extra="ignore",
        case_sensitive=False,
    )

    environment: Literal["development", "staging", "production", "test"] = "development"
    debug: bool = False
    project_name: str = "Monero Merchant Gateway"
    log_level: str = "INFO"

    server: ServerSettings = ServerSettings()
    wallet: WalletSettings = WalletSettings()
    price_feed: PriceFeedSettings = PriceFeedSettings()
    payments: PaymentSettings = PaymentSettings()

    @property
    def host(self) -> str:
        return self.server.host

    @property
    def port(self) -> int:
        return self.server.port

    @property
    def wallet_rpc_url(self) -> str:
        return self.wallet.rpc_url


@lru_cache()
def get_settings() -> Settings:
    return Settings()
