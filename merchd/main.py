import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from merchd import __version__
from merchd.core.config import Settings, get_settings
from merchd.core.container import ApplicationContainer
from merchd.core.logging import configure_logging
from merchd.infrastructure.wallet_rpc import WalletRpcError
from merchd.interfaces.http import create_api_router

logger = logging.getLogger(__name__)


async def open_configured_wallet(container: ApplicationContainer) -> bool:
    settings = container.settings
    logger.info("Connecting to monero-wallet-rpc at %s", container.wallet.url)
    try:
        await container.wallet.open_wallet(settings.wallet.wallet_name)
    except WalletRpcError as exc:
        logger.error("Failed to open wallet %r: %s", settings.wallet.wallet_name, exc)
        logger.error("Make sure the view-only wallet exists and monero-wallet-rpc is running.")
        return False
    logger.info("Wallet %r opened successfully", settings.wallet.wallet_name)
    return True


def create_app(settings: Optional[Settings] = None, container: Optional[ApplicationContainer] = None) -> FastAPI:
    settings = settings or (container.settings if container is not None else get_settings())
    configure_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        owned = app.state.container is None
        if owned:
            app.state.container = ApplicationContainer.from_settings(settings)
        logger.info("Starting moneromerchd %s", __version__)
        logger.info("Wallet RPC: %s (wallet dir %s)", settings.wallet.rpc_url, settings.wallet.wallet_dir)
        logger.info("Listening on %s", settings.server.listen)
        if settings.wallet.open_on_startup:
            await open_configured_wallet(app.state.container)
        try:
            yield
        finally:
            if owned:
                await app.state.container.aclose()
                app.state.container = None

    app = FastAPI(
        title=settings.project_name,
        description="Monero merchant payment gateway",
        version=__version__,
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.container = container

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(create_api_router())

    @app.get("/", response_class=PlainTextResponse)
    async def health() -> str:
        return "OK"

    return app


app = create_app()
