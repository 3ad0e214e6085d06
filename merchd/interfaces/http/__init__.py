from fastapi import APIRouter

from merchd.interfaces.http.routers import invoices, messages, payments


def create_api_router(prefix: str = "") -> APIRouter:
    router = APIRouter(prefix=prefix)
    router.include_router(invoices.router, tags=["invoices"])
    router.include_router(payments.router, tags=["payments"])
    router.include_router(messages.router, tags=["messages"])
    return router


__all__ = [
    "create_api_router",
]
