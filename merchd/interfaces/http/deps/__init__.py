"""Reusable FastAPI dependencies."""

from .services import get_container, get_invoice_service, get_message_service, get_payment_service

__all__ = [
    "get_container",
    "get_invoice_service",
    "get_payment_service",
    "get_message_service",
]
