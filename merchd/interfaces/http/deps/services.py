"""Workflow service providers backed by the application container."""

from fastapi import Depends, Request

from merchd.core.container import ApplicationContainer
from merchd.domain.invoices import InvoiceService
from merchd.domain.messages import MessageService
from merchd.domain.payments import PaymentService


def get_container(request: Request) -> ApplicationContainer:
    return request.app.state.container


def get_invoice_service(container: ApplicationContainer = Depends(get_container)) -> InvoiceService:
    return container.invoice_service()


def get_payment_service(container: ApplicationContainer = Depends(get_container)) -> PaymentService:
    return container.payment_service()


def get_message_service(container: ApplicationContainer = Depends(get_container)) -> MessageService:
    return container.message_service()


__all__ = [
    "get_container",
    "get_invoice_service",
    "get_payment_service",
    "get_message_service",
]
