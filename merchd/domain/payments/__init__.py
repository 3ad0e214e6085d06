"""Payment verification domain exports"""

from .models import DEFAULT_CONFIRMATION_POLICY, ConfirmationPolicy, PaymentStatus, Transfer
from .service import PaymentService, aggregate_confirmations, summarize_transfers

__all__ = [
    "ConfirmationPolicy",
    "DEFAULT_CONFIRMATION_POLICY",
    "PaymentStatus",
    "Transfer",
    "PaymentService",
    "aggregate_confirmations",
    "summarize_transfers",
]
