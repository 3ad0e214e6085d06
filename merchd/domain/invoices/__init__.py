"""Invoice domain exports"""

from .models import Invoice
from .service import InvoiceService

__all__ = [
    "Invoice",
    "InvoiceService",
]
