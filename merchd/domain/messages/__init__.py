from .service import MessageService

__all__ = ["MessageService"]
