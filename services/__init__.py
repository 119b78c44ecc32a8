# services/__init__.py
from .document_store import DocumentStore, SERVER_TIMESTAMP
from .checkout_relay import (
     CheckoutRelay,
     UpstreamError,
     build_http_session,
     CURRENCY,
     CHECKOUTS_COLLECTION,
)

__all__ = [
     "DocumentStore",
     "SERVER_TIMESTAMP",
     "CheckoutRelay",
     "UpstreamError",
     "build_http_session",
     "CURRENCY",
     "CHECKOUTS_COLLECTION",
]
