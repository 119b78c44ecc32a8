# schemas/__init__.py
from .checkout import CheckoutRequest

__all__ = [
     "CheckoutRequest",
]
