# models/__init__.py
from .base import Base
from .document import Document

__all__ = [
     "Base",
     "Document",
]
