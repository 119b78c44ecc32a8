# models/document.py
"""
Document model - schema-less records addressed by (collection, key).

The payload lives in a JSON column and is never interpreted by the
database layer; the checkout relay writes provider checkout records
into the "checkouts" collection keyed by the provider's id.
"""
from sqlalchemy import Column, String, DateTime, JSON, func
from .base import Base


class Document(Base):
     collection = Column(String(100), primary_key=True)
     key = Column(String(255), primary_key=True)
     data = Column(JSON, nullable=False)
     created_at = Column(DateTime, server_default=func.now(), nullable=False)
     updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now(), nullable=False)

     def __repr__(self):
          return f"<Document(collection='{self.collection}', key='{self.key}')>"
