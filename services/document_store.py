# services/document_store.py
"""
Document store - "set document at key" persistence over the documents table.

Documents are plain JSON-compatible mappings addressed by collection name
and key. Writing to an existing key replaces the stored document; there
is no query interface.

Any value equal to SERVER_TIMESTAMP is replaced with the database
server's CURRENT_TIMESTAMP (ISO-8601 string) inside the same transaction
as the write.
"""
from datetime import datetime
from typing import Any, Callable, Dict, Optional

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from database import session_scope
from models import Document


class _ServerTimestamp:
     def __repr__(self):
          return "SERVER_TIMESTAMP"


SERVER_TIMESTAMP = _ServerTimestamp()


def _format_timestamp(value: Any) -> str:
     if isinstance(value, datetime):
          return value.isoformat()
     return str(value)


class DocumentStore:
     """Collection/key document writes backed by SQLAlchemy."""

     def __init__(self, session_factory: Callable[[], Session]):
          self._session_factory = session_factory

     def set(self, collection: str, key: str, data: Dict[str, Any]) -> Dict[str, Any]:
          """
          Create or overwrite the document at (collection, key).

          Returns the document exactly as stored, with server timestamps resolved.

          Raises:
               ValueError: If collection or key is empty
          """
          if not collection or not key:
               raise ValueError("Document collection and key are required")

          with session_scope(self._session_factory) as db:
               document = dict(data)
               if any(value is SERVER_TIMESTAMP for value in document.values()):
                    now = _format_timestamp(db.scalar(select(func.now())))
                    document = {
                         name: now if value is SERVER_TIMESTAMP else value
                         for name, value in document.items()
                    }
               db.merge(Document(collection=collection, key=key, data=document))
          return document

     def get(self, collection: str, key: str) -> Optional[Dict[str, Any]]:
          with session_scope(self._session_factory) as db:
               row = db.get(Document, (collection, key))
               return dict(row.data) if row is not None else None
