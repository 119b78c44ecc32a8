# database.py
"""
SQLAlchemy engine and session management.

This module provides:
- Engine construction from a database URL (Azure SQL via pymssql in
  production, SQLite locally and in tests)
- Session factory and a transactional session scope
- Connection utilities

Usage:
     from database import build_engine, build_session_factory, session_scope

     engine = build_engine(settings.database_url)
     factory = build_session_factory(engine)
     with session_scope(factory) as db:
          db.add(...)
"""
import logging
from contextlib import contextmanager
from typing import Callable, Generator

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

logger = logging.getLogger(__name__)


def build_engine(database_url: str, echo: bool = False) -> Engine:
     """
     Create the SQLAlchemy engine.

     SQLite URLs get a single shared connection so an in-memory database
     survives across sessions and threads; everything else gets the
     pooled configuration used for Azure SQL.
     """
     if database_url.startswith("sqlite"):
          return create_engine(
               database_url,
               connect_args={"check_same_thread": False},
               poolclass=StaticPool,
               echo=echo,
          )
     return create_engine(
          database_url,
          pool_size=5,
          max_overflow=10,
          pool_timeout=30,
          pool_recycle=1800,  # Recycle connections after 30 minutes
          pool_pre_ping=True,
          echo=echo,
     )


def build_session_factory(engine: Engine) -> sessionmaker:
     return sessionmaker(
          bind=engine,
          autocommit=False,
          autoflush=False,
          expire_on_commit=False,
     )


@contextmanager
def session_scope(factory: Callable[[], Session]) -> Generator[Session, None, None]:
     """
     Context manager for database sessions.

     Commits on success, rolls back and re-raises on any error.

     Yields:
          Session: SQLAlchemy database session
     """
     session = factory()
     try:
          yield session
          session.commit()
     except Exception:
          session.rollback()
          raise
     finally:
          session.close()


def init_db(engine: Engine) -> None:
     """
     Initialize database tables.

     Creates all tables defined in the models if they don't exist.
     For production, use Alembic migrations instead.
     """
     from models import Base
     Base.metadata.create_all(bind=engine)


def check_connection(engine: Engine) -> bool:
     """
     Test database connectivity.

     Returns:
          bool: True if connection successful, False otherwise
     """
     try:
          with engine.connect() as conn:
               conn.execute(text("SELECT 1"))
          return True
     except Exception:
          logger.exception("Database connection failed")
          return False
