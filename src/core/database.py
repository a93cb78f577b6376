"""Database connection and session management.

A single ``Database`` is built by the application factory and kept on
``app.state``. Requests borrow a session from it through ``get_db``.
"""

import logging
from contextlib import contextmanager
from typing import Iterator, Optional

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from config import DATA_DIR, DATABASE_URL
from models.base import Base
# Import models to ensure they are registered with Base.metadata
import models  # noqa: F401

logger = logging.getLogger(__name__)


class Database:
    """Owns the engine and session factory for one process."""

    def __init__(self, url: Optional[str] = None):
        """Create the engine.

        Args:
            url: SQLAlchemy database URL. Defaults to ``DATABASE_URL``.
        """
        self.url = url or DATABASE_URL
        sa_url = make_url(self.url)
        engine_kwargs = {}
        if sa_url.get_backend_name() == "sqlite":
            engine_kwargs["connect_args"] = {"check_same_thread": False}
            if sa_url.database in (None, "", ":memory:"):
                # In-memory databases live as long as their one connection
                engine_kwargs["poolclass"] = StaticPool
            else:
                DATA_DIR.mkdir(parents=True, exist_ok=True)

        self.engine = create_engine(self.url, **engine_kwargs)
        self.SessionLocal = sessionmaker(
            autocommit=False, autoflush=False, bind=self.engine
        )

    def init_db(self) -> None:
        """Create tables if they do not exist."""
        Base.metadata.create_all(bind=self.engine)
        logger.info("Database ready: %s", self.engine.url.render_as_string(hide_password=True))

    @contextmanager
    def session(self) -> Iterator[Session]:
        """Yield a session that is always closed afterwards."""
        db = self.SessionLocal()
        try:
            yield db
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

    def dispose(self) -> None:
        """Release pooled connections."""
        self.engine.dispose()


def get_db(request: Request) -> Iterator[Session]:
    """Dependency for getting a request-scoped database session."""
    database: Database = request.app.state.database
    with database.session() as db:
        yield db
