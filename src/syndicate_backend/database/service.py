"""Database session management utilities."""

from __future__ import annotations

from contextlib import contextmanager
from typing import TYPE_CHECKING, Any, Iterator

from sqlalchemy import create_engine, event
from sqlalchemy.orm import Session, sessionmaker

from syndicate_backend.database.base import BaseSchema
from syndicate_backend.settings import BackendSettings, get_settings

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine


def _enable_sqlite_foreign_keys(dbapi_connection: Any, _: Any) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class DatabaseService:
    """Wraps SQLAlchemy engine and session factory."""

    def __init__(
        self,
        url: str | None = None,
        *,
        settings: BackendSettings | None = None,
        echo: bool | None = None,
    ) -> None:
        config = settings or get_settings()
        self._engine = create_engine(
            url or config.database_url,
            echo=config.sql_echo if echo is None else echo,
            future=True,
        )
        if self._engine.dialect.name == "sqlite":
            # cascades from a dropped partition rely on enforced foreign keys
            event.listen(self._engine, "connect", _enable_sqlite_foreign_keys)
        self._session_factory = sessionmaker(
            bind=self._engine,
            autoflush=False,
            autocommit=False,
            expire_on_commit=False,
            class_=Session,
        )

    @property
    def engine(self) -> Engine:
        """Expose the SQLAlchemy engine."""

        return self._engine

    def create_all(self) -> None:
        """Create every table known to :class:`BaseSchema` (tests and local runs)."""

        BaseSchema.metadata.create_all(self._engine)

    @contextmanager
    def session(self) -> Iterator[Session]:
        """Provide a transactional session scope."""

        session = self._session_factory()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()
