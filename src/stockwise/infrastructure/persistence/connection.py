"""Single source of store connections shared by every repository.

Connection parameters are derived once, from ``StoreSettings``, and the
resulting engine is injected into each repository.
"""

from __future__ import annotations

import logging
import threading
from pathlib import Path

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.exc import ArgumentError
from sqlalchemy.orm import Session, sessionmaker

from stockwise.infrastructure.config import ConfigurationError, StoreSettings
from stockwise.infrastructure.persistence.schema import ensure_schema

logger = logging.getLogger(__name__)


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class ConnectionProvider:

    def __init__(self, engine: Engine) -> None:
        self._engine = engine
        self._session_factory = sessionmaker(
            bind=engine, autoflush=False, expire_on_commit=False
        )
        self._schema_lock = threading.Lock()
        self._schema_ready = False

    @classmethod
    def from_settings(cls, settings: StoreSettings) -> ConnectionProvider:
        """Build the engine described by ``settings``.

        Raises ConfigurationError when the credential is missing or the
        URL cannot be parsed; nothing should run against an unusable store.
        """
        password = settings.require_password()
        try:
            url = make_url(settings.db_url)
        except ArgumentError as exc:
            raise ConfigurationError(f"Invalid store URL: {settings.db_url!r}") from exc

        if url.get_backend_name() == "sqlite":
            if url.database and url.database != ":memory:":
                Path(url.database).parent.mkdir(parents=True, exist_ok=True)
            engine = create_engine(url, echo=settings.db_echo)
            event.listen(engine, "connect", _enable_sqlite_foreign_keys)
        else:
            url = url.set(username=settings.db_user, password=password)
            engine = create_engine(url, echo=settings.db_echo, pool_pre_ping=True)

        logger.debug("Store engine created for %s", url.render_as_string(hide_password=True))
        return cls(engine)

    @property
    def engine(self) -> Engine:
        return self._engine

    def ensure_schema(self) -> None:
        """Create or migrate the tables once per provider."""
        with self._schema_lock:
            if not self._schema_ready:
                ensure_schema(self._engine)
                self._schema_ready = True

    def session(self) -> Session:
        """A session for reads; use as a context manager."""
        return self._session_factory()

    def begin(self):
        """A session inside a transaction that commits on exit."""
        return self._session_factory.begin()

    def close(self) -> None:
        self._engine.dispose()
