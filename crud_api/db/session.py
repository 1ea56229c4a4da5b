"""Engine/session handle for the SQL backend."""
from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker, Session

from crud_api.core.config import Settings

Base = declarative_base()


class Database:
    """Store handle: owns the engine/pool and hands out ORM sessions.

    Built once by the app factory and passed down to the repositories; nothing
    else creates engines.
    """

    def __init__(self, url, *, echo: bool = False) -> None:
        self.engine: Engine = create_engine(url, future=True, pool_pre_ping=True, echo=echo)
        self._sessionmaker = sessionmaker(
            bind=self.engine,
            autoflush=False,
            autocommit=False,
            expire_on_commit=False,
            future=True,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        return cls(settings.sqlalchemy_url(), echo=settings.db_logging)

    @contextmanager
    def session(self) -> Iterator[Session]:
        session: Session = self._sessionmaker()
        try:
            yield session
        finally:
            session.close()

    def ping(self) -> None:
        """Run a trivial query; raises if the store cannot be reached."""
        with self.engine.connect() as conn:
            conn.execute(text("SELECT 1"))

    def create_all(self) -> None:
        from . import models  # noqa: F401  # ensure models are imported for metadata

        Base.metadata.create_all(bind=self.engine)

    def drop_all(self) -> None:
        from . import models  # noqa: F401

        Base.metadata.drop_all(bind=self.engine)

    def dispose(self) -> None:
        self.engine.dispose()
