"""Database engine and session factory owned by the application instance."""

from contextlib import contextmanager
from typing import Iterator

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from tidyhq.core.settings import Settings


class Database:
    """Owns one engine (and its connection pool) plus the session factory bound to it."""

    def __init__(self, url: str, *, pool_size: int = 5, max_overflow: int = 10, echo: bool = False):
        self.url = url
        self.engine: Engine = create_engine(url, echo=echo, **self._engine_options(url, pool_size, max_overflow))
        self.SessionLocal = sessionmaker(bind=self.engine, autoflush=False, expire_on_commit=False)

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        return cls(settings.database_url, pool_size=settings.db_pool_size, max_overflow=settings.db_max_overflow)

    @staticmethod
    def _engine_options(url: str, pool_size: int, max_overflow: int) -> dict:
        if url.startswith("sqlite"):
            # Requests are served from a thread pool; SQLite connections must be shareable
            return {"connect_args": {"check_same_thread": False}}
        return {"pool_size": pool_size, "max_overflow": max_overflow, "pool_pre_ping": True}

    def create_all(self) -> None:
        from tidyhq.db.base import Base

        Base.metadata.create_all(bind=self.engine)

    def drop_all(self) -> None:
        from tidyhq.db.base import Base

        Base.metadata.drop_all(bind=self.engine)

    @contextmanager
    def session(self) -> Iterator[Session]:
        db = self.SessionLocal()
        try:
            yield db
        finally:
            db.close()

    def dispose(self) -> None:
        self.engine.dispose()


def get_database(request: Request) -> Database:
    return request.app.state.database


def get_db(request: Request) -> Iterator[Session]:
    with get_database(request).session() as db:
        yield db


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings
