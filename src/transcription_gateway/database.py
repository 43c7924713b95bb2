"""Database engine and session helpers."""

from contextlib import contextmanager

from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from transcription_gateway.db_models import Transcript  # noqa: F401


def get_engine(url: str) -> Engine:
    """Creates an engine; SQLite engines are made shareable across threads."""
    if url.startswith("sqlite"):
        kwargs = {"connect_args": {"check_same_thread": False}}
        if ":memory:" in url or url in ("sqlite://", "sqlite:///"):
            kwargs["poolclass"] = StaticPool
        return create_engine(url, **kwargs)
    return create_engine(url, pool_pre_ping=True)


def init_db(engine: Engine) -> None:
    SQLModel.metadata.create_all(engine)


def make_session_factory(engine: Engine):
    """Returns a callable producing SQLModel Session context managers."""

    @contextmanager
    def _session_factory():
        with Session(engine) as session:
            yield session

    return _session_factory
