import importlib.util
from typing import Iterator

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool


def normalize_database_url(url: str) -> str:
    """Point plain Postgres URLs at the psycopg (v3) driver when psycopg2 is absent.

    SQLAlchemy picks psycopg2 for 'postgresql://' URLs; only 'psycopg' is a declared
    dependency. Legacy 'postgres://' prefixes (Heroku/Railway style) are rewritten too.
    """
    if not url.startswith(("postgres://", "postgresql://")) or "+psycopg" in url:
        return url
    if url.startswith("postgres://"):
        url = "postgresql://" + url[len("postgres://"):]
    if importlib.util.find_spec("psycopg2") is not None:
        return url
    return url.replace("postgresql://", "postgresql+psycopg://", 1)


def make_engine(url: str) -> Engine:
    url = normalize_database_url(url)
    if url.startswith("sqlite"):
        # Endpoints run in the threadpool, so the sqlite connection must cross threads
        kwargs = {"connect_args": {"check_same_thread": False}}
        if url in {"sqlite://", "sqlite:///:memory:"}:
            kwargs["poolclass"] = StaticPool
        return create_engine(url, **kwargs)
    return create_engine(url, pool_pre_ping=True)


def make_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db(request: Request) -> Iterator[Session]:
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()
