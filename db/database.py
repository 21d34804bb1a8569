from typing import Generator

from fastapi import FastAPI, Request
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from logger_manager import log_info

Base = declarative_base()


def create_db_engine(database_url: str) -> Engine:
    """Build the engine for ``database_url``.

    SQLite connections are shared across the request threadpool, so in-memory
    databases get a single static connection.
    """
    if database_url.startswith("sqlite"):
        kwargs = {"connect_args": {"check_same_thread": False}}
        if ":memory:" in database_url or database_url == "sqlite://":
            kwargs["poolclass"] = StaticPool
        return create_engine(database_url, **kwargs)
    return create_engine(database_url, pool_pre_ping=True)


def create_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db(app: FastAPI, database_url: str) -> None:
    # Register the mapped tables before create_all
    from db import models  # noqa: F401

    log_info("Opening database connection")
    engine = create_db_engine(database_url)
    Base.metadata.create_all(bind=engine)
    app.state.engine = engine
    app.state.session_factory = create_session_factory(engine)


def close_db(app: FastAPI) -> None:
    engine = getattr(app.state, "engine", None)
    if engine is not None:
        log_info("Closing database connection")
        engine.dispose()
        app.state.engine = None
        app.state.session_factory = None


def get_db(request: Request) -> Generator[Session, None, None]:
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()
