"""Database connection and session management for Sprint03.

`DATABASE_URL` selects the backend: a local SQLite file by default, or any
server database SQLAlchemy has a driver for (Oracle in the original deployment).
"""

import os
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, Session, declarative_base
from dotenv import load_dotenv

load_dotenv()

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./sprint03.db")

# Pool sizing for server databases: (create_engine kwarg, env var, default)
POOL_SETTINGS = (
    ("pool_size", "DB_POOL_SIZE", 5),
    ("max_overflow", "DB_MAX_OVERFLOW", 5),
    ("pool_timeout", "DB_POOL_TIMEOUT_SEC", 30),
)


def _is_sqlite_url(database_url: str) -> bool:
    return (database_url or "").startswith("sqlite")


def get_engine_kwargs(database_url: str) -> dict:
    """create_engine kwargs for a URL, read from the environment without connecting."""
    kwargs: dict = {
        "echo": os.getenv("DEBUG", "False").lower() == "true",
        "pool_pre_ping": True,
    }
    if _is_sqlite_url(database_url):
        # Sessions are used from FastAPI's threadpool
        kwargs["connect_args"] = {"check_same_thread": False}
    else:
        for kwarg, env_var, default in POOL_SETTINGS:
            kwargs[kwarg] = int(os.getenv(env_var, str(default)))
    return kwargs


def set_sqlite_pragmas(dbapi_conn, connection_record):
    """Enable foreign keys and WAL journaling on a new SQLite connection."""
    cursor = dbapi_conn.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.execute("PRAGMA journal_mode=WAL")
    cursor.close()


def build_engine(database_url: str, **overrides) -> Engine:
    """Create an engine; SQLite engines get the connection pragmas."""
    built = create_engine(database_url, **{**get_engine_kwargs(database_url), **overrides})
    if _is_sqlite_url(database_url):
        event.listen(built, "connect", set_sqlite_pragmas)
    return built


engine = build_engine(DATABASE_URL)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def get_db() -> Session:
    """Get database session (dependency for FastAPI)."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db(*, engine_override: Engine = None) -> None:
    """Create any missing tables (no migrations)."""
    # Registers the table models on Base
    from sprint03.database import models  # noqa: F401

    Base.metadata.create_all(bind=engine_override or engine)
