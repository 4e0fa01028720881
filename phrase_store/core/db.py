from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, Session, declarative_base
from sqlalchemy.pool import StaticPool
from contextlib import contextmanager
from typing import Generator, Optional

from phrase_store.config.settings import DatabaseSettings, get_settings

# SQLAlchemy declarative base for models
Base = declarative_base()

_engine: Optional[Engine] = None
_session_factory: Optional[sessionmaker] = None


def _connect_args(db_settings: DatabaseSettings) -> dict:
    """Driver arguments carrying the per-statement timeout."""
    if db_settings.is_sqlite:
        return {
            "check_same_thread": False,
            "timeout": db_settings.statement_timeout_ms / 1000.0,
        }
    if db_settings.url.startswith("postgresql"):
        return {"options": f"-c statement_timeout={db_settings.statement_timeout_ms}"}
    return {}


def build_engine(db_settings: Optional[DatabaseSettings] = None) -> Engine:
    db_settings = db_settings or get_settings().database
    kwargs = {
        "echo": db_settings.echo,
        "pool_pre_ping": db_settings.pool_pre_ping,
        "future": True,
        "connect_args": _connect_args(db_settings),
    }
    # In-memory SQLite with StaticPool so the schema persists across connections
    if db_settings.is_sqlite and (":memory:" in db_settings.url or db_settings.url.endswith("://")):
        kwargs["poolclass"] = StaticPool
    return create_engine(db_settings.url, **kwargs)


def build_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(
        bind=engine, autoflush=False, autocommit=False, expire_on_commit=False
    )


def get_engine() -> Engine:
    """Process-wide engine built from settings on first use."""
    global _engine
    if _engine is None:
        _engine = build_engine()
    return _engine


def get_session_factory() -> sessionmaker:
    global _session_factory
    if _session_factory is None:
        _session_factory = build_session_factory(get_engine())
    return _session_factory


def dispose_engine() -> None:
    global _engine, _session_factory
    if _engine is not None:
        _engine.dispose()
    _engine = None
    _session_factory = None


@contextmanager
def session_scope(session_factory: sessionmaker) -> Generator[Session, None, None]:
    """One transaction per block: commit on success, rollback on error."""
    session = session_factory()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


@contextmanager
def db_session() -> Generator[Session, None, None]:
    with session_scope(get_session_factory()) as session:
        yield session
