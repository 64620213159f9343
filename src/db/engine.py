"""Database engine and session factory."""

from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from src.settings import Settings, get_settings

_engine = None


def build_engine(settings: Settings) -> Engine:
    """Create a new engine for the configured database URL."""
    return create_engine(
        settings.database_url,
        echo=settings.database_echo,
        pool_pre_ping=True,
    )


def get_engine() -> Engine:
    """Get or create the shared database engine."""
    global _engine
    if _engine is None:
        _engine = build_engine(get_settings())
    return _engine


def get_session_factory(engine: Optional[Engine] = None) -> sessionmaker:
    return sessionmaker(bind=engine or get_engine(), expire_on_commit=False)


def reset_engine() -> None:
    """Dispose of the shared engine (used by tests and on settings change)."""
    global _engine
    if _engine is not None:
        _engine.dispose()
    _engine = None
