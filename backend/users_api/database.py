from pathlib import Path
from typing import Generator, Optional

from sqlalchemy.engine import Engine
from sqlmodel import Session, SQLModel, create_engine

from users_api.config import get_settings


def build_engine(database_url: str, echo: bool = False) -> Engine:
    """Create an engine, preparing SQLite file paths and thread settings"""
    is_sqlite = database_url.startswith("sqlite")
    connect_args = {"check_same_thread": False} if is_sqlite else {}

    if database_url.startswith("sqlite:///") and ":memory:" not in database_url:
        db_path = database_url.replace("sqlite:///", "", 1)
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)

    return create_engine(database_url, echo=echo, connect_args=connect_args)


_settings = get_settings()
engine: Engine = build_engine(_settings.database_url, echo=_settings.sql_echo)


def get_session() -> Generator[Session, None, None]:
    """Get database session"""
    with Session(engine) as session:
        yield session


def init_db(bind: Optional[Engine] = None) -> None:
    """Initialize database - create all tables"""
    # Import models so they're registered with SQLModel metadata
    from users_api.models.user import User  # noqa: F401

    SQLModel.metadata.create_all(bind or engine)
