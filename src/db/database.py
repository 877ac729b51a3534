"""Generate database session"""

from typing import Generator

from sqlalchemy import Engine, StaticPool, create_engine
from sqlalchemy.orm import Session, sessionmaker

from src.core.config import Settings, get_settings
from src.db.schema import Base


def build_engine(settings: Settings) -> Engine:
    """An in-memory SQLite database only lives as long as its connection: share a single one."""
    if settings.is_in_memory_db:
        return create_engine(
            settings.database_url,
            echo=settings.db_echo,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    return create_engine(settings.database_url, echo=settings.db_echo)


engine = build_engine(get_settings())
SessionLocal = sessionmaker(autoflush=False, bind=engine)

# Ensure all tables are created
Base.metadata.create_all(bind=engine)


def get_db() -> Generator[Session, None, None]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
