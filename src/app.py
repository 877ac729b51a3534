"""
Composition root: wires settings, logging, the database session, and the service together.

A presentation layer only needs `create_service()` and the request models in src/api/models.py.
"""

from sqlalchemy.orm import Session

from src.core.config import Settings, configure_logging, get_settings
from src.db.sql_repository import SQLGameRepository
from src.services.chess_service import ChessService


def create_service(db_session: Session, settings: Settings | None = None) -> ChessService:
    settings = settings or get_settings()
    configure_logging(settings.log_level)
    return ChessService(SQLGameRepository(db_session))
