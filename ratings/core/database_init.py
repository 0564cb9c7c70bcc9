"""Database initialization - runs on backend startup."""
import logging
from typing import Optional

from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from ratings.infrastructure.persistence import models
from ratings.infrastructure.persistence.db import Base, engine as default_engine

logger = logging.getLogger(__name__)


def initialize_database(engine: Optional[Engine] = None) -> bool:
    """Create the users and ratings tables when missing.

    Returns:
        True when the schema is in place, False otherwise
    """
    engine = engine or default_engine
    try:
        Base.metadata.create_all(bind=engine, tables=[models.User.__table__, models.Rating.__table__])
    except SQLAlchemyError as e:
        logger.error(f"Error initializing database: {e}")
        return False

    logger.info("✅ Database schema initialized successfully")
    return True
