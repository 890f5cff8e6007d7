"""
Database initialization helpers.

Models are imported here so their tables get registered on Base.metadata.
"""

from sqlalchemy.engine import Engine

from accounts_api.db.session import engine as default_engine
from accounts_api.models.base import Base
from accounts_api.models import user  # noqa: F401


def init_db(engine: Engine | None = None) -> None:
    """
    Create all tables based on SQLAlchemy models.
    """
    Base.metadata.create_all(bind=engine or default_engine)
