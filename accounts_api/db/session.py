from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from accounts_api.core.config import settings

SQLALCHEMY_DATABASE_URL = settings.database_url


def make_engine(database_url: str):
    return create_engine(
        database_url,
        connect_args={"check_same_thread": False} if "sqlite" in database_url else {},
    )


engine = make_engine(SQLALCHEMY_DATABASE_URL)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
