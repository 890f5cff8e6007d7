# File: tests/conftest.py

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from accounts_api.api.deps import get_db
from accounts_api.core.security import MIN_WORK_FACTOR, BcryptHasher
from accounts_api.db.init_db import init_db
from accounts_api.main import app
from accounts_api.services.registration_service import RegistrationService
from accounts_api.services.user_repository import SqlAlchemyUserRepository


@pytest.fixture
def engine():
    # One shared in-memory database per test
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def repository(db):
    return SqlAlchemyUserRepository(db)


@pytest.fixture
def service(repository):
    return RegistrationService(repository, BcryptHasher(), work_factor=MIN_WORK_FACTOR)


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()
