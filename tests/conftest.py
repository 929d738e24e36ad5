import os

os.environ.setdefault("DATABASE_DSN", "sqlite://")
os.environ.setdefault("CREATE_TABLES", "false")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from wallet_api.database import Base, get_db
from wallet_api.dependencies import get_wallet_store
from wallet_api.main import app
from wallet_api.repositories import SqlWalletStore


# ============================================================================
# PYTEST FIXTURES
# ============================================================================

@pytest.fixture
def engine():
    # One shared connection so every session sees the same in-memory database
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()

@pytest.fixture
def session_factory(engine):
    return sessionmaker(autoflush=False, bind=engine)

@pytest.fixture
def db_session(session_factory):
    session = session_factory()
    yield session
    session.close()

@pytest.fixture
def store(db_session) -> SqlWalletStore:
    return SqlWalletStore(db_session)

@pytest.fixture
def client(session_factory):
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()

@pytest.fixture
def stub_client():
    def make_client(stub) -> TestClient:
        app.dependency_overrides[get_wallet_store] = lambda: stub
        return TestClient(app)

    yield make_client
    app.dependency_overrides.clear()


# ============================================================================
# PYTEST CONFIGURATION HOOKS
# ============================================================================

def pytest_configure(config):
    config.addinivalue_line(
        "markers", "unit: marks handler tests running against a stub store"
    )
    config.addinivalue_line(
        "markers", "integration: marks tests running against a real SQL engine"
    )
