"""
Pytest Konfiguration und gemeinsame Fixtures
"""
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from crate_ledger.main import app
from crate_ledger.database import Base, get_db
from crate_ledger.api.deps import get_current_user


# Test-Datenbank (SQLite in-memory)
SQLALCHEMY_TEST_DATABASE_URL = "sqlite://"

engine = create_engine(
    SQLALCHEMY_TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def override_get_db():
    """Test-DB Session"""
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


# Dependency Override
app.dependency_overrides[get_db] = override_get_db


ADMIN = {"name": "Admin", "role": "admin"}
DRIVER = {"name": "Gyuri", "role": "driver"}


@pytest.fixture(scope="function")
def db():
    """Datenbankverbindung für Tests"""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    yield db
    db.close()
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def act_as():
    """Setzt den angemeldeten Benutzer für folgende Requests"""
    def _act_as(user: dict):
        async def override_auth():
            return dict(user)
        app.dependency_overrides[get_current_user] = override_auth
    return _act_as


@pytest.fixture(scope="function")
def client(act_as):
    """Test Client mit frischer Datenbank, angemeldet als Admin"""
    act_as(ADMIN)

    Base.metadata.create_all(bind=engine)
    yield TestClient(app)
    Base.metadata.drop_all(bind=engine)

    # Cleanup overrides
    app.dependency_overrides.pop(get_current_user, None)


@pytest.fixture
def sample_partner(client):
    """Erstellt einen Test-Partner"""
    response = client.post("/api/v1/partners", json={
        "name": "Bio Hofladen Huber",
        "contact": "089-1234567",
    })
    return response.json()


@pytest.fixture
def sample_partners(client):
    """Erstellt mehrere Test-Partner"""
    partners = []
    for name in ["Markthalle Süd", "Gemüse Kaiser", "Restaurant Schumann"]:
        response = client.post("/api/v1/partners", json={"name": name})
        partners.append(response.json())
    return partners


@pytest.fixture
def sample_crate_type(client):
    """Erstellt einen Test-Ladentyp"""
    response = client.post("/api/v1/crate-types", json={"id": "m10", "label": "M10 - kleine Lade"})
    return response.json()


@pytest.fixture
def sample_movement(client, sample_partner, sample_crate_type):
    """Erstellt eine Test-Bewegung"""
    response = client.post("/api/v1/movements", json={
        "partner_id": sample_partner["id"],
        "crate_type_id": sample_crate_type["id"],
        "direction": "out",
        "qty": 20,
        "date": "2024-03-15",
        "note": "Beleg 4711",
    })
    return response.json()
