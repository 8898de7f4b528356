"""
Configuration partagée pour tous les tests.
Override la dépendance get_db pour éviter toute connexion réelle à PostgreSQL.
"""

import os

# Pas de création de tables au démarrage de TestClient ; doit précéder l'import de app
os.environ["DB_CREATE_TABLES"] = "false"
os.environ.setdefault("BCRYPT_ROUNDS", "4")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from unittest.mock import MagicMock

import app.models  # noqa: F401
from app.config import settings
from app.database import Base, build_engine, get_db
from app.main import app
from app.security import create_access_token


@pytest.fixture
def auth_headers():
    """En-tête Authorization avec un jeton valide."""
    token = create_access_token({"id": 1, "email": "admin@school.ec"}, settings)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def mock_db():
    return MagicMock()


@pytest.fixture
def client(mock_db, auth_headers):
    """Client HTTP de test authentifié, avec la BDD mockée."""
    app.dependency_overrides[get_db] = lambda: mock_db
    with TestClient(app) as c:
        c.headers.update(auth_headers)
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def anon_client(mock_db):
    """Client HTTP de test sans jeton."""
    app.dependency_overrides[get_db] = lambda: mock_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def sqlite_db():
    """Session sur une base SQLite en mémoire, clés étrangères actives."""
    engine = build_engine("sqlite://")
    Base.metadata.create_all(bind=engine)
    Session = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    db = Session()
    try:
        yield db
    finally:
        db.close()
        engine.dispose()


@pytest.fixture
def sqlite_client(sqlite_db, auth_headers):
    """Client HTTP authentifié branché sur la base SQLite de test."""
    app.dependency_overrides[get_db] = lambda: sqlite_db
    with TestClient(app) as c:
        c.headers.update(auth_headers)
        yield c
    app.dependency_overrides.clear()
