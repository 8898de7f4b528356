"""
Tests d'intégration API pour l'authentification.
POST /register, POST /login et protection des routes par jeton Bearer.
"""

from datetime import timedelta
from unittest.mock import patch

from app.config import Settings, settings
from app.exceptions import AuthError, ConflictError, NotFoundError
from app.schemas.auth import TokenResponse
from app.security import create_access_token


# ============================================================
# POST /register
# ============================================================

def test_register_succes(anon_client):
    with patch("app.routers.auth.auth_service.register") as mock:
        mock.return_value = TokenResponse(token="jeton")
        response = anon_client.post("/register", json={"email": "a@x.com", "password": "secret"})

    assert response.status_code == 201
    assert response.json() == {"token": "jeton", "token_type": "bearer"}


def test_register_email_deja_pris(anon_client):
    with patch("app.routers.auth.auth_service.register") as mock:
        mock.side_effect = ConflictError("Cet utilisateur est déjà enregistré.")
        response = anon_client.post("/register", json={"email": "a@x.com", "password": "secret"})

    assert response.status_code == 409


def test_register_mot_de_passe_vide(anon_client):
    response = anon_client.post("/register", json={"email": "a@x.com", "password": ""})
    assert response.status_code == 400
    assert "password" in response.json()["fields"]


def test_register_email_manquant(anon_client):
    response = anon_client.post("/register", json={"password": "secret"})
    assert response.status_code == 400
    assert "email" in response.json()["fields"]


# ============================================================
# POST /login
# ============================================================

def test_login_succes(anon_client):
    with patch("app.routers.auth.auth_service.authenticate") as mock:
        mock.return_value = TokenResponse(token="jeton")
        response = anon_client.post("/login", json={"email": "a@x.com", "password": "secret"})

    assert response.status_code == 200
    assert response.json()["token"] == "jeton"


def test_login_email_inconnu(anon_client):
    with patch("app.routers.auth.auth_service.authenticate") as mock:
        mock.side_effect = NotFoundError("Utilisateur introuvable.")
        response = anon_client.post("/login", json={"email": "x@x.com", "password": "secret"})

    assert response.status_code == 404


def test_login_mauvais_mot_de_passe(anon_client):
    with patch("app.routers.auth.auth_service.authenticate") as mock:
        mock.side_effect = AuthError("Mot de passe incorrect.")
        response = anon_client.post("/login", json={"email": "a@x.com", "password": "wrong"})

    assert response.status_code == 401


# ============================================================
# Protection des routes
# ============================================================

def test_route_protegee_jeton_malforme(anon_client):
    response = anon_client.get("/materias", headers={"Authorization": "Bearer pas.un.jeton"})
    assert response.status_code == 401


def test_route_protegee_schema_incorrect(anon_client):
    response = anon_client.get("/materias", headers={"Authorization": "Basic abc"})
    assert response.status_code == 401


def test_route_protegee_jeton_expire(anon_client):
    token = create_access_token({"id": 1, "email": "a@x.com"}, settings, expires_delta=timedelta(seconds=-5))
    response = anon_client.get("/profesores", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 401


def test_route_protegee_mauvaise_signature(anon_client):
    other = Settings(SECRET_KEY="une-autre-cle")
    token = create_access_token({"id": 1, "email": "a@x.com"}, other)
    response = anon_client.get("/profesores", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 401


def test_health_publique(anon_client):
    response = anon_client.get("/api/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"
