"""
Tests d'intégration API pour les professeurs.
"""

from datetime import datetime
from unittest.mock import patch

from app.exceptions import ConflictError, DependencyConflictError, NotFoundError
from app.schemas.professor import ProfessorResponse


def make_professor(**kwargs) -> ProfessorResponse:
    return ProfessorResponse(
        id=kwargs.get("id", 1),
        nombres=kwargs.get("nombres", "María López"),
        cedula=kwargs.get("cedula", "1710034065"),
        created_at=datetime.now(),
    )


def test_list_professors(client):
    with patch("app.routers.professors.professor_service.list_professors") as mock:
        mock.return_value = [make_professor(id=1), make_professor(id=2, cedula="0102030400")]
        response = client.get("/profesores")

    assert response.status_code == 200
    assert len(response.json()) == 2


def test_create_professor_succes(client):
    with patch("app.routers.professors.professor_service.create_professor") as mock:
        mock.return_value = make_professor()
        response = client.post("/profesores", json={"nombres": "María López", "cedula": "1710034065"})

    assert response.status_code == 201
    assert response.json()["cedula"] == "1710034065"


def test_create_professor_cedula_invalide(client):
    """Chiffre de contrôle faux → 400."""
    response = client.post("/profesores", json={"nombres": "María López", "cedula": "1710034060"})
    assert response.status_code == 400
    assert "cedula" in response.json()["fields"]


def test_create_professor_nom_minuscule(client):
    response = client.post("/profesores", json={"nombres": "maría", "cedula": "1710034065"})
    assert response.status_code == 400
    assert "nombres" in response.json()["fields"]


def test_create_professor_champs_manquants(client):
    response = client.post("/profesores", json={})
    assert response.status_code == 400
    assert set(response.json()["fields"]) == {"nombres", "cedula"}


def test_create_professor_cedula_dupliquee(client):
    with patch("app.routers.professors.professor_service.create_professor") as mock:
        mock.side_effect = ConflictError("Le professeur existe déjà (cédula).")
        response = client.post("/profesores", json={"nombres": "María López", "cedula": "1710034065"})

    assert response.status_code == 409


def test_get_professor_introuvable(client):
    with patch("app.routers.professors.professor_service.get_professor") as mock:
        mock.side_effect = NotFoundError("Professeur introuvable.")
        response = client.get("/profesores/42")

    assert response.status_code == 404


def test_update_professor_succes(client):
    with patch("app.routers.professors.professor_service.update_professor") as mock:
        mock.return_value = make_professor(nombres="María José López")
        response = client.patch("/profesores/1", json={"nombres": "María José López"})

    assert response.status_code == 200
    assert response.json()["nombres"] == "María José López"


def test_update_professor_sans_champ(client):
    response = client.patch("/profesores/1", json={})
    assert response.status_code == 400


def test_delete_professor_avec_matieres_bloque(client):
    with patch("app.routers.professors.professor_service.delete_professor") as mock:
        mock.side_effect = DependencyConflictError(
            "Impossible de supprimer : le professeur a des matières assignées.",
            code="PROFESOR_HAS_SUBJECTS",
            count=3,
            entity="María López",
            dependent="materias",
        )
        response = client.delete("/profesores/1")

    assert response.status_code == 409
    assert response.json()["code"] == "PROFESOR_HAS_SUBJECTS"
    assert response.json()["count"] == 3


def test_delete_professor_succes(client):
    with patch("app.routers.professors.professor_service.delete_professor") as mock:
        mock.return_value = 1
        response = client.delete("/profesores/1")

    assert response.status_code == 200
    assert response.json() == {"ok": True, "id": 1}
