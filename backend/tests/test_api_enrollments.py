"""
Tests d'intégration API pour les inscriptions élève ↔ matière.
"""

from unittest.mock import MagicMock, patch

from app.exceptions import ConflictError, NotFoundError
from app.schemas.enrollment import EnrolledSubject


def test_list_student_subjects(client):
    with patch("app.routers.enrollments.enrollment_service.list_student_subjects") as mock:
        mock.return_value = [
            EnrolledSubject(id=2, nombre="Física", creditos=4, horas=60, profesor_nombre=None, asignacion_id=11),
        ]
        response = client.get("/estudiantes/1/materias")

    assert response.status_code == 200
    assert response.json()[0]["asignacion_id"] == 11


def test_list_student_subjects_vide(client):
    with patch("app.routers.enrollments.enrollment_service.list_student_subjects") as mock:
        mock.return_value = []
        response = client.get("/estudiantes/1/materias")

    assert response.status_code == 200
    assert response.json() == []


def test_assign_subject_succes(client):
    with patch("app.routers.enrollments.enrollment_service.assign_subject") as mock:
        mock.return_value = MagicMock(id=31)
        response = client.post("/estudiantes/1/materias", json={"materia_id": 2})

    assert response.status_code == 201
    assert response.json() == {"ok": True, "id": 31}


def test_assign_subject_materia_manquante(client):
    response = client.post("/estudiantes/1/materias", json={})
    assert response.status_code == 400
    assert "materia_id" in response.json()["fields"]


def test_assign_subject_doublon(client):
    with patch("app.routers.enrollments.enrollment_service.assign_subject") as mock:
        mock.side_effect = ConflictError("La matière est déjà assignée à cet élève.")
        response = client.post("/estudiantes/1/materias", json={"materia_id": 2})

    assert response.status_code == 409


def test_assign_subject_eleve_inexistant(client):
    with patch("app.routers.enrollments.enrollment_service.assign_subject") as mock:
        mock.side_effect = NotFoundError("Élève ou matière introuvable.")
        response = client.post("/estudiantes/99/materias", json={"materia_id": 2})

    assert response.status_code == 404


def test_unassign_subject_succes(client):
    with patch("app.routers.enrollments.enrollment_service.unassign_subject") as mock:
        response = client.delete("/estudiantes/1/materias/2")

    assert response.status_code == 200
    assert response.json() == {"ok": True}
    mock.assert_called_once()
    assert mock.call_args[0][1:] == (1, 2)


def test_unassign_subject_introuvable(client):
    with patch("app.routers.enrollments.enrollment_service.unassign_subject") as mock:
        mock.side_effect = NotFoundError("Inscription introuvable.")
        response = client.delete("/estudiantes/1/materias/2")

    assert response.status_code == 404
