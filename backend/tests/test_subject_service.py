"""
Tests unitaires pour le service des matières.
"""

from unittest.mock import MagicMock

import pytest

from app.exceptions import DependencyConflictError, InvalidDataError, NotFoundError
from app.schemas.subject import SubjectCreate, SubjectUpdate
from app.services.subject_service import create_subject, delete_subject, update_subject


def make_db_mock(get_value=None, scalar_value=None):
    db = MagicMock()
    db.get.return_value = get_value
    db.execute.return_value.scalar.return_value = scalar_value
    return db


def test_create_subject_sans_professeur():
    db = make_db_mock()
    subject = create_subject(db, SubjectCreate(nombre="Matemáticas", creditos=3, horas=40))
    assert subject.profesor_id is None
    db.get.assert_not_called()
    db.commit.assert_called_once()


def test_create_subject_professeur_inexistant():
    db = make_db_mock(get_value=None)
    with pytest.raises(NotFoundError, match="Professeur"):
        create_subject(db, SubjectCreate(nombre="Matemáticas", creditos=3, horas=40, profesor_id=7))
    db.add.assert_not_called()


def test_update_subject_detache_professeur():
    s = MagicMock()
    s.profesor_id = 2
    db = make_db_mock(get_value=s)
    result = update_subject(db, 1, SubjectUpdate(profesor_id=0))
    assert result.profesor_id is None
    db.commit.assert_called_once()


def test_update_subject_vide_nom_refuse():
    db = make_db_mock(get_value=MagicMock())
    with pytest.raises(InvalidDataError):
        update_subject(db, 1, SubjectUpdate(nombre=""))


def test_update_subject_sans_champ():
    db = make_db_mock()
    with pytest.raises(InvalidDataError):
        update_subject(db, 1, SubjectUpdate())


def test_delete_subject_avec_inscriptions_bloque():
    s = MagicMock()
    s.nombre = "Matemáticas"
    db = make_db_mock(get_value=s, scalar_value=5)
    with pytest.raises(DependencyConflictError) as exc_info:
        delete_subject(db, 1)
    assert exc_info.value.code == "MATERIA_HAS_ASSIGNMENTS"
    assert exc_info.value.count == 5
    assert exc_info.value.entity == "Matemáticas"
    db.delete.assert_not_called()


def test_delete_subject_introuvable():
    db = make_db_mock(get_value=None)
    with pytest.raises(NotFoundError):
        delete_subject(db, 1)
