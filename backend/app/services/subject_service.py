"""
Service métier pour les matières.
Les réponses exposent le nom du professeur via la relation Subject.profesor.
"""

import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.exceptions import ConflictError, InvalidDataError, NotFoundError
from app.models.enrollment import Enrollment
from app.models.professor import Professor
from app.models.subject import Subject
from app.schemas.subject import SubjectCreate, SubjectUpdate
from app.services.integrity import delete_guarded, ensure_no_dependents

logger = logging.getLogger(__name__)


def list_subjects(db: Session) -> list[Subject]:
    return db.execute(select(Subject).order_by(Subject.id)).scalars().all()


def get_subject(db: Session, subject_id: int) -> Subject:
    subject = db.get(Subject, subject_id)
    if subject is None:
        raise NotFoundError("Matière introuvable.")
    return subject


def create_subject(db: Session, data: SubjectCreate) -> Subject:
    """Crée une matière, avec ou sans professeur."""
    _ensure_professor_exists(db, data.profesor_id)

    subject = Subject(
        nombre=data.nombre,
        creditos=data.creditos,
        horas=data.horas,
        profesor_id=data.profesor_id,
    )
    db.add(subject)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise ConflictError("Le professeur indiqué n'existe plus.")
    db.refresh(subject)

    logger.info("Matière %s créée (professeur %s)", subject.id, subject.profesor_id)
    return subject


def update_subject(db: Session, subject_id: int, data: SubjectUpdate) -> Subject:
    """Met à jour les champs fournis ; profesor_id à null détache la matière."""
    changes = data.model_dump(exclude_unset=True)
    if not changes:
        raise InvalidDataError("Aucune modification fournie.")

    subject = get_subject(db, subject_id)

    cleared = [f for f in ("nombre", "creditos", "horas") if f in changes and changes[f] is None]
    if cleared:
        raise InvalidDataError(f"Champs obligatoires, impossible de les vider : {', '.join(cleared)}.")

    if "profesor_id" in changes:
        _ensure_professor_exists(db, changes["profesor_id"])

    for field, value in changes.items():
        setattr(subject, field, value)

    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise ConflictError("Le professeur indiqué n'existe plus.")
    db.refresh(subject)
    return subject


def delete_subject(db: Session, subject_id: int) -> int:
    """Supprime une matière. Bloqué tant que des élèves y sont inscrits."""
    subject = get_subject(db, subject_id)

    ensure_no_dependents(
        db, Enrollment, Enrollment.materia_id, subject_id,
        code="MATERIA_HAS_ASSIGNMENTS",
        message="La matière a des élèves inscrits et ne peut pas être supprimée.",
        entity=subject.nombre,
        dependent="estudiantes",
    )
    delete_guarded(
        db, subject,
        model=Enrollment,
        column=Enrollment.materia_id,
        code="MATERIA_REFERENCED",
        message="Impossible de supprimer : la matière est référencée.",
        entity=subject.nombre,
        dependent="estudiantes",
    )

    logger.info("Matière %s supprimée", subject_id)
    return subject_id


def _ensure_professor_exists(db: Session, professor_id: Optional[int]) -> None:
    if professor_id is not None and db.get(Professor, professor_id) is None:
        raise NotFoundError("Professeur introuvable.")
