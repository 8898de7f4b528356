"""
Service métier pour les professeurs.
Un professeur qui a encore des matières ne peut pas être supprimé.
"""

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.exceptions import ConflictError, InvalidDataError, NotFoundError
from app.models.professor import Professor
from app.models.subject import Subject
from app.schemas.professor import ProfessorCreate, ProfessorUpdate
from app.services.integrity import delete_guarded, ensure_no_dependents

logger = logging.getLogger(__name__)

DUPLICATE_MESSAGE = "Le professeur existe déjà (cédula)."


def list_professors(db: Session) -> list[Professor]:
    return db.execute(select(Professor).order_by(Professor.id)).scalars().all()


def get_professor(db: Session, professor_id: int) -> Professor:
    professor = db.get(Professor, professor_id)
    if professor is None:
        raise NotFoundError("Professeur introuvable.")
    return professor


def create_professor(db: Session, data: ProfessorCreate) -> Professor:
    """Crée un professeur. Lève ConflictError si la cédula est déjà enregistrée."""
    _ensure_unique_cedula(db, data.cedula)

    professor = Professor(nombres=data.nombres, cedula=data.cedula)
    db.add(professor)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise ConflictError(DUPLICATE_MESSAGE)
    db.refresh(professor)

    logger.info("Professeur %s créé", professor.id)
    return professor


def update_professor(db: Session, professor_id: int, data: ProfessorUpdate) -> Professor:
    changes = data.model_dump(exclude_unset=True)
    if not changes:
        raise InvalidDataError("Aucune modification fournie.")

    professor = get_professor(db, professor_id)

    cleared = [f for f in ("nombres", "cedula") if f in changes and changes[f] is None]
    if cleared:
        raise InvalidDataError(f"Champs obligatoires, impossible de les vider : {', '.join(cleared)}.")

    if "cedula" in changes:
        _ensure_unique_cedula(db, changes["cedula"], exclude_id=professor_id)

    for field, value in changes.items():
        setattr(professor, field, value)

    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise ConflictError(DUPLICATE_MESSAGE)
    db.refresh(professor)
    return professor


def delete_professor(db: Session, professor_id: int) -> int:
    """
    Supprime un professeur.
    Bloqué tant qu'une matière le référence ; la clé étrangère ON DELETE SET NULL
    ne sert qu'aux matières créées entre la vérification et la suppression.
    """
    professor = get_professor(db, professor_id)
    guard = dict(
        code="PROFESOR_HAS_SUBJECTS",
        message="Impossible de supprimer : le professeur a des matières assignées.",
        entity=professor.nombres,
        dependent="materias",
    )

    ensure_no_dependents(db, Subject, Subject.profesor_id, professor_id, **guard)
    delete_guarded(db, professor, model=Subject, column=Subject.profesor_id, **guard)

    logger.info("Professeur %s supprimé", professor_id)
    return professor_id


def _ensure_unique_cedula(db: Session, cedula: str, exclude_id=None) -> None:
    query = select(Professor.id).where(Professor.cedula == cedula)
    if exclude_id is not None:
        query = query.where(Professor.id != exclude_id)
    if db.execute(query.limit(1)).scalar() is not None:
        raise ConflictError(DUPLICATE_MESSAGE)
