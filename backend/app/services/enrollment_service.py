"""
Service métier pour les inscriptions élève ↔ matière.
Une même paire (élève, matière) ne peut exister qu'une fois ; la contrainte
d'unicité en base tranche en cas de requêtes concurrentes.
"""

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.exceptions import ConflictError, NotFoundError
from app.models.enrollment import Enrollment
from app.models.professor import Professor
from app.models.student import Student
from app.models.subject import Subject
from app.schemas.enrollment import EnrolledSubject, EnrollmentCreate

logger = logging.getLogger(__name__)

DUPLICATE_MESSAGE = "La matière est déjà assignée à cet élève."
MISSING_REFERENCE_MESSAGE = "L'élève ou la matière n'existe plus."


def list_student_subjects(db: Session, student_id: int) -> list[EnrolledSubject]:
    """Matières d'un élève (professeur résolu), triées par nom de matière."""
    if db.get(Student, student_id) is None:
        raise NotFoundError("Élève introuvable.")

    rows = db.execute(
        select(
            Subject.id,
            Subject.nombre,
            Subject.creditos,
            Subject.horas,
            Professor.nombres.label("profesor_nombre"),
            Enrollment.id.label("asignacion_id"),
        )
        .select_from(Enrollment)
        .join(Subject, Enrollment.materia_id == Subject.id)
        .outerjoin(Professor, Subject.profesor_id == Professor.id)
        .where(Enrollment.estudiante_id == student_id)
        .order_by(Subject.nombre)
    ).all()

    return [EnrolledSubject(**row._mapping) for row in rows]


def assign_subject(db: Session, student_id: int, data: EnrollmentCreate) -> Enrollment:
    """
    Inscrit un élève à une matière.

    Validations :
    1. L'élève et la matière existent
    2. L'élève n'est pas déjà inscrit à cette matière
    """
    if db.get(Student, student_id) is None or db.get(Subject, data.materia_id) is None:
        raise NotFoundError("Élève ou matière introuvable.")

    already = db.execute(
        select(Enrollment.id)
        .where(
            Enrollment.estudiante_id == student_id,
            Enrollment.materia_id == data.materia_id,
        )
    ).scalar()
    if already is not None:
        raise ConflictError(DUPLICATE_MESSAGE)

    enrollment = Enrollment(estudiante_id=student_id, materia_id=data.materia_id)
    db.add(enrollment)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        # Élève ou matière supprimé entre-temps : la clé étrangère a rejeté l'insertion
        if db.get(Student, student_id) is None or db.get(Subject, data.materia_id) is None:
            raise ConflictError(MISSING_REFERENCE_MESSAGE)
        raise ConflictError(DUPLICATE_MESSAGE)
    db.refresh(enrollment)

    logger.info("Matière %s assignée à l'élève %s", data.materia_id, student_id)
    return enrollment


def unassign_subject(db: Session, student_id: int, subject_id: int) -> None:
    """Retire une matière d'un élève. Lève NotFoundError si l'inscription n'existe pas."""
    enrollment = db.execute(
        select(Enrollment)
        .where(
            Enrollment.estudiante_id == student_id,
            Enrollment.materia_id == subject_id,
        )
    ).scalar()
    if enrollment is None:
        raise NotFoundError("Inscription introuvable.")

    db.delete(enrollment)
    db.commit()
    logger.info("Matière %s retirée de l'élève %s", subject_id, student_id)
