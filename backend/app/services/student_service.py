"""
Service métier pour les élèves : listage, création, mise à jour partielle,
suppression bloquée tant que l'élève a des matières.
"""

import logging

from sqlalchemy import or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.exceptions import ConflictError, InvalidDataError, NotFoundError
from app.models.enrollment import Enrollment
from app.models.student import Student
from app.schemas.student import REQUIRED_STUDENT_FIELDS, StudentCreate, StudentUpdate
from app.services.integrity import delete_guarded, ensure_no_dependents

logger = logging.getLogger(__name__)

DUPLICATE_MESSAGE = "L'élève existe déjà (email ou matricule)."


def list_students(db: Session) -> list[Student]:
    """Retourne tous les élèves triés par identifiant."""
    return db.execute(select(Student).order_by(Student.id)).scalars().all()


def list_students_brief(db: Session):
    """Retourne id, nom, matricule et email de chaque élève, triés par nom."""
    return db.execute(
        select(Student.id, Student.nombre_completo, Student.matricula, Student.email)
        .order_by(Student.nombre_completo)
    ).all()


def get_student(db: Session, student_id: int) -> Student:
    student = db.get(Student, student_id)
    if student is None:
        raise NotFoundError("Élève introuvable.")
    return student


def create_student(db: Session, data: StudentCreate) -> Student:
    """
    Crée un élève.
    Lève ConflictError si l'email ou le matricule est déjà pris.
    """
    _ensure_unique(db, email=data.email, matricula=data.matricula)

    student = Student(**data.model_dump())
    db.add(student)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise ConflictError(DUPLICATE_MESSAGE)
    db.refresh(student)

    logger.info("Élève %s créé (matricule %s)", student.id, student.matricula)
    return student


def update_student(db: Session, student_id: int, data: StudentUpdate) -> Student:
    """Met à jour les champs fournis. Un champ à null est effacé."""
    changes = data.model_dump(exclude_unset=True)
    if not changes:
        raise InvalidDataError("Aucune modification fournie.")

    student = get_student(db, student_id)

    cleared = [f for f in REQUIRED_STUDENT_FIELDS if f in changes and changes[f] is None]
    if cleared:
        raise InvalidDataError(f"Champs obligatoires, impossible de les vider : {', '.join(cleared)}.")

    if "email" in changes or "matricula" in changes:
        _ensure_unique(
            db,
            email=changes.get("email"),
            matricula=changes.get("matricula"),
            exclude_id=student_id,
        )

    for field, value in changes.items():
        setattr(student, field, value)

    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise ConflictError(DUPLICATE_MESSAGE)
    db.refresh(student)
    return student


def delete_student(db: Session, student_id: int) -> int:
    """Supprime un élève sans inscription. Retourne l'identifiant supprimé."""
    student = get_student(db, student_id)
    name = student.nombre_completo or "L'élève"
    guard = dict(
        code="STUDENT_HAS_SUBJECTS",
        message="Impossible de supprimer : l'élève a des matières assignées.",
        entity=name,
        dependent="materias",
    )

    ensure_no_dependents(db, Enrollment, Enrollment.estudiante_id, student_id, **guard)
    delete_guarded(db, student, model=Enrollment, column=Enrollment.estudiante_id, **guard)

    logger.info("Élève %s supprimé", student_id)
    return student_id


def _ensure_unique(db: Session, email=None, matricula=None, exclude_id=None) -> None:
    conditions = []
    if email is not None:
        conditions.append(Student.email == email)
    if matricula is not None:
        conditions.append(Student.matricula == matricula)
    if not conditions:
        return

    query = select(Student.id).where(or_(*conditions))
    if exclude_id is not None:
        query = query.where(Student.id != exclude_id)

    if db.execute(query.limit(1)).scalar() is not None:
        raise ConflictError(DUPLICATE_MESSAGE)
