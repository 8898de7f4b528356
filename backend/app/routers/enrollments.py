"""
Router pour les inscriptions élève ↔ matière.
"""

from typing import List

from fastapi import APIRouter, Depends, Path
from sqlalchemy.orm import Session

from app.database import get_db
from app.schemas.enrollment import EnrolledSubject, EnrollmentCreate, EnrollmentCreated, UnassignResponse
from app.security import get_current_user
from app.services import enrollment_service

router = APIRouter(prefix="/estudiantes", tags=["Inscriptions"], dependencies=[Depends(get_current_user)])


@router.get("/{student_id}/materias", response_model=List[EnrolledSubject],
            summary="Matières d'un élève")
def list_student_subjects(student_id: int = Path(gt=0), db: Session = Depends(get_db)):
    """Retourne les matières de l'élève, avec le nom du professeur, triées par nom."""
    return enrollment_service.list_student_subjects(db, student_id)


@router.post("/{student_id}/materias", response_model=EnrollmentCreated, status_code=201,
             summary="Assigner une matière à un élève")
def assign_subject(data: EnrollmentCreate, student_id: int = Path(gt=0), db: Session = Depends(get_db)):
    """
    Inscrit l'élève à une matière.

    Contraintes :
    - L'élève et la matière doivent exister (404)
    - Pas de double inscription (409)
    """
    enrollment = enrollment_service.assign_subject(db, student_id, data)
    return EnrollmentCreated(id=enrollment.id)


@router.delete("/{student_id}/materias/{materia_id}", response_model=UnassignResponse,
               summary="Retirer une matière à un élève")
def unassign_subject(
    student_id: int = Path(gt=0),
    materia_id: int = Path(gt=0),
    db: Session = Depends(get_db),
):
    enrollment_service.unassign_subject(db, student_id, materia_id)
    return UnassignResponse()
