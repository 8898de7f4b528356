"""
Router pour les matières.
"""

from typing import List

from fastapi import APIRouter, Depends, Path
from sqlalchemy.orm import Session

from app.database import get_db
from app.schemas.common import DeleteResponse
from app.schemas.subject import SubjectCreate, SubjectResponse, SubjectUpdate
from app.security import get_current_user
from app.services import subject_service

router = APIRouter(prefix="/materias", tags=["Matières"], dependencies=[Depends(get_current_user)])


@router.get("", response_model=List[SubjectResponse], summary="Lister les matières")
def list_subjects(db: Session = Depends(get_db)):
    """Retourne toutes les matières avec le nom de leur professeur."""
    return subject_service.list_subjects(db)


@router.post("", response_model=SubjectResponse, status_code=201, summary="Créer une matière")
def create_subject(data: SubjectCreate, db: Session = Depends(get_db)):
    return subject_service.create_subject(db, data)


@router.get("/{subject_id}", response_model=SubjectResponse, summary="Détail d'une matière")
def get_subject(subject_id: int = Path(gt=0), db: Session = Depends(get_db)):
    return subject_service.get_subject(db, subject_id)


@router.patch("/{subject_id}", response_model=SubjectResponse, summary="Modifier une matière")
def update_subject(data: SubjectUpdate, subject_id: int = Path(gt=0), db: Session = Depends(get_db)):
    """Met à jour les champs fournis. profesor_id à null (ou 0) détache la matière."""
    return subject_service.update_subject(db, subject_id, data)


@router.delete("/{subject_id}", response_model=DeleteResponse, summary="Supprimer une matière")
def delete_subject(subject_id: int = Path(gt=0), db: Session = Depends(get_db)):
    """Supprime une matière. Bloqué (409 MATERIA_HAS_ASSIGNMENTS) si des élèves y sont inscrits."""
    deleted_id = subject_service.delete_subject(db, subject_id)
    return DeleteResponse(id=deleted_id)
