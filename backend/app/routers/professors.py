"""
Router pour les professeurs.
"""

from typing import List

from fastapi import APIRouter, Depends, Path
from sqlalchemy.orm import Session

from app.database import get_db
from app.schemas.common import DeleteResponse
from app.schemas.professor import ProfessorCreate, ProfessorResponse, ProfessorUpdate
from app.security import get_current_user
from app.services import professor_service

router = APIRouter(prefix="/profesores", tags=["Professeurs"], dependencies=[Depends(get_current_user)])


@router.get("", response_model=List[ProfessorResponse], summary="Lister les professeurs")
def list_professors(db: Session = Depends(get_db)):
    return professor_service.list_professors(db)


@router.post("", response_model=ProfessorResponse, status_code=201, summary="Créer un professeur")
def create_professor(data: ProfessorCreate, db: Session = Depends(get_db)):
    """Crée un professeur. La cédula doit être valide et unique."""
    return professor_service.create_professor(db, data)


@router.get("/{professor_id}", response_model=ProfessorResponse, summary="Détail d'un professeur")
def get_professor(professor_id: int = Path(gt=0), db: Session = Depends(get_db)):
    return professor_service.get_professor(db, professor_id)


@router.patch("/{professor_id}", response_model=ProfessorResponse, summary="Modifier un professeur")
def update_professor(data: ProfessorUpdate, professor_id: int = Path(gt=0), db: Session = Depends(get_db)):
    return professor_service.update_professor(db, professor_id, data)


@router.delete("/{professor_id}", response_model=DeleteResponse, summary="Supprimer un professeur")
def delete_professor(professor_id: int = Path(gt=0), db: Session = Depends(get_db)):
    """Supprime un professeur. Bloqué (409 PROFESOR_HAS_SUBJECTS) s'il a des matières."""
    deleted_id = professor_service.delete_professor(db, professor_id)
    return DeleteResponse(id=deleted_id)
