"""
Router pour les élèves.
Listage (GET /), création (POST /), mise à jour partielle (PATCH /users/{id}),
suppression (DELETE /users/{id}), listage allégé (GET /estudiantes).
"""

from typing import List

from fastapi import APIRouter, Depends, Path
from sqlalchemy.orm import Session

from app.database import get_db
from app.schemas.common import DeleteResponse
from app.schemas.student import StudentBrief, StudentCreate, StudentResponse, StudentUpdate
from app.security import get_current_user
from app.services import student_service

router = APIRouter(tags=["Élèves"], dependencies=[Depends(get_current_user)])


@router.get("/", response_model=List[StudentResponse], summary="Lister tous les élèves")
def list_students(db: Session = Depends(get_db)):
    """Retourne tous les élèves triés par identifiant."""
    return student_service.list_students(db)


@router.post("/", response_model=StudentResponse, status_code=201, summary="Créer un élève")
def create_student(data: StudentCreate, db: Session = Depends(get_db)):
    """Crée un élève. 409 si l'email ou le matricule existe déjà."""
    return student_service.create_student(db, data)


@router.patch("/users/{student_id}", response_model=StudentResponse, summary="Modifier un élève")
def update_student(data: StudentUpdate, student_id: int = Path(gt=0), db: Session = Depends(get_db)):
    """Met à jour les champs fournis d'un élève. Une chaîne vide efface le champ."""
    return student_service.update_student(db, student_id, data)


@router.delete("/users/{student_id}", response_model=DeleteResponse, summary="Supprimer un élève")
def delete_student(student_id: int = Path(gt=0), db: Session = Depends(get_db)):
    """Supprime un élève. Bloqué (409 STUDENT_HAS_SUBJECTS) s'il a des matières assignées."""
    deleted_id = student_service.delete_student(db, student_id)
    return DeleteResponse(id=deleted_id)


@router.get("/estudiantes", response_model=List[StudentBrief], summary="Listage allégé des élèves")
def list_students_brief(db: Session = Depends(get_db)):
    """Retourne id, nom, matricule et email, triés par nom."""
    return student_service.list_students_brief(db)


@router.get("/estudiantes/{student_id}", response_model=StudentResponse, summary="Détail d'un élève")
def get_student(student_id: int = Path(gt=0), db: Session = Depends(get_db)):
    return student_service.get_student(db, student_id)
