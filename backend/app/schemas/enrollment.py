"""
Schémas Pydantic pour les inscriptions élève ↔ matière.
"""

from typing import Optional

from pydantic import BaseModel, PositiveInt


class EnrollmentCreate(BaseModel):
    """Corps de requête pour inscrire un élève à une matière."""
    materia_id: PositiveInt


class EnrollmentCreated(BaseModel):
    ok: bool = True
    id: int


class EnrolledSubject(BaseModel):
    """Matière suivie par un élève, avec l'identifiant de l'inscription."""
    id: int
    nombre: str
    creditos: int
    horas: int
    profesor_nombre: Optional[str] = None
    asignacion_id: int


class UnassignResponse(BaseModel):
    ok: bool = True
