"""
Schémas Pydantic pour les élèves.
"""

from datetime import date, datetime
from decimal import Decimal
from typing import Literal, Optional

from pydantic import BaseModel, EmailStr, Field, field_validator, model_validator

from app.schemas.common import blank_fields_to_none, drop_blank_fields, strip_required

StudentStatus = Literal["activo", "egresado", "suspendido"]

# Colonnes NOT NULL : une mise à jour ne peut pas les effacer
REQUIRED_STUDENT_FIELDS = (
    "nombre_completo",
    "fecha_nacimiento",
    "email",
    "matricula",
    "carrera",
    "anio_semestre",
    "fecha_ingreso",
    "estado",
)


class StudentCreate(BaseModel):
    """Schéma de création d'un élève (POST /)."""
    nombre_completo: str = Field(max_length=100)
    fecha_nacimiento: date
    email: EmailStr
    telefono: Optional[str] = Field(default=None, max_length=20)
    matricula: str = Field(max_length=30)
    carrera: str = Field(max_length=100)
    anio_semestre: str = Field(max_length=20)
    promedio: Optional[Decimal] = Field(default=None, ge=0, le=20, max_digits=4, decimal_places=2)
    estado: StudentStatus = "activo"
    fecha_ingreso: date
    fecha_egreso: Optional[date] = None
    direccion: Optional[str] = Field(default=None, max_length=255)

    @model_validator(mode="before")
    @classmethod
    def drop_blank(cls, data):
        return drop_blank_fields(data)

    @field_validator("nombre_completo", "matricula", "carrera", "anio_semestre")
    @classmethod
    def not_empty(cls, v: str) -> str:
        return strip_required(v)

    @model_validator(mode="after")
    def graduation_after_enrollment(self):
        if self.fecha_egreso is not None and self.fecha_egreso < self.fecha_ingreso:
            raise ValueError("La date de sortie précède la date d'entrée.")
        return self


class StudentUpdate(BaseModel):
    """
    Schéma de mise à jour partielle (PATCH /users/{id}).
    Seuls les champs présents dans le corps sont modifiés ; "" vaut null.
    """
    nombre_completo: Optional[str] = Field(default=None, max_length=100)
    fecha_nacimiento: Optional[date] = None
    email: Optional[EmailStr] = None
    telefono: Optional[str] = Field(default=None, max_length=20)
    matricula: Optional[str] = Field(default=None, max_length=30)
    carrera: Optional[str] = Field(default=None, max_length=100)
    anio_semestre: Optional[str] = Field(default=None, max_length=20)
    promedio: Optional[Decimal] = Field(default=None, ge=0, le=20, max_digits=4, decimal_places=2)
    estado: Optional[StudentStatus] = None
    fecha_ingreso: Optional[date] = None
    fecha_egreso: Optional[date] = None
    direccion: Optional[str] = Field(default=None, max_length=255)

    @model_validator(mode="before")
    @classmethod
    def blank_to_none(cls, data):
        return blank_fields_to_none(data)

    @field_validator("nombre_completo", "matricula", "carrera", "anio_semestre")
    @classmethod
    def not_empty(cls, v: Optional[str]) -> Optional[str]:
        return strip_required(v)


class StudentResponse(BaseModel):
    id: int
    nombre_completo: str
    fecha_nacimiento: date
    email: str
    telefono: Optional[str]
    matricula: str
    carrera: str
    anio_semestre: str
    promedio: Optional[float]
    estado: str
    fecha_ingreso: date
    fecha_egreso: Optional[date]
    direccion: Optional[str]
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class StudentBrief(BaseModel):
    """Listage allégé (GET /estudiantes) pour les écrans d'inscription."""
    id: int
    nombre_completo: str
    matricula: str
    email: str

    model_config = {"from_attributes": True}
