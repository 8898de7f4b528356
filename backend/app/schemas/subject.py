"""
Schémas Pydantic pour les matières.
"""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, Field, PositiveInt, field_validator, model_validator

from app.schemas.common import blank_fields_to_none, drop_blank_fields, strip_required


def _professor_ref(v: Any) -> Any:
    # 0, "" et null détachent la matière de son professeur
    if v in (0, "0"):
        return None
    return v


class SubjectCreate(BaseModel):
    nombre: str = Field(max_length=100)
    creditos: PositiveInt
    horas: PositiveInt
    profesor_id: Optional[PositiveInt] = None

    @model_validator(mode="before")
    @classmethod
    def drop_blank(cls, data):
        return drop_blank_fields(data)

    @field_validator("nombre")
    @classmethod
    def not_empty(cls, v: str) -> str:
        return strip_required(v)

    @field_validator("profesor_id", mode="before")
    @classmethod
    def professor_ref(cls, v: Any) -> Any:
        return _professor_ref(v)


class SubjectUpdate(BaseModel):
    nombre: Optional[str] = Field(default=None, max_length=100)
    creditos: Optional[PositiveInt] = None
    horas: Optional[PositiveInt] = None
    profesor_id: Optional[PositiveInt] = None

    @model_validator(mode="before")
    @classmethod
    def blank_to_none(cls, data):
        return blank_fields_to_none(data)

    @field_validator("profesor_id", mode="before")
    @classmethod
    def professor_ref(cls, v: Any) -> Any:
        return _professor_ref(v)


class SubjectResponse(BaseModel):
    """Une matière avec le nom et la cédula de son professeur (null si non assignée)."""
    id: int
    nombre: str
    creditos: int
    horas: int
    profesor_id: Optional[int]
    profesor_nombre: Optional[str] = None
    profesor_cedula: Optional[str] = None
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}
