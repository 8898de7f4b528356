"""
Schémas Pydantic pour les professeurs.
"""

import re
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, field_validator, model_validator

from app.schemas.common import blank_fields_to_none, drop_blank_fields

NAME_PATTERN = re.compile(r"^[A-ZÁÉÍÓÚÑ][a-zA-ZÁÉÍÓÚÑáéíóúñ\s'.-]*$")
CEDULA_COEFFICIENTS = (2, 1, 2, 1, 2, 1, 2, 1, 2)


def is_valid_cedula(cedula: str) -> bool:
    """
    Vérifie une cédula équatorienne : 10 chiffres, province 01–24,
    troisième chiffre < 6 (personne physique) et chiffre de contrôle modulo 10.
    """
    if not re.fullmatch(r"\d{10}", cedula):
        return False
    province = int(cedula[:2])
    if province < 1 or province > 24:
        return False
    if int(cedula[2]) >= 6:
        return False

    total = 0
    for coef, digit in zip(CEDULA_COEFFICIENTS, cedula[:9]):
        value = coef * int(digit)
        if value >= 10:
            value -= 9
        total += value
    check = (10 - total % 10) % 10
    return check == int(cedula[9])


def _validate_nombres(v: str) -> str:
    v = v.strip()
    if not NAME_PATTERN.match(v):
        raise ValueError("Le nom doit commencer par une majuscule et ne contenir que des lettres.")
    return v


def _validate_cedula(v: str) -> str:
    v = v.strip()
    if not is_valid_cedula(v):
        raise ValueError("Cédula invalide.")
    return v


class ProfessorCreate(BaseModel):
    nombres: str
    cedula: str

    @model_validator(mode="before")
    @classmethod
    def drop_blank(cls, data):
        return drop_blank_fields(data)

    @field_validator("nombres")
    @classmethod
    def valid_nombres(cls, v: str) -> str:
        return _validate_nombres(v)

    @field_validator("cedula")
    @classmethod
    def valid_cedula(cls, v: str) -> str:
        return _validate_cedula(v)


class ProfessorUpdate(BaseModel):
    nombres: Optional[str] = None
    cedula: Optional[str] = None

    @model_validator(mode="before")
    @classmethod
    def blank_to_none(cls, data):
        return blank_fields_to_none(data)

    @field_validator("nombres")
    @classmethod
    def valid_nombres(cls, v: Optional[str]) -> Optional[str]:
        return _validate_nombres(v) if v is not None else v

    @field_validator("cedula")
    @classmethod
    def valid_cedula(cls, v: Optional[str]) -> Optional[str]:
        return _validate_cedula(v) if v is not None else v


class ProfessorResponse(BaseModel):
    id: int
    nombres: str
    cedula: str
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}
