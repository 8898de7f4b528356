"""
Schémas Pydantic pour l'inscription et la connexion.
"""

from typing import Optional

from pydantic import BaseModel, EmailStr, field_validator


class Credentials(BaseModel):
    email: EmailStr
    password: str

    @field_validator("password")
    @classmethod
    def password_not_empty(cls, v: str) -> str:
        if not v:
            raise ValueError("Le mot de passe est obligatoire.")
        return v


class TokenResponse(BaseModel):
    token: str
    token_type: str = "bearer"


class CurrentUser(BaseModel):
    """Identité extraite d'un jeton valide."""
    id: Optional[int] = None
    email: str
