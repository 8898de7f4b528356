"""
Router d'authentification : inscription et connexion (routes publiques).
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.config import Settings, get_settings
from app.database import get_db
from app.schemas.auth import Credentials, TokenResponse
from app.services import auth_service

router = APIRouter(tags=["Authentification"])


@router.post("/register", response_model=TokenResponse, status_code=201, summary="Créer un compte")
def register(data: Credentials, db: Session = Depends(get_db), settings: Settings = Depends(get_settings)):
    """Enregistre un nouvel utilisateur et renvoie un jeton d'accès."""
    return auth_service.register(db, data, settings)


@router.post("/login", response_model=TokenResponse, summary="Se connecter")
def login(data: Credentials, db: Session = Depends(get_db), settings: Settings = Depends(get_settings)):
    """Vérifie les identifiants et renvoie un jeton d'accès."""
    return auth_service.authenticate(db, data, settings)
