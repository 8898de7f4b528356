"""
Service d'authentification : enregistrement des identifiants et émission
des jetons d'accès.
"""

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.config import Settings
from app.exceptions import AuthError, ConflictError, NotFoundError
from app.models.user import AuthUser
from app.schemas.auth import Credentials, TokenResponse
from app.security import create_access_token, hash_password, verify_password

logger = logging.getLogger(__name__)


def register(db: Session, data: Credentials, settings: Settings) -> TokenResponse:
    """Crée un compte et renvoie directement un jeton. Lève ConflictError si l'email existe."""
    existing = db.execute(select(AuthUser.id).where(AuthUser.email == data.email)).scalar()
    if existing is not None:
        raise ConflictError("Cet utilisateur est déjà enregistré.")

    user = AuthUser(
        email=data.email,
        password_hash=hash_password(data.password, rounds=settings.BCRYPT_ROUNDS),
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise ConflictError("Cet utilisateur est déjà enregistré.")
    db.refresh(user)

    logger.info("Compte %s créé", user.email)
    return TokenResponse(token=create_access_token({"id": user.id, "email": user.email}, settings))


def authenticate(db: Session, data: Credentials, settings: Settings) -> TokenResponse:
    """
    Vérifie les identifiants.
    Email inconnu → NotFoundError ; mot de passe faux → AuthError.
    """
    user = db.execute(select(AuthUser).where(AuthUser.email == data.email)).scalar()
    if user is None:
        raise NotFoundError("Utilisateur introuvable.")

    if not verify_password(data.password, user.password_hash):
        logger.warning("Échec de connexion pour %s", data.email)
        raise AuthError("Mot de passe incorrect.")

    return TokenResponse(token=create_access_token({"id": user.id, "email": user.email}, settings))
