"""
Hash des mots de passe (bcrypt) et jetons d'accès JWT (python-jose).
Fournit aussi la dépendance FastAPI qui protège les routes.
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import bcrypt
from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt

from app.config import Settings, get_settings
from app.exceptions import AuthError
from app.schemas.auth import CurrentUser

# auto_error=False : l'absence de jeton doit donner 401, pas 403
bearer_scheme = HTTPBearer(auto_error=False)


def hash_password(password: str, rounds: int = 10) -> str:
    # bcrypt ignore tout au-delà de 72 octets
    password_bytes = password.encode("utf-8")[:72]
    return bcrypt.hashpw(password_bytes, bcrypt.gensalt(rounds=rounds)).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    password_bytes = plain_password.encode("utf-8")[:72]
    try:
        return bcrypt.checkpw(password_bytes, hashed_password.encode("utf-8"))
    except ValueError:
        # Hash mal formé en base
        return False


def create_access_token(
    claims: Dict[str, Any],
    settings: Settings,
    expires_delta: Optional[timedelta] = None,
) -> str:
    """Signe un jeton d'accès à durée limitée portant l'identité fournie."""
    to_encode = claims.copy()
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    expire = datetime.now(timezone.utc) + expires_delta
    to_encode.update({"exp": expire, "type": "access"})
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def decode_access_token(token: str, settings: Settings) -> Dict[str, Any]:
    """Vérifie signature, expiration et type. Lève AuthError sinon."""
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWTError:
        raise AuthError("Jeton invalide ou expiré.")

    if payload.get("type") != "access" or not payload.get("email"):
        raise AuthError("Jeton invalide.")
    return payload


def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    settings: Settings = Depends(get_settings),
) -> CurrentUser:
    """
    Dépendance FastAPI — valide le jeton Bearer de la requête.
    L'identité décodée est aussi attachée à request.state.user.
    """
    if credentials is None or not credentials.credentials:
        raise AuthError("Jeton manquant.")

    payload = decode_access_token(credentials.credentials, settings)
    user = CurrentUser(id=payload.get("id"), email=payload["email"])
    request.state.user = user
    return user
