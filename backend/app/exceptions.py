"""
Erreurs métier levées par les services.
Chaque classe porte le code HTTP vers lequel elle est traduite dans app.main.
"""

from typing import Optional


class AppError(Exception):
    """Base des erreurs métier."""
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidDataError(AppError):
    """Champs manquants ou invalides, ou mise à jour sans aucun champ."""
    status_code = 400


class NotFoundError(AppError):
    status_code = 404


class ConflictError(AppError):
    """Violation d'unicité ou inscription déjà existante."""
    status_code = 409


class DependencyConflictError(ConflictError):
    """
    Suppression refusée : des lignes dépendantes référencent encore la cible.
    Porte de quoi afficher un message précis côté client.
    """

    def __init__(
        self,
        message: str,
        *,
        code: str,
        count: int,
        entity: Optional[str] = None,
        dependent: Optional[str] = None,
    ):
        super().__init__(message)
        self.code = code
        self.count = count
        self.entity = entity
        self.dependent = dependent

    def to_dict(self) -> dict:
        return {
            "detail": self.message,
            "code": self.code,
            "count": self.count,
            "entity": self.entity,
            "dependent": self.dependent,
        }


class AuthError(AppError):
    """Jeton absent, invalide ou expiré, ou mot de passe incorrect."""
    status_code = 401
