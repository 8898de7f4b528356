"""
Éléments partagés par les schémas Pydantic.
"""

from typing import Any, Optional

from pydantic import BaseModel


def drop_blank_fields(data: Any) -> Any:
    """Création : une chaîne vide équivaut à un champ non fourni."""
    if isinstance(data, dict):
        return {k: v for k, v in data.items() if not (isinstance(v, str) and not v.strip())}
    return data


def blank_fields_to_none(data: Any) -> Any:
    """Mise à jour partielle : une chaîne vide demande l'effacement explicite du champ."""
    if isinstance(data, dict):
        return {k: (None if isinstance(v, str) and not v.strip() else v) for k, v in data.items()}
    return data


def strip_required(v: Optional[str]) -> Optional[str]:
    if v is None:
        return v
    if not v.strip():
        raise ValueError("Le champ ne peut pas être vide.")
    return v.strip()


class DeleteResponse(BaseModel):
    """Accusé de suppression renvoyé par tous les DELETE."""
    ok: bool = True
    id: Optional[int] = None
