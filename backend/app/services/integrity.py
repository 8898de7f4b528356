"""
Garde d'intégrité référentielle : bloque la suppression d'une ligne encore
référencée et renvoie un conflit structuré (code, nombre de dépendances, nom).

La vérification applicative est indicative ; les clés étrangères restent
l'arbitre final. Une violation détectée au commit est traduite dans le
même conflit que la vérification préalable.
"""

import logging

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.exceptions import DependencyConflictError

logger = logging.getLogger(__name__)


def count_dependents(db: Session, model, column, value) -> int:
    """Nombre de lignes de `model` dont la colonne `column` vaut `value`."""
    return db.execute(
        select(func.count())
        .select_from(model)
        .where(column == value)
    ).scalar() or 0


def ensure_no_dependents(
    db: Session,
    model,
    column,
    value,
    *,
    code: str,
    message: str,
    entity: str,
    dependent: str,
) -> None:
    """Lève DependencyConflictError si au moins une ligne dépend de `value`."""
    count = count_dependents(db, model, column, value)
    if count > 0:
        logger.info("Suppression bloquée (%s) : %s a %d %s liée(s)", code, entity, count, dependent)
        raise DependencyConflictError(message, code=code, count=count, entity=entity, dependent=dependent)


def delete_guarded(
    db: Session,
    instance,
    *,
    model,
    column,
    code: str,
    message: str,
    entity: str,
    dependent: str,
) -> None:
    """
    Supprime `instance` et valide la transaction.
    Si une dépendance est apparue depuis la vérification, la contrainte de clé
    étrangère rejette le commit : on annule et on renvoie un conflit.
    """
    instance_id = instance.id
    db.delete(instance)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        count = count_dependents(db, model, column, instance_id)
        logger.warning("Suppression rejetée par la base (%s) : %s", code, entity)
        raise DependencyConflictError(message, code=code, count=count, entity=entity, dependent=dependent)
