"""
Configuration de la connexion à la base de données.
Un pool de connexions borné est partagé par le processus ; chaque requête
emprunte une session et la rend à la fin, même en cas d'erreur.
"""

from sqlalchemy import create_engine, event
from sqlalchemy.pool import StaticPool
from sqlalchemy.orm import declarative_base
from sqlalchemy.orm import sessionmaker

from app.config import settings


def build_engine(url: str):
    """Crée le moteur SQLAlchemy ; les options de pool ne s'appliquent pas à SQLite."""
    if url.startswith("sqlite"):
        options = {"connect_args": {"check_same_thread": False}}
        if url in ("sqlite://", "sqlite:///:memory:"):
            # Base en mémoire : une seule connexion partagée, sinon chaque thread voit une base vide
            options["poolclass"] = StaticPool
        engine = create_engine(url, **options)

        # SQLite n'applique les clés étrangères que sur demande explicite
        @event.listens_for(engine, "connect")
        def _enable_foreign_keys(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

        return engine

    return create_engine(
        url,
        pool_size=settings.DB_POOL_SIZE,
        max_overflow=settings.DB_MAX_OVERFLOW,
        pool_timeout=settings.DB_POOL_TIMEOUT,
        pool_pre_ping=True,
    )


engine = build_engine(settings.DATABASE_URL)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def get_db():
    """Dépendance FastAPI — fournit une session BDD et la ferme après usage."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db() -> None:
    """Crée les tables manquantes (équivalent d'un CREATE TABLE IF NOT EXISTS)."""
    import app.models  # noqa: F401 — enregistre les tables dans Base.metadata
    Base.metadata.create_all(bind=engine)
