"""
Point d'entrée principal de l'API AulaAdmin.
Démarrage : uvicorn app.main:app --reload
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

import app.models  # noqa: F401 — enregistre tous les modèles dans Base.metadata avant les routers
from app.config import settings
from app.database import init_db
from app.exceptions import AppError, AuthError, DependencyConflictError
from app.routers import auth, enrollments, professors, students, subjects

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Cycle de vie de l'application : crée les tables manquantes au démarrage."""
    if settings.DB_CREATE_TABLES:
        init_db()
        logger.info("Schéma de base de données vérifié.")
    yield


app = FastAPI(
    title="AulaAdmin API",
    description="API d'administration des élèves, professeurs, matières et inscriptions",
    version="0.1.0",
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json",
    lifespan=lifespan,
)

# CORS — origines locales en développement (à restreindre en production).
app.add_middleware(
    CORSMiddleware,
    allow_origins=[],
    allow_origin_regex=settings.CORS_ORIGIN_REGEX,
    allow_credentials=False,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "PATCH"],
    allow_headers=["Content-Type", "Authorization", "Accept"],
)


# auth avant students : POST /register et /login ne doivent pas exiger de jeton
app.include_router(auth.router)
app.include_router(students.router)
app.include_router(enrollments.router)
app.include_router(professors.router)
app.include_router(subjects.router)


@app.exception_handler(DependencyConflictError)
async def dependency_conflict_handler(request: Request, exc: DependencyConflictError) -> JSONResponse:
    """Suppression bloquée : le client reçoit le code, le nombre et le nom concernés."""
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, AuthError) else None
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message}, headers=headers)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Corps ou paramètres invalides → 400 avec la liste des champs en cause."""
    fields = []
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ())]
        name = ".".join(loc[1:]) or ".".join(loc)
        if name not in fields:
            fields.append(name)
    return JSONResponse(
        status_code=400,
        content={"detail": "Champs manquants ou invalides.", "fields": fields},
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Intercepte toutes les exceptions non gérées pour garantir que la réponse 500
    passe bien par CORSMiddleware (qui injecte les headers CORS).
    Le détail reste dans les logs serveur, jamais dans la réponse.
    """
    logger.error("Exception non gérée : %s", exc, exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"detail": "Une erreur interne est survenue."},
    )


@app.get("/api/health", tags=["Santé"])
def health_check():
    """Vérifie que l'API est opérationnelle."""
    return {"status": "ok", "service": "AulaAdmin API", "version": "0.1.0"}
