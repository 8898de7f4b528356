"""
Modèle SQLAlchemy pour les identifiants de connexion.
Indépendant des entités académiques : sert uniquement à l'authentification.
"""

from sqlalchemy import Column, DateTime, Integer, String, func

from app.database import Base


class AuthUser(Base):
    __tablename__ = "auth_users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    email = Column(String(100), unique=True, nullable=False)
    password_hash = Column(String(255), nullable=False)
    created_at = Column(DateTime, server_default=func.now())
