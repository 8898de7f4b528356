"""
Modèle SQLAlchemy pour les professeurs.
"""

from sqlalchemy import Column, DateTime, Integer, String, func

from app.database import Base


class Professor(Base):
    __tablename__ = "profesores"

    id = Column(Integer, primary_key=True, autoincrement=True)
    nombres = Column(String(100), nullable=False)
    cedula = Column(String(10), unique=True, nullable=False)  # cédula équatorienne, 10 chiffres
    created_at = Column(DateTime, server_default=func.now())
