"""
Modèle SQLAlchemy pour l'association élève ↔ matière.
Les clés étrangères sont en RESTRICT : elles servent de dernière barrière
si une inscription apparaît entre la vérification et la suppression.
"""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, UniqueConstraint, func

from app.database import Base


class Enrollment(Base):
    __tablename__ = "estudiante_materia"
    __table_args__ = (
        UniqueConstraint("estudiante_id", "materia_id", name="uq_estudiante_materia"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    estudiante_id = Column(Integer, ForeignKey("estudiantes.id", ondelete="RESTRICT"), nullable=False)
    materia_id = Column(Integer, ForeignKey("materias.id", ondelete="RESTRICT"), nullable=False)
    created_at = Column(DateTime, server_default=func.now())
