"""
Modèle SQLAlchemy pour les matières.
Une matière peut exister sans professeur ; la suppression d'un professeur
détache ses matières (ON DELETE SET NULL) au lieu de les supprimer.
"""

from sqlalchemy import CheckConstraint, Column, DateTime, ForeignKey, Integer, String, func
from sqlalchemy.orm import relationship

from app.database import Base


class Subject(Base):
    __tablename__ = "materias"
    __table_args__ = (
        CheckConstraint("creditos > 0", name="ck_materias_creditos_positive"),
        CheckConstraint("horas > 0", name="ck_materias_horas_positive"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    nombre = Column(String(100), nullable=False)
    creditos = Column(Integer, nullable=False)
    horas = Column(Integer, nullable=False)
    profesor_id = Column(Integer, ForeignKey("profesores.id", ondelete="SET NULL"), nullable=True)
    created_at = Column(DateTime, server_default=func.now())

    profesor = relationship("Professor", lazy="joined")

    @property
    def profesor_nombre(self):
        return self.profesor.nombres if self.profesor is not None else None

    @property
    def profesor_cedula(self):
        return self.profesor.cedula if self.profesor is not None else None
