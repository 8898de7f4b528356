"""
Modèle SQLAlchemy pour la table estudiantes.
"""

from sqlalchemy import Column, Date, DateTime, Enum, Integer, Numeric, String, func

from app.database import Base

STUDENT_STATUSES = ("activo", "egresado", "suspendido")


class Student(Base):
    __tablename__ = "estudiantes"

    id = Column(Integer, primary_key=True, autoincrement=True)
    nombre_completo = Column(String(100), nullable=False)
    fecha_nacimiento = Column(Date, nullable=False)
    email = Column(String(100), unique=True, nullable=False)
    telefono = Column(String(20), nullable=True)
    matricula = Column(String(30), unique=True, nullable=False)
    carrera = Column(String(100), nullable=False)
    anio_semestre = Column(String(20), nullable=False)
    promedio = Column(Numeric(4, 2), nullable=True)  # 0 à 20
    estado = Column(Enum(*STUDENT_STATUSES, name="estado_estudiante"), nullable=False, default="activo")
    fecha_ingreso = Column(Date, nullable=False)
    fecha_egreso = Column(Date, nullable=True)
    direccion = Column(String(255), nullable=True)
    created_at = Column(DateTime, server_default=func.now())
