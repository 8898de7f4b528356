# Importe tous les modèles pour enregistrer leurs tables dans Base.metadata
# avant que SQLAlchemy tente de résoudre les clés étrangères inter-modèles.
# profesores doit précéder materias, et les deux doivent précéder estudiante_materia.

from app.models.user import AuthUser  # noqa: F401
from app.models.professor import Professor  # noqa: F401
from app.models.student import Student  # noqa: F401
from app.models.subject import Subject  # noqa: F401
from app.models.enrollment import Enrollment  # noqa: F401
