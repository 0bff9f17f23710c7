from .base import BaseModel, RegistroMixin
from .discapacidad import Discapacidad
from .facultad import Facultad
from .carrera import Carrera
from .estudiante import Estudiante
from .representante import Representante
from .cita import Cita
from .incidencia import Incidencia
from .historial_medico import HistorialMedico
from .reporte_psicologico import ReportePsicologico
from .usuario import Usuario

__all__ = [
    "BaseModel",
    "RegistroMixin",
    "Discapacidad",
    "Facultad",
    "Carrera",
    "Estudiante",
    "Representante",
    "Cita",
    "Incidencia",
    "HistorialMedico",
    "ReportePsicologico",
    "Usuario",
]
