from app.schemas.validaciones import Booleano, EsquemaBase, Fecha, IdPositivo, Motivo, opcional
from app.utils.helpers import recortar

NORMALIZADORES = {"motivo_cita": recortar}


class CitaCreate(EsquemaBase):
    normalizadores = NORMALIZADORES

    id_estudiante: IdPositivo
    fecha_cita: Fecha
    motivo_cita: opcional(Motivo) = None


class CitaUpdate(EsquemaBase):
    normalizadores = NORMALIZADORES

    id_estudiante: opcional(IdPositivo) = None
    fecha_cita: opcional(Fecha) = None
    motivo_cita: opcional(Motivo) = None
    pendiente: opcional(Booleano) = None
