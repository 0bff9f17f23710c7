from app.schemas.validaciones import (
    EsquemaBase,
    Fecha,
    Hora,
    IdPositivo,
    Texto,
    TextoRequerido,
    opcional,
)
from app.utils.helpers import a_titulo, recortar

NORMALIZADORES = {
    "lugar_incidente": a_titulo,
    "descripcion_incidente": recortar,
    "acuerdos": recortar,
    "observaciones": recortar,
}


class IncidenciaCreate(EsquemaBase):
    normalizadores = NORMALIZADORES

    id_estudiante: IdPositivo
    hora_incidente: Hora
    fecha_incidente: Fecha
    lugar_incidente: TextoRequerido
    descripcion_incidente: opcional(Texto) = None
    acuerdos: opcional(Texto) = None
    observaciones: opcional(Texto) = None


class IncidenciaUpdate(EsquemaBase):
    normalizadores = NORMALIZADORES

    id_estudiante: opcional(IdPositivo) = None
    hora_incidente: opcional(Hora) = None
    fecha_incidente: opcional(Fecha) = None
    lugar_incidente: opcional(TextoRequerido) = None
    descripcion_incidente: opcional(Texto) = None
    acuerdos: opcional(Texto) = None
    observaciones: opcional(Texto) = None
