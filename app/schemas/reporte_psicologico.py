from app.schemas.validaciones import (
    EsquemaBase,
    Fecha,
    IdPositivo,
    Texto,
    TextoClinico,
    opcional,
)
from app.utils.helpers import a_titulo, recortar

NORMALIZADORES = {
    "nombre": a_titulo,
    "apellido": a_titulo,
    "lugar_nacimiento": a_titulo,
    "nivel_instruccion": recortar,
    "motivo_consulta": recortar,
    "sintesis_diagnostica": recortar,
    "recomendaciones": recortar,
}


class ReportePsicologicoCreate(EsquemaBase):
    normalizadores = NORMALIZADORES

    id_estudiante: IdPositivo
    nombre: opcional(Texto) = None
    apellido: opcional(Texto) = None
    lugar_nacimiento: opcional(Texto) = None
    fecha_nacimiento: opcional(Fecha) = None
    nivel_instruccion: opcional(Texto) = None
    motivo_consulta: opcional(TextoClinico) = None
    sintesis_diagnostica: opcional(TextoClinico) = None
    recomendaciones: opcional(TextoClinico) = None


class ReportePsicologicoUpdate(EsquemaBase):
    normalizadores = NORMALIZADORES

    id_estudiante: opcional(IdPositivo) = None
    nombre: opcional(Texto) = None
    apellido: opcional(Texto) = None
    lugar_nacimiento: opcional(Texto) = None
    fecha_nacimiento: opcional(Fecha) = None
    nivel_instruccion: opcional(Texto) = None
    motivo_consulta: opcional(TextoClinico) = None
    sintesis_diagnostica: opcional(TextoClinico) = None
    recomendaciones: opcional(TextoClinico) = None
