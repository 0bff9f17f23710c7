from app.schemas.validaciones import (
    CodigoAlfanumerico,
    EsquemaBase,
    IdPositivo,
    Texto,
    opcional,
)
from app.utils.helpers import a_mayusculas, recortar

NORMALIZADORES = {
    "certificado_conapdis": a_mayusculas,
    "informe_medico": recortar,
    "tratamiento": recortar,
}


class HistorialMedicoCreate(EsquemaBase):
    normalizadores = NORMALIZADORES

    id_estudiante: IdPositivo
    certificado_conapdis: opcional(CodigoAlfanumerico) = None
    informe_medico: opcional(Texto) = None
    tratamiento: opcional(Texto) = None


class HistorialMedicoUpdate(EsquemaBase):
    normalizadores = NORMALIZADORES

    id_estudiante: opcional(IdPositivo) = None
    certificado_conapdis: opcional(CodigoAlfanumerico) = None
    informe_medico: opcional(Texto) = None
    tratamiento: opcional(Texto) = None
