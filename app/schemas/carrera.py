from app.schemas.validaciones import EsquemaBase, IdPositivo, TextoRequerido, opcional
from app.utils.helpers import recortar

NORMALIZADORES = {"carrera": recortar}


class CarreraCreate(EsquemaBase):
    normalizadores = NORMALIZADORES

    carrera: TextoRequerido
    id_facultad: IdPositivo


class CarreraUpdate(EsquemaBase):
    normalizadores = NORMALIZADORES

    carrera: opcional(TextoRequerido) = None
    id_facultad: opcional(IdPositivo) = None
