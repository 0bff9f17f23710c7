from app.schemas.validaciones import EsquemaBase, NombrePropio, Siglas, opcional
from app.utils.helpers import a_mayusculas, a_titulo

NORMALIZADORES = {"facultad": a_titulo, "siglas": a_mayusculas}


class FacultadCreate(EsquemaBase):
    normalizadores = NORMALIZADORES

    facultad: NombrePropio
    siglas: Siglas


class FacultadUpdate(EsquemaBase):
    normalizadores = NORMALIZADORES

    facultad: opcional(NombrePropio) = None
    siglas: opcional(Siglas) = None
