from app.schemas.validaciones import EsquemaBase, NombreDiscapacidad
from app.utils.helpers import recortar


class DiscapacidadCreate(EsquemaBase):
    normalizadores = {"discapacidad": recortar}

    discapacidad: NombreDiscapacidad


class DiscapacidadUpdate(DiscapacidadCreate):
    """El nombre también es obligatorio al editar"""
