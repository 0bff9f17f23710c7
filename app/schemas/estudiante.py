from app.schemas.validaciones import (
    Correo,
    EsquemaBase,
    Fecha,
    IdPositivo,
    Texto,
    TextoRequerido,
    opcional,
)
from app.utils.helpers import a_minusculas, a_titulo, normalizar_cedula, recortar

NORMALIZADORES = {
    "nombres": a_titulo,
    "apellidos": a_titulo,
    "cedula": normalizar_cedula,
    "telefono": recortar,
    "correo": a_minusculas,
    "direccion": recortar,
    "observaciones": recortar,
    "seguimiento": recortar,
}


class EstudianteCreate(EsquemaBase):
    normalizadores = NORMALIZADORES

    nombres: TextoRequerido
    apellidos: TextoRequerido
    cedula: TextoRequerido
    telefono: opcional(Texto) = None
    correo: opcional(Correo) = None
    discapacidad_id: opcional(IdPositivo) = None
    fecha_nacimiento: opcional(Fecha) = None
    observaciones: opcional(Texto) = None
    seguimiento: opcional(Texto) = None
    direccion: opcional(Texto) = None
    id_carrera: opcional(IdPositivo) = None


class EstudianteUpdate(EsquemaBase):
    normalizadores = NORMALIZADORES

    nombres: opcional(TextoRequerido) = None
    apellidos: opcional(TextoRequerido) = None
    cedula: opcional(TextoRequerido) = None
    telefono: opcional(Texto) = None
    correo: opcional(Correo) = None
    discapacidad_id: opcional(IdPositivo) = None
    fecha_nacimiento: opcional(Fecha) = None
    observaciones: opcional(Texto) = None
    seguimiento: opcional(Texto) = None
    direccion: opcional(Texto) = None
    id_carrera: opcional(IdPositivo) = None
