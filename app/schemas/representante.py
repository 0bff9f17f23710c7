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
    "nombre_repre": a_titulo,
    "parentesco": a_titulo,
    "cedula_repre": normalizar_cedula,
    "telefono_repre": recortar,
    "correo_repre": a_minusculas,
    "lugar_nacimiento": a_titulo,
    "direccion": recortar,
    "ocupacion": a_titulo,
    "lugar_trabajo": a_titulo,
    "estado": a_titulo,
    "municipio": a_titulo,
    "departamento": a_titulo,
    "estado_civil": a_titulo,
}


class RepresentanteCreate(EsquemaBase):
    normalizadores = NORMALIZADORES

    id_estudiante: IdPositivo
    nombre_repre: TextoRequerido
    parentesco: TextoRequerido
    cedula_repre: TextoRequerido
    telefono_repre: opcional(Texto) = None
    correo_repre: opcional(Correo) = None
    lugar_nacimiento: opcional(Texto) = None
    fecha_nacimiento: opcional(Fecha) = None
    direccion: opcional(Texto) = None
    ocupacion: opcional(Texto) = None
    lugar_trabajo: opcional(Texto) = None
    estado: opcional(Texto) = None
    municipio: opcional(Texto) = None
    departamento: opcional(Texto) = None
    estado_civil: opcional(Texto) = None


class RepresentanteUpdate(EsquemaBase):
    normalizadores = NORMALIZADORES

    id_estudiante: opcional(IdPositivo) = None
    nombre_repre: opcional(TextoRequerido) = None
    parentesco: opcional(TextoRequerido) = None
    cedula_repre: opcional(TextoRequerido) = None
    telefono_repre: opcional(Texto) = None
    correo_repre: opcional(Correo) = None
    lugar_nacimiento: opcional(Texto) = None
    fecha_nacimiento: opcional(Fecha) = None
    direccion: opcional(Texto) = None
    ocupacion: opcional(Texto) = None
    lugar_trabajo: opcional(Texto) = None
    estado: opcional(Texto) = None
    municipio: opcional(Texto) = None
    departamento: opcional(Texto) = None
    estado_civil: opcional(Texto) = None
