from typing import Annotated

from app.schemas.validaciones import (
    CedulaUsuario,
    EsquemaBase,
    NombrePropio,
    Password,
    opcional,
    uno_de,
)
from app.utils.helpers import a_titulo, normalizar_cedula

ROLES = ("administrador", "psicologo", "docente")

# Las cuentas creadas por registro público nacen con el rol de menor privilegio;
# solo un administrador lo cambia después
ROL_REGISTRO = "docente"

Rol = Annotated[str, uno_de(*ROLES)]

NORMALIZADORES = {
    "nombre": a_titulo,
    "apellido": a_titulo,
    "cedula_usuario": normalizar_cedula,
}


class UsuarioCreate(EsquemaBase):
    normalizadores = NORMALIZADORES

    nombre: NombrePropio
    apellido: NombrePropio
    cedula_usuario: CedulaUsuario
    password: Password


class UsuarioUpdate(EsquemaBase):
    normalizadores = NORMALIZADORES

    nombre: opcional(NombrePropio) = None
    apellido: opcional(NombrePropio) = None
    cedula_usuario: opcional(CedulaUsuario) = None
    password: opcional(Password) = None
    rol: opcional(Rol) = None
