"""
Reglas de validación reutilizables.

Cada regla es un tipo ``Annotated`` con nombre propio; los esquemas de cada
recurso las combinan campo por campo. Pydantic reúne todas las violaciones
de una solicitud en lugar de detenerse en la primera.

Un campo declarado con ``opcional(regla)`` omite la regla cuando el valor
falta, es ``null`` o es una cadena vacía.
"""

import re
from datetime import date, time
from typing import Annotated, Any, Callable, ClassVar, Dict, Optional

from pydantic import AfterValidator, BaseModel, BeforeValidator, Field
from pydantic_core import PydanticCustomError

from app.utils.helpers import normalizar


def _vacio_a_none(valor: Any) -> Any:
    if isinstance(valor, str) and not valor.strip():
        return None
    return valor


def _no_vacio(valor: str) -> str:
    if not valor.strip():
        raise PydanticCustomError("texto_vacio", "El campo no puede estar vacío")
    return valor


def patron(regex: str, mensaje: str) -> AfterValidator:
    compilado = re.compile(regex)

    def validar(valor: str) -> str:
        if not compilado.match(valor):
            raise PydanticCustomError("formato_invalido", mensaje)
        return valor

    return AfterValidator(validar)


def uno_de(*opciones: str) -> AfterValidator:
    def validar(valor: str) -> str:
        if valor not in opciones:
            raise PydanticCustomError(
                "opcion_invalida",
                "Debe ser uno de: {opciones}",
                {"opciones": ", ".join(opciones)},
            )
        return valor

    return AfterValidator(validar)


def opcional(regla: Any) -> Any:
    return Annotated[Optional[regla], BeforeValidator(_vacio_a_none)]


# Reglas básicas
Texto = str
TextoRequerido = Annotated[str, AfterValidator(_no_vacio)]
IdPositivo = Annotated[int, Field(ge=1)]
Fecha = date
Hora = time
Booleano = bool

# Reglas de formato
SOLO_LETRAS = r"^(?!.*\s{2})[a-zA-ZáéíóúÁÉÍÓÚüÜñÑ\s]+$"
TEXTO_CLINICO = r"^[a-zA-Z0-9\s.,áéíóúÁÉÍÓÚüÜñÑ]+$"

NombrePropio = Annotated[
    str,
    AfterValidator(_no_vacio),
    patron(SOLO_LETRAS, "Solo se pueden colocar letras y espacios (sin espacios dobles)"),
]
Correo = Annotated[
    str,
    patron(r"^\s*[^@\s]+@[^@\s]+\.[^@\s]+\s*$", "Debe ser un correo electrónico válido"),
]
Siglas = Annotated[
    str,
    AfterValidator(_no_vacio),
    patron(r"^[A-Za-z0-9]+$", "Las siglas solo pueden contener letras y números"),
]
CedulaUsuario = Annotated[
    str,
    Field(min_length=5, max_length=15),
    patron(r"^[VEve]-\d{7,15}$", "La cédula debe tener el formato V-XXXXXXXX o E-XXXXXXXX"),
]
CodigoAlfanumerico = Annotated[
    str,
    patron(r"^[a-zA-Z0-9]*$", "Solo puede contener letras y números"),
]
TextoClinico = Annotated[
    str,
    patron(
        TEXTO_CLINICO,
        "Contiene caracteres no permitidos. Solo se permiten letras, números, espacios, puntos y comas",
    ),
]
NombreDiscapacidad = Annotated[
    str,
    AfterValidator(_no_vacio),
    patron(r"^[a-zA-Z0-9\s()áéíóúÁÉÍÓÚüÜñÑ]+$", "El nombre contiene caracteres no permitidos"),
]
Motivo = Annotated[str, Field(max_length=255)]
Password = Annotated[str, Field(min_length=6, max_length=15)]


class EsquemaBase(BaseModel):
    """Esquema de entrada con normalización de texto por campo"""

    normalizadores: ClassVar[Dict[str, Callable[[Any], Any]]] = {}

    def datos_normalizados(self, *, exclude_unset: bool = False) -> Dict[str, Any]:
        """Datos listos para persistir; con exclude_unset solo los campos enviados"""
        return normalizar(self.model_dump(exclude_unset=exclude_unset), self.normalizadores)
