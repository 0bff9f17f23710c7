from typing import Any, Callable, Dict, Mapping, Optional
from datetime import datetime


def format_datetime(dt: Optional[datetime]) -> Optional[str]:
    """Formatear datetime para respuestas JSON"""
    if dt:
        return dt.isoformat()
    return None


# Normalizadores de texto: puros y totales, cualquier valor que no sea str pasa sin cambios


def recortar(texto: Any) -> Any:
    if not isinstance(texto, str):
        return texto
    return texto.strip()


def a_minusculas(texto: Any) -> Any:
    """Correos y similares: minúsculas sin espacios en los extremos"""
    if not isinstance(texto, str):
        return texto
    return texto.strip().lower()


def a_mayusculas(texto: Any) -> Any:
    """Siglas y códigos"""
    if not isinstance(texto, str):
        return texto
    return texto.strip().upper()


def a_titulo(texto: Any) -> Any:
    """
    Nombres propios y lugares: primera letra de cada palabra en mayúscula,
    el resto en minúscula ("juan  PÉREZ" → "Juan  Pérez").
    """
    if not isinstance(texto, str):
        return texto
    palabras = texto.strip().lower().split(" ")
    return " ".join(palabra[:1].upper() + palabra[1:] for palabra in palabras)


def normalizar_cedula(texto: Any) -> Any:
    """Cédulas: sin espacios y en mayúsculas ("v- 1234" → "V-1234")"""
    if not isinstance(texto, str):
        return texto
    return "".join(texto.split()).upper()


def normalizar(
    datos: Mapping[str, Any], reglas: Mapping[str, Callable[[Any], Any]]
) -> Dict[str, Any]:
    """Aplicar a cada campo su normalizador; los campos sin regla se copian tal cual"""
    return {
        campo: reglas[campo](valor) if campo in reglas else valor
        for campo, valor in datos.items()
    }
