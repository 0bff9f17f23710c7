import logging
from typing import Any, Dict, List

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

# Mensajes para los errores nativos de pydantic; los errores propios ya traen su mensaje
MENSAJES_VALIDACION = {
    "missing": "El campo es requerido",
    "int_parsing": "Debe ser un número entero",
    "int_type": "Debe ser un número entero",
    "int_from_float": "Debe ser un número entero",
    "greater_than_equal": "Debe ser un entero positivo",
    "string_type": "Debe ser una cadena de texto",
    "string_too_short": "No alcanza la longitud mínima permitida",
    "string_too_long": "Excede la longitud máxima permitida",
    "bool_parsing": "Debe ser un valor booleano",
    "bool_type": "Debe ser un valor booleano",
    "date_type": "Debe ser una fecha válida (YYYY-MM-DD)",
    "date_parsing": "Debe ser una fecha válida (YYYY-MM-DD)",
    "date_from_datetime_parsing": "Debe ser una fecha válida (YYYY-MM-DD)",
    "date_from_datetime_inexact": "Debe ser una fecha válida (YYYY-MM-DD)",
    "time_type": "Debe tener el formato HH:MM:SS",
    "time_parsing": "Debe tener el formato HH:MM:SS",
    "model_attributes_type": "El cuerpo de la solicitud debe ser un objeto JSON",
    "dict_type": "El cuerpo de la solicitud debe ser un objeto JSON",
    "json_invalid": "El cuerpo de la solicitud no es un JSON válido",
}


def formatear_errores(errores: List[Dict[str, Any]]) -> List[Dict[str, str]]:
    """Una entrada (field, message, location) por cada regla violada"""
    resultado = []
    for error in errores:
        loc = error.get("loc") or ("body",)
        location = str(loc[0])
        field = ".".join(str(parte) for parte in loc[1:]) or location
        message = MENSAJES_VALIDACION.get(error.get("type"), error.get("msg"))
        resultado.append({"field": field, "message": message, "location": location})
    return resultado


def registrar_manejadores(app: FastAPI):
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=400,
            content={"errors": formatear_errores(exc.errors())},
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception(f"❌ Error no controlado en {request.method} {request.url.path}")
        return JSONResponse(
            status_code=500,
            content={"error": "Error interno del servidor"},
        )
