from datetime import datetime, timezone
from typing import Any, Dict

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.crud.base import CRUDBase
from app.models.discapacidad import Discapacidad
from app.models.estudiante import Estudiante
from app.utils.helpers import format_datetime


class CRUDEstudiante(CRUDBase[Estudiante]):
    def _consulta(self):
        estudiantes = Estudiante.__table__
        discapacidades = Discapacidad.__table__
        return select(estudiantes, discapacidades.c.discapacidad).select_from(
            estudiantes.outerjoin(
                discapacidades,
                estudiantes.c.discapacidad_id == discapacidades.c.discapacidad_id,
            )
        )

    async def create(self, db: AsyncSession, *, obj_in: Dict[str, Any]) -> Dict[str, Any]:
        creado = await super().create(db, obj_in=obj_in)
        ahora = format_datetime(datetime.now(timezone.utc))
        creado.setdefault("fecha_registro", ahora)
        creado.setdefault("fecha_actualizacion", ahora)
        return creado


estudiante = CRUDEstudiante(
    Estudiante,
    insertar="insertar_estudiante",
    editar="editar_estudiante",
    eliminar="eliminar_estudiante",
    campos=(
        "nombres",
        "apellidos",
        "cedula",
        "telefono",
        "correo",
        "discapacidad_id",
        "fecha_nacimiento",
        "observaciones",
        "seguimiento",
        "direccion",
        "id_carrera",
    ),
    orden=Estudiante.id_estudiante,
)


async def enriquecer_estudiante(db: AsyncSession, fila: Dict[str, Any]) -> Dict[str, Any]:
    """
    Agrega las etiquetas de discapacidad, representante, carrera y facultad.

    Cada búsqueda depende de la clave foránea de la fila (o de la carrera
    encontrada, en el caso de la facultad); si la clave falta o no existe la
    fila relacionada, la etiqueta queda en None.
    """
    from app.crud.carrera import carrera
    from app.crud.discapacidad import discapacidad
    from app.crud.facultad import facultad
    from app.crud.representante import representante

    resultado = dict(fila)
    resultado["discapacidad"] = None
    resultado["representante"] = None
    resultado["carrera"] = None
    resultado["facultad"] = None

    if fila.get("discapacidad_id"):
        encontrada = await discapacidad.get(db, fila["discapacidad_id"])
        if encontrada:
            resultado["discapacidad"] = encontrada["discapacidad"]

    if fila.get("id_estudiante"):
        repre = await representante.get_by(db, id_estudiante=fila["id_estudiante"])
        if repre:
            resultado["representante"] = repre["nombre_repre"]

    if fila.get("id_carrera"):
        encontrada = await carrera.get(db, fila["id_carrera"])
        if encontrada:
            resultado["carrera"] = encontrada["carrera"]
            if encontrada.get("id_facultad"):
                fac = await facultad.get(db, encontrada["id_facultad"])
                if fac:
                    resultado["facultad"] = fac["facultad"]

    return resultado
