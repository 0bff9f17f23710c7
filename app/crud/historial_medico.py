from typing import Any, Dict

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.crud.base import CRUDBase
from app.models.estudiante import Estudiante
from app.models.historial_medico import HistorialMedico


class CRUDHistorialMedico(CRUDBase[HistorialMedico]):
    def _consulta(self):
        historial = HistorialMedico.__table__
        estudiantes = Estudiante.__table__
        return select(
            historial,
            estudiantes.c.nombres.label("nombre_estudiante"),
            estudiantes.c.apellidos.label("apellido_estudiante"),
            estudiantes.c.cedula.label("cedula_estudiante"),
        ).select_from(
            historial.outerjoin(
                estudiantes, historial.c.id_estudiante == estudiantes.c.id_estudiante
            )
        )


historial_medico = CRUDHistorialMedico(
    HistorialMedico,
    insertar="insertar_historial_medico",
    editar="editar_historial_medico",
    eliminar="eliminar_historial_medico",
    campos=("id_estudiante", "certificado_conapdis", "informe_medico", "tratamiento"),
    orden=HistorialMedico.id_historialmedico,
)


async def enriquecer_historial(db: AsyncSession, fila: Dict[str, Any]) -> Dict[str, Any]:
    """Agrega nombre, apellido y cédula del estudiante; None si no se encuentra"""
    from app.crud.estudiante import estudiante

    resultado = {
        **fila,
        "nombre_estudiante": None,
        "apellido_estudiante": None,
        "cedula_estudiante": None,
    }
    if fila.get("id_estudiante"):
        encontrado = await estudiante.get(db, fila["id_estudiante"])
        if encontrado:
            resultado["nombre_estudiante"] = encontrado["nombres"]
            resultado["apellido_estudiante"] = encontrado["apellidos"]
            resultado["cedula_estudiante"] = encontrado["cedula"]
    return resultado
