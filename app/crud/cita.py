from sqlalchemy import func, select

from app.crud.base import CRUDBase
from app.models.cita import Cita
from app.models.estudiante import Estudiante


class CRUDCita(CRUDBase[Cita]):
    def _consulta(self):
        citas = Cita.__table__
        estudiantes = Estudiante.__table__
        nombre_completo = func.concat(estudiantes.c.nombres, " ", estudiantes.c.apellidos)
        return select(citas, nombre_completo.label("nombres")).select_from(
            citas.outerjoin(
                estudiantes, citas.c.id_estudiante == estudiantes.c.id_estudiante
            )
        )


cita = CRUDCita(
    Cita,
    insertar="insertar_cita",
    editar="editar_cita",
    eliminar="eliminar_cita",
    campos=("id_estudiante", "fecha_cita", "motivo_cita"),
    campos_editar=("id_estudiante", "fecha_cita", "motivo_cita", "pendiente"),
    orden=Cita.fecha_cita.desc(),
)
