from sqlalchemy import select

from app.crud.base import CRUDBase
from app.models.carrera import Carrera
from app.models.facultad import Facultad


class CRUDCarrera(CRUDBase[Carrera]):
    def _consulta(self):
        carreras = Carrera.__table__
        facultades = Facultad.__table__
        return select(carreras, facultades.c.facultad).select_from(
            carreras.outerjoin(
                facultades, carreras.c.id_facultad == facultades.c.id_facultad
            )
        )


carrera = CRUDCarrera(
    Carrera,
    insertar="insertar_carrera",
    editar="editar_carrera",
    eliminar="eliminar_carrera",
    campos=("carrera", "id_facultad"),
    orden=Carrera.carrera.asc(),
)
